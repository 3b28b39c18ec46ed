"""Test configuration and fixtures for pyfind."""

import pytest

from pyfind.file_system_tree.file_system_node import FileSystemNode
from pyfind.types import FileType


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def simple_tree(tmp_path):
    """Create the small directory tree most walker and CLI tests search.

    simple/
    ├── abbbc
    └── subdir/
        └── ABBBC
    """
    root = tmp_path / "simple"
    (root / "subdir").mkdir(parents=True)
    (root / "abbbc").write_text("abbbc\n")
    (root / "subdir" / "ABBBC").write_text("")
    return root


@pytest.fixture
def abbbc():
    """A file entry as the walker would produce it for ./test_data/simple/abbbc."""
    return FileSystemNode("abbbc", file_path="./test_data/simple/abbbc", file_type=FileType.FILE)
