"""Unit tests for the -exec and -execdir actions.

The command used is the running Python interpreter with a small script that
records its working directory and arguments, so no external programs are needed.
"""

import os
import sys
from unittest.mock import Mock, patch

import pytest

from pyfind.file_system_tree.file_system_node import FileSystemNode
from pyfind.matchers.exec_matcher import SingleExecMatcher
from pyfind.types import FileType

RECORDER = """
import os, sys
args = sys.argv[2:]
with open(sys.argv[1], "w") as f:
    f.write("cwd=" + os.getcwd() + "\\n")
    f.write("args=" + repr(args) + "\\n")
sys.exit(1 if "--exit_with_failure" in args else 0)
"""


@pytest.fixture
def entry(simple_tree, monkeypatch):
    """The abbbc entry, with the current directory set to the tree's parent."""
    monkeypatch.chdir(simple_tree.parent)
    return FileSystemNode("abbbc", file_path="simple/abbbc", file_type=FileType.FILE)


@pytest.fixture
def record_file(tmp_path):
    return tmp_path / "record.txt"


def test_matching_executes_code(entry, record_file):
    matcher = SingleExecMatcher(sys.executable, ["-c", RECORDER, str(record_file), "abc", "{}", "xyz"])

    assert matcher.matches(entry)
    assert record_file.read_text() == f"cwd={os.getcwd()}\nargs=['abc', 'simple/abbbc', 'xyz']\n"


def test_matching_executes_code_in_files_directory(entry, record_file):
    matcher = SingleExecMatcher(
        sys.executable, ["-c", RECORDER, str(record_file), "abc", "{}", "xyz"], exec_in_parent_dir=True
    )

    assert matcher.matches(entry)
    expected_cwd = os.path.join(os.getcwd(), "simple")
    assert record_file.read_text() == f"cwd={expected_cwd}\nargs=['abc', './abbbc', 'xyz']\n"


def test_matching_fails_if_executable_fails(entry, record_file):
    matcher = SingleExecMatcher(
        sys.executable, ["-c", RECORDER, str(record_file), "--exit_with_failure", "abc", "{}", "xyz"], True
    )

    assert not matcher.matches(entry)
    assert "args=['--exit_with_failure', 'abc', './abbbc', 'xyz']" in record_file.read_text()


def test_placeholder_inside_argument(entry, record_file):
    matcher = SingleExecMatcher(sys.executable, ["-c", RECORDER, str(record_file), "--file={}.bak"])

    assert matcher.matches(entry)
    assert "args=['--file=simple/abbbc.bak']" in record_file.read_text()


def test_missing_executable(entry, caplog):
    matcher = SingleExecMatcher("/nonexistent/definitely-not-a-command", ["{}"])

    assert not matcher.matches(entry)
    assert "Failed to run '/nonexistent/definitely-not-a-command'" in caplog.text


def test_output_flushed_before_running(entry):
    output = Mock()
    matcher = SingleExecMatcher("true", [], output=output)

    with patch("pyfind.matchers.exec_matcher.subprocess.run") as mock_run:
        mock_run.return_value.returncode = 0
        assert matcher.matches(entry)

    output.flush.assert_called_once_with()
    mock_run.assert_called_once_with(["true"], cwd=None, check=False)


def test_root_entry_in_execdir(record_file, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    root = FileSystemNode(".", file_path=".", file_type=FileType.DIRECTORY)
    matcher = SingleExecMatcher(sys.executable, ["-c", RECORDER, str(record_file), "{}"], exec_in_parent_dir=True)

    assert matcher.matches(root)
    assert "args=['./.']" in record_file.read_text()


def test_has_side_effects():
    assert SingleExecMatcher("true", []).has_side_effects()
