"""Unit tests for the tests and printing actions."""

import io
import os

import pytest

from pyfind.exceptions import InvalidArgumentError
from pyfind.file_system_tree.file_system_node import FileSystemNode
from pyfind.matchers.empty_matcher import EmptyMatcher
from pyfind.matchers.name_matcher import CaselessNameMatcher, NameMatcher, PathMatcher
from pyfind.matchers.printer import Printer
from pyfind.matchers.type_matcher import TypeMatcher
from pyfind.types import FileType


def entry_for(path, file_type=FileType.FILE):
    path = str(path)
    return FileSystemNode(os.path.basename(path), file_path=path, file_type=file_type)


class TestPrinter:
    def test_prints(self, abbbc):
        output = io.StringIO()
        matcher = Printer(output)

        assert matcher.matches(abbbc)
        assert output.getvalue() == "./test_data/simple/abbbc\n"

    def test_prints_with_terminator(self, abbbc):
        output = io.StringIO()
        assert Printer(output, terminator="\0").matches(abbbc)
        assert output.getvalue() == "./test_data/simple/abbbc\0"

    def test_has_side_effects(self):
        assert Printer(io.StringIO()).has_side_effects()

    def test_shared_output_keeps_order(self, abbbc):
        output = io.StringIO()
        first = Printer(output)
        second = Printer(output, terminator="\0")
        other = entry_for("./other")

        first.matches(abbbc)
        second.matches(other)
        first.matches(other)
        assert output.getvalue() == "./test_data/simple/abbbc\n./other\0./other\n"


class TestNameMatcher:
    @pytest.mark.parametrize(
        "pattern, expected",
        [("abbbc", True), ("a*c", True), ("a?bbc", True), ("[ab]bbbc", True), ("*.txt", False), ("ABBBC", False)],
    )
    def test_matches(self, abbbc, pattern, expected):
        assert NameMatcher(pattern).matches(abbbc) is expected

    def test_matches_basename_only(self, abbbc):
        assert not NameMatcher("simple*").matches(abbbc)

    def test_caseless(self):
        upper = entry_for("./test_data/simple/subdir/ABBBC")
        assert CaselessNameMatcher("a*c").matches(upper)
        assert CaselessNameMatcher("A*C").matches(entry_for("./abbbc"))
        assert not CaselessNameMatcher("x*").matches(upper)

    def test_no_side_effects(self):
        assert not NameMatcher("*").has_side_effects()
        assert not CaselessNameMatcher("*").has_side_effects()


class TestPathMatcher:
    def test_star_crosses_slashes(self, abbbc):
        assert PathMatcher("./*/abbbc").matches(abbbc)
        assert PathMatcher("*simple*").matches(abbbc)

    def test_case_sensitivity(self, abbbc):
        assert not PathMatcher("*/SIMPLE/*").matches(abbbc)
        assert PathMatcher("*/SIMPLE/*", case_sensitive=False).matches(abbbc)


class TestTypeMatcher:
    @pytest.mark.parametrize("file_type", list(FileType))
    def test_each_type(self, file_type):
        entry = entry_for("./x", file_type)
        for other in FileType:
            assert TypeMatcher(other.value).matches(entry) is (other is file_type)

    @pytest.mark.parametrize("argument", ["x", "fd", "", "F"])
    def test_invalid_type(self, argument):
        with pytest.raises(InvalidArgumentError, match=f"Unknown argument to -type: {argument}"):
            TypeMatcher(argument)


class TestEmptyMatcher:
    def test_empty_file(self, tmp_path):
        (tmp_path / "empty").touch()
        (tmp_path / "full").write_text("content")

        assert EmptyMatcher().matches(entry_for(tmp_path / "empty"))
        assert not EmptyMatcher().matches(entry_for(tmp_path / "full"))

    def test_empty_directory(self, tmp_path):
        (tmp_path / "empty_dir").mkdir()
        (tmp_path / "full_dir").mkdir()
        (tmp_path / "full_dir" / "file").touch()

        assert EmptyMatcher().matches(entry_for(tmp_path / "empty_dir", FileType.DIRECTORY))
        assert not EmptyMatcher().matches(entry_for(tmp_path / "full_dir", FileType.DIRECTORY))

    def test_missing_entry(self, tmp_path):
        assert not EmptyMatcher().matches(entry_for(tmp_path / "gone"))

    def test_other_types_never_empty(self, tmp_path):
        assert not EmptyMatcher().matches(entry_for(tmp_path, FileType.SYMLINK))
