"""Tests that compare an entry's name or path against a shell pattern."""

import fnmatch

from pyfind.file_system_tree.file_system_node import FileSystemNode

from .base_matcher import Matcher


class NameMatcher(Matcher):
    """Matches entries whose basename matches a shell pattern (``-name``).

    Wildcards follow fnmatch rules: ``*``, ``?`` and ``[...]`` character classes.
    Matching is case sensitive on every platform.

    Example:
        >>> from pyfind.types import FileType
        >>> entry = FileSystemNode("abbbc", file_type=FileType.FILE)
        >>> NameMatcher("a*c").matches(entry)
        True
        >>> NameMatcher("A*C").matches(entry)
        False
    """

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern

    def matches(self, entry: FileSystemNode) -> bool:
        return fnmatch.fnmatchcase(entry.name, self.pattern)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.pattern!r})"


class CaselessNameMatcher(NameMatcher):
    """Like NameMatcher, but ignores case (``-iname``)."""

    def __init__(self, pattern: str) -> None:
        super().__init__(pattern.lower())

    def matches(self, entry: FileSystemNode) -> bool:
        return fnmatch.fnmatchcase(entry.name.lower(), self.pattern)


class PathMatcher(Matcher):
    """Matches entries whose whole path matches a shell pattern (``-path``, ``-ipath``).

    Unlike NameMatcher, the pattern is compared against the path as it would be
    printed, and ``*`` also matches ``/``.

    Example:
        >>> from pyfind.types import FileType
        >>> entry = FileSystemNode("b.py", file_path="./src/a/b.py", file_type=FileType.FILE)
        >>> PathMatcher("./src/*.py").matches(entry)
        True
        >>> PathMatcher("./SRC/*", case_sensitive=False).matches(entry)
        True
    """

    def __init__(self, pattern: str, case_sensitive: bool = True) -> None:
        self.case_sensitive = case_sensitive
        self.pattern = pattern if case_sensitive else pattern.lower()

    def matches(self, entry: FileSystemNode) -> bool:
        path = entry.file_path if self.case_sensitive else entry.file_path.lower()
        return fnmatch.fnmatchcase(path, self.pattern)

    def __repr__(self) -> str:
        return f"PathMatcher({self.pattern!r}, case_sensitive={self.case_sensitive})"
