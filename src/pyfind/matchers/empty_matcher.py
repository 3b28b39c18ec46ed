"""The -empty test."""

import os

from pyfind.file_system_tree.file_system_node import FileSystemNode
from pyfind.types import FileType

from .base_matcher import Matcher


class EmptyMatcher(Matcher):
    """Matches empty regular files and directories without any entries.

    Entries that cannot be read (a directory without read permission, a file that
    vanished since it was listed) do not match.
    """

    def matches(self, entry: FileSystemNode) -> bool:
        try:
            if entry.file_type is FileType.DIRECTORY:
                with os.scandir(entry.file_path) as it:
                    return next(it, None) is None
            if entry.file_type is FileType.FILE:
                return os.stat(entry.file_path).st_size == 0
        except OSError:
            return False
        return False

    def __repr__(self) -> str:
        return "EmptyMatcher()"
