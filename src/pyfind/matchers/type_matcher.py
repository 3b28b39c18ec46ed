"""The -type test."""

from pyfind.exceptions import InvalidArgumentError
from pyfind.file_system_tree.file_system_node import FileSystemNode
from pyfind.types import FileType

from .base_matcher import Matcher


class TypeMatcher(Matcher):
    """Matches entries of one file type.

    The type is given as the single-letter code used by find: ``f`` (regular file),
    ``d`` (directory), ``l`` (symbolic link), ``b`` (block device), ``c`` (character
    device), ``p`` (named pipe) or ``s`` (socket).

    Raises:
        InvalidArgumentError: If the type code is not one of the above.

    Example:
        >>> entry = FileSystemNode("subdir", file_type=FileType.DIRECTORY)
        >>> TypeMatcher("d").matches(entry)
        True
        >>> TypeMatcher("f").matches(entry)
        False
        >>> TypeMatcher("x")
        Traceback (most recent call last):
            ...
        pyfind.exceptions.InvalidArgumentError: Unknown argument to -type: x
    """

    def __init__(self, type_code: str) -> None:
        try:
            self.file_type = FileType(type_code)
        except ValueError:
            raise InvalidArgumentError(f"Unknown argument to -type: {type_code}") from None

    def matches(self, entry: FileSystemNode) -> bool:
        return entry.file_type is self.file_type

    def __repr__(self) -> str:
        return f"TypeMatcher({self.file_type.value!r})"
