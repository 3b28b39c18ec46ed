from enum import Enum
from os import PathLike
from typing import Protocol, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class OutputSink(Protocol):
    """Anything that printing actions can write text to, in entry order."""

    def write(self, data: str) -> None: ...


class FileType(Enum):
    """Enumeration of file types encountered during traversal.

    The values are the single-letter codes accepted by the ``-type`` test.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
        SYMLINK: Symbolic link
        BLOCK_DEVICE: Block special file
        CHARACTER_DEVICE: Character special file
        FIFO: Named pipe
        SOCKET: Unix domain socket
    """

    FILE = "f"
    DIRECTORY = "d"
    SYMLINK = "l"
    BLOCK_DEVICE = "b"
    CHARACTER_DEVICE = "c"
    FIFO = "p"
    SOCKET = "s"
