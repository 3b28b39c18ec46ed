"""Node representation for the filesystem entries handed to matchers."""

import os
from typing import Any, Optional

from anytree import Node

from pyfind.types import FileType


class FileSystemNode(Node):  # type: ignore
    """A single filesystem entry encountered during traversal.

    Extends anytree.Node so that each entry keeps a link to the directory it was
    found in. The walker attaches children as it descends, so ``depth`` (inherited
    from anytree) is the entry's distance from the starting point.

    Attributes:
        name (str): The name of the file or directory (just the basename).
        file_path (str): The path as find reports it: the starting point exactly as it
            was given, joined with the names of every entry below it.
        file_type (FileType): The kind of file this entry is.
        parent (Optional[FileSystemNode]): The directory node this entry was found in.

    Example:
        >>> root = FileSystemNode(".", file_path=".", file_type=FileType.DIRECTORY)
        >>> child = FileSystemNode("abbbc", parent=root, file_type=FileType.FILE)
        >>> child.file_path
        './abbbc'
        >>> child.depth
        1
        >>> root.is_dir
        True
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        file_path: Optional[str] = None,
        file_type: FileType = FileType.FILE,
        **kwargs: Any,
    ) -> None:
        """Initialize a FileSystemNode.

        Args:
            name: The name of the file or directory.
            parent: The directory node containing this entry. Defaults to None.
            file_path: Full path of the entry. Derived from the parent's path when omitted.
            file_type: The kind of file. Defaults to a regular file.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        super().__init__(name, parent, **kwargs)
        if file_path is None:
            file_path = os.path.join(parent.file_path, name) if parent is not None else name
        self.file_path = file_path
        self.file_type = file_type

    @property
    def is_dir(self) -> bool:
        return self.file_type is FileType.DIRECTORY

    @property
    def is_symlink(self) -> bool:
        return self.file_type is FileType.SYMLINK
