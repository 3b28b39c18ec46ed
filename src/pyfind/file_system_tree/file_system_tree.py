"""Streaming traversal of a directory tree with configurable exclusion rules.

This module provides the FileSystemTree class, which walks a directory structure
and yields one FileSystemNode per entry in the order find evaluates them, with
support for excluding files and directories based on gitignore-style rules.
"""

import logging
import os
import stat
from pathlib import Path
from typing import Iterator, Optional, Set

from pyfind.config import Config
from pyfind.exclusion_rules.base_rules import BaseExclusionRules
from pyfind.file_system_tree.file_identifier import FileIdentifier
from pyfind.file_system_tree.file_system_node import FileSystemNode
from pyfind.file_system_tree.permission_action import PermissionAction
from pyfind.types import FileType, PathType

logger = logging.getLogger(__name__)


class FileSystemTree:
    """A lazily walked directory structure rooted at a single starting point.

    Entries are produced one at a time by walk(). Each entry is a FileSystemNode
    attached to the node of the directory it was found in, so matchers can inspect
    its depth and ancestry. Entries stay attached after the walk moves on, so an
    entry kept by the caller still reports the right depth and parent.

    Traversal Order:
        By default a directory is produced before its contents (pre-order). When
        ``config.depth_first`` is set, the contents come first and the directory
        last. Directory contents are always visited sorted by name.

    Symbolic Link Behavior:
        By default symbolic links are reported as symlinks and never entered. When
        ``config.follow_symlinks`` is True, links are resolved and directories they
        point to are walked; loop detection prevents infinite recursion.

    Permission Handling:
        Unreadable directories are handled according to ``config.permission_action``:
        - IGNORE: Silently skip the directory's contents
        - WARN: Log a warning, count the error and skip the contents
        - RAISE: Immediately raise PermissionError

    Attributes:
        root_path (str): The starting point exactly as it was given.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for pruning entries.
        config (Config): Traversal settings.
        error_count (int): Number of errors reported so far under WARN.

    Example:
        >>> tree = FileSystemTree(".")  # doctest: +SKIP
        >>> [node.file_path for node in tree.walk()]  # doctest: +SKIP
        ['.', './file1.txt', './subdir', './subdir/file2.txt']
    """

    def __init__(
        self,
        root_path: PathType,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        config: Optional[Config] = None,
    ) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: The starting point. Reported paths are built from it verbatim.
            exclusion_rules: Rules for excluding files and directories, matched
                against paths relative to the starting point. Defaults to None.
            config: Traversal settings. Defaults to a fresh Config.
        """
        self.root_path = os.fspath(root_path)
        self.exclusion_rules = exclusion_rules
        self.config = config if config is not None else Config()
        self.error_count = 0

    def walk(self) -> Iterator[FileSystemNode]:
        """Yield every entry of the tree in traversal order.

        Each entry is attached to its directory's node before it is yielded, and the
        whole tree below the starting point is reachable from the first entry once
        the walk is complete.

        Raises:
            FileNotFoundError: If the starting point doesn't exist.
            PermissionError: If access is denied and the permission action is RAISE.
        """
        path = Path(self.root_path)
        if not os.path.lexists(path):
            raise FileNotFoundError(f"No such file or directory: '{self.root_path}'")

        file_type = self._get_file_type(path)
        if file_type is None:
            return

        name = os.path.basename(self.root_path.rstrip(os.sep)) or self.root_path
        root = FileSystemNode(name, file_path=self.root_path, file_type=file_type)
        yield from self._walk_node(root, path, "", set())

    def _walk_node(
        self,
        node: FileSystemNode,
        path: Path,
        relative_path: str,
        active_directories: Set[FileIdentifier],
    ) -> Iterator[FileSystemNode]:
        if not self.config.depth_first and node.depth >= self.config.min_depth:
            yield node

        if node.is_dir and (self.config.max_depth is None or node.depth < self.config.max_depth):
            yield from self._walk_children(node, path, relative_path, active_directories)

        if self.config.depth_first and node.depth >= self.config.min_depth:
            yield node

    def _walk_children(
        self,
        node: FileSystemNode,
        path: Path,
        relative_path: str,
        active_directories: Set[FileIdentifier],
    ) -> Iterator[FileSystemNode]:
        file_id = FileIdentifier.for_path(path) if self.config.follow_symlinks else None
        if file_id is not None and file_id in active_directories:
            self._report_error(f"File system loop detected; '{node.file_path}' has already been visited")
            return

        try:
            children = sorted(os.listdir(path))
        except PermissionError as e:
            self._handle_permission_error(node.file_path, e)
            return
        except OSError as e:
            self._report_error(f"Error reading '{node.file_path}': {e.strerror}")
            return

        if file_id is not None:
            active_directories.add(file_id)
        try:
            for child in children:
                child_path = path / child
                child_relative_path = f"{relative_path}/{child}" if relative_path else child

                file_type = self._get_file_type(child_path)
                if file_type is None or self._is_excluded(child_relative_path, file_type):
                    continue

                child_node = FileSystemNode(child, parent=node, file_type=file_type)
                yield from self._walk_node(child_node, child_path, child_relative_path, active_directories)
        finally:
            if file_id is not None:
                active_directories.discard(file_id)

    def _is_excluded(self, relative_path: str, file_type: FileType) -> bool:
        if self.exclusion_rules is None:
            return False
        if self.exclusion_rules.exclude(relative_path):
            return True
        # Directory patterns such as "build/" only match paths with a trailing slash
        return file_type is FileType.DIRECTORY and self.exclusion_rules.exclude(relative_path + "/")

    def _get_file_type(self, path: Path) -> Optional[FileType]:
        """Determine the type of a file, or None if it cannot be examined.

        Dangling or looping symbolic links are reported as symlinks even when links
        are followed.
        """
        try:
            mode = os.stat(path, follow_symlinks=self.config.follow_symlinks).st_mode
        except PermissionError as e:
            self._handle_permission_error(str(path), e)
            return None
        except OSError:
            try:
                mode = os.lstat(path).st_mode
            except OSError as e:
                self._report_error(f"Error accessing '{path}': {e.strerror}")
                return None

        if stat.S_ISDIR(mode):
            return FileType.DIRECTORY
        if stat.S_ISLNK(mode):
            return FileType.SYMLINK
        if stat.S_ISBLK(mode):
            return FileType.BLOCK_DEVICE
        if stat.S_ISCHR(mode):
            return FileType.CHARACTER_DEVICE
        if stat.S_ISFIFO(mode):
            return FileType.FIFO
        if stat.S_ISSOCK(mode):
            return FileType.SOCKET
        return FileType.FILE

    def _handle_permission_error(self, path: str, error: PermissionError) -> None:
        if self.config.permission_action == PermissionAction.RAISE:
            raise PermissionError(f"Access denied to '{path}': {error.strerror}") from error
        if self.config.permission_action == PermissionAction.WARN:
            self._report_error(f"Access denied to '{path}': {error.strerror}")

    def _report_error(self, message: str) -> None:
        self.error_count += 1
        logger.warning(message)
