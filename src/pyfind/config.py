"""Traversal configuration shared by the command line and the expression builder."""

from dataclasses import dataclass
from typing import Optional

from pyfind.file_system_tree.permission_action import PermissionAction


@dataclass
class Config:
    """Settings that control how directory trees are walked.

    Global command-line options populate the initial values; a few expression
    tokens (``-depth``, ``-maxdepth``, ``-mindepth``) then update them while the
    expression is compiled, which is why instances are mutable.

    Attributes:
        depth_first: Yield a directory's contents before the directory itself.
        max_depth: Do not descend below this depth (the roots are depth 0).
        min_depth: Do not evaluate entries shallower than this depth.
        follow_symlinks: Follow symbolic links during traversal.
        permission_action: How permission errors during traversal are handled.

    Example:
        >>> config = Config()
        >>> config.depth_first
        False
        >>> config.max_depth is None
        True
    """

    depth_first: bool = False
    max_depth: Optional[int] = None
    min_depth: int = 0
    follow_symlinks: bool = False
    permission_action: PermissionAction = PermissionAction.WARN
