"""Device and inode pair used to recognise directories already being walked."""

from pathlib import Path
from typing import NamedTuple, Optional


class FileIdentifier(NamedTuple):
    """Uniquely identifies a file or directory by its device and inode numbers.

    Used for symlink loop detection when symbolic links are followed: a directory
    whose identifier is already on the current descent path is not entered again.

    Example:
        >>> FileIdentifier(1, 42) == FileIdentifier(1, 42)
        True
    """

    device_id: int
    inode_number: int

    @classmethod
    def for_path(cls, path: Path) -> Optional["FileIdentifier"]:
        """Return the identifier of the file ``path`` resolves to, or None if it cannot be stat'ed."""
        try:
            stat_info = path.stat()
        except OSError:
            return None
        return cls(stat_info.st_dev, stat_info.st_ino)
