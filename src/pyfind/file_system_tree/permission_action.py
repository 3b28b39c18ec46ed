"""What the walker does with directories it is not allowed to read."""

from enum import Enum


class PermissionAction(str, Enum):
    """Policy for unreadable entries found while walking.

    Values:
        IGNORE: Skip the contents without a word
        WARN: Log a warning, count it against the exit status and keep walking (default)
        RAISE: Stop the walk with a PermissionError

    Example:
        >>> PermissionAction.from_option("fail")
        <PermissionAction.RAISE: 'raise'>
    """

    IGNORE = "ignore"
    WARN = "warn"
    RAISE = "raise"

    @classmethod
    def from_option(cls, choice: str) -> "PermissionAction":
        """Map a ``--permission-action`` choice to its action. ``fail`` is the CLI spelling of RAISE."""
        return cls.RAISE if choice == "fail" else cls(choice)
