"""The -print and -print0 actions."""

from pyfind.file_system_tree.file_system_node import FileSystemNode
from pyfind.types import OutputSink

from .base_matcher import Matcher


class Printer(Matcher):
    """Writes the entry's path to the output sink and always matches.

    Every printer in an expression shares the same sink, so output appears in the
    order entries are walked and, within an entry, in expression order.

    Attributes:
        output (OutputSink): Where paths are written.
        terminator (str): Written after each path; a newline for ``-print`` and
            a NUL character for ``-print0``.

    Example:
        >>> import io
        >>> from pyfind.types import FileType
        >>> output = io.StringIO()
        >>> entry = FileSystemNode("abbbc", file_path="./simple/abbbc", file_type=FileType.FILE)
        >>> Printer(output).matches(entry)
        True
        >>> output.getvalue()
        './simple/abbbc\\n'
    """

    def __init__(self, output: OutputSink, terminator: str = "\n") -> None:
        self.output = output
        self.terminator = terminator

    def matches(self, entry: FileSystemNode) -> bool:
        self.output.write(f"{entry.file_path}{self.terminator}")
        return True

    def has_side_effects(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Printer(terminator={self.terminator!r})"
