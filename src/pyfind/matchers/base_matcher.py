from abc import ABC, abstractmethod

from pyfind.file_system_tree.file_system_node import FileSystemNode


class Matcher(ABC):
    """
    Abstract base class for everything that can appear in a find expression.

    To a first order approximation, find consists of building a tree of Matcher
    objects and then walking a directory tree, passing each entry to the root of
    that tree. Tests (``-name``, ``-type``), actions (``-print``, ``-exec``) and the
    operators combining them are all matchers.

    Matchers hold no state about the entries they have seen: ``matches`` can be
    called any number of times, once per entry, and any state changes live in
    external collaborators such as the output sink.

    Example:
        >>> from pyfind.types import FileType
        >>> class NameIsDot(Matcher):
        ...     def matches(self, entry):
        ...         return entry.name == "."
        >>> root = FileSystemNode(".", file_type=FileType.DIRECTORY)
        >>> NameIsDot().matches(root)
        True
        >>> NameIsDot().has_side_effects()
        False
    """

    @abstractmethod
    def matches(self, entry: FileSystemNode) -> bool:
        """
        Return whether the given entry satisfies this matcher's predicate.

        Actions perform their side effect here (writing to the output sink,
        running a command), in the order the expression dictates.

        Args:
            entry (FileSystemNode): The filesystem entry being evaluated.

        Returns:
            bool: True if the entry matches.
        """
        pass

    def has_side_effects(self) -> bool:
        """
        Return whether calling ``matches`` could have an externally visible effect.

        When no matcher in the whole expression has side effects, a ``-print`` is
        added so that matching entries are still reported. Composite matchers
        answer by asking their children; this query itself never has side effects.
        """
        return False
