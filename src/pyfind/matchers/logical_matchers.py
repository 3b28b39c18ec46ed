"""Matchers that combine other matchers with boolean logic.

This module also holds the trivial always-true and always-false matchers. The
structure is tied to the precedence rules used when parsing an expression:
``-foo -o -bar -baz`` means ``-foo -o ( -bar -baz )``, not ``( -foo -o -bar ) -baz``.
An OrMatcher therefore holds AndMatcher branches, and a ListMatcher holds
OrMatcher statements, each always having an "open" last element that new
conditions are appended to while the expression is being compiled.
"""

from typing import List

from pyfind.exceptions import BinaryOperatorError
from pyfind.file_system_tree.file_system_node import FileSystemNode

from .base_matcher import Matcher


class AndMatcher(Matcher):
    """Matches an entry only if ALL of the contained matchers match it.

    Sub-matchers are evaluated in the order they were added, which is the order
    they appeared in the expression. Evaluation stops at the first sub-matcher
    that returns False, so the side effects of later sub-matchers don't happen.

    Example:
        >>> matcher = AndMatcher()
        >>> matcher.new_and_condition(TrueMatcher())
        >>> matcher.new_and_condition(FalseMatcher())
        >>> matcher.matches(None)
        False
    """

    def __init__(self) -> None:
        self.submatchers: List[Matcher] = []

    def new_and_condition(self, matcher: Matcher) -> None:
        """Append a matcher that entries must also satisfy."""
        self.submatchers.append(matcher)

    def is_empty(self) -> bool:
        return not self.submatchers

    def matches(self, entry: FileSystemNode) -> bool:
        """Return True if every sub-matcher matches, stopping at the first one that doesn't.

        An AndMatcher without sub-matchers matches everything.
        """
        return all(matcher.matches(entry) for matcher in self.submatchers)

    def has_side_effects(self) -> bool:
        return any(matcher.has_side_effects() for matcher in self.submatchers)

    def __repr__(self) -> str:
        return f"AndMatcher({self.submatchers!r})"


class OrMatcher(Matcher):
    """Matches an entry if ANY of the contained conjunctions matches it.

    Branches are evaluated in order and evaluation stops at the first branch that
    matches, so the side effects of later branches don't happen. There is always at
    least one branch; the last one is open and receives new conditions.

    Example:
        >>> matcher = OrMatcher()
        >>> matcher.new_and_condition(FalseMatcher())
        >>> matcher.new_or_condition("-o")
        >>> matcher.new_and_condition(TrueMatcher())
        >>> matcher.matches(None)
        True
    """

    def __init__(self) -> None:
        self.submatchers: List[AndMatcher] = [AndMatcher()]

    def new_and_condition(self, matcher: Matcher) -> None:
        """Append a matcher to the currently open branch."""
        self.submatchers[-1].new_and_condition(matcher)

    def new_or_condition(self, operator: str) -> None:
        """Close the current branch and open a new one.

        Args:
            operator: The operator token, used in the error message.

        Raises:
            BinaryOperatorError: If the current branch is empty, i.e. the operator
                has nothing before it.
        """
        if self.submatchers[-1].is_empty():
            raise BinaryOperatorError(operator)
        self.submatchers.append(AndMatcher())

    def is_open_branch_empty(self) -> bool:
        return self.submatchers[-1].is_empty()

    def matches(self, entry: FileSystemNode) -> bool:
        """Return True as soon as one branch matches, False if none does."""
        return any(branch.matches(entry) for branch in self.submatchers)

    def has_side_effects(self) -> bool:
        return any(branch.has_side_effects() for branch in self.submatchers)

    def __repr__(self) -> str:
        return f"OrMatcher({self.submatchers!r})"


class ListMatcher(Matcher):
    """Evaluates every contained statement regardless of the earlier results.

    This implements the comma operator. In contrast to OrMatcher and AndMatcher,
    there is no short-circuiting: all statements are evaluated for every entry, in
    order, so that the side effects of each of them happen. The result is that of
    the last statement.

    Example:
        >>> matcher = ListMatcher()
        >>> matcher.new_and_condition(TrueMatcher())
        >>> matcher.new_list_condition()
        >>> matcher.new_and_condition(FalseMatcher())
        >>> matcher.matches(None)
        False
    """

    def __init__(self) -> None:
        self.submatchers: List[OrMatcher] = [OrMatcher()]

    def new_and_condition(self, matcher: Matcher) -> None:
        """Append a matcher to the open branch of the open statement."""
        self.submatchers[-1].new_and_condition(matcher)

    def new_or_condition(self, operator: str) -> None:
        """Open a new branch in the current statement.

        Raises:
            BinaryOperatorError: If the current branch is empty.
        """
        self.submatchers[-1].new_or_condition(operator)

    def new_list_condition(self) -> None:
        """Close the current statement and open a new one.

        Raises:
            BinaryOperatorError: If the open branch of the current statement is empty.
        """
        if self.is_open_branch_empty():
            raise BinaryOperatorError(",")
        self.submatchers.append(OrMatcher())

    def is_open_branch_empty(self) -> bool:
        """Return whether nothing has been added since the last operator (or ever)."""
        return self.submatchers[-1].is_open_branch_empty()

    def matches(self, entry: FileSystemNode) -> bool:
        """Evaluate all statements and return the result of the last one."""
        result = False
        for statement in self.submatchers:
            result = statement.matches(entry)
        return result

    def has_side_effects(self) -> bool:
        return any(statement.has_side_effects() for statement in self.submatchers)

    def __repr__(self) -> str:
        return f"ListMatcher({self.submatchers!r})"


class NotMatcher(Matcher):
    """Inverts the result of another matcher.

    Negation doesn't hide side effects: if the wrapped matcher has any, so does
    the NotMatcher.
    """

    def __init__(self, submatcher: Matcher) -> None:
        self.submatcher = submatcher

    def matches(self, entry: FileSystemNode) -> bool:
        return not self.submatcher.matches(entry)

    def has_side_effects(self) -> bool:
        return self.submatcher.has_side_effects()

    def __repr__(self) -> str:
        return f"NotMatcher({self.submatcher!r})"


class TrueMatcher(Matcher):
    """A matcher that always matches (``-true``)."""

    def matches(self, entry: FileSystemNode) -> bool:
        return True

    def __repr__(self) -> str:
        return "TrueMatcher()"


class FalseMatcher(Matcher):
    """A matcher that never matches (``-false``)."""

    def matches(self, entry: FileSystemNode) -> bool:
        return False

    def __repr__(self) -> str:
        return "FalseMatcher()"
