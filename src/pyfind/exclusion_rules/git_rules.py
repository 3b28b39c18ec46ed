"""Exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from pyfind.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules using .gitignore pattern syntax.

    Patterns are matched with the pathspec library exactly the way Git matches
    them, including directory patterns (``build/``), negations (``!keep.log``),
    ``**`` and comments. Patterns from files and individual patterns are kept in
    the order they were added, so a later negation can re-include an entry
    excluded by an earlier pattern.

    Attributes:
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> import tempfile
        >>> import os
        >>> with tempfile.NamedTemporaryFile(mode='w', delete=False) as f:
        ...     _ = f.write('node_modules/\\n*.log\\n')
        >>> rules = GitIgnoreExclusionRules(f.name)
        >>> rules.exclude("node_modules/")
        True
        >>> rules.exclude("logs/app.log")
        True
        >>> rules.add_rule("!keep.log")
        >>> rules.exclude("keep.log")
        False
        >>> os.unlink(f.name)
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize GitIgnoreExclusionRules with patterns from the given files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._patterns: List[GitWildMatchPattern] = []
        self.spec = PathSpec(self._patterns)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        """Check if a path matches the loaded patterns.

        Args:
            path: Path relative to the starting point, using forward slashes.

        Returns:
            bool: True if the last pattern that matches the path is not a negation.
        """
        return self.spec.match_file(path)

    def has_rules(self) -> bool:
        return bool(self._patterns)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns of one or more .gitignore-style files.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                lines = f.read().splitlines()

            self._extend(PathSpec.from_lines(GitWildMatchPattern, lines).patterns)

    def add_rule(self, rule: str) -> None:
        """Append a single .gitignore pattern such as ``*.pyc`` or ``!important.txt``."""
        self._extend([GitWildMatchPattern(rule)])

    def _extend(self, patterns: Sequence[GitWildMatchPattern]) -> None:
        self._patterns.extend(patterns)
        self.spec = PathSpec(self._patterns)
