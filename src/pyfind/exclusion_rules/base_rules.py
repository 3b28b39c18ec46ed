from abc import ABC, abstractmethod
from typing import Sequence, Union

from pyfind.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class for rules that prune entries from a traversal.

    Exclusion happens in the walker, before the find expression is evaluated: an
    excluded entry is never passed to any matcher, and an excluded directory is not
    descended into. This is different from a ``-not -name ...`` test, which still
    visits everything below the directory.

    Example:
        >>> from pyfind.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule('*.pyc')
        >>> rules.exclude('pkg/module.pyc')
        True
        >>> rules.exclude('pkg/module.py')
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be pruned from the traversal.

        Args:
            path (str): The entry's path relative to the starting point, using forward
                slashes. Directories are also checked with a trailing slash.

        Returns:
            bool: True if the path should be excluded, False if it should be visited.
        """
        pass

    def has_rules(self) -> bool:
        """Return whether any rule has been configured. Rule sets without state always have rules."""
        return True

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
