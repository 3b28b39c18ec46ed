"""Matchers: the tests, actions and operators a find expression is compiled into."""

from .base_matcher import Matcher
from .builder import build_matcher_tree, build_top_level_matcher
from .empty_matcher import EmptyMatcher
from .exec_matcher import SingleExecMatcher
from .logical_matchers import AndMatcher, FalseMatcher, ListMatcher, NotMatcher, OrMatcher, TrueMatcher
from .name_matcher import CaselessNameMatcher, NameMatcher, PathMatcher
from .printer import Printer
from .type_matcher import TypeMatcher

__all__ = [
    "AndMatcher",
    "CaselessNameMatcher",
    "EmptyMatcher",
    "FalseMatcher",
    "ListMatcher",
    "Matcher",
    "NameMatcher",
    "NotMatcher",
    "OrMatcher",
    "PathMatcher",
    "Printer",
    "SingleExecMatcher",
    "TrueMatcher",
    "TypeMatcher",
    "build_matcher_tree",
    "build_top_level_matcher",
]
