"""Translation of find expression tokens into a tree of matchers.

The expression grammar, loosest binding first::

    expression := statement ( "," statement )*
    statement  := conjunction ( ( "-o" | "-or" ) conjunction )*
    conjunction:= term ( [ "-a" | "-and" ] term )*
    term       := ( "!" | "-not" ) term | "(" expression ")" | test | action

Tokens are consumed left to right by a single loop that appends into the open
branch of the open statement of a ListMatcher; an opening parenthesis recurses and
the resulting subtree is appended like any other test. Argparse can't be used for
this: the order of the arguments matters and multi-character flags start with a
single dash.
"""

import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from pyfind.config import Config
from pyfind.exceptions import (
    BinaryOperatorError,
    InvalidArgumentError,
    MissingArgumentError,
    MissingExpressionError,
    UnbalancedParenthesesError,
    UnrecognizedFlagError,
)
from pyfind.types import OutputSink

from .base_matcher import Matcher
from .empty_matcher import EmptyMatcher
from .exec_matcher import SingleExecMatcher
from .logical_matchers import AndMatcher, FalseMatcher, ListMatcher, NotMatcher, TrueMatcher
from .name_matcher import CaselessNameMatcher, NameMatcher, PathMatcher
from .printer import Printer
from .type_matcher import TypeMatcher

logger = logging.getLogger(__name__)

# A leaf factory receives the remaining tokens, starting with its own flag, and
# returns the matcher it built together with the number of tokens it consumed.
LeafFactory = Callable[[Sequence[str], OutputSink], Tuple[Matcher, int]]

# A config option receives the remaining tokens and returns how many it consumed.
ConfigOption = Callable[[Sequence[str], Config], int]


def _require_argument(args: Sequence[str]) -> str:
    if len(args) < 2:
        raise MissingArgumentError(args[0])
    return args[1]


def _require_depth(args: Sequence[str]) -> int:
    value = _require_argument(args)
    if not (value.isascii() and value.isdigit()):
        raise InvalidArgumentError(f"Expected a positive decimal integer argument to {args[0]}, but got '{value}'")
    return int(value)


def _build_exec(args: Sequence[str], output: OutputSink) -> Tuple[Matcher, int]:
    """Build -exec/-execdir, which take every token up to a terminating ';'."""
    try:
        end = list(args).index(";", 1)
    except ValueError:
        raise MissingArgumentError(args[0]) from None
    if end < 2:
        raise MissingArgumentError(args[0])

    matcher = SingleExecMatcher(args[1], args[2:end], exec_in_parent_dir=args[0] == "-execdir", output=output)
    return matcher, end + 1


LEAF_FACTORIES: Dict[str, LeafFactory] = {
    "-true": lambda args, output: (TrueMatcher(), 1),
    "-false": lambda args, output: (FalseMatcher(), 1),
    "-print": lambda args, output: (Printer(output), 1),
    "-print0": lambda args, output: (Printer(output, terminator="\0"), 1),
    "-empty": lambda args, output: (EmptyMatcher(), 1),
    "-name": lambda args, output: (NameMatcher(_require_argument(args)), 2),
    "-iname": lambda args, output: (CaselessNameMatcher(_require_argument(args)), 2),
    "-path": lambda args, output: (PathMatcher(_require_argument(args)), 2),
    "-ipath": lambda args, output: (PathMatcher(_require_argument(args), case_sensitive=False), 2),
    "-type": lambda args, output: (TypeMatcher(_require_argument(args)), 2),
    "-exec": _build_exec,
    "-execdir": _build_exec,
}


def _set_depth_first(args: Sequence[str], config: Config) -> int:
    config.depth_first = True
    return 1


def _set_max_depth(args: Sequence[str], config: Config) -> int:
    config.max_depth = _require_depth(args)
    return 2


def _set_min_depth(args: Sequence[str], config: Config) -> int:
    config.min_depth = _require_depth(args)
    return 2


CONFIG_OPTIONS: Dict[str, ConfigOption] = {
    "-d": _set_depth_first,
    "-depth": _set_depth_first,
    "-maxdepth": _set_max_depth,
    "-mindepth": _set_min_depth,
}


def build_top_level_matcher(args: Sequence[str], config: Config, output: OutputSink) -> Matcher:
    """Compile a complete expression into the matcher evaluated for every entry.

    If nothing in the expression has side effects, the result is the expression
    followed by an implicit ``-print``, so that matching entries are reported.
    Otherwise the expression's own actions are trusted to produce the output.

    Args:
        args: The expression tokens.
        config: Traversal settings, updated by ``-depth``, ``-maxdepth`` and ``-mindepth``.
        output: The sink that printing actions write to.

    Returns:
        The root matcher.

    Raises:
        ExpressionError: If the expression is malformed. Nothing has been evaluated
            at that point.

    Example:
        >>> import io
        >>> from pyfind.file_system_tree.file_system_node import FileSystemNode
        >>> output = io.StringIO()
        >>> matcher = build_top_level_matcher(["-true", "-o", "-false"], Config(), output)
        >>> matcher.matches(FileSystemNode("abbbc", file_path="./abbbc"))
        True
        >>> output.getvalue()
        './abbbc\\n'
    """
    _, top_level_matcher = build_matcher_tree(args, config, output)

    if not top_level_matcher.has_side_effects():
        logger.debug("Expression has no actions, printing matching entries")
        new_and_matcher = AndMatcher()
        new_and_matcher.new_and_condition(top_level_matcher)
        new_and_matcher.new_and_condition(Printer(output))
        return new_and_matcher

    return top_level_matcher


def _are_more_expressions(args: Sequence[str], index: int) -> bool:
    return index < len(args) - 1 and args[index + 1] != ")"


def build_matcher_tree(
    args: Sequence[str],
    config: Config,
    output: OutputSink,
    arg_index: int = 0,
    expecting_bracket: bool = False,
) -> Tuple[int, ListMatcher]:
    """Compile tokens starting at ``arg_index`` into a ListMatcher.

    Calls itself recursively for each opening parenthesis. When called for a
    parenthesized group (``expecting_bracket``), compilation stops at the matching
    closing parenthesis.

    Args:
        args: The expression tokens.
        config: Traversal settings updated by global options in the expression.
        output: The sink that printing actions write to.
        arg_index: Index of the first token to compile.
        expecting_bracket: Whether this level was entered through ``(``.

    Returns:
        The index where compilation stopped (the closing parenthesis for a group,
        otherwise the number of tokens) and the compiled matcher.

    Raises:
        ExpressionError: If the expression is malformed.
    """
    top_level_matcher = ListMatcher()

    i = arg_index
    invert_next_matcher = False
    # The last non-option argument seen, for warning about misplaced global options
    previous_argument: Optional[str] = "(" if expecting_bracket else None
    while i < len(args):
        arg = args[i]
        submatcher: Optional[Matcher] = None

        if arg in ("-not", "!"):
            if not _are_more_expressions(args, i):
                raise MissingExpressionError(arg)
            invert_next_matcher = True
        elif arg in ("-or", "-o"):
            if not _are_more_expressions(args, i):
                raise MissingExpressionError(arg)
            top_level_matcher.new_or_condition(arg)
        elif arg in ("-and", "-a"):
            if not _are_more_expressions(args, i):
                raise MissingExpressionError(arg)
            # Conjunction is implicit; only the left-hand side needs checking
            if top_level_matcher.is_open_branch_empty():
                raise BinaryOperatorError(arg)
        elif arg == ",":
            if not _are_more_expressions(args, i):
                raise MissingExpressionError(arg)
            top_level_matcher.new_list_condition()
        elif arg == "(":
            i, submatcher = build_matcher_tree(args, config, output, i + 1, True)
        elif arg == ")":
            if not expecting_bracket:
                raise UnbalancedParenthesesError.too_many_closing()
            return i, top_level_matcher
        elif arg in CONFIG_OPTIONS:
            if previous_argument is not None:
                logger.warning(
                    "you have specified the global option %s after the argument %s, but global options "
                    "are not positional, i.e., %s affects tests specified before it as well as those "
                    "specified after it.",
                    arg,
                    previous_argument,
                    arg,
                )
            i += CONFIG_OPTIONS[arg](args[i:], config) - 1
        elif arg in LEAF_FACTORIES:
            submatcher, consumed = LEAF_FACTORIES[arg](args[i:], output)
            i += consumed - 1
        else:
            raise UnrecognizedFlagError(arg)

        if submatcher is not None:
            previous_argument = arg
            if invert_next_matcher:
                submatcher = NotMatcher(submatcher)
                invert_next_matcher = False
            top_level_matcher.new_and_condition(submatcher)
        i += 1

    if expecting_bracket:
        raise UnbalancedParenthesesError.missing_closing()

    return i, top_level_matcher


def supported_flags() -> List[str]:
    """Return every test, action and option flag the builder understands, sorted."""
    return sorted(set(LEAF_FACTORIES) | set(CONFIG_OPTIONS))
