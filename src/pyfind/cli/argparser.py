"""Command-line argument parsing for pyfind.

A pyfind command line has three parts: global options, starting points and the
expression. Global options and starting points are parsed with argparse; the
expression is handed to the matcher builder untouched because find expressions
are order-sensitive and use single-dash multi-character flags.
"""

import argparse
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple, Type, Union

from pyfind import __version__
from pyfind.exclusion_rules.base_rules import BaseExclusionRules
from pyfind.matchers.builder import supported_flags

# Tokens that start an expression even though they don't begin with a dash
EXPRESSION_START_TOKENS = ("(", ")", "!", ",")


def is_expression_start(token: str) -> bool:
    """Return whether ``token`` begins the expression part of a command line.

    Example:
        >>> is_expression_start("-name")
        True
        >>> is_expression_start("--exclude")
        False
        >>> is_expression_start("src")
        False
    """
    if token in EXPRESSION_START_TOKENS:
        return True
    return token.startswith("-") and not token.startswith("--") and token != "-"


def split_arguments(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Split a command line into the argparse part and the expression.

    The expression starts at the first token that is a parenthesis, ``!``, ``,``,
    or begins with a single dash. Global options always use two dashes, so they
    are never mistaken for expression flags.

    Args:
        argv: Command-line arguments, without the program name.

    Returns:
        The options and starting points, and the expression tokens.

    Example:
        >>> split_arguments(["--ignore", "*.pyc", "src", "-name", "*.py", "-o", "-empty"])
        (['--ignore', '*.pyc', 'src'], ['-name', '*.py', '-o', '-empty'])
    """
    for index, token in enumerate(argv):
        if is_expression_start(token):
            return list(argv[:index]), list(argv[index:])
    return list(argv), []


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create a custom action class for handling exclusion rules.

    The returned action updates ``exclusion_rules`` as arguments are processed, so
    that --exclude files and --ignore patterns take effect in the exact order they
    appear on the command line.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Adds --exclude files and --ignore patterns to the exclusion rules."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string == "--exclude":
                try:
                    exclusion_rules.load_rules(values if isinstance(values, (str, os.PathLike)) else Path(str(values)))
                except FileNotFoundError as e:
                    parser.error(str(e))
            else:
                exclusion_rules.add_rule(str(values))

            items = getattr(namespace, self.dest, None) or []
            items.append(values)
            setattr(namespace, self.dest, items)

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the parser for global options and starting points.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with pyfind's options.
    """
    description = """
    pyfind: search directory trees with find-style expressions.

    The expression is made of tests (-name, -iname, -path, -ipath, -type, -empty,
    -true, -false), actions (-print, -print0, -exec, -execdir) and operators, from
    tightest to loosest binding:

      ( EXPR )          grouping
      ! EXPR, -not EXPR negation of the next test or group
      EXPR EXPR         conjunction (also -a, -and); stops at the first false
      EXPR -o EXPR      disjunction (also -or); stops at the first true
      EXPR , EXPR       list; both sides are always evaluated

    If the expression contains no action, -print is applied to matching entries.
    The expression options -depth, -maxdepth N and -mindepth N control the walk.
    """

    epilog = f"""
    Expression flags: {" ".join(supported_flags())}

    Examples:
      # Print every entry below the current directory
      pyfind

      # Python sources that are not tests
      pyfind src -name "*.py" -not -name "test_*"

      # Files ending in .tmp or .bak, listing directories' contents first
      pyfind -depth -type f ( -name "*.tmp" -o -name "*.bak" )

      # Print directories and run a command on files, for the same walk
      pyfind . -type d -print , -type f -exec wc -l {{}} ;

      # Skip everything matched by .gitignore plus an extra pattern
      pyfind --exclude .gitignore --ignore "node_modules/" . -name "*.js"
    """

    parser = argparse.ArgumentParser(
        prog="pyfind",
        usage="%(prog)s [--options] [PATH ...] [EXPRESSION]",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )

    parser.add_argument("--help", action="help", help="Show this help message and exit")
    parser.add_argument("--version", action="version", version=f"pyfind {__version__}", help="Show the version and exit")

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "paths",
        nargs="*",
        default=["."],
        metavar="PATH",
        help="Starting points of the search (default: the current directory).",
    )
    parser.add_argument(
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help=(
            "Path to an exclusion file (e.g., .gitignore). Matching entries are pruned before the "
            "expression sees them (can be specified multiple times)."
        ),
    )
    parser.add_argument(
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Individual gitignore-style pattern to prune, applied in order with --exclude files "
            "(can be specified multiple times)."
        ),
    )
    parser.add_argument(
        "--follow-symlinks",
        action="store_true",
        help="Follow symbolic links during traversal. By default links are reported, not entered.",
    )
    parser.add_argument(
        "--permission-action",
        choices=["ignore", "warn", "fail"],
        default="warn",
        help="How to handle unreadable directories (default: warn).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debugging information to stderr.",
    )

    return parser
