"""Command-line interface for pyfind.

This module ties the pieces together: it splits the command line, compiles the
expression into a matcher tree, walks every starting point and evaluates the tree
once per entry, writing output through a signal-aware writer.

Signal Handling Notes:
    - SIGPIPE: Handled when the output pipe is closed (e.g., when piping to `head`)
    - SIGINT: Handled for clean exit on Ctrl+C
    Both stop the walk at the next write and produce the conventional exit code.

Exit Codes:
    0: Successful completion
    1: Invalid expression, missing starting point or other runtime error
    2: Command-line syntax error in the global options
    126: Permission denied with --permission-action fail
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE)

Example:
    # Find Python files, skipping whatever .gitignore excludes
    $ pyfind --exclude .gitignore src -name "*.py"

    # Display version information
    $ pyfind --version
"""

import logging
import sys
from typing import List, Optional

from pyfind.cli.argparser import create_parser, split_arguments
from pyfind.cli.safe_writer import SafeWriter
from pyfind.cli.signal_handler import setup_signal_handling, signal_handler
from pyfind.config import Config
from pyfind.exceptions import ExpressionError
from pyfind.exclusion_rules.git_rules import GitIgnoreExclusionRules
from pyfind.file_system_tree.file_system_tree import FileSystemTree
from pyfind.file_system_tree.permission_action import PermissionAction
from pyfind.matchers.base_matcher import Matcher
from pyfind.matchers.builder import build_top_level_matcher

logger = logging.getLogger("pyfind")


def configure_logging(verbose: bool) -> None:
    """Send pyfind's log records to stderr.

    Args:
        verbose: Log at DEBUG level instead of WARNING.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def process_path(
    path: str,
    matcher: Matcher,
    exclusion_rules: GitIgnoreExclusionRules,
    config: Config,
) -> int:
    """Evaluate the matcher against every entry below one starting point.

    Args:
        path: The starting point.
        matcher: The compiled expression.
        exclusion_rules: Rules for pruning entries.
        config: Traversal settings.

    Returns:
        The number of errors reported while walking.

    Raises:
        FileNotFoundError: If the starting point doesn't exist.
        PermissionError: If access is denied and the permission action is RAISE.
        BrokenPipeError: If output can no longer be written.
    """
    tree = FileSystemTree(path, exclusion_rules if exclusion_rules.has_rules() else None, config)
    for entry in tree.walk():
        matcher.matches(entry)
    return tree.error_count


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the pyfind command-line interface.

    Args:
        argv: Command-line arguments without the program name. Defaults to sys.argv[1:].

    Exit codes:
        0: Successful completion
        1: Invalid expression, missing starting point or other runtime error
        2: Command-line syntax error in the global options
        126: Permission denied with --permission-action fail
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE)
    """
    setup_signal_handling()

    if argv is None:
        argv = sys.argv[1:]

    exit_code = 0
    try:
        exclusion_rules = GitIgnoreExclusionRules()
        parser = create_parser(exclusion_rules)

        option_args, expression = split_arguments(argv)
        args = parser.parse_args(option_args)

        configure_logging(args.verbose)

        config = Config(
            follow_symlinks=args.follow_symlinks,
            permission_action=PermissionAction.from_option(args.permission_action),
        )

        with SafeWriter(sys.stdout.fileno()) as safe_writer:
            # The whole expression is compiled before any entry is touched
            matcher = build_top_level_matcher(expression, config, safe_writer)
            logger.debug("Compiled expression: %r", matcher)

            try:
                for path in args.paths:
                    try:
                        if process_path(path, matcher, exclusion_rules, config):
                            exit_code = 1
                    except FileNotFoundError as e:
                        print(f"Error: {str(e)}", file=sys.stderr)
                        exit_code = 1
            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except ExpressionError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)
    except PermissionError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    sys.exit(signal_handler.exit_status(exit_code))


if __name__ == "__main__":
    main()
