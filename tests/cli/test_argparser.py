"""Unit tests for the argument parser module in the pyfind CLI."""

import argparse
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from pyfind.cli.argparser import create_exclusion_action, create_parser, is_expression_start, split_arguments
from pyfind.exclusion_rules.git_rules import GitIgnoreExclusionRules


@pytest.fixture
def mock_exclusion_rules():
    """Create a mock exclusion rules object."""
    return MagicMock(spec=GitIgnoreExclusionRules)


@pytest.mark.parametrize(
    "token,expected",
    [
        ("-name", True),
        ("-o", True),
        ("!", True),
        ("(", True),
        (")", True),
        (",", True),
        ("--follow-symlinks", False),
        ("-", False),
        ("src", False),
        ("./-dir", False),
    ],
)
def test_is_expression_start(token, expected):
    assert is_expression_start(token) == expected


@pytest.mark.parametrize(
    "argv,expected",
    [
        ([], ([], [])),
        (["src", "docs"], (["src", "docs"], [])),
        (["-true"], ([], ["-true"])),
        (["src", "(", "-name", "a", ")"], (["src"], ["(", "-name", "a", ")"])),
        (["src", "!", "-empty"], (["src"], ["!", "-empty"])),
        (["--ignore", "*.pyc", ".", "-print"], (["--ignore", "*.pyc", "."], ["-print"])),
        # Everything after the first expression token belongs to the expression
        (["-name", "src", "--verbose"], ([], ["-name", "src", "--verbose"])),
    ],
)
def test_split_arguments(argv, expected):
    assert split_arguments(argv) == expected


def test_create_exclusion_action():
    ExclusionAction = create_exclusion_action(MagicMock())

    assert issubclass(ExclusionAction, argparse.Action)

    action = ExclusionAction(option_strings=["--exclude"], dest="exclude", help="test help")
    assert action.option_strings == ["--exclude"]
    assert action.dest == "exclude"
    assert action.help == "test help"


def test_exclusion_action_preserves_order(mock_exclusion_rules):
    parser = create_parser(mock_exclusion_rules)

    args = parser.parse_args(["--exclude", ".gitignore", "--ignore", "*.pyc", "--exclude", ".npmignore"])

    assert mock_exclusion_rules.mock_calls[0][0] == "load_rules"
    assert mock_exclusion_rules.mock_calls[1][0] == "add_rule"
    assert mock_exclusion_rules.mock_calls[2][0] == "load_rules"
    mock_exclusion_rules.add_rule.assert_called_once_with("*.pyc")
    assert args.exclude == [Path(".gitignore"), Path(".npmignore")]
    assert args.ignore == ["*.pyc"]


def test_exclusion_action_with_real_rules(tmp_path):
    gitignore = tmp_path / ".gitignore"
    gitignore.write_text("*.log\n")
    rules = GitIgnoreExclusionRules()

    create_parser(rules).parse_args(["--exclude", str(gitignore), "--ignore", "!keep.log"])

    assert rules.exclude("debug.log")
    assert not rules.exclude("keep.log")


def test_missing_exclusion_file(tmp_path, capsys):
    parser = create_parser(GitIgnoreExclusionRules())

    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["--exclude", str(tmp_path / "missing")])

    assert excinfo.value.code == 2
    assert "Rules file not found" in capsys.readouterr().err


def test_defaults(mock_exclusion_rules):
    args = create_parser(mock_exclusion_rules).parse_args([])

    assert args.paths == ["."]
    assert args.exclude is None
    assert args.ignore is None
    assert not args.follow_symlinks
    assert args.permission_action == "warn"
    assert not args.verbose


def test_all_options(mock_exclusion_rules):
    args = create_parser(mock_exclusion_rules).parse_args(
        ["--follow-symlinks", "--permission-action", "fail", "--verbose", "src", "docs"]
    )

    assert args.paths == ["src", "docs"]
    assert args.follow_symlinks
    assert args.permission_action == "fail"
    assert args.verbose


def test_invalid_permission_action(mock_exclusion_rules, capsys):
    with pytest.raises(SystemExit) as excinfo:
        create_parser(mock_exclusion_rules).parse_args(["--permission-action", "explode"])

    assert excinfo.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_version(mock_exclusion_rules, capsys):
    with pytest.raises(SystemExit) as excinfo:
        create_parser(mock_exclusion_rules).parse_args(["--version"])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("pyfind ")


def test_help_lists_expression_flags(mock_exclusion_rules, capsys):
    with pytest.raises(SystemExit):
        create_parser(mock_exclusion_rules).parse_args(["--help"])

    out = capsys.readouterr().out
    assert "-execdir" in out
    assert "-maxdepth" in out
    assert "[--options] [PATH ...] [EXPRESSION]" in out
