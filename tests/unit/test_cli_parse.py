"""Unit tests for argument parsing (parse, parse_namespace)."""

from __future__ import annotations

import pytest

from filescratch.cli import ProcessFile, ShowHelp, parse, parse_namespace


@pytest.mark.parametrize("args", [["--help"], ["-h"], []])
def test_parse_help(args: list[str]) -> None:
    assert parse(args) == ShowHelp()


@pytest.mark.parametrize("args", [["--file", "x"], ["-f", "x"], ["--file=x"], ["-fx"]])
def test_parse_file(args: list[str]) -> None:
    assert parse(args) == ProcessFile("x")


@pytest.mark.parametrize(
    "args",
    [["--file", "x", "--help"], ["-h", "-f", "x"], ["-f", "x", "-h"]],
)
def test_parse_help_wins(args: list[str]) -> None:
    assert parse(args) == ShowHelp()


def test_parse_ignores_unknown_flags() -> None:
    assert parse(["--bogus", "-z", "--file", "x", "extra"]) == ProcessFile("x")


def test_parse_unknown_flags_only_falls_back_to_help() -> None:
    assert parse(["--bogus", "positional"]) == ShowHelp()


def test_parse_file_without_value_falls_back_to_help() -> None:
    assert parse(["--file"]) == ShowHelp()


@pytest.mark.parametrize(
    "args",
    [["-f", "x", "--file"], ["--file", "x", "-f"], ["-f", "x", "--bogus", "--file"]],
)
def test_parse_trailing_file_without_value_keeps_earlier_value(args: list[str]) -> None:
    """Only the malformed switch is dropped; the valid -f value survives."""
    assert parse(args) == ProcessFile("x")


def test_parse_malformed_switch_keeps_log_flags() -> None:
    ns = parse_namespace(["-v", "-f", "x", "--file"])
    assert ns.verbose is True
    assert ns.path == "x"


def test_parse_file_followed_by_flag_drops_file() -> None:
    ns = parse_namespace(["--file", "-q"])
    assert ns.path is None
    assert ns.quiet is True
    assert parse(["--file", "-q"]) == ShowHelp()


def test_parse_conflicting_log_flags_keeps_first() -> None:
    """-v and -q are mutually exclusive; the later one is dropped, not the command."""
    ns = parse_namespace(["-v", "-f", "x", "-q"])
    assert ns.verbose is True
    assert ns.quiet is False
    assert ns.path == "x"
    assert parse(["-q", "--file", "x", "--verbose"]) == ProcessFile("x")


def test_parse_no_abbreviations() -> None:
    """Prefixes of long options are not recognized."""
    assert parse(["--fi", "x"]) == ShowHelp()


def test_parse_namespace_log_flags() -> None:
    ns = parse_namespace(["-v", "-f", "x"])
    assert ns.verbose is True
    assert ns.quiet is False
    assert ns.path == "x"


def test_parse_namespace_defaults() -> None:
    ns = parse_namespace([])
    assert ns.help is False
    assert ns.path is None
