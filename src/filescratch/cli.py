"""CLI entry point: argument parsing, dispatch, and exit codes."""

from __future__ import annotations

import argparse
import logging
import re
import sys
from dataclasses import dataclass
from typing import NoReturn, Sequence, Union

from filescratch import __version__
from filescratch.config import load_config

PROG = "filescratch"

EPILOG = f"""\
Examples:
  {PROG} --file /tmp/foo.txt
  {PROG} -f /tmp/foo.txt

Exit Codes:
  0    Success (including --help)
  1    The file could not be read

Environment:
  FILESCRATCH_ENCODING     Text encoding used to read files (default: utf-8)
  FILESCRATCH_LOG_LEVEL    Log level when neither -v nor -q is given (default: WARNING)
  FILESCRATCH_LOG_FILE     Also write log records to this file
"""


@dataclass(frozen=True)
class ShowHelp:
    """Print usage and exit 0."""


@dataclass(frozen=True)
class ProcessFile:
    """Read the file at path with both strategies."""

    path: str


ParsedCommand = Union[ShowHelp, ProcessFile]

# "argument -f/--file: expected one argument"
_ARGUMENT_ERROR = re.compile(r"argument ([^:]+): ")


class _ParseError(Exception):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing an error and exiting."""

    def error(self, message: str) -> NoReturn:
        raise _ParseError(message)


class _HelpFormatter(argparse.RawDescriptionHelpFormatter):
    def add_usage(self, usage, actions, groups, prefix=None):
        if prefix is None:
            prefix = "Usage: "
        super().add_usage(usage, actions, groups, prefix)


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure the package logger: level from --verbose/--quiet or config, console handler,
    optional file handler from config.
    """
    config = load_config()
    log_cfg = config.get("logging") or {}
    if verbose:
        level_name = "DEBUG"
    elif quiet:
        level_name = "ERROR"
    else:
        level_name = (log_cfg.get("level") or "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    root = logging.getLogger("filescratch")
    root.setLevel(level)
    if not root.handlers:
        fmt = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(fmt)
        root.addHandler(console)
        log_file = log_cfg.get("file")
        if log_file:
            try:
                fh = logging.FileHandler(log_file, encoding="utf-8")
                fh.setFormatter(fmt)
                root.addHandler(fh)
            except OSError as e:
                root.warning("Cannot open log file %s: %s", log_file, e)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        description=f"Read a text file whole and line by line, echoing its content ({PROG} {__version__}).",
        epilog=EPILOG,
        formatter_class=_HelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    options = parser.add_argument_group("Options")
    options.add_argument("-f", "--file", dest="path", metavar="PATH", help="Specify a file to process.")
    options.add_argument("-h", "--help", action="store_true", help="Show this help message.")
    log_group = options.add_mutually_exclusive_group()
    log_group.add_argument("-v", "--verbose", action="store_true", help="Verbose (DEBUG) logging.")
    log_group.add_argument("-q", "--quiet", action="store_true", help="Quiet logging (errors only).")
    return parser


def _offending_options(message: str) -> set[str]:
    """Option strings named by an argparse error message ("argument -f/--file: ...")."""
    match = _ARGUMENT_ERROR.match(message)
    if match is None:
        return set()
    return set(match.group(1).split("/"))


def _drop_last(args: list[str], option_strings: set[str]) -> bool:
    """Remove the last token spelling one of option_strings. Returns False if none does."""
    for i in range(len(args) - 1, -1, -1):
        if args[i].split("=", 1)[0] in option_strings:
            del args[i]
            return True
    return False


def parse_namespace(args: Sequence[str]) -> argparse.Namespace:
    """
    Parse args leniently: unknown flags are dropped, and a malformed switch
    (e.g. a trailing --file with no value, or -q after -v) is dropped while
    the rest of the command line is kept.
    """
    parser = build_parser()
    remaining = list(args)
    while True:
        try:
            namespace, _unknown = parser.parse_known_args(remaining)
        except _ParseError as e:
            if _drop_last(remaining, _offending_options(str(e))):
                continue
            namespace = parser.parse_args([])
        return namespace


def command_from_namespace(namespace: argparse.Namespace) -> ParsedCommand:
    """Help wins over everything; then a file path; otherwise help."""
    if namespace.help:
        return ShowHelp()
    if namespace.path is not None:
        return ProcessFile(namespace.path)
    return ShowHelp()


def parse(args: Sequence[str]) -> ParsedCommand:
    """Turn a raw argument list into a ParsedCommand."""
    return command_from_namespace(parse_namespace(args))


def main(args: Sequence[str] | None = None) -> int:
    """Run the CLI on args (default: sys.argv[1:]) and return the process exit code."""
    if args is None:
        args = sys.argv[1:]
    namespace = parse_namespace(args)
    setup_logging(verbose=namespace.verbose, quiet=namespace.quiet)

    command = command_from_namespace(namespace)
    if isinstance(command, ShowHelp):
        print(build_parser().format_help(), end="")
        return 0

    from filescratch.commands.process_cmd import run as cmd_run

    return cmd_run(namespace)


def run() -> NoReturn:
    """Console-script entry point."""
    sys.exit(main())
