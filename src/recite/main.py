"""CLI entrypoint for the recitation trainer."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from . import __version__
from .content_loader import load_file
from .models import Mode, Phase
from .session import (
    AppendText,
    Cancel,
    Confirm,
    Event,
    RequestHint,
    SelectOption,
    Session,
    new_session,
    select_section,
    update,
)
from .terminal import run_curses
from .view import build_view, format_view

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
PrintFn = Callable[[str], None]
QUIT_COMMANDS = {":q", ":quit", ":exit"}
HINT_COMMANDS = {":h", ":hint"}
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
DEBUG_LOG_PATH = Path(".recite") / "debug.log"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="recite", description="Practice reciting lyrics line by line")
    parser.add_argument("file", help="text file with one line per row; '#' lines start sections")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in Mode],
        help="skip the mode menu: practice shows each line, memory hides it",
    )
    parser.add_argument(
        "--section",
        type=int,
        metavar="N",
        help="skip the section menu: 0 for all sections, otherwise the section number",
    )
    parser.add_argument("--plain", action="store_true", help="line-based prompts instead of the full-screen UI")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output (to stderr with --plain, else to .recite/debug.log)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(argv: list[str] | None = None, input_fn: InputFn = input, print_fn: PrintFn = print) -> int:
    """Run the CLI application."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.section is not None and args.mode is None:
        parser.error("--section requires --mode")
    handler = _configure_logging(args.verbose, args.plain)
    try:
        return _run_session(args, input_fn, print_fn)
    finally:
        _release_logging(handler)


def _configure_logging(verbose: bool, plain: bool) -> logging.Handler:
    """Attach a handler to the package logger that never writes over the curses screen."""
    handler: logging.Handler
    if plain:
        handler = logging.StreamHandler(sys.stderr)
    elif verbose:
        DEBUG_LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(DEBUG_LOG_PATH, encoding="utf-8")
    else:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger(__package__)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False
    package_logger.addHandler(handler)
    return handler


def _release_logging(handler: logging.Handler) -> None:
    package_logger = logging.getLogger(__package__)
    package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    handler.close()


def _run_session(args: argparse.Namespace, input_fn: InputFn, print_fn: PrintFn) -> int:
    try:
        meta, lines = load_file(args.file)
    except (OSError, ValueError) as exc:
        print(f"Error reading file: {exc}", file=sys.stderr)
        return 1
    if not lines:
        print("Error: file is empty", file=sys.stderr)
        return 1

    session = new_session(lines, meta, Mode(args.mode) if args.mode else None)
    if args.section is not None:
        if not 0 <= args.section <= len(session.sections):
            print(f"Error: section must be between 0 and {len(session.sections)}", file=sys.stderr)
            return 1
        session = _preselect_section(session, args.section)

    try:
        if args.plain:
            play_plain(session, input_fn, print_fn)
        else:
            run_curses(session)
    except Exception as exc:
        logger.debug("Session aborted", exc_info=True)
        print(f"Error running program: {exc}", file=sys.stderr)
        return 1
    return 0


def _preselect_section(session: Session, number: int) -> Session:
    """Start typing straight away in the section chosen on the command line."""
    index = number - 1 if number else None
    return select_section(session, index)


def play_plain(session: Session, input_fn: InputFn = input, print_fn: PrintFn = print) -> Session:
    """Drive a session with whole-line prompts; returns the final session."""
    while not session.finished:
        print_fn(format_view(build_view(session)))
        try:
            entered = input_fn("> ")
        except EOFError:
            entered = ":q"
        for event in _line_to_events(entered, session.phase):
            session = update(session, event)
    return session


def _line_to_events(entered: str, phase: Phase) -> list[Event]:
    """Map one entered line to the events it stands for in ``phase``."""
    command = entered.strip()
    if command.lower() in QUIT_COMMANDS:
        return [Cancel()]
    if phase is Phase.TYPING:
        if command.lower() in HINT_COMMANDS:
            return [RequestHint()]
        return [AppendText(entered), Confirm()]
    if not command:
        return [Confirm()]
    return [SelectOption(command)]


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
