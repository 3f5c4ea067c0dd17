"""Curses front end: keystrokes in, coloured session screens out."""

from __future__ import annotations

import curses
import logging

from .models import Phase
from .session import (
    AppendText,
    Backspace,
    Cancel,
    Confirm,
    Event,
    RequestHint,
    SelectOption,
    Session,
    update,
)
from .view import CURSOR_MARK, LineStatus, View, build_view, format_line, format_view

logger = logging.getLogger(__name__)

ESCAPE = 27
CTRL_C = 3
TAB = 9
ENTER_CODES = {10, 13}
BACKSPACE_CODES = {8, 127}

PAIR_MATCHED = 1
PAIR_UNMATCHED = 2


def key_to_event(key: str | int, phase: Phase) -> Event | None:
    """Translate one ``get_wch`` result into a session event."""
    if isinstance(key, int):
        if key == curses.KEY_ENTER:
            return Confirm()
        if key in (curses.KEY_BACKSPACE, curses.KEY_DC):
            return Backspace()
        if key == curses.KEY_EXIT:
            return Cancel()
        return None

    if len(key) != 1:
        return None
    code = ord(key)
    if code in (ESCAPE, CTRL_C):
        return Cancel()
    if code in ENTER_CODES:
        return Confirm()
    if code == TAB:
        return RequestHint()
    if code in BACKSPACE_CODES:
        return Backspace()
    if not key.isprintable():
        return None
    if phase is Phase.TYPING:
        return AppendText(key)
    return SelectOption(key)


def run_curses(session: Session) -> Session:
    """Run the interactive keystroke loop until the session quits."""
    return curses.wrapper(_main_loop, session)


def _main_loop(stdscr: curses.window, session: Session) -> Session:
    curses.curs_set(0)
    stdscr.keypad(True)
    _init_colors()

    while not session.finished:
        _draw(stdscr, build_view(session))
        try:
            key = stdscr.get_wch()
        except KeyboardInterrupt:
            key = chr(CTRL_C)
        event = key_to_event(key, session.phase)
        if event is None:
            continue
        logger.debug("phase=%s event=%r", session.phase.value, event)
        session = update(session, event)
    return session


def _init_colors() -> None:
    if not curses.has_colors():
        return
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(PAIR_MATCHED, curses.COLOR_GREEN, -1)
    curses.init_pair(PAIR_UNMATCHED, curses.COLOR_RED, -1)


def _draw(stdscr: curses.window, view: View) -> None:
    stdscr.erase()
    height, width = stdscr.getmaxyx()
    if view.phase in (Phase.TYPING, Phase.RESULT):
        rows = _styled_rows(view)
    else:
        rows = [(text, curses.A_NORMAL) for text in format_view(view).splitlines()]

    # Keep the newest rows visible when the history outgrows the window.
    for y, (text, attr) in enumerate(rows[-height:]):
        try:
            stdscr.addstr(y, 0, text[: max(0, width - 1)], attr)
        except curses.error:
            pass
    stdscr.refresh()


def _styled_rows(view: View) -> list[tuple[str, int]]:
    rows: list[tuple[str, int]] = []
    for line in view.lines:
        if line.status is LineStatus.HEADER:
            rows.append(("", curses.A_NORMAL))
            rows.append((format_line(line), curses.A_BOLD | curses.A_UNDERLINE))
        elif line.status is LineStatus.MATCHED:
            rows.append((format_line(line), _pair(PAIR_MATCHED)))
        else:
            rows.append((format_line(line), _pair(PAIR_UNMATCHED)))
    rows.append(("", curses.A_NORMAL))

    if view.phase is Phase.RESULT:
        correct, total = view.score or (0, 0)
        rows.append((f"Score: {correct}/{total}", curses.A_BOLD))
        rows.append(("", curses.A_NORMAL))
        rows.append(("Try again? (y/n) ", curses.A_NORMAL))
        return rows

    if view.expected is not None:
        rows.append((view.expected, curses.A_DIM))
    rows.append((view.typed + CURSOR_MARK, curses.A_NORMAL))
    if view.hint:
        rows.append((f"Hint: {view.hint}", curses.A_DIM))
    return rows


def _pair(number: int) -> int:
    if curses.has_colors():
        return curses.color_pair(number)
    return curses.A_NORMAL
