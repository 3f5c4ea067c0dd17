"""Recitation session state and its event-driven transitions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from .matching import lines_match, next_word_hint
from .models import Metadata, Mode, Phase, Section
from .sections import is_header, parse_sections

ALL_SECTIONS_TOKENS = {"a", "A"}
RESTART_TOKENS = {"y", "Y"}
DECLINE_TOKENS = {"n", "N"}
CONTINUE_TOKENS = {" "}
MODE_TOKENS = {
    "p": Mode.PRACTICE,
    "P": Mode.PRACTICE,
    "1": Mode.PRACTICE,
    "m": Mode.MEMORY,
    "M": Mode.MEMORY,
    "2": Mode.MEMORY,
}
MAX_HINT_LEVEL = 2


@dataclass(frozen=True)
class Confirm:
    """Submit the typed line or accept the current screen."""


@dataclass(frozen=True)
class Backspace:
    """Delete the last typed character."""


@dataclass(frozen=True)
class AppendText:
    """Characters typed by the user."""

    text: str


@dataclass(frozen=True)
class RequestHint:
    """Reveal the next word, then the whole line."""


@dataclass(frozen=True)
class SelectOption:
    """Menu choice such as ``a``, ``2`` or ``y``."""

    token: str


@dataclass(frozen=True)
class Cancel:
    """End the session immediately."""


Event = Confirm | Backspace | AppendText | RequestHint | SelectOption | Cancel


@dataclass(frozen=True)
class Session:
    """Complete state of one recitation run.

    ``lines`` is the practice set (all lines or one section) and ``results``
    holds one flag per practice-set line. ``selected_section`` is ``None`` when
    every section is being practiced.
    """

    all_lines: tuple[str, ...]
    sections: tuple[Section, ...]
    meta: Metadata
    mode: Mode | None
    selected_section: int | None
    lines: tuple[str, ...]
    results: tuple[bool, ...]
    phase: Phase
    cursor: int = 0
    typed: str = ""
    hint: str = ""
    hint_level: int = 0

    @property
    def current_line(self) -> str | None:
        """Expected line at the cursor, or None once every line is done."""
        if self.cursor < len(self.lines):
            return self.lines[self.cursor]
        return None

    @property
    def finished(self) -> bool:
        return self.phase is Phase.QUIT


def new_session(lines: Sequence[str], meta: Metadata | None = None, mode: Mode | None = None) -> Session:
    """Create a session positioned at its first interactive screen."""
    if not lines:
        raise ValueError("Cannot start a session without lines.")
    meta = meta or Metadata()
    all_lines = tuple(lines)
    if not meta.is_empty:
        phase = Phase.INTRO
    elif mode is None:
        phase = Phase.MODE_SELECT
    else:
        phase = Phase.SECTION_SELECT
    return Session(
        all_lines=all_lines,
        sections=tuple(parse_sections(all_lines)),
        meta=meta,
        mode=mode,
        selected_section=None,
        lines=all_lines,
        results=(False,) * len(all_lines),
        phase=phase,
    )


def update(session: Session, event: Event) -> Session:
    """Apply one input event and return the resulting session."""
    if session.phase is Phase.QUIT:
        return session
    if isinstance(event, Cancel):
        return replace(session, phase=Phase.QUIT)
    handler = _HANDLERS[session.phase]
    return handler(session, event)


def select_section(session: Session, index: int | None) -> Session:
    """Narrow the practice set to one section (``None`` for all) and start typing."""
    if index is None:
        lines = session.all_lines
    else:
        section = session.sections[index]
        lines = session.all_lines[section.start : section.end]
    selected = replace(
        session,
        selected_section=index,
        lines=lines,
        results=(False,) * len(lines),
        cursor=0,
        typed="",
        hint="",
        hint_level=0,
        phase=Phase.TYPING,
    )
    return _skip_headers(selected)


def restart(session: Session) -> Session:
    """Start the same practice set again with a clean result vector."""
    fresh = replace(
        session,
        results=(False,) * len(session.lines),
        cursor=0,
        typed="",
        hint="",
        hint_level=0,
        phase=Phase.TYPING,
    )
    return _skip_headers(fresh)


def score(session: Session) -> tuple[int, int]:
    """Return ``(correct, total)`` over non-header practice lines."""
    correct = 0
    total = 0
    for line, matched in zip(session.lines, session.results):
        if is_header(line):
            continue
        total += 1
        if matched:
            correct += 1
    return (correct, total)


def source_index(session: Session, index: int) -> int:
    """Map a practice-set index back to its position in ``all_lines``."""
    if session.selected_section is None:
        return index
    return session.sections[session.selected_section].start + index


def _skip_headers(session: Session) -> Session:
    """Advance past header lines, marking them matched; finish at the end."""
    cursor = session.cursor
    results = list(session.results)
    while cursor < len(session.lines) and is_header(session.lines[cursor]):
        results[cursor] = True
        cursor += 1
    phase = Phase.RESULT if cursor >= len(session.lines) else session.phase
    return replace(session, cursor=cursor, results=tuple(results), phase=phase)


def _after_intro(session: Session) -> Session:
    next_phase = Phase.MODE_SELECT if session.mode is None else Phase.SECTION_SELECT
    return replace(session, phase=next_phase)


def _handle_intro(session: Session, event: Event) -> Session:
    if isinstance(event, Confirm):
        return _after_intro(session)
    if isinstance(event, SelectOption) and event.token in CONTINUE_TOKENS:
        return _after_intro(session)
    return session


def _handle_mode_select(session: Session, event: Event) -> Session:
    if not isinstance(event, SelectOption):
        return session
    mode = MODE_TOKENS.get(event.token)
    if mode is None:
        return session
    return replace(session, mode=mode, phase=Phase.SECTION_SELECT)


def _handle_section_select(session: Session, event: Event) -> Session:
    if not isinstance(event, SelectOption):
        return session
    token = event.token
    if token in ALL_SECTIONS_TOKENS:
        return select_section(session, None)
    if token.isdecimal():
        index = int(token) - 1
        if 0 <= index < len(session.sections):
            return select_section(session, index)
    return session


def _handle_typing(session: Session, event: Event) -> Session:
    if isinstance(event, AppendText):
        return replace(session, typed=session.typed + event.text, hint="", hint_level=0)
    if isinstance(event, Backspace):
        return replace(session, typed=session.typed[:-1], hint="", hint_level=0)
    if isinstance(event, RequestHint):
        return _request_hint(session)
    if isinstance(event, Confirm):
        return _submit_line(session)
    return session


def _request_hint(session: Session) -> Session:
    expected = session.current_line
    if expected is None or session.hint_level >= MAX_HINT_LEVEL:
        return session
    if session.typed and lines_match(session.typed, expected):
        return session
    if session.hint_level == 0:
        return replace(session, hint=next_word_hint(session.typed, expected), hint_level=1)
    return replace(session, hint=expected, hint_level=2)


def _submit_line(session: Session) -> Session:
    expected = session.current_line
    if expected is None:
        return session
    results = list(session.results)
    results[session.cursor] = lines_match(session.typed, expected)
    advanced = replace(
        session,
        results=tuple(results),
        cursor=session.cursor + 1,
        typed="",
        hint="",
        hint_level=0,
    )
    return _skip_headers(advanced)


def _handle_result(session: Session, event: Event) -> Session:
    if not isinstance(event, SelectOption):
        return session
    if event.token in RESTART_TOKENS:
        return restart(session)
    if event.token in DECLINE_TOKENS:
        return replace(session, phase=Phase.QUIT)
    return session


_HANDLERS = {
    Phase.INTRO: _handle_intro,
    Phase.MODE_SELECT: _handle_mode_select,
    Phase.SECTION_SELECT: _handle_section_select,
    Phase.TYPING: _handle_typing,
    Phase.RESULT: _handle_result,
}
