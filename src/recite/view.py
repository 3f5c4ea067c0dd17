"""Render model for sessions, plus a plain-text formatter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .models import Mode, Phase
from .sections import header_text, is_header
from .session import Session, score

CHECK_MARK = "✓"
CROSS_MARK = "✗"
CURSOR_MARK = "_"


class LineStatus(Enum):
    """How a completed practice line is displayed."""

    HEADER = "header"
    MATCHED = "matched"
    UNMATCHED = "unmatched"


@dataclass(frozen=True)
class RenderedLine:
    """One practice line ready for display."""

    text: str
    status: LineStatus


@dataclass(frozen=True)
class View:
    """Everything a renderer needs to draw one screen."""

    phase: Phase
    title: str
    artist: str
    mode: Mode | None
    section_names: tuple[str, ...]
    lines: tuple[RenderedLine, ...]
    typed: str
    expected: str | None
    hint: str
    score: tuple[int, int] | None


def build_view(session: Session) -> View:
    """Build the render model for the current session state."""
    if session.phase is Phase.RESULT:
        visible = len(session.lines)
    elif session.phase is Phase.TYPING:
        visible = session.cursor
    else:
        visible = 0

    rendered = tuple(
        _rendered_line(line, session.results[index]) for index, line in enumerate(session.lines[:visible])
    )
    expected = None
    if session.phase is Phase.TYPING and session.mode is Mode.PRACTICE:
        expected = session.current_line

    return View(
        phase=session.phase,
        title=session.meta.title,
        artist=session.meta.artist,
        mode=session.mode,
        section_names=tuple(section.name for section in session.sections),
        lines=rendered,
        typed=session.typed,
        expected=expected,
        hint=session.hint,
        score=score(session) if session.phase is Phase.RESULT else None,
    )


def _rendered_line(line: str, matched: bool) -> RenderedLine:
    if is_header(line):
        return RenderedLine(text=header_text(line), status=LineStatus.HEADER)
    if matched:
        return RenderedLine(text=line, status=LineStatus.MATCHED)
    return RenderedLine(text=line, status=LineStatus.UNMATCHED)


def format_line(line: RenderedLine) -> str:
    """Format one history line: header text, or a mark followed by the line."""
    if line.status is LineStatus.HEADER:
        return line.text
    mark = CHECK_MARK if line.status is LineStatus.MATCHED else CROSS_MARK
    return f"{mark} {line.text}"


def format_view(view: View) -> str:
    """Format a view as plain text for line-oriented terminals."""
    out: list[str] = [""]

    if view.phase is Phase.INTRO:
        if view.title:
            out.append(view.title)
        if view.artist:
            out.append(f"by {view.artist}")
        out.append("")
        out.append("Press Enter to continue...")
    elif view.phase is Phase.MODE_SELECT:
        out.append("Select Mode:")
        out.append("")
        out.append("  p. Practice (line shown)")
        out.append("  m. Memory (line hidden)")
        out.append("")
        out.append("Press p or m to select: ")
    elif view.phase is Phase.SECTION_SELECT:
        out.append("Select Section:")
        out.append("")
        out.append("  a. All sections")
        for index, name in enumerate(view.section_names, start=1):
            out.append(f"  {index}. {name}")
        out.append("")
        out.append("Press a or 1-9 to select: ")
    elif view.phase is Phase.TYPING:
        out.extend(_history(view))
        out.append("")
        if view.expected is not None:
            out.append(view.expected)
        out.append(view.typed + CURSOR_MARK)
        if view.hint:
            out.append(f"Hint: {view.hint}")
    elif view.phase is Phase.RESULT:
        out.extend(_history(view))
        correct, total = view.score or (0, 0)
        out.append("")
        out.append(f"Score: {correct}/{total}")
        out.append("")
        out.append("Try again? (y/n) ")
    return "\n".join(out)


def _history(view: View) -> list[str]:
    rows: list[str] = []
    for line in view.lines:
        if line.status is LineStatus.HEADER:
            rows.append("")
        rows.append(format_line(line))
    return rows
