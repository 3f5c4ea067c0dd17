"""Header detection and section grouping for recitation text."""

from __future__ import annotations

from collections.abc import Sequence

from .models import Section

HEADER_MARKER = "#"
INTRO_SECTION_NAME = "Intro"


def is_header(line: str) -> bool:
    """Return True for structural header lines like ``# Chorus``."""
    return line.strip().startswith(HEADER_MARKER)


def header_text(line: str) -> str:
    """Return header display text without the leading marker."""
    stripped = line.strip()
    if stripped.startswith(HEADER_MARKER):
        stripped = stripped[len(HEADER_MARKER) :]
    return stripped.strip()


def parse_sections(lines: Sequence[str]) -> list[Section]:
    """Group lines into sections delimited by header lines.

    Each header opens a section that includes the header itself. Lines before
    the first header form an implicit ``Intro`` section.
    """
    sections: list[Section] = []
    open_name: str | None = None
    open_start = 0

    for index, line in enumerate(lines):
        if is_header(line):
            if open_name is not None:
                sections.append(Section(name=open_name, start=open_start, end=index))
            open_name = header_text(line)
            open_start = index
        elif open_name is None:
            open_name = INTRO_SECTION_NAME
            open_start = 0

    if open_name is not None:
        sections.append(Section(name=open_name, start=open_start, end=len(lines)))
    return sections
