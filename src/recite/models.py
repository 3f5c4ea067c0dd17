"""Core domain models for recitation practice."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Metadata:
    """Song or text information from a file's front matter."""

    title: str = ""
    artist: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.title and not self.artist


@dataclass(frozen=True)
class Section:
    """Named half-open range ``[start, end)`` over the full line sequence."""

    name: str
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


class Mode(Enum):
    """Whether the expected line is shown while typing."""

    PRACTICE = "practice"
    MEMORY = "memory"


class Phase(Enum):
    """Interaction state of a recitation session."""

    INTRO = "intro"
    MODE_SELECT = "mode_select"
    SECTION_SELECT = "section_select"
    TYPING = "typing"
    RESULT = "result"
    QUIT = "quit"
