from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def lyrics_file(tmp_path: Path) -> Callable[[str], Path]:
    """Write text to a fresh lyrics file and return its path."""
    counter = {"value": 0}

    def write(content: str) -> Path:
        counter["value"] += 1
        path = tmp_path / f"lyrics-{counter['value']}.txt"
        path.write_text(content, encoding="utf-8")
        return path

    return write
