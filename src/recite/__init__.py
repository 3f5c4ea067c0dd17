"""recite package: line-by-line recitation practice for lyrics, poems and speeches."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from .matching import lines_match, next_word_hint, normalize, words_match
from .sections import header_text, is_header, parse_sections

__all__ = [
    "__version__",
    "header_text",
    "is_header",
    "lines_match",
    "next_word_hint",
    "normalize",
    "parse_sections",
    "words_match",
]


def _version_from_pyproject(start: Path | None = None) -> str | None:
    """Read [project].version from a pyproject.toml above this file, for source checkouts."""
    origin = (start or Path(__file__)).resolve()
    for base in origin.parents:
        pyproject = base / "pyproject.toml"
        if not pyproject.is_file():
            continue
        try:
            with pyproject.open("rb") as handle:
                data = tomllib.load(handle)
        except (OSError, tomllib.TOMLDecodeError):
            continue
        project = data.get("project", {})
        if not isinstance(project, dict) or project.get("name") != "recite":
            continue
        value = project.get("version")
        return str(value) if value else None
    return None


_project_version = _version_from_pyproject()
if _project_version is not None:
    __version__ = _project_version
else:
    try:
        __version__ = version("recite")
    except PackageNotFoundError:
        __version__ = "0+unknown"
