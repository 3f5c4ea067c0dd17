"""Load recitation text files with optional YAML front matter."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .models import Metadata

logger = logging.getLogger(__name__)

FRONT_MATTER_DELIMITER = "---"


def parse_text(text: str) -> tuple[Metadata, list[str]]:
    """Split raw file text into metadata and non-blank content lines."""
    raw_lines = text.splitlines()
    meta = Metadata()
    start = 0

    if raw_lines and raw_lines[0].strip() == FRONT_MATTER_DELIMITER:
        end = _closing_delimiter_index(raw_lines)
        if end is not None:
            meta = _metadata_from_yaml("\n".join(raw_lines[1:end]))
            start = end + 1

    lines = [line for line in raw_lines[start:] if line.strip()]
    return meta, lines


def load_file(path: Path | str) -> tuple[Metadata, list[str]]:
    """Read a lyrics file and return its metadata and content lines."""
    file_path = Path(path)
    text = file_path.read_text(encoding="utf-8-sig")
    meta, lines = parse_text(text)
    logger.debug("Loaded %d lines from %s (title=%r)", len(lines), file_path, meta.title)
    return meta, lines


def _closing_delimiter_index(raw_lines: list[str]) -> int | None:
    for index in range(1, len(raw_lines)):
        if raw_lines[index].strip() == FRONT_MATTER_DELIMITER:
            return index
    return None


def _metadata_from_yaml(block: str) -> Metadata:
    """Build metadata from the YAML between front matter delimiters."""
    # BaseLoader keeps every scalar as written: "Yes" and "007" stay strings.
    try:
        raw: Any = yaml.load(block, Loader=yaml.BaseLoader)
    except yaml.YAMLError as exc:
        raise ValueError(f"invalid YAML front matter: {exc}") from exc
    if raw is None:
        return Metadata()
    if not isinstance(raw, dict):
        raise ValueError("invalid YAML front matter: expected a mapping of keys to values")
    return Metadata(title=_text_field(raw, "title"), artist=_text_field(raw, "artist"))


def _text_field(raw: dict[str, Any], key: str) -> str:
    value = raw.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"invalid YAML front matter: '{key}' must be plain text")
    return value.strip()
