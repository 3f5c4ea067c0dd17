from pathlib import Path

import pytest

from recite.content_loader import load_file, parse_text
from recite.models import Metadata


def test_parses_yaml_front_matter(lyrics_file) -> None:  # type: ignore[no-untyped-def]
    path = lyrics_file(
        "---\ntitle: Amazing Grace\nartist: John Newton\n---\nHow sweet the sound\nThat saved a wretch like me\n"
    )
    meta, lines = load_file(path)
    assert meta == Metadata(title="Amazing Grace", artist="John Newton")
    assert lines == ["How sweet the sound", "That saved a wretch like me"]


def test_file_without_front_matter(lyrics_file) -> None:  # type: ignore[no-untyped-def]
    meta, lines = load_file(lyrics_file("Line one\nLine two\n"))
    assert meta.is_empty
    assert lines == ["Line one", "Line two"]


def test_skips_blank_lines_and_keeps_headers_verbatim(lyrics_file) -> None:  # type: ignore[no-untyped-def]
    meta, lines = load_file(lyrics_file("---\ntitle: Test\n---\n  # Verse 1\nLine one\n\n   \nLine two  \n"))
    assert meta == Metadata(title="Test")
    assert lines == ["  # Verse 1", "Line one", "Line two  "]


def test_byte_order_mark_is_ignored(tmp_path: Path) -> None:
    path = tmp_path / "bom.txt"
    path.write_text("---\ntitle: BOM\n---\nLine\n", encoding="utf-8-sig")
    meta, lines = load_file(path)
    assert meta.title == "BOM"
    assert lines == ["Line"]


def test_unclosed_front_matter_is_content() -> None:
    meta, lines = parse_text("---\ntitle: Nope\nLine\n")
    assert meta.is_empty
    assert lines == ["---", "title: Nope", "Line"]


def test_empty_front_matter_block() -> None:
    meta, lines = parse_text("---\n---\nLine\n")
    assert meta.is_empty
    assert lines == ["Line"]


def test_scalar_values_are_kept_as_written() -> None:
    meta, _ = parse_text("---\ntitle: 1999\nartist:\n---\nParty\n")
    assert meta == Metadata(title="1999", artist="")

    cases = [
        ("Yes", "No"),
        ("007", "1.10"),
        ("off", "Null"),
    ]
    for title, artist in cases:
        meta, _ = parse_text(f"---\ntitle: {title}\nartist: {artist}\n---\nLine\n")
        assert meta == Metadata(title=title, artist=artist)


def test_non_scalar_title_raises_value_error() -> None:
    with pytest.raises(ValueError, match="'title' must be plain text"):
        parse_text("---\ntitle:\n  - one\n  - two\n---\nLine\n")
    with pytest.raises(ValueError, match="'artist' must be plain text"):
        parse_text("---\nartist: {name: x}\n---\nLine\n")


def test_invalid_yaml_raises_value_error() -> None:
    with pytest.raises(ValueError, match="invalid YAML front matter"):
        parse_text("---\ntitle: [unclosed\n---\nLine\n")


def test_non_mapping_front_matter_raises_value_error() -> None:
    with pytest.raises(ValueError, match="invalid YAML front matter"):
        parse_text("---\n- a\n- b\n---\nLine\n")


def test_missing_file_raises_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        load_file(tmp_path / "missing.txt")


def test_empty_text_has_no_lines() -> None:
    assert parse_text("") == (Metadata(), [])
    assert parse_text("\n\n  \n") == (Metadata(), [])
