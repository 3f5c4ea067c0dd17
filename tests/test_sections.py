from recite.models import Section
from recite.sections import header_text, is_header, parse_sections


def test_is_header_cases() -> None:
    cases = [
        ("# This is a comment", True),
        ("#Comment without space", True),
        ("  # Indented comment", True),
        ("Regular line", False),
        ("Not a # comment", False),
        ("", False),
        ("   ", False),
    ]
    for line, expected in cases:
        assert is_header(line) is expected, line


def test_header_text_cases() -> None:
    cases = [
        ("# Verse 1", "Verse 1"),
        ("#Chorus", "Chorus"),
        ("  # Indented header", "Indented header"),
        ("#  Multiple spaces", "Multiple spaces"),
        ("# ", ""),
        ("#", ""),
        ("#   ", ""),
        ("## Bridge", "# Bridge"),
    ]
    for line, expected in cases:
        assert header_text(line) == expected, line


def test_parse_multiple_sections() -> None:
    sections = parse_sections(["# Verse 1", "Line one", "# Chorus", "Line two"])
    assert sections == [Section("Verse 1", 0, 2), Section("Chorus", 2, 4)]


def test_parse_sections_synthesizes_intro() -> None:
    assert parse_sections(["line", "#H", "l2"]) == [Section("Intro", 0, 1), Section("H", 1, 3)]
    assert parse_sections(["l1", "l2"]) == [Section("Intro", 0, 2)]


def test_parse_sections_empty_input() -> None:
    assert parse_sections([]) == []


def test_parse_sections_consecutive_and_trailing_headers() -> None:
    sections = parse_sections(["# A", "# B", "line", "# C"])
    assert sections == [Section("A", 0, 1), Section("B", 1, 3), Section("C", 3, 4)]


def test_parse_sections_cover_every_line_exactly_once() -> None:
    samples = [
        ["a", "b", "# X", "c", "# Y", "# Z", "d", "e"],
        ["# only header"],
        ["plain"],
        ["# X", "x", "# Y", "y", "# X", "x again"],
    ]
    for lines in samples:
        sections = parse_sections(lines)
        covered = [index for section in sections for index in range(section.start, section.end)]
        assert covered == list(range(len(lines)))
        assert all(len(section) > 0 for section in sections)
