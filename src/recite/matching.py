"""Forgiving comparison of typed lines against expected text."""

from __future__ import annotations

# Shorter normalized word must be at least this long for "livin"/"living" matching.
G_DROP_MIN_LENGTH = 3


def normalize(text: str) -> str:
    """Keep only letters and digits, lowercased."""
    # Lowercase per character before filtering: "İ".lower() adds a combining mark.
    return "".join(
        lowered
        for char in text
        if char.isalpha() or char.isdecimal()
        for lowered in char.lower()
        if lowered.isalpha() or lowered.isdecimal()
    )


def words_match(left: str, right: str) -> bool:
    """Compare two words, tolerating case, punctuation and dropped trailing g."""
    a = normalize(left)
    b = normalize(right)
    if a == b:
        return True
    shorter, longer = (a, b) if len(a) < len(b) else (b, a)
    if len(shorter) < G_DROP_MIN_LENGTH:
        return False
    return longer == shorter + "g"


def lines_match(typed: str, expected: str) -> bool:
    """Return True when every word of ``typed`` matches ``expected`` in order."""
    typed_words = typed.split()
    expected_words = expected.split()
    if len(typed_words) != len(expected_words):
        return False
    return all(words_match(a, b) for a, b in zip(typed_words, expected_words))


def next_word_hint(typed: str, expected: str) -> str:
    """Return the expected word the user is currently on or about to start."""
    expected_words = expected.split()
    typed_count = len(typed.split())
    if typed and not typed[-1].isspace():
        index = typed_count - 1
    else:
        index = typed_count
    if 0 <= index < len(expected_words):
        return expected_words[index]
    return ""
