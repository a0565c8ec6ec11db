"""Script classification of single Unicode code points."""

from __future__ import annotations

from typing import Tuple

from .models import CharKind

# Inclusive (start, end) code point ranges, checked in this order.
HIRAGANA_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x3041, 0x3096),
)

KATAKANA_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x30A1, 0x30FA),
)

# CJK Unified Ideographs and extensions, plus compatibility ideographs.
# Chinese-only ideographs are counted as Kanji as well.
KANJI_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x4E00, 0x9FFF),    # CJK Unified Ideographs
    (0x3400, 0x4DBF),    # Extension A
    (0x2A700, 0x2B73F),  # Extension C
    (0x2B740, 0x2B81F),  # Extension D
    (0x2B820, 0x2CEAF),  # Extension E
    (0x2CEB0, 0x2EBEF),  # Extension F
    (0xF900, 0xFAFF),    # Compatibility Ideographs
)

CLASSIFICATION_TABLE: Tuple[Tuple[CharKind, Tuple[Tuple[int, int], ...]], ...] = (
    (CharKind.HIRAGANA, HIRAGANA_RANGES),
    (CharKind.KATAKANA, KATAKANA_RANGES),
    (CharKind.KANJI, KANJI_RANGES),
)


def _in_ranges(codepoint: int, ranges: Tuple[Tuple[int, int], ...]) -> bool:
    return any(start <= codepoint <= end for start, end in ranges)


def classify_codepoint(codepoint: int) -> CharKind:
    """Return the category of a code point; anything unmatched is ``OTHER``."""
    for kind, ranges in CLASSIFICATION_TABLE:
        if _in_ranges(codepoint, ranges):
            return kind
    return CharKind.OTHER


def classify(char: str) -> CharKind:
    """
    Classify a single character.

    Args:
        char: A one-character string (one Unicode scalar value)

    Returns:
        The CharKind the character belongs to

    Raises:
        ValueError: If ``char`` is not exactly one character long
    """
    if len(char) != 1:
        raise ValueError(f"classify() expects a single character, got {len(char)}: {char!r}")
    return classify_codepoint(ord(char))
