"""
Character Analyzer - per-category frequency tables for Japanese text.

The Analyzer owns one frequency table per CharKind, all present from
construction. Text is fed in with ``ingest_string`` (or ``ingest_char``) and
the tables are read back with ``frequencies``, ``unique_count`` and
``total_count``. The analyzer does no I/O and no formatting.

Example:
    analyzer = Analyzer()
    analyzer.ingest_string("ランドセルを置いて")

    analyzer.total_count(CharKind.KATAKANA)   # 5
    analyzer.frequencies(CharKind.HIRAGANA)   # [("を", 1), ("い", 1), ("て", 1)]
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, Iterable, List, Tuple

from .classifier import classify
from .models import ALL_KINDS, CharKind

logger = logging.getLogger(__name__)


class Analyzer:
    """Accumulates character counts per script category."""

    def __init__(self):
        self._tables: Dict[CharKind, Counter] = {kind: Counter() for kind in ALL_KINDS}

    @classmethod
    def from_text(cls, text: str) -> "Analyzer":
        """
        Build an analyzer from a block of text, one ingestion per line.

        Only ``\\n`` and ``\\r\\n`` end a line. Other separators such as form
        feed or U+2028 stay in the text and are counted as Other.
        """
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        analyzer = cls()
        analyzer.ingest_lines(line[:-1] if line.endswith("\r") else line for line in lines)
        return analyzer

    # ------------------------------------------------------------------
    # Ingestion
    # ------------------------------------------------------------------

    def ingest_char(self, char: str) -> None:
        """Classify ``char`` and count it in its category's table."""
        self._tables[classify(char)][char] += 1

    def ingest_string(self, text: str) -> None:
        """Ingest every character of ``text`` left to right."""
        for char in text:
            self.ingest_char(char)

    def ingest_lines(self, lines: Iterable[str]) -> int:
        """
        Ingest each line of an iterable.

        Lines are expected without their trailing newline; the caller is
        responsible for stripping it.

        Returns:
            Number of lines ingested
        """
        line_count = 0
        for line in lines:
            self.ingest_string(line)
            line_count += 1
        logger.debug("Ingested %d line(s)", line_count)
        return line_count

    def merge(self, other: "Analyzer") -> None:
        """Add every count recorded by ``other`` into this analyzer."""
        for kind in ALL_KINDS:
            self._tables[kind].update(other._tables[kind])

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def frequencies(self, kind: CharKind) -> List[Tuple[str, int]]:
        """
        Return ``(char, count)`` pairs for a category, ascending by count.

        Only the count is a sort key; characters with equal counts come back
        in the order they were first seen.
        """
        return sorted(self._tables[kind].items(), key=lambda item: item[1])

    def unique_count(self, kind: CharKind) -> int:
        """Number of distinct characters recorded for a category."""
        return len(self._tables[kind])

    def total_count(self, kind: CharKind) -> int:
        """Sum of all counts recorded for a category."""
        return sum(self._tables[kind].values())

    def snapshot(self) -> Dict[str, Dict[str, int]]:
        """Plain-dict copy of every table keyed by display label."""
        return {kind.label: dict(self._tables[kind]) for kind in ALL_KINDS}

    def __repr__(self) -> str:
        totals = ", ".join(f"{kind.label}={self.total_count(kind)}" for kind in ALL_KINDS)
        return f"Analyzer({totals})"
