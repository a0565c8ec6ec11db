"""
jpaz Models - Data structures for character classification and reports.

Core Types:
- CharKind: Script category a character belongs to (Hiragana, Katakana, Kanji, Other)
- CountRow: One category line of an aggregate report
- CountReport: Aggregate report (total or unique counts) over non-excluded categories
"""

from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, Field


class CharKind(str, Enum):
    """Script categories recognized by the classifier."""

    HIRAGANA = "hiragana"
    KATAKANA = "katakana"
    KANJI = "kanji"
    OTHER = "other"

    @property
    def label(self) -> str:
        """Display label used in reports (e.g. ``Hiragana``)."""
        return self.value.capitalize()

    def __str__(self) -> str:
        return self.label

    @classmethod
    def parse(cls, value: str) -> "CharKind":
        """Resolve a CLI name or display label, case-insensitively."""
        normalized = (value or "").strip().lower()
        for kind in cls:
            if kind.value == normalized:
                return kind
        choices = ", ".join(kind.value for kind in cls)
        raise ValueError(f"invalid character kind '{value}' (choose from {choices})")


# Fixed report order
ALL_KINDS: Tuple[CharKind, ...] = (
    CharKind.HIRAGANA,
    CharKind.KATAKANA,
    CharKind.KANJI,
    CharKind.OTHER,
)


class ReportMetric(str, Enum):
    """Which analyzer query an aggregate report is built from."""

    TOTAL = "total"
    UNIQUE = "unique"


class CountRow(BaseModel):
    """A single category line: count and share of the report total."""

    kind: CharKind = Field(..., description="Category this row describes")
    count: int = Field(..., ge=0, description="Total or unique count for the category")
    percentage: float = Field(..., ge=0.0, description="Share of the report total, 0-100")

    @property
    def label(self) -> str:
        return self.kind.label


class CountReport(BaseModel):
    """Aggregate report over every category that was not excluded."""

    metric: ReportMetric = Field(..., description="Analyzer query the counts come from")
    rows: List[CountRow] = Field(default_factory=list, description="Rows in category order")
    total: int = Field(default=0, ge=0, description="Sum of row counts")
    excluded: List[CharKind] = Field(default_factory=list, description="Categories left out")
