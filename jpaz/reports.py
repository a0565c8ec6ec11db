"""Aggregate count reports built from an Analyzer."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from .analyzer import Analyzer
from .models import ALL_KINDS, CharKind, CountReport, CountRow, ReportMetric

DEFAULT_PERCENT_DECIMALS = 2


def calculate_percentage(count: int, total: int) -> float:
    """Share of ``count`` in ``total`` as 0-100; 0.0 when ``total`` is zero."""
    if total <= 0:
        return 0.0
    return count / total * 100.0


def build_count_report(
    analyzer: Analyzer,
    metric: ReportMetric,
    exclude: Optional[Iterable[CharKind]] = None,
) -> CountReport:
    """
    Build a total or unique count report.

    Excluded categories are left out of the rows, of the percentage
    denominator and of the grand total.

    Args:
        analyzer: Populated analyzer
        metric: ReportMetric.TOTAL or ReportMetric.UNIQUE
        exclude: Categories to leave out of the report

    Returns:
        CountReport with one row per remaining category in fixed order
    """
    excluded = set(exclude or ())
    if metric == ReportMetric.TOTAL:
        get_count = analyzer.total_count
    else:
        get_count = analyzer.unique_count

    counts = [(kind, get_count(kind)) for kind in ALL_KINDS if kind not in excluded]
    total = sum(count for _, count in counts)

    rows = [
        CountRow(kind=kind, count=count, percentage=calculate_percentage(count, total))
        for kind, count in counts
    ]
    return CountReport(
        metric=metric,
        rows=rows,
        total=total,
        excluded=[kind for kind in ALL_KINDS if kind in excluded],
    )


def format_count_report(report: CountReport, decimals: int = DEFAULT_PERCENT_DECIMALS) -> List[str]:
    """Render a report as ``"<Label> <count> <pct>%"`` lines plus ``"Total <n>"``."""
    lines = [f"{row.label} {row.count} {row.percentage:.{decimals}f}%" for row in report.rows]
    lines.append(f"Total {report.total}")
    return lines


def format_frequencies(frequencies: Iterable[tuple]) -> List[str]:
    """Render ``(char, count)`` pairs as ``"<char> <count>"`` lines."""
    return [f"{char} {count}" for char, count in frequencies]


def count_report_to_dict(report: CountReport, decimals: int = DEFAULT_PERCENT_DECIMALS) -> Dict[str, Any]:
    """JSON-ready representation of a report, keyed by display label."""
    return {
        "metric": report.metric.value,
        "categories": {
            row.label: {"count": row.count, "percentage": round(row.percentage, decimals)}
            for row in report.rows
        },
        "total": report.total,
        "excluded": [kind.label for kind in report.excluded],
    }
