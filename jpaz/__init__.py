"""
jpaz - Japanese script character analysis.

Classifies each character of a text as Hiragana, Katakana, Kanji or Other and
keeps per-character frequency tables for every category.

Core Analysis:
    from jpaz import Analyzer, CharKind

    analyzer = Analyzer()
    analyzer.ingest_string("だから今日も一旦家に帰って")

    analyzer.total_count(CharKind.KANJI)     # 6
    analyzer.unique_count(CharKind.HIRAGANA)  # 7
    analyzer.frequencies(CharKind.KANJI)     # [("今", 1), ("日", 1), ...]

Reports:
    from jpaz import ReportMetric, build_count_report, format_count_report

    report = build_count_report(analyzer, ReportMetric.TOTAL, exclude=[CharKind.OTHER])
    print("\\n".join(format_count_report(report)))

The ``jpaz`` console script (``jpaz.cli``) wraps all of the above.
"""

__version__ = "0.1.0"

from .models import (
    ALL_KINDS,
    CharKind,
    CountReport,
    CountRow,
    ReportMetric,
)
from .classifier import (
    classify,
    classify_codepoint,
)
from .analyzer import Analyzer
from .reports import (
    build_count_report,
    calculate_percentage,
    count_report_to_dict,
    format_count_report,
    format_frequencies,
)
from .input_reader import (
    InputError,
    InputOpenError,
    InputReadError,
    analyze_input,
    open_input,
    read_lines,
)

__all__ = [
    # Models
    "ALL_KINDS",
    "CharKind",
    "CountReport",
    "CountRow",
    "ReportMetric",
    # Classification
    "classify",
    "classify_codepoint",
    # Analysis
    "Analyzer",
    # Reports
    "build_count_report",
    "calculate_percentage",
    "count_report_to_dict",
    "format_count_report",
    "format_frequencies",
    # Input
    "InputError",
    "InputOpenError",
    "InputReadError",
    "analyze_input",
    "open_input",
    "read_lines",
]
