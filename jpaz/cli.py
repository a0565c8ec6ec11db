"""Command-line interface: simple Japanese text analysis tool."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional, Tuple

import json_utils as json
from config import config
from logging_utils import Phase, create_phase_logger, setup_logging

from . import __version__
from .analyzer import Analyzer
from .input_reader import STDIN_NAME, InputError, analyze_input
from .models import ALL_KINDS, CharKind, CountReport, ReportMetric
from .reports import (
    build_count_report,
    count_report_to_dict,
    format_count_report,
    format_frequencies,
)


class InvalidArgumentError(Exception):
    """Raised when CLI validation fails."""


def _char_kind(value: str) -> CharKind:
    try:
        return CharKind.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jpaz",
        description="Simple Japanese text analysis tool",
    )
    parser.add_argument("file", nargs="?", default=None, help="The file to analyze or stdin by default")
    parser.add_argument(
        "-f", "--frequency",
        type=_char_kind,
        action="append",
        default=[],
        metavar="KIND",
        help="Show a frequency table of all the characters of the character type (repeatable)",
    )
    parser.add_argument(
        "-u", "--unique", action="store_true", help="Print unique number of characters for all character types"
    )
    parser.add_argument(
        "-c", "--count", action="store_true", help="Print number of characters for all character types"
    )
    parser.add_argument(
        "-e", "--exclude",
        type=_char_kind,
        nargs="+",
        action="extend",
        default=[],
        metavar="KIND",
        help="Character types to exclude from counts (not frequencies)",
    )
    parser.add_argument("--json", dest="as_json", action="store_true", help="Output as JSON")
    parser.add_argument("--encoding", default=None, help=f"Input encoding (default: {config.INPUT_ENCODING})")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Log progress to stderr (-vv adds debug output and timings)"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.epilog = "KIND is one of: " + ", ".join(kind.value for kind in ALL_KINDS)
    return parser


def _log_level(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.getLevelName(config.LOG_LEVEL)


def _resolve_encoding(override: Optional[str]) -> str:
    try:
        return config.resolve_encoding(override)
    except LookupError as exc:
        raise InvalidArgumentError(f"unknown encoding: {override}") from exc


def _collect_reports(
    args: argparse.Namespace, analyzer: Analyzer
) -> Tuple[List[Tuple[CharKind, List[Tuple[str, int]]]], Optional[CountReport], Optional[CountReport]]:
    frequencies = [(kind, analyzer.frequencies(kind)) for kind in dict.fromkeys(args.frequency)]
    count_report = build_count_report(analyzer, ReportMetric.TOTAL, args.exclude) if args.count else None
    unique_report = build_count_report(analyzer, ReportMetric.UNIQUE, args.exclude) if args.unique else None
    return frequencies, count_report, unique_report


def _render_text(frequencies, count_report, unique_report) -> List[str]:
    decimals = config.REPORT.percent_decimals
    lines: List[str] = []
    for _, entries in frequencies:
        lines.extend(format_frequencies(entries))
    for report in (count_report, unique_report):
        if report is not None:
            lines.extend(format_count_report(report, decimals=decimals))
    return lines


def _render_json(frequencies, count_report, unique_report) -> str:
    decimals = config.REPORT.percent_decimals
    payload: Dict[str, Any] = {}
    if frequencies:
        payload["frequencies"] = {kind.label: entries for kind, entries in frequencies}
    if count_report is not None:
        payload["count"] = count_report_to_dict(count_report, decimals=decimals)
    if unique_report is not None:
        payload["unique"] = count_report_to_dict(unique_report, decimals=decimals)
    return json.dumps(payload, indent=2 if config.REPORT.json_indent else None)


def _run(args: argparse.Namespace) -> int:
    encoding = _resolve_encoding(args.encoding)
    source = args.file if args.file is not None else STDIN_NAME
    phase_logger = create_phase_logger(source, verbose=args.verbose >= 2, show_timings=args.verbose >= 2)

    try:
        with phase_logger.phase(Phase.READ_INPUT):
            phase_logger.debug(f"Decoding input as {encoding}")
            analyzer = analyze_input(args.file, encoding=encoding)
    except InputError as exc:
        print(f"Failed to read: {exc}", file=sys.stderr)
        return 1

    phase_logger.log_input_summary({kind.label: analyzer.total_count(kind) for kind in ALL_KINDS})

    with phase_logger.phase(Phase.ANALYSIS):
        frequencies, count_report, unique_report = _collect_reports(args, analyzer)

    if not frequencies and count_report is None and unique_report is None:
        phase_logger.debug("No report requested")
        return 0

    with phase_logger.phase(Phase.REPORT):
        if args.as_json:
            print(_render_json(frequencies, count_report, unique_report))
        else:
            for line in _render_text(frequencies, count_report, unique_report):
                print(line)

    phase_logger.log_timing_summary()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        parser.print_help(sys.stderr)
        return 2

    args = parser.parse_args(argv)
    setup_logging(_log_level(args.verbose))
    try:
        return _run(args)
    except InvalidArgumentError as exc:
        parser.error(str(exc))


if __name__ == "__main__":  # pragma: no cover - manual invocation only
    raise SystemExit(main())
