"""
Logging System for jpaz
=======================

Provides colored, structured logging with phase tracking for the CLI.
Log output goes to stderr; stdout is reserved for reports.
IMPORTANT: No emojis in console output (Windows encoding issues).
"""

import logging
import sys
import time
from typing import Optional, Dict, Union
from contextlib import contextmanager
from datetime import datetime
from colorama import Fore, Style, init

# Initialize colorama for Windows
init()

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


# Phase definitions
class Phase:
    """Phase constants for an analysis run"""
    READ_INPUT = "READ_INPUT"
    ANALYSIS = "ANALYSIS"
    REPORT = "REPORT"

# Phase colors
PHASE_COLORS = {
    Phase.READ_INPUT: Fore.CYAN,
    Phase.ANALYSIS: Fore.GREEN,
    Phase.REPORT: Fore.MAGENTA,
}

# Phase icons (text-based, no emojis for Windows)
PHASE_ICONS = {
    Phase.READ_INPUT: "[IN ]",
    Phase.ANALYSIS: "[ANA]",
    Phase.REPORT: "[OUT]",
}


def setup_logging(level: Union[int, str] = logging.WARNING, stream=None) -> logging.Logger:
    """
    Attach a single stderr handler to the root logger.

    Calling it again replaces the handler installed by a previous call, so
    repeated CLI invocations in one process do not duplicate output.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_jpaz_handler", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    handler._jpaz_handler = True
    root.addHandler(handler)
    root.setLevel(level)
    return root


class TimingTracker:
    """Track timing for phases and operations"""

    def __init__(self):
        self._timings: Dict[str, float] = {}
        self._start_times: Dict[str, float] = {}

    def start(self, key: str):
        """Start timing for a key"""
        self._start_times[key] = time.perf_counter()

    def end(self, key: str) -> float:
        """End timing and return elapsed seconds"""
        if key not in self._start_times:
            return 0.0
        elapsed = time.perf_counter() - self._start_times[key]
        self._timings[key] = elapsed
        del self._start_times[key]
        return elapsed

    def get_all(self) -> Dict[str, float]:
        """Get all recorded timings"""
        return self._timings.copy()


class PhaseLogger:
    """
    Logger with phase tracking and visual formatting

    Usage:
        phase_logger = PhaseLogger(source="novel.txt", verbose=True)

        with phase_logger.phase(Phase.READ_INPUT):
            phase_logger.info("Reading input...")
            analyzer = analyze_input(path)

        phase_logger.log_timing_summary()
    """

    def __init__(
        self,
        source: str,
        verbose: bool = False,
        show_timings: bool = False,
        logger: Optional[logging.Logger] = None
    ):
        self.source = source
        self.verbose = verbose
        self.show_timings = show_timings
        self.logger = logger or logging.getLogger(__name__)
        self.timing_tracker = TimingTracker()
        self._current_phase: Optional[str] = None
        self._phase_stack = []

    @contextmanager
    def phase(self, phase_name: str, sub_label: Optional[str] = None):
        """
        Context manager for phase tracking with automatic timing

        Example:
            with phase_logger.phase(Phase.REPORT, sub_label="count"):
                pass
        """
        self._enter_phase(phase_name, sub_label)
        try:
            yield self
        finally:
            self._exit_phase(phase_name)

    def _enter_phase(self, phase_name: str, sub_label: Optional[str] = None):
        """Enter a new phase"""
        self._phase_stack.append(self._current_phase)
        self._current_phase = phase_name

        timing_key = f"phase_{phase_name}_{len(self._phase_stack)}"
        self.timing_tracker.start(timing_key)

        color = PHASE_COLORS.get(phase_name, Fore.WHITE)
        icon = PHASE_ICONS.get(phase_name, "[???]")
        timestamp = datetime.now().strftime("%H:%M:%S")
        sub_str = f" - {sub_label}" if sub_label else ""
        self.logger.info(
            f"{color}{icon} {phase_name}{sub_str} ({self.source}) [{timestamp}]{Style.RESET_ALL}"
        )

    def _exit_phase(self, phase_name: str):
        """Exit current phase"""
        timing_key = f"phase_{phase_name}_{len(self._phase_stack)}"
        elapsed = self.timing_tracker.end(timing_key)

        color = PHASE_COLORS.get(phase_name, Fore.WHITE)
        icon = PHASE_ICONS.get(phase_name, "[???]")
        self.logger.info(
            f"{color}{icon} {phase_name} COMPLETED (Elapsed: {elapsed:.3f}s){Style.RESET_ALL}"
        )

        self._current_phase = self._phase_stack.pop() if self._phase_stack else None

    def info(self, message: str):
        """Log info message with current phase context"""
        if self._current_phase:
            color = PHASE_COLORS.get(self._current_phase, Fore.WHITE)
            icon = PHASE_ICONS.get(self._current_phase, "[???]")
            self.logger.info(f"{color}{icon}{Style.RESET_ALL} {message}")
        else:
            self.logger.info(message)

    def debug(self, message: str):
        """Log debug message (only if verbose)"""
        if self.verbose:
            self.logger.debug(f"{Fore.WHITE}{Style.DIM}{message}{Style.RESET_ALL}")


    def log_input_summary(self, totals: Dict[str, int]):
        """Log per-category totals after ingestion"""
        summary = ", ".join(f"{label}={count}" for label, count in totals.items())
        self.info(f"Characters ingested: {summary}")

    def log_timing_summary(self):
        """Log timing summary for all phases (only if show_timings)"""
        if not self.show_timings:
            return

        timings = self.timing_tracker.get_all()
        if not timings:
            return

        separator = "=" * 40
        self.logger.info(f"{Fore.WHITE}{Style.BRIGHT}{separator}{Style.RESET_ALL}")
        self.logger.info(f"{Fore.WHITE}{Style.BRIGHT}TIMING SUMMARY{Style.RESET_ALL}")

        total_time = 0.0
        for key, elapsed in timings.items():
            # Extract phase name from key
            phase_name = key.replace("phase_", "").rsplit("_", 1)[0]
            color = PHASE_COLORS.get(phase_name, Fore.WHITE)
            self.logger.info(f"{color}{phase_name:20s} {elapsed:8.3f}s{Style.RESET_ALL}")
            total_time += elapsed

        self.logger.info(f"{Fore.WHITE}{Style.BRIGHT}TOTAL TIME: {total_time:.3f}s{Style.RESET_ALL}")
        self.logger.info(f"{Fore.WHITE}{Style.BRIGHT}{separator}{Style.RESET_ALL}")


# Convenience functions
def create_phase_logger(
    source: str,
    verbose: bool = False,
    show_timings: bool = False
) -> PhaseLogger:
    """Create a new PhaseLogger instance"""
    return PhaseLogger(
        source=source,
        verbose=verbose,
        show_timings=show_timings
    )
