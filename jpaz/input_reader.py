"""Line-oriented input for the analyzer: a named file or standard input."""

from __future__ import annotations

import io
import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, TextIO

from .analyzer import Analyzer

logger = logging.getLogger(__name__)

STDIN_NAME = "<stdin>"

# Only "\n" terminates a line; a lone "\r" is text and counted as Other
LINE_TERMINATOR = "\n"


class InputError(Exception):
    """Base exception for input failures."""


class InputOpenError(InputError):
    """Raised when the named input file cannot be opened."""


class InputReadError(InputError):
    """Raised when a line cannot be read or decoded mid-stream."""


@contextmanager
def open_input(path: Optional[str], encoding: str = "utf-8") -> Iterator[TextIO]:
    """
    Open the input source as a text stream.

    Args:
        path: File to read, or None for standard input
        encoding: Text encoding used to decode the input

    Yields:
        Text stream positioned at the start of the input

    Raises:
        InputOpenError: If the file does not exist or cannot be opened
    """
    if path is None:
        buffer = getattr(sys.stdin, "buffer", None)
        if buffer is None:
            # Already a text stream (e.g. replaced in tests)
            yield sys.stdin
            return
        wrapper = io.TextIOWrapper(buffer, encoding=encoding, errors="strict", newline=LINE_TERMINATOR)
        try:
            yield wrapper
        finally:
            # Leave sys.stdin's buffer open
            wrapper.detach()
        return

    try:
        handle = Path(path).open("r", encoding=encoding, errors="strict", newline=LINE_TERMINATOR)
    except OSError as exc:
        raise InputOpenError(f"{path}: {exc.strerror or exc}") from exc

    with handle:
        yield handle


def read_lines(stream: TextIO, source_name: str = STDIN_NAME) -> Iterator[str]:
    """
    Yield each line of ``stream`` without its trailing ``\\n`` or ``\\r\\n``.

    The stream must not translate newlines (see ``open_input``), otherwise
    a lone ``\\r`` would already have ended a line.

    Raises:
        InputReadError: If a line cannot be decoded or read
    """
    lineno = 0
    try:
        for line in stream:
            lineno += 1
            if line.endswith(LINE_TERMINATOR):
                line = line[:-1]
                if line.endswith("\r"):
                    line = line[:-1]
            yield line
    except UnicodeDecodeError as exc:
        raise InputReadError(
            f"{source_name}:{lineno + 1}: stream did not contain valid {exc.encoding} text"
        ) from exc
    except OSError as exc:
        raise InputReadError(f"{source_name}:{lineno + 1}: {exc.strerror or exc}") from exc


def analyze_input(
    path: Optional[str],
    encoding: str = "utf-8",
    analyzer: Optional[Analyzer] = None,
) -> Analyzer:
    """
    Feed every line of the input source into an analyzer.

    A read failure aborts the whole run; the partially filled analyzer is
    never returned.

    Raises:
        InputOpenError: If the file cannot be opened
        InputReadError: If a line cannot be read
    """
    analyzer = analyzer if analyzer is not None else Analyzer()
    source_name = path if path is not None else STDIN_NAME

    with open_input(path, encoding=encoding) as stream:
        line_count = analyzer.ingest_lines(read_lines(stream, source_name))

    logger.info("Read %d line(s) from %s", line_count, source_name)
    return analyzer
