# dominant_colour/utils.py
from __future__ import annotations

"""
Shared utilities for dominant_colour.

Includes compact time formatting, tidy print-based logging used by the
library's debug paths and by the CLI.
"""

import io
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterable, Iterator, Optional, TextIO, Tuple

# Per-context log target; None means sys.stdout.
_log_stream: ContextVar[Optional[TextIO]] = ContextVar("_log_stream", default=None)


#  Time / size formatting


def format_seconds_compact(seconds: float) -> str:
    """Human-friendly seconds: '<ms>ms', '<s>s', or 'Mm Ss'."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f}ms"
    if seconds < 60.0:
        return f"{seconds:.3f}s"
    minutes = int(seconds // 60)
    return f"{minutes}m {seconds - 60 * minutes:.1f}s"


def format_total_duration_compact(seconds: float) -> str:
    """Compact total duration: 'Mm Ss', 'Ss.s', or 'ms'."""
    if seconds >= 60.0:
        minutes = int(seconds // 60)
        rem = int(round(seconds - 60 * minutes))
        return f"{minutes}m {rem}s"
    if seconds >= 1.0:
        return f"{seconds:.1f}s"
    return f"{seconds * 1000.0:.1f}ms"


# Pretty logging


def _display(value: Any) -> str:
    """on/off for bools, thousands separators for ints, str() for the rest."""
    if isinstance(value, bool):
        return "on" if value else "off"
    if isinstance(value, int):
        return f"{value:,}"
    return str(value)


def format_percentage(x: float, decimals: int = 1) -> str:
    """Format a 0..1 share as a percentage."""
    return f"{x * 100.0:.{decimals}f}%"


def key_value_pairs_to_string(
    pairs: Iterable[Tuple[str, Any]], sep: str = "  ", eq: str = ": "
) -> str:
    """Join (name, value) pairs as 'Name: value' blocks."""
    return sep.join(f"{name}{eq}{_display(value)}" for name, value in pairs)


def print_config_line(
    section: str, pairs: Iterable[Tuple[str, Any]], debug: bool
) -> None:
    """
    Emit a single human-readable config line, e.g.:
      [run] Colours: 5  Quality: 10  Ignore white: off
    Routes to debug_log() when debug=True, else to log().
    """
    line = f"[{section}] {key_value_pairs_to_string(pairs)}"
    (debug_log if debug else log)(line)


def _out() -> TextIO:
    stream = _log_stream.get()
    return stream if stream is not None else sys.stdout


@contextmanager
def capture_log() -> Iterator[io.StringIO]:
    """
    Collect log output of the current context (thread) into a StringIO.
    Other threads keep writing to their own target.
    """
    buf = io.StringIO()
    token = _log_stream.set(buf)
    try:
        yield buf
    finally:
        _log_stream.reset(token)


def print_banner(title: str) -> None:
    """Section banner."""
    print(f"\n=== {title} ===", file=_out(), flush=True)


def enable_line_buffered_stdout() -> None:
    """Enable line-buffered stdout when the stream supports .reconfigure()."""
    reconfig = getattr(sys.stdout, "reconfigure", None)
    if callable(reconfig):
        try:
            reconfig(line_buffering=True, write_through=True)
        except (OSError, ValueError):
            pass


def log(message: str) -> None:
    """Plain log line."""
    print(message, file=_out(), flush=True)


def debug_log(message: str) -> None:
    """Debug log line."""
    print(f"[debug] {message}", file=_out(), flush=True)


def warn(message: str) -> None:
    """Warning log line."""
    print(f"[warn] {message}", file=_out(), flush=True)


def error(message: str) -> None:
    """Error log line to stderr, or to the captured stream inside capture_log()."""
    stream = _log_stream.get()
    target = stream if stream is not None else sys.stderr
    print(f"[error] {message}", file=target, flush=True)


__all__ = [
    "format_seconds_compact",
    "format_total_duration_compact",
    "format_percentage",
    "key_value_pairs_to_string",
    "print_config_line",
    "print_banner",
    "enable_line_buffered_stdout",
    "capture_log",
    "log",
    "debug_log",
    "warn",
    "error",
]
