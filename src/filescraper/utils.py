"""Formatting and terminal helpers for File Scraper."""

import shutil
import sys
from typing import TextIO

_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB")


def human_size(num_bytes: float, precision: int = 2) -> str:
    """Format a byte count with binary units (e.g., '1.50 KB')."""
    value = float(num_bytes)
    unit = _SIZE_UNITS[0]
    for unit in _SIZE_UNITS:
        if abs(value) < 1024.0 or unit == _SIZE_UNITS[-1]:
            break
        value /= 1024.0
    return f"{value:.{precision}f} {unit}"


def human_speed(bytes_per_sec: float) -> str:
    """Format a copy rate (e.g., '2.5 MB/s')."""
    return f"{human_size(bytes_per_sec, precision=1)}/s"


def human_duration(seconds: float) -> str:
    """Format elapsed time with millisecond precision (e.g., '2m 3.500s')."""
    if seconds < 0:
        return "unknown"
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    minutes, secs = divmod(seconds, 60)
    if not minutes:
        return f"{secs:.3f}s"
    hours, minutes = divmod(int(minutes), 60)
    if not hours:
        return f"{minutes}m {secs:.3f}s"
    return f"{hours}h {minutes}m {secs:.3f}s"


def get_terminal_width(fallback: int = 80) -> int:
    return shutil.get_terminal_size((fallback, 24)).columns


def is_tty(stream: TextIO | None = None) -> bool:
    """Check whether output goes to an interactive terminal."""
    stream = stream if stream is not None else sys.stdout
    return hasattr(stream, "isatty") and stream.isatty()
