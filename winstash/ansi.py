"""ANSI styles for the error lines printed on the terminal."""

import os
import sys
from typing import TextIO

__all__ = [
    "RESET",
    "LogStyles",
    "make_style",
    "should_colorize",
]

_ESC = "\x1b["

RESET = f"{_ESC}0m"

_BOLD = "1"
_DIM = "2"
_RED = "31"
_YELLOW = "33"


def should_colorize(stream: TextIO | None = None) -> bool:
    """Tell if the messages written on `stream` (stderr by default) get colors.

    NO_COLOR disables them, FORCE_COLOR enables them even when not on a TTY.
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    if stream is None:
        stream = sys.stderr
    return hasattr(stream, "isatty") and stream.isatty()


def make_style(*codes: str) -> tuple[str, str]:
    """Return the (prefix, suffix) surrounding a styled log line."""
    if not codes:
        return ("", RESET)
    return (f"{_ESC}{';'.join(codes)}m", RESET)


class LogStyles:
    """Styles of the warning and error log lines."""

    WARNING = (_YELLOW, _DIM)
    ERROR = (_RED, _BOLD)
    CRITICAL = (_RED, _BOLD)
