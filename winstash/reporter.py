"""Turn failures into user-facing messages."""

__all__ = ["classify_decode_error", "classify_os_error", "report", "report_unexpected"]

from logging import Logger
from pathlib import Path

from .logging_setup import get_logger
from .models import AccessDenied, IOFailure, Mode, StoreError, WinstashError

_ACCESS_MESSAGES = {
    Mode.READ: "Permission denied: can't read {path}",
    Mode.WRITE: "Permission denied: can't write {path}",
}

_IO_MESSAGES = {
    Mode.READ: "Unable to read {path}: {reason}",
    Mode.WRITE: "Unable to write {path}: {reason}",
}


def classify_os_error(exc: OSError, mode: Mode, path: Path) -> StoreError:
    """Convert an OSError raised while accessing a log into a StoreError.

    Args:
        exc: The original exception
        mode: Kind of access which failed
        path: The log file being accessed

    Returns:
        An AccessDenied or IOFailure instance, chained by the caller
    """
    if isinstance(exc, PermissionError):
        return AccessDenied(_ACCESS_MESSAGES[mode].format(path=path), path, mode)
    if isinstance(exc, FileNotFoundError):
        return IOFailure(f"{path} does not exist (or its folder is missing)", path, mode)
    reason = exc.strerror or str(exc)
    return IOFailure(_IO_MESSAGES[mode].format(path=path, reason=reason), path, mode)


def classify_decode_error(exc: UnicodeDecodeError, path: Path) -> IOFailure:
    """Convert a log holding bytes which are not UTF-8 into an IOFailure."""
    reason = f"not valid UTF-8 (byte {exc.start})"
    return IOFailure(_IO_MESSAGES[Mode.READ].format(path=path, reason=reason), path, Mode.READ)


def report(error: WinstashError, log: Logger | None = None) -> None:
    """Write a single line describing `error` on the error stream."""
    log = log or get_logger()
    log.error("%s", error)
    if error.__cause__ is not None:
        log.debug("caused by: %r", error.__cause__)


def report_unexpected(log: Logger | None = None) -> None:
    """Report the exception being handled, with its traceback."""
    log = log or get_logger()
    log.critical("Unhandled exception:", exc_info=True)
