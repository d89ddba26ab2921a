"""Map stack names to their log files."""

__all__ = ["get_log_path", "get_store", "parse_stack", "resolve_folder"]

import tempfile
from pathlib import Path

from .logstore import LogStore
from .models import StackName


def resolve_folder() -> Path:
    """Return the folder holding the logs (the platform temporary directory).

    Call it once at startup and pass the result down.
    """
    return Path(tempfile.gettempdir())


def parse_stack(name: str) -> StackName:
    """Return the StackName matching `name` ("normal" or "priority").

    Raises:
        ValueError: for unknown names
    """
    for stack in StackName:
        if stack.label == name:
            return stack
    msg = f"Unknown stack: {name!r}"
    raise ValueError(msg)


def get_log_path(folder: Path, stack: StackName) -> Path:
    """Return the log file of `stack` in `folder`."""
    return folder / stack.filename


def get_store(folder: Path, stack: StackName) -> LogStore:
    """Return a LogStore for `stack` in `folder`."""
    return LogStore(get_log_path(folder, stack), stack)
