"""Shared types and the error hierarchy."""

from enum import Enum, IntEnum
from pathlib import Path

from .constants import NORMAL_LOG_NAME, PRIORITY_LOG_NAME

__all__ = [
    "AccessDenied",
    "EmptyLog",
    "ExitCode",
    "IOFailure",
    "Mode",
    "StackName",
    "StoreError",
    "ToolUnavailable",
    "UsageError",
    "WindowControlError",
    "WinstashError",
]


class ExitCode(IntEnum):
    """Process exit codes."""

    SUCCESS = 0
    USAGE_ERROR = 1  # No command, too many or invalid arguments
    STORE_ERROR = 2  # Log file can't be read or written
    EMPTY_STACK = 3  # Nothing to show
    TOOL_ERROR = 4  # xdotool missing or failing
    INTERNAL_ERROR = 5  # Unexpected exception


class Mode(Enum):
    """Kind of access which failed, selects the error message."""

    READ = "read"
    WRITE = "write"


class StackName(Enum):
    """The two independent stacks, valued by their log filename."""

    NORMAL = NORMAL_LOG_NAME
    PRIORITY = PRIORITY_LOG_NAME

    @property
    def label(self) -> str:
        """Name used on the command line and in messages."""
        return self.name.lower()

    @property
    def filename(self) -> str:
        """Log filename inside the temporary directory."""
        return self.value


class WinstashError(Exception):
    """Base class for errors reported to the user."""

    exit_code = ExitCode.INTERNAL_ERROR


class UsageError(WinstashError):
    """Bad command line invocation."""

    exit_code = ExitCode.USAGE_ERROR


class StoreError(WinstashError):
    """A log file could not be accessed."""

    exit_code = ExitCode.STORE_ERROR

    def __init__(self, message: str, path: Path, mode: Mode) -> None:
        super().__init__(message)
        self.path = path
        self.mode = mode


class AccessDenied(StoreError):
    """Insufficient permission on a log file."""


class IOFailure(StoreError):
    """Any other I/O failure on a log file."""


class EmptyLog(WinstashError):
    """Pop on a stack having no entries."""

    exit_code = ExitCode.EMPTY_STACK

    def __init__(self, stack: StackName | None = None) -> None:
        super().__init__("No window to show")
        self.stack = stack


class ToolUnavailable(WinstashError):
    """The window control executable can't be invoked at all."""

    exit_code = ExitCode.TOOL_ERROR


class WindowControlError(WinstashError):
    """The window control executable ran but reported a failure."""

    exit_code = ExitCode.TOOL_ERROR

    def __init__(self, message: str, command: tuple[str, ...] = (), stderr: str = "") -> None:
        super().__init__(message)
        self.command = command
        self.stderr = stderr
