"""Shared constants for winstash."""

__all__ = [
    "COMMANDS",
    "HELP_FLAGS",
    "NORMAL_LOG_NAME",
    "PRIORITY_LOG_NAME",
    "XDOTOOL",
]

# Log files, relative to the temporary directory
NORMAL_LOG_NAME = "proidlog"
PRIORITY_LOG_NAME = "desproidlog"

XDOTOOL = "xdotool"

# Command keyword -> (stack name, operation)
COMMANDS = {
    "hide": ("normal", "push"),
    "show": ("normal", "pop"),
    "deshide": ("priority", "push"),
    "desshow": ("priority", "pop"),
}

HELP_FLAGS = ("--help", "-h")
