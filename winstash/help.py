"""Help text for the winstash command."""

__all__ = ["COMMANDS_HELP", "get_help", "get_usage"]

from .constants import HELP_FLAGS, NORMAL_LOG_NAME, PRIORITY_LOG_NAME

COMMANDS_HELP = {
    "hide": "Hide the active window and push it on the normal stack.",
    "show": "Show the last window hidden with `hide`.",
    "deshide": "Hide the active window and push it on the priority stack.",
    "desshow": "Show the last window hidden with `deshide`.",
    "|".join(HELP_FLAGS): "Show this help.",
}


def get_usage() -> str:
    """Return the one line syntax reminder."""
    return "Usage: winstash [--debug FILE] <hide|show|deshide|desshow|--help>"


def get_help() -> str:
    """Get the documentation."""
    intro = f"""{get_usage()}

Hide windows and bring them back in reverse order, using xdotool.
The normal and priority stacks are independent.

Available commands:
"""
    commands = "\n".join(f" {name:20s} {doc}" for name, doc in COMMANDS_HELP.items())
    outro = f"""

Hidden windows are recorded in "{NORMAL_LOG_NAME}" and "{PRIORITY_LOG_NAME}" in the temporary directory.
Set DEBUG=1 (or use --debug FILE) for verbose logs."""
    return intro + commands + outro
