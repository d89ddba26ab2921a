"""Verbose logging switch, turned on by the DEBUG environment variable or --debug."""

import os

__all__ = [
    "is_debug",
    "set_debug",
]


class _Switch:
    """Holds the flag, so it can be flipped without a global statement."""

    enabled: bool = bool(os.environ.get("DEBUG"))


def is_debug() -> bool:
    """Return True when debug logs are requested."""
    return _Switch.enabled


def set_debug(value: bool) -> None:
    """Turn debug logs on or off."""
    _Switch.enabled = value
