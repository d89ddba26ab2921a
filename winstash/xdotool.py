"""Window control through the xdotool executable.

Only three operations are needed: read the active window identifier, unmap a
window and map it back. Arguments are passed without a shell.
"""

__all__ = ["WindowControl", "XdotoolControl"]

import asyncio
from logging import Logger
from typing import Protocol

from .constants import XDOTOOL
from .logging_setup import get_logger
from .models import ToolUnavailable, WindowControlError


class WindowControl(Protocol):
    """Operations the dispatcher needs from a window control backend."""

    async def get_active_window(self) -> str:
        """Return the identifier of the focused window."""

    async def hide_window(self, identifier: str) -> None:
        """Hide (unmap) the window."""

    async def show_window(self, identifier: str) -> None:
        """Show (map) the window."""


class XdotoolControl:
    """xdotool backed window control.

    Raises ToolUnavailable when the executable can't be started at all and
    WindowControlError when it exits with a non zero status (for instance
    when a stored window doesn't exist anymore).
    """

    def __init__(self, executable: str = XDOTOOL, log: Logger | None = None) -> None:
        self.executable = executable
        self.log = log or get_logger("xdotool")

    async def _run(self, *args: str) -> str:
        """Run xdotool with `args` and return its standard output.

        Args:
            *args: xdotool sub command and parameters
        """
        command = (self.executable, *args)
        self.log.debug("running %s", " ".join(command))
        try:
            proc = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            self.log.debug("can't start %s: %s", self.executable, e)
            msg = f"Can't run {self.executable}, is it installed?"
            raise ToolUnavailable(msg) from e
        stdout, stderr = await proc.communicate()

        if proc.returncode != 0:
            error_text = stderr.decode(errors="replace").strip()
            msg = f"{self.executable} {args[0]} failed"
            if error_text:
                msg = f"{msg}: {error_text}"
            raise WindowControlError(msg, command, error_text)
        return stdout.decode(errors="replace")

    async def is_available(self) -> bool:
        """Check if xdotool can be executed."""
        try:
            await self._run("version")
        except (ToolUnavailable, WindowControlError):
            return False
        return True

    async def get_active_window(self) -> str:
        """Return the identifier of the currently focused window."""
        identifier = (await self._run("getactivewindow")).strip()
        if not identifier:
            msg = f"{self.executable} getactivewindow returned no window"
            raise WindowControlError(msg, (self.executable, "getactivewindow"))
        return identifier

    async def hide_window(self, identifier: str) -> None:
        """Unmap the window `identifier`."""
        await self._run("windowunmap", identifier)

    async def show_window(self, identifier: str) -> None:
        """Map the window `identifier`."""
        await self._run("windowmap", identifier)
