"""Route a command keyword to a push (hide) or pop (show) on a stack."""

__all__ = ["Dispatcher"]

from pathlib import Path

from .constants import COMMANDS
from .logging_setup import get_logger
from .models import StackName, UsageError
from .stacks import get_store, parse_stack
from .xdotool import WindowControl, XdotoolControl


class Dispatcher:
    """Run the hide/show actions against the logs stored in `folder`."""

    def __init__(self, folder: Path, control: WindowControl | None = None) -> None:
        self.folder = folder
        self.control = control or XdotoolControl()
        self.log = get_logger("dispatcher")

    async def hide(self, stack: StackName) -> str:
        """Record the active window on `stack`, then hide it.

        The window is recorded first: if hiding fails the entry is kept.

        Returns:
            The hidden window identifier
        """
        identifier = await self.control.get_active_window()
        await get_store(self.folder, stack).push(identifier)
        await self.control.hide_window(identifier)
        self.log.debug("hid %s (%s)", identifier, stack.label)
        return identifier

    async def show(self, stack: StackName) -> str:
        """Take the last window recorded on `stack` and show it.

        The entry is consumed even if showing the window fails.

        Returns:
            The shown window identifier
        """
        identifier = await get_store(self.folder, stack).pop()
        await self.control.show_window(identifier)
        self.log.debug("showed %s (%s)", identifier, stack.label)
        return identifier

    async def run(self, keyword: str) -> str:
        """Execute the action named `keyword` (hide, show, deshide or desshow).

        Raises:
            UsageError: for unknown keywords
        """
        try:
            stack_name, operation = COMMANDS[keyword]
        except KeyError as e:
            msg = f"Invalid argument: {keyword}"
            raise UsageError(msg) from e
        stack = parse_stack(stack_name)
        if operation == "push":
            return await self.hide(stack)
        return await self.show(stack)
