"""winstash command line entry point."""

import asyncio
import sys
from pathlib import Path

from .constants import COMMANDS, HELP_FLAGS
from .debug import is_debug
from .dispatcher import Dispatcher
from .help import get_help, get_usage
from .logging_setup import get_logger, init_logger
from .models import ExitCode, UsageError, WinstashError
from .reporter import report, report_unexpected
from .stacks import resolve_folder
from .xdotool import WindowControl, XdotoolControl

__all__ = ["main", "parse_command", "run_command", "use_param"]


def use_param(args: list[str], txt: str) -> str:
    """Check if parameter `txt` is in `args`.

    if found, removes it from `args` & returns the argument value

    Raises:
        UsageError: if `txt` is the last argument (no value)
    """
    v = ""
    if txt in args:
        i = args.index(txt)
        if i + 1 >= len(args):
            msg = f"{txt} requires a value"
            raise UsageError(msg)
        v = args[i + 1]
        del args[i : i + 2]
    return v


def parse_command(args: list[str]) -> str:
    """Validate the remaining arguments and return the command keyword.

    Returns "help" for --help and -h.

    Raises:
        UsageError: for zero, several or unknown arguments
    """
    if len(args) != 1:
        msg = f"Expected exactly one argument, got {len(args)}\n{get_usage()}"
        raise UsageError(msg)
    keyword = args[0]
    if keyword in HELP_FLAGS:
        return "help"
    if keyword not in COMMANDS:
        msg = f"Invalid argument: {keyword}\n{get_usage()}"
        raise UsageError(msg)
    return keyword


async def run_command(keyword: str, folder: Path, control: WindowControl | None = None) -> str:
    """Run a validated command keyword against the logs in `folder`.

    Returns:
        The identifier of the window which was hidden or shown
    """
    dispatcher = Dispatcher(folder, control)
    if is_debug() and isinstance(dispatcher.control, XdotoolControl) and not await dispatcher.control.is_available():
        dispatcher.log.debug("%s doesn't seem to work", dispatcher.control.executable)
    return await dispatcher.run(keyword)


def _setup_logging(args: list[str]) -> None:
    """Initialize logging, honoring `--debug FILE` (removed from `args`)."""
    try:
        debug_flag = use_param(args, "--debug")
    except UsageError:
        init_logger()
        raise
    if debug_flag:
        try:
            init_logger(filename=debug_flag, force_debug=True)
        except OSError as e:
            init_logger(force_debug=True)
            msg = f"Can't open the debug log {debug_flag}: {e.strerror or e}"
            raise UsageError(msg) from e
    else:
        init_logger()


def main(argv: list[str] | None = None) -> None:
    """Run the command."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        _setup_logging(args)
    except UsageError as e:
        report(e)
        sys.exit(e.exit_code)

    log = get_logger("startup")
    try:
        keyword = parse_command(args)
        if keyword == "help":
            print(get_help())
            sys.exit(ExitCode.SUCCESS)
        folder = resolve_folder()
        log.debug("logs folder: %s", folder)
        identifier = asyncio.run(run_command(keyword, folder))
        log.info("%s: %s", keyword, identifier)
    except WinstashError as e:
        report(e)
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception:  # pylint: disable=W0718
        report_unexpected()
        sys.exit(ExitCode.INTERNAL_ERROR)
    sys.exit(ExitCode.SUCCESS)


if __name__ == "__main__":
    main()
