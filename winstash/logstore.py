"""Log-backed stack of window identifiers.

A log is a plain text file holding one identifier per line, oldest first.
`push` appends a line, `pop` removes the last one and atomically replaces the
file with the remaining lines (temporary file in the same folder + rename).

There is no locking: two invocations popping the same log at the same time
may both read the same state and one of the updates will be lost.
"""

__all__ = ["LogStore"]

import contextlib
import os
import tempfile
from pathlib import Path

import aiofiles
import aiofiles.os

from .logging_setup import get_logger
from .models import EmptyLog, Mode, StackName
from .reporter import classify_decode_error, classify_os_error

SEPARATOR = "\n"


class LogStore:
    """Durable stack of identifiers stored in `path`."""

    def __init__(self, path: Path, stack: StackName | None = None) -> None:
        self.path = Path(path)
        self.stack = stack
        self.log = get_logger("logstore")

    def __repr__(self) -> str:
        return f"<LogStore {self.path}>"

    async def push(self, identifier: str) -> None:
        """Append `identifier` as the new last entry.

        Args:
            identifier: The window identifier, must be a non empty single line

        Raises:
            AccessDenied: if the file can't be created or opened
            IOFailure: on any other I/O error
        """
        if not identifier or SEPARATOR in identifier:
            msg = f"Invalid window identifier: {identifier!r}"
            raise ValueError(msg)
        try:
            async with aiofiles.open(self.path, "a", encoding="utf-8") as f:
                # "a" mode places the cursor at the end of the existing data
                prefix = SEPARATOR if await f.tell() > 0 else ""
                await f.write(prefix + identifier)
        except OSError as e:
            raise classify_os_error(e, Mode.WRITE, self.path) from e
        self.log.debug("pushed %s to %s", identifier, self.path)

    async def entries(self) -> list[str]:
        """Return the current entries, oldest first.

        A missing file is an empty log.
        """
        try:
            async with aiofiles.open(self.path, encoding="utf-8") as f:
                content = await f.read()
        except FileNotFoundError:
            return []
        except OSError as e:
            raise classify_os_error(e, Mode.READ, self.path) from e
        except UnicodeDecodeError as e:
            raise classify_decode_error(e, self.path) from e
        return [line for line in content.split(SEPARATOR) if line]

    async def pop(self) -> str:
        """Remove the last entry and return it.

        Raises:
            EmptyLog: if the log has no entry (the file is left untouched)
            AccessDenied: if the file can't be read or replaced
            IOFailure: on any other I/O error
        """
        items = await self.entries()
        if not items:
            raise EmptyLog(self.stack)
        identifier = items.pop()
        await self._replace(SEPARATOR.join(items))
        self.log.debug("popped %s from %s", identifier, self.path)
        return identifier

    async def _replace(self, content: str) -> None:
        """Atomically replace the log content.

        The temporary file is either renamed over the log or deleted.
        """
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=self.path.parent)
        except OSError as e:
            raise classify_os_error(e, Mode.WRITE, self.path) from e

        pending: str | None = tmp_name
        try:
            async with aiofiles.open(fd, "w", encoding="utf-8") as f:
                await f.write(content)
                await f.flush()
                os.fsync(fd)
            with contextlib.suppress(OSError):
                # keep the original permissions, mkstemp creates 0600 files
                original = await aiofiles.os.stat(self.path)
                os.chmod(tmp_name, original.st_mode & 0o777)
            await aiofiles.os.replace(tmp_name, self.path)
            pending = None
        except OSError as e:
            raise classify_os_error(e, Mode.WRITE, self.path) from e
        finally:
            if pending is not None:
                with contextlib.suppress(FileNotFoundError):
                    await aiofiles.os.unlink(pending)
