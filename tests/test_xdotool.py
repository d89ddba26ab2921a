"""Tests for the xdotool window control."""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from winstash.models import ToolUnavailable, WindowControlError
from winstash.xdotool import XdotoolControl

from .testtools import make_process

PIPES = {"stdout": asyncio.subprocess.PIPE, "stderr": asyncio.subprocess.PIPE}


@pytest.mark.asyncio
async def test_get_active_window():
    with patch("asyncio.create_subprocess_exec", new=AsyncMock(return_value=make_process(b"62914567\n"))) as spawn:
        assert await XdotoolControl().get_active_window() == "62914567"
    spawn.assert_awaited_once_with("xdotool", "getactivewindow", **PIPES)


@pytest.mark.asyncio
async def test_get_active_window_without_output():
    with patch("asyncio.create_subprocess_exec", new=AsyncMock(return_value=make_process(b"\n"))):
        with pytest.raises(WindowControlError, match="no window"):
            await XdotoolControl().get_active_window()


@pytest.mark.asyncio
async def test_hide_and_show_window():
    with patch("asyncio.create_subprocess_exec", new=AsyncMock(return_value=make_process())) as spawn:
        control = XdotoolControl()
        await control.hide_window("62914567")
        spawn.assert_awaited_with("xdotool", "windowunmap", "62914567", **PIPES)
        await control.show_window("62914567")
        spawn.assert_awaited_with("xdotool", "windowmap", "62914567", **PIPES)


@pytest.mark.asyncio
async def test_identifier_is_not_shell_interpreted():
    with patch("asyncio.create_subprocess_exec", new=AsyncMock(return_value=make_process())) as spawn:
        await XdotoolControl().show_window("1; rm -rf ~")
    spawn.assert_awaited_once_with("xdotool", "windowmap", "1; rm -rf ~", **PIPES)


@pytest.mark.asyncio
async def test_custom_executable():
    with patch("asyncio.create_subprocess_exec", new=AsyncMock(return_value=make_process())) as spawn:
        await XdotoolControl("/opt/bin/xdotool").hide_window("1")
    spawn.assert_awaited_once_with("/opt/bin/xdotool", "windowunmap", "1", **PIPES)


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [FileNotFoundError(2, "No such file"), PermissionError(13, "Permission denied")])
async def test_missing_tool(error):
    with patch("asyncio.create_subprocess_exec", new=AsyncMock(side_effect=error)):
        control = XdotoolControl()
        for call in (control.get_active_window(), control.hide_window("1"), control.show_window("1")):
            with pytest.raises(ToolUnavailable, match="is it installed"):
                await call


@pytest.mark.asyncio
async def test_failing_tool():
    """A stale window makes xdotool exit with an error."""
    proc = make_process(stderr=b"X Error of failed request: BadWindow\n", returncode=1)
    with patch("asyncio.create_subprocess_exec", new=AsyncMock(return_value=proc)):
        with pytest.raises(WindowControlError) as exc_info:
            await XdotoolControl().show_window("123")
    error = exc_info.value
    assert str(error) == "xdotool windowmap failed: X Error of failed request: BadWindow"
    assert error.command == ("xdotool", "windowmap", "123")
    assert error.stderr == "X Error of failed request: BadWindow"


@pytest.mark.asyncio
async def test_failing_tool_without_message():
    with patch("asyncio.create_subprocess_exec", new=AsyncMock(return_value=make_process(returncode=1))):
        with pytest.raises(WindowControlError, match="^xdotool windowunmap failed$"):
            await XdotoolControl().hide_window("123")


@pytest.mark.asyncio
async def test_is_available():
    with patch("asyncio.create_subprocess_exec", new=AsyncMock(return_value=make_process(b"xdotool version 3.2\n"))):
        assert await XdotoolControl().is_available()
    with patch("asyncio.create_subprocess_exec", new=AsyncMock(side_effect=FileNotFoundError)):
        assert not await XdotoolControl().is_available()
    with patch("asyncio.create_subprocess_exec", new=AsyncMock(return_value=make_process(returncode=1))):
        assert not await XdotoolControl().is_available()
