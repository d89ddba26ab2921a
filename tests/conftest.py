" generic fixtures "
from unittest.mock import AsyncMock, Mock

import pytest

from winstash.models import StackName
from winstash.stacks import get_log_path


def pytest_configure():
    "Runs once before all"
    from winstash.logging_setup import init_logger

    init_logger("/dev/null", force_debug=True)


@pytest.fixture
def folder(tmp_path):
    "Folder holding the logs"
    return tmp_path


@pytest.fixture
def normal_log(folder):
    "Path of the normal stack log"
    return get_log_path(folder, StackName.NORMAL)


@pytest.fixture
def priority_log(folder):
    "Path of the priority stack log"
    return get_log_path(folder, StackName.PRIORITY)


@pytest.fixture
def control():
    "A window control returning 0x01 as the active window"
    ctrl = Mock()
    ctrl.get_active_window = AsyncMock(return_value="0x01")
    ctrl.hide_window = AsyncMock()
    ctrl.show_window = AsyncMock()
    return ctrl
