"""Shared fixtures; puts the flat src/ modules on the import path."""

import logging
import sys
from datetime import date
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from activity_log import ACTIVITY_LOGGER  # noqa: E402
from todo_models import new_task  # noqa: E402
from task_list import TaskListEngine  # noqa: E402


@pytest.fixture
def engine() -> TaskListEngine:
    return TaskListEngine()


@pytest.fixture
def activity(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """caplog capturing INFO lines from the activity logger."""
    caplog.set_level(logging.INFO, logger=ACTIVITY_LOGGER)
    return caplog


@pytest.fixture
def make_task():
    def _make(description: str = "Buy milk", due: date = date(2024, 3, 1)):
        return new_task(description, due)
    return _make
