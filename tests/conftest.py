# tests/conftest.py

from __future__ import annotations

import logging
from datetime import date, datetime

import pytest

from dayplan.config import Settings

from .fakes import FakeClock


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """setup_logging() reconfigures the root logger; undo it after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    for h in list(root.handlers):
        # pytest's own capture handlers are subclasses; leave those alone.
        if type(h) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)


@pytest.fixture()
def today() -> date:
    return date(2026, 10, 19)


@pytest.fixture()
def fake_clock(today: date) -> FakeClock:
    """Simulated clock starting at 05:00 on `today`."""
    return FakeClock(current=datetime(today.year, today.month, today.day, 5, 0))


@pytest.fixture()
def settings(tmp_path) -> Settings:
    """
    Settings built explicitly rather than from the environment,
    to keep unit tests isolated and deterministic.
    """
    return Settings(
        app_name="dayplan",
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path / "data",
        tasks_file=None,
        quiz_file=None,
        tasks_mode="list",
        run_poll_seconds=30.0,
    )
