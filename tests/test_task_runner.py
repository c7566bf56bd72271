# tests/test_task_runner.py

from __future__ import annotations

import io
from datetime import datetime

import pytest

from dayplan.core.errors import CollisionError
from dayplan.tasks.task_models import RunMode
from dayplan.tasks.task_runner import (
    MSG_CANCELLED,
    MSG_DONE,
    MSG_NOTHING,
    format_header,
    present_tasks,
)
from dayplan.tasks.task_store import TaskStore

from .fakes import FakeClock


def _store(today, text: str) -> TaskStore:
    store = TaskStore()
    store.load(io.StringIO(text), today)
    return store


def test_list_mode_prints_untimed_then_timed(today) -> None:
    store = _store(today, "7:00 Breakfast\nGeneric Task\n6:30  Go to work\nRead mail\n")
    out = io.StringIO()

    summary = present_tasks(store, out, today=today)

    assert out.getvalue().splitlines() == [
        format_header(today),
        "",
        "Generic Task",
        "Read mail",
        "",
        "06:30 -- Go to work",
        "07:00 -- Breakfast",
        "",
        MSG_DONE,
    ]
    assert summary.untimed_count == 2
    assert summary.timed_count == 2
    assert summary.had_tasks
    assert not summary.cancelled
    assert len(store) == 0


def test_empty_input_reports_nothing_to_do(today) -> None:
    out = io.StringIO()
    summary = present_tasks(TaskStore(), out, today=today)

    assert out.getvalue().splitlines() == [format_header(today), "", MSG_NOTHING]
    assert not summary.had_tasks


def test_header_names_today(today) -> None:
    header = format_header(today)
    assert header.startswith("==== Tasks for Today")
    assert "2026" in header and "19" in header


def test_collision_aborts_before_any_output(today) -> None:
    store = _store(today, "Generic\n6:00  Wake up\n6:00  Shower\n")
    out = io.StringIO()

    with pytest.raises(CollisionError):
        present_tasks(store, out, today=today)
    assert out.getvalue() == ""


def test_run_mode_marks_current_and_previews_next(today, fake_clock: FakeClock) -> None:
    store = _store(today, "Stretch\n6:00 Wake up\n8:00 Leave\n7:00 Breakfast\n")
    out = io.StringIO()

    summary = present_tasks(store, out, today=today, mode=RunMode.RUN, clock=fake_clock)

    assert out.getvalue().splitlines() == [
        format_header(today),
        "",
        "Stretch",
        "",
        ">> 06:00 -- Wake up",
        "   Next: 07:00 -- Breakfast",
        ">> 07:00 -- Breakfast",
        "   Next: 08:00 -- Leave",
        ">> 08:00 -- Leave",
        "",
        MSG_DONE,
    ]
    # One wait between each pair of timed tasks, none after the last one.
    assert fake_clock.waits == [datetime(2026, 10, 19, 7, 0), datetime(2026, 10, 19, 8, 0)]
    assert fake_clock.slept_seconds == [7200.0, 3600.0]
    assert not summary.cancelled


def test_run_mode_single_task_never_waits(today, fake_clock: FakeClock) -> None:
    store = _store(today, "9:00 Only one\n")
    present_tasks(store, io.StringIO(), today=today, mode=RunMode.RUN, clock=fake_clock)
    assert fake_clock.waits == []


def test_run_mode_past_time_returns_immediately(today) -> None:
    clock = FakeClock(current=datetime(2026, 10, 19, 10, 0))
    store = _store(today, "6:00 Wake up\n7:00 Breakfast\n")

    summary = present_tasks(store, io.StringIO(), today=today, mode=RunMode.RUN, clock=clock)

    assert clock.waits == [datetime(2026, 10, 19, 7, 0)]
    assert clock.slept_seconds == [0.0]
    assert clock.current == datetime(2026, 10, 19, 10, 0)
    assert summary.timed_count == 2


def test_run_mode_cancelled_wait_stops_the_run(today) -> None:
    clock = FakeClock(current=datetime(2026, 10, 19, 5, 0), cancel_after=0)
    store = _store(today, "6:00 Wake up\n7:00 Breakfast\n")
    out = io.StringIO()

    summary = present_tasks(store, out, today=today, mode=RunMode.RUN, clock=clock)

    lines = out.getvalue().splitlines()
    assert ">> 06:00 -- Wake up" in lines
    assert ">> 07:00 -- Breakfast" not in lines
    assert lines[-1] == MSG_CANCELLED
    assert summary.cancelled
    # The task we never reached is still in the store.
    assert [t.description for t in store.timed_tasks] == ["Breakfast"]


def test_run_mode_requires_clock(today) -> None:
    with pytest.raises(ValueError):
        present_tasks(TaskStore(), io.StringIO(), today=today, mode=RunMode.RUN)
