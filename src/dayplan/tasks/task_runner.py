# src/dayplan/tasks/task_runner.py

from __future__ import annotations

"""
Presenter / runner.

Prints the day's schedule:
- header naming today,
- untimed tasks in insertion order,
- timed tasks in ascending time order,
- a closing summary.

In run mode it follows the schedule live: after showing the current task it
previews the next one and blocks (through the injected Clock) until that
task's time. Nothing is waited for after the last task.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import TextIO

from ..core.ports import Clock
from .task_models import RunMode, Task
from .task_store import TaskStore

logger = logging.getLogger(__name__)

MSG_DONE = "You have finished all your tasks, congratulations! You've earned it!"
MSG_NOTHING = "Nothing to do today! Relax & enjoy!"
MSG_CANCELLED = "Schedule stopped before the last task."

CURRENT_MARK = ">> "
NEXT_MARK = "   Next: "


@dataclass(slots=True, frozen=True)
class RunSummary:
    untimed_count: int
    timed_count: int
    cancelled: bool = False

    @property
    def had_tasks(self) -> bool:
        return (self.untimed_count + self.timed_count) > 0


def format_header(today: date) -> str:
    return f"==== Tasks for Today ({today:%A, %d %B %Y}) ===="


def _emit(out: TextIO, text: str = "") -> None:
    out.write(text + "\n")


def present_tasks(
    store: TaskStore,
    out: TextIO,
    *,
    today: date,
    mode: RunMode = RunMode.LIST,
    clock: Clock | None = None,
) -> RunSummary:
    """
    Print (and in run mode, follow) the schedule held by `store`, consuming it.

    Raises CollisionError before anything is printed if the timed tasks
    contradict each other.
    """
    if mode == RunMode.RUN and clock is None:
        raise ValueError("run mode requires a clock")

    # Validate + order first: no partial schedule on contradictory input.
    store.sort_timed()

    untimed_count = len(store.untimed_tasks)
    timed_count = len(store.timed_tasks)
    logger.info("Presenting schedule mode=%s untimed=%d timed=%d", mode.value, untimed_count, timed_count)

    _emit(out, format_header(today))
    _emit(out)

    while (task := store.pop_untimed()) is not None:
        _emit(out, task.render())
    if untimed_count:
        _emit(out)

    cancelled = False
    if mode == RunMode.RUN and clock is not None:
        cancelled = not _run_timed(store, out, clock)
    else:
        while (task := store.pop_timed()) is not None:
            _emit(out, task.render())

    if timed_count and not cancelled:
        _emit(out)

    summary = RunSummary(untimed_count=untimed_count, timed_count=timed_count, cancelled=cancelled)
    if cancelled:
        _emit(out)
        _emit(out, MSG_CANCELLED)
    else:
        _emit(out, MSG_DONE if summary.had_tasks else MSG_NOTHING)
    out.flush()
    return summary


def _run_timed(store: TaskStore, out: TextIO, clock: Clock) -> bool:
    """
    Show each timed task and wait for the next one's time.

    Returns False if a wait was cancelled; remaining tasks stay in the store.
    """
    while (current := store.pop_timed()) is not None:
        _emit(out, CURRENT_MARK + current.render())

        upcoming: Task | None = store.peek_timed()
        if upcoming is None:
            out.flush()
            break

        _emit(out, NEXT_MARK + upcoming.render())
        out.flush()

        if upcoming.time is None:
            continue

        logger.debug("Current=%r next=%r at %s", current.description, upcoming.description, upcoming.format_time())
        if not clock.sleep_until(upcoming.time):
            logger.info("Run cancelled while waiting for %s", upcoming.format_time())
            return False

    return True
