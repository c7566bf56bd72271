# src/dayplan/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, datetime

from ..core.errors import Collision, CollisionError
from .task_models import Task
from .task_parser import parse_task_lines

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store for a single run.

    Two sequences:
    - untimed_tasks: insertion order, a plain to-do list
    - timed_tasks: parse order until sort_timed() orders it by time

    The presenter consumes both destructively via pop_untimed()/pop_timed().
    """

    def __init__(self) -> None:
        self.untimed_tasks: list[Task] = []
        self.timed_tasks: list[Task] = []

    def __len__(self) -> int:
        return len(self.untimed_tasks) + len(self.timed_tasks)

    @property
    def has_tasks(self) -> bool:
        return len(self) > 0

    # ---- building ----

    def add_task(self, task: Task) -> None:
        if task.is_timed:
            self.timed_tasks.append(task)
        else:
            self.untimed_tasks.append(task)

    def load(self, lines: Iterable[str], today: date) -> int:
        """Parse `lines` and add every resulting task. Returns the number of tasks added."""
        added = 0
        for task in parse_task_lines(lines, today):
            self.add_task(task)
            added += 1
        logger.info(
            "Loaded %d task(s): untimed=%d timed=%d",
            added,
            len(self.untimed_tasks),
            len(self.timed_tasks),
        )
        return added

    # ---- validation / ordering ----

    def find_collisions(self) -> list[Collision]:
        """
        Return every pair of timed tasks sharing a time with different descriptions.

        Identical (time, description) duplicates are not collisions.
        """
        seen: dict[datetime, list[str]] = {}
        collisions: list[Collision] = []
        for task in self.timed_tasks:
            if task.time is None:
                continue
            descriptions = seen.setdefault(task.time, [])
            if task.description in descriptions:
                continue
            for earlier in descriptions:
                collisions.append(Collision(time=task.time, first=earlier, second=task.description))
            descriptions.append(task.description)
        return collisions

    def sort_timed(self) -> list[Task]:
        """
        Order timed_tasks ascending by time, in place, and return them.

        Raises CollisionError (listing every colliding pair) instead of picking
        one of two tasks that claim the same time. Exact duplicates collapse into
        a single entry. Calling it again on a sorted store changes nothing.
        """
        collisions = self.find_collisions()
        if collisions:
            for c in collisions:
                logger.info("Time collision %s", c)
            raise CollisionError(collisions)

        unique: list[Task] = []
        seen: set[tuple[datetime | None, str]] = set()
        for task in self.timed_tasks:
            key = (task.time, task.description)
            if key in seen:
                logger.debug("Dropping duplicate task %s", task.render())
                continue
            seen.add(key)
            unique.append(task)

        # sorted() is stable; equal keys can only be exact duplicates by now.
        self.timed_tasks = sorted(unique, key=lambda t: t.sort_key)
        return self.timed_tasks

    # ---- consumption ----

    def pop_untimed(self) -> Task | None:
        return self.untimed_tasks.pop(0) if self.untimed_tasks else None

    def pop_timed(self) -> Task | None:
        return self.timed_tasks.pop(0) if self.timed_tasks else None

    def peek_timed(self) -> Task | None:
        return self.timed_tasks[0] if self.timed_tasks else None
