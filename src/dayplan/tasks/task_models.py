# src/dayplan/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class RunMode(StrEnum):
    """How the timed section is presented."""

    LIST = "list"
    RUN = "run"  # wait for each task's time before moving to the next

    @classmethod
    def from_setting(cls, raw: str | None) -> RunMode:
        if not raw:
            return cls.LIST
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.LIST


@dataclass(slots=True, frozen=True)
class Task:
    """
    One line of the task list.

    time is None for untimed tasks (plain to-do entries). Timed tasks carry
    today's date combined with the parsed hour and minute.
    """

    description: str
    time: datetime | None = None

    @property
    def is_timed(self) -> bool:
        return self.time is not None

    @property
    def sort_key(self) -> tuple[int, datetime]:
        # Untimed tasks sort before every timed task.
        if self.time is None:
            return (0, datetime.min)
        return (1, self.time)

    def format_time(self) -> str:
        return f"{self.time:%H:%M}" if self.time is not None else ""

    def render(self) -> str:
        if self.time is None:
            return self.description
        return f"{self.format_time()} -- {self.description}"
