# src/dayplan/core/errors.py

from __future__ import annotations

"""
Error taxonomy.

Only two conditions stop a run:
- InputUnavailableError: the task/quiz source cannot be opened or read
- CollisionError: two different tasks claim the same time

A malformed line is not an exception: the parser returns None and moves on.
"""

from dataclasses import dataclass
from datetime import datetime


class DayplanError(Exception):
    """Base class for errors reported by the CLI."""


class InputUnavailableError(DayplanError):
    def __init__(self, source: str, reason: str = "") -> None:
        self.source = source
        self.reason = reason
        msg = f"Could not open input '{source}'"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


@dataclass(slots=True, frozen=True)
class Collision:
    """Two different descriptions scheduled at the same time."""

    time: datetime
    first: str
    second: str

    def __str__(self) -> str:
        return f"{self.time:%H:%M}: {self.first!r} vs {self.second!r}"


class CollisionError(DayplanError):
    """
    Raised when timed tasks cannot be ordered because they contradict each other.

    Carries every colliding pair; the first one is also exposed as
    time/first/second for convenience.
    """

    def __init__(self, collisions: list[Collision]) -> None:
        if not collisions:
            raise ValueError("CollisionError requires at least one collision")
        self.collisions = list(collisions)
        head = self.collisions[0]
        self.time = head.time
        self.first = head.first
        self.second = head.second
        details = "; ".join(str(c) for c in self.collisions)
        super().__init__(f"Task time collision at {details}")
