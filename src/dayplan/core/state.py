# src/dayplan/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..config import Settings
from .ports import Clock


@dataclass(slots=True)
class RunContext:
    """
    Everything a single run needs, fixed once at program start.

    `today` is resolved from the clock exactly once so that every parsed time
    and the header refer to the same calendar day, even across midnight.
    """

    settings: Settings
    clock: Clock
    today: date

    @classmethod
    def create(cls, settings: Settings, clock: Clock) -> RunContext:
        return cls(settings=settings, clock=clock, today=clock.now().date())
