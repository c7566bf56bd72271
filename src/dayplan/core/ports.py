# src/dayplan/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task runner depends on a Clock Protocol instead of time.sleep/datetime.now,
so tests can simulate elapsed time without really waiting.
"""

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    """Wall clock + blocking wait."""

    def now(self) -> datetime: ...

    def sleep_until(self, target: datetime) -> bool:
        """
        Block until `target` (local, naive) is reached.

        Returns True when the target was reached (immediately if it is already
        in the past), False if the wait was cancelled.
        """
        ...
