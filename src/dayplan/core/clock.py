# src/dayplan/core/clock.py

from __future__ import annotations

import logging
import threading
from datetime import datetime

logger = logging.getLogger(__name__)


class SystemClock:
    """
    Real local clock.

    sleep_until() blocks the calling thread. It wakes up at least every
    poll_seconds to re-read the wall clock, so a suspended machine or a clock
    change does not make it overshoot the target by much.

    If stop_event is given, setting it cancels the wait (sleep_until -> False).
    """

    def __init__(
        self,
        *,
        poll_seconds: float = 30.0,
        stop_event: threading.Event | None = None,
    ) -> None:
        self._poll_s = max(0.01, float(poll_seconds))
        self._stop = stop_event if stop_event is not None else threading.Event()

    @property
    def stop_event(self) -> threading.Event:
        return self._stop

    def now(self) -> datetime:
        return datetime.now()

    def sleep_until(self, target: datetime) -> bool:
        remaining = (target - self.now()).total_seconds()
        if remaining <= 0:
            return not self._stop.is_set()

        logger.debug("Waiting %.1fs until %s", remaining, target.isoformat(timespec="minutes"))
        while remaining > 0:
            if self._stop.wait(min(remaining, self._poll_s)):
                logger.info("Wait until %s cancelled.", target.isoformat(timespec="minutes"))
                return False
            remaining = (target - self.now()).total_seconds()
        return True
