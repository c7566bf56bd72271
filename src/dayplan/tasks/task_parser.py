# src/dayplan/tasks/task_parser.py

from __future__ import annotations

"""
Line parser.

Input format, one task per line:

    [HH:MM<whitespace>]Description

A line that does not start with a valid time is an untimed task. Blank lines
and lines holding only a time are dropped. Nothing here raises for bad input:
a line either yields a Task or None.
"""

import logging
import re
from collections.abc import Iterable, Iterator
from datetime import date, datetime, time

from .task_models import Task

logger = logging.getLogger(__name__)

_HHMM_RE = re.compile(r"^([0-9]{1,2}):([0-9]{2})$")


def parse_hhmm_token(token: str) -> tuple[int, int] | None:
    """Return (hour, minute) for 'H:MM' / 'HH:MM', or None if token is not a time of day."""
    m = _HHMM_RE.match(token)
    if not m:
        return None
    hh = int(m.group(1))
    mm = int(m.group(2))
    if not (0 <= hh <= 23 and 0 <= mm <= 59):
        return None
    return hh, mm


def parse_task_line(line: str, today: date) -> Task | None:
    """
    Parse one raw line into a Task.

    Returns None for blank lines and for lines whose description ends up empty
    (e.g. "07:30" on its own).
    """
    text = line.lstrip()
    if not text:
        return None

    # The time token ends at the first whitespace run (space, tab, ...).
    parts = text.split(None, 1)
    token = parts[0]
    rest = parts[1] if len(parts) > 1 else ""

    hhmm = parse_hhmm_token(token)
    if hhmm is None:
        description = text.rstrip()
        when = None
    else:
        description = rest.strip()
        when = datetime.combine(today, time(hour=hhmm[0], minute=hhmm[1]))

    if not description:
        return None

    return Task(description=description, time=when)


def parse_task_lines(lines: Iterable[str], today: date) -> Iterator[Task]:
    """Parse every line independently; skipped lines never affect the others."""
    for lineno, line in enumerate(lines, start=1):
        task = parse_task_line(line, today)
        if task is None:
            if line.strip():
                logger.debug("Skipping line %d: no description (%r)", lineno, line.rstrip("\n"))
            continue
        yield task
