# src/dayplan/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- builds the per-run context (settings, clock, today) once,
- opens the input source (file or stdin),
- loads the task store / quiz questions from it.
"""

from __future__ import annotations

import contextlib
import logging
import sys
import threading
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from ..config import Settings, get_settings
from ..core.clock import SystemClock
from ..core.errors import InputUnavailableError
from ..core.state import RunContext
from ..quiz.quiz_loader import load_questions
from ..quiz.quiz_models import Question
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)

STDIN_NAME = "-"


def create_context(
    *,
    settings: Settings | None = None,
    stop_event: threading.Event | None = None,
) -> RunContext:
    """
    Create the RunContext for this process.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()
    clock = SystemClock(poll_seconds=settings.run_poll_seconds, stop_event=stop_event)
    return RunContext.create(settings, clock)


def describe_source(path: str | Path | None) -> str:
    if path is None or str(path) == STDIN_NAME:
        return "<stdin>"
    return str(path)


@contextlib.contextmanager
def open_input(path: str | Path | None, *, stdin: TextIO | None = None) -> Iterator[TextIO]:
    """
    Yield a text stream for `path`; None or "-" means standard input.

    Raises InputUnavailableError if the file cannot be opened.
    """
    if path is None or str(path) == STDIN_NAME:
        yield stdin if stdin is not None else sys.stdin
        return

    try:
        fh = open(Path(path), encoding="utf-8")
    except OSError as exc:
        raise InputUnavailableError(str(path), exc.strerror or str(exc)) from exc
    with fh:
        yield fh


def _read_lines(path: str | Path | None, stdin: TextIO | None) -> list[str]:
    with open_input(path, stdin=stdin) as fh:
        try:
            lines = fh.readlines()
        except (OSError, UnicodeDecodeError) as exc:
            raise InputUnavailableError(describe_source(path), str(exc)) from exc
    logger.debug("Read %d line(s) from %s", len(lines), describe_source(path))
    return lines


def load_task_store(
    path: str | Path | None,
    ctx: RunContext,
    *,
    stdin: TextIO | None = None,
) -> TaskStore:
    lines = _read_lines(path, stdin)
    store = TaskStore()
    store.load(lines, ctx.today)
    return store


def load_quiz(path: str | Path, *, stdin: TextIO | None = None) -> list[Question]:
    return load_questions(_read_lines(path, stdin))
