# src/dayplan/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the RunContext, then runs one of:
- `dayplan tasks [FILE] [--run]`: print (or follow) today's schedule,
- `dayplan quiz FILE`: ask the questions of a quiz file on the terminal.
"""

from __future__ import annotations

import argparse
import logging
import signal
import sys
import threading

from ..config import Settings, get_settings
from ..core.errors import CollisionError, InputUnavailableError
from ..logging_setup import setup_logging
from ..quiz.quiz_runner import run_quiz
from ..tasks.task_models import RunMode
from ..tasks.task_runner import present_tasks
from .bootstrap import STDIN_NAME, create_context, describe_source, load_quiz, load_task_store

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_CANCELLED = 130


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=settings.app_name, description="Daily task list and quiz runner.")
    sub = parser.add_subparsers(dest="command", required=True)

    p_tasks = sub.add_parser("tasks", help="print today's tasks, timed ones in time order")
    p_tasks.add_argument(
        "file",
        nargs="?",
        default=str(settings.tasks_file) if settings.tasks_file else STDIN_NAME,
        help="task list file, one '[HH:MM ]Description' per line ('-' for stdin)",
    )
    p_tasks.add_argument(
        "--run",
        action="store_true",
        default=RunMode.from_setting(settings.tasks_mode) == RunMode.RUN,
        help="follow the schedule live, waiting for each timed task",
    )

    p_quiz = sub.add_parser("quiz", help="run a multiple-choice quiz")
    p_quiz.add_argument(
        "file",
        nargs="?",
        default=str(settings.quiz_file) if settings.quiz_file else None,
        help="quiz file",
    )
    return parser


def _install_stop_signals(stop: threading.Event) -> None:
    def _handle_signal(signum, _frame) -> None:
        logger.info("Signal %s received, stopping...", signum)
        stop.set()

    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            signal.signal(sig, _handle_signal)
        except (ValueError, OSError):
            # Not in the main thread, or signal unsupported on this platform.
            logger.debug("Cannot install handler for signal %s", sig)


def _cmd_tasks(args: argparse.Namespace, settings: Settings) -> int:
    mode = RunMode.RUN if args.run else RunMode.LIST

    stop = threading.Event()
    if mode == RunMode.RUN:
        _install_stop_signals(stop)

    ctx = create_context(settings=settings, stop_event=stop)
    store = load_task_store(args.file, ctx)
    summary = present_tasks(store, sys.stdout, today=ctx.today, mode=mode, clock=ctx.clock)

    return EXIT_CANCELLED if summary.cancelled else EXIT_OK


def _cmd_quiz(args: argparse.Namespace, settings: Settings) -> int:
    if args.file is None or args.file == STDIN_NAME:
        # Answers are read from stdin, so the quiz itself must come from a file.
        print("A quiz file is required (answers are read from standard input).", file=sys.stderr)
        return EXIT_ERROR
    questions = load_quiz(args.file)
    run_quiz(questions, sys.stdout, sys.stdin)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.data_dir, console_level=console_level, log_to_file=settings.log_to_file)

    args = build_parser(settings).parse_args(argv)
    logger.info("Starting %s %s (source=%s)", settings.app_name, args.command, describe_source(args.file))

    try:
        if args.command == "tasks":
            return _cmd_tasks(args, settings)
        return _cmd_quiz(args, settings)
    except InputUnavailableError as exc:
        logger.error("%s", exc)
        return EXIT_ERROR
    except CollisionError as exc:
        logger.error("%s", exc)
        return EXIT_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
