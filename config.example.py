# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "DAYPLAN_APP_NAME": "Program name shown in --help (default: dayplan).",
    "DAYPLAN_LOG_LEVEL": "Console (stderr) logging level (default: WARNING).",
    "DAYPLAN_LOG_TO_FILE": "Also write DEBUG logs to <data_dir>/dayplan.log (true/false).",
    # Paths (gitignored)
    "DAYPLAN_DATA_DIR": "Local data directory for log files (default: .local/dayplan).",
    # Default inputs
    "DAYPLAN_TASKS_FILE": "Task list used when `dayplan tasks` gets no FILE (default: stdin).",
    "DAYPLAN_QUIZ_FILE": "Quiz file used when `dayplan quiz` gets no FILE.",
    # Task runner
    "DAYPLAN_TASKS_MODE": "Default presentation mode: list or run (default: list).",
    "DAYPLAN_RUN_POLL_SECONDS": "How often a run-mode wait re-reads the wall clock (default: 30, min 1).",
}
