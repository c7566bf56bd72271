"""
Task subsystem.

Components:
- task_models.py: data structures (Task, RunMode)
- task_parser.py: "[HH:MM ]Description" lines -> Task records
- task_store.py: untimed/timed collections, collision check, ordering
- task_runner.py: prints the day's schedule, optionally following it live
"""
