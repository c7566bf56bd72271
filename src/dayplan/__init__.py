"""
dayplan: a daily task schedule printer/runner and a multiple-choice quiz.

Packages:
- tasks: line parser, task store, presenter/runner
- quiz: question loader and interactive runner
- core: errors, clock port, per-run state
- cli: argparse entrypoint and composition root
"""

__version__ = "0.1.0"
