# src/dayplan/quiz/quiz_loader.py

from __future__ import annotations

"""
Quiz file format, one block per question:

    <question line>
    <answer index, 1-based>
    <choice>
    ...
    <blank line>

Blank lines between blocks are ignored. A block whose answer line is not a
number is skipped as a whole.
"""

import logging
import re
from collections.abc import Iterable

from .quiz_models import Question

logger = logging.getLogger(__name__)

_LEADING_INT_RE = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_answer_index(line: str) -> int | None:
    """Leading integer of `line` ("2", " 3 ", "1 (b)"), or None."""
    m = _LEADING_INT_RE.match(line)
    if not m:
        return None
    return int(m.group(1))


def load_questions(lines: Iterable[str]) -> list[Question]:
    it = (line.rstrip("\r\n") for line in lines)
    questions: list[Question] = []

    for text in it:
        if text == "":
            continue

        answer_line = next(it, None)
        if not answer_line:
            # EOF or blank line: the block ends before it has an answer.
            logger.warning("Skipping question %r: missing answer line", text)
            continue
        answer = parse_answer_index(answer_line)

        choices: list[str] = []
        for line in it:
            if line == "":
                break
            choices.append(line)

        if answer is None:
            logger.warning("Skipping question %r: invalid answer line %r", text, answer_line)
            continue

        questions.append(Question(text=text, answer=answer, choices=choices))

    logger.info("Loaded %d question(s)", len(questions))
    return questions
