# src/dayplan/quiz/quiz_runner.py

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TextIO

from .quiz_models import Question, QuizResult

logger = logging.getLogger(__name__)


def _read_choice(prompt: str, out: TextIO, inp: TextIO, max_choice: int) -> int:
    """Prompt until a number in 1..max_choice is entered. Raises EOFError at end of input."""
    while True:
        out.write(prompt)
        out.flush()
        line = inp.readline()
        if line == "":
            raise EOFError("input ended before an answer was given")
        try:
            choice = int(line.strip())
        except ValueError:
            continue
        if 1 <= choice <= max_choice:
            return choice


def ask_question(question: Question, out: TextIO, inp: TextIO) -> bool:
    """Print the question and its choices, read an answer, report and return correctness."""
    out.write(question.text + "\n")
    for i, choice in enumerate(question.choices, start=1):
        out.write(f"{i}. {choice}\n")

    picked = _read_choice(f"Choose 1-{question.max_choice}: ", out, inp, question.max_choice)
    correct = question.is_correct(picked)
    out.write(("Correct!" if correct else "Incorrect!") + "\n\n")
    return correct


def run_quiz(questions: Sequence[Question], out: TextIO, inp: TextIO) -> QuizResult:
    score = 0
    answered = 0
    for question in questions:
        try:
            correct = ask_question(question, out, inp)
        except EOFError:
            logger.info("Input ended after %d/%d question(s)", answered, len(questions))
            out.write("\n")
            break
        answered += 1
        if correct:
            score += 1

    out.write(f"Your score: {score}/{len(questions)}\n")
    out.flush()
    return QuizResult(score=score, total=len(questions), answered=answered)
