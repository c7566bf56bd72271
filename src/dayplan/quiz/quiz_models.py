# src/dayplan/quiz/quiz_models.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Question:
    """
    One multiple-choice question.

    answer is 1-based. Out-of-range values are clamped into 1..len(choices)
    rather than rejected (quiz files have always been read that way); the clamp
    is logged. With no choices the answer becomes 0 and nothing is correct.
    """

    text: str
    answer: int
    choices: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        raw = self.answer
        # Answer indices are unsigned in quiz files: a negative one counts as
        # "too large" and lands on the last choice.
        index = len(self.choices) if raw < 0 else raw
        self.answer = min(max(index, 1), len(self.choices))
        if self.answer != raw:
            logger.warning(
                "Question %r: answer index %d clamped to %d (%d choices)",
                self.text,
                raw,
                self.answer,
                len(self.choices),
            )

    @property
    def max_choice(self) -> int:
        # A question without choices still accepts "1" so the prompt can be answered.
        return max(1, len(self.choices))

    def is_correct(self, choice: int) -> bool:
        return choice == self.answer


@dataclass(slots=True, frozen=True)
class QuizResult:
    score: int
    total: int
    answered: int

    @property
    def completed(self) -> bool:
        return self.answered == self.total
