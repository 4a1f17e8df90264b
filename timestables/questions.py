"""Question generation for a game."""

from __future__ import annotations

import logging
import random
from typing import List, Tuple

from .models import MIN_FACTOR, Question, Settings

logger = logging.getLogger(__name__)


def generate_questions(settings: Settings, rng: random.Random | None = None) -> Tuple[Question, ...]:
    """Return the ordered questions for one game.

    Fixed amounts draw a multiplier per question independently, so repeats are
    expected. ``QuestionAmount.ALL`` asks every multiplier once, ascending
    unless ``random_order`` is set.
    """

    settings.validate()
    rng = rng or random.Random()

    if settings.question_amount.is_fixed:
        questions = [
            Question(settings.table, rng.randint(MIN_FACTOR, settings.max_multiplier))
            for _ in range(settings.question_count)
        ]
    else:
        questions = _all_questions(settings)
        if settings.random_order:
            rng.shuffle(questions)

    logger.debug(
        "Generated %d questions for the %d times table (up to x%d, amount %s)",
        len(questions),
        settings.table,
        settings.max_multiplier,
        settings.question_amount.value,
    )
    return tuple(questions)


def _all_questions(settings: Settings) -> List[Question]:
    return [
        Question(settings.table, multiplier)
        for multiplier in range(MIN_FACTOR, settings.max_multiplier + 1)
    ]


__all__ = ["generate_questions"]
