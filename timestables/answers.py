"""Builds the grid of candidate answers shown for a question."""

from __future__ import annotations

import logging
import random
from typing import List, Sequence

from .errors import InsufficientDecoys, InsufficientDistractors, InvalidSettings
from .models import ALL_PRODUCTS, ANIMALS, AnswerSet, Candidate, DecoyCandidate, NumberCandidate, Question

logger = logging.getLogger(__name__)


def build_answer_set(
    question: Question,
    decoy_count: int,
    distractor_count: int,
    rng: random.Random | None = None,
) -> AnswerSet:
    """Return the shuffled tiles for ``question``.

    The correct product appears exactly once; distractors are other products
    from the 2..12 table and never repeat; decoys are distinct animal names.
    """

    if decoy_count < 0 or distractor_count < 0:
        raise InvalidSettings("Candidate counts cannot be negative")
    rng = rng or random.Random()
    answer = question.answer

    distractors = _take_shuffled(sorted(ALL_PRODUCTS - {answer}), distractor_count, rng)
    if distractors is None:
        raise InsufficientDistractors(distractor_count, len(ALL_PRODUCTS - {answer}))

    animals: List[str] = []
    if decoy_count > 0:
        taken = _take_shuffled(ANIMALS, decoy_count, rng)
        if taken is None:
            raise InsufficientDecoys(decoy_count, len(ANIMALS))
        animals = taken

    candidates: List[Candidate] = [NumberCandidate(answer)]
    candidates.extend(NumberCandidate(value) for value in distractors)
    candidates.extend(DecoyCandidate(animal) for animal in animals)
    rng.shuffle(candidates)

    logger.debug(
        "Built %d candidates for %d x %d (%d distractors, %d decoys)",
        len(candidates),
        question.multiplicand,
        question.multiplier,
        len(distractors),
        len(animals),
    )
    return AnswerSet(answer=answer, candidates=tuple(candidates))


def _take_shuffled(pool: Sequence, count: int, rng: random.Random) -> List | None:
    if len(pool) < count:
        return None
    shuffled = list(pool)
    rng.shuffle(shuffled)
    return shuffled[:count]


__all__ = ["ALL_PRODUCTS", "ANIMALS", "build_answer_set"]
