"""Dataclasses used across the game."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import FrozenSet, Iterator, Optional, Tuple, Union

from .errors import InvalidSettings

MIN_FACTOR = 2
MAX_FACTOR = 12

ALL_PRODUCTS: FrozenSet[int] = frozenset(
    left * right
    for left in range(MIN_FACTOR, MAX_FACTOR + 1)
    for right in range(MIN_FACTOR, MAX_FACTOR + 1)
)

ANIMALS: Tuple[str, ...] = (
    "bear", "buffalo", "chick", "chicken", "cow", "crocodile", "dog", "duck",
    "elephant", "frog", "giraffe", "goat", "gorilla", "hippo", "horse",
    "monkey", "moose", "narwhal", "owl", "panda", "parrot", "penguin", "pig",
    "rabbit", "rhino", "sloth", "snake", "walrus", "whale", "zebra",
)

# Every answer is itself a product, so this many others are always left.
MAX_DISTRACTORS = len(ALL_PRODUCTS) - 1
MAX_DECOYS = len(ANIMALS)


class QuestionAmount(str, Enum):
    """How many questions a game asks."""

    FIVE = "5"
    TEN = "10"
    TWENTY = "20"
    ALL = "All"

    @property
    def is_fixed(self) -> bool:
        return self is not QuestionAmount.ALL

    def resolve(self, max_multiplier: int) -> int:
        """Return the number of questions these settings produce."""

        if self is QuestionAmount.ALL:
            return max_multiplier - MIN_FACTOR + 1
        return int(self.value)


@dataclass(frozen=True)
class Settings:
    table: int = 2
    max_multiplier: int = 10
    question_amount: QuestionAmount = QuestionAmount.TEN
    random_order: bool = True

    def validate(self) -> None:
        """Raise :class:`InvalidSettings` if any field is out of range."""

        for name in ("table", "max_multiplier"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidSettings(f"{name} must be an integer, got {type(value).__name__}")
        if not MIN_FACTOR <= self.table <= MAX_FACTOR:
            raise InvalidSettings(
                f"table must be between {MIN_FACTOR} and {MAX_FACTOR}, got {self.table}"
            )
        if not MIN_FACTOR <= self.max_multiplier <= MAX_FACTOR:
            raise InvalidSettings(
                f"max_multiplier must be between {MIN_FACTOR} and {MAX_FACTOR}, got {self.max_multiplier}"
            )
        if not isinstance(self.question_amount, QuestionAmount):
            raise InvalidSettings(f"Unknown question amount: {self.question_amount!r}")
        if not isinstance(self.random_order, bool):
            raise InvalidSettings("random_order must be a boolean")

    @property
    def question_count(self) -> int:
        return self.question_amount.resolve(self.max_multiplier)


@dataclass(frozen=True)
class Question:
    multiplicand: int
    multiplier: int

    @property
    def answer(self) -> int:
        return self.multiplicand * self.multiplier

    def as_text(self, flipped: bool = False) -> str:
        if flipped:
            return f"{self.multiplier} × {self.multiplicand} ="
        return f"{self.multiplicand} × {self.multiplier} ="


class CandidateState(str, Enum):
    """Presentation annotation attached to a tile after an answer."""

    NONE = "none"
    CORRECT = "correct"
    REVEALED = "revealed"
    WRONG_CHOSEN = "wrong_chosen"
    FADED = "faded"


@dataclass(frozen=True)
class NumberCandidate:
    value: int
    state: CandidateState = CandidateState.NONE

    @property
    def key(self) -> str:
        return str(self.value)

    @property
    def is_annotated(self) -> bool:
        return self.state is not CandidateState.NONE

    def with_state(self, state: CandidateState) -> "NumberCandidate":
        return replace(self, state=state)


@dataclass(frozen=True)
class DecoyCandidate:
    animal: str
    state: CandidateState = CandidateState.NONE

    @property
    def key(self) -> str:
        return self.animal

    @property
    def is_annotated(self) -> bool:
        return self.state is not CandidateState.NONE

    def with_state(self, state: CandidateState) -> "DecoyCandidate":
        return replace(self, state=state)


Candidate = Union[NumberCandidate, DecoyCandidate]


@dataclass(frozen=True)
class AnswerSet:
    """Ordered tiles for one question; exactly one number equals ``answer``."""

    answer: int
    candidates: Tuple[Candidate, ...]

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self.candidates)

    def __len__(self) -> int:
        return len(self.candidates)

    def numbers(self) -> Tuple[NumberCandidate, ...]:
        return tuple(c for c in self.candidates if isinstance(c, NumberCandidate))

    def decoys(self) -> Tuple[DecoyCandidate, ...]:
        return tuple(c for c in self.candidates if isinstance(c, DecoyCandidate))

    def find_number(self, value: int) -> Optional[NumberCandidate]:
        return next((c for c in self.numbers() if c.value == value), None)


@dataclass(frozen=True)
class Continuing:
    next_index: int


@dataclass(frozen=True)
class Finished:
    final_score: int


SessionStatus = Union[Continuing, Finished]


@dataclass(frozen=True)
class Outcome:
    correct: bool
    answer: int
    selected: int
    answer_set: AnswerSet
    status: SessionStatus

    @property
    def finished(self) -> bool:
        return isinstance(self.status, Finished)


@dataclass(frozen=True)
class GameConfig:
    """Tunable rules for building and annotating answer grids."""

    distractor_count: int = 9
    decoy_count: int = 6
    decoy_state_on_correct: CandidateState = CandidateState.FADED
    decoy_state_on_wrong: CandidateState = CandidateState.FADED
    correct_delay: float = 0.75
    incorrect_delay: float = 1.5
    flip_questions: bool = True

    @property
    def tile_count(self) -> int:
        return 1 + self.distractor_count + self.decoy_count

    def validate(self) -> None:
        limits = {"distractor_count": MAX_DISTRACTORS, "decoy_count": MAX_DECOYS}
        for name, limit in limits.items():
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidSettings(f"{name} must be an integer, got {type(value).__name__}")
            if not 0 <= value <= limit:
                raise InvalidSettings(f"{name} must be between 0 and {limit}, got {value}")
        for name in ("correct_delay", "incorrect_delay"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidSettings(f"{name} must be a number, got {type(value).__name__}")
            if not math.isfinite(value) or value < 0:
                raise InvalidSettings(f"{name} must be a finite, non-negative number, got {value}")
        if not isinstance(self.flip_questions, bool):
            raise InvalidSettings(f"flip_questions must be true or false, got {self.flip_questions!r}")

    def to_dict(self) -> dict:
        return {
            "distractor_count": self.distractor_count,
            "decoy_count": self.decoy_count,
            "decoy_state_on_correct": self.decoy_state_on_correct.value,
            "decoy_state_on_wrong": self.decoy_state_on_wrong.value,
            "correct_delay": self.correct_delay,
            "incorrect_delay": self.incorrect_delay,
            "flip_questions": self.flip_questions,
        }

    @classmethod
    def from_dict(cls, payload: dict) -> "GameConfig":
        """Build a config from a JSON payload, keeping defaults for missing keys.

        Values are taken as written: ``"false"`` is not a boolean and ``9.7``
        is not a count, so both raise ``InvalidSettings``.
        """

        defaults = cls()

        def _as_int(key: str) -> int:
            value = payload.get(key, getattr(defaults, key))
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidSettings(f"{key} must be an integer, got {value!r}")
            return value

        def _as_float(key: str) -> float:
            value = payload.get(key, getattr(defaults, key))
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidSettings(f"{key} must be a number, got {value!r}")
            return float(value)

        def _as_bool(key: str) -> bool:
            value = payload.get(key, getattr(defaults, key))
            if not isinstance(value, bool):
                raise InvalidSettings(f"{key} must be true or false, got {value!r}")
            return value

        def _as_state(key: str) -> CandidateState:
            value = payload.get(key, getattr(defaults, key))
            try:
                return CandidateState(value)
            except ValueError:
                raise InvalidSettings(f"{key} must be a candidate state, got {value!r}") from None

        config = cls(
            distractor_count=_as_int("distractor_count"),
            decoy_count=_as_int("decoy_count"),
            decoy_state_on_correct=_as_state("decoy_state_on_correct"),
            decoy_state_on_wrong=_as_state("decoy_state_on_wrong"),
            correct_delay=_as_float("correct_delay"),
            incorrect_delay=_as_float("incorrect_delay"),
            flip_questions=_as_bool("flip_questions"),
        )
        config.validate()
        return config


__all__ = [
    "MIN_FACTOR",
    "MAX_FACTOR",
    "ALL_PRODUCTS",
    "ANIMALS",
    "MAX_DISTRACTORS",
    "MAX_DECOYS",
    "QuestionAmount",
    "Settings",
    "Question",
    "CandidateState",
    "NumberCandidate",
    "DecoyCandidate",
    "Candidate",
    "AnswerSet",
    "Continuing",
    "Finished",
    "SessionStatus",
    "Outcome",
    "GameConfig",
]
