"""Session controller that walks a player through one game."""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple, Union

from .answers import build_answer_set
from .errors import IllegalTransition
from .models import (
    AnswerSet,
    Candidate,
    CandidateState,
    Continuing,
    DecoyCandidate,
    Finished,
    GameConfig,
    NumberCandidate,
    Outcome,
    Question,
    SessionStatus,
    Settings,
)
from .questions import generate_questions

logger = logging.getLogger(__name__)

Selection = Union[int, Candidate]


class GameSession:
    """Owns progress, score, and the answer grid of a single game.

    A session starts on the first question. Each question accepts exactly one
    :meth:`submit_answer`; the caller then moves on with :meth:`advance` when
    it is ready (typically after showing feedback for a moment). Submitting on
    the last question finishes the session.
    """

    def __init__(
        self,
        settings: Settings,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.settings = settings
        self.config = config or GameConfig()
        self.config.validate()
        self._rng = rng or random.Random()
        self.questions: Tuple[Question, ...] = generate_questions(settings, self._rng)
        self.current_index = 0
        self.score = 0
        self.last_answer_correct: Optional[bool] = None
        self._answered = False
        self._status: SessionStatus = Continuing(0)
        self._answer_set = self._build_answer_set()
        logger.info(
            "Session started: %d times table, up to x%d, %d questions",
            settings.table,
            settings.max_multiplier,
            len(self.questions),
        )

    # State ----------------------------------------------------------
    @property
    def current_question(self) -> Question:
        return self.questions[self.current_index]

    @property
    def answer_set(self) -> AnswerSet:
        return self._answer_set

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def finished(self) -> bool:
        return isinstance(self._status, Finished)

    @property
    def answered(self) -> bool:
        return self._answered

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def progress(self) -> Tuple[int, int]:
        return self.current_index, self.total

    # Transitions ----------------------------------------------------
    def submit_answer(self, selected: Selection) -> Outcome:
        """Score ``selected`` against the current question and annotate the grid."""

        if self.finished:
            self._reject("Session is already finished")
        if self._answered:
            self._reject(f"Question {self.current_index + 1} was already answered")

        value = self._selected_value(selected)
        answer = self.current_question.answer
        correct = value == answer

        self._answer_set = self._annotate(value, correct)
        self._answered = True
        self.last_answer_correct = correct
        if correct:
            self.score += 1

        if self.current_index >= self.total - 1:
            self._status = Finished(self.score)
            logger.info("Session finished with %d out of %d", self.score, self.total)
        else:
            self._status = Continuing(self.current_index + 1)

        logger.info(
            "Question %d/%d: %s answered %d (%s)",
            self.current_index + 1,
            self.total,
            self.current_question.as_text(),
            value,
            "correct" if correct else f"expected {answer}",
        )
        return Outcome(
            correct=correct,
            answer=answer,
            selected=value,
            answer_set=self._answer_set,
            status=self._status,
        )

    def advance(self) -> Question:
        """Move to the next question and deal a fresh answer grid."""

        if self.finished:
            self._reject("Cannot advance a finished session")
        if not self._answered:
            self._reject(f"Question {self.current_index + 1} has not been answered yet")

        self.current_index += 1
        self._answered = False
        self.last_answer_correct = None
        self._answer_set = self._build_answer_set()
        return self.current_question

    # Helpers --------------------------------------------------------
    def _build_answer_set(self) -> AnswerSet:
        return build_answer_set(
            self.current_question,
            self.config.decoy_count,
            self.config.distractor_count,
            self._rng,
        )

    def _selected_value(self, selected: Selection) -> int:
        if isinstance(selected, DecoyCandidate):
            self._reject(f"Decoy '{selected.animal}' cannot be chosen as an answer")
        if isinstance(selected, NumberCandidate):
            current = self._answer_set.find_number(selected.value)
            if current is not None and current.is_annotated:
                self._reject(f"Candidate {selected.value} is already annotated")
            return selected.value
        if isinstance(selected, bool) or not isinstance(selected, int):
            self._reject(f"Unsupported selection: {selected!r}")
        return selected

    def _annotate(self, selected: int, correct: bool) -> AnswerSet:
        answer = self._answer_set.answer
        decoy_state = (
            self.config.decoy_state_on_correct if correct else self.config.decoy_state_on_wrong
        )
        annotated: List[Candidate] = []
        for candidate in self._answer_set:
            if isinstance(candidate, DecoyCandidate):
                annotated.append(candidate.with_state(decoy_state))
            elif candidate.value == answer:
                state = CandidateState.CORRECT if correct else CandidateState.REVEALED
                annotated.append(candidate.with_state(state))
            elif candidate.value == selected:
                annotated.append(candidate.with_state(CandidateState.WRONG_CHOSEN))
            else:
                annotated.append(candidate.with_state(CandidateState.FADED))
        return AnswerSet(answer=answer, candidates=tuple(annotated))

    def _reject(self, reason: str) -> None:
        logger.warning("Rejected transition: %s", reason)
        raise IllegalTransition(reason)


# Functional facade ---------------------------------------------------
def start_session(
    settings: Settings,
    config: GameConfig | None = None,
    rng: random.Random | None = None,
) -> GameSession:
    return GameSession(settings, config=config, rng=rng)


def current_question(session: GameSession) -> Question:
    return session.current_question


def current_answer_set(session: GameSession) -> AnswerSet:
    return session.answer_set


def submit_answer(session: GameSession, value: Selection) -> Outcome:
    return session.submit_answer(value)


def advance(session: GameSession) -> Question:
    return session.advance()


def score(session: GameSession) -> int:
    return session.score


def progress(session: GameSession) -> Tuple[int, int]:
    return session.progress


__all__ = [
    "GameSession",
    "start_session",
    "current_question",
    "current_answer_set",
    "submit_answer",
    "advance",
    "score",
    "progress",
]
