"""Exceptions raised by the times tables core."""

from __future__ import annotations


class TimesTablesError(Exception):
    """Base class for every error raised by the game core."""


class InvalidSettings(TimesTablesError, ValueError):
    """Raised when game settings or configuration are out of range."""


class InsufficientCandidates(TimesTablesError):
    """Raised when a catalog cannot supply the requested number of tiles."""

    kind = "candidates"

    def __init__(self, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f"Requested {requested} {self.kind} but only {available} are available"
        )


class InsufficientDistractors(InsufficientCandidates):
    kind = "distractors"


class InsufficientDecoys(InsufficientCandidates):
    kind = "decoys"


class IllegalTransition(TimesTablesError):
    """Raised when a session is asked to do something its state forbids."""


__all__ = [
    "TimesTablesError",
    "InvalidSettings",
    "InsufficientCandidates",
    "InsufficientDistractors",
    "InsufficientDecoys",
    "IllegalTransition",
]
