"""Exceptions raised by the quiz core."""

from __future__ import annotations


class PoliPlayError(Exception):
    """Base class for quiz errors."""


class NoQuestionsAvailable(PoliPlayError):
    """Raised when a round is requested for a missing or empty category."""

    def __init__(self, category: str) -> None:
        super().__init__(f"No questions available for category '{category}'.")
        self.category = category


class QuestionValidationError(PoliPlayError, ValueError):
    """Raised when an authored question is incomplete."""


class AnswerKindMismatch(PoliPlayError, ValueError):
    """Raised when an answer event does not fit the current question type."""


class NoActiveRound(PoliPlayError, RuntimeError):
    """Raised when an answer arrives while no round is open."""
