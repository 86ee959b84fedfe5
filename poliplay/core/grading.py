"""Grading rules for the two question types."""

from __future__ import annotations

from poliplay.constants.quiz_constants import IDENTIFICATION_REVEAL_DELAY_MS, OPTION_LETTERS
from poliplay.core.errors import AnswerKindMismatch
from poliplay.core.models import (
    AnswerEvent,
    IdentificationAnswer,
    MultipleChoiceAnswer,
    OptionMark,
    Outcome,
    Question,
    QuestionKind,
    Verdict,
)


def grade_multiple_choice(question: Question, selected_letter: str) -> Verdict:
    """Compare the selected letter with the correct one and annotate every option.

    The correct option is marked ``CORRECT``; the selected option is marked
    ``WRONG`` when it differs. Letters are compared exactly.
    """
    correct = question.correct_answer
    marks: list[OptionMark | None] = []
    for letter in OPTION_LETTERS[: len(question.options)]:
        if letter == correct:
            marks.append(OptionMark.CORRECT)
        elif letter == selected_letter:
            marks.append(OptionMark.WRONG)
        else:
            marks.append(None)
    outcome = Outcome.CORRECT if selected_letter == correct else Outcome.INCORRECT
    return Verdict(outcome=outcome, option_marks=tuple(marks))


def grade_identification(question: Question, user_answer: str) -> Verdict:
    """Case-insensitive, whitespace-trimmed comparison; reveals the answer when wrong."""
    if _normalize(user_answer) == _normalize(question.correct_answer):
        return Verdict(outcome=Outcome.CORRECT)
    return Verdict(
        outcome=Outcome.INCORRECT,
        revealed_answer=question.correct_answer,
        reveal_delay_ms=IDENTIFICATION_REVEAL_DELAY_MS,
    )


def grade_answer(question: Question, answer: AnswerEvent) -> Verdict:
    """Dispatch an answer event to the rule matching the question kind."""
    if question.kind is QuestionKind.MULTIPLE_CHOICE:
        if not isinstance(answer, MultipleChoiceAnswer):
            raise AnswerKindMismatch("Multiple choice questions expect an option letter.")
        return grade_multiple_choice(question, answer.letter)
    if not isinstance(answer, IdentificationAnswer):
        raise AnswerKindMismatch("Identification questions expect a typed answer.")
    return grade_identification(question, answer.text)


def timeout_verdict() -> Verdict:
    """Verdict recorded when the countdown runs out before any answer."""
    return Verdict(outcome=Outcome.INCORRECT, timed_out=True)


def _normalize(value: str) -> str:
    return value.strip().lower()
