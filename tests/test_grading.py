from __future__ import annotations

import pytest

from poliplay.core.errors import AnswerKindMismatch
from poliplay.core.grading import (
    grade_answer,
    grade_identification,
    grade_multiple_choice,
    timeout_verdict,
)
from poliplay.core.models import IdentificationAnswer, MultipleChoiceAnswer, OptionMark, Outcome
from tests.helpers import make_identification, make_multiple_choice


def test_multiple_choice_wrong_letter_marks_correct_and_selected() -> None:
    verdict = grade_multiple_choice(make_multiple_choice(), "C")

    assert verdict.outcome is Outcome.INCORRECT
    assert verdict.option_marks == (OptionMark.CORRECT, None, OptionMark.WRONG, None)
    assert verdict.cue == "wrong"
    assert verdict.revealed_answer is None


def test_multiple_choice_correct_letter_marks_only_correct_option() -> None:
    verdict = grade_multiple_choice(make_multiple_choice(), "A")

    assert verdict.is_correct
    assert verdict.option_marks == (OptionMark.CORRECT, None, None, None)
    assert verdict.cue == "correct"


def test_multiple_choice_compares_letters_exactly() -> None:
    verdict = grade_multiple_choice(make_multiple_choice(), "a")

    assert verdict.outcome is Outcome.INCORRECT
    assert verdict.option_marks[0] is OptionMark.CORRECT


@pytest.mark.parametrize("user_answer", ["  Emilio Aguinaldo  ", "emilio aguinaldo", "EMILIO AGUINALDO"])
def test_identification_ignores_case_and_surrounding_whitespace(user_answer: str) -> None:
    verdict = grade_identification(make_identification(), user_answer)

    assert verdict.outcome is Outcome.CORRECT
    assert verdict.revealed_answer is None


def test_identification_wrong_answer_reveals_correct_one() -> None:
    verdict = grade_identification(make_identification(), "Jose Rizal")

    assert verdict.outcome is Outcome.INCORRECT
    assert verdict.revealed_answer == "Emilio Aguinaldo"
    assert verdict.reveal_delay_ms == 500
    assert verdict.option_marks == ()


def test_grade_answer_dispatches_by_question_kind() -> None:
    assert grade_answer(make_multiple_choice(), MultipleChoiceAnswer("A")).is_correct
    assert grade_answer(make_identification(), IdentificationAnswer("emilio aguinaldo")).is_correct


def test_grade_answer_rejects_mismatched_event() -> None:
    with pytest.raises(AnswerKindMismatch):
        grade_answer(make_multiple_choice(), IdentificationAnswer("Constitution"))
    with pytest.raises(AnswerKindMismatch):
        grade_answer(make_identification(), MultipleChoiceAnswer("A"))


def test_timeout_verdict_is_incorrect() -> None:
    verdict = timeout_verdict()

    assert verdict.outcome is Outcome.INCORRECT
    assert verdict.timed_out
    assert verdict.cue == "wrong"
