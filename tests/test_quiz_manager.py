from __future__ import annotations

import pytest

from poliplay.core.access_gate import credentials_match
from poliplay.core.errors import NoQuestionsAvailable, QuestionValidationError
from poliplay.core.models import IdentificationAnswer, MultipleChoiceAnswer
from poliplay.core.quiz_manager import QuizManager
from poliplay.core.services.question_store import QuestionStore
from tests.helpers import ManualTickScheduler, make_identification, make_multiple_choice


def test_manager_loads_seeded_categories(manager: QuizManager) -> None:
    assert manager.get_categories() == ["Political Issues", "Law", "Roles", "Figures"]
    assert manager.get_question_count() == 8


def test_added_question_is_persisted(manager: QuizManager, store: QuestionStore) -> None:
    manager.add_question("  Economics ", make_identification())

    assert manager.get_categories()[-1] == "Economics"
    assert store.load()["Economics"] == [make_identification()]


def test_add_question_requires_category(manager: QuizManager) -> None:
    with pytest.raises(QuestionValidationError):
        manager.add_question("   ", make_identification())


def test_delete_question_reports_whether_anything_changed(manager: QuizManager, store: QuestionStore) -> None:
    assert not manager.delete_question("Law", 9)
    assert manager.delete_question("Law", 0)
    assert manager.delete_question("Law", 0)

    assert "Law" not in manager.get_categories()
    assert "Law" not in store.load()


def test_round_lifecycle(manager: QuizManager, scheduler: ManualTickScheduler) -> None:
    manager.add_question("Solo", make_multiple_choice())

    started = manager.start_round("Solo")
    answered = manager.submit_answer(MultipleChoiceAnswer("C"))
    closed = manager.close_round()

    assert started.status == "running"
    assert answered.status == "answered"
    assert answered.verdict is not None
    assert not answered.verdict.is_correct
    assert closed.status == "idle"
    assert scheduler.active_count == 0


def test_round_expires_through_manager(manager: QuizManager, scheduler: ManualTickScheduler) -> None:
    manager.add_question("Solo", make_identification())
    manager.start_round("Solo")

    scheduler.fire(20)
    snapshot = manager.submit_answer(IdentificationAnswer("Emilio Aguinaldo"))

    assert snapshot.status == "expired"
    assert snapshot.verdict is not None and snapshot.verdict.timed_out


def test_start_round_for_unknown_category(manager: QuizManager) -> None:
    with pytest.raises(NoQuestionsAvailable):
        manager.start_round("Economics")
    assert manager.get_round_snapshot().status == "idle"


def test_rounds_still_start_after_deleting_from_category(manager: QuizManager) -> None:
    manager.start_round("Law")
    manager.close_round()

    manager.delete_question("Law", 1)
    question = manager.start_round("Law").question

    assert question == manager.get_bank()["Law"][0]


def test_feedback_listener_receives_each_verdict_once(store: QuestionStore, scheduler: ManualTickScheduler) -> None:
    cues: list[str] = []
    manager = QuizManager(store, scheduler=scheduler, feedback_listener=lambda verdict: cues.append(verdict.cue))
    manager.add_question("Solo", make_identification())

    manager.start_round("Solo")
    manager.submit_answer(IdentificationAnswer("emilio aguinaldo"))
    manager.submit_answer(IdentificationAnswer("wrong"))
    manager.start_round("Solo")
    scheduler.fire(20)

    assert cues == ["correct", "wrong"]


def test_credentials_gate() -> None:
    assert credentials_match("MSGRamos", "Leynes2024")
    assert not credentials_match("msgramos", "Leynes2024")
    assert not credentials_match("MSGRamos", "")
