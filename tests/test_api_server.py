from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from poliplay.core.quiz_manager import QuizManager
from poliplay.server.api_server import create_api_app
from tests.helpers import ManualTickScheduler, make_identification, make_multiple_choice


@pytest.fixture
def client(manager: QuizManager) -> TestClient:
    manager.add_question("Solo Choice", make_multiple_choice())
    manager.add_question("Solo Typed", make_identification())
    return TestClient(create_api_app(manager))


def test_player_page_is_served(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert "PoliPlay" in response.text
    assert "__POLL_INTERVAL_MS__" not in response.text


def test_categories_are_listed(client: TestClient) -> None:
    response = client.get("/categories")

    assert response.status_code == 200
    assert response.json()["categories"][:4] == ["Political Issues", "Law", "Roles", "Figures"]
    assert "Solo Choice" in response.json()["categories"]


def test_start_round_returns_question_without_answer(client: TestClient) -> None:
    response = client.post("/round", json={"category": "Solo Choice"})

    assert response.status_code == 201
    payload = response.json()
    assert payload["status"] == "running"
    assert payload["kind"] == "Multiple Choice"
    assert payload["remaining_seconds"] == 20
    assert payload["options"][0] == "A. Constitution"
    assert "<p>" in payload["question_html"]
    assert payload["verdict"] is None
    assert "correct_answer" not in payload


def test_start_round_for_unknown_category_is_404(client: TestClient) -> None:
    response = client.post("/round", json={"category": "Economics"})

    assert response.status_code == 404
    assert response.json()["detail"] == (
        "No questions available for this category. Please add questions first."
    )


def test_answer_without_round_is_409(client: TestClient) -> None:
    response = client.post("/round/answer", json={"letter": "A"})

    assert response.status_code == 409


def test_multiple_choice_answer_returns_marks(client: TestClient) -> None:
    client.post("/round", json={"category": "Solo Choice"})

    response = client.post("/round/answer", json={"letter": "C"})

    assert response.status_code == 200
    verdict = response.json()["verdict"]
    assert verdict["outcome"] == "incorrect"
    assert verdict["cue"] == "wrong"
    assert verdict["option_marks"] == ["correct", None, "wrong", None]


def test_repeated_answer_returns_first_verdict(client: TestClient) -> None:
    client.post("/round", json={"category": "Solo Typed"})

    first = client.post("/round/answer", json={"text": "Jose Rizal"}).json()
    second = client.post("/round/answer", json={"text": "Emilio Aguinaldo"}).json()

    assert first["verdict"]["revealed_answer"] == "Emilio Aguinaldo"
    assert first["verdict"]["reveal_delay_ms"] == 500
    assert second["verdict"] == first["verdict"]
    assert second["status"] == "answered"


@pytest.mark.parametrize("payload", [{}, {"letter": "A", "text": "Constitution"}])
def test_answer_payload_needs_exactly_one_field(client: TestClient, payload: dict) -> None:
    client.post("/round", json={"category": "Solo Choice"})

    assert client.post("/round/answer", json=payload).status_code == 422


def test_answer_of_wrong_kind_is_422(client: TestClient) -> None:
    client.post("/round", json={"category": "Solo Choice"})

    response = client.post("/round/answer", json={"text": "Constitution"})

    assert response.status_code == 422
    assert client.get("/round").json()["accepting_answers"]


def test_timeout_is_reported(client: TestClient, scheduler: ManualTickScheduler) -> None:
    client.post("/round", json={"category": "Solo Typed"})
    scheduler.fire(16)

    warning = client.get("/round").json()
    scheduler.fire(4)
    expired = client.get("/round").json()

    assert warning["remaining_seconds"] == 4
    assert warning["warning"]
    assert expired["status"] == "expired"
    assert expired["verdict"]["timed_out"]
    assert not expired["accepting_answers"]


def test_close_round_returns_idle(client: TestClient, scheduler: ManualTickScheduler) -> None:
    client.post("/round", json={"category": "Solo Choice"})

    response = client.post("/round/close")

    assert response.status_code == 200
    assert response.json()["status"] == "idle"
    assert response.json()["question_text"] is None
    assert scheduler.active_count == 0
