from __future__ import annotations

import random

import pytest

from poliplay.core.errors import NoQuestionsAvailable
from poliplay.core.services.question_picker import UsedQuestionTracker, select_next
from tests.helpers import make_identification


def _bank(size: int) -> dict:
    return {
        "Law": [make_identification(text=f"Question {i}", answer=str(i)) for i in range(size)],
        "Roles": [make_identification(text="Other", answer="x")],
    }


@pytest.mark.parametrize("seed", [0, 1, 7, 42, 2024])
def test_full_cycle_is_a_permutation(seed: int) -> None:
    bank = _bank(5)
    rng = random.Random(seed)
    tracker = UsedQuestionTracker()

    shown = []
    for _ in range(5):
        question, tracker = select_next(bank, tracker, "Law", rng)
        shown.append(question.text)

    assert sorted(shown) == sorted(q.text for q in bank["Law"])


def test_cycle_restarts_after_every_question_was_shown(rng: random.Random) -> None:
    bank = _bank(3)
    tracker = UsedQuestionTracker()
    for _ in range(3):
        _, tracker = select_next(bank, tracker, "Law", rng)
    assert tracker.used_indices("Law") == frozenset({0, 1, 2})

    question, tracker = select_next(bank, tracker, "Law", rng)

    assert question in bank["Law"]
    assert len(tracker.used_indices("Law")) == 1


def test_two_cycles_each_show_every_question(rng: random.Random) -> None:
    bank = _bank(4)
    tracker = UsedQuestionTracker()
    texts = []
    for _ in range(8):
        question, tracker = select_next(bank, tracker, "Law", rng)
        texts.append(question.text)

    expected = sorted(q.text for q in bank["Law"])
    assert sorted(texts[:4]) == expected
    assert sorted(texts[4:]) == expected


def test_selection_does_not_mutate_the_given_tracker(rng: random.Random) -> None:
    tracker = UsedQuestionTracker()

    _, updated = select_next(_bank(3), tracker, "Law", rng)

    assert tracker.used_indices("Law") == frozenset()
    assert len(updated.used_indices("Law")) == 1


def test_categories_are_tracked_independently(rng: random.Random) -> None:
    bank = _bank(3)
    tracker = UsedQuestionTracker()
    _, tracker = select_next(bank, tracker, "Law", rng)
    _, tracker = select_next(bank, tracker, "Roles", rng)

    assert len(tracker.used_indices("Law")) == 1
    assert tracker.used_indices("Roles") == frozenset({0})
    assert set(tracker.categories()) == {"Law", "Roles"}


def test_tracker_larger_than_category_resets(rng: random.Random) -> None:
    bank = _bank(2)
    tracker = UsedQuestionTracker().with_used("Law", frozenset({0, 1, 2, 3}))

    _, tracker = select_next(bank, tracker, "Law", rng)

    assert len(tracker.used_indices("Law")) == 1


@pytest.mark.parametrize("category", ["Missing", "Empty"])
def test_missing_or_empty_category_raises(category: str, rng: random.Random) -> None:
    bank = {"Empty": [], **_bank(2)}

    with pytest.raises(NoQuestionsAvailable) as excinfo:
        select_next(bank, UsedQuestionTracker(), category, rng)
    assert excinfo.value.category == category


def test_reset_clears_one_or_all_categories() -> None:
    tracker = (
        UsedQuestionTracker()
        .with_used("Law", frozenset({0}))
        .with_used("Roles", frozenset({1}))
    )

    assert tracker.reset("Law").used_indices("Law") == frozenset()
    assert tracker.reset("Law").used_indices("Roles") == frozenset({1})
    assert tracker.reset().categories() == []
