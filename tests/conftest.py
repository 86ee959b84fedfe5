from __future__ import annotations

import random

import pytest

from poliplay.core.local_storage import LocalStorage
from poliplay.core.quiz_manager import QuizManager
from poliplay.core.services.question_store import QuestionStore
from tests.helpers import ManualTickScheduler


@pytest.fixture
def scheduler() -> ManualTickScheduler:
    return ManualTickScheduler()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def storage(tmp_path) -> LocalStorage:
    return LocalStorage(tmp_path / "local_storage.json")


@pytest.fixture
def store(storage) -> QuestionStore:
    return QuestionStore(storage)


@pytest.fixture
def manager(store, scheduler, rng) -> QuizManager:
    return QuizManager(store, scheduler=scheduler, rng=rng)
