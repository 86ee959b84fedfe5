"""Test doubles and question builders shared across the test modules."""

from __future__ import annotations

from typing import Callable

from poliplay.core.models import Question, QuestionKind
from poliplay.core.scheduling import TickHandle


class ManualTickScheduler:
    """Scheduler whose ticks only happen when a test calls ``fire``."""

    def __init__(self) -> None:
        self.schedules: list[tuple[TickHandle, Callable[[], None]]] = []

    def schedule_repeating(self, interval_seconds: float, callback: Callable[[], None]) -> TickHandle:
        handle = TickHandle()
        self.schedules.append((handle, callback))
        return handle

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            for handle, callback in list(self.schedules):
                if not handle.cancelled:
                    callback()

    @property
    def active_count(self) -> int:
        return sum(1 for handle, _ in self.schedules if not handle.cancelled)


def make_multiple_choice(text: str = "What is the supreme law of the land in the Philippines?") -> Question:
    return Question(
        text=text,
        kind=QuestionKind.MULTIPLE_CHOICE,
        options=("Constitution", "Criminal Code", "Civil Code", "Administrative Code"),
        correct_answer="A",
    )


def make_identification(
    text: str = "Who was the first President of the Philippines?",
    answer: str = "Emilio Aguinaldo",
) -> Question:
    return Question(text=text, kind=QuestionKind.IDENTIFICATION, correct_answer=answer)
