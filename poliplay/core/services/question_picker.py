"""Non-repeating random question selection per category."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping
import random

from poliplay.core.errors import NoQuestionsAvailable
from poliplay.core.models import Question, QuestionBank


@dataclass(slots=True, frozen=True)
class UsedQuestionTracker:
    """Indices already shown in the current cycle, per category.

    Instances are immutable; every change returns a new tracker so callers can
    keep or discard state explicitly.
    """

    _used: Mapping[str, frozenset[int]] = field(default_factory=lambda: MappingProxyType({}))

    def used_indices(self, category: str) -> frozenset[int]:
        return self._used.get(category, frozenset())

    def with_used(self, category: str, indices: frozenset[int]) -> UsedQuestionTracker:
        updated = dict(self._used)
        updated[category] = indices
        return UsedQuestionTracker(MappingProxyType(updated))

    def reset(self, category: str | None = None) -> UsedQuestionTracker:
        """Forget the cycle for one category, or for all of them."""
        if category is None:
            return UsedQuestionTracker()
        updated = dict(self._used)
        updated.pop(category, None)
        return UsedQuestionTracker(MappingProxyType(updated))

    def categories(self) -> list[str]:
        return list(self._used)


def select_next(
    bank: QuestionBank,
    tracker: UsedQuestionTracker,
    category: str,
    rng: random.Random | None = None,
) -> tuple[Question, UsedQuestionTracker]:
    """Pick a random question from ``category`` that has not been shown this cycle.

    Once every question of the category has been shown the cycle restarts, so
    repeats only ever happen across cycle boundaries.
    """
    questions = bank.get(category)
    if not questions:
        raise NoQuestionsAvailable(category)

    used = tracker.used_indices(category)
    if len(used) >= len(questions):
        used = frozenset()

    available = [index for index in range(len(questions)) if index not in used]
    chooser = rng if rng is not None else random
    chosen_index = chooser.choice(available)

    updated_tracker = tracker.with_used(category, used | {chosen_index})
    return questions[chosen_index], updated_tracker
