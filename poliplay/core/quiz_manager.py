"""Business logic for quiz state shared between the generator UI and the API."""

from __future__ import annotations

from threading import RLock
import logging
import random

from poliplay.core.errors import QuestionValidationError
from poliplay.core.models import AnswerEvent, Question, QuestionBank, QuestionListing, RoundSnapshot
from poliplay.core.scheduling import ThreadingTickScheduler, TickScheduler
from poliplay.core.services import question_store
from poliplay.core.services.game_session import FeedbackListener, GameSession
from poliplay.core.services.question_store import QuestionStore

logger = logging.getLogger(__name__)


class QuizManager:
    """Facade over the question store and the game session.

    Every call holds one re-entrant lock, and countdown ticks take the same
    lock, so HTTP handlers, the Qt console and the timer thread never
    interleave.
    """

    def __init__(
        self,
        store: QuestionStore,
        scheduler: TickScheduler | None = None,
        rng: random.Random | None = None,
        feedback_listener: FeedbackListener | None = None,
    ) -> None:
        self._lock = RLock()
        self._store = store
        self._session = GameSession(
            scheduler if scheduler is not None else ThreadingTickScheduler(lock=self._lock),
            rng=rng,
            feedback_listener=feedback_listener,
        )
        self._bank: QuestionBank = store.load()

    # --- Question Bank ---

    def get_categories(self) -> list[str]:
        with self._lock:
            return list(self._bank)

    def get_bank(self) -> QuestionBank:
        with self._lock:
            return question_store.copy_bank(self._bank)

    def list_questions(self) -> list[QuestionListing]:
        with self._lock:
            return question_store.list_questions(self._bank)

    def get_question_count(self) -> int:
        with self._lock:
            return sum(len(questions) for questions in self._bank.values())

    def add_question(self, category: str, question: Question) -> None:
        cleaned_category = category.strip()
        if not cleaned_category:
            raise QuestionValidationError("Please fill in all required fields!")
        with self._lock:
            updated = question_store.add_question(self._bank, cleaned_category, question)
            self._store.save(updated)
            self._bank = updated
            logger.info("Added question to '%s'", cleaned_category)

    def delete_question(self, category: str, index: int) -> bool:
        """Delete a question. Returns False when nothing matched."""
        with self._lock:
            updated = question_store.delete_question(self._bank, category, index)
            if updated == self._bank:
                return False
            self._store.save(updated)
            self._bank = updated
            # Positions after the removed question shifted; start the cycle over.
            self._session.reset_tracker(category)
            logger.info("Deleted question %d from '%s'", index, category)
            return True

    # --- Game Session Delegation ---

    def start_round(self, category: str) -> RoundSnapshot:
        with self._lock:
            self._session.start_round(self._bank, category)
            return self._session.snapshot()

    def submit_answer(self, answer: AnswerEvent) -> RoundSnapshot:
        with self._lock:
            self._session.submit_answer(answer)
            return self._session.snapshot()

    def close_round(self) -> RoundSnapshot:
        with self._lock:
            self._session.close_round()
            return self._session.snapshot()

    def get_round_snapshot(self) -> RoundSnapshot:
        with self._lock:
            return self._session.snapshot()
