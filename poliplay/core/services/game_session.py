"""Service for managing the active round: selection, countdown and grading."""

from __future__ import annotations

from typing import Callable
import logging
import random

from poliplay.constants.quiz_constants import OPTION_LETTERS, ROUND_DURATION_SECONDS
from poliplay.core.errors import NoActiveRound
from poliplay.core.grading import grade_answer, timeout_verdict
from poliplay.core.models import AnswerEvent, Question, QuestionBank, RoundSnapshot, Verdict
from poliplay.core.scheduling import TickScheduler
from poliplay.core.services.question_picker import UsedQuestionTracker, select_next
from poliplay.core.services.round_timer import RoundTimer, TimerState

logger = logging.getLogger(__name__)

FeedbackListener = Callable[[Verdict], None]


class GameSession:
    """Runs one round at a time for a single player.

    Every round ends in exactly one verdict, produced either by the first
    submitted answer or by the countdown expiring. The verdict is handed to the
    feedback listener once; repeated submissions just return it again.
    """

    def __init__(
        self,
        scheduler: TickScheduler,
        rng: random.Random | None = None,
        feedback_listener: FeedbackListener | None = None,
        duration_seconds: int = ROUND_DURATION_SECONDS,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._feedback_listener = feedback_listener
        self._timer = RoundTimer(
            scheduler,
            on_expired=self._handle_expired,
            duration_seconds=duration_seconds,
        )
        self._tracker = UsedQuestionTracker()
        self._category: str | None = None
        self._question: Question | None = None
        self._verdict: Verdict | None = None

    def reset_tracker(self, category: str | None = None) -> None:
        self._tracker = self._tracker.reset(category)

    def start_round(self, bank: QuestionBank, category: str) -> Question:
        """Select the next question of ``category`` and start its countdown.

        Raises ``NoQuestionsAvailable`` before touching the current round.
        """
        question, tracker = select_next(bank, self._tracker, category, self._rng)
        self._tracker = tracker
        self._category = category
        self._question = question
        self._verdict = None
        self._timer.start()
        logger.info("Started round in '%s'", category)
        return question

    def submit_answer(self, answer: AnswerEvent) -> Verdict:
        if self._question is None:
            raise NoActiveRound("No round is in progress.")
        if self._verdict is not None:
            return self._verdict

        verdict = grade_answer(self._question, answer)
        if not self._timer.claim_answer():
            raise NoActiveRound("The round is no longer accepting answers.")
        self._verdict = verdict
        logger.info("Answer graded as %s", verdict.outcome.value)
        self._emit_feedback(verdict)
        return verdict

    def close_round(self) -> None:
        """Stop the countdown and clear the round. Safe to call at any time."""
        self._timer.close()
        self._category = None
        self._question = None
        self._verdict = None

    def get_current_category(self) -> str | None:
        return self._category

    def get_state(self) -> TimerState:
        return self._timer.state

    def snapshot(self) -> RoundSnapshot:
        question = self._question
        option_labels: list[str] = []
        if question is not None and question.is_multiple_choice:
            option_labels = [
                f"{letter}. {option}" for letter, option in zip(OPTION_LETTERS, question.options)
            ]
        return RoundSnapshot(
            status=self._timer.state.value,
            category=self._category,
            question=question,
            remaining_seconds=self._timer.remaining_seconds,
            warning=self._timer.warning,
            verdict=self._verdict,
            accepting_answers=self._timer.is_running,
            option_labels=option_labels,
        )

    def _handle_expired(self) -> None:
        if self._verdict is not None:
            return
        self._verdict = timeout_verdict()
        logger.info("Time is up for round in '%s'", self._category)
        self._emit_feedback(self._verdict)

    def _emit_feedback(self, verdict: Verdict) -> None:
        if self._feedback_listener is None:
            return
        try:
            self._feedback_listener(verdict)
        except Exception:
            logger.warning("Feedback cue failed for %s verdict", verdict.cue, exc_info=True)
