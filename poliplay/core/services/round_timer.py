"""Countdown state machine for a single round."""

from __future__ import annotations

from enum import Enum
from typing import Callable
import logging

from poliplay.constants.quiz_constants import (
    ROUND_DURATION_SECONDS,
    TICK_INTERVAL_SECONDS,
    WARNING_THRESHOLD_SECONDS,
)
from poliplay.core.scheduling import TickHandle, TickScheduler

logger = logging.getLogger(__name__)


class TimerState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    ANSWERED = "answered"
    EXPIRED = "expired"


class RoundTimer:
    """Tracks remaining seconds and guards the first transition out of RUNNING.

    Submission and expiry race for that transition; whichever claims it first
    wins and the other becomes a no-op.
    """

    def __init__(
        self,
        scheduler: TickScheduler,
        on_expired: Callable[[], None] | None = None,
        duration_seconds: int = ROUND_DURATION_SECONDS,
        warning_threshold_seconds: int = WARNING_THRESHOLD_SECONDS,
        tick_interval_seconds: float = TICK_INTERVAL_SECONDS,
    ) -> None:
        self._scheduler = scheduler
        self._on_expired = on_expired
        self._duration_seconds = duration_seconds
        self._warning_threshold_seconds = warning_threshold_seconds
        self._tick_interval_seconds = tick_interval_seconds

        self._state = TimerState.IDLE
        self._remaining_seconds = 0
        self._warning = False
        self._handle: TickHandle | None = None
        self._generation: int = 0

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def remaining_seconds(self) -> int:
        return self._remaining_seconds

    @property
    def warning(self) -> bool:
        return self._warning

    @property
    def answered(self) -> bool:
        return self._state is TimerState.ANSWERED

    @property
    def is_running(self) -> bool:
        return self._state is TimerState.RUNNING

    def start(self) -> None:
        """Begin a fresh countdown, cancelling any schedule still pending."""
        self._cancel_ticks()
        self._remaining_seconds = self._duration_seconds
        self._warning = False
        self._state = TimerState.RUNNING
        self._generation += 1
        generation = self._generation
        self._handle = self._scheduler.schedule_repeating(
            self._tick_interval_seconds,
            lambda: self._tick(generation),
        )

    def claim_answer(self) -> bool:
        """Move RUNNING -> ANSWERED. Returns False if the round already left RUNNING."""
        if self._state is not TimerState.RUNNING:
            return False
        self._state = TimerState.ANSWERED
        self._cancel_ticks()
        return True

    def close(self) -> None:
        self._cancel_ticks()
        self._state = TimerState.IDLE
        self._remaining_seconds = 0
        self._warning = False

    def _tick(self, generation: int) -> None:
        if generation != self._generation or self._handle is None:
            # Stale schedule from a previous round.
            return

        self._remaining_seconds -= 1
        if self._remaining_seconds <= self._warning_threshold_seconds:
            self._warning = True

        if self._remaining_seconds > 0:
            return

        self._remaining_seconds = 0
        self._cancel_ticks()
        if self._state is TimerState.RUNNING:
            self._state = TimerState.EXPIRED
            logger.info("Round timer expired")
            if self._on_expired is not None:
                self._on_expired()

    def _cancel_ticks(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
