"""Cancellable repeating tick schedules used by the round countdown."""

from __future__ import annotations

from contextlib import nullcontext
from threading import Event, RLock, Thread
from typing import Callable, ContextManager, Protocol
import logging

logger = logging.getLogger(__name__)


class TickHandle:
    """Handle for a repeating schedule. Once cancelled it never fires again."""

    def __init__(self) -> None:
        self._cancelled = Event()

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def wait(self, timeout: float) -> bool:
        """Block up to ``timeout`` seconds; returns True if cancelled meanwhile."""
        return self._cancelled.wait(timeout)


class TickScheduler(Protocol):
    def schedule_repeating(self, interval_seconds: float, callback: Callable[[], None]) -> TickHandle:
        ...


class ThreadingTickScheduler:
    """Runs each schedule on a daemon thread.

    When a lock is supplied every tick runs while holding it, and the handle is
    re-checked under the lock, so a schedule cancelled by a lock holder cannot
    fire afterwards.
    """

    def __init__(self, lock: RLock | None = None) -> None:
        self._lock: ContextManager[object] = lock if lock is not None else nullcontext()

    def schedule_repeating(self, interval_seconds: float, callback: Callable[[], None]) -> TickHandle:
        handle = TickHandle()

        def run() -> None:
            while not handle.wait(interval_seconds):
                with self._lock:
                    if handle.cancelled:
                        break
                    callback()

        thread = Thread(target=run, name="RoundTimerTick", daemon=True)
        thread.start()
        logger.debug("Started tick schedule every %.2fs", interval_seconds)
        return handle
