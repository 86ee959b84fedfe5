from __future__ import annotations

from poliplay.core.services.round_timer import RoundTimer, TimerState
from tests.helpers import ManualTickScheduler


def _timer(scheduler: ManualTickScheduler, expirations: list[str] | None = None) -> RoundTimer:
    sink = expirations if expirations is not None else []
    return RoundTimer(scheduler, on_expired=lambda: sink.append("expired"))


def test_start_enters_running_with_full_duration(scheduler: ManualTickScheduler) -> None:
    timer = _timer(scheduler)

    timer.start()

    assert timer.state is TimerState.RUNNING
    assert timer.remaining_seconds == 20
    assert not timer.warning
    assert scheduler.active_count == 1


def test_warning_starts_at_five_seconds(scheduler: ManualTickScheduler) -> None:
    timer = _timer(scheduler)
    timer.start()

    scheduler.fire(14)
    assert timer.remaining_seconds == 6
    assert not timer.warning

    scheduler.fire()
    assert timer.remaining_seconds == 5
    assert timer.warning
    assert timer.state is TimerState.RUNNING


def test_expiry_stops_ticking_and_signals_once(scheduler: ManualTickScheduler) -> None:
    expirations: list[str] = []
    timer = _timer(scheduler, expirations)
    timer.start()

    scheduler.fire(20)
    scheduler.fire(3)

    assert timer.state is TimerState.EXPIRED
    assert timer.remaining_seconds == 0
    assert expirations == ["expired"]
    assert scheduler.active_count == 0


def test_claim_answer_wins_only_once(scheduler: ManualTickScheduler) -> None:
    expirations: list[str] = []
    timer = _timer(scheduler, expirations)
    timer.start()
    scheduler.fire(3)

    assert timer.claim_answer()
    assert not timer.claim_answer()
    assert timer.state is TimerState.ANSWERED
    assert timer.answered

    scheduler.fire(30)
    assert timer.remaining_seconds == 17
    assert expirations == []


def test_claim_after_expiry_is_rejected(scheduler: ManualTickScheduler) -> None:
    timer = _timer(scheduler)
    timer.start()
    scheduler.fire(20)

    assert not timer.claim_answer()
    assert timer.state is TimerState.EXPIRED


def test_close_is_safe_from_any_state(scheduler: ManualTickScheduler) -> None:
    timer = _timer(scheduler)
    timer.close()
    assert timer.state is TimerState.IDLE

    timer.start()
    timer.close()
    assert timer.state is TimerState.IDLE
    assert scheduler.active_count == 0

    timer.close()
    assert timer.state is TimerState.IDLE


def test_restart_cancels_previous_schedule(scheduler: ManualTickScheduler) -> None:
    expirations: list[str] = []
    timer = _timer(scheduler, expirations)
    timer.start()
    scheduler.fire(10)

    timer.start()

    first_handle, stale_callback = scheduler.schedules[0]
    assert first_handle.cancelled
    assert scheduler.active_count == 1
    assert timer.remaining_seconds == 20

    # A tick from the superseded schedule must not touch the new countdown.
    for _ in range(25):
        stale_callback()
    assert timer.remaining_seconds == 20
    assert expirations == []
