"""Countdown engine that drives a single phase against monotonic wall-clock time."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Literal, Optional, Protocol

from .constants import (
    DEFAULT_TICK_INTERVAL_SECONDS,
    STATE_CANCELLED,
    STATE_COMPLETED,
    STATE_PENDING,
    STATE_RUNNING,
)
from .events import SinkPublisher
from .session import Phase

CountdownState = Literal["pending", "running", "completed", "cancelled"]


class Notifier(Protocol):
    def notify(self) -> bool: ...


@dataclass(frozen=True)
class PhaseProgress:
    """Snapshot emitted on every whole-second change of a running phase."""
    phase: Phase
    elapsed_seconds: int
    remaining_seconds: int
    completed: bool = False

    @property
    def total_seconds(self) -> int:
        return self.phase.duration_seconds

    @property
    def fraction(self) -> float:
        if self.total_seconds == 0:
            return 1.0
        return self.elapsed_seconds / self.total_seconds


@dataclass(frozen=True)
class CountdownResult:
    """Outcome of one engine run."""
    phase: Phase
    state: CountdownState
    elapsed_seconds: int
    notified: bool = False

    @property
    def completed(self) -> bool:
        return self.state == STATE_COMPLETED


class CountdownEngine:
    """Runs one phase at a time: pending -> running -> completed.

    Elapsed time is always measured from the phase start, so the loop
    reaches zero on time regardless of how long each tick took. Setting
    ``cancel_event`` stops the current run at the next tick.
    """

    def __init__(
        self,
        publisher: SinkPublisher,
        *,
        notifier: Optional[Notifier] = None,
        tick_interval_seconds: float = DEFAULT_TICK_INTERVAL_SECONDS,
        cancel_event: Optional[threading.Event] = None,
        logger: Optional[logging.Logger] = None,
    ):
        if tick_interval_seconds < 0:
            raise ValueError("tick_interval_seconds cannot be negative")

        self._publisher = publisher
        self._notifier = notifier
        self._tick_interval_seconds = float(tick_interval_seconds)
        self._cancel_event = cancel_event or threading.Event()
        self._logger = logger or logging.getLogger("pomodoro")
        self._lock = threading.Lock()

        self._state: CountdownState = STATE_PENDING
        self._phase: Optional[Phase] = None
        self._last_progress: Optional[PhaseProgress] = None

    @property
    def state(self) -> CountdownState:
        with self._lock:
            return self._state

    @property
    def last_progress(self) -> Optional[PhaseProgress]:
        with self._lock:
            return self._last_progress

    @property
    def cancel_event(self) -> threading.Event:
        return self._cancel_event

    def cancel(self) -> None:
        self._cancel_event.set()

    def run(self, phase: Phase) -> CountdownResult:
        started_at = time.monotonic()
        with self._lock:
            if self._state == STATE_RUNNING:
                raise RuntimeError("CountdownEngine is already running a phase")
            self._state = STATE_RUNNING
            self._phase = phase
            self._last_progress = None
        self._logger.info(
            "Phase started: label=%s duration=%ss",
            phase.label,
            phase.duration_seconds,
        )

        last_emitted: Optional[int] = None
        while True:
            if self._cancel_event.is_set():
                return self._cancel(phase, last_emitted or 0)

            tick_started = time.monotonic()
            elapsed = max(0.0, tick_started - started_at)
            if elapsed >= phase.duration_seconds:
                break

            # Remaining floors the true time left: a 25:00 phase first shows 24:59.
            whole_elapsed = int(elapsed)
            if whole_elapsed != last_emitted:
                last_emitted = whole_elapsed
                self._emit(
                    PhaseProgress(
                        phase=phase,
                        elapsed_seconds=whole_elapsed,
                        remaining_seconds=int(phase.duration_seconds - elapsed),
                    )
                )

            delay = self._tick_interval_seconds - (time.monotonic() - tick_started)
            if self._cancel_event.wait(max(0.0, delay)):
                return self._cancel(phase, last_emitted or 0)

        return self._complete(phase)

    def _complete(self, phase: Phase) -> CountdownResult:
        self._emit(
            PhaseProgress(
                phase=phase,
                elapsed_seconds=phase.duration_seconds,
                remaining_seconds=0,
                completed=True,
            )
        )
        with self._lock:
            self._state = STATE_COMPLETED
        self._logger.info("Phase completed: label=%s", phase.label)

        notified = self._notifier.notify() if self._notifier else False
        self._publisher.phase_complete(phase.label)
        return CountdownResult(
            phase=phase,
            state=STATE_COMPLETED,
            elapsed_seconds=phase.duration_seconds,
            notified=notified,
        )

    def _cancel(self, phase: Phase, elapsed_seconds: int) -> CountdownResult:
        with self._lock:
            self._state = STATE_CANCELLED
        self._logger.info(
            "Phase cancelled: label=%s elapsed=%ss",
            phase.label,
            elapsed_seconds,
        )
        return CountdownResult(
            phase=phase,
            state=STATE_CANCELLED,
            elapsed_seconds=elapsed_seconds,
        )

    def _emit(self, progress: PhaseProgress) -> None:
        with self._lock:
            self._last_progress = progress
        self._publisher.progress(
            progress.phase.label,
            progress.elapsed_seconds,
            progress.remaining_seconds,
            progress.total_seconds,
        )
