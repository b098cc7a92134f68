"""Sequential scheduler that runs every phase of a session through the engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .constants import DEFAULT_PHASE_PAUSE_SECONDS
from .events import SinkPublisher
from .service import CountdownEngine, CountdownResult
from .session import Phase, Session


@dataclass(frozen=True)
class SessionResult:
    """Per-phase outcomes of a scheduler run."""
    results: tuple[CountdownResult, ...]
    completed: bool

    @property
    def completed_phases(self) -> tuple[Phase, ...]:
        return tuple(result.phase for result in self.results if result.completed)


class SessionScheduler:
    """Runs phases strictly one after another; a phase ends (sound included) before the next starts."""

    def __init__(
        self,
        engine: CountdownEngine,
        publisher: SinkPublisher,
        *,
        phase_pause_seconds: float = DEFAULT_PHASE_PAUSE_SECONDS,
        logger: Optional[logging.Logger] = None,
    ):
        if phase_pause_seconds < 0:
            raise ValueError("phase_pause_seconds cannot be negative")

        self._engine = engine
        self._publisher = publisher
        self._phase_pause_seconds = float(phase_pause_seconds)
        self._logger = logger or logging.getLogger("pomodoro.scheduler")

    def run(self, session: Session) -> SessionResult:
        self._logger.info(
            "Session started: work=%smin short_break=%smin long_break=%smin cycles=%s",
            session.work_minutes,
            session.short_break_minutes,
            session.long_break_minutes,
            session.cycles,
        )
        self._publisher.session_started(session)

        results: list[CountdownResult] = []
        for index, phase in enumerate(session.phases):
            result = self._run_phase(phase)
            results.append(result)
            if not result.completed:
                self._logger.info("Session stopped during %s", phase.label)
                return SessionResult(results=tuple(results), completed=False)
            if index < len(session.phases) - 1 and self._pause_between_phases():
                self._logger.info("Session stopped after %s", phase.label)
                return SessionResult(results=tuple(results), completed=False)

        self._publisher.session_complete()
        self._logger.info("Session completed: phases=%d", len(results))
        return SessionResult(results=tuple(results), completed=True)

    def run_timer(self, phase: Phase) -> CountdownResult:
        return self._run_phase(phase)

    def _run_phase(self, phase: Phase) -> CountdownResult:
        self._publisher.phase_started(phase)
        return self._engine.run(phase)

    def _pause_between_phases(self) -> bool:
        """Wait between phases; returns True when cancelled meanwhile."""
        if self._phase_pause_seconds <= 0:
            return self._engine.cancel_event.is_set()
        return self._engine.cancel_event.wait(self._phase_pause_seconds)
