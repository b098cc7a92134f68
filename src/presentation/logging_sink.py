"""Sink that mirrors engine events into the standard logging tree."""

from __future__ import annotations

import logging
from typing import Optional

from pomodoro.session import Phase, Session


class LoggingSink:
    """Transitions at INFO, per-second progress at DEBUG."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger("presentation")

    def on_session_started(self, session: Session) -> None:
        self._logger.info(
            "Session with %d phases (%ss total)",
            len(session.phases),
            session.total_seconds,
        )

    def on_phase_started(self, phase: Phase) -> None:
        self._logger.info("Entering %s (%s, %ss)", phase.label, phase.kind, phase.duration_seconds)

    def on_progress(
        self,
        phase_label: str,
        elapsed_seconds: int,
        remaining_seconds: int,
        total_seconds: int,
    ) -> None:
        self._logger.debug(
            "%s: %s/%ss elapsed, %ss remaining",
            phase_label,
            elapsed_seconds,
            total_seconds,
            remaining_seconds,
        )

    def on_phase_complete(self, phase_label: str) -> None:
        self._logger.info("%s complete", phase_label)

    def on_session_complete(self) -> None:
        self._logger.info("Session complete")
