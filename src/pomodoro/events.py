"""Fan-out publisher delivering engine events to presentation sinks."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from contracts.sink_protocol import (
    EVENT_PHASE_COMPLETE,
    EVENT_PHASE_STARTED,
    EVENT_PROGRESS,
    EVENT_SESSION_COMPLETE,
    EVENT_SESSION_STARTED,
    PresentationSink,
)

from .session import Phase, Session


class SinkPublisher:
    """Delivers events to every registered sink.

    Delivery is fire-and-forget: an exception raised by one sink is logged
    and the remaining sinks still receive the event.
    """

    def __init__(
        self,
        sinks: Iterable[PresentationSink] = (),
        logger: Optional[logging.Logger] = None,
    ):
        self._sinks: list[PresentationSink] = list(sinks)
        self._logger = logger or logging.getLogger("pomodoro.events")

    @property
    def sinks(self) -> tuple[PresentationSink, ...]:
        return tuple(self._sinks)

    def add_sink(self, sink: PresentationSink) -> None:
        self._sinks.append(sink)

    def session_started(self, session: Session) -> None:
        self._dispatch(EVENT_SESSION_STARTED, "on_session_started", session)

    def phase_started(self, phase: Phase) -> None:
        self._dispatch(EVENT_PHASE_STARTED, "on_phase_started", phase)

    def progress(
        self,
        phase_label: str,
        elapsed_seconds: int,
        remaining_seconds: int,
        total_seconds: int,
    ) -> None:
        self._dispatch(
            EVENT_PROGRESS,
            "on_progress",
            phase_label,
            elapsed_seconds,
            remaining_seconds,
            total_seconds,
        )

    def phase_complete(self, phase_label: str) -> None:
        self._dispatch(EVENT_PHASE_COMPLETE, "on_phase_complete", phase_label)

    def session_complete(self) -> None:
        self._dispatch(EVENT_SESSION_COMPLETE, "on_session_complete")

    def _dispatch(self, event_type: str, method_name: str, *args) -> None:
        for sink in self._sinks:
            handler = getattr(sink, method_name, None)
            if handler is None:
                continue
            try:
                handler(*args)
            except Exception:
                self._logger.exception(
                    "Presentation sink %s failed on %s event",
                    type(sink).__name__,
                    event_type,
                )
