"""Presentation sink contract and event names shared by the engine and renderers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pomodoro.session import Phase, Session

EVENT_SESSION_STARTED = "session_started"
EVENT_PHASE_STARTED = "phase_started"
EVENT_PROGRESS = "progress"
EVENT_PHASE_COMPLETE = "phase_complete"
EVENT_SESSION_COMPLETE = "session_complete"


class PresentationSink(Protocol):
    """Consumer of countdown and session events (console, tray, logs)."""

    def on_session_started(self, session: "Session") -> None: ...

    def on_phase_started(self, phase: "Phase") -> None: ...

    def on_progress(
        self,
        phase_label: str,
        elapsed_seconds: int,
        remaining_seconds: int,
        total_seconds: int,
    ) -> None: ...

    def on_phase_complete(self, phase_label: str) -> None: ...

    def on_session_complete(self) -> None: ...
