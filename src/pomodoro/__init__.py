from .events import SinkPublisher
from .scheduler import SessionResult, SessionScheduler
from .service import CountdownEngine, CountdownResult, CountdownState, PhaseProgress
from .session import (
    Phase,
    PhaseKind,
    Session,
    SessionConfigurationError,
    build_session,
    build_timer_phase,
)

__all__ = [
    "CountdownEngine",
    "CountdownResult",
    "CountdownState",
    "Phase",
    "PhaseKind",
    "PhaseProgress",
    "Session",
    "SessionConfigurationError",
    "SessionResult",
    "SessionScheduler",
    "SinkPublisher",
    "build_session",
    "build_timer_phase",
]
