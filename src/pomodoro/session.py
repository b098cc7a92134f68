"""Phase and session models plus the builders that validate user input."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from .constants import (
    DEFAULT_CYCLES,
    DEFAULT_LONG_BREAK_MINUTES,
    DEFAULT_SHORT_BREAK_MINUTES,
    DEFAULT_WORK_MINUTES,
    KIND_LONG_BREAK,
    KIND_SHORT_BREAK,
    KIND_TIMER,
    KIND_WORK,
    MAX_LABEL_LENGTH,
    PHASE_LABELS,
)

PhaseKind = Literal["work", "short_break", "long_break", "timer"]


class SessionConfigurationError(ValueError):
    """Raised when session or timer parameters are invalid."""


@dataclass(frozen=True)
class Phase:
    """One timed segment of a session."""
    kind: PhaseKind
    duration_seconds: int
    label: str
    cycle: Optional[int] = None

    def __post_init__(self) -> None:
        if self.duration_seconds < 0:
            raise SessionConfigurationError(
                f"duration_seconds cannot be negative, got: {self.duration_seconds}"
            )

    @property
    def minutes(self) -> int:
        return self.duration_seconds // 60


@dataclass(frozen=True)
class Session:
    """Ordered phases of one pomodoro run, long break always last."""
    work_minutes: int
    short_break_minutes: int
    long_break_minutes: int
    cycles: int
    phases: tuple[Phase, ...]

    @property
    def work_phases(self) -> tuple[Phase, ...]:
        return tuple(phase for phase in self.phases if phase.kind == KIND_WORK)

    @property
    def total_seconds(self) -> int:
        return sum(phase.duration_seconds for phase in self.phases)


def build_session(
    work_minutes: int = DEFAULT_WORK_MINUTES,
    short_break_minutes: int = DEFAULT_SHORT_BREAK_MINUTES,
    long_break_minutes: int = DEFAULT_LONG_BREAK_MINUTES,
    cycles: int = DEFAULT_CYCLES,
) -> Session:
    """Expand session parameters into ``[Work, ShortBreak] * (N-1) + [Work, LongBreak]``."""
    _require_positive(work_minutes, "work_minutes")
    _require_positive(short_break_minutes, "short_break_minutes")
    _require_positive(long_break_minutes, "long_break_minutes")
    _require_positive(cycles, "cycles")

    phases: list[Phase] = []
    for cycle in range(1, cycles + 1):
        phases.append(_phase(KIND_WORK, work_minutes, cycle=cycle))
        if cycle < cycles:
            phases.append(_phase(KIND_SHORT_BREAK, short_break_minutes, cycle=cycle))
    phases.append(_phase(KIND_LONG_BREAK, long_break_minutes))

    return Session(
        work_minutes=work_minutes,
        short_break_minutes=short_break_minutes,
        long_break_minutes=long_break_minutes,
        cycles=cycles,
        phases=tuple(phases),
    )


def build_timer_phase(minutes: int, label: Optional[str] = None) -> Phase:
    """Ad-hoc single countdown. Zero minutes is allowed and completes at once."""
    if isinstance(minutes, bool) or not isinstance(minutes, int):
        raise SessionConfigurationError(f"minutes must be an integer, got: {minutes!r}")
    if minutes < 0:
        raise SessionConfigurationError(f"minutes cannot be negative, got: {minutes}")
    return Phase(
        kind=KIND_TIMER,
        duration_seconds=minutes * 60,
        label=_sanitize_label(label or PHASE_LABELS[KIND_TIMER]),
    )


def _phase(kind: PhaseKind, minutes: int, *, cycle: Optional[int] = None) -> Phase:
    return Phase(
        kind=kind,
        duration_seconds=minutes * 60,
        label=PHASE_LABELS[kind],
        cycle=cycle,
    )


def _require_positive(value: int, field: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SessionConfigurationError(f"{field} must be an integer, got: {value!r}")
    if value <= 0:
        raise SessionConfigurationError(f"{field} must be greater than zero, got: {value}")


def _sanitize_label(name: str) -> str:
    compact = " ".join(name.split())
    compact = compact.strip()[:MAX_LABEL_LENGTH]
    return compact or PHASE_LABELS[KIND_TIMER]
