"""Phase kinds, countdown states and defaults used by the timer engine."""

from __future__ import annotations

DEFAULT_WORK_MINUTES = 25
DEFAULT_SHORT_BREAK_MINUTES = 5
DEFAULT_LONG_BREAK_MINUTES = 15
DEFAULT_CYCLES = 4

DEFAULT_TICK_INTERVAL_SECONDS = 0.1
DEFAULT_PHASE_PAUSE_SECONDS = 2.0

KIND_WORK = "work"
KIND_SHORT_BREAK = "short_break"
KIND_LONG_BREAK = "long_break"
KIND_TIMER = "timer"

PHASE_LABELS: dict[str, str] = {
    KIND_WORK: "Work",
    KIND_SHORT_BREAK: "Short Break",
    KIND_LONG_BREAK: "Long Break",
    KIND_TIMER: "Timer",
}

STATE_PENDING = "pending"
STATE_RUNNING = "running"
STATE_COMPLETED = "completed"
STATE_CANCELLED = "cancelled"

MAX_LABEL_LENGTH = 60
