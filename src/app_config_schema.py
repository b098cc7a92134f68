"""Dataclass schema objects used by runtime configuration loading."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

ENV_LOG_LEVEL = "POMOCLI_LOG_LEVEL"
ENV_MUTE = "POMOCLI_MUTE"
ENV_OUTPUT_DEVICE = "POMOCLI_OUTPUT_DEVICE"
ENV_TONE_FREQUENCY_HZ = "POMOCLI_TONE_FREQUENCY_HZ"
ENV_TICK_INTERVAL_SECONDS = "POMOCLI_TICK_INTERVAL_SECONDS"
ENV_PHASE_PAUSE_SECONDS = "POMOCLI_PHASE_PAUSE_SECONDS"


class AppConfigurationError(Exception):
    """Raised when application configuration fails."""


@dataclass(frozen=True)
class AudioSettings:
    """Notification sound settings from `POMOCLI_*` variables and CLI flags."""
    mute: bool = False
    output_device: Optional[int] = None
    frequency_hz: float = 880.0


@dataclass(frozen=True)
class RuntimeSettings:
    """Logging and countdown pacing values."""
    log_level: str = "WARNING"
    tick_interval_seconds: float = 0.1
    phase_pause_seconds: float = 2.0


@dataclass(frozen=True)
class AppConfig:
    audio: AudioSettings
    runtime: RuntimeSettings
