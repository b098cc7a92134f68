"""Configuration model for the notification tone and output selection."""

from dataclasses import dataclass, field
from typing import Optional

from .errors import NotificationConfigurationError

DEFAULT_SAMPLE_RATE_HZ = 44100
DEFAULT_FREQUENCY_HZ = 880.0
DEFAULT_DURATION_SECONDS = 3.0
DEFAULT_DECAY_RATE = 3.0
DEFAULT_AMPLITUDE = 0.6


@dataclass(frozen=True)
class ToneConfig:
    """Parameters of the decaying sine tone played when a phase ends."""
    sample_rate_hz: int = DEFAULT_SAMPLE_RATE_HZ
    frequency_hz: float = DEFAULT_FREQUENCY_HZ
    duration_seconds: float = DEFAULT_DURATION_SECONDS
    decay_rate: float = DEFAULT_DECAY_RATE
    amplitude: float = DEFAULT_AMPLITUDE

    def __post_init__(self) -> None:
        if self.sample_rate_hz <= 0:
            raise NotificationConfigurationError(
                f"sample_rate_hz must be greater than zero, got: {self.sample_rate_hz}"
            )
        if self.frequency_hz <= 0:
            raise NotificationConfigurationError(
                f"frequency_hz must be greater than zero, got: {self.frequency_hz}"
            )
        if self.frequency_hz >= self.sample_rate_hz / 2:
            raise NotificationConfigurationError(
                f"frequency_hz must be below the Nyquist limit "
                f"({self.sample_rate_hz / 2:g} Hz), got: {self.frequency_hz}"
            )
        if self.duration_seconds <= 0:
            raise NotificationConfigurationError(
                f"duration_seconds must be greater than zero, got: {self.duration_seconds}"
            )
        if self.decay_rate < 0:
            raise NotificationConfigurationError(
                f"decay_rate cannot be negative, got: {self.decay_rate}"
            )
        if not 0 < self.amplitude <= 1:
            raise NotificationConfigurationError(
                f"amplitude must be in (0, 1], got: {self.amplitude}"
            )


@dataclass(frozen=True)
class NotificationConfig:
    """Resolved notification settings: tone shape, output device and mute flag."""
    tone: ToneConfig = field(default_factory=ToneConfig)
    output_device_index: Optional[int] = None
    enabled: bool = True

    def __post_init__(self) -> None:
        if self.output_device_index is not None and self.output_device_index < 0:
            raise NotificationConfigurationError(
                f"output_device_index cannot be negative, got: {self.output_device_index}"
            )

    @classmethod
    def from_settings(cls, settings) -> "NotificationConfig":
        return cls(
            tone=ToneConfig(frequency_hz=settings.frequency_hz),
            output_device_index=settings.output_device,
            enabled=not settings.mute,
        )
