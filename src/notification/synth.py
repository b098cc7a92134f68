"""Decaying sine-tone synthesis and in-memory WAV encoding."""

from __future__ import annotations

import io
import wave
from dataclasses import dataclass, field

import numpy as np

from .config import ToneConfig

PCM_SAMPLE_WIDTH_BYTES = 2
PCM_CHANNELS = 1
PCM_FULL_SCALE = 32767


@dataclass(frozen=True)
class Tone:
    """Immutable synthesized tone together with its encoded WAV container."""
    sample_rate_hz: int
    frequency_hz: float
    duration_seconds: float
    decay_rate: float
    amplitude: float
    samples: np.ndarray = field(repr=False, compare=False)
    wav_bytes: bytes = field(repr=False)

    @property
    def sample_count(self) -> int:
        return int(self.samples.shape[0])


def synthesize_tone(config: ToneConfig | None = None) -> Tone:
    """Build an instant-attack, exponentially decaying sine tone.

    Every sample is ``sin(2*pi*f*t) * amplitude * exp(-t * decay_rate)``
    quantized to signed 16-bit. The result only depends on ``config``.
    """
    config = config or ToneConfig()
    sample_count = int(config.sample_rate_hz * config.duration_seconds)
    t = np.arange(sample_count, dtype=np.float64) / config.sample_rate_hz
    envelope = np.exp(-t * config.decay_rate)
    wave_form = np.sin(2.0 * np.pi * config.frequency_hz * t) * config.amplitude * envelope
    samples = np.clip(
        np.round(wave_form * PCM_FULL_SCALE),
        -PCM_FULL_SCALE - 1,
        PCM_FULL_SCALE,
    ).astype("<i2")

    return Tone(
        sample_rate_hz=config.sample_rate_hz,
        frequency_hz=config.frequency_hz,
        duration_seconds=config.duration_seconds,
        decay_rate=config.decay_rate,
        amplitude=config.amplitude,
        samples=samples,
        wav_bytes=encode_wav(samples, config.sample_rate_hz),
    )


def encode_wav(samples: np.ndarray, sample_rate_hz: int) -> bytes:
    """Wrap mono int16 samples in a RIFF/WAVE container (PCM, 16 bit)."""
    if samples.ndim != 1:
        raise ValueError("Expected mono PCM array for encoding")

    buffer = io.BytesIO()
    with wave.open(buffer, "wb") as writer:
        writer.setnchannels(PCM_CHANNELS)
        writer.setsampwidth(PCM_SAMPLE_WIDTH_BYTES)
        writer.setframerate(sample_rate_hz)
        writer.writeframes(samples.astype("<i2").tobytes())
    return buffer.getvalue()
