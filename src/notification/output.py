"""Sounddevice-backed playback for encoded notification tones."""

from __future__ import annotations

import io
import logging
import wave
from typing import Optional, Protocol

import numpy as np

from .errors import NotificationError


class AudioOutput(Protocol):
    """Anything able to play a mono float32 buffer to completion."""

    def play(self, samples: np.ndarray, sample_rate_hz: int) -> None: ...


def decode_wav(data: bytes) -> tuple[np.ndarray, int]:
    """Decode a mono 16-bit WAV stream into float32 samples in [-1, 1)."""
    try:
        with wave.open(io.BytesIO(data), "rb") as reader:
            channels = reader.getnchannels()
            sample_width = reader.getsampwidth()
            sample_rate_hz = reader.getframerate()
            frames = reader.readframes(reader.getnframes())
    except (wave.Error, EOFError) as error:
        raise NotificationError(f"Cannot decode notification sound: {error}") from error

    if channels != 1:
        raise NotificationError(f"Expected mono audio, got {channels} channels")
    if sample_width != 2:
        raise NotificationError(f"Expected 16-bit audio, got {sample_width * 8}-bit")

    pcm = np.frombuffer(frames, dtype="<i2")
    return pcm.astype(np.float32) / 32768.0, sample_rate_hz


def _load_sounddevice():
    # Missing PortAudio surfaces as OSError, a missing package as ImportError.
    try:
        import sounddevice
    except (OSError, ImportError) as error:
        raise NotificationError(f"Audio backend unavailable: {error}") from error
    return sounddevice


class SoundDeviceAudioOutput:
    """Plays mono PCM arrays through a selected sounddevice output."""
    def __init__(
        self,
        output_device_index: Optional[int] = None,
        blocksize: int = 2048,
        logger: Optional[logging.Logger] = None,
    ):
        self._output_device_index = output_device_index
        self._blocksize = blocksize
        self._logger = logger or logging.getLogger(__name__)

    def play(self, samples: np.ndarray, sample_rate_hz: int) -> None:
        if samples.ndim != 1:
            raise NotificationError("Expected mono PCM array for playback")
        if len(samples) == 0:
            raise NotificationError("Cannot play empty audio buffer")

        sd = _load_sounddevice()
        pos = 0

        def callback(outdata, frames, time_info, status):
            nonlocal pos
            if status:
                self._logger.warning("Sounddevice status: %s", status)

            end = pos + frames
            chunk = samples[pos:end]

            if len(chunk) < frames:
                outdata[: len(chunk), 0] = chunk
                outdata[len(chunk) :, 0] = 0
                raise sd.CallbackStop()

            outdata[:, 0] = chunk
            pos = end

        try:
            with sd.OutputStream(
                channels=1,
                samplerate=sample_rate_hz,
                blocksize=self._blocksize,
                dtype="float32",
                callback=callback,
                device=self._output_device_index,
            ):
                sd.sleep(int(len(samples) / sample_rate_hz * 1000) + 200)
        except Exception as error:
            raise NotificationError(f"Audio playback failed: {error}") from error


class NullAudioOutput:
    """Output used when sound is muted; accepts and drops every buffer."""
    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def play(self, samples: np.ndarray, sample_rate_hz: int) -> None:
        self._logger.debug(
            "Sound muted, dropping %d samples at %d Hz", len(samples), sample_rate_hz
        )
