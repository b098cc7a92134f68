"""Best-effort notification player that synthesizes and plays the end-of-phase tone."""

from __future__ import annotations

import concurrent.futures
import logging
from typing import Optional

from .config import ToneConfig
from .errors import NotificationError
from .output import AudioOutput, decode_wav
from .synth import synthesize_tone


class NotificationPlayer:
    """Plays a fresh tone on a background worker and waits for it to finish.

    Audio problems never propagate: a missing device, a busy device or a
    broken stream are logged and reported through the boolean return value.
    """

    def __init__(
        self,
        output: AudioOutput,
        tone_config: Optional[ToneConfig] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._output = output
        self._tone_config = tone_config or ToneConfig()
        self._logger = logger or logging.getLogger(__name__)
        self._executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=1,
            thread_name_prefix="notification",
        )

    def notify(self) -> bool:
        try:
            tone = synthesize_tone(self._tone_config)
            samples, sample_rate_hz = decode_wav(tone.wav_bytes)
        except NotificationError as error:
            self._logger.warning("Notification sound skipped: %s", error)
            return False
        except Exception:
            self._logger.warning("Notification sound could not be prepared", exc_info=True)
            return False

        self._logger.debug(
            "Playing %d samples of notification audio at %d Hz",
            len(samples),
            sample_rate_hz,
        )
        future = self._executor.submit(self._output.play, samples, sample_rate_hz)
        try:
            future.result()
        except NotificationError as error:
            self._logger.warning("Notification sound skipped: %s", error)
            return False
        except Exception:
            self._logger.warning("Notification playback failed", exc_info=True)
            return False
        return True

    def close(self) -> None:
        self._executor.shutdown(wait=True)

    def __enter__(self) -> "NotificationPlayer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
