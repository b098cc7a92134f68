"""Public exports for notification sound components."""

from .config import NotificationConfig, ToneConfig
from .errors import NotificationConfigurationError, NotificationError
from .output import AudioOutput, NullAudioOutput, SoundDeviceAudioOutput, decode_wav
from .service import NotificationPlayer
from .synth import Tone, encode_wav, synthesize_tone

__all__ = [
    "AudioOutput",
    "NotificationConfig",
    "NotificationConfigurationError",
    "NotificationError",
    "NotificationPlayer",
    "NullAudioOutput",
    "SoundDeviceAudioOutput",
    "Tone",
    "ToneConfig",
    "decode_wav",
    "encode_wav",
    "synthesize_tone",
]
