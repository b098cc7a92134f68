import io
import struct
import unittest
import wave

import numpy as np

from notification.config import NotificationConfig, ToneConfig
from notification.errors import NotificationConfigurationError
from notification.synth import encode_wav, synthesize_tone


class ToneSynthTests(unittest.TestCase):
    def test_identical_inputs_produce_identical_bytes(self) -> None:
        config = ToneConfig(sample_rate_hz=8000, frequency_hz=440.0, duration_seconds=0.5)

        first = synthesize_tone(config)
        second = synthesize_tone(ToneConfig(8000, 440.0, 0.5))

        self.assertEqual(first.wav_bytes, second.wav_bytes)
        self.assertTrue(np.array_equal(first.samples, second.samples))

    def test_different_frequency_changes_output(self) -> None:
        low = synthesize_tone(ToneConfig(sample_rate_hz=8000, frequency_hz=440.0))
        high = synthesize_tone(ToneConfig(sample_rate_hz=8000, frequency_hz=660.0))

        self.assertNotEqual(low.wav_bytes, high.wav_bytes)

    def test_header_fields_describe_mono_16_bit_pcm(self) -> None:
        tone = synthesize_tone(ToneConfig(sample_rate_hz=22050, duration_seconds=1.0))
        data = tone.wav_bytes

        self.assertEqual(b"RIFF", data[0:4])
        self.assertEqual(len(data) - 8, struct.unpack("<I", data[4:8])[0])
        self.assertEqual(b"WAVE", data[8:12])
        self.assertEqual(b"fmt ", data[12:16])
        fmt_size, audio_format, channels, sample_rate, byte_rate, block_align, bits = (
            struct.unpack("<IHHIIHH", data[16:36])
        )
        self.assertEqual(16, fmt_size)
        self.assertEqual(1, audio_format)
        self.assertEqual(1, channels)
        self.assertEqual(22050, sample_rate)
        self.assertEqual(22050 * 2, byte_rate)
        self.assertEqual(2, block_align)
        self.assertEqual(16, bits)
        self.assertEqual(b"data", data[36:40])
        data_length = struct.unpack("<I", data[40:44])[0]
        self.assertEqual(2 * 22050 * 1, data_length)
        self.assertEqual(data_length, len(data) - 44)

    def test_default_tone_data_length_matches_duration(self) -> None:
        tone = synthesize_tone()
        data_length = struct.unpack("<I", tone.wav_bytes[40:44])[0]

        self.assertEqual(2 * 44100 * 3, data_length)
        self.assertEqual(44100 * 3, tone.sample_count)
        self.assertEqual(880.0, tone.frequency_hz)

    def test_standard_decoder_reads_same_sample_count(self) -> None:
        tone = synthesize_tone(ToneConfig(sample_rate_hz=16000, duration_seconds=0.75))

        with wave.open(io.BytesIO(tone.wav_bytes), "rb") as reader:
            self.assertEqual(1, reader.getnchannels())
            self.assertEqual(2, reader.getsampwidth())
            self.assertEqual(16000, reader.getframerate())
            self.assertEqual(tone.sample_count, reader.getnframes())
            decoded = np.frombuffer(reader.readframes(reader.getnframes()), dtype="<i2")

        self.assertTrue(np.array_equal(tone.samples, decoded))

    def test_samples_follow_decaying_sine(self) -> None:
        config = ToneConfig(sample_rate_hz=8000, frequency_hz=500.0, duration_seconds=1.0)
        tone = synthesize_tone(config)

        for index in (0, 3, 1000, 4321):
            t = index / 8000
            expected = round(np.sin(2 * np.pi * 500.0 * t) * 0.6 * np.exp(-3.0 * t) * 32767)
            self.assertLessEqual(abs(int(tone.samples[index]) - expected), 1)
        self.assertEqual(0, tone.samples[0])

    def test_envelope_tail_is_near_silent(self) -> None:
        tone = synthesize_tone()
        head_peak = int(np.max(np.abs(tone.samples[:4410])))
        tail_peak = int(np.max(np.abs(tone.samples[-4410:])))

        self.assertGreater(head_peak, 15000)
        self.assertLess(tail_peak, 10)
        self.assertLess(tail_peak, head_peak / 50)

    def test_samples_stay_within_int16_range(self) -> None:
        tone = synthesize_tone(ToneConfig(amplitude=1.0, decay_rate=0.0, duration_seconds=0.1))

        self.assertEqual(np.dtype("<i2"), tone.samples.dtype)
        self.assertLessEqual(int(tone.samples.max()), 32767)
        self.assertGreaterEqual(int(tone.samples.min()), -32768)

    def test_encode_rejects_multichannel_arrays(self) -> None:
        with self.assertRaises(ValueError):
            encode_wav(np.zeros((10, 2), dtype="<i2"), 8000)

    def test_invalid_tone_parameters_raise(self) -> None:
        invalid = [
            dict(sample_rate_hz=0),
            dict(frequency_hz=0.0),
            dict(frequency_hz=30000.0),
            dict(duration_seconds=0.0),
            dict(decay_rate=-1.0),
            dict(amplitude=0.0),
            dict(amplitude=1.5),
        ]
        for kwargs in invalid:
            with self.subTest(kwargs=kwargs):
                with self.assertRaises(NotificationConfigurationError):
                    ToneConfig(**kwargs)

    def test_notification_config_from_settings(self) -> None:
        class _Settings:
            mute = True
            output_device = 3
            frequency_hz = 660.0

        config = NotificationConfig.from_settings(_Settings())

        self.assertFalse(config.enabled)
        self.assertEqual(3, config.output_device_index)
        self.assertEqual(660.0, config.tone.frequency_hz)
        self.assertEqual(44100, config.tone.sample_rate_hz)


if __name__ == "__main__":
    unittest.main()
