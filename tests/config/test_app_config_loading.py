import unittest

from app_config import AppConfigurationError, load_app_config


class AppConfigLoadingTests(unittest.TestCase):
    def test_defaults_without_environment(self) -> None:
        config = load_app_config(environ={})

        self.assertFalse(config.audio.mute)
        self.assertIsNone(config.audio.output_device)
        self.assertEqual(880.0, config.audio.frequency_hz)
        self.assertEqual("WARNING", config.runtime.log_level)
        self.assertEqual(0.1, config.runtime.tick_interval_seconds)
        self.assertEqual(2.0, config.runtime.phase_pause_seconds)

    def test_environment_values_are_typed(self) -> None:
        config = load_app_config(
            environ={
                "POMOCLI_MUTE": "yes",
                "POMOCLI_OUTPUT_DEVICE": " 2 ",
                "POMOCLI_TONE_FREQUENCY_HZ": "660",
                "POMOCLI_LOG_LEVEL": "debug",
                "POMOCLI_TICK_INTERVAL_SECONDS": "0.25",
                "POMOCLI_PHASE_PAUSE_SECONDS": "0",
                "UNRELATED": "ignored",
            }
        )

        self.assertTrue(config.audio.mute)
        self.assertEqual(2, config.audio.output_device)
        self.assertEqual(660.0, config.audio.frequency_hz)
        self.assertEqual("DEBUG", config.runtime.log_level)
        self.assertEqual(0.25, config.runtime.tick_interval_seconds)
        self.assertEqual(0.0, config.runtime.phase_pause_seconds)

    def test_overrides_win_over_environment_unless_none(self) -> None:
        config = load_app_config(
            environ={"POMOCLI_MUTE": "false", "POMOCLI_OUTPUT_DEVICE": "1"},
            overrides={
                "POMOCLI_MUTE": True,
                "POMOCLI_OUTPUT_DEVICE": None,
                "POMOCLI_LOG_LEVEL": "INFO",
            },
        )

        self.assertTrue(config.audio.mute)
        self.assertEqual(1, config.audio.output_device)
        self.assertEqual("INFO", config.runtime.log_level)

    def test_empty_environment_values_fall_back_to_defaults(self) -> None:
        config = load_app_config(environ={"POMOCLI_OUTPUT_DEVICE": "", "POMOCLI_MUTE": ""})

        self.assertIsNone(config.audio.output_device)
        self.assertFalse(config.audio.mute)

    def test_invalid_values_raise_configuration_error(self) -> None:
        invalid = [
            {"POMOCLI_MUTE": "maybe"},
            {"POMOCLI_OUTPUT_DEVICE": "speakers"},
            {"POMOCLI_OUTPUT_DEVICE": "-1"},
            {"POMOCLI_TONE_FREQUENCY_HZ": "loud"},
            {"POMOCLI_TONE_FREQUENCY_HZ": "0"},
            {"POMOCLI_LOG_LEVEL": "chatty"},
            {"POMOCLI_TICK_INTERVAL_SECONDS": "0"},
            {"POMOCLI_TICK_INTERVAL_SECONDS": "5"},
            {"POMOCLI_PHASE_PAUSE_SECONDS": "-2"},
        ]
        for environ in invalid:
            with self.subTest(environ=environ):
                with self.assertRaises(AppConfigurationError):
                    load_app_config(environ=environ)


if __name__ == "__main__":
    unittest.main()
