"""Typed parser for `POMOCLI_*` environment values and CLI overrides."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from app_config_schema import (
    ENV_LOG_LEVEL,
    ENV_MUTE,
    ENV_OUTPUT_DEVICE,
    ENV_PHASE_PAUSE_SECONDS,
    ENV_TICK_INTERVAL_SECONDS,
    ENV_TONE_FREQUENCY_HZ,
    AppConfig,
    AppConfigurationError,
    AudioSettings,
    RuntimeSettings,
)

_ALLOWED_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def parse_app_config(
    environ: Mapping[str, str],
    overrides: Optional[Mapping[str, Any]] = None,
) -> AppConfig:
    """Combine environment values with CLI overrides; overrides win when not None."""
    merged: dict[str, Any] = {key: value for key, value in environ.items() if value != ""}
    for key, value in (overrides or {}).items():
        if value is not None:
            merged[key] = value

    return AppConfig(
        audio=_parse_audio_settings(merged),
        runtime=_parse_runtime_settings(merged),
    )


def _parse_audio_settings(raw: Mapping[str, Any]) -> AudioSettings:
    output_device = (
        _as_int(raw[ENV_OUTPUT_DEVICE], ENV_OUTPUT_DEVICE)
        if ENV_OUTPUT_DEVICE in raw
        else None
    )
    if output_device is not None and output_device < 0:
        raise AppConfigurationError(f"{ENV_OUTPUT_DEVICE} cannot be negative.")

    frequency_hz = _as_float(raw.get(ENV_TONE_FREQUENCY_HZ, 880.0), ENV_TONE_FREQUENCY_HZ)
    if frequency_hz <= 0:
        raise AppConfigurationError(f"{ENV_TONE_FREQUENCY_HZ} must be greater than zero.")

    return AudioSettings(
        mute=_as_bool(raw.get(ENV_MUTE, False), ENV_MUTE),
        output_device=output_device,
        frequency_hz=frequency_hz,
    )


def _parse_runtime_settings(raw: Mapping[str, Any]) -> RuntimeSettings:
    tick_interval_seconds = _as_float(
        raw.get(ENV_TICK_INTERVAL_SECONDS, 0.1),
        ENV_TICK_INTERVAL_SECONDS,
    )
    if not 0 < tick_interval_seconds <= 1.0:
        raise AppConfigurationError(f"{ENV_TICK_INTERVAL_SECONDS} must be in (0, 1].")

    phase_pause_seconds = _as_float(
        raw.get(ENV_PHASE_PAUSE_SECONDS, 2.0),
        ENV_PHASE_PAUSE_SECONDS,
    )
    if phase_pause_seconds < 0:
        raise AppConfigurationError(f"{ENV_PHASE_PAUSE_SECONDS} cannot be negative.")

    return RuntimeSettings(
        log_level=_as_log_level(raw.get(ENV_LOG_LEVEL, "WARNING"), ENV_LOG_LEVEL),
        tick_interval_seconds=tick_interval_seconds,
        phase_pause_seconds=phase_pause_seconds,
    )


def _as_str(value: Any, field: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    raise AppConfigurationError(f"{field} must be a string.")


def _as_log_level(value: Any, field: str) -> str:
    name = _as_str(value, field).upper()
    if name not in _ALLOWED_LOG_LEVELS:
        allowed = ", ".join(_ALLOWED_LOG_LEVELS)
        raise AppConfigurationError(f"{field} must be one of: {allowed}.")
    return name


def _as_bool(value: Any, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
    raise AppConfigurationError(f"{field} must be a boolean.")


def _as_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise AppConfigurationError(f"{field} must be an integer.")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as error:
            raise AppConfigurationError(f"{field} must be an integer.") from error
    raise AppConfigurationError(f"{field} must be an integer.")


def _as_float(value: Any, field: str) -> float:
    if isinstance(value, bool):
        raise AppConfigurationError(f"{field} must be a float.")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError as error:
            raise AppConfigurationError(f"{field} must be a float.") from error
    raise AppConfigurationError(f"{field} must be a float.")
