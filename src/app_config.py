from __future__ import annotations

import os
from typing import Any, Mapping, Optional

from app_config_parser import parse_app_config
from app_config_schema import (
    AppConfig,
    AppConfigurationError,
    AudioSettings,
    RuntimeSettings,
)

__all__ = [
    "AppConfig",
    "AppConfigurationError",
    "AudioSettings",
    "RuntimeSettings",
    "load_app_config",
]


def load_app_config(
    *,
    environ: Mapping[str, str] | None = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> AppConfig:
    """Load typed settings from `POMOCLI_*` variables, letting CLI overrides win."""
    env = environ if environ is not None else os.environ
    return parse_app_config(env, overrides)
