"""Configuration loading from environment variables."""

from __future__ import annotations

import os

from catdelta.models.config import CatDeltaConfig, DeltaOptions, LogConfig
from catdelta.observability.logging import LOG_LEVELS


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"CATDELTA_{key}", default)


def _env_bool(key: str, default: bool = False) -> bool:
    val = _env(key, str(default).lower())
    return val.strip().lower() in ("true", "1", "yes")


def validate_log_level(value: str) -> str:
    if value.lower() not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}. Must be one of {', '.join(LOG_LEVELS)}")
    return value.lower()


def load_config() -> CatDeltaConfig:
    """Load configuration from CATDELTA_* environment variables."""
    return CatDeltaConfig(
        delta=DeltaOptions(
            ignore_tags=_env_bool("IGNORE_TAGS", False),
            verbose=_env_bool("VERBOSE", False),
        ),
        log=LogConfig(
            level=validate_log_level(_env("LOG_LEVEL", "info")),
            json_output=_env_bool("LOG_JSON", True),
        ),
    )
