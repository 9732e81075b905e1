"""Configuration loading from environment variables."""

from __future__ import annotations

import os

from grantdiff.models.config import DiffConfig, GrantDiffConfig, LogConfig


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"GRANTDIFF_{key}", default)


def _env_bool(key: str, default: bool = False) -> bool:
    val = _env(key, str(default).lower())
    return val.lower() in ("true", "1", "yes")


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def _validate_output_format(value: str) -> str:
    valid = {"text", "json"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid output format: {value}. Must be one of {valid}")
    return value.lower()


def load_config() -> GrantDiffConfig:
    """Load configuration from GRANTDIFF_* environment variables."""
    return GrantDiffConfig(
        diff=DiffConfig(
            check_order=_env_bool("CHECK_ORDER", False),
            output_format=_validate_output_format(_env("OUTPUT_FORMAT", "text")),
        ),
        log=LogConfig(
            level=_validate_log_level(_env("LOG_LEVEL", "warning")),
        ),
    )
