"""Environment configuration for the S3 endpoint codec."""

from __future__ import annotations

import os

_TRUE_VALUES = {"1", "true", "yes", "on"}


def env_bool(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment.

    Args:
        name: Environment variable name
        default: Value used when the variable is unset or blank

    Returns:
        True for 1/true/yes/on (case-insensitive), False for anything else
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE_VALUES


def env_list(name: str) -> tuple[str, ...]:
    """Read a comma-separated list from the environment, dropping blanks."""
    raw = os.getenv(name, "")
    return tuple(item.strip() for item in raw.split(",") if item.strip())


LOG_LEVEL = os.getenv("S3_CODEC_LOG_LEVEL", "INFO").upper()
METRICS_ENABLED = env_bool("S3_CODEC_METRICS_ENABLED", True)
# Extra query parameter names whose values are redacted in logs
REDACT_PARAMS = env_list("S3_CODEC_REDACT_PARAMS")
