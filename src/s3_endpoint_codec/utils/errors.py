"""Sanitization utilities to keep signing material out of logs and errors."""

from __future__ import annotations

import re
from typing import Any

from .. import config
from ..constants import SIGNING_QUERY_PARAMS

REDACTED = "[REDACTED]"

# Fragments of log field names that carry signing material
SENSITIVE_FIELDS = {
    "signature",
    "credential",
    "security_token",
}


def _redacted_params() -> tuple[str, ...]:
    return SIGNING_QUERY_PARAMS + config.REDACT_PARAMS


def _param_pattern(names: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(name) for name in names)
    return re.compile(rf"([?&](?:{alternatives})=)[^&#\s'\"]*", re.IGNORECASE)


def _normalize_field(name: str) -> str:
    return name.lower().replace("-", "_")


def sanitize_url(url: str) -> str:
    """Redact the values of signing query parameters in a URL.

    Works on raw text, so it is safe to call on URLs that failed to parse.

    Args:
        url: URL, possibly presigned

    Returns:
        URL with signing parameter values replaced by [REDACTED]
    """
    return _param_pattern(_redacted_params()).sub(rf"\1{REDACTED}", url)


def sanitize_error_message(message: str) -> str:
    """Sanitize an error message that may embed one or more URLs."""
    return sanitize_url(message)


def sanitize_exception(error: Exception) -> str:
    """Return the exception message with signing material redacted."""
    return sanitize_error_message(str(error))


def is_sensitive_field(name: str) -> bool:
    """Tell whether a log field name refers to signing material.

    Matches the SENSITIVE_FIELDS fragments and, exactly, the redacted query
    parameter names, with '-' and '_' treated alike.
    """
    field = _normalize_field(name)
    if any(fragment in field for fragment in SENSITIVE_FIELDS):
        return True
    return field in {_normalize_field(param) for param in _redacted_params()}


def sanitize_dict(data: dict[str, Any]) -> dict[str, Any]:
    """Redact signing material from structured log data.

    Values of sensitive fields are replaced outright, strings elsewhere have
    embedded URLs sanitized, and nested dicts are handled recursively.
    """
    sanitized: dict[str, Any] = {}
    for key, value in data.items():
        if is_sensitive_field(key):
            value = REDACTED
        elif isinstance(value, dict):
            value = sanitize_dict(value)
        elif isinstance(value, str):
            value = sanitize_url(value)
        sanitized[key] = value
    return sanitized
