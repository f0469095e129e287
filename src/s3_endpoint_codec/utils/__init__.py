"""Utility functions for the S3 endpoint codec."""

from .errors import (
    is_sensitive_field,
    sanitize_dict,
    sanitize_error_message,
    sanitize_exception,
    sanitize_url,
)

__all__ = [
    "is_sensitive_field",
    "sanitize_url",
    "sanitize_error_message",
    "sanitize_exception",
    "sanitize_dict",
]
