"""Structured logging configuration for the S3 endpoint codec."""

import json
import logging
import sys
from typing import Any

from . import config
from .utils.errors import sanitize_dict


def setup_structured_logging(level: str | None = None) -> None:
    """Configure structured JSON logging."""
    logging.basicConfig(
        level=getattr(logging, (level or config.LOG_LEVEL).upper(), logging.INFO),
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def log_codec_event(
    logger: logging.Logger,
    operation: str,
    result: str,
    url: str | None,
    level: int = logging.DEBUG,
    **kwargs: Any,
) -> None:
    """Log a structured codec event with signing material redacted."""
    if not logger.isEnabledFor(level):
        return
    log_data = {
        "component": "s3_endpoint_codec",
        "operation": operation,
        "result": result,
        "url": url,
    }
    log_data.update(kwargs)
    logger.log(level, json.dumps(sanitize_dict(log_data), default=str))
