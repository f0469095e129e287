"""Classified errors raised while building or parsing endpoint URLs."""

from __future__ import annotations

from enum import Enum

from .constants import HOST_PATTERN
from .utils.errors import sanitize_url


class ErrorKind(str, Enum):
    """Classification of address format failures."""

    INVALID_SYNTAX = "InvalidSyntax"
    UNSUPPORTED_SCHEME = "UnsupportedScheme"
    MALFORMED_HOST = "MalformedHost"
    UNSUPPORTED_DOMAIN = "UnsupportedDomain"
    MALFORMED_SERVICE_LABEL = "MalformedServiceLabel"
    DUPLICATE_QUERY_KEY = "DuplicateQueryKey"
    INVALID_REGION = "InvalidRegion"
    INTERNAL = "Internal"


class AddressFormatError(ValueError):
    """Base error for URLs and addresses that do not fit the endpoint format.

    The offending URL is kept on ``url`` and is sanitized before it is
    embedded in the message, so presigned links do not leak credentials.
    """

    kind = ErrorKind.INTERNAL
    expected = "a well-formed endpoint URL"

    def __init__(self, url: str | None = None, detail: str | None = None) -> None:
        self.url = url
        self.detail = detail
        message = f"{self.kind.value}: expected {self.expected}"
        if detail:
            message = f"{message} ({detail})"
        if url is not None:
            message = f"{message}, got '{sanitize_url(url)}'"
        super().__init__(message)


class InvalidSyntaxError(AddressFormatError):
    kind = ErrorKind.INVALID_SYNTAX
    expected = "a valid absolute URL"


class UnsupportedSchemeError(AddressFormatError):
    kind = ErrorKind.UNSUPPORTED_SCHEME
    expected = "a http or https URL"


class MalformedHostError(AddressFormatError):
    kind = ErrorKind.MALFORMED_HOST
    expected = f"host {HOST_PATTERN}"


class UnsupportedDomainError(AddressFormatError):
    kind = ErrorKind.UNSUPPORTED_DOMAIN
    expected = "domain amazonaws.com"


class MalformedServiceLabelError(AddressFormatError):
    kind = ErrorKind.MALFORMED_SERVICE_LABEL
    expected = f"host {HOST_PATTERN}"


class DuplicateQueryKeyError(AddressFormatError):
    kind = ErrorKind.DUPLICATE_QUERY_KEY
    expected = "unique query parameter keys"


class InvalidRegionNameError(AddressFormatError):
    kind = ErrorKind.INVALID_REGION
    expected = "a region usable as a hyphenated host label"
