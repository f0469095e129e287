"""Parse virtual-hosted-style endpoint URLs back into addresses."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from urllib.parse import SplitResult, unquote

from . import logging as structured_logging
from . import metrics
from .address import QueryPair, QueryParams, S3Address
from .constants import (
    DEFAULT_REGION,
    DOMAIN_LABEL,
    HOST_LABEL_COUNT,
    OP_DECODE,
    REGIONAL_SERVICE_PREFIX,
    RESULT_ERROR,
    RESULT_SUCCESS,
    SERVICE_LABEL,
    SUPPORTED_SCHEMES,
    ZONE_LABEL,
)
from .exceptions import (
    AddressFormatError,
    DuplicateQueryKeyError,
    MalformedHostError,
    MalformedServiceLabelError,
    UnsupportedDomainError,
    UnsupportedSchemeError,
)
from .uri import host, parse_url
from .utils.errors import sanitize_exception

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of try_decode: exactly one of address or error is set."""

    address: S3Address | None = None
    error: AddressFormatError | None = None

    def __post_init__(self) -> None:
        if (self.address is None) == (self.error is None):
            raise ValueError("DecodeResult needs exactly one of address or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> S3Address:
        """Return the address or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.address


def decode_query(query: str, url: str | None = None) -> QueryParams | None:
    """Split a raw query string into ordered, percent-decoded pairs.

    A pair without '=' gets a None value. Returns None for a blank query.

    Raises:
        DuplicateQueryKeyError: If a key occurs more than once
    """
    if not query or not query.strip():
        return None
    pairs: list[QueryPair] = []
    seen: set[str] = set()
    if query.startswith("?"):
        query = query[1:]
    for raw_pair in query.split("&"):
        raw_key, sep, raw_value = raw_pair.partition("=")
        key = unquote(raw_key)
        if key in seen:
            raise DuplicateQueryKeyError(url, detail=f"key '{key}' repeated")
        seen.add(key)
        pairs.append((key, unquote(raw_value) if sep else None))
    return tuple(pairs)


def parse_service_label(label: str, url: str | None = None) -> str:
    """Return the region named by the s3 / s3-REGION host label."""
    if label == SERVICE_LABEL:
        return DEFAULT_REGION
    if label.startswith(REGIONAL_SERVICE_PREFIX):
        return label[len(REGIONAL_SERVICE_PREFIX) :]
    raise MalformedServiceLabelError(url, detail=f"service label '{label}'")


def _decode(parsed: SplitResult) -> S3Address:
    url = parsed.geturl()

    if parsed.scheme.lower() not in SUPPORTED_SCHEMES:
        raise UnsupportedSchemeError(url)

    key = unquote(parsed.path)
    if key.startswith("/"):
        key = key[1:]

    query_params = decode_query(parsed.query, url)

    labels = host(parsed).split(".")
    if len(labels) != HOST_LABEL_COUNT:
        raise MalformedHostError(url, detail=f"{len(labels)} host labels")
    if labels[-2] != DOMAIN_LABEL or labels[-1] != ZONE_LABEL:
        raise UnsupportedDomainError(url)

    bucket = labels[0]
    region = parse_service_label(labels[1], url)

    return S3Address(bucket=bucket, region=region, key=key, query_params=query_params)


def decode(url: str | SplitResult) -> S3Address:
    """Decode an endpoint URL into bucket, region, key and query parameters.

    Only [BUCKET].s3.amazonaws.com and [BUCKET].s3-[REGION].amazonaws.com hosts
    are recognized; dotted-region hosts and path-style URLs are rejected.

    Args:
        url: URL string or an already parsed URL

    Returns:
        The decoded address; the default region is reported as us-east-1

    Raises:
        AddressFormatError: One of its subclasses, classifying the failure
    """
    raw = url.geturl() if isinstance(url, SplitResult) else url
    try:
        parsed = url if isinstance(url, SplitResult) else parse_url(url)
        address = _decode(parsed)
    except AddressFormatError as e:
        metrics.record_operation(OP_DECODE, RESULT_ERROR, kind=e.kind.value)
        structured_logging.log_codec_event(
            logger,
            OP_DECODE,
            RESULT_ERROR,
            str(raw),
            level=logging.WARNING,
            kind=e.kind.value,
            error=sanitize_exception(e),
        )
        raise

    metrics.record_operation(OP_DECODE, RESULT_SUCCESS)
    structured_logging.log_codec_event(logger, OP_DECODE, RESULT_SUCCESS, str(raw))
    return address


def try_decode(url: str | SplitResult) -> DecodeResult:
    """Decode without raising; the failure is returned in the result."""
    try:
        return DecodeResult(address=decode(url))
    except AddressFormatError as e:
        return DecodeResult(error=e)
