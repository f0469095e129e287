"""Build virtual-hosted-style endpoint URLs from address parts."""

from __future__ import annotations

import logging
from urllib.parse import SplitResult

from botocore.exceptions import InvalidRegionError
from botocore.utils import percent_encode, validate_region_name

from . import logging as structured_logging
from . import metrics
from .address import QueryParamsInput, normalize_params
from .constants import (
    DEFAULT_REGION,
    DOMAIN_SUFFIX,
    ENCODE_SCHEME,
    OP_ENCODE,
    RESULT_ERROR,
    RESULT_SUCCESS,
    SERVICE_LABEL,
    UNRESERVED_CHARS,
)
from .exceptions import AddressFormatError, InvalidRegionNameError, InvalidSyntaxError
from .uri import parse_url
from .utils.errors import sanitize_exception

logger = logging.getLogger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def region_suffix(region: str | None) -> str:
    """Return the host suffix for a region, empty for the default region.

    Raises:
        InvalidRegionNameError: If the region cannot be embedded in a host label
    """
    if _is_blank(region) or region.lower() == DEFAULT_REGION:
        return ""
    try:
        validate_region_name(region)
    except InvalidRegionError as e:
        raise InvalidRegionNameError(detail=f"region '{region}'") from e
    return f"-{region}"


def bucket_label(bucket: str | None) -> str:
    """Return the leading host label for a bucket, empty when there is none."""
    if _is_blank(bucket):
        return ""
    return f"{bucket}."


def encode_query(params: QueryParamsInput) -> str:
    """Serialize query parameters in caller order, without the leading '?'.

    Keys and values are percent-encoded leaving only RFC 3986 unreserved
    characters as-is. A parameter with a None value is written as the bare key.
    """
    pairs = normalize_params(params)
    if not pairs:
        return ""
    encoded = []
    for key, value in pairs:
        part = percent_encode(key, safe=UNRESERVED_CHARS)
        if value is not None:
            part = f"{part}={percent_encode(value, safe=UNRESERVED_CHARS)}"
        encoded.append(part)
    return "&".join(encoded)


def encode(
    region: str | None = None,
    bucket: str | None = None,
    key: str | None = None,
    params: QueryParamsInput = None,
) -> str:
    """Build the endpoint URL for an object address.

    Args:
        region: Region name; None, blank or us-east-1 (any case) adds no suffix
        bucket: Bucket name; None or blank addresses the service root
        key: Object key; a single leading '/' is dropped
        params: Ordered query parameters

    Returns:
        URL of the form https://[BUCKET.]s3[-REGION].amazonaws.com/KEY[?QUERY]
    """
    try:
        suffix = region_suffix(region)
        query = encode_query(params)
    except AddressFormatError as e:
        metrics.record_operation(OP_ENCODE, RESULT_ERROR, kind=e.kind.value)
        structured_logging.log_codec_event(
            logger,
            OP_ENCODE,
            RESULT_ERROR,
            None,
            level=logging.WARNING,
            kind=e.kind.value,
            error=sanitize_exception(e),
        )
        raise

    object_key = key or ""
    if object_key.startswith("/"):
        object_key = object_key[1:]

    url = (
        f"{ENCODE_SCHEME}://{bucket_label(bucket)}{SERVICE_LABEL}{suffix}.{DOMAIN_SUFFIX}/"
        f"{object_key}{'?' + query if query else ''}"
    )
    metrics.record_operation(OP_ENCODE, RESULT_SUCCESS)
    structured_logging.log_codec_event(logger, OP_ENCODE, RESULT_SUCCESS, url)
    return url


def encode_url(
    region: str | None = None,
    bucket: str | None = None,
    key: str | None = None,
    params: QueryParamsInput = None,
) -> SplitResult:
    """Like encode but returns the parsed URL.

    Raises:
        AddressFormatError: If the composed URL does not parse; this points at
            inputs the encoder cannot represent rather than at caller error
    """
    url = encode(region=region, bucket=bucket, key=key, params=params)
    try:
        return parse_url(url)
    except InvalidSyntaxError as e:
        error = AddressFormatError(url, detail="composed URL does not parse")
        metrics.record_operation(OP_ENCODE, RESULT_ERROR, kind=error.kind.value)
        structured_logging.log_codec_event(
            logger,
            OP_ENCODE,
            RESULT_ERROR,
            url,
            level=logging.ERROR,
            kind=error.kind.value,
            error=sanitize_exception(e),
        )
        raise error from e
