"""Structured object-storage address."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Union
from urllib.parse import SplitResult

from .exceptions import DuplicateQueryKeyError

QueryPair = tuple[str, Union[str, None]]
QueryParams = tuple[QueryPair, ...]
QueryParamsInput = Union[Mapping[str, Union[str, None]], Iterable[QueryPair], None]


def normalize_params(params: QueryParamsInput) -> QueryParams | None:
    """Convert caller-supplied query parameters to ordered pairs.

    Args:
        params: None, a mapping, or an iterable of (key, value) pairs. Order
            is preserved as given; mappings use their iteration order.

    Returns:
        Tuple of (key, value) pairs, or None when there are no parameters

    Raises:
        DuplicateQueryKeyError: If an iterable of pairs repeats a key
    """
    if params is None:
        return None
    if isinstance(params, Mapping):
        pairs = tuple((key, value) for key, value in params.items())
    else:
        pairs = tuple((key, value) for key, value in params)
        seen: set[str] = set()
        for key, _ in pairs:
            if key in seen:
                raise DuplicateQueryKeyError(detail=f"key '{key}' given more than once")
            seen.add(key)
    return pairs or None


@dataclass(frozen=True)
class S3Address:
    """A decoded virtual-hosted-style endpoint address.

    ``query_params`` is None when the URL carried no query string. A pair with
    a None value stands for a parameter given without ``=``.
    """

    bucket: str
    region: str
    key: str
    query_params: QueryParams | None = None

    @property
    def query(self) -> dict[str, str | None] | None:
        """Query parameters as an insertion-ordered dict."""
        if self.query_params is None:
            return None
        return dict(self.query_params)

    def to_url(self) -> str:
        """Encode this address back into an endpoint URL string."""
        from .encoder import encode

        return encode(
            region=self.region,
            bucket=self.bucket,
            key=self.key,
            params=self.query_params,
        )

    @classmethod
    def from_url(cls, url: str | SplitResult) -> S3Address:
        """Decode an endpoint URL, raising AddressFormatError on failure."""
        from .decoder import decode

        return decode(url)
