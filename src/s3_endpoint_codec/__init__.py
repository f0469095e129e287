"""Codec between S3 object addresses and virtual-hosted-style endpoint URLs."""

from .address import QueryParams, S3Address, normalize_params
from .constants import DEFAULT_REGION
from .decoder import DecodeResult, decode, decode_query, try_decode
from .encoder import encode, encode_query, encode_url
from .exceptions import (
    AddressFormatError,
    DuplicateQueryKeyError,
    ErrorKind,
    InvalidRegionNameError,
    InvalidSyntaxError,
    MalformedHostError,
    MalformedServiceLabelError,
    UnsupportedDomainError,
    UnsupportedSchemeError,
)
from .uri import domain, host, local_name, parent_address, parse_url, path_segments, to_directory_path

__all__ = [
    "DEFAULT_REGION",
    "QueryParams",
    "S3Address",
    "normalize_params",
    "encode",
    "encode_url",
    "encode_query",
    "decode",
    "decode_query",
    "try_decode",
    "DecodeResult",
    "ErrorKind",
    "AddressFormatError",
    "InvalidSyntaxError",
    "UnsupportedSchemeError",
    "MalformedHostError",
    "UnsupportedDomainError",
    "MalformedServiceLabelError",
    "DuplicateQueryKeyError",
    "InvalidRegionNameError",
    "parse_url",
    "host",
    "domain",
    "path_segments",
    "parent_address",
    "local_name",
    "to_directory_path",
]
