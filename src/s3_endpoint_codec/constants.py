"""Constants for the S3 endpoint codec."""

# Region whose endpoint host carries no region suffix
DEFAULT_REGION = "us-east-1"

# Schemes
ENCODE_SCHEME = "https"
SUPPORTED_SCHEMES = ("http", "https")

# Host layout: [BUCKET].s3[-REGION].amazonaws.com
HOST_LABEL_COUNT = 4
DOMAIN_LABEL = "amazonaws"
ZONE_LABEL = "com"
DOMAIN_SUFFIX = f"{DOMAIN_LABEL}.{ZONE_LABEL}"
SERVICE_LABEL = "s3"
REGIONAL_SERVICE_PREFIX = f"{SERVICE_LABEL}-"

HOST_PATTERN = (
    f"[BUCKET].{SERVICE_LABEL}.{DOMAIN_SUFFIX} or "
    f"[BUCKET].{REGIONAL_SERVICE_PREFIX}[REGION].{DOMAIN_SUFFIX}"
)

# RFC 3986 unreserved characters besides ALPHA / DIGIT
UNRESERVED_CHARS = "-._~"

# Query parameters that carry signing material
SIGNING_QUERY_PARAMS = (
    "X-Amz-Signature",
    "X-Amz-Credential",
    "X-Amz-Security-Token",
    "Signature",
    "AWSAccessKeyId",
)

# Operation labels
OP_ENCODE = "encode"
OP_DECODE = "decode"
RESULT_SUCCESS = "success"
RESULT_ERROR = "error"
