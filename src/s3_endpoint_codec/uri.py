"""Navigation helpers over parsed endpoint URLs."""

from __future__ import annotations

from urllib.parse import SplitResult, urlsplit

from .exceptions import InvalidSyntaxError


def parse_url(url: str) -> SplitResult:
    """Parse an absolute URL string.

    Raises:
        InvalidSyntaxError: If the string is not an absolute URL or carries an
            invalid host or port
    """
    if not isinstance(url, str):
        raise InvalidSyntaxError(repr(url), detail="not a string")
    try:
        parsed = urlsplit(url)
        parsed.port  # raises ValueError on a non-numeric or out of range port
    except ValueError as e:
        raise InvalidSyntaxError(url, detail=str(e)) from e
    if not parsed.scheme:
        raise InvalidSyntaxError(url, detail="missing scheme")
    return parsed


def _as_split(url: str | SplitResult) -> SplitResult:
    if isinstance(url, SplitResult):
        return url
    return parse_url(url)


def host(url: str | SplitResult) -> str:
    """Return the host of a URL with its original case, without userinfo or port."""
    netloc = _as_split(url).netloc.rpartition("@")[2]
    if netloc.startswith("["):
        return netloc[1:].partition("]")[0]
    return netloc.partition(":")[0]


def path_segments(url: str | SplitResult) -> list[str]:
    """Split the URL path into segments that keep their trailing '/'.

    The root '/' is the first segment, so "/dir/file.txt" yields
    ["/", "dir/", "file.txt"]. Segments stay percent-encoded; an escaped
    '%2F' is not a separator.
    """
    path = _as_split(url).path or "/"
    segments = []
    start = 0
    while start < len(path):
        end = path.find("/", start)
        if end == -1:
            segments.append(path[start:])
            break
        segments.append(path[start : end + 1])
        start = end + 1
    return segments


def domain(url: str | SplitResult) -> str:
    """Return scheme and host, e.g. https://bucket.s3.amazonaws.com."""
    parsed = _as_split(url)
    return f"{parsed.scheme}://{host(parsed)}"


def parent_address(url: str | SplitResult) -> str:
    """Return the URL of the parent 'directory', or '' at the root."""
    segments = path_segments(url)
    if len(segments) < 2:
        return ""
    return domain(url) + "".join(segments[:-1]).rstrip("/")


def local_name(url: str | SplitResult) -> str:
    """Return the last path segment without its trailing '/', or '' at the root."""
    segments = path_segments(url)
    if len(segments) < 2:
        return ""
    return segments[-1].rstrip("/")


def to_directory_path(path: str | None) -> str | None:
    """Append a trailing '/' unless the path is blank or already has one."""
    if path and path.strip() and not path.endswith("/"):
        return path + "/"
    return path
