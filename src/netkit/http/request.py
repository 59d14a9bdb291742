"""Construction of wire requests from URL-like input, parameters and headers."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union
from urllib.parse import ParseResult, SplitResult, urlencode, urlsplit, urlunsplit

from multidict import CIMultiDict, CIMultiDictProxy


class HttpMethod(str, Enum):
    """Supported HTTP request methods."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @property
    def allows_body(self) -> bool:
        return self not in (HttpMethod.GET, HttpMethod.DELETE)


URLLike = Union[str, SplitResult, ParseResult, None]
Scalar = Union[str, int, float, bool, None]
QueryParameters = Mapping[str, Scalar]
Headers = Mapping[str, Scalar]

_UNSAFE_CHARS = re.compile(r"[\s\x00-\x1f\x7f]")


@dataclass(frozen=True)
class WireRequest:
    """
    Immutable, fully resolved request ready to hand to a transport.

    Attributes:
        method: HTTP method
        url: Absolute URL including the query string
        headers: Case-insensitive, read-only header mapping
        body: Raw payload, or None when the request has no body
    """

    method: HttpMethod
    url: str
    headers: CIMultiDictProxy[str]
    body: Optional[bytes] = None


def parse_method(method: HttpMethod | str) -> HttpMethod:
    """Accept an HttpMethod or its name in any case."""
    if isinstance(method, HttpMethod):
        return method
    return HttpMethod(method.upper())


def _is_absolute(parts: SplitResult) -> bool:
    if not parts.scheme or not parts.hostname:
        return False
    try:
        parts.port
    except ValueError:
        return False
    return True


def resolve_url(url_like: URLLike) -> str | None:
    """
    Resolve URL-like input to an absolute URL string.

    Args:
        url_like: A URL string, an already parsed URL, or None

    Returns:
        The absolute URL, or None if it cannot be resolved

    Raises:
        TypeError: If url_like is not one of the supported variants
    """
    if url_like is None:
        return None

    if isinstance(url_like, str):
        if not url_like or _UNSAFE_CHARS.search(url_like):
            return None
        try:
            parts = urlsplit(url_like)
        except ValueError:
            return None
    elif isinstance(url_like, (ParseResult, SplitResult)):
        try:
            parts = urlsplit(url_like.geturl())
        except ValueError:
            return None
    else:
        raise TypeError(f"Unsupported URL type: {type(url_like).__name__}")

    if not _is_absolute(parts):
        return None
    url = urlunsplit(parts)
    if _UNSAFE_CHARS.search(url):
        return None
    return url


def format_scalar(value: str | int | float | bool) -> str:
    """String representation used for query items and header values."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _present_items(mapping: Mapping[str, Scalar] | None) -> list[tuple[str, str]]:
    if not mapping:
        return []
    return [(key, format_scalar(value)) for key, value in mapping.items() if value is not None]


def _append_query(url: str, items: list[tuple[str, str]]) -> str:
    if not items:
        return url
    parts = urlsplit(url)
    encoded = urlencode(items)
    query = f"{parts.query}&{encoded}" if parts.query else encoded
    return urlunsplit(parts._replace(query=query))


def build_request(
    url_like: URLLike,
    method: HttpMethod | str,
    params: QueryParameters | None = None,
    headers: Headers | None = None,
    body: bytes | None = None,
) -> WireRequest | None:
    """
    Build a wire request.

    Entries of params and headers whose value is None are dropped. Other
    values are converted with format_scalar(). The body is attached as-is;
    b"" is an empty payload, None is no payload.

    Args:
        url_like: Target URL
        method: HTTP method
        params: Optional query parameters appended to the URL
        headers: Optional header fields
        body: Optional payload

    Returns:
        WireRequest, or None if the URL cannot be resolved
    """
    url = resolve_url(url_like)
    if url is None:
        return None

    header_fields: CIMultiDict[str] = CIMultiDict()
    for name, value in _present_items(headers):
        header_fields[name] = value

    return WireRequest(
        method=parse_method(method),
        url=_append_query(url, _present_items(params)),
        headers=CIMultiDictProxy(header_fields),
        body=body,
    )
