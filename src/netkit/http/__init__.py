"""HTTP request building, transport abstraction and response classification."""

from .classifier import classify
from .client import HttpClient
from .errors import (
    ClientStatusError,
    HTTPError,
    InvalidDataError,
    InvalidResponseError,
    InvalidURLError,
    ServerStatusError,
    UnknownError,
)
from .handle import RequestHandle
from .protocols import CancelToken, Transport, TransportOutcome
from .request import HttpMethod, WireRequest, build_request, resolve_url
from .result import Failure, Result, Success, reject_empty_body
from .transport import AiohttpTransport

__all__ = [
    "AiohttpTransport",
    "CancelToken",
    "ClientStatusError",
    "Failure",
    "HTTPError",
    "HttpClient",
    "HttpMethod",
    "InvalidDataError",
    "InvalidResponseError",
    "InvalidURLError",
    "RequestHandle",
    "Result",
    "ServerStatusError",
    "Success",
    "Transport",
    "TransportOutcome",
    "UnknownError",
    "WireRequest",
    "build_request",
    "classify",
    "reject_empty_body",
    "resolve_url",
]
