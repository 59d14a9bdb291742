"""
netkit - HTTP client abstraction over pluggable transports.

Usage:
    from netkit import AiohttpTransport, HttpClient

    async with AiohttpTransport() as transport:
        client = HttpClient(transport)
        payload = await client.aget("https://api.example.com/items", params={"page": 1})

        # Callback style
        handle = client.get("https://api.example.com/items", on_complete=print)
"""

__version__ = "1.0.0"

from .http import (
    AiohttpTransport,
    ClientStatusError,
    Failure,
    HTTPError,
    HttpClient,
    HttpMethod,
    InvalidDataError,
    InvalidResponseError,
    InvalidURLError,
    RequestHandle,
    Result,
    ServerStatusError,
    Success,
    Transport,
    TransportOutcome,
    UnknownError,
    WireRequest,
    build_request,
    classify,
)
from .models.config import ClientConfig, TransportConfig

__all__ = [
    "__version__",
    # Client
    "HttpClient",
    "RequestHandle",
    "HttpMethod",
    # Transport
    "Transport",
    "TransportOutcome",
    "AiohttpTransport",
    # Pipeline
    "WireRequest",
    "build_request",
    "classify",
    "Result",
    "Success",
    "Failure",
    # Errors
    "HTTPError",
    "InvalidURLError",
    "InvalidResponseError",
    "InvalidDataError",
    "ClientStatusError",
    "ServerStatusError",
    "UnknownError",
    # Config
    "ClientConfig",
    "TransportConfig",
]
