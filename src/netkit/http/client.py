"""HTTP client facade over a pluggable transport."""

from __future__ import annotations

import logging

from ..models.config import ClientConfig
from .classifier import classify
from .errors import InvalidURLError
from .handle import CompletionCallback, RequestHandle
from .protocols import Transport, TransportOutcome
from .request import Headers, HttpMethod, QueryParameters, URLLike, WireRequest, build_request, parse_method
from .result import Failure, Result, reject_empty_body

logger = logging.getLogger(__name__)


class HttpClient:
    """
    HTTP client that depends on a Transport instead of a network stack.

    Every operation exists in two forms sharing one pipeline
    (build request, hand it to the transport, classify the outcome):
    - Callback form (get, post, ...): returns a RequestHandle at once and
      delivers a Success or Failure to on_complete later.
    - Suspend form (aget, apost, ...): coroutine returning the payload or
      raising an HTTPError subclass.

    Example:
        async with AiohttpTransport() as transport:
            client = HttpClient(transport)
            payload = await client.aget("https://api.example.com/items", params={"page": 1})
    """

    def __init__(self, transport: Transport, config: ClientConfig | None = None):
        """
        Initialize the client.

        Args:
            transport: Collaborator that executes wire requests
            config: Client behaviour settings (defaults apply when omitted)
        """
        self._transport = transport
        self._config = config or ClientConfig()

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _build(
        self,
        method: HttpMethod | str,
        url: URLLike,
        params: QueryParameters | None,
        headers: Headers | None,
        body: bytes | None,
    ) -> WireRequest | None:
        method = parse_method(method)
        if body is not None and not method.allows_body:
            raise ValueError(f"{method.value} requests cannot carry a body")
        return build_request(url, method, params=params, headers=headers, body=body)

    def _finish(self, outcome: TransportOutcome) -> Result:
        result = classify(outcome.body, outcome.status_code, outcome.error)
        if self._config.empty_body == "reject":
            result = reject_empty_body(result)
        return result

    # Callback form

    def request(
        self,
        method: HttpMethod | str,
        url: URLLike,
        body: bytes | None = None,
        *,
        params: QueryParameters | None = None,
        headers: Headers | None = None,
        on_complete: CompletionCallback,
    ) -> RequestHandle | None:
        """
        Start a request and deliver its classified result to on_complete.

        Args:
            method: HTTP method
            url: Target URL (string, parsed URL, or None)
            body: Payload; must be None for GET and DELETE
            params: Query parameters, None-valued entries are dropped
            headers: Header fields, None-valued entries are dropped
            on_complete: Called once with Success or Failure

        Returns:
            Handle for cancelling the request, or None if the URL is invalid
            (on_complete has then already received Failure(InvalidURLError()))

        Raises:
            ValueError: If a body is given for GET or DELETE
        """
        wire_request = self._build(method, url, params, headers, body)
        if wire_request is None:
            on_complete(Failure(InvalidURLError()))
            return None

        handle = RequestHandle(on_complete)
        logger.debug(f"Submitting {wire_request.method.value} {wire_request.url} as {handle.id}")

        def on_outcome(outcome: TransportOutcome) -> None:
            handle.complete(self._finish(outcome))

        handle.attach(self._transport.submit(wire_request, on_outcome))
        return handle

    def get(
        self,
        url: URLLike,
        *,
        params: QueryParameters | None = None,
        headers: Headers | None = None,
        on_complete: CompletionCallback,
    ) -> RequestHandle | None:
        """Start a GET request. See request()."""
        return self.request(HttpMethod.GET, url, params=params, headers=headers, on_complete=on_complete)

    def post(
        self,
        url: URLLike,
        body: bytes,
        *,
        params: QueryParameters | None = None,
        headers: Headers | None = None,
        on_complete: CompletionCallback,
    ) -> RequestHandle | None:
        """Start a POST request. See request()."""
        return self.request(HttpMethod.POST, url, body, params=params, headers=headers, on_complete=on_complete)

    def put(
        self,
        url: URLLike,
        body: bytes,
        *,
        params: QueryParameters | None = None,
        headers: Headers | None = None,
        on_complete: CompletionCallback,
    ) -> RequestHandle | None:
        """Start a PUT request. See request()."""
        return self.request(HttpMethod.PUT, url, body, params=params, headers=headers, on_complete=on_complete)

    def patch(
        self,
        url: URLLike,
        body: bytes,
        *,
        params: QueryParameters | None = None,
        headers: Headers | None = None,
        on_complete: CompletionCallback,
    ) -> RequestHandle | None:
        """Start a PATCH request. See request()."""
        return self.request(HttpMethod.PATCH, url, body, params=params, headers=headers, on_complete=on_complete)

    def delete(
        self,
        url: URLLike,
        *,
        params: QueryParameters | None = None,
        headers: Headers | None = None,
        on_complete: CompletionCallback,
    ) -> RequestHandle | None:
        """Start a DELETE request. See request()."""
        return self.request(HttpMethod.DELETE, url, params=params, headers=headers, on_complete=on_complete)

    # Suspend form

    async def arequest(
        self,
        method: HttpMethod | str,
        url: URLLike,
        body: bytes | None = None,
        *,
        params: QueryParameters | None = None,
        headers: Headers | None = None,
    ) -> bytes | None:
        """
        Perform a request and wait for its result.

        Args:
            method: HTTP method
            url: Target URL (string, parsed URL, or None)
            body: Payload; must be None for GET and DELETE
            params: Query parameters, None-valued entries are dropped
            headers: Header fields, None-valued entries are dropped

        Returns:
            Response payload (None when the response had no content)

        Raises:
            InvalidURLError: If the URL cannot be resolved
            InvalidResponseError: If the transport reported no usable status
            InvalidDataError: If the body is empty and the client rejects empty bodies
            ClientStatusError: On 4xx responses
            ServerStatusError: On 5xx responses
            UnknownError: On transport failures
            ValueError: If a body is given for GET or DELETE
        """
        wire_request = self._build(method, url, params, headers, body)
        if wire_request is None:
            raise InvalidURLError()

        logger.debug(f"Sending {wire_request.method.value} {wire_request.url}")
        outcome = await self._transport.send(wire_request)
        return self._finish(outcome).unwrap()

    async def aget(
        self,
        url: URLLike,
        *,
        params: QueryParameters | None = None,
        headers: Headers | None = None,
    ) -> bytes | None:
        """Perform a GET request. See arequest()."""
        return await self.arequest(HttpMethod.GET, url, params=params, headers=headers)

    async def apost(
        self,
        url: URLLike,
        body: bytes,
        *,
        params: QueryParameters | None = None,
        headers: Headers | None = None,
    ) -> bytes | None:
        """Perform a POST request. See arequest()."""
        return await self.arequest(HttpMethod.POST, url, body, params=params, headers=headers)

    async def aput(
        self,
        url: URLLike,
        body: bytes,
        *,
        params: QueryParameters | None = None,
        headers: Headers | None = None,
    ) -> bytes | None:
        """Perform a PUT request. See arequest()."""
        return await self.arequest(HttpMethod.PUT, url, body, params=params, headers=headers)

    async def apatch(
        self,
        url: URLLike,
        body: bytes,
        *,
        params: QueryParameters | None = None,
        headers: Headers | None = None,
    ) -> bytes | None:
        """Perform a PATCH request. See arequest()."""
        return await self.arequest(HttpMethod.PATCH, url, body, params=params, headers=headers)

    async def adelete(
        self,
        url: URLLike,
        *,
        params: QueryParameters | None = None,
        headers: Headers | None = None,
    ) -> bytes | None:
        """Perform a DELETE request. See arequest()."""
        return await self.arequest(HttpMethod.DELETE, url, params=params, headers=headers)
