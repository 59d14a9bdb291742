"""aiohttp-backed transport."""

from __future__ import annotations

import asyncio
import concurrent.futures
import logging
from types import TracebackType
from typing import Union

import aiohttp

from ..models.config import TransportConfig
from .protocols import OutcomeCallback, TransportOutcome
from .request import WireRequest

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "netkit/1.0 (+aiohttp)"


class ContentTooLargeError(Exception):
    """The response body exceeded the configured size limit."""


class _ScheduledExchange:
    """Cancel token for an exchange scheduled by AiohttpTransport.submit()."""

    def __init__(self, future: Union[asyncio.Task, concurrent.futures.Future]):
        self._future = future

    def cancel(self) -> None:
        self._future.cancel()


class AiohttpTransport:
    """
    Transport that executes wire requests with aiohttp.

    One ClientSession is shared by all requests made while the transport is
    open. Network failures are reported in TransportOutcome.error, never
    raised.

    Example:
        async with AiohttpTransport(TransportConfig(timeout=10)) as transport:
            outcome = await transport.send(request)
    """

    # Exceptions reported as transport failures
    TRANSPORT_EXCEPTIONS = (
        aiohttp.ClientError,
        asyncio.TimeoutError,
        ContentTooLargeError,
        OSError,
        # aiohttp rejects header values with CR/LF before sending
        ValueError,
    )

    def __init__(self, config: TransportConfig | None = None) -> None:
        """
        Initialize the transport.

        Args:
            config: Transport settings (defaults apply when omitted)
        """
        self._config = config or TransportConfig()
        self._session: aiohttp.ClientSession | None = None
        self._loop: asyncio.AbstractEventLoop | None = None

    @property
    def config(self) -> TransportConfig:
        return self._config

    async def __aenter__(self) -> AiohttpTransport:
        """Enter async context and create session."""
        self._loop = asyncio.get_running_loop()
        self._session = aiohttp.ClientSession(
            headers={"User-Agent": self._config.user_agent or DEFAULT_USER_AGENT},
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit async context and close session."""
        if self._session:
            await self._session.close()
            self._session = None
        self._loop = None

    def _request_headers(self, request: WireRequest) -> dict[str, str]:
        # Request headers take precedence over configured defaults
        headers = {
            name: value for name, value in self._config.headers.items() if name not in request.headers
        }
        headers.update(request.headers)
        return headers

    async def _read_body(self, response: aiohttp.ClientResponse) -> bytes:
        limit = self._config.max_content_size

        content_length = response.headers.get("Content-Length")
        if content_length and content_length.isdigit() and int(content_length) > limit:
            raise ContentTooLargeError(f"Content too large: {content_length} bytes")

        content = b""
        async for chunk in response.content.iter_chunked(8192):
            content += chunk
            if len(content) > limit:
                raise ContentTooLargeError(f"Content size limit exceeded: >{limit} bytes")
        return content

    async def send(self, request: WireRequest) -> TransportOutcome:
        """
        Execute a wire request.

        Args:
            request: The request to execute

        Returns:
            TransportOutcome with body and status, or with the transport error
        """
        if self._session is None:
            raise RuntimeError("Transport not initialized. Use 'async with' context manager.")

        try:
            async with self._session.request(
                request.method.value,
                request.url,
                headers=self._request_headers(request),
                data=request.body,
                timeout=aiohttp.ClientTimeout(total=self._config.timeout),
                proxy=self._config.proxy,
                allow_redirects=True,
            ) as response:
                body = await self._read_body(response)
                return TransportOutcome(body=body, status_code=response.status)

        except self.TRANSPORT_EXCEPTIONS as e:
            logger.debug(f"Transport error for {request.method.value} {request.url}: {e!r}")
            return TransportOutcome(error=e)

    def submit(self, request: WireRequest, on_outcome: OutcomeCallback) -> _ScheduledExchange:
        """
        Schedule a wire request on the transport's event loop.

        May be called from the loop itself or from any other thread.
        on_outcome runs on the event loop; it is not called if the
        exchange is cancelled.

        Args:
            request: The request to execute
            on_outcome: Receives the outcome once the exchange finishes

        Returns:
            Token that cancels the exchange
        """
        if self._loop is None or self._session is None:
            raise RuntimeError("Transport not initialized. Use 'async with' context manager.")

        future: Union[asyncio.Task, concurrent.futures.Future]
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None

        if running is self._loop:
            future = self._loop.create_task(self.send(request))
        else:
            future = asyncio.run_coroutine_threadsafe(self.send(request), self._loop)

        def deliver(done: Union[asyncio.Task, concurrent.futures.Future]) -> None:
            if done.cancelled():
                return
            error = done.exception()
            if error is not None:
                on_outcome(TransportOutcome(error=error))
                return
            on_outcome(done.result())

        future.add_done_callback(deliver)
        return _ScheduledExchange(future)
