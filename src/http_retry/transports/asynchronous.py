"""
Asynchronous retry transport.

Wraps any httpx.AsyncBaseTransport; waits with asyncio.sleep so other
requests on the event loop keep making progress. Cancelling the request
while it waits abandons the retry sequence.
"""

import asyncio
import time
from typing import Any, Mapping

import httpx

from .base import BaseRetryTransport
from ..retry import AttemptResult, AttemptState, RetryConfig, classify_exception


class AsyncRetryTransport(BaseRetryTransport, httpx.AsyncBaseTransport):
    """httpx async transport that retries responses and connect timeouts."""

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport | None = None,
        config: RetryConfig | Mapping[str, Any] | None = None,
        **options: Any,
    ):
        """
        Initialize the transport.

        Args:
            transport: Transport that performs the actual I/O
                (default: httpx.AsyncHTTPTransport())
            config: Client-level retry defaults
            **options: Extra option overrides, layered over config
        """
        super().__init__(config, **options)
        self._transport = transport if transport is not None else httpx.AsyncHTTPTransport()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        config = self._resolve_config(request)
        state = AttemptState()

        while True:
            state.start_attempt(time.time())
            try:
                response = await self._transport.handle_async_request(request)
                result = AttemptResult.from_response(response)
            except Exception as e:
                result = classify_exception(e, config)
                if result is None:
                    raise

            decision = self._decide(config, state, result)
            if not decision.retry:
                return self._finish(config, state, request, result)

            try:
                config = self._notify(config, state, decision, request, result)
            finally:
                if result.response is not None:
                    await result.response.aclose()
            await asyncio.sleep(max(decision.delay, 0.0))

    async def aclose(self) -> None:
        await self._transport.aclose()
