"""
Synchronous retry transport.

Wraps any httpx.BaseTransport; waits with a blocking sleep confined to the
calling thread.
"""

import time
from typing import Any, Mapping

import httpx

from .base import BaseRetryTransport
from ..retry import AttemptResult, AttemptState, RetryConfig, classify_exception


class RetryTransport(BaseRetryTransport, httpx.BaseTransport):
    """
    httpx transport that retries responses and connect timeouts.

    Example:
        transport = RetryTransport(httpx.HTTPTransport(), RetryConfig(max_attempts=3))
        client = httpx.Client(transport=transport)
        client.get(url, extensions={"retry": {"enabled": False}})
    """

    def __init__(
        self,
        transport: httpx.BaseTransport | None = None,
        config: RetryConfig | Mapping[str, Any] | None = None,
        **options: Any,
    ):
        """
        Initialize the transport.

        Args:
            transport: Transport that performs the actual I/O
                (default: httpx.HTTPTransport())
            config: Client-level retry defaults
            **options: Extra option overrides, layered over config
        """
        super().__init__(config, **options)
        self._transport = transport if transport is not None else httpx.HTTPTransport()

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        config = self._resolve_config(request)
        state = AttemptState()

        while True:
            state.start_attempt(time.time())
            try:
                result = AttemptResult.from_response(self._transport.handle_request(request))
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
                    result.response.close()
            time.sleep(max(decision.delay, 0.0))

    def close(self) -> None:
        self._transport.close()
