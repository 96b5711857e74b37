"""
Base retry transport.

Holds the decision loop shared by the sync and async transports: merging
options, evaluating each attempt, invoking the retry callback and building
the final response.
"""

import logging
import time
from typing import Any, Mapping

import httpx

from ..retry import (
    AttemptResult,
    AttemptState,
    Decision,
    FailureKind,
    RetryConfig,
    compute_delay,
    may_retry,
)

logger = logging.getLogger(__name__)

# Request extension carrying per-call retry overrides
RETRY_EXTENSION = "retry"


class BaseRetryTransport:
    """
    Shared logic for transports that retry requests.

    Subclasses wrap a concrete httpx transport and drive the attempt loop;
    everything that does not touch I/O lives here.
    """

    def __init__(
        self,
        config: RetryConfig | Mapping[str, Any] | None = None,
        **options: Any,
    ):
        """
        Initialize the transport.

        Args:
            config: Client-level retry defaults, layered over RetryConfig()
            **options: Extra option overrides, layered over config
        """
        self.config = RetryConfig().merge(config).merge(options or None)

    def _resolve_config(self, request: httpx.Request) -> RetryConfig:
        """Layer the request's per-call overrides over the transport defaults."""
        return self.config.merge(request.extensions.get(RETRY_EXTENSION))

    def _decide(
        self, config: RetryConfig, state: AttemptState, result: AttemptResult
    ) -> Decision:
        """Evaluate an attempt; on retry, count it and compute the delay."""
        if not may_retry(config, state, result):
            if self._was_retriable(config, result) and config.enabled:
                logger.debug(
                    f"Giving up after {state.attempt_count} retries "
                    f"(max {config.max_attempts})"
                )
            return Decision.give_up()

        state.increment()
        return Decision.retry_after(compute_delay(state, config, result, time.time()))

    def _notify(
        self,
        config: RetryConfig,
        state: AttemptState,
        decision: Decision,
        request: httpx.Request,
        result: AttemptResult,
    ) -> RetryConfig:
        """
        Log the retry and invoke the on_retry callback.

        The callback may edit the request in place. If it returns a
        RetryConfig or a mapping of options, that becomes the config for the
        remaining attempts of this request. Any other return value is ignored.
        """
        logger.warning(
            f"Retrying {request.method} {request.url} after {self._describe(result)}, "
            f"waiting {decision.delay:.1f}s ({state.attempt_count}/{config.max_attempts})"
        )
        if config.on_retry is None:
            return config

        updated = config.on_retry(
            state.attempt_count,
            float(decision.delay),
            request,
            config,
            result.response,
        )
        if isinstance(updated, (RetryConfig, Mapping)):
            return config.merge(updated)
        return config

    def _finish(
        self,
        config: RetryConfig,
        state: AttemptState,
        request: httpx.Request,
        result: AttemptResult,
    ) -> httpx.Response:
        """Hand the final outcome back: re-raise errors, return responses."""
        if result.from_error:
            raise result.exception

        response = result.response
        if not config.expose_retry_header or state.attempt_count == 0:
            return response
        return with_header(response, request, config.retry_header, str(state.attempt_count))

    @staticmethod
    def _was_retriable(config: RetryConfig, result: AttemptResult) -> bool:
        if result.is_failure:
            return result.kind == FailureKind.TIMEOUT and config.retry_on_timeout
        return config.should_retry(result.response.status_code)

    @staticmethod
    def _describe(result: AttemptResult) -> str:
        if result.is_failure:
            return f"{type(result.exception).__name__}: {result.exception}"
        return f"status {result.response.status_code}"


def with_header(
    response: httpx.Response, request: httpx.Request, name: str, value: str
) -> httpx.Response:
    """Return a copy of the response with one header added."""
    headers = response.headers.copy()
    headers[name] = value
    return httpx.Response(
        status_code=response.status_code,
        headers=headers,
        stream=response.stream,
        request=request,
        extensions=response.extensions,
    )
