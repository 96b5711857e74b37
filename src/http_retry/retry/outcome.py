"""
Attempt results and retry decisions.
"""

from dataclasses import dataclass
from enum import Enum

import httpx

from .config import RetryConfig


class FailureKind(str, Enum):
    """Kinds of transport failure the engine distinguishes."""

    TIMEOUT = "timeout"  # connectivity/timeout, retriable when enabled
    OTHER = "other"  # never retried


@dataclass(frozen=True)
class AttemptResult:
    """
    Outcome of a single attempt: a response or a transport failure.

    Attributes:
        response: The response, if one was received (also set for a failure
            that carries a partial response)
        exception: The exception raised by the transport, if any
        kind: Failure kind, None for a response
    """

    response: httpx.Response | None = None
    exception: Exception | None = None
    kind: FailureKind | None = None

    @classmethod
    def from_response(
        cls, response: httpx.Response, exception: Exception | None = None
    ) -> "AttemptResult":
        """Result carrying a response, optionally delivered via an exception."""
        return cls(response=response, exception=exception)

    @classmethod
    def from_failure(
        cls,
        exception: Exception,
        kind: FailureKind,
        response: httpx.Response | None = None,
    ) -> "AttemptResult":
        """Result for a transport failure."""
        return cls(response=response, exception=exception, kind=kind)

    @property
    def is_failure(self) -> bool:
        return self.kind is not None

    @property
    def from_error(self) -> bool:
        """True when the outcome must be re-raised rather than returned."""
        return self.exception is not None


@dataclass(frozen=True)
class Decision:
    """Whether to retry, and after how many seconds."""

    retry: bool
    delay: float = 0.0

    @classmethod
    def give_up(cls) -> "Decision":
        return cls(retry=False)

    @classmethod
    def retry_after(cls, seconds: float) -> "Decision":
        return cls(retry=True, delay=seconds)


def classify_exception(exc: Exception, config: RetryConfig) -> AttemptResult | None:
    """
    Map an exception raised by the wrapped transport to an attempt result.

    Args:
        exc: The raised exception
        config: Active configuration (defines which exceptions are timeouts)

    Returns:
        The attempt result, or None for exceptions the engine does not
        recognize (those propagate without evaluation)
    """
    if isinstance(exc, config.timeout_exceptions):
        return AttemptResult.from_failure(exc, FailureKind.TIMEOUT)
    if isinstance(exc, httpx.HTTPStatusError):
        return AttemptResult.from_response(exc.response, exception=exc)
    if isinstance(exc, httpx.TransportError):
        return AttemptResult.from_failure(exc, FailureKind.OTHER)
    return None
