"""
http-retry - Retry-After aware retry transports for httpx.

Decides whether a failed attempt is retried and how long to wait, honouring
the server's Retry-After header and the caller's attempt and time budgets.
"""

from .exceptions import HttpRetryError, InvalidBackoffError, InvalidRetryConfigError
from .retry import (
    AttemptResult,
    AttemptState,
    Backoff,
    BackoffKind,
    Decision,
    FailureKind,
    RetryConfig,
    calculate_backoff,
    compute_delay,
    may_retry,
    parse_retry_after,
)
from .transports import (
    AsyncRetryTransport,
    RetryTransport,
    retrying_async_client,
    retrying_client,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Transports
    "RetryTransport",
    "AsyncRetryTransport",
    "retrying_client",
    "retrying_async_client",
    # Exceptions
    "HttpRetryError",
    "InvalidRetryConfigError",
    "InvalidBackoffError",
    # Retry engine
    "RetryConfig",
    "Backoff",
    "BackoffKind",
    "AttemptState",
    "AttemptResult",
    "FailureKind",
    "Decision",
    "calculate_backoff",
    "compute_delay",
    "may_retry",
    "parse_retry_after",
]
