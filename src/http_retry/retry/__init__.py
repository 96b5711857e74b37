"""
Retry decision and delay engine.

Eligibility rules, Retry-After interpretation and backoff calculation.
"""

from .config import DATE_FORMAT, Backoff, BackoffKind, RetryConfig
from .backoff import calculate_backoff, compute_delay
from .header import parse_retry_after
from .outcome import AttemptResult, Decision, FailureKind, classify_exception
from .policy import count_remaining_retries, may_retry
from .state import AttemptState

__all__ = [
    "DATE_FORMAT",
    "Backoff",
    "BackoffKind",
    "RetryConfig",
    "calculate_backoff",
    "compute_delay",
    "parse_retry_after",
    "AttemptResult",
    "Decision",
    "FailureKind",
    "classify_exception",
    "count_remaining_retries",
    "may_retry",
    "AttemptState",
]
