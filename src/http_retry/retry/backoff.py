"""
Delay calculation for the next attempt.
"""

import logging
import time
from numbers import Real

import httpx

from .config import BackoffKind, RetryConfig
from .header import parse_retry_after
from .outcome import AttemptResult
from .state import AttemptState
from ..exceptions import InvalidBackoffError

logger = logging.getLogger(__name__)


def calculate_backoff(
    attempt: int, config: RetryConfig, response: httpx.Response | None = None
) -> float:
    """
    Calculate the default delay for a given attempt.

    Args:
        attempt: One-based retry number
        config: Retry configuration
        response: Response that triggered the retry, if any

    Returns:
        Delay in seconds, never negative
    """
    backoff = config.backoff
    if backoff.kind == BackoffKind.FUNCTION:
        delay = backoff.func(attempt, response)
        if isinstance(delay, bool) or not isinstance(delay, Real):
            raise InvalidBackoffError(
                f"Backoff function returned {type(delay).__name__}, expected a number",
                option="backoff_multiplier",
            )
    else:
        delay = backoff.multiplier * attempt

    return abs(float(delay))


def compute_delay(
    state: AttemptState,
    config: RetryConfig,
    result: AttemptResult,
    now: float | None = None,
) -> float:
    """
    Determine how long to wait before the next attempt.

    A usable Retry-After header wins over the configured backoff. The result
    is then capped by max_allowable_delay and by the time left before
    give_up_after.

    Args:
        state: Attempt state, already incremented for this retry
        config: Retry configuration
        result: Outcome of the attempt just made
        now: Current wall-clock time (default: time.time())

    Returns:
        Delay in seconds. Only the give_up_after cap can make it zero or
        negative, meaning no time is left.
    """
    response = result.response
    default_delay = calculate_backoff(state.attempt_count, config, response)

    delay = default_delay
    if response is not None and config.retry_after_header in response.headers:
        header_delay = parse_retry_after(
            response.headers[config.retry_after_header],
            config.retry_after_date_format,
        )
        if header_delay is not None:
            # A date in the past means "retry now"
            delay = max(header_delay, 0.0)

    if config.max_allowable_delay and config.max_allowable_delay > 0:
        delay = min(abs(delay), abs(config.max_allowable_delay))
    else:
        delay = abs(delay)

    if config.give_up_after:
        if now is None:
            now = time.time()
        remaining = abs(config.give_up_after) - state.elapsed(now)
        delay = min(delay, remaining)

    return float(delay)
