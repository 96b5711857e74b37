"""
Retry eligibility rules.
"""

from .config import RetryConfig
from .outcome import AttemptResult, FailureKind
from .state import AttemptState


def count_remaining_retries(config: RetryConfig, state: AttemptState) -> int:
    """Count the number of retries remaining. Always returns 0 or greater."""
    return max(config.max_attempts - state.attempt_count, 0)


def time_budget_exhausted(config: RetryConfig, state: AttemptState) -> bool:
    """
    Check whether the give-up ceiling has passed.

    Uses the start time of the current attempt, so a slow transport call does
    not retroactively void an attempt that started within budget.
    """
    if not config.give_up_after or state.first_attempt_at is None:
        return False
    give_up_at = state.first_attempt_at + abs(config.give_up_after)
    current = state.current_attempt_at
    if current is None:
        current = state.first_attempt_at
    return current >= give_up_at


def may_retry(config: RetryConfig, state: AttemptState, result: AttemptResult) -> bool:
    """
    Decide whether another attempt is permitted.

    Checks run in order and the first failing one wins. Reads state only.

    Args:
        config: Active retry configuration
        state: Attempt state of the logical request
        result: Outcome of the attempt just made

    Returns:
        True if the request should be retried
    """
    if not config.enabled:
        return False
    if time_budget_exhausted(config, state):
        return False
    if count_remaining_retries(config, state) == 0:
        return False

    response = result.response
    if (
        config.require_retry_after_header
        and response is not None
        and config.retry_after_header not in response.headers
    ):
        return False

    if result.is_failure:
        return result.kind == FailureKind.TIMEOUT and config.retry_on_timeout

    return response is not None and config.should_retry(response.status_code)
