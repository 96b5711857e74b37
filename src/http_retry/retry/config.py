"""
Retry configuration and backoff definitions.
"""

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from numbers import Real
from typing import Any, Callable, FrozenSet, Iterable, Mapping, Tuple

import httpx

from ..exceptions import InvalidRetryConfigError

# HTTP-date (RFC 1123), e.g. "Wed, 21 Oct 2015 07:28:00 GMT"
DATE_FORMAT = "%a, %d %b %Y %H:%M:%S %Z"

RETRY_HEADER = "X-Retry-Counter"
RETRY_AFTER_HEADER = "Retry-After"

BackoffFunction = Callable[[int, "httpx.Response | None"], float]
RetryCallback = Callable[..., Any]

# Alternate option names accepted by RetryConfig.merge() / from_dict()
OPTION_ALIASES = {
    "retry_enabled": "enabled",
    "default_retry_multiplier": "backoff_multiplier",
    "max_retry_attempts": "max_attempts",
    "retry_only_if_retry_after_header": "require_retry_after_header",
    "require_hint_header": "require_retry_after_header",
    "on_retry_callback": "on_retry",
    "retriable_statuses": "retry_on_status",
    "max_allowable_timeout_secs": "max_allowable_delay",
    "max_allowable_delay_secs": "max_allowable_delay",
    "give_up_after_secs": "give_up_after",
    "expose_attempt_header": "expose_retry_header",
    "attempt_header_name": "retry_header",
    "hint_header_name": "retry_after_header",
    "hint_date_format": "retry_after_date_format",
}


class BackoffKind(str, Enum):
    """How the default delay is derived when no usable hint header exists."""

    CONSTANT = "constant"  # delay = multiplier * attempt
    FUNCTION = "function"  # delay = func(attempt, response)


@dataclass(frozen=True)
class Backoff:
    """
    Backoff definition: a constant multiplier or a function.

    Attributes:
        kind: Which variant this is
        multiplier: Seconds per attempt (CONSTANT only)
        func: Callable(attempt, response) returning seconds (FUNCTION only)
    """

    kind: BackoffKind
    multiplier: float = 0.0
    func: BackoffFunction | None = None

    @classmethod
    def constant(cls, multiplier: float) -> "Backoff":
        """Backoff growing linearly with the attempt number."""
        return cls(kind=BackoffKind.CONSTANT, multiplier=float(multiplier))

    @classmethod
    def function(cls, func: BackoffFunction) -> "Backoff":
        """Backoff computed by a caller-supplied function."""
        return cls(kind=BackoffKind.FUNCTION, func=func)

    @classmethod
    def from_value(cls, value: Any) -> "Backoff":
        """Build a Backoff from a number, a callable or an existing Backoff."""
        if isinstance(value, Backoff):
            return value
        if isinstance(value, Real) and not isinstance(value, bool):
            return cls.constant(value)
        if callable(value):
            return cls.function(value)
        raise InvalidRetryConfigError(
            f"Backoff must be a number or a callable, got {type(value).__name__}",
            option="backoff_multiplier",
        )


@dataclass(frozen=True)
class RetryConfig:
    """
    Configuration for retry behavior.

    Instances are immutable; use merge() to layer overrides on top of a
    config and get a new one back.

    Attributes:
        enabled: Master on/off switch (default: True)
        backoff_multiplier: Number or callable(attempt, response) used when the
            server gives no usable Retry-After header (default: 1.5)
        max_attempts: Maximum number of retries per request (default: 10)
        max_allowable_delay: Ceiling for a single wait, in seconds (None or 0:
            no ceiling)
        give_up_after: Ceiling for total elapsed time, in seconds (None or 0:
            no ceiling)
        require_retry_after_header: Only retry when the hint header is present
        retry_on_status: HTTP status codes that trigger a retry
        on_retry: Callback(attempt, delay, request, config, response) invoked
            before each wait
        retry_on_timeout: Retry when the transport raises a timeout exception
        timeout_exceptions: Exception types treated as connectivity/timeout
        expose_retry_header: Add the retry count to the final response
        retry_header: Name of that header
        retry_after_header: Name of the header carrying the server's delay hint
        retry_after_date_format: strptime format for date-valued hints
    """

    enabled: bool = True
    backoff_multiplier: float | BackoffFunction | Backoff = 1.5
    max_attempts: int = 10
    max_allowable_delay: float | None = None
    give_up_after: float | None = None
    require_retry_after_header: bool = False
    retry_on_status: FrozenSet[int] = field(default_factory=lambda: frozenset({429, 503}))
    on_retry: RetryCallback | None = None
    retry_on_timeout: bool = False
    timeout_exceptions: Tuple[type, ...] = (httpx.ConnectTimeout,)
    expose_retry_header: bool = False
    retry_header: str = RETRY_HEADER
    retry_after_header: str = RETRY_AFTER_HEADER
    retry_after_date_format: str = DATE_FORMAT

    def __post_init__(self) -> None:
        object.__setattr__(self, "backoff_multiplier", Backoff.from_value(self.backoff_multiplier))
        object.__setattr__(self, "retry_on_status", _status_set(self.retry_on_status))
        object.__setattr__(self, "timeout_exceptions", _exception_types(self.timeout_exceptions))

        if isinstance(self.max_attempts, bool) or not isinstance(self.max_attempts, int):
            raise InvalidRetryConfigError("Must be an integer", option="max_attempts")
        if self.max_attempts < 0:
            raise InvalidRetryConfigError("Must not be negative", option="max_attempts")
        for name in ("max_allowable_delay", "give_up_after"):
            value = getattr(self, name)
            if value is not None and (isinstance(value, bool) or not isinstance(value, Real)):
                raise InvalidRetryConfigError("Must be a number or None", option=name)
        if self.on_retry is not None and not callable(self.on_retry):
            raise InvalidRetryConfigError("Must be callable", option="on_retry")
        for name in ("retry_header", "retry_after_header", "retry_after_date_format"):
            if not getattr(self, name):
                raise InvalidRetryConfigError("Must not be empty", option=name)

    @property
    def backoff(self) -> Backoff:
        """The normalized backoff definition."""
        return self.backoff_multiplier  # type: ignore[return-value]

    def should_retry(self, status_code: int) -> bool:
        """Check if the given status code should trigger a retry."""
        return status_code in self.retry_on_status

    def merge(self, overrides: "RetryConfig | Mapping[str, Any] | None") -> "RetryConfig":
        """
        Return a new config with overrides applied on top of this one.

        Args:
            overrides: A mapping of option names (aliases accepted), a complete
                RetryConfig that replaces this one, or None

        Returns:
            The merged configuration; self is never modified
        """
        if overrides is None:
            return self
        if isinstance(overrides, RetryConfig):
            return overrides
        if not isinstance(overrides, Mapping):
            raise InvalidRetryConfigError(
                f"Overrides must be a mapping or RetryConfig, got {type(overrides).__name__}"
            )
        return replace(self, **_resolve_options(overrides))

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> "RetryConfig":
        """Build a config from plain data, e.g. a parsed settings file."""
        return cls().merge(config)

    @classmethod
    def no_retry(cls) -> "RetryConfig":
        """Preset for no retry (single attempt only)."""
        return cls(max_attempts=0)

    @classmethod
    def respect_server(cls) -> "RetryConfig":
        """Preset that only retries when the server sends a Retry-After header."""
        return cls(require_retry_after_header=True)

    @classmethod
    def with_timeouts(cls) -> "RetryConfig":
        """Preset that also retries connect timeouts."""
        return cls(retry_on_timeout=True)


def _resolve_options(options: Mapping[str, Any]) -> dict[str, Any]:
    known = {f.name for f in fields(RetryConfig)}
    resolved: dict[str, Any] = {}
    for key, value in options.items():
        name = OPTION_ALIASES.get(key, key)
        if name not in known:
            raise InvalidRetryConfigError("Unknown retry option", option=key)
        resolved[name] = value
    return resolved


def _status_set(statuses: Iterable[int | str] | int) -> FrozenSet[int]:
    if isinstance(statuses, (int, str)):
        statuses = [statuses]
    try:
        return frozenset(int(status) for status in statuses)
    except (TypeError, ValueError) as e:
        raise InvalidRetryConfigError(
            f"Status codes must be integers: {e}", option="retry_on_status"
        ) from e


def _exception_types(types: Iterable[type] | type) -> Tuple[type, ...]:
    if isinstance(types, type):
        types = (types,)
    result = tuple(types)
    for exc_type in result:
        if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
            raise InvalidRetryConfigError(
                f"Not an exception type: {exc_type!r}", option="timeout_exceptions"
            )
    return result
