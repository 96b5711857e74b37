"""
Base exception classes for retry configuration errors.

The retry engine never raises these on the request path: responses and
transport failures are always handed back to the caller unchanged. These
exceptions only flag programmer errors in how the engine is configured.
"""


class HttpRetryError(Exception):
    """Base exception for all http-retry errors."""

    def __init__(self, message: str, *, option: str | None = None):
        super().__init__(message)
        self.message = message
        self.option = option

    def __str__(self) -> str:
        if self.option:
            return f"{self.message} (option: {self.option})"
        return self.message


class InvalidRetryConfigError(HttpRetryError, ValueError):
    """Raised when a retry option has an unusable value or an unknown name."""


class InvalidBackoffError(HttpRetryError, TypeError):
    """Raised when a backoff function returns something other than a number."""

    def __init__(self, message: str = "Backoff function must return a number", **kwargs):
        super().__init__(message, **kwargs)
