"""
Exception hierarchy for http-retry.
"""

from .base import HttpRetryError, InvalidBackoffError, InvalidRetryConfigError

__all__ = [
    "HttpRetryError",
    "InvalidRetryConfigError",
    "InvalidBackoffError",
]
