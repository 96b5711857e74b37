"""
Retry transports for httpx.
"""

from .base import RETRY_EXTENSION, BaseRetryTransport
from .sync import RetryTransport
from .asynchronous import AsyncRetryTransport
from .factory import retrying_async_client, retrying_client

__all__ = [
    "RETRY_EXTENSION",
    "BaseRetryTransport",
    "RetryTransport",
    "AsyncRetryTransport",
    "retrying_client",
    "retrying_async_client",
]
