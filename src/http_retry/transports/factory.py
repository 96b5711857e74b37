"""
Helpers that build httpx clients with retry transports installed.
"""

from typing import Any, Mapping

import httpx

from .asynchronous import AsyncRetryTransport
from .sync import RetryTransport
from ..retry import RetryConfig


def retrying_client(
    config: RetryConfig | Mapping[str, Any] | None = None,
    transport: httpx.BaseTransport | None = None,
    **client_kwargs: Any,
) -> httpx.Client:
    """
    Create an httpx.Client that retries according to config.

    Args:
        config: Client-level retry defaults
        transport: Transport to wrap (default: httpx.HTTPTransport())
        **client_kwargs: Passed through to httpx.Client

    Returns:
        A client whose requests go through a RetryTransport
    """
    return httpx.Client(transport=RetryTransport(transport, config), **client_kwargs)


def retrying_async_client(
    config: RetryConfig | Mapping[str, Any] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    **client_kwargs: Any,
) -> httpx.AsyncClient:
    """Create an httpx.AsyncClient that retries according to config."""
    return httpx.AsyncClient(transport=AsyncRetryTransport(transport, config), **client_kwargs)
