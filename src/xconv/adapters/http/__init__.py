"""
HTTP Adapters - Transport Client

This package contains the transport capability consumed by rate providers
and its httpx implementation.
"""

from xconv.adapters.http.base import TransportClient
from xconv.adapters.http.errors import (
    NetworkError,
    RateLimitedError,
    TransportError,
    UnauthorizedError,
    UnexpectedResponseError,
    ValidationRejectedError,
)
from xconv.adapters.http.httpx_client import HttpxTransportClient

__all__ = [
    "TransportClient",
    "HttpxTransportClient",
    "TransportError",
    "NetworkError",
    "UnauthorizedError",
    "RateLimitedError",
    "ValidationRejectedError",
    "UnexpectedResponseError",
]
