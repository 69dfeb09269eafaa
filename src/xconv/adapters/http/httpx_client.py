"""
HTTPX Transport Client

This module implements TransportClient on top of httpx.AsyncClient.
It maps HTTP status codes and connection failures onto the transport
error taxonomy. It performs no retries.

Files that USE this module:
- xconv.app (composition root creates the client)
- tests.test_transport (unit tests with httpx.MockTransport)

Files that this module USES:
- xconv.adapters.http.base (TransportClient interface)
- xconv.adapters.http.errors (transport error taxonomy)
"""
from __future__ import annotations

import logging
from typing import Optional

import httpx

from xconv.adapters.http.base import TransportClient
from xconv.adapters.http.errors import (
    NetworkError,
    RateLimitedError,
    UnauthorizedError,
    UnexpectedResponseError,
    ValidationRejectedError,
)

log = logging.getLogger(__name__)


class HttpxTransportClient(TransportClient):
    def __init__(self, client: Optional[httpx.AsyncClient] = None, timeout: float = 10.0):
        """
        Initialize the transport client.

        Args:
            client: Optional pre-configured httpx.AsyncClient (e.g., with a mock transport).
                    When omitted, the client is created here and closed by aclose().
            timeout: HTTP timeout in seconds for an owned client
        """
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def get(self, url: str) -> str:
        """
        Perform one HTTP GET.

        Returns:
            Response body text on HTTP 200

        Raises:
            UnauthorizedError: On HTTP 401
            RateLimitedError: On HTTP 429
            ValidationRejectedError: On HTTP 422 (carries the body)
            UnexpectedResponseError: On any other status
            NetworkError: On connection-level failures
        """
        try:
            resp = await self._client.get(url)
        except httpx.TimeoutException as e:
            log.warning("HTTP request timed out: %s", e)
            raise NetworkError(f"timeout: {e}") from e
        except httpx.TransportError as e:
            log.warning("HTTP request failed (network/connection error): %s", e)
            raise NetworkError(str(e) or type(e).__name__) from e
        except httpx.RequestError as e:
            # Decoding errors, too many redirects
            log.error("HTTP request failed: %s", e)
            raise UnexpectedResponseError(str(e) or type(e).__name__) from e

        status = resp.status_code
        if status == 200:
            return resp.text
        if status == 401:
            raise UnauthorizedError()
        if status == 429:
            raise RateLimitedError()
        if status == 422:
            raise ValidationRejectedError(resp.text)

        log.error("Unexpected HTTP status %d", status)
        raise UnexpectedResponseError(f"Unexpected response HTTP status code {status}")

    async def aclose(self) -> None:
        """Close the underlying client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransportClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
