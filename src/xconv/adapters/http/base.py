"""
Base Transport Interface

Defines the single capability the rate provider adapter consumes: GET a URL
and return the response body, raising a classified TransportError otherwise.

Files that USE this module:
- xconv.adapters.http.httpx_client (HttpxTransportClient implements TransportClient)
- xconv.adapters.providers.freecurrencyapi (depends on TransportClient)
"""
from abc import ABC, abstractmethod


class TransportClient(ABC):
    @abstractmethod
    async def get(self, url: str) -> str:
        """Return the body of a successful GET, or raise a TransportError."""
        raise NotImplementedError
