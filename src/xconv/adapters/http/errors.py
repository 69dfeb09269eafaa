"""
Transport Errors - HTTP Boundary Exceptions

Classified failures of a single HTTP GET. These exist only between the
transport client and the rate provider adapter, which always translates
them into domain errors.

Files that USE this module:
- xconv.adapters.http.httpx_client (raises these errors)
- xconv.adapters.providers.freecurrencyapi (translates these errors)
"""


class TransportError(Exception):
    """Base exception for transport-level failures."""
    pass


class NetworkError(TransportError):
    """Connection-level failure (DNS, connect, read, timeout)."""

    def __init__(self, detail: str = "network error"):
        super().__init__(f"Network error: {detail}")
        self.detail = detail


class UnauthorizedError(TransportError):
    """HTTP 401: API key missing or rejected."""

    def __init__(self):
        super().__init__("Unauthorized (HTTP 401): check the API key")


class RateLimitedError(TransportError):
    """HTTP 429: request quota exhausted."""

    def __init__(self):
        super().__init__("Rate limited (HTTP 429)")


class ValidationRejectedError(TransportError):
    """HTTP 422: request parameters rejected; body holds the validation envelope."""

    def __init__(self, body: str):
        super().__init__(f"Validation rejected (HTTP 422): {body}")
        self.body = body


class UnexpectedResponseError(TransportError):
    """Any other non-success response or unreadable body."""

    def __init__(self, detail: str):
        super().__init__(f"Unexpected response: {detail}")
        self.detail = detail
