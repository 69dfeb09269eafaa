"""
Domain Errors - Business Logic Exceptions

This module defines domain-specific exceptions raised by rate services.
Provider- and transport-specific failures are translated into these
before they reach a caller.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class RateServiceError(DomainError):
    """Base exception for failures of a rate service lookup."""
    pass


class InvalidSourceCurrencyError(RateServiceError):
    """Raised when the provider rejects the source (base) currency."""

    def __init__(self, message: str = "Invalid source currency"):
        super().__init__(message)


class InvalidTargetCurrencyError(RateServiceError):
    """Raised when the provider rejects or omits the target currency."""

    def __init__(self, message: str = "Invalid target currency"):
        super().__init__(message)


class RateServiceUnavailableError(RateServiceError):
    """
    Raised when rates cannot be obtained for any other reason.

    The detail is diagnostic only; callers must not branch on its content.
    """

    def __init__(self, detail: str):
        super().__init__(f"Exchange rate service unavailable: {detail}")
        self.detail = detail
