"""
Domain Layer - Pure Business Objects

This package contains domain models and business rules.
No dependencies on infrastructure or external systems.
"""

from xconv.domain.models import Conversion, CurrencyCode, ExchangeRateSet
from xconv.domain.errors import (
    DomainError,
    InvalidSourceCurrencyError,
    InvalidTargetCurrencyError,
    RateServiceError,
    RateServiceUnavailableError,
)

__all__ = [
    "Conversion",
    "CurrencyCode",
    "ExchangeRateSet",
    "DomainError",
    "RateServiceError",
    "InvalidSourceCurrencyError",
    "InvalidTargetCurrencyError",
    "RateServiceUnavailableError",
]
