"""
Provider Adapters - Exchange Rate Services

This package contains the RateService capability and its implementations:
- FreeCurrencyApiRateService (remote provider adapter)
- CachedRateService (cache-aside decorator over any RateService)
"""

from xconv.adapters.providers.base import RateService
from xconv.adapters.providers.cached import CachedRateService
from xconv.adapters.providers.freecurrencyapi import DEFAULT_API_URL, FreeCurrencyApiRateService

__all__ = [
    "RateService",
    "CachedRateService",
    "FreeCurrencyApiRateService",
    "DEFAULT_API_URL",
]
