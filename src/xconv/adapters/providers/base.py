"""
Base Rate Service Interface

This module defines the capability every exchange rate service implements:
the direct provider adapter and the cache-aside decorator alike. Command
execution depends only on this contract.

Files that USE this module:
- xconv.adapters.providers.freecurrencyapi (FreeCurrencyApiRateService implements RateService)
- xconv.adapters.providers.cached (CachedRateService implements and wraps RateService)
- xconv.application.commands (commands consume a RateService)

Files that this module USES:
- xconv.domain.models (CurrencyCode, ExchangeRateSet)
"""
from abc import ABC, abstractmethod

from xconv.domain.models import CurrencyCode, ExchangeRateSet


class RateService(ABC):
    @abstractmethod
    async def get_rate(self, source: CurrencyCode, target: CurrencyCode) -> float:
        """
        Return units of target per one unit of source.

        Raises:
            RateServiceError: InvalidSourceCurrencyError, InvalidTargetCurrencyError
                              or RateServiceUnavailableError
        """
        raise NotImplementedError

    @abstractmethod
    async def get_rates(self, source: CurrencyCode) -> ExchangeRateSet:
        """
        Return every rate the provider knows for source.

        Raises:
            RateServiceError: InvalidSourceCurrencyError or RateServiceUnavailableError
        """
        raise NotImplementedError
