"""
Commands - Use Cases Executed by the CLI

This module contains the two user-facing operations: listing every rate for
a base currency and converting an amount into a target currency. Commands
depend only on the RateService capability, so they run the same way against
the direct provider or the cache-aside decorator.

Files that USE this module:
- xconv.app (builds and executes a command from CLI arguments)
- tests.test_commands (unit tests)

Files that this module USES:
- xconv.adapters.providers.base (RateService interface)
- xconv.adapters.formatting.formatter (rendering of results)
- xconv.domain.models (CurrencyCode, Conversion)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from xconv.adapters.formatting.formatter import format_conversion, format_rate_listing
from xconv.adapters.providers.base import RateService
from xconv.domain.models import Conversion, CurrencyCode

log = logging.getLogger(__name__)


async def convert(service: RateService, source: CurrencyCode, target: CurrencyCode, amount: float) -> Conversion:
    """
    Convert amount of source currency into target currency.

    Raises:
        RateServiceError: Propagated from the rate service
    """
    rate = await service.get_rate(source, target)
    log.debug("Converted %s %s to %s at rate %s", amount, source, target, rate)
    return Conversion(source=source, target=target, amount=amount, rate=rate)


@dataclass(frozen=True)
class ListRatesCommand:
    """List every rate for a base currency, sorted by code."""
    source: CurrencyCode

    async def execute(self, service: RateService) -> str:
        rates = await service.get_rates(self.source)
        return format_rate_listing(rates)


@dataclass(frozen=True)
class ConvertCommand:
    """Convert an amount from source into target currency."""
    source: CurrencyCode
    target: CurrencyCode
    amount: float = 1.0

    async def execute(self, service: RateService) -> str:
        conversion = await convert(service, self.source, self.target, self.amount)
        return format_conversion(conversion)


Command = Union[ListRatesCommand, ConvertCommand]
