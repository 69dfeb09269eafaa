"""
Cache-Aside Rate Service

This module wraps any RateService with read-through/write-through caching
over a CacheStore. It implements the same RateService contract, so callers
cannot tell whether they talk to the provider directly or through the cache.

Policy:
- A present entry that decodes into the expected shape is a hit.
- A missing key, a corrupt entry or a failing cache read is a miss.
- After a miss, the wrapped result is stored before it is returned;
  a failing cache write surfaces as RateServiceUnavailableError.
- No expiry, eviction or de-duplication of concurrent misses.

Files that USE this module:
- xconv.app (wraps the provider when a cache backend is configured)
- tests.test_cached_service (unit tests)

Files that this module USES:
- xconv.adapters.providers.base (RateService interface)
- xconv.adapters.cache.base (CacheStore interface, CacheError)
- xconv.domain (CurrencyCode, ExchangeRateSet, RateServiceUnavailableError)
"""
from __future__ import annotations

import json
import logging
import math
from typing import Optional

from xconv.adapters.cache.base import CacheError, CacheStore
from xconv.adapters.providers.base import RateService
from xconv.domain.errors import RateServiceUnavailableError
from xconv.domain.models import CurrencyCode, ExchangeRateSet

log = logging.getLogger(__name__)


def pair_key(source: CurrencyCode, target: CurrencyCode) -> str:
    return f"{source}-{target}"


def set_key(source: CurrencyCode) -> str:
    return str(source)


def encode_rate(rate: float) -> str:
    return json.dumps(rate)


def decode_rate(raw: str) -> Optional[float]:
    """Decode a cached single rate; None if the entry is not a finite number."""
    try:
        value = json.loads(raw)
    except ValueError:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    value = float(value)
    return value if math.isfinite(value) else None


def encode_rates(rates: ExchangeRateSet) -> str:
    return json.dumps(rates.as_dict())


def decode_rates(source: CurrencyCode, raw: str) -> Optional[ExchangeRateSet]:
    """Decode a cached rate set; None if the entry is not a {code: rate} object."""
    try:
        value = json.loads(raw)
    except ValueError:
        return None
    if not isinstance(value, dict):
        return None
    try:
        return ExchangeRateSet.from_mapping(source, value)
    except ValueError:
        return None


class CachedRateService(RateService):
    def __init__(self, cache: CacheStore, wrapped: RateService):
        """
        Args:
            cache: Backend the entries are read from and written to
            wrapped: Rate service consulted on a cache miss
        """
        self.cache = cache
        self.wrapped = wrapped

    async def _read(self, key: str) -> Optional[str]:
        try:
            return await self.cache.get(key)
        except CacheError as e:
            log.warning("Cache read failed for key=%r, treating as miss: %s", key, e)
            return None

    async def _write(self, key: str, value: str) -> None:
        try:
            await self.cache.set(key, value)
        except CacheError as e:
            log.error("Cache write failed for key=%r: %s", key, e)
            raise RateServiceUnavailableError(f"Cache write failed: {e}") from e
        log.info("Stored key = %r", key)

    async def get_rate(self, source: CurrencyCode, target: CurrencyCode) -> float:
        key = pair_key(source, target)
        cached = await self._read(key)
        if cached is not None:
            rate = decode_rate(cached)
            if rate is not None:
                log.info("Cache hit with key = %r", key)
                return rate
            log.warning("Ignoring corrupt cache entry for key = %r", key)

        log.info("Cache miss with key = %r", key)
        rate = await self.wrapped.get_rate(source, target)
        await self._write(key, encode_rate(rate))
        return rate

    async def get_rates(self, source: CurrencyCode) -> ExchangeRateSet:
        key = set_key(source)
        cached = await self._read(key)
        if cached is not None:
            rates = decode_rates(source, cached)
            if rates is not None:
                log.info("Cache hit with key = %r", key)
                return rates
            log.warning("Ignoring corrupt cache entry for key = %r", key)

        log.info("Cache miss with key = %r", key)
        rates = await self.wrapped.get_rates(source)
        await self._write(key, encode_rates(rates))
        return rates
