"""
Cache-Aside Tests - Unit Tests for CachedRateService

This module tests the read-through/write-through behaviour of the cache-aside
rate service: hits, misses, corrupt entries, cache outages, write failures
and propagation of wrapped errors.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- xconv.adapters.providers.cached (CachedRateService and cache value encoding)
- xconv.adapters.cache (InMemoryCacheStore, FileCacheStore, CacheStore, CacheError)
- xconv.domain (CurrencyCode, ExchangeRateSet, domain errors)
- unittest.mock (AsyncMock for the wrapped service and cache)
- pytest, pytest-asyncio (testing framework)
"""
import json  # Inspect stored cache values
from unittest.mock import AsyncMock, Mock  # Mock objects for wrapped service and cache

import pytest  # Testing framework for writing and running tests

from xconv.adapters.cache import CacheError, CacheStore, FileCacheStore, InMemoryCacheStore
from xconv.adapters.providers.base import RateService
from xconv.adapters.providers.cached import (
    CachedRateService,
    decode_rate,
    decode_rates,
    encode_rates,
)
from xconv.domain.errors import (
    InvalidSourceCurrencyError,
    InvalidTargetCurrencyError,
    RateServiceUnavailableError,
)
from xconv.domain.models import CurrencyCode, ExchangeRateSet

USD = CurrencyCode.parse("USD")
PLN = CurrencyCode.parse("PLN")
EUR = CurrencyCode.parse("EUR")


def _wrapped(rate=4.1, rates=None):
    service = Mock(spec=RateService)
    service.get_rate = AsyncMock(return_value=rate)
    service.get_rates = AsyncMock(
        return_value=rates or ExchangeRateSet.from_mapping(USD, {"PLN": 4.1, "EUR": 0.9})
    )
    return service


def _failing_cache(get_error=None, set_error=None, stored=None):
    cache = Mock(spec=CacheStore)
    cache.get = AsyncMock(return_value=stored, side_effect=get_error)
    cache.set = AsyncMock(side_effect=set_error)
    return cache


class TestCacheValueEncoding:
    def test_rate_set_round_trip(self):
        rates = ExchangeRateSet.from_mapping(USD, {"PLN": 4.1, "EUR": 0.9, "JPY": 150.25})
        assert decode_rates(USD, encode_rates(rates)) == rates

    def test_round_trip_ignores_order(self):
        a = ExchangeRateSet.from_mapping(USD, {"PLN": 4.1, "EUR": 0.9})
        b = ExchangeRateSet.from_mapping(USD, {"EUR": 0.9, "PLN": 4.1})
        assert decode_rates(USD, encode_rates(a)) == b

    @pytest.mark.parametrize("raw", ['{"PLN":4.1', "[1, 2]", '"text"', '{"PLN":"x"}', ""])
    def test_corrupt_rate_set(self, raw):
        assert decode_rates(USD, raw) is None

    @pytest.mark.parametrize("raw", ["4.", "abc", '"4.1"', "true", "NaN", "{}"])
    def test_corrupt_rate(self, raw):
        assert decode_rate(raw) is None

    def test_rate(self):
        assert decode_rate("4.001") == 4.001


class TestGetRate:
    @pytest.mark.asyncio
    async def test_hit_skips_wrapped(self):
        cache = InMemoryCacheStore({"USD-PLN": "4.2"})
        wrapped = _wrapped()

        rate = await CachedRateService(cache, wrapped).get_rate(USD, PLN)

        assert rate == 4.2
        wrapped.get_rate.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_miss_stores_result(self):
        cache = InMemoryCacheStore()
        wrapped = _wrapped(rate=4.001)

        rate = await CachedRateService(cache, wrapped).get_rate(USD, PLN)

        assert rate == 4.001
        wrapped.get_rate.assert_awaited_once_with(USD, PLN)
        assert cache.snapshot() == {"USD-PLN": "4.001"}

    @pytest.mark.asyncio
    async def test_key_is_upper_cased(self):
        cache = InMemoryCacheStore()
        await CachedRateService(cache, _wrapped()).get_rate(
            CurrencyCode.parse("usd"), CurrencyCode.parse("pln")
        )
        assert list(cache.snapshot()) == ["USD-PLN"]

    @pytest.mark.asyncio
    async def test_second_call_is_hit(self):
        cache = InMemoryCacheStore()
        wrapped = _wrapped(rate=4.1)
        service = CachedRateService(cache, wrapped)

        first = await service.get_rate(USD, PLN)
        second = await service.get_rate(USD, PLN)

        assert first == second == 4.1
        assert wrapped.get_rate.await_count == 1

    @pytest.mark.asyncio
    async def test_corrupt_entry_is_miss(self):
        cache = InMemoryCacheStore({"USD-PLN": "4.0x"})
        wrapped = _wrapped(rate=4.1)

        rate = await CachedRateService(cache, wrapped).get_rate(USD, PLN)

        assert rate == 4.1
        assert cache.snapshot()["USD-PLN"] == "4.1"

    @pytest.mark.asyncio
    async def test_wrapped_error_propagates_and_nothing_stored(self):
        cache = InMemoryCacheStore()
        wrapped = _wrapped()
        wrapped.get_rate.side_effect = InvalidTargetCurrencyError()

        with pytest.raises(InvalidTargetCurrencyError):
            await CachedRateService(cache, wrapped).get_rate(USD, PLN)

        assert cache.snapshot() == {}


class TestGetRates:
    @pytest.mark.asyncio
    async def test_uses_cached_values(self):
        cache = _failing_cache(stored='{"PLN":4.1,"EUR":0.9}')
        wrapped = _wrapped()

        rates = await CachedRateService(cache, wrapped).get_rates(USD)

        cache.get.assert_awaited_once_with("USD")
        wrapped.get_rates.assert_not_awaited()
        assert rates.get_rate(PLN) == 4.1
        assert rates.get_rate(EUR) == 0.9

    @pytest.mark.asyncio
    async def test_without_cached_values(self):
        cache = _failing_cache(stored=None)
        wrapped = _wrapped()

        rates = await CachedRateService(cache, wrapped).get_rates(USD)

        wrapped.get_rates.assert_awaited_once_with(USD)
        cache.set.assert_awaited_once()
        key, value = cache.set.await_args.args
        assert key == "USD"
        assert json.loads(value) == {"PLN": 4.1, "EUR": 0.9}
        assert rates.as_dict() == {"PLN": 4.1, "EUR": 0.9}

    @pytest.mark.asyncio
    async def test_miss_then_hit_then_corrupt(self):
        cache = InMemoryCacheStore()
        wrapped = _wrapped()
        service = CachedRateService(cache, wrapped)

        first = await service.get_rates(USD)
        assert json.loads(cache.snapshot()["USD"]) == {"PLN": 4.1, "EUR": 0.9}

        second = await service.get_rates(USD)
        assert second == first
        assert wrapped.get_rates.await_count == 1

        # Truncated entry must be treated as a miss
        await cache.set("USD", cache.snapshot()["USD"][:7])
        third = await service.get_rates(USD)
        assert third == first
        assert wrapped.get_rates.await_count == 2

    @pytest.mark.asyncio
    async def test_wrapped_error_propagates(self):
        wrapped = _wrapped()
        wrapped.get_rates.side_effect = InvalidSourceCurrencyError()

        with pytest.raises(InvalidSourceCurrencyError):
            await CachedRateService(InMemoryCacheStore(), wrapped).get_rates(USD)


class TestCacheFailures:
    @pytest.mark.asyncio
    async def test_read_failure_is_miss(self):
        cache = _failing_cache(get_error=CacheError("connection lost"))
        wrapped = _wrapped(rate=4.1)

        rate = await CachedRateService(cache, wrapped).get_rate(USD, PLN)

        assert rate == 4.1
        wrapped.get_rate.assert_awaited_once()
        cache.set.assert_awaited_once_with("USD-PLN", "4.1")

    @pytest.mark.asyncio
    async def test_non_utf8_cache_file_is_miss(self, tmp_path):
        path = tmp_path / "cache.json"
        path.write_bytes(b'{"USD-PLN": "4.1\xff"}')
        cache = FileCacheStore(path)
        wrapped = _wrapped(rate=4.2)

        rate = await CachedRateService(cache, wrapped).get_rate(USD, PLN)

        assert rate == 4.2
        wrapped.get_rate.assert_awaited_once_with(USD, PLN)
        assert await cache.get("USD-PLN") == "4.2"

    @pytest.mark.asyncio
    async def test_write_failure_is_unavailable(self):
        cache = _failing_cache(set_error=CacheError("read only replica"))

        with pytest.raises(RateServiceUnavailableError, match="read only replica"):
            await CachedRateService(cache, _wrapped()).get_rate(USD, PLN)

    @pytest.mark.asyncio
    async def test_write_failure_on_rates_is_unavailable(self):
        cache = _failing_cache(set_error=CacheError("disk full"))

        with pytest.raises(RateServiceUnavailableError):
            await CachedRateService(cache, _wrapped()).get_rates(USD)
