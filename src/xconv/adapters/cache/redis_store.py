"""
Redis Cache Store

Cache backend on top of redis.asyncio. Entries are plain string SET/GET
without expiry; freshness policy belongs to the Redis deployment
(e.g., maxmemory-policy).

Files that USE this module:
- xconv.app (used when REDIS_URL is configured and reachable)
- tests.test_cache_stores (unit tests with a mocked client)

Files that this module USES:
- xconv.adapters.cache.base (CacheStore interface, CacheError)
"""
from __future__ import annotations

import logging
from typing import Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError

from xconv.adapters.cache.base import CacheError, CacheStore

log = logging.getLogger(__name__)


class RedisCacheStore(CacheStore):
    def __init__(self, client: Redis):
        """
        Args:
            client: redis.asyncio client; created with decode_responses=True
                    by from_url(), otherwise bytes values are decoded here
        """
        self._client = client

    @classmethod
    def from_url(cls, url: str, timeout: Optional[float] = None) -> "RedisCacheStore":
        """
        Create a store for a redis:// URL.

        Args:
            url: Redis connection URL
            timeout: Connect and socket timeout in seconds (None waits indefinitely)
        """
        client = Redis.from_url(
            url,
            decode_responses=True,
            socket_connect_timeout=timeout,
            socket_timeout=timeout,
        )
        return cls(client)

    async def ping(self) -> bool:
        """
        Check that the server is reachable.

        Returns:
            True if the server answered, False otherwise
        """
        try:
            return bool(await self._client.ping())
        except (RedisError, OSError) as e:
            log.warning("Redis is not reachable: %s", e)
            return False

    async def get(self, key: str) -> Optional[str]:
        try:
            value = await self._client.get(key)
        except RedisError as e:
            raise CacheError(f"Redis GET {key!r} failed: {e}") from e
        except UnicodeDecodeError as e:
            # decode_responses=True decodes inside the client
            raise CacheError(f"Redis value for {key!r} is not UTF-8: {e}") from e
        if isinstance(value, bytes):
            try:
                return value.decode("utf-8")
            except UnicodeDecodeError as e:
                raise CacheError(f"Redis value for {key!r} is not UTF-8: {e}") from e
        return value

    async def set(self, key: str, value: str) -> None:
        try:
            await self._client.set(key, value)
        except RedisError as e:
            raise CacheError(f"Redis SET {key!r} failed: {e}") from e

    async def aclose(self) -> None:
        await self._client.aclose()
