"""
Base Cache Store Interface

Defines the async string key/value store the cache-aside rate service
writes through. Storage engine, freshness and eviction are the backend's
responsibility.

Files that USE this module:
- xconv.adapters.cache.memory (InMemoryCacheStore implements CacheStore)
- xconv.adapters.cache.file_store (FileCacheStore implements CacheStore)
- xconv.adapters.cache.redis_store (RedisCacheStore implements CacheStore)
- xconv.adapters.providers.cached (CachedRateService depends on CacheStore)
"""
from abc import ABC, abstractmethod
from typing import Optional


class CacheError(Exception):
    """Raised when a cache backend operation fails."""
    pass


class CacheStore(ABC):
    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Return the stored value, None if the key is absent; raise CacheError on failure."""
        raise NotImplementedError

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store value under key; raise CacheError on failure."""
        raise NotImplementedError
