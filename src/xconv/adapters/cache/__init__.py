"""
Cache Adapters - Key/Value Stores

This package contains the cache store interface and its backends:
- In-memory (process-local)
- JSON file
- Redis
"""

from xconv.adapters.cache.base import CacheError, CacheStore
from xconv.adapters.cache.file_store import FileCacheStore
from xconv.adapters.cache.memory import InMemoryCacheStore
from xconv.adapters.cache.redis_store import RedisCacheStore

__all__ = [
    "CacheStore",
    "CacheError",
    "InMemoryCacheStore",
    "FileCacheStore",
    "RedisCacheStore",
]
