"""
In-Memory Cache Store

Process-local dict-backed cache. Useful for tests and for a single
long-running process.
"""
from typing import Dict, Optional

from xconv.adapters.cache.base import CacheStore


class InMemoryCacheStore(CacheStore):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def snapshot(self) -> Dict[str, str]:
        """Return a copy of all stored entries."""
        return dict(self._data)
