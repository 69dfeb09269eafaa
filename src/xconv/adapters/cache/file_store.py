"""
File Cache Store - JSON File Backed Cache

This module stores cache entries in a single JSON object on disk so that
rates survive between CLI invocations without a Redis server.
Writes are atomic (temp file + rename) to prevent corrupted files.

Files that USE this module:
- xconv.app (used when XCONV_CACHE_FILE is configured)
- tests.test_cache_stores (unit tests)

Files that this module USES:
- xconv.adapters.cache.base (CacheStore interface, CacheError)
"""
from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union

import aiofiles

from xconv.adapters.cache.base import CacheError, CacheStore

log = logging.getLogger(__name__)


class FileCacheStore(CacheStore):
    def __init__(self, path: Union[str, Path]):
        """
        Initialize the file cache.

        Args:
            path: Location of the JSON cache file (parent directory is created on write)
        """
        self.path = Path(path)
        self._lock = asyncio.Lock()

    async def _load(self) -> Dict[str, str]:
        """
        Read all entries from disk.

        Returns:
            Dictionary of entries; empty if the file does not exist

        Raises:
            CacheError: If the file cannot be read or is not a JSON object of strings
        """
        if not self.path.exists():
            return {}
        try:
            async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
                raw = await f.read()
        except OSError as e:
            raise CacheError(f"Failed to read cache file {self.path}: {e}") from e
        except UnicodeDecodeError as e:
            raise CacheError(f"Cache file {self.path} is corrupted (not UTF-8): {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CacheError(f"Cache file {self.path} is corrupted: {e}") from e
        if not isinstance(data, dict) or not all(isinstance(v, str) for v in data.values()):
            raise CacheError(f"Cache file {self.path} has unexpected structure")
        return data

    async def _save(self, data: Dict[str, str]) -> None:
        """Write all entries to disk atomically."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_fd, temp_path = tempfile.mkstemp(
                suffix=".json.tmp",
                dir=str(self.path.parent),
            )
            os.close(temp_fd)
        except OSError as e:
            raise CacheError(f"Failed to prepare cache file {self.path}: {e}") from e

        try:
            async with aiofiles.open(temp_path, "w", encoding="utf-8") as f:
                await f.write(json.dumps(data, ensure_ascii=False, indent=2))
            os.replace(temp_path, str(self.path))
        except OSError as e:
            # Clean up temp file on error
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise CacheError(f"Failed to write cache file {self.path}: {e}") from e

    async def get(self, key: str) -> Optional[str]:
        async with self._lock:
            data = await self._load()
        return data.get(key)

    async def set(self, key: str, value: str) -> None:
        async with self._lock:
            try:
                data = await self._load()
            except CacheError as e:
                log.warning("Discarding unreadable cache file: %s", e)
                data = {}
            data[key] = value
            await self._save(data)
        log.debug("Cache file %s updated with key=%s", self.path, key)
