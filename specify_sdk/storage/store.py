"""Local cache store — best-effort persistence over an ordered fallback chain."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Sequence

from ..config import CacheConfig
from ..constants import (
    ADDRESSES_KEY,
    JSON_FILENAME,
    LOCAL_ID_KEY,
    MAX_ADDRESSES,
    SQLITE_FILENAME,
)
from ..interfaces.storage import StorageBackend
from ..validation import is_valid_address
from .json_file import JsonFileBackend
from .sqlite import SqliteBackend

logger = logging.getLogger(__name__)


class LocalCacheStore:
    """Remembers the last served identifier and addresses across sessions.

    Backends are tried in order. Reads take the first hit, writes stop at
    the first backend that succeeds, removals hit every backend. No method
    ever raises: storage failures are logged and the call degrades to a
    miss or a no-op. An empty chain disables caching entirely.
    """

    def __init__(self, backends: Sequence[StorageBackend] = ()) -> None:
        self._backends = list(backends)

    @classmethod
    def from_config(cls, config: CacheConfig) -> LocalCacheStore:
        if not config.enabled:
            return cls()

        directory = Path(config.directory).expanduser()
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning("Cache directory %s unavailable, caching disabled: %s", directory, e)
            return cls()

        return cls(
            [
                SqliteBackend(directory / SQLITE_FILENAME),
                JsonFileBackend(directory / JSON_FILENAME),
            ]
        )

    @property
    def available(self) -> bool:
        return bool(self._backends)

    async def get(self, key: str) -> str | None:
        for backend in self._backends:
            try:
                value = await backend.get(key)
            except Exception as e:
                logger.warning(
                    "Cache read from %s failed, trying next tier: %s",
                    type(backend).__name__, e,
                )
                continue
            if value is not None:
                return value
        return None

    async def set(self, key: str, value: str) -> None:
        for backend in self._backends:
            try:
                await backend.set(key, value)
                return
            except Exception as e:
                logger.warning(
                    "Cache write to %s failed, trying next tier: %s",
                    type(backend).__name__, e,
                )
        if self._backends:
            logger.warning("Cache write for %s dropped: no storage tier accepted it", key)

    async def remove(self, key: str) -> None:
        for backend in self._backends:
            try:
                await backend.remove(key)
            except Exception as e:
                logger.warning(
                    "Cache removal from %s failed: %s", type(backend).__name__, e
                )

    # ------------------------------------------------------------------
    # Typed entries
    # ------------------------------------------------------------------

    async def get_local_id(self) -> str | None:
        return await self.get(LOCAL_ID_KEY)

    async def set_local_id(self, local_id: str) -> None:
        await self.set(LOCAL_ID_KEY, local_id)

    async def remove_local_id(self) -> None:
        await self.remove(LOCAL_ID_KEY)

    async def get_addresses(self) -> list[str]:
        """Cached addresses; malformed or invalid entries are dropped."""
        raw = await self.get(ADDRESSES_KEY)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Ignoring malformed address cache entry")
            return []

        addresses = data.get("addresses") if isinstance(data, dict) else None
        if not isinstance(addresses, list):
            return []
        return [a for a in addresses if is_valid_address(a)][:MAX_ADDRESSES]

    async def set_addresses(self, addresses: Sequence[str]) -> None:
        await self.set(
            ADDRESSES_KEY, json.dumps({"addresses": list(addresses)[:MAX_ADDRESSES]})
        )

    def close(self) -> None:
        for backend in self._backends:
            close = getattr(backend, "close", None)
            if callable(close):
                close()
