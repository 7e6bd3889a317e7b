"""Storage backend protocol — key/value persistence abstraction."""
from typing import Protocol


class StorageBackend(Protocol):
    """Abstract interface for one tier of the local cache."""

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...

    async def remove(self, key: str) -> None: ...
