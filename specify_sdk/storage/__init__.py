"""Local cache store and its storage tiers."""
from .json_file import JsonFileBackend
from .sqlite import SqliteBackend
from .store import LocalCacheStore

__all__ = ["JsonFileBackend", "LocalCacheStore", "SqliteBackend"]
