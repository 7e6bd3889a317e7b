"""Specify publisher SDK — ad content for end-user wallet addresses."""
from .client import Specify
from .config import CacheConfig, SpecifyConfig, load_config
from .errors import (
    APIError,
    AuthenticationError,
    ErrorKind,
    NotFoundError,
    SpecifyError,
    ValidationError,
)
from .models import ErrorDetail, ImageFormat, ServeOptions, SpecifyAd
from .storage import JsonFileBackend, LocalCacheStore, SqliteBackend
from .validation import are_valid_addresses, is_valid_address, validate_publisher_key

__version__ = "0.1.0"

__all__ = [
    "Specify",
    "CacheConfig",
    "SpecifyConfig",
    "load_config",
    "APIError",
    "AuthenticationError",
    "ErrorKind",
    "NotFoundError",
    "SpecifyError",
    "ValidationError",
    "ErrorDetail",
    "ImageFormat",
    "ServeOptions",
    "SpecifyAd",
    "JsonFileBackend",
    "LocalCacheStore",
    "SqliteBackend",
    "are_valid_addresses",
    "is_valid_address",
    "validate_publisher_key",
]
