"""Publisher key and wallet address validators."""
from typing import Any, Iterable

from .constants import ADDRESS_RE, PUBLISHER_KEY_LENGTH, PUBLISHER_KEY_PREFIX


def validate_publisher_key(key: Any) -> bool:
    """Return True if ``key`` has the ``spk_`` prefix and the exact key length."""
    return (
        isinstance(key, str)
        and key.startswith(PUBLISHER_KEY_PREFIX)
        and len(key) == PUBLISHER_KEY_LENGTH
    )


def is_valid_address(value: Any) -> bool:
    """Return True for ``0x`` followed by exactly 40 hex characters."""
    return isinstance(value, str) and ADDRESS_RE.fullmatch(value) is not None


def are_valid_addresses(values: Iterable[Any]) -> bool:
    return all(is_valid_address(v) for v in values)
