"""Request composer — validates, merges cached state, deduplicates."""
from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .constants import MAX_ADDRESSES
from .errors import ValidationError
from .models import AdRequest, ServeOptions
from .storage import LocalCacheStore
from .validation import are_valid_addresses

logger = logging.getLogger(__name__)


def normalize_addresses(addresses: str | Iterable[str] | None) -> list[str]:
    """Wrap a single address, default ``None`` to empty.

    Raises:
        ValidationError: If ``addresses`` is neither a string nor iterable.
    """
    if addresses is None:
        return []
    if isinstance(addresses, str):
        return [addresses]
    try:
        return list(addresses)
    except TypeError as e:
        raise ValidationError("Invalid wallet address format") from e


def dedupe(addresses: Iterable[str]) -> list[str]:
    """Drop exact duplicates, keeping first occurrences in order."""
    return list(dict.fromkeys(addresses))


def compose_addresses(
    supplied: Sequence[str], cached: Sequence[str] | None = None
) -> list[str]:
    """Union supplied addresses with cached ones, supplied first, capped."""
    return dedupe([*supplied, *(cached or ())])[:MAX_ADDRESSES]


class RequestComposer:
    """Turns caller input into the outgoing :class:`AdRequest`."""

    def __init__(self, cache: LocalCacheStore) -> None:
        self._cache = cache

    async def compose(
        self,
        addresses: str | Iterable[str] | None,
        options: ServeOptions,
        use_cache: bool,
    ) -> AdRequest:
        """Build the request, failing fast on bad input.

        Raises:
            ValidationError: On a malformed address, more than 50 unique
                supplied addresses, or nothing to serve.
        """
        supplied = normalize_addresses(addresses)
        if not are_valid_addresses(supplied):
            raise ValidationError("Invalid wallet address format")

        unique = dedupe(supplied)
        if len(unique) > MAX_ADDRESSES:
            raise ValidationError(f"Maximum {MAX_ADDRESSES} wallet addresses allowed")

        local_id: str | None = None
        if use_cache and not self._cache.available:
            logger.debug("Caching requested but no cache storage is configured")
        elif use_cache:
            cached = await self._cache.get_addresses()
            unique = compose_addresses(unique, cached)
            await self._cache.set_addresses(unique)
            local_id = await self._cache.get_local_id()
            logger.debug(
                "Merged %d cached addresses, local id %s",
                len(cached), "present" if local_id else "absent",
            )

        if not unique and local_id is None:
            raise ValidationError("At least one wallet address is required")

        return AdRequest(
            wallet_addresses=tuple(unique),
            image_format=options.image_format,
            ad_unit_id=options.ad_unit_id,
            local_id=local_id,
        )
