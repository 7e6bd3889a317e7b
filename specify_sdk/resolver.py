"""Response resolver — maps HTTP outcomes to an ad, ``None`` or a typed error."""
from __future__ import annotations

import logging
from typing import Any

from .constants import LOCAL_ID_VOID
from .errors import APIError, AuthenticationError, ValidationError
from .interfaces.transport import TransportResponse
from .models import ErrorDetail, SpecifyAd
from .storage import LocalCacheStore

logger = logging.getLogger(__name__)


def _parse_details(raw: Any) -> tuple[ErrorDetail, ...] | None:
    if not isinstance(raw, list):
        return None
    return tuple(ErrorDetail.from_dict(d) for d in raw if isinstance(d, dict))


class ResponseResolver:
    """Interprets one transport response and updates the cache on the way."""

    def __init__(self, cache: LocalCacheStore) -> None:
        self._cache = cache

    async def resolve(
        self, response: TransportResponse, use_cache: bool
    ) -> SpecifyAd | None:
        """Map ``response`` to the caller-visible outcome.

        Raises:
            AuthenticationError: HTTP 401.
            ValidationError: HTTP 400, carrying the body's field details.
            APIError: Any other non-2xx status.
            ValueError: A 2xx or 400 body that is not the expected JSON.
        """
        if response.ok:
            payload = response.json()
            ad = SpecifyAd.from_payload(payload)
            if use_cache:
                await self._sync_local_id(payload.get("localId"))
            return ad

        if response.status == 404:
            if use_cache:
                await self._clear_void_local_id(response)
            return None

        if response.status == 401:
            raise AuthenticationError("Invalid API key")

        if response.status == 400:
            body = response.json()
            if not isinstance(body, dict):
                body = {}
            raise ValidationError(
                body.get("error") or "Invalid request",
                _parse_details(body.get("details")),
            )

        raise APIError(f"HTTP error! status: {response.status}", response.status)

    async def _sync_local_id(self, local_id: Any) -> None:
        if not isinstance(local_id, str) or not local_id:
            return
        if local_id == LOCAL_ID_VOID:
            logger.info("Server voided the cached local id")
            await self._cache.remove_local_id()
        else:
            await self._cache.set_local_id(local_id)

    async def _clear_void_local_id(self, response: TransportResponse) -> None:
        try:
            body = response.json()
        except ValueError:
            return
        if isinstance(body, dict) and body.get("localId") == LOCAL_ID_VOID:
            logger.info("Server voided the cached local id")
            await self._cache.remove_local_id()
