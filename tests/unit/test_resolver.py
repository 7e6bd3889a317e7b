"""Unit tests for the response resolver — status mapping and local id sync."""
from __future__ import annotations

import json
from typing import Any

import pytest

from conftest import MemoryBackend
from specify_sdk.constants import LOCAL_ID_KEY
from specify_sdk.errors import APIError, AuthenticationError, ValidationError
from specify_sdk.interfaces.transport import TransportResponse
from specify_sdk.models import ErrorDetail
from specify_sdk.resolver import ResponseResolver
from specify_sdk.storage import LocalCacheStore


def _response(status: int, body: Any) -> TransportResponse:
    return TransportResponse(status=status, text=json.dumps(body))


@pytest.fixture()
def resolver(memory_cache: LocalCacheStore) -> ResponseResolver:
    return ResponseResolver(memory_cache)


class TestSuccess:
    @pytest.mark.asyncio
    async def test_returns_ad(self, resolver: ResponseResolver, ad_payload: dict) -> None:
        ad = await resolver.resolve(_response(200, ad_payload), use_cache=False)
        assert ad is not None
        assert ad.headline == ad_payload["headline"]

    @pytest.mark.asyncio
    async def test_stores_local_id(
        self, resolver: ResponseResolver, primary: MemoryBackend, ad_payload: dict
    ) -> None:
        ad = await resolver.resolve(
            _response(200, {**ad_payload, "localId": "loc-1"}), use_cache=True
        )
        assert primary.data[LOCAL_ID_KEY] == "loc-1"
        assert "localId" not in ad.to_dict()

    @pytest.mark.asyncio
    async def test_void_local_id_removes(
        self, resolver: ResponseResolver, primary: MemoryBackend, ad_payload: dict
    ) -> None:
        primary.data[LOCAL_ID_KEY] = "stale"
        await resolver.resolve(_response(200, {**ad_payload, "localId": "void"}), use_cache=True)
        assert LOCAL_ID_KEY not in primary.data

    @pytest.mark.asyncio
    async def test_local_id_ignored_without_cache(
        self, resolver: ResponseResolver, primary: MemoryBackend, ad_payload: dict
    ) -> None:
        await resolver.resolve(_response(200, {**ad_payload, "localId": "loc-1"}), use_cache=False)
        assert primary.data == {}

    @pytest.mark.asyncio
    async def test_any_2xx_is_success(self, resolver: ResponseResolver, ad_payload: dict) -> None:
        assert await resolver.resolve(_response(201, ad_payload), use_cache=False) is not None

    @pytest.mark.asyncio
    async def test_malformed_body_raises_value_error(self, resolver: ResponseResolver) -> None:
        with pytest.raises(ValueError):
            await resolver.resolve(TransportResponse(status=200, text="<html>"), use_cache=False)


class TestNotFound:
    @pytest.mark.asyncio
    async def test_returns_none(self, resolver: ResponseResolver) -> None:
        assert await resolver.resolve(_response(404, {"error": "Not Found"}), use_cache=False) is None

    @pytest.mark.asyncio
    async def test_void_sentinel_clears_cache(
        self, resolver: ResponseResolver, primary: MemoryBackend, secondary: MemoryBackend
    ) -> None:
        primary.data[LOCAL_ID_KEY] = "stale"
        secondary.data[LOCAL_ID_KEY] = "older"
        result = await resolver.resolve(_response(404, {"localId": "void"}), use_cache=True)
        assert result is None
        assert LOCAL_ID_KEY not in primary.data
        assert LOCAL_ID_KEY not in secondary.data

    @pytest.mark.asyncio
    async def test_non_json_body_is_still_none(self, resolver: ResponseResolver) -> None:
        response = TransportResponse(status=404, text="Not Found")
        assert await resolver.resolve(response, use_cache=True) is None


class TestErrors:
    @pytest.mark.asyncio
    async def test_401(self, resolver: ResponseResolver) -> None:
        with pytest.raises(AuthenticationError, match="Invalid API key"):
            await resolver.resolve(_response(401, {"error": "Unauthorized"}), use_cache=False)

    @pytest.mark.asyncio
    async def test_400_with_details(self, resolver: ResponseResolver) -> None:
        body = {
            "error": "Invalid wallet addresses",
            "details": [{"field": "walletAddresses", "message": "must not be empty"}],
        }
        with pytest.raises(ValidationError) as exc_info:
            await resolver.resolve(_response(400, body), use_cache=False)
        assert exc_info.value.message == "Invalid wallet addresses"
        assert exc_info.value.details == (
            ErrorDetail(field="walletAddresses", message="must not be empty"),
        )

    @pytest.mark.asyncio
    async def test_400_without_message(self, resolver: ResponseResolver) -> None:
        with pytest.raises(ValidationError, match="Invalid request") as exc_info:
            await resolver.resolve(_response(400, {}), use_cache=False)
        assert exc_info.value.details is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [302, 403, 429, 500, 503])
    async def test_other_statuses(self, resolver: ResponseResolver, status: int) -> None:
        with pytest.raises(APIError) as exc_info:
            await resolver.resolve(_response(status, {"error": "nope"}), use_cache=False)
        assert exc_info.value.status == status
        assert str(status) in exc_info.value.message
