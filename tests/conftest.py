"""Shared test fixtures and sample data."""
from __future__ import annotations

import json
import textwrap
from pathlib import Path
from typing import Any

import pytest

from specify_sdk.config import CacheConfig, SpecifyConfig
from specify_sdk.interfaces.transport import TransportResponse
from specify_sdk.storage import LocalCacheStore

VALID_KEY = "spk_" + "a" * 30
ADDRESS_A = "0x" + "a" * 40
ADDRESS_B = "0x" + "B" * 40
ADDRESS_C = "0x" + "1234567890abcdefABCD" * 2


def make_address(i: int) -> str:
    return f"0x{i:040x}"


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


class FakeTransport:
    """Records posts and replays a canned response or raises a canned error."""

    def __init__(
        self,
        status: int = 200,
        body: Any = None,
        error: Exception | None = None,
        raw: str | None = None,
    ) -> None:
        self.status = status
        self.body = body
        self.error = error
        self.raw = raw
        self.calls: list[dict[str, Any]] = []

    async def post(
        self, url: str, headers: dict[str, str], payload: dict[str, Any]
    ) -> TransportResponse:
        self.calls.append({"url": url, "headers": headers, "payload": payload})
        if self.error is not None:
            raise self.error
        text = self.raw if self.raw is not None else json.dumps(self.body)
        return TransportResponse(status=self.status, text=text)


class MemoryBackend:
    def __init__(self, data: dict[str, str] | None = None) -> None:
        self.data = dict(data or {})

    async def get(self, key: str) -> str | None:
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        self.data[key] = value

    async def remove(self, key: str) -> None:
        self.data.pop(key, None)


class FailingBackend:
    """Storage tier that is present but unusable (disabled, quota, ...)."""

    def __init__(self) -> None:
        self.attempts = 0

    async def get(self, key: str) -> str | None:
        self.attempts += 1
        raise OSError("storage disabled")

    async def set(self, key: str, value: str) -> None:
        self.attempts += 1
        raise OSError("quota exceeded")

    async def remove(self, key: str) -> None:
        self.attempts += 1
        raise OSError("storage disabled")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def ad_payload() -> dict[str, Any]:
    return {
        "walletAddress": ADDRESS_A,
        "campaignId": "abcd1234567",
        "adId": "A",
        "headline": "Bored Ape Yacht Club Collection",
        "content": "Join the club with the hottest NFTs in the metaverse.",
        "ctaUrl": "https://boredapeyachtclub.com/collection",
        "ctaLabel": "Mint Now",
        "imageUrl": "https://cdn.example.com/bored1234.png",
        "communityName": "BAYC",
        "communityLogo": "https://cdn.example.com/bayc.png",
        "imageFormat": "LANDSCAPE",
    }


@pytest.fixture()
def primary() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture()
def secondary() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture()
def memory_cache(primary: MemoryBackend, secondary: MemoryBackend) -> LocalCacheStore:
    return LocalCacheStore([primary, secondary])


@pytest.fixture()
def sample_config() -> SpecifyConfig:
    return SpecifyConfig(
        publisher_key=VALID_KEY,
        base_url="https://api.example.com/api",
        request_timeout=5,
        cache=CacheConfig(enabled=False),
    )


@pytest.fixture()
def cached_config(sample_config: SpecifyConfig) -> SpecifyConfig:
    return SpecifyConfig(
        publisher_key=sample_config.publisher_key,
        base_url=sample_config.base_url,
        request_timeout=sample_config.request_timeout,
        cache=CacheConfig(enabled=True),
    )


# ---------------------------------------------------------------------------
# Config YAML fixture
# ---------------------------------------------------------------------------

SAMPLE_YAML = textwrap.dedent("""\
    publisher_key: "${TEST_SPECIFY_KEY}"
    base_url: "https://api.example.com/api/"
    request_timeout: 12
    cache:
      enabled: true
      directory: "/tmp/specify-test-cache"
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("TEST_SPECIFY_KEY", VALID_KEY)
    cfg_file = tmp_path / "specify.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file
