"""Data models — all frozen (immutable)."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ImageFormat(str, Enum):
    """Rendering shape of the ad creative."""

    LANDSCAPE = "LANDSCAPE"
    SQUARE = "SQUARE"
    LONG_BANNER = "LONG_BANNER"
    SHORT_BANNER = "SHORT_BANNER"
    NO_IMAGE = "NO_IMAGE"


@dataclass(frozen=True)
class ErrorDetail:
    """Field-level validation message returned with HTTP 400."""

    field: str
    message: str

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> ErrorDetail:
        return cls(field=str(raw.get("field", "")), message=str(raw.get("message", "")))


# Payload key -> SpecifyAd attribute, in declaration order.
_AD_FIELDS: dict[str, str] = {
    "walletAddress": "wallet_address",
    "campaignId": "campaign_id",
    "adId": "ad_id",
    "headline": "headline",
    "content": "content",
    "ctaUrl": "cta_url",
    "ctaLabel": "cta_label",
    "imageUrl": "image_url",
    "communityName": "community_name",
    "communityLogo": "community_logo",
    "imageFormat": "image_format",
}


@dataclass(frozen=True)
class SpecifyAd:
    """Resolved ad content for a wallet address."""

    wallet_address: str
    campaign_id: str
    ad_id: str
    headline: str
    content: str
    cta_url: str
    cta_label: str
    image_url: str
    community_name: str
    community_logo: str
    image_format: ImageFormat
    ad_unit_id: str | None = None

    @classmethod
    def from_payload(cls, payload: Any) -> SpecifyAd:
        """Build from a success response body.

        Raises:
            ValueError: If the body is not an object, a declared field is
                missing or not a string, or ``imageFormat`` is not a known
                format.
        """
        if not isinstance(payload, dict):
            raise ValueError("Unexpected ad response (non-object)")

        missing = [key for key in _AD_FIELDS if key not in payload]
        if missing:
            raise ValueError(f"Ad response missing fields: {', '.join(missing)}")

        not_str = [key for key in _AD_FIELDS if not isinstance(payload[key], str)]
        ad_unit_id = payload.get("adUnitId")
        if ad_unit_id is not None and not isinstance(ad_unit_id, str):
            not_str.append("adUnitId")
        if not_str:
            raise ValueError(f"Ad response fields not strings: {', '.join(not_str)}")

        kwargs: dict[str, Any] = {attr: payload[key] for key, attr in _AD_FIELDS.items()}
        kwargs["image_format"] = ImageFormat(payload["imageFormat"])
        kwargs["ad_unit_id"] = ad_unit_id
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Wire-style (camelCase) representation."""
        data: dict[str, Any] = {key: getattr(self, attr) for key, attr in _AD_FIELDS.items()}
        data["imageFormat"] = self.image_format.value
        if self.ad_unit_id is not None:
            data["adUnitId"] = self.ad_unit_id
        return data


@dataclass(frozen=True)
class ServeOptions:
    """Per-call placement options.

    ``use_cache`` of ``None`` inherits the client's configured cache policy.
    ``use_cache=True`` only has an effect when the client has cache storage:
    a client built with ``cache.enabled=False`` and no explicit store has
    none, and the opt-in is logged at DEBUG and ignored.
    """

    image_format: ImageFormat | None = None
    ad_unit_id: str | None = None
    use_cache: bool | None = None


@dataclass(frozen=True)
class AdRequest:
    """Finalized request body for ``POST /ads``."""

    wallet_addresses: tuple[str, ...]
    image_format: ImageFormat | None = None
    ad_unit_id: str | None = None
    local_id: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"walletAddresses": list(self.wallet_addresses)}
        if self.image_format is not None:
            payload["imageFormat"] = self.image_format.value
        if self.ad_unit_id is not None:
            payload["adUnitId"] = self.ad_unit_id
        if self.local_id is not None:
            payload["localId"] = self.local_id
        return payload
