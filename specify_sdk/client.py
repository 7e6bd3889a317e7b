"""Specify publisher client — the public ``serve`` entry point."""
from __future__ import annotations

import logging
from typing import Iterable

from .composer import RequestComposer
from .config import SpecifyConfig
from .constants import ADS_PATH
from .errors import APIError, AuthenticationError, SpecifyError
from .interfaces.transport import Transport
from .models import ServeOptions, SpecifyAd
from .resolver import ResponseResolver
from .storage import LocalCacheStore
from .transport import AiohttpTransport
from .validation import validate_publisher_key

logger = logging.getLogger(__name__)


class Specify:
    """Resolves publisher ad content for end-user wallet addresses.

    Args:
        config: Client configuration, or a bare publisher key.
        transport: HTTP transport; defaults to :class:`AiohttpTransport`.
        cache: Local cache store; defaults to one built from ``config.cache``.

    Raises:
        AuthenticationError: If the publisher key is malformed. No client is
            created in that case.
    """

    def __init__(
        self,
        config: SpecifyConfig | str,
        transport: Transport | None = None,
        cache: LocalCacheStore | None = None,
    ) -> None:
        if isinstance(config, str):
            config = SpecifyConfig(publisher_key=config)
        if not validate_publisher_key(config.publisher_key):
            raise AuthenticationError("Invalid API key format")

        self._config = config
        self._publisher_key = config.publisher_key
        self._url = f"{config.base_url.rstrip('/')}{ADS_PATH}"
        self._transport: Transport = transport or AiohttpTransport(config.request_timeout)
        self._cache = cache if cache is not None else LocalCacheStore.from_config(config.cache)
        self._composer = RequestComposer(self._cache)
        self._resolver = ResponseResolver(self._cache)

    @property
    def publisher_key(self) -> str:
        return self._publisher_key

    async def serve(
        self,
        addresses: str | Iterable[str] | None = None,
        options: ServeOptions | None = None,
    ) -> SpecifyAd | None:
        """Serve ad content to one or more wallet addresses.

        Args:
            addresses: A wallet address or an iterable of them. May be empty
                when caching is on and a cached identifier exists.
            options: Image format, ad unit and per-call cache policy.

        Returns:
            The ad, or ``None`` when the service has no ad for the input.

        Raises:
            ValidationError: Bad input (before any request) or HTTP 400.
            AuthenticationError: HTTP 401.
            APIError: Any other failure; ``status`` is 0 for transport errors.
        """
        options = options or ServeOptions()
        use_cache = self._config.cache.enabled if options.use_cache is None else options.use_cache

        request = await self._composer.compose(addresses, options, use_cache)
        headers = {
            "Content-Type": "application/json",
            "x-api-key": self._publisher_key,
        }

        try:
            response = await self._transport.post(self._url, headers, request.to_payload())
            return await self._resolver.resolve(response, use_cache)
        except SpecifyError:
            raise
        except Exception as e:
            logger.error("Failed to fetch ad content: %s", e)
            raise APIError(f"Failed to fetch ad content: {e}", 0) from e

    def close(self) -> None:
        """Release cache storage handles."""
        self._cache.close()

    async def __aenter__(self) -> Specify:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.close()
