"""aiohttp transport adapter for the ad endpoint."""
import logging
import ssl
from typing import Any

import aiohttp
import certifi

from .interfaces.transport import TransportResponse

logger = logging.getLogger(__name__)


class AiohttpTransport:
    """POST JSON over HTTPS; status interpretation is left to the caller."""

    def __init__(self, timeout: int = 30) -> None:
        self.timeout = timeout

    async def post(
        self, url: str, headers: dict[str, str], payload: dict[str, Any]
    ) -> TransportResponse:
        ssl_context = ssl.create_default_context(cafile=certifi.where())
        connector = aiohttp.TCPConnector(ssl=ssl_context)

        async with aiohttp.ClientSession(connector=connector) as session:
            async with session.post(
                url,
                json=payload,
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as response:
                text = await response.text()
                logger.debug("POST %s -> HTTP %s", url, response.status)
                return TransportResponse(status=response.status, text=text)
