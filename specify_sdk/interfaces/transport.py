"""Transport protocol — the single outbound HTTP call."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class TransportResponse:
    """Raw HTTP outcome: status code plus undecoded body."""

    status: int
    text: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any:
        """Decode the body; raises ``ValueError`` on malformed JSON."""
        return json.loads(self.text)


class Transport(Protocol):
    """Abstract interface for posting a JSON payload."""

    async def post(
        self, url: str, headers: dict[str, str], payload: dict[str, Any]
    ) -> TransportResponse: ...
