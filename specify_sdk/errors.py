"""Error taxonomy — every failure surfaced by ``serve`` is a ``SpecifyError``."""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import ErrorDetail


class ErrorKind(str, Enum):
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    API = "api"
    NOT_FOUND = "not_found"


class SpecifyError(Exception):
    """Base class; ``kind`` tells the concrete failure apart without isinstance."""

    kind: ErrorKind = ErrorKind.API

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AuthenticationError(SpecifyError):
    """Malformed publisher key, or the server rejected it (HTTP 401)."""

    kind = ErrorKind.AUTHENTICATION


class ValidationError(SpecifyError):
    """Bad address input, address count out of bounds, or HTTP 400."""

    kind = ErrorKind.VALIDATION

    def __init__(
        self, message: str, details: tuple[ErrorDetail, ...] | None = None
    ) -> None:
        super().__init__(message)
        self.details = details


class APIError(SpecifyError):
    """Any other non-2xx status; ``status`` is 0 for transport failures."""

    kind = ErrorKind.API

    def __init__(
        self,
        message: str,
        status: int = 0,
        details: tuple[ErrorDetail, ...] | None = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.details = details


class NotFoundError(SpecifyError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str = "No ad found for this address") -> None:
        super().__init__(message)
