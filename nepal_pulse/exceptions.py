from __future__ import annotations

from typing import Optional


class RelayError(Exception):
    """Base class for failures talking to the content relay."""


class RouteUnavailable(RelayError):
    """Raised when the relay endpoint is not deployed (HTTP 404)."""


class TransportFailure(RelayError):
    """Raised when the request never completed (DNS, connection refused, timeout)."""


class UpstreamError(RelayError):
    """Raised when the relay answered with a non-2xx status other than 404."""

    def __init__(self, status_code: int, message: str, details: Optional[str] = None) -> None:
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.details = details


class MalformedResponse(RelayError):
    """Raised when a 2xx response lacks the expected ``text`` field."""
