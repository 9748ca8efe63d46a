"""
Client for the content relay: one POST per (content type, language) pair.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from nepal_pulse.exceptions import MalformedResponse, RouteUnavailable, UpstreamError
from nepal_pulse.http_client import HttpClient
from nepal_pulse.models import ContentType, GroundingChunk, Language, RelayResponse
from nepal_pulse.security import redact_secrets

logger = logging.getLogger(__name__)


class RelayClient:
    """
    Sends ``{"type", "language"}`` to the relay and returns its raw text.

    Failures are raised as RouteUnavailable (404), UpstreamError (any other
    non-2xx), TransportFailure (no response) or MalformedResponse (2xx without
    a usable ``text`` field). Nothing is retried or cached.
    """

    def __init__(self, url: str, http: Optional[HttpClient] = None, timeout: Optional[float] = 30.0) -> None:
        self.url = url
        self.http = http or HttpClient(timeout=timeout)

    def fetch(self, content_type: ContentType, language: Language) -> RelayResponse:
        payload = {"type": content_type.value, "language": language.value}
        logger.debug("Requesting %s (%s) from %s", content_type.value, language.value, self.url)
        response = self.http.post_json(self.url, payload)

        if response.status_code == 404:
            raise RouteUnavailable(f"Relay route not found: {self.url}")

        if not 200 <= response.status_code < 300:
            body = _json_or_none(response)
            message = response.reason or "relay error"
            details = None
            if isinstance(body, dict):
                message = str(body.get("error") or message)
                details = body.get("details")
            raise UpstreamError(response.status_code, redact_secrets(message), details)

        body = _json_or_none(response)
        if not isinstance(body, dict) or not isinstance(body.get("text"), str):
            raise MalformedResponse("Relay response has no text field")

        raw_chunks = body.get("groundingChunks") or []
        chunks = [GroundingChunk.from_payload(c) for c in raw_chunks] if isinstance(raw_chunks, list) else []
        return RelayResponse(text=body["text"], grounding_chunks=chunks)


def _json_or_none(response: Any) -> Any:
    try:
        return response.json()
    except ValueError:
        return None
