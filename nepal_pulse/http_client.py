"""
HTTP helper with polite headers, shared by the relay client.

Unlike a scraping session this one never retries: every call is exactly one
attempt, and retry policy belongs to whoever schedules the calls.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests
from urllib3.util.retry import Retry

from nepal_pulse.exceptions import TransportFailure
from nepal_pulse.security import redact_secrets

logger = logging.getLogger(__name__)


class HttpClient:
    def __init__(self, timeout: Optional[float] = 30.0, user_agent: str | None = None):
        self.timeout = timeout
        self.session = requests.Session()
        adapter = requests.adapters.HTTPAdapter(max_retries=Retry(total=0, raise_on_status=False))
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)
        headers = {
            "User-Agent": user_agent or "NepalPulse-Client/1.0",
            "Accept": "application/json",
        }
        self.session.headers.update(headers)

    def post_json(self, url: str, payload: Dict[str, Any]) -> requests.Response:
        """
        POST ``payload`` as JSON and return the response whatever its status.

        Raises TransportFailure when no response was received at all.
        """
        try:
            return self.session.post(url, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("HTTP POST to %s failed: %s", url, redact_secrets(str(exc)))
            raise TransportFailure(redact_secrets(str(exc))) from exc
