"""
Public API for fetching Nepal election news, party insights and horoscopes.
"""
from __future__ import annotations

from typing import Optional

from nepal_pulse.relay_client import RelayClient
from nepal_pulse.resolver import FallbackResolver
from nepal_pulse.settings import PulseSettings, load_settings


def build_resolver(relay_url: Optional[str] = None, settings: Optional[PulseSettings] = None) -> FallbackResolver:
    """Resolver over the relay at ``relay_url``; every fetch on it never raises."""
    resolved = settings or load_settings()
    return FallbackResolver(RelayClient(relay_url or resolved.relay_url, timeout=resolved.request_timeout))
