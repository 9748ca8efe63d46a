"""
Status/health payload for the relay, safe to expose publicly.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from nepal_pulse.models import ContentType
from nepal_pulse.security import is_configured_key
from nepal_pulse.settings import PulseSettings


def build_status(settings: PulseSettings, api_key: Optional[str]) -> Dict[str, Any]:
    configured = is_configured_key(api_key or "")
    return {
        "status": "ok" if configured else "degraded",
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "provider": {
            "name": "gemini",
            "model": settings.gemini_model,
            "api_key_configured": configured,
            "temperature": settings.temperature,
        },
        "content_types": [c.value for c in ContentType],
    }
