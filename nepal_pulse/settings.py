"""
Centralised settings for the relay client and dashboard (env-first, code-light).

The provider key is deliberately absent here: only the relay reads it, at
request time, through ``relay_api_key()``.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from nepal_pulse.models import Language

logger = logging.getLogger(__name__)

DEFAULT_RELAY_URL = "http://127.0.0.1:5000/api/gemini"
DEFAULT_MODEL = "gemini-3-flash-preview"


@dataclass
class PulseSettings:
    relay_url: str
    request_timeout: float
    refresh_interval_seconds: int
    default_language: Language
    gemini_model: str
    temperature: float


def _int_from_env(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or str(raw).strip() == "":
        return default
    try:
        value = int(raw)
        return value if value > 0 else default
    except ValueError:
        logger.warning("Invalid int value for %s=%s; using default %s", key, raw, default)
        return default


def _float_from_env(key: str, default: float, *, allow_zero: bool = False) -> float:
    raw = os.getenv(key)
    if raw is None or str(raw).strip() == "":
        return default
    try:
        value = float(raw)
        if value > 0 or (allow_zero and value == 0):
            return value
        return default
    except ValueError:
        logger.warning("Invalid float value for %s=%s; using default %s", key, raw, default)
        return default


def _parse_language(raw: Optional[str]) -> Language:
    if not raw:
        return Language.EN
    try:
        return Language(raw.strip().lower())
    except ValueError:
        logger.warning("Unknown language '%s' in PULSE_DEFAULT_LANGUAGE; using en.", raw)
        return Language.EN


def relay_api_key() -> Optional[str]:
    return os.getenv("API_KEY") or os.getenv("GEMINI_API_KEY")


def load_settings() -> PulseSettings:
    return PulseSettings(
        relay_url=os.getenv("PULSE_RELAY_URL") or DEFAULT_RELAY_URL,
        request_timeout=_float_from_env("PULSE_HTTP_TIMEOUT", 30.0),
        refresh_interval_seconds=_int_from_env("PULSE_REFRESH_SECONDS", 180),
        default_language=_parse_language(os.getenv("PULSE_DEFAULT_LANGUAGE")),
        gemini_model=os.getenv("GEMINI_MODEL") or DEFAULT_MODEL,
        temperature=_float_from_env("PULSE_TEMPERATURE", 0.3, allow_zero=True),
    )
