"""Main application module for the Nepal Pulse relay."""
from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from app_utils import configure_logging

# Load environment variables before settings are read
load_dotenv(os.getenv("PULSE_DOTENV", ".env"))

from api_routes import RELAY_METHODS, GeneratorFactory, register_routes  # noqa: E402
from nepal_pulse.adapters.gemini import GeminiGenerator  # noqa: E402
from nepal_pulse.settings import PulseSettings, load_settings  # noqa: E402

configure_logging()

logger = logging.getLogger("nepal_pulse")

CORS_HEADERS = [
    "X-CSRF-Token",
    "X-Requested-With",
    "Accept",
    "Accept-Version",
    "Content-Length",
    "Content-MD5",
    "Content-Type",
    "Date",
    "X-Api-Version",
]


def _gemini_factory(settings: PulseSettings) -> GeneratorFactory:
    def build(api_key: str) -> GeminiGenerator:
        return GeminiGenerator(api_key=api_key, model=settings.gemini_model, temperature=settings.temperature)

    return build


def create_app(
    settings: Optional[PulseSettings] = None,
    generator_factory: Optional[GeneratorFactory] = None,
) -> Flask:
    """Build the relay app. Tests pass a fake ``generator_factory``."""
    resolved = settings or load_settings()
    flask_app = Flask(__name__)
    CORS(
        flask_app,
        resources={r"/api/*": {"origins": "*"}},
        send_wildcard=True,
        methods=RELAY_METHODS,
        allow_headers=CORS_HEADERS,
    )
    register_routes(flask_app, resolved, generator_factory or _gemini_factory(resolved))
    logger.info("Relay ready (model=%s)", resolved.gemini_model)
    return flask_app


app = create_app()

__all__ = ["app", "create_app"]
