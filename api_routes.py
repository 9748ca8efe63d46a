"""API routes for the Nepal Pulse relay."""
from __future__ import annotations

import logging
from typing import Callable

from flask import jsonify, request
from pydantic import ValidationError

from nepal_pulse.adapters.base import TextGenerator
from nepal_pulse.prompts import build_prompt
from nepal_pulse.schemas import RelayFailure, RelayRequest, RelaySuccess
from nepal_pulse.security import is_configured_key, redact_secrets
from nepal_pulse.settings import PulseSettings, relay_api_key
from nepal_pulse.status import build_status

logger = logging.getLogger("nepal_pulse")

GeneratorFactory = Callable[[str], TextGenerator]

RELAY_METHODS = ["GET", "OPTIONS", "PATCH", "DELETE", "POST", "PUT"]


def _failure(error: str, status: int, details: str | None = None):
    return jsonify(RelayFailure(error=error, details=details).model_dump(exclude_none=True)), status


def _describe_validation(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}" for err in exc.errors()
    )


def register_routes(app, settings: PulseSettings, generator_factory: GeneratorFactory):
    """Register all API routes with the Flask app.

    Args:
        app: Flask app instance.
        settings: Loaded PulseSettings.
        generator_factory: Builds a TextGenerator from the provider API key.
    """

    @app.route("/api/gemini", methods=RELAY_METHODS)
    def api_gemini():
        """Relay one (type, language) request to the model and return its raw text."""
        if request.method == "OPTIONS":
            return "", 200
        if request.method != "POST":
            return _failure("Method Not Allowed", 405)

        payload = request.get_json(silent=True) or {}
        try:
            relay_request = RelayRequest.model_validate(payload)
        except ValidationError as exc:
            details = _describe_validation(exc)
            logger.warning("Rejected relay request %s: %s", payload, details)
            return _failure("Invalid request", 400, details)

        api_key = relay_api_key()
        if not is_configured_key(api_key or ""):
            logger.error("CRITICAL: API_KEY is missing from the relay environment.")
            return _failure("Server Configuration Error: API_KEY missing", 500)

        logger.info(
            "Relaying %s request (%s)",
            relay_request.type.value,
            relay_request.language.value,
        )
        prompt = build_prompt(relay_request.type, relay_request.language)
        try:
            result = generator_factory(api_key).generate(prompt)
        except Exception as exc:
            message = redact_secrets(str(exc)) or "Internal Server Error"
            logger.error("Relay generation failed for %s: %s", relay_request.type.value, message, exc_info=True)
            return _failure(message, 500, "Check relay logs")

        body = RelaySuccess.model_validate({"text": result.text, "groundingChunks": result.grounding_chunks})
        return jsonify(body.model_dump(exclude_none=True))

    @app.route("/api/health")
    def api_health():
        """Provider configuration snapshot; never includes the key itself."""
        return jsonify(build_status(settings, relay_api_key()))
