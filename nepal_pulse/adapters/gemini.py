"""
Adapter that sends relay prompts to Google Gemini.
"""
from __future__ import annotations

import logging
import time
from typing import Any, Dict, List

from google import genai
from google.genai import types as genai_types

from nepal_pulse.adapters.base import GenerationResult
from nepal_pulse.prompts import PromptSpec

logger = logging.getLogger(__name__)


class GeminiGenerator:
    """
    One ``generate_content`` call per prompt. Search-grounded prompts get the
    Google Search tool; grounding chunks are returned in the wire shape
    ``{"web": {"uri", "title"}}``.
    """

    name = "gemini"

    def __init__(self, api_key: str, model: str, temperature: float = 0.3) -> None:
        self.model = model
        self.temperature = temperature
        self.client = genai.Client(api_key=api_key)

    def generate(self, prompt: PromptSpec) -> GenerationResult:
        tools = [genai_types.Tool(google_search=genai_types.GoogleSearch())] if prompt.use_search else None
        start = time.time()
        response = self.client.models.generate_content(
            model=self.model,
            contents=prompt.contents,
            config=genai_types.GenerateContentConfig(
                tools=tools,
                temperature=self.temperature,
            ),
        )
        text = response.text or ""
        chunks = _grounding_chunks(response)
        logger.info(
            "Gemini %s returned %d chars, %d citations in %.0f ms",
            self.model,
            len(text),
            len(chunks),
            (time.time() - start) * 1000,
        )
        return GenerationResult(text=text, grounding_chunks=chunks)


def _grounding_chunks(response: Any) -> List[Dict[str, Any]]:
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    metadata = getattr(candidates[0], "grounding_metadata", None)
    raw_chunks = getattr(metadata, "grounding_chunks", None) or []
    out: List[Dict[str, Any]] = []
    for chunk in raw_chunks:
        web = getattr(chunk, "web", None)
        if web is None:
            out.append({})
            continue
        out.append({"web": {"uri": getattr(web, "uri", None), "title": getattr(web, "title", None)}})
    return out
