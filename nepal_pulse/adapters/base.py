"""
Generator protocol the relay talks to, so providers can be swapped in tests.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Protocol

from nepal_pulse.prompts import PromptSpec


@dataclass
class GenerationResult:
    text: str
    grounding_chunks: List[Dict[str, Any]] = field(default_factory=list)


class TextGenerator(Protocol):
    name: str

    def generate(self, prompt: PromptSpec) -> GenerationResult:
        ...
