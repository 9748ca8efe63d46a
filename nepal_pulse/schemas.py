"""
Pydantic models for the relay's wire format.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, field_validator

from nepal_pulse.models import ContentType, Language


class RelayRequest(BaseModel):
    type: ContentType
    language: Language = Language.EN

    @field_validator("type", "language", mode="before")
    @classmethod
    def _normalize(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value


class WebSource(BaseModel):
    uri: Optional[str] = None
    title: Optional[str] = None


class GroundingChunkPayload(BaseModel):
    web: Optional[WebSource] = None


class RelaySuccess(BaseModel):
    text: str
    groundingChunks: List[GroundingChunkPayload] = []


class RelayFailure(BaseModel):
    error: str
    details: Optional[str] = None
