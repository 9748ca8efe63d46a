"""
Core data structures shared by the relay client, parser and dashboard state.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional


class Language(str, Enum):
    EN = "en"
    NP = "np"


class ContentType(str, Enum):
    NEWS = "news"
    PARTIES = "parties"
    HOROSCOPE = "horoscope"


class FetchStatus(str, Enum):
    LIVE = "live"
    MOCK = "mock"
    OFFLINE = "offline"
    ERROR = "error"


class Page(str, Enum):
    HOME = "home"
    HOROSCOPE = "horoscope"


@dataclass(frozen=True)
class NewsItem:
    id: str
    title: str
    summary: str
    source: str
    timestamp: str
    url: Optional[str] = None


@dataclass(frozen=True)
class Party:
    """
    One entry of the fixed roster. Only ``description`` and ``recent_stance``
    come from the AI; everything else is static configuration.
    """

    id: str
    name: str
    full_name: str
    leader: str
    symbol: str
    description: str
    recent_stance: str
    color: str
    image_url: str


@dataclass(frozen=True)
class HoroscopeItem:
    sign: str
    prediction: str
    icon: str


@dataclass(frozen=True)
class GroundingChunk:
    uri: Optional[str] = None
    title: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "GroundingChunk":
        if not isinstance(payload, dict):
            return cls()
        web = payload.get("web")
        if not isinstance(web, dict):
            return cls()
        uri = web.get("uri")
        title = web.get("title")
        return cls(
            uri=uri if isinstance(uri, str) and uri else None,
            title=title if isinstance(title, str) else None,
        )


@dataclass
class RelayResponse:
    text: str
    grounding_chunks: List[GroundingChunk] = field(default_factory=list)


@dataclass
class FetchResult:
    """
    The single value every dashboard fetch resolves to, whatever path produced it.
    """

    content_type: ContentType
    language: Language
    status: FetchStatus
    items: List[Any]
    hot_topic: Optional[str] = None
    fetched_at: Optional[datetime] = None


@dataclass
class Notification:
    id: str
    message: str
    type: str = "info"
