"""
Plain-dict views of fetch results for JSON output (CLI, logs).
"""
from __future__ import annotations

from typing import Any, Dict

from nepal_pulse.models import FetchResult, HoroscopeItem, NewsItem, Party


def _news_item_to_dict(item: NewsItem) -> Dict[str, Any]:
    return {
        "id": item.id,
        "title": item.title,
        "summary": item.summary,
        "source": item.source,
        "url": item.url,
        "timestamp": item.timestamp,
    }


def _party_to_dict(party: Party) -> Dict[str, Any]:
    return {
        "id": party.id,
        "name": party.name,
        "fullName": party.full_name,
        "leader": party.leader,
        "symbol": party.symbol,
        "description": party.description,
        "recentStance": party.recent_stance,
        "color": party.color,
        "imageUrl": party.image_url,
    }


def _horoscope_to_dict(item: HoroscopeItem) -> Dict[str, Any]:
    return {"sign": item.sign, "prediction": item.prediction, "icon": item.icon}


def result_to_dict(result: FetchResult) -> Dict[str, Any]:
    items = []
    for item in result.items:
        if isinstance(item, NewsItem):
            items.append(_news_item_to_dict(item))
        elif isinstance(item, Party):
            items.append(_party_to_dict(item))
        elif isinstance(item, HoroscopeItem):
            items.append(_horoscope_to_dict(item))
    payload: Dict[str, Any] = {
        "contentType": result.content_type.value,
        "language": result.language.value,
        "status": result.status.value,
        "items": items,
        "fetchedAt": result.fetched_at.isoformat() if result.fetched_at else None,
    }
    if result.hot_topic is not None:
        payload["hotTopic"] = result.hot_topic
    return payload
