"""
Line-prefix parser for the loosely structured text the model returns.

The model is asked for blocks such as::

    HOT_TOPIC: ...
    ---
    HEADLINE: ...
    SUMMARY: ...
    SOURCE: ...

Every content type shares one scanner driven by a ``RecordSchema``: an ordered
prefix-to-field table plus the prefix that opens a new record. Unknown lines
(delimiters included) are skipped and the scanner never raises.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from nepal_pulse.models import GroundingChunk, HoroscopeItem, NewsItem

HOT_TOPIC_PREFIX = "HOT_TOPIC:"


@dataclass(frozen=True)
class RecordSchema:
    start_prefix: str
    key_field: str
    fields: Tuple[Tuple[str, str], ...]

    def field_names(self) -> List[str]:
        return [self.key_field] + [name for _, name in self.fields]


NEWS_SCHEMA = RecordSchema(
    start_prefix="HEADLINE:",
    key_field="title",
    fields=(("SUMMARY:", "summary"), ("SOURCE:", "source")),
)

PARTY_SCHEMA = RecordSchema(
    start_prefix="PARTY:",
    key_field="name",
    fields=(("DESC:", "description"), ("STANCE:", "stance")),
)

HOROSCOPE_SCHEMA = RecordSchema(
    start_prefix="SIGN:",
    key_field="sign",
    fields=(("PREDICTION:", "prediction"), ("ICON:", "icon")),
)


def _strip_prefix(line: str, prefix: str) -> Optional[str]:
    if line.startswith(prefix):
        return line[len(prefix):].strip()
    return None


def parse_records(text: Optional[str], schema: RecordSchema) -> List[Dict[str, str]]:
    """
    Scan ``text`` line by line and return one dict per record, in input order.

    Records whose key field is empty are dropped; any other missing field is
    left as an empty string.
    """
    if not text:
        return []

    records: List[Dict[str, str]] = []
    current: Dict[str, str] = dict.fromkeys(schema.field_names(), "")

    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        value = _strip_prefix(line, schema.start_prefix)
        if value is not None:
            if current[schema.key_field]:
                records.append(current)
            current = dict.fromkeys(schema.field_names(), "")
            current[schema.key_field] = value
            continue
        for prefix, name in schema.fields:
            value = _strip_prefix(line, prefix)
            if value is not None:
                current[name] = value
                break

    if current[schema.key_field]:
        records.append(current)
    return records


def extract_value(text: Optional[str], prefix: str) -> Optional[str]:
    """Return the value of the last line starting with ``prefix``, if any."""
    if not text:
        return None
    found: Optional[str] = None
    for raw in text.splitlines():
        value = _strip_prefix(raw.strip(), prefix)
        if value is not None:
            found = value
    return found


def parse_news(text: Optional[str], *, now: datetime) -> Tuple[List[NewsItem], Optional[str]]:
    """Return the news items plus the hot topic (``None`` when the text has none)."""
    stamp = now.strftime("%H:%M")
    items = [
        NewsItem(
            id=f"news-{index}",
            title=record["title"],
            summary=record["summary"],
            source=record["source"],
            timestamp=stamp,
        )
        for index, record in enumerate(parse_records(text, NEWS_SCHEMA))
    ]
    return items, extract_value(text, HOT_TOPIC_PREFIX)


def parse_horoscope(text: Optional[str]) -> List[HoroscopeItem]:
    return [
        HoroscopeItem(sign=record["sign"], prediction=record["prediction"], icon=record["icon"])
        for record in parse_records(text, HOROSCOPE_SCHEMA)
    ]


def parse_party_insights(text: Optional[str]) -> Dict[str, Dict[str, str]]:
    """
    Map each party name found in the text to its description and stance.

    A ``PARTY:`` block without any ``DESC:``/``STANCE:`` line contributes
    nothing. Repeated names keep the position of their first appearance while
    later blocks overwrite the values.
    """
    insights: Dict[str, Dict[str, str]] = {}
    for record in parse_records(text, PARTY_SCHEMA):
        if not record["description"] and not record["stance"]:
            continue
        entry = insights.setdefault(record["name"], {"description": "", "stance": ""})
        if record["description"]:
            entry["description"] = record["description"]
        if record["stance"]:
            entry["stance"] = record["stance"]
    return insights


def attach_citations(items: Sequence[NewsItem], chunks: Iterable[GroundingChunk]) -> List[NewsItem]:
    """
    Pair citations with news items by position. The model gives no explicit
    mapping, so item N takes the Nth chunk's URI when that chunk has one.
    """
    chunk_list = list(chunks)
    out: List[NewsItem] = []
    for index, item in enumerate(items):
        if index < len(chunk_list) and chunk_list[index].uri:
            out.append(
                NewsItem(
                    id=item.id,
                    title=item.title,
                    summary=item.summary,
                    source=item.source,
                    timestamp=item.timestamp,
                    url=chunk_list[index].uri,
                )
            )
        else:
            out.append(item)
    return out
