"""
Turns relay calls into FetchResults, substituting localized content on failure.

Precedence of failure classes:

1. RouteUnavailable   -> demo content, status ``mock``
2. TransportFailure   -> "no internet" content, status ``offline``
3. UpstreamError      -> "service unavailable" content, status ``error``
4. MalformedResponse  -> same as 3
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, Protocol, Tuple

from nepal_pulse import fallbacks
from nepal_pulse.exceptions import MalformedResponse, RelayError, RouteUnavailable, TransportFailure, UpstreamError
from nepal_pulse.models import ContentType, FetchResult, FetchStatus, Language, RelayResponse
from nepal_pulse.parser import attach_citations, parse_horoscope, parse_news, parse_party_insights
from nepal_pulse.roster import build_parties
from nepal_pulse.security import redact_secrets

logger = logging.getLogger(__name__)


class ContentSource(Protocol):
    def fetch(self, content_type: ContentType, language: Language) -> RelayResponse:
        ...


class FallbackResolver:
    def __init__(self, source: ContentSource, clock: Optional[Callable[[], datetime]] = None) -> None:
        self.source = source
        self.clock = clock or datetime.now

    def _request(self, content_type: ContentType, language: Language) -> Tuple[Optional[RelayResponse], FetchStatus]:
        try:
            return self.source.fetch(content_type, language), FetchStatus.LIVE
        except RouteUnavailable:
            logger.info("Relay not deployed; serving demo %s content", content_type.value)
            return None, FetchStatus.MOCK
        except TransportFailure as exc:
            logger.warning("No connectivity while fetching %s: %s", content_type.value, exc)
            return None, FetchStatus.OFFLINE
        except UpstreamError as exc:
            logger.error(
                "Relay error for %s (HTTP %s): %s %s",
                content_type.value,
                exc.status_code,
                redact_secrets(exc.message),
                redact_secrets(exc.details or ""),
            )
            return None, FetchStatus.ERROR
        except MalformedResponse as exc:
            logger.error("Malformed relay response for %s: %s", content_type.value, exc)
            return None, FetchStatus.ERROR
        except RelayError as exc:
            logger.error("Unclassified relay failure for %s: %s", content_type.value, exc)
            return None, FetchStatus.ERROR
        except Exception as exc:  # pragma: no cover - the view must never see a raise
            logger.error("Unexpected failure fetching %s: %s", content_type.value, redact_secrets(str(exc)), exc_info=True)
            return None, FetchStatus.ERROR

    def fetch_news(self, language: Language) -> FetchResult:
        now = self.clock()
        response, status = self._request(ContentType.NEWS, language)

        if response is not None:
            items, hot_topic = parse_news(response.text, now=now)
            items = attach_citations(items, response.grounding_chunks)
            if hot_topic is None:
                hot_topic = fallbacks.default_hot_topic(language)
        elif status == FetchStatus.MOCK:
            items = fallbacks.mock_news(language, now)
            hot_topic = fallbacks.text(language, "mock_hot_topic")
        elif status == FetchStatus.OFFLINE:
            items = fallbacks.offline_news(language, now)
            hot_topic = fallbacks.text(language, "offline_hot_topic")
        else:
            items = fallbacks.error_news(language, now)
            hot_topic = fallbacks.text(language, "error_hot_topic")

        return FetchResult(
            content_type=ContentType.NEWS,
            language=language,
            status=status,
            items=items,
            hot_topic=hot_topic,
            fetched_at=now,
        )

    def fetch_parties(self, language: Language) -> FetchResult:
        now = self.clock()
        response, status = self._request(ContentType.PARTIES, language)

        if response is not None:
            parties = build_parties(
                language,
                parse_party_insights(response.text),
                default_description=fallbacks.text(language, "party_default_description"),
                default_stance=fallbacks.text(language, "party_default_stance"),
                leader=fallbacks.text(language, "leader_pending"),
            )
        elif status == FetchStatus.MOCK:
            parties = fallbacks.mock_parties(language)
        else:
            parties = fallbacks.unavailable_parties(language)

        return FetchResult(
            content_type=ContentType.PARTIES,
            language=language,
            status=status,
            items=parties,
            fetched_at=now,
        )

    def fetch_horoscope(self, language: Language) -> FetchResult:
        now = self.clock()
        response, status = self._request(ContentType.HOROSCOPE, language)

        if response is not None:
            items = parse_horoscope(response.text)
        elif status == FetchStatus.MOCK:
            items = fallbacks.mock_horoscope(language)
        else:
            items = []

        return FetchResult(
            content_type=ContentType.HOROSCOPE,
            language=language,
            status=status,
            items=items,
            fetched_at=now,
        )

    def fetch(self, content_type: ContentType, language: Language) -> FetchResult:
        if content_type == ContentType.NEWS:
            return self.fetch_news(language)
        if content_type == ContentType.PARTIES:
            return self.fetch_parties(language)
        return self.fetch_horoscope(language)
