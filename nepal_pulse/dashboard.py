"""
Headless dashboard controller: owns the AppState, decides what to load for the
current page, and re-fetches news on a fixed APScheduler interval.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from apscheduler.schedulers.background import BackgroundScheduler

from nepal_pulse.models import ContentType, FetchResult, Language, Page
from nepal_pulse.resolver import FallbackResolver
from nepal_pulse.state import AppState

logger = logging.getLogger(__name__)

ResultListener = Callable[[FetchResult], None]


class DashboardController:
    """
    Manual refresh and the periodic timer both end up in ``load_news``; each
    call is one independent attempt, skipped if a news fetch is in flight.
    """

    job_id = "news_refresh"

    def __init__(
        self,
        resolver: FallbackResolver,
        state: Optional[AppState] = None,
        refresh_interval_seconds: int = 180,
        scheduler: Optional[BackgroundScheduler] = None,
    ) -> None:
        self.resolver = resolver
        self.state = state or AppState()
        self.refresh_interval_seconds = refresh_interval_seconds
        self.scheduler = scheduler or BackgroundScheduler(timezone="UTC")
        self._listeners: List[ResultListener] = []

    def subscribe(self, listener: ResultListener) -> None:
        self._listeners.append(listener)

    def load_news(self) -> Optional[FetchResult]:
        if self.state.page != Page.HOME:
            return None
        return self._load(ContentType.NEWS)

    def load_parties(self) -> Optional[FetchResult]:
        if self.state.page != Page.HOME and self.state.parties:
            return None
        return self._load(ContentType.PARTIES)

    def load_horoscope(self) -> Optional[FetchResult]:
        if self.state.page != Page.HOROSCOPE and self.state.horoscopes:
            return None
        return self._load(ContentType.HOROSCOPE)

    def reload(self) -> None:
        if self.state.page == Page.HOME:
            self.load_news()
            self.load_parties()
        else:
            self.load_horoscope()

    def refresh(self) -> Optional[FetchResult]:
        """User-triggered news refresh."""
        return self.load_news()

    def set_language(self, language: Language) -> None:
        if self.state.set_language(language):
            logger.info("Language switched to %s", language.value)
            self.reload()

    def navigate(self, page: Page) -> None:
        if self.state.set_page(page):
            self.reload()

    def start(self) -> None:
        self.scheduler.add_job(
            self.load_news,
            "interval",
            seconds=self.refresh_interval_seconds,
            id=self.job_id,
            max_instances=1,
            coalesce=True,
            replace_existing=True,
        )
        self.scheduler.start()
        logger.info("News refresh scheduled every %ss", self.refresh_interval_seconds)
        self.reload()

    def stop(self) -> None:
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
            logger.info("News refresh stopped")

    def _load(self, content_type: ContentType) -> Optional[FetchResult]:
        if not self.state.begin_fetch(content_type):
            logger.debug("Skipping %s fetch; one is already in flight", content_type.value)
            return None
        result = self.resolver.fetch(content_type, self.state.language)
        if self.state.apply_fetch_result(result):
            for listener in self._listeners:
                listener(result)
        return result
