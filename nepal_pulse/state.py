"""
Explicit application state for the dashboard, mutated only through the
transition methods below.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

from nepal_pulse.models import (
    ContentType,
    FetchResult,
    FetchStatus,
    HoroscopeItem,
    Language,
    NewsItem,
    Notification,
    Page,
    Party,
)

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    language: Language = Language.EN
    page: Page = Page.HOME
    dark_mode: bool = False
    news: List[NewsItem] = field(default_factory=list)
    hot_topic: Optional[str] = None
    notification: Optional[Notification] = None
    parties: List[Party] = field(default_factory=list)
    horoscopes: List[HoroscopeItem] = field(default_factory=list)
    loading: Dict[ContentType, bool] = field(default_factory=lambda: {c: False for c in ContentType})
    statuses: Dict[ContentType, Optional[FetchStatus]] = field(default_factory=lambda: {c: None for c in ContentType})
    last_updated: Optional[str] = None
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    def set_language(self, language: Language) -> bool:
        """
        Switch language and drop every cached list, so nothing rendered in the
        old language survives. Returns True when the language actually changed.
        """
        with self._lock:
            if language == self.language:
                return False
            self.language = language
            self.news = []
            self.parties = []
            self.horoscopes = []
            self.hot_topic = None
            self.notification = None
            # in-flight fetches belong to the old language; their results will be dropped
            self.loading = {c: False for c in ContentType}
            return True

    def set_page(self, page: Page) -> bool:
        with self._lock:
            if page == self.page:
                return False
            self.page = page
            return True

    def toggle_theme(self) -> bool:
        with self._lock:
            self.dark_mode = not self.dark_mode
            return self.dark_mode

    def begin_fetch(self, content_type: ContentType) -> bool:
        """
        Mark ``content_type`` busy. Returns False when a fetch is already in
        flight so the caller can skip overlapping requests.
        """
        with self._lock:
            if self.loading[content_type]:
                return False
            self.loading[content_type] = True
            return True

    def apply_fetch_result(self, result: FetchResult) -> bool:
        """
        Replace the slot for ``result.content_type`` wholesale. Results fetched
        for a language that is no longer active are dropped without touching the
        busy flag, which may now belong to a fetch in the new language. Returns
        True when the result was applied.
        """
        with self._lock:
            if result.language != self.language:
                logger.debug(
                    "Dropping %s result for %s; active language is %s",
                    result.content_type.value,
                    result.language.value,
                    self.language.value,
                )
                return False

            self.loading[result.content_type] = False
            self.statuses[result.content_type] = result.status
            if result.content_type == ContentType.NEWS:
                self.news = list(result.items)
                fetched_at = result.fetched_at or datetime.now()
                self.last_updated = fetched_at.strftime("%H:%M:%S")
                if result.hot_topic:
                    self.hot_topic = result.hot_topic
                    self.notification = Notification(
                        id=f"hot-{fetched_at.strftime('%H%M%S')}",
                        message=result.hot_topic,
                        type="hot",
                    )
            elif result.content_type == ContentType.PARTIES:
                self.parties = list(result.items)
            else:
                self.horoscopes = list(result.items)
            return True

    def dismiss_notification(self) -> None:
        with self._lock:
            self.notification = None
