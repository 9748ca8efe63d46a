import unittest
from datetime import datetime
from unittest.mock import MagicMock

from nepal_pulse import fallbacks
from nepal_pulse.exceptions import MalformedResponse, RouteUnavailable, TransportFailure, UpstreamError
from nepal_pulse.models import ContentType, FetchStatus, GroundingChunk, Language, RelayResponse
from nepal_pulse.resolver import FallbackResolver

NOW = datetime(2026, 3, 4, 18, 40)

NEWS_TEXT = (
    "HOT_TOPIC: Alliance talks stall\n"
    "---\n"
    "HEADLINE: A\nSUMMARY: B\nSOURCE: C\n"
    "---\n"
    "HEADLINE: D\nSUMMARY: E\nSOURCE: F\n"
)


def _resolver(source):
    return FallbackResolver(source, clock=lambda: NOW)


class NewsResolutionTests(unittest.TestCase):
    def test_live_news(self):
        source = MagicMock()
        source.fetch.return_value = RelayResponse(
            text=NEWS_TEXT, grounding_chunks=[GroundingChunk(uri="https://example.com/a")]
        )

        result = _resolver(source).fetch_news(Language.EN)

        source.fetch.assert_called_once_with(ContentType.NEWS, Language.EN)
        self.assertEqual(result.status, FetchStatus.LIVE)
        self.assertEqual(result.hot_topic, "Alliance talks stall")
        self.assertEqual([i.title for i in result.items], ["A", "D"])
        self.assertEqual(result.items[0].url, "https://example.com/a")
        self.assertEqual(result.fetched_at, NOW)

    def test_live_news_without_hot_topic_uses_placeholder(self):
        source = MagicMock()
        source.fetch.return_value = RelayResponse(text="HEADLINE: A")
        result = _resolver(source).fetch_news(Language.NP)
        self.assertEqual(result.hot_topic, "निर्वाचन अपडेट")

    def test_live_news_with_empty_hot_topic_keeps_it_empty(self):
        source = MagicMock()
        source.fetch.return_value = RelayResponse(text="HOT_TOPIC:   \nHEADLINE: A")
        result = _resolver(source).fetch_news(Language.EN)
        self.assertEqual(result.hot_topic, "")
        self.assertEqual(result.items[0].title, "A")

    def test_missing_route_serves_mock_set(self):
        source = MagicMock()
        source.fetch.side_effect = RouteUnavailable("404")

        result = _resolver(source).fetch_news(Language.EN)

        self.assertEqual(result.status, FetchStatus.MOCK)
        self.assertEqual(result.items, fallbacks.mock_news(Language.EN, NOW))
        titles = {item.title for item in result.items}
        self.assertNotIn(fallbacks.text(Language.EN, "server_error_title"), titles)
        self.assertNotIn(fallbacks.text(Language.EN, "no_internet_title"), titles)

    def test_transport_failure_serves_single_no_internet_item(self):
        for language in Language:
            source = MagicMock()
            source.fetch.side_effect = TransportFailure("unreachable")

            result = _resolver(source).fetch_news(language)

            self.assertEqual(result.status, FetchStatus.OFFLINE)
            self.assertEqual(len(result.items), 1)
            self.assertEqual(result.items[0].title, fallbacks.text(language, "no_internet_title"))
            self.assertEqual(result.items[0].summary, fallbacks.text(language, "no_internet_summary"))

    def test_upstream_error_serves_generic_notice_without_details(self):
        source = MagicMock()
        source.fetch.side_effect = UpstreamError(500, "key=AIzaSECRETSECRETSECRETSECRET invalid", "trace")

        with self.assertLogs("nepal_pulse.resolver", level="ERROR") as logs:
            result = _resolver(source).fetch_news(Language.EN)

        self.assertEqual(result.status, FetchStatus.ERROR)
        self.assertEqual(len(result.items), 1)
        self.assertEqual(result.items[0].title, fallbacks.text(Language.EN, "server_error_title"))
        self.assertNotIn("AIza", result.items[0].summary)
        self.assertNotIn("AIzaSECRET", "\n".join(logs.output))

    def test_malformed_response_is_treated_as_error(self):
        source = MagicMock()
        source.fetch.side_effect = MalformedResponse("no text")
        result = _resolver(source).fetch_news(Language.EN)
        self.assertEqual(result.status, FetchStatus.ERROR)
        self.assertEqual(result.items[0].title, fallbacks.text(Language.EN, "server_error_title"))


class PartyResolutionTests(unittest.TestCase):
    def test_live_parties_keep_roster(self):
        source = MagicMock()
        source.fetch.return_value = RelayResponse(
            text=(
                "PARTY: Nepali Congress\nDESC: nc\nSTANCE: nc stance\n---\n"
                "PARTY: Janamat Party\nDESC: extra\nSTANCE: ignored\n---\n"
                "PARTY: RPP\nDESC: rpp\nSTANCE: rpp stance\n"
            )
        )

        result = _resolver(source).fetch_parties(Language.EN)

        self.assertEqual(result.status, FetchStatus.LIVE)
        self.assertEqual(len(result.items), 5)
        self.assertEqual(result.items[0].description, "nc")
        self.assertEqual(result.items[4].recent_stance, "rpp stance")
        self.assertEqual(result.items[2].description, fallbacks.text(Language.EN, "party_default_description"))

    def test_failures_keep_roster_with_placeholders(self):
        for error, expected in (
            (TransportFailure("x"), FetchStatus.OFFLINE),
            (UpstreamError(500, "x"), FetchStatus.ERROR),
            (RouteUnavailable("x"), FetchStatus.MOCK),
        ):
            source = MagicMock()
            source.fetch.side_effect = error
            result = _resolver(source).fetch_parties(Language.NP)
            self.assertEqual(result.status, expected)
            self.assertEqual(len(result.items), 5)
            self.assertTrue(all(p.description for p in result.items))

    def test_offline_placeholders_are_localized(self):
        source = MagicMock()
        source.fetch.side_effect = TransportFailure("x")
        result = _resolver(source).fetch_parties(Language.NP)
        self.assertEqual(result.items[0].description, "विवरण उपलब्ध छैन।")
        self.assertEqual(result.items[0].leader, "अज्ञात")


class HoroscopeResolutionTests(unittest.TestCase):
    def test_errors_give_empty_list(self):
        for error in (TransportFailure("x"), UpstreamError(503, "x"), MalformedResponse("x")):
            source = MagicMock()
            source.fetch.side_effect = error
            result = _resolver(source).fetch_horoscope(Language.EN)
            self.assertEqual(result.items, [])

    def test_missing_route_gives_twelve_mock_signs(self):
        source = MagicMock()
        source.fetch.side_effect = RouteUnavailable("x")
        result = _resolver(source).fetch_horoscope(Language.NP)
        self.assertEqual(result.status, FetchStatus.MOCK)
        self.assertEqual(len(result.items), 12)
        self.assertEqual(result.items[0].sign, "मेष")

    def test_dispatch_by_content_type(self):
        source = MagicMock()
        source.fetch.return_value = RelayResponse(text="SIGN: Leo\nPREDICTION: Shine.\nICON: ♌")
        result = _resolver(source).fetch(ContentType.HOROSCOPE, Language.EN)
        self.assertEqual(result.content_type, ContentType.HOROSCOPE)
        self.assertEqual(result.items[0].sign, "Leo")


if __name__ == "__main__":
    unittest.main()
