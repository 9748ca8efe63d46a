import json
import unittest
from datetime import datetime
from unittest.mock import MagicMock, patch

from click.testing import CliRunner

from nepal_pulse.cli import cli
from nepal_pulse.exceptions import RouteUnavailable
from nepal_pulse.models import RelayResponse
from nepal_pulse.resolver import FallbackResolver


def _resolver_with(source):
    return FallbackResolver(source, clock=lambda: datetime(2026, 3, 4, 12, 0))


class CliTests(unittest.TestCase):
    @patch("nepal_pulse.cli.build_resolver")
    def test_news_prints_json(self, mock_build):
        source = MagicMock()
        source.fetch.return_value = RelayResponse(text="HOT_TOPIC: T\nHEADLINE: A\nSUMMARY: B\nSOURCE: C")
        mock_build.return_value = _resolver_with(source)

        result = CliRunner().invoke(cli, ["news", "--language", "en", "--relay-url", "http://relay.test/api/gemini"])

        self.assertEqual(result.exit_code, 0, result.output)
        payload = json.loads(result.output)
        self.assertEqual(payload["status"], "live")
        self.assertEqual(payload["hotTopic"], "T")
        self.assertEqual(payload["items"][0]["title"], "A")
        self.assertEqual(mock_build.call_args[0][0], "http://relay.test/api/gemini")

    @patch("nepal_pulse.cli.build_resolver")
    def test_parties_without_relay_prints_demo_roster(self, mock_build):
        source = MagicMock()
        source.fetch.side_effect = RouteUnavailable("404")
        mock_build.return_value = _resolver_with(source)

        result = CliRunner().invoke(cli, ["parties", "--language", "np"])

        self.assertEqual(result.exit_code, 0, result.output)
        payload = json.loads(result.output)
        self.assertEqual(payload["status"], "mock")
        self.assertEqual(len(payload["items"]), 5)
        self.assertEqual(payload["items"][0]["id"], "party-0")
        self.assertIn("recentStance", payload["items"][0])


if __name__ == "__main__":
    unittest.main()
