import os
import unittest
from unittest.mock import MagicMock, patch

from app import create_app
from nepal_pulse.adapters.base import GenerationResult
from nepal_pulse.settings import load_settings


class RelayRouteTests(unittest.TestCase):
    def setUp(self) -> None:
        self.generator = MagicMock()
        self.generator.generate.return_value = GenerationResult(
            text="HEADLINE: A\nSUMMARY: B\nSOURCE: C",
            grounding_chunks=[{"web": {"uri": "https://example.com/a", "title": "A"}}, {}],
        )
        self.factory = MagicMock(return_value=self.generator)
        self.app = create_app(settings=load_settings(), generator_factory=self.factory)
        self.client = self.app.test_client()

    @patch.dict(os.environ, {"API_KEY": "test-key"})
    def test_relays_text_and_citations_unmodified(self):
        resp = self.client.post("/api/gemini", json={"type": "news", "language": "np"})

        self.assertEqual(resp.status_code, 200)
        body = resp.get_json()
        self.assertEqual(body["text"], "HEADLINE: A\nSUMMARY: B\nSOURCE: C")
        self.assertEqual(body["groundingChunks"][0]["web"]["uri"], "https://example.com/a")
        self.assertEqual(body["groundingChunks"][1], {})
        self.factory.assert_called_once_with("test-key")
        prompt = self.generator.generate.call_args[0][0]
        self.assertTrue(prompt.use_search)
        self.assertIn("Devanagari", prompt.contents)

    @patch.dict(os.environ, {"API_KEY": "test-key"})
    def test_horoscope_prompt_skips_search(self):
        self.client.post("/api/gemini", json={"type": "horoscope", "language": "en"})
        prompt = self.generator.generate.call_args[0][0]
        self.assertFalse(prompt.use_search)

    @patch.dict(os.environ, {"API_KEY": "", "GEMINI_API_KEY": ""})
    def test_missing_api_key(self):
        resp = self.client.post("/api/gemini", json={"type": "news", "language": "en"})
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.get_json()["error"], "Server Configuration Error: API_KEY missing")
        self.factory.assert_not_called()

    @patch.dict(os.environ, {"API_KEY": "test-key"})
    def test_provider_failure_returns_error_body(self):
        self.generator.generate.side_effect = RuntimeError("quota exhausted")
        resp = self.client.post("/api/gemini", json={"type": "parties", "language": "en"})
        self.assertEqual(resp.status_code, 500)
        body = resp.get_json()
        self.assertEqual(body["error"], "quota exhausted")
        self.assertIn("details", body)

    @patch.dict(os.environ, {"API_KEY": "test-key"})
    def test_invalid_type_is_rejected(self):
        resp = self.client.post("/api/gemini", json={"type": "weather", "language": "en"})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("details", resp.get_json())
        self.factory.assert_not_called()

    def test_non_post_is_405(self):
        resp = self.client.get("/api/gemini")
        self.assertEqual(resp.status_code, 405)
        self.assertEqual(resp.get_json()["error"], "Method Not Allowed")

    def test_preflight_is_200_with_wildcard_origin(self):
        resp = self.client.options(
            "/api/gemini",
            headers={
                "Origin": "https://pulse.example.com",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.headers.get("Access-Control-Allow-Origin"), "*")

    def test_cors_header_on_regular_response(self):
        resp = self.client.post(
            "/api/gemini",
            json={"type": "bogus"},
            headers={"Origin": "https://pulse.example.com"},
        )
        self.assertEqual(resp.headers.get("Access-Control-Allow-Origin"), "*")

    @patch.dict(os.environ, {"API_KEY": "AIzaSyTHISSHOULDNEVERLEAK000000000"})
    def test_health_does_not_expose_key(self):
        resp = self.client.get("/api/health")
        self.assertEqual(resp.status_code, 200)
        body = resp.get_json()
        self.assertTrue(body["provider"]["api_key_configured"])
        self.assertNotIn("AIzaSy", resp.get_data(as_text=True))


if __name__ == "__main__":
    unittest.main()
