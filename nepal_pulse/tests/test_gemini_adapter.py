import unittest
from types import SimpleNamespace
from unittest.mock import patch

from nepal_pulse.adapters.gemini import GeminiGenerator
from nepal_pulse.prompts import PromptSpec


def _fake_response(text, chunks):
    metadata = SimpleNamespace(grounding_chunks=chunks)
    return SimpleNamespace(text=text, candidates=[SimpleNamespace(grounding_metadata=metadata)])


class GeminiGeneratorTests(unittest.TestCase):
    @patch("nepal_pulse.adapters.gemini.genai.Client")
    def test_search_prompt_gets_google_search_tool(self, mock_client_cls):
        client = mock_client_cls.return_value
        client.models.generate_content.return_value = _fake_response(
            "HEADLINE: A",
            [SimpleNamespace(web=SimpleNamespace(uri="https://example.com/a", title="A")), SimpleNamespace(web=None)],
        )

        generator = GeminiGenerator(api_key="k", model="gemini-test", temperature=0.3)
        result = generator.generate(PromptSpec(contents="prompt", use_search=True))

        mock_client_cls.assert_called_once_with(api_key="k")
        kwargs = client.models.generate_content.call_args.kwargs
        self.assertEqual(kwargs["model"], "gemini-test")
        self.assertEqual(kwargs["contents"], "prompt")
        self.assertEqual(len(kwargs["config"].tools), 1)
        self.assertEqual(kwargs["config"].temperature, 0.3)
        self.assertEqual(result.text, "HEADLINE: A")
        self.assertEqual(
            result.grounding_chunks,
            [{"web": {"uri": "https://example.com/a", "title": "A"}}, {}],
        )

    @patch("nepal_pulse.adapters.gemini.genai.Client")
    def test_plain_prompt_has_no_tools(self, mock_client_cls):
        client = mock_client_cls.return_value
        client.models.generate_content.return_value = SimpleNamespace(text=None, candidates=None)

        result = GeminiGenerator(api_key="k", model="m").generate(PromptSpec(contents="p", use_search=False))

        self.assertIsNone(client.models.generate_content.call_args.kwargs["config"].tools)
        self.assertEqual(result.text, "")
        self.assertEqual(result.grounding_chunks, [])


if __name__ == "__main__":
    unittest.main()
