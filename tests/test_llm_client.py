"""Tests for the LLM client with a mocked Anthropic client."""

import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import anthropic
import httpx
import pytest

from seo_blog_builder.config import GenerationConfig
from seo_blog_builder.llm_client import (
    IMAGE_DESCRIPTION_FALLBACK,
    BlogRequest,
    LLMClient,
    LLMClientError,
)
from seo_blog_builder.models import SiteEntry


def text_response(text: str) -> SimpleNamespace:
    return SimpleNamespace(content=[SimpleNamespace(type="text", text=text)])


@pytest.fixture
def anthropic_client():
    return MagicMock()


@pytest.fixture
def llm(anthropic_client) -> LLMClient:
    return LLMClient(client=anthropic_client)


class TestInit:
    """Tests for client construction."""

    def test_missing_api_key(self, monkeypatch):
        """Test that a missing key raises LLMClientError."""
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)

        with pytest.raises(LLMClientError, match="No API key"):
            LLMClient()

    def test_builds_client_with_key(self):
        """Test construction with an explicit key."""
        llm = LLMClient(api_key="sk-test")

        assert llm.api_key == "sk-test"
        assert isinstance(llm.client, anthropic.Anthropic)

    def test_uses_configured_http_client(self):
        """Test that the httpx client with configured timeouts is accepted."""
        llm = LLMClient(api_key="sk-test", config=GenerationConfig(timeout_seconds=45.0))

        http_client = llm.client._client

        assert isinstance(http_client, httpx.Client)
        assert http_client.timeout.read == 45.0
        assert http_client.timeout.connect == 30.0


class TestGenerate:
    """Tests for generate_blog_content."""

    def test_parses_fenced_json(self, llm, anthropic_client, sample_content_dict):
        """Test that a fenced JSON answer becomes BlogContent."""
        anthropic_client.messages.create.return_value = text_response(
            f"```json\n{json.dumps(sample_content_dict)}\n```"
        )

        content = llm.generate_blog_content(BlogRequest(keywords="houten kaart"))

        assert content.title == "De houten kaart als cadeau"
        params = anthropic_client.messages.create.call_args.kwargs
        assert params["model"] == llm.config.model
        assert "JSON" in params["system"]

    def test_prompt_contains_request(self, llm, anthropic_client):
        """Test the prompt carries keywords, links, page info and images."""
        anthropic_client.messages.create.return_value = text_response('{"title": "x"}')
        request = BlogRequest(
            keywords="houten kaart",
            intent="informatief",
            site_entries=[SiteEntry("Wereldkaart", "https://www.example.com/product/wereldkaart/", "Product")],
            page_summaries=["TITLE: Wereldkaart"],
            image_contexts=["Een kaart aan de muur"],
        )

        llm.generate_blog_content(request)

        prompt = anthropic_client.messages.create.call_args.kwargs["messages"][0]["content"]
        assert "Keywords: houten kaart" in prompt
        assert "Intent: informatief" in prompt
        assert "https://www.example.com/product/wereldkaart/" in prompt
        assert "[PAGE INFO: Wereldkaart]" in prompt
        assert "Image for section 0: Een kaart aan de muur" in prompt

    def test_api_error_wrapped(self, llm, anthropic_client):
        """Test that API failures become LLMClientError."""
        anthropic_client.messages.create.side_effect = RuntimeError("overloaded")

        with pytest.raises(LLMClientError, match="overloaded"):
            llm.generate_blog_content(BlogRequest(keywords="kaart"))

    def test_invalid_json(self, llm, anthropic_client):
        """Test that a non-JSON answer raises LLMClientError."""
        anthropic_client.messages.create.return_value = text_response("Sorry, I cannot help.")

        with pytest.raises(LLMClientError, match="unusable blog content"):
            llm.generate_blog_content(BlogRequest(keywords="kaart"))

    def test_empty_response(self, llm, anthropic_client):
        """Test that a response without text raises LLMClientError."""
        anthropic_client.messages.create.return_value = SimpleNamespace(content=[])

        with pytest.raises(LLMClientError, match="empty response"):
            llm.generate_blog_content(BlogRequest(keywords="kaart"))


class TestModify:
    """Tests for modify_blog_content."""

    def test_sends_current_content(self, llm, anthropic_client, sample_content):
        """Test that the full current content and instruction are sent."""
        anthropic_client.messages.create.return_value = text_response('{"title": "Nieuw"}')

        result = llm.modify_blog_content(sample_content, "Maak de intro korter")

        prompt = anthropic_client.messages.create.call_args.kwargs["messages"][0]["content"]
        assert '"title": "De houten kaart als cadeau"' in prompt
        assert "Maak de intro korter" in prompt
        assert result.title == "Nieuw"

    def test_empty_instruction(self, llm, anthropic_client, sample_content):
        """Test that an empty instruction is rejected without an API call."""
        with pytest.raises(LLMClientError, match="must not be empty"):
            llm.modify_blog_content(sample_content, "   ")

        anthropic_client.messages.create.assert_not_called()


class TestDescribeImage:
    """Tests for describe_image."""

    def test_returns_description(self, llm, anthropic_client, sample_image):
        """Test that the image is sent as base64 and the text returned."""
        anthropic_client.messages.create.return_value = text_response(" Een houten kaart. ")

        assert llm.describe_image(sample_image) == "Een houten kaart."
        params = anthropic_client.messages.create.call_args.kwargs
        source = params["messages"][0]["content"][0]["source"]
        assert source == {"type": "base64", "media_type": "image/png", "data": "iVBORw0KGgo="}
        assert "system" not in params

    def test_failure_returns_fallback(self, llm, anthropic_client, sample_image):
        """Test that errors degrade to the fallback description."""
        anthropic_client.messages.create.side_effect = RuntimeError("timeout")

        assert llm.describe_image(sample_image) == IMAGE_DESCRIPTION_FALLBACK
