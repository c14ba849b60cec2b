"""
LLM client for blog content generation.

This module provides the boundary to the generative-AI collaborator
(Claude/Anthropic): it turns a blog request into structured BlogContent,
applies modification instructions to existing content and describes
uploaded images. The prompts only describe the expected JSON shape.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Optional

import anthropic
import httpx

from .config import GenerationConfig
from .content_loader import ContentLoadError, parse_blog_content_json
from .models import BlogContent, ImageAsset, SiteEntry

logger = logging.getLogger(__name__)


class LLMClientError(Exception):
    """Raised when LLM operations fail."""
    pass


IMAGE_DESCRIPTION_FALLBACK = (
    "Could not analyze the image. Assume a general context that fits the topic."
)

# Shape of the JSON object the model must return
BLOG_JSON_SHAPE = """{
  "title": "H1 title, at most 12 words",
  "metaDescription": "meta description, at most 160 characters",
  "canonicalUrl": "optional canonical URL",
  "headerImageAlt": "alt text for the header image",
  "keywordsUsed": ["keyword", "..."],
  "internalLinksUsed": ["https://...", "..."],
  "geoStrategy": "one-sentence note on the content strategy",
  "semanticEntities": [{"concept": "...", "definition": "..."}],
  "faq": [{"question": "one sentence, no newlines", "answer": "short, no newlines"}],
  "imageAltMap": {"0": "alt text for the image of section 0", "1": "..."},
  "schemaMarkup": "optional serialized JSON-LD string",
  "sections": [
    {
      "layout": "hero | full_width | two_column_image_left | two_column_image_right | cta_block | feature_highlight | quote_block",
      "heading": "section heading",
      "content": "section body as HTML (<p>, <ul>, <a>)",
      "snippet": "optional one-sentence direct answer",
      "ctaText": "optional button text",
      "ctaUrl": "optional button URL"
    }
  ]
}"""

SYSTEM_PROMPT = f"""You write SEO blog posts and return them as a single JSON object.

Return ONLY the JSON object, no commentary. Use exactly this shape:
{BLOG_JSON_SHAPE}

Section content is HTML. Only link to URLs you were given."""


@dataclass
class BlogRequest:
    """Everything the author supplies for one generation call."""
    keywords: str
    intent: str = ""
    site_entries: list[SiteEntry] = field(default_factory=list)
    page_summaries: list[str] = field(default_factory=list)
    image_contexts: list[str] = field(default_factory=list)
    header_image_context: str = ""
    extra_instructions: str = ""


class LLMClient:
    """
    Client for LLM-based blog generation.

    Supports Anthropic Claude API.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        config: Optional[GenerationConfig] = None,
        client: Optional[anthropic.Anthropic] = None,
    ):
        """
        Initialize the LLM client.

        Args:
            api_key: API key. If None, reads from ANTHROPIC_API_KEY env var.
            config: Generation configuration (model, sampling, timeout).
            client: Pre-built Anthropic client, mainly for tests.
        """
        self.config = config or GenerationConfig()

        if client is not None:
            self.client = client
            return

        self.api_key = api_key or os.environ.get("ANTHROPIC_API_KEY")
        if not self.api_key:
            raise LLMClientError(
                "No API key provided. Set ANTHROPIC_API_KEY environment variable "
                "or pass api_key parameter."
            )

        http_client = httpx.Client(
            timeout=httpx.Timeout(self.config.timeout_seconds, connect=30.0),
            follow_redirects=True,
        )
        self.client = anthropic.Anthropic(
            api_key=self.api_key,
            http_client=http_client,
        )

    def _complete(self, content, system: Optional[str] = SYSTEM_PROMPT, max_tokens: Optional[int] = None) -> str:
        params = {
            "model": self.config.model,
            "max_tokens": max_tokens or self.config.max_tokens,
            "temperature": self.config.temperature,
            "messages": [{"role": "user", "content": content}],
        }
        if system:
            params["system"] = system

        try:
            response = self.client.messages.create(**params)
        except Exception as e:
            raise LLMClientError(f"LLM API call failed: {e}")

        text_parts = [
            block.text for block in response.content if getattr(block, "type", "text") == "text"
        ]
        if not text_parts:
            raise LLMClientError("LLM returned an empty response")
        return "".join(text_parts)

    def _to_blog_content(self, text: str) -> BlogContent:
        try:
            return parse_blog_content_json(text)
        except ContentLoadError as e:
            raise LLMClientError(f"LLM returned unusable blog content: {e}")

    def generate_blog_content(self, request: BlogRequest) -> BlogContent:
        """
        Generate a new blog post.

        Args:
            request: Keywords, intent, link targets and image contexts.

        Returns:
            BlogContent parsed from the model response.

        Raises:
            LLMClientError: If the API call fails or the response is not
                valid blog JSON.
        """
        prompt = self._build_generation_prompt(request)
        logger.info(f"Generating blog content for keywords: {request.keywords}")
        content = self._to_blog_content(self._complete(prompt))
        logger.info(f"Generated '{content.title}' with {len(content.sections)} sections")
        return content

    def modify_blog_content(self, current: BlogContent, instruction: str) -> BlogContent:
        """
        Apply a free-text instruction to existing content.

        The full content object is sent back and a complete replacement is
        expected; the layout of sections should be kept unless the
        instruction says otherwise.

        Raises:
            LLMClientError: If the API call fails or the response is not
                valid blog JSON.
        """
        if not instruction or not instruction.strip():
            raise LLMClientError("Modification instruction must not be empty")

        prompt = (
            "Here is the current blog post as JSON:\n"
            f"{json.dumps(current.to_dict(), ensure_ascii=False, indent=2)}\n\n"
            f"Apply this instruction: {instruction.strip()}\n\n"
            "Return the complete updated JSON object in the same shape. "
            "Keep the section layouts and image alt texts unless the instruction changes them."
        )
        logger.info(f"Modifying '{current.title}': {instruction.strip()[:80]}")
        return self._to_blog_content(self._complete(prompt))

    def describe_image(self, image: ImageAsset) -> str:
        """
        Describe an uploaded image as writing context.

        Never raises: a failed call yields a neutral fallback description.
        """
        content = [
            {
                "type": "image",
                "source": {"type": "base64", "media_type": image.mime_type, "data": image.base64},
            },
            {
                "type": "text",
                "text": "Describe this image as context for a blog post. Focus on materials, colours and technique.",
            },
        ]
        try:
            return self._complete(content, system=None, max_tokens=1024).strip()
        except LLMClientError as e:
            logger.warning(f"Image analysis failed: {e}")
            return IMAGE_DESCRIPTION_FALLBACK

    def _build_generation_prompt(self, request: BlogRequest) -> str:
        lines = [f"Keywords: {request.keywords}"]
        if request.intent:
            lines.append(f"Intent: {request.intent}")

        if request.site_entries:
            lines.append("Link targets (use these exact URLs):")
            lines.extend(f'- "{entry.name}" -> {entry.url}' for entry in request.site_entries)

        for index, summary in enumerate(request.page_summaries):
            name = (
                request.site_entries[index].name
                if index < len(request.site_entries)
                else f"Page {index + 1}"
            )
            lines.append(f"[PAGE INFO: {name}]\n{summary}\n[END PAGE INFO]")

        if request.header_image_context:
            lines.append(f"Header image: {request.header_image_context}")
        for index, context in enumerate(request.image_contexts):
            lines.append(f"Image for section {index}: {context}")
        if request.image_contexts:
            lines.append(
                "Provide an imageAltMap entry for each section that has an image."
            )

        if request.extra_instructions:
            lines.append(f"Extra instructions: {request.extra_instructions}")

        return "\n".join(lines)
