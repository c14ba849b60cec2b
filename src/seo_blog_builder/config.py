# -*- coding: utf-8 -*-
"""
Centralized configuration for SEO Blog Builder.

This module provides configuration dataclasses for document rendering
(site URLs, document labels, placeholders) and for the generative-AI
collaborator (model and sampling parameters).
"""

from dataclasses import dataclass


@dataclass
class RenderConfig:
    """
    Configuration for rendered documents and page-builder templates.

    Attributes:
        site_url: Root URL of the publishing site. Used for the breadcrumb
            structured data and as the canonical URL fallback. Must be an
            absolute http(s) URL ending with a slash.
        blog_path: Path of the blog index below ``site_url``.
        language: Document language for the standalone export (``<html lang>``).

        toc_title: Title of the table of contents block.
        entities_heading: Heading of the semantic entity (glossary) section.
        entities_toc_label: TOC label linking to the entity section.
        faq_heading: Heading of the FAQ section, also used as its TOC label.
        breadcrumb_home_label / breadcrumb_blog_label: Breadcrumb names.

        default_header_alt: Header image alt text when the content has
            neither a header alt nor a title.
        default_image_alt: Alt text used where a section image has no alt.
        video_placeholder_thumbnail: Thumbnail for the video structured data
            when the provider offers none (Vimeo).

        publisher_name: Organization named as author in the page-builder
            template's BlogPosting structured data.
        placeholder_image_url: Placeholder image URL pattern for the page
            builder template. ``{number}`` is replaced by the 1-based
            section number.
        import_banner_title / import_banner_description: Instructions shown
            at the top of an imported page-builder template.
    """

    site_url: str = "https://www.example.com/"
    blog_path: str = "blog/"
    language: str = "nl"

    # Document labels
    toc_title: str = "Inhoudsopgave"
    entities_heading: str = "Kernbegrippen & Definities"
    entities_toc_label: str = "Kernbegrippen"
    faq_heading: str = "Veelgestelde Vragen"
    breadcrumb_home_label: str = "Home"
    breadcrumb_blog_label: str = "Blog"

    # Fallbacks
    default_header_alt: str = "Blog header"
    default_image_alt: str = "Blog afbeelding"
    video_placeholder_thumbnail: str = "https://www.example.com/placeholder-video.jpg"

    # Page-builder template
    publisher_name: str = "Example"
    placeholder_image_url: str = (
        "https://placehold.co/800x600/ec7b5d/ffffff.png?text=Afbeelding+{number}"
    )
    import_banner_title: str = "IMPORT INSTRUCTIES"
    import_banner_description: str = (
        "1. Upload afbeeldingen uit ZIP naar Media bieb.\n"
        "2. Klik op oranje vlakken en vervang foto's.\n"
        "3. Verwijder dit blok."
    )

    @property
    def blog_url(self) -> str:
        """Absolute URL of the blog index."""
        return f"{self.site_url}{self.blog_path}"

    def placeholder_image_for(self, index: int) -> str:
        """Placeholder image URL for the zero-based section ``index``."""
        return self.placeholder_image_url.replace("{number}", str(index + 1))

    def __post_init__(self):
        """Validate configuration values."""
        if not self.site_url.startswith(("http://", "https://")):
            raise ValueError(
                f"site_url must start with http:// or https://, got '{self.site_url}'"
            )
        if not self.site_url.endswith("/"):
            raise ValueError(f"site_url must end with '/', got '{self.site_url}'")
        if self.blog_path.startswith("/"):
            raise ValueError(
                f"blog_path must be relative to site_url, got '{self.blog_path}'"
            )
        if "{number}" not in self.placeholder_image_url:
            raise ValueError(
                "placeholder_image_url must contain a '{number}' placeholder"
            )
        if not self.language.strip():
            raise ValueError("language must not be empty")

    @classmethod
    def for_site(cls, site_url: str, **overrides) -> "RenderConfig":
        """Create config for a site, adding the trailing slash if missing.

        Args:
            site_url: Root URL of the publishing site.
            **overrides: Override any other config values.

        Returns:
            RenderConfig for the site.
        """
        if site_url and not site_url.endswith("/"):
            site_url = f"{site_url}/"
        return cls(site_url=site_url, **overrides)


@dataclass
class GenerationConfig:
    """
    Configuration for the generative-AI collaborator.

    Attributes:
        model: Model identifier.
        max_tokens: Maximum tokens in a response. Blog JSON is long, so this
            must leave room for every section plus FAQ and schema markup.
        temperature: Sampling temperature (0.0-1.0). Low values keep the JSON
            structure stable.
        timeout_seconds: HTTP read timeout for a single call.
    """

    model: str = "claude-sonnet-4-20250514"
    max_tokens: int = 8192
    temperature: float = 0.2
    timeout_seconds: float = 120.0

    def __post_init__(self):
        """Validate configuration values."""
        if not self.model:
            raise ValueError("model must not be empty")
        if self.max_tokens < 1024:
            raise ValueError(f"max_tokens must be >= 1024, got {self.max_tokens}")
        if not 0.0 <= self.temperature <= 1.0:
            raise ValueError(
                f"temperature must be between 0.0 and 1.0, got {self.temperature}"
            )
        if self.timeout_seconds <= 0:
            raise ValueError(
                f"timeout_seconds must be > 0, got {self.timeout_seconds}"
            )

    @classmethod
    def precise(cls, **overrides) -> "GenerationConfig":
        """Low-temperature preset for structure-preserving modifications."""
        defaults = {"temperature": 0.2}
        defaults.update(overrides)
        return cls(**defaults)

    @classmethod
    def creative(cls, **overrides) -> "GenerationConfig":
        """Higher-temperature preset for first drafts."""
        defaults = {"temperature": 0.7}
        defaults.update(overrides)
        return cls(**defaults)
