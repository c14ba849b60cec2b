"""
Data models for SEO Blog Builder.

This module defines the structured content object produced by the AI
collaborator, the per-render inputs (images, video reference) and the
results of SEO scoring.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class SectionLayout(Enum):
    """Visual layout variants a blog section can be rendered with."""
    HERO = "hero"
    FULL_WIDTH = "full_width"
    TWO_COLUMN_IMAGE_LEFT = "two_column_image_left"
    TWO_COLUMN_IMAGE_RIGHT = "two_column_image_right"
    CTA_BLOCK = "cta_block"
    FEATURE_HIGHLIGHT = "feature_highlight"
    QUOTE_BLOCK = "quote_block"

    @classmethod
    def parse(cls, value: Any) -> "SectionLayout":
        """Map a wire value to a layout, falling back to full width."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for layout in cls:
                if layout.value == normalized:
                    return layout
        return cls.FULL_WIDTH


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _as_optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


@dataclass
class Section:
    """A single content section of a generated blog."""
    layout: SectionLayout = SectionLayout.FULL_WIDTH
    heading: str = ""
    content: str = ""
    snippet: Optional[str] = None  # Short direct-answer sentence
    cta_text: Optional[str] = None
    cta_url: Optional[str] = None

    @property
    def has_heading(self) -> bool:
        return bool(self.heading and self.heading.strip())

    @property
    def has_cta(self) -> bool:
        """A CTA renders only when both text and URL are present."""
        return bool(self.cta_text and self.cta_url)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Section":
        return cls(
            layout=SectionLayout.parse(data.get("layout")),
            heading=_as_str(data.get("heading")),
            content=_as_str(data.get("content")),
            snippet=_as_optional_str(data.get("snippet")),
            cta_text=_as_optional_str(data.get("ctaText")),
            cta_url=_as_optional_str(data.get("ctaUrl")),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "layout": self.layout.value,
            "heading": self.heading,
            "content": self.content,
        }
        if self.snippet:
            data["snippet"] = self.snippet
        if self.cta_text:
            data["ctaText"] = self.cta_text
        if self.cta_url:
            data["ctaUrl"] = self.cta_url
        return data


@dataclass
class FaqItem:
    """A question/answer pair."""
    question: str
    answer: str


@dataclass
class SemanticEntity:
    """A concept with its definition (knowledge-graph style glossary entry)."""
    concept: str
    definition: str


@dataclass
class BlogContent:
    """
    Structured blog content as returned by the generative-AI collaborator.

    Created fresh by every generation call and replaced wholesale by every
    modification call; never mutated in place across calls.
    """
    title: str = ""
    meta_description: str = ""
    canonical_url: Optional[str] = None
    header_image_alt: Optional[str] = None
    keywords_used: list[str] = field(default_factory=list)
    semantic_entities: list[SemanticEntity] = field(default_factory=list)
    schema_markup: Optional[str] = None  # Pre-serialized JSON-LD, opaque
    faq: list[FaqItem] = field(default_factory=list)
    image_alt_map: dict[str, str] = field(default_factory=dict)
    sections: list[Section] = field(default_factory=list)
    geo_strategy: str = ""
    internal_links_used: list[str] = field(default_factory=list)

    def image_alt_for(self, index: int) -> str:
        """Get the alt text for the section at ``index`` (empty if none)."""
        return _as_str(self.image_alt_map.get(str(index))).strip()

    @property
    def keywords_csv(self) -> str:
        return ", ".join(self.keywords_used)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BlogContent":
        """
        Build content from the camelCase wire shape.

        Absent or null optional fields and arrays default to empty values;
        malformed array entries are skipped rather than rejected.

        Args:
            data: Parsed JSON object from the AI collaborator.

        Returns:
            BlogContent instance.
        """
        entities = []
        for item in _as_list(data.get("semanticEntities")):
            if isinstance(item, dict) and item.get("concept"):
                entities.append(SemanticEntity(
                    concept=_as_str(item.get("concept")),
                    definition=_as_str(item.get("definition")),
                ))

        faq = []
        for item in _as_list(data.get("faq")):
            if isinstance(item, dict) and item.get("question"):
                faq.append(FaqItem(
                    question=_as_str(item.get("question")),
                    answer=_as_str(item.get("answer")),
                ))

        raw_alt_map = data.get("imageAltMap")
        alt_map: dict[str, str] = {}
        if isinstance(raw_alt_map, dict):
            for key, value in raw_alt_map.items():
                if value is not None:
                    alt_map[str(key)] = _as_str(value)

        sections = [
            Section.from_dict(item)
            for item in _as_list(data.get("sections"))
            if isinstance(item, dict)
        ]

        return cls(
            title=_as_str(data.get("title")),
            meta_description=_as_str(data.get("metaDescription")),
            canonical_url=_as_optional_str(data.get("canonicalUrl")),
            header_image_alt=_as_optional_str(data.get("headerImageAlt")),
            keywords_used=[_as_str(k) for k in _as_list(data.get("keywordsUsed")) if k],
            semantic_entities=entities,
            schema_markup=_as_optional_str(data.get("schemaMarkup")),
            faq=faq,
            image_alt_map=alt_map,
            sections=sections,
            geo_strategy=_as_str(data.get("geoStrategy")),
            internal_links_used=[
                _as_str(link) for link in _as_list(data.get("internalLinksUsed")) if link
            ],
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the camelCase wire shape."""
        data: dict[str, Any] = {
            "title": self.title,
            "metaDescription": self.meta_description,
            "keywordsUsed": list(self.keywords_used),
            "geoStrategy": self.geo_strategy,
            "internalLinksUsed": list(self.internal_links_used),
            "imageAltMap": dict(self.image_alt_map),
            "sections": [section.to_dict() for section in self.sections],
            "faq": [{"question": f.question, "answer": f.answer} for f in self.faq],
            "semanticEntities": [
                {"concept": e.concept, "definition": e.definition}
                for e in self.semantic_entities
            ],
        }
        if self.canonical_url:
            data["canonicalUrl"] = self.canonical_url
        if self.header_image_alt:
            data["headerImageAlt"] = self.header_image_alt
        if self.schema_markup:
            data["schemaMarkup"] = self.schema_markup
        return data


@dataclass
class ImageAsset:
    """An already size/format-normalized image, positionally bound to a section."""
    base64: str
    mime_type: str

    @property
    def data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.base64}"


class VideoProvider(Enum):
    """Supported video hosts."""
    YOUTUBE = "youtube"
    VIMEO = "vimeo"


@dataclass(frozen=True)
class VideoReference:
    """An embeddable video derived from a free-form URL."""
    provider: VideoProvider
    id: str
    canonical_link: str
    thumbnail_url: Optional[str] = None

    @property
    def embed_url(self) -> str:
        if self.provider == VideoProvider.YOUTUBE:
            return f"https://www.youtube.com/embed/{self.id}"
        return f"https://player.vimeo.com/video/{self.id}"


def section_anchor_id(index: int) -> str:
    """Position-derived anchor id, stable across heading edits."""
    return f"section-{index}"


@dataclass(frozen=True)
class TocEntry:
    """A table-of-contents link target."""
    heading: str
    anchor_id: str


@dataclass
class SeoIssues:
    """Diagnostics grouped by severity, in evaluation order."""
    critical: list[str] = field(default_factory=list)
    warning: list[str] = field(default_factory=list)
    good: list[str] = field(default_factory=list)


@dataclass
class SeoAnalysis:
    """Result of scoring an HTML document for on-page SEO."""
    score: int = 100
    word_count: int = 0
    reading_time_minutes: int = 0
    keyword_density_percent: float = 0.0
    keyword_count: int = 0
    issues: SeoIssues = field(default_factory=SeoIssues)

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "word_count": self.word_count,
            "reading_time_minutes": self.reading_time_minutes,
            "keyword_density_percent": self.keyword_density_percent,
            "keyword_count": self.keyword_count,
            "issues": {
                "critical": list(self.issues.critical),
                "warning": list(self.issues.warning),
                "good": list(self.issues.good),
            },
        }


@dataclass
class SiteEntry:
    """A linkable page discovered in a site's sitemap."""
    name: str
    url: str
    category: str
