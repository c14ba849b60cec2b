"""
Document assembler: structured blog content to styled HTML.

The assembler composes one self-contained HTML fragment from:
- the BlogContent object returned by the AI collaborator
- positionally bound section images and an optional header image
- an optional video URL
- the active keyword list used for highlighting

Output is deterministic for identical inputs, except for the upload
timestamp inside the video structured data, which comes from an
injectable clock.
"""

import html
import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional, Sequence

from .config import RenderConfig
from .highlighting import highlight_keywords
from .models import (
    BlogContent,
    FaqItem,
    ImageAsset,
    Section,
    SectionLayout,
    SemanticEntity,
    TocEntry,
    VideoProvider,
    VideoReference,
    section_anchor_id,
)
from .structured_data import (
    breadcrumb_schema,
    faq_page_schema,
    json_ld_script,
    raw_json_ld_script,
    video_object_schema,
)
from .styles import BLOG_CSS, WRAPPER_ID
from .video import resolve_video_reference

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

ENTITY_ANCHOR_ID = "entity-section"
FAQ_ANCHOR_ID = "faq-section"

# A table of contents for a single heading is noise
MIN_TOC_ENTRIES = 2

# Straight and typographic double quotes removed from quote-block text
_QUOTE_CHARACTERS = ('"', "“", "”")
_TAG_PATTERN = re.compile(r"(<[^>]*>)")

_LITE_EMBED_STYLE = (
    "<style>*{padding:0;margin:0;overflow:hidden}html,body{height:100%}"
    "img,span{position:absolute;width:100%;top:0;bottom:0;margin:auto}"
    "span{height:1.5em;text-align:center;font:48px/1.5 sans-serif;color:white;"
    "text-shadow:0 0 0.5em black}</style>"
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _attr(value: Optional[str]) -> str:
    """Escape a value for use inside a double-quoted attribute."""
    return html.escape(value or "", quote=True)


def _comment_safe(value: Optional[str]) -> str:
    # "--" may not appear inside an HTML comment
    return (value or "").replace("--", "- -")


def _strip_quotes(text: str) -> str:
    """Remove quote characters from text while leaving tag attributes intact."""
    segments = _TAG_PATTERN.split(text)
    for position in range(0, len(segments), 2):
        for quote in _QUOTE_CHARACTERS:
            segments[position] = segments[position].replace(quote, "")
    return "".join(segments)


def build_toc_entries(sections: Sequence[Section]) -> list[TocEntry]:
    """
    Collect table-of-contents entries for sections that have a heading.

    Anchor ids derive from the section position, so links keep resolving
    when a heading is edited.
    """
    return [
        TocEntry(heading=section.heading, anchor_id=section_anchor_id(index))
        for index, section in enumerate(sections)
        if section.has_heading
    ]


def render_video_embed(video: VideoReference) -> str:
    """
    Build the responsive embed fragment for a video.

    YouTube uses the lite-embed pattern: the iframe's ``srcdoc`` shows a
    static thumbnail with a play glyph, and the real player loads only on
    click. Vimeo gets a plain lazy iframe.
    """
    if video.provider == VideoProvider.YOUTUBE:
        thumbnail = video.thumbnail_url or f"https://img.youtube.com/vi/{video.id}/hqdefault.jpg"
        srcdoc = (
            f"{_LITE_EMBED_STYLE}<a href={video.embed_url}?autoplay=1>"
            f"<img src={thumbnail} alt='Video'><span>▶</span></a>"
        )
        return (
            '<div class="blog-video-container">'
            f'<iframe src="{_attr(video.embed_url)}" srcdoc="{_attr(srcdoc)}" '
            'title="YouTube video player" frameborder="0" '
            'allow="accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture" '
            'allowfullscreen loading="lazy"></iframe>'
            "</div>"
        )

    return (
        '<div class="blog-video-container">'
        f'<iframe src="{_attr(video.embed_url)}" title="Vimeo video player" frameborder="0" '
        'allow="autoplay; fullscreen" allowfullscreen loading="lazy"></iframe>'
        "</div>"
    )


@dataclass
class _SectionFragments:
    """Pre-rendered pieces of one section, shared by every layout handler."""
    index: int
    section: Section
    image_html: str
    cta_html: str
    snippet_html: str
    body_html: str

    @property
    def has_image(self) -> bool:
        return bool(self.image_html)

    def heading(self, tag: str = "h2") -> str:
        if not self.section.has_heading:
            return ""
        return f"<{tag}>{self.section.heading}</{tag}>"

    @property
    def floated_image(self) -> str:
        if not self.image_html:
            return ""
        return f'<div class="blog-float-right">{self.image_html}</div>'


class DocumentAssembler:
    """
    Composes a complete styled HTML document from structured blog content.

    The assembler holds no per-document state; one instance can render any
    number of documents.
    """

    def __init__(
        self,
        config: Optional[RenderConfig] = None,
        clock: Optional[Clock] = None,
    ):
        """
        Initialize the assembler.

        Args:
            config: Render configuration. Defaults to RenderConfig().
            clock: Source of the video upload timestamp. Defaults to the
                current UTC time; inject a fixed clock for byte-stable output.
        """
        self.config = config or RenderConfig()
        self.clock = clock or _utc_now
        self._layout_handlers: dict[SectionLayout, Callable[[_SectionFragments], str]] = {
            SectionLayout.FEATURE_HIGHLIGHT: self._render_feature_highlight,
            SectionLayout.QUOTE_BLOCK: self._render_quote_block,
            SectionLayout.CTA_BLOCK: self._render_cta_block,
            SectionLayout.TWO_COLUMN_IMAGE_LEFT: self._render_image_left,
            SectionLayout.TWO_COLUMN_IMAGE_RIGHT: self._render_image_right,
            SectionLayout.FULL_WIDTH: self._render_full_width,
            SectionLayout.HERO: self._render_full_width,
        }

    def assemble(
        self,
        content: BlogContent,
        content_images: Sequence[Optional[ImageAsset]] = (),
        header_image: Optional[ImageAsset] = None,
        video_url: str = "",
        active_keywords: str = "",
    ) -> str:
        """
        Render blog content to an HTML document fragment.

        Args:
            content: Structured blog content.
            content_images: Images bound to sections by position.
            header_image: Optional hero image shown above the first section.
            video_url: Optional YouTube/Vimeo URL.
            active_keywords: Comma-separated keywords to highlight.

        Returns:
            HTML string: style block followed by the wrapped document.
        """
        parts = [BLOG_CSS, f'<div id="{WRAPPER_ID}">']
        parts.append(self._render_audit_comment(content))
        parts.append(self._render_header(content, header_image))

        video = resolve_video_reference(video_url)
        video_html = ""
        if video:
            schema = video_object_schema(content, video, self.clock(), self.config)
            parts.append(json_ld_script(schema))
            video_html = render_video_embed(video)

        toc_entries = build_toc_entries(content.sections)

        for index, section in enumerate(content.sections):
            fragments = self._build_fragments(
                index, section, content, content_images, active_keywords
            )
            parts.append(f'<section class="blog-section" id="{section_anchor_id(index)}">')
            if index == 0:
                parts.append(self._render_lead_section(fragments, toc_entries))
            else:
                if index == 1 and video_html:
                    parts.append(video_html)
                handler = self._layout_handlers.get(section.layout, self._render_full_width)
                parts.append(handler(fragments))
            parts.append("</section>")

        if content.semantic_entities:
            parts.append(self._render_entities(content.semantic_entities))

        if content.faq:
            parts.extend(self._render_faq(content.faq, active_keywords))

        if content.schema_markup:
            parts.append(raw_json_ld_script(content.schema_markup))

        parts.append(json_ld_script(breadcrumb_schema(content.title, self.config)))
        parts.append("</div>")

        logger.debug(
            f"Assembled document: {len(content.sections)} sections, "
            f"{len(toc_entries)} TOC entries, video={'yes' if video else 'no'}, "
            f"faq={len(content.faq)}"
        )
        return "".join(parts)

    # ------------------------------------------------------------------
    # Document-level blocks
    # ------------------------------------------------------------------

    def _render_audit_comment(self, content: BlogContent) -> str:
        return (
            "<!--\n"
            f"POST TITLE: {_comment_safe(content.title)}\n"
            f"META DESC: {_comment_safe(content.meta_description)}\n"
            f"KEYWORDS: {_comment_safe(content.keywords_csv)}\n"
            f"STRATEGY: {_comment_safe(content.geo_strategy)}\n"
            "-->"
        )

    def _render_header(self, content: BlogContent, header_image: Optional[ImageAsset]) -> str:
        parts = ['<header class="blog-section">']
        parts.append(f'<p class="blog-summary">{content.meta_description}</p>')
        if header_image:
            alt = content.header_image_alt or content.title or self.config.default_header_alt
            parts.append(
                f'<img src="{_attr(header_image.data_uri)}" alt="{_attr(alt)}" '
                f'title="{_attr(alt)}" class="blog-header-image" width="1200" height="600" />'
            )
        parts.append("</header>")
        return "".join(parts)

    def _render_toc(self, toc_entries: list[TocEntry]) -> str:
        lead_anchor = section_anchor_id(0)
        items = [
            f'<li><a href="#{entry.anchor_id}">{entry.heading}</a></li>'
            for entry in toc_entries
            if entry.anchor_id != lead_anchor
        ]
        items.append(f'<li><a href="#{ENTITY_ANCHOR_ID}">{self.config.entities_toc_label}</a></li>')
        items.append(f'<li><a href="#{FAQ_ANCHOR_ID}">{self.config.faq_heading}</a></li>')
        return (
            '<nav class="blog-toc">'
            f'<span class="blog-toc-title">{self.config.toc_title}</span>'
            f'<ul class="blog-toc-list">{"".join(items)}</ul>'
            "</nav>"
        )

    def _render_entities(self, entities: list[SemanticEntity]) -> str:
        terms = "".join(
            f"<dt>{entity.concept}</dt><dd>{entity.definition}</dd>"
            for entity in entities
        )
        return (
            f'<section class="blog-section blog-entity-list" id="{ENTITY_ANCHOR_ID}">'
            f"<h2>{self.config.entities_heading}</h2>"
            f"<dl>{terms}</dl>"
            "</section>"
        )

    def _render_faq(self, faq: list[FaqItem], active_keywords: str) -> list[str]:
        """Render the visible FAQ block and its structured data from one list."""
        items = []
        for item in faq:
            answer = highlight_keywords(item.answer, active_keywords)
            items.append(
                '<details class="blog-faq-item" itemscope itemprop="mainEntity" '
                'itemtype="https://schema.org/Question">'
                f'<summary class="blog-faq-question" itemprop="name">{item.question}</summary>'
                '<div class="blog-faq-answer" itemscope itemprop="acceptedAnswer" '
                'itemtype="https://schema.org/Answer">'
                f'<div itemprop="text">{answer}</div>'
                "</div>"
                "</details>"
            )
        block = (
            f'<section class="blog-section blog-faq-container" id="{FAQ_ANCHOR_ID}" '
            'itemscope itemtype="https://schema.org/FAQPage">'
            f"<h2>{self.config.faq_heading}</h2>"
            f'{"".join(items)}'
            "</section>"
        )
        return [block, json_ld_script(faq_page_schema(faq))]

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def _build_fragments(
        self,
        index: int,
        section: Section,
        content: BlogContent,
        content_images: Sequence[Optional[ImageAsset]],
        active_keywords: str,
    ) -> _SectionFragments:
        image_html = ""
        alt = content.image_alt_for(index)
        image = content_images[index] if index < len(content_images) else None
        if alt and image:
            image_html = (
                f'<img src="{_attr(image.data_uri)}" alt="{_attr(alt)}" title="{_attr(alt)}" '
                'class="blog-img" width="600" height="400" loading="lazy" />'
            )

        cta_html = ""
        if section.has_cta:
            cta_html = (
                '<div class="blog-btn-wrapper">'
                f'<a href="{_attr(section.cta_url)}" class="blog-btn">{html.escape(section.cta_text)}</a>'
                "</div>"
            )

        raw_body = section.content
        if section.layout == SectionLayout.QUOTE_BLOCK and index > 0:
            raw_body = _strip_quotes(raw_body)

        snippet_html = ""
        if section.snippet and section.snippet.strip():
            snippet_html = f'<div class="blog-snippet">{section.snippet}</div>'

        return _SectionFragments(
            index=index,
            section=section,
            image_html=image_html,
            cta_html=cta_html,
            snippet_html=snippet_html,
            body_html=highlight_keywords(raw_body, active_keywords),
        )

    def _render_lead_section(self, fragments: _SectionFragments, toc_entries: list[TocEntry]) -> str:
        """Render the intro: heading, image, snippet, content, TOC, CTA."""
        parts = [fragments.heading("h2")]
        if fragments.section.layout == SectionLayout.HERO:
            parts.append(fragments.floated_image)
        parts.append(fragments.snippet_html)
        parts.append(fragments.body_html)
        if len(toc_entries) >= MIN_TOC_ENTRIES:
            parts.append(self._render_toc(toc_entries))
        parts.append(fragments.cta_html)
        return "".join(parts)

    def _render_full_width(self, fragments: _SectionFragments) -> str:
        return "".join([
            fragments.heading("h2"),
            fragments.floated_image,
            fragments.snippet_html,
            fragments.body_html,
            fragments.cta_html,
        ])

    def _render_feature_highlight(self, fragments: _SectionFragments) -> str:
        return (
            '<div class="blog-feature-highlight">'
            f"{fragments.heading('h3')}{fragments.snippet_html}"
            f"{fragments.body_html}{fragments.cta_html}"
            "</div>"
        )

    def _render_quote_block(self, fragments: _SectionFragments) -> str:
        attribution = ""
        if fragments.section.has_heading:
            attribution = f'<div class="blog-quote-author">- {fragments.section.heading}</div>'
        return (
            '<div class="blog-quote-block">'
            f"{fragments.snippet_html}"
            f'<div class="blog-quote-text">“{fragments.body_html}”</div>'
            f"{attribution}{fragments.cta_html}"
            "</div>"
        )

    def _render_cta_block(self, fragments: _SectionFragments) -> str:
        return (
            '<div class="blog-cta-block">'
            f"{fragments.heading('h2')}{fragments.snippet_html}"
            f"{fragments.body_html}{fragments.cta_html}"
            "</div>"
        )

    def _text_column(self, fragments: _SectionFragments) -> str:
        return (
            '<div class="blog-col">'
            f"{fragments.heading('h2')}{fragments.snippet_html}"
            f"{fragments.body_html}{fragments.cta_html}"
            "</div>"
        )

    def _render_image_left(self, fragments: _SectionFragments) -> str:
        if not fragments.has_image:
            return self._render_full_width(fragments)
        return (
            '<div class="blog-grid">'
            f'<div class="blog-col">{fragments.image_html}</div>'
            f"{self._text_column(fragments)}"
            "</div>"
        )

    def _render_image_right(self, fragments: _SectionFragments) -> str:
        if not fragments.has_image:
            return self._render_full_width(fragments)
        return (
            '<div class="blog-grid">'
            f"{self._text_column(fragments)}"
            f'<div class="blog-col">{fragments.image_html}</div>'
            "</div>"
        )


def assemble_document(
    content: BlogContent,
    content_images: Sequence[Optional[ImageAsset]] = (),
    header_image: Optional[ImageAsset] = None,
    video_url: str = "",
    active_keywords: str = "",
    config: Optional[RenderConfig] = None,
    clock: Optional[Clock] = None,
) -> str:
    """
    Convenience function to render blog content to HTML.

    Args:
        content: Structured blog content.
        content_images: Images bound to sections by position.
        header_image: Optional hero image.
        video_url: Optional YouTube/Vimeo URL.
        active_keywords: Comma-separated keywords to highlight.
        config: Optional render configuration.
        clock: Optional timestamp source for the video structured data.

    Returns:
        Assembled HTML string.
    """
    assembler = DocumentAssembler(config=config, clock=clock)
    return assembler.assemble(
        content,
        content_images=content_images,
        header_image=header_image,
        video_url=video_url,
        active_keywords=active_keywords,
    )
