"""
Structured-data (JSON-LD) payloads embedded in rendered documents.

Each builder returns a plain dict; ``json_ld_script`` serializes it into a
``<script type="application/ld+json">`` tag.
"""

import json
from datetime import datetime, timezone
from typing import Any

from .config import RenderConfig
from .models import BlogContent, FaqItem, VideoReference

SCHEMA_CONTEXT = "https://schema.org"


def format_timestamp(moment: datetime) -> str:
    """Format a moment as a UTC ISO-8601 string with millisecond precision."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


def json_ld_script(payload: dict[str, Any]) -> str:
    """Serialize a payload into a JSON-LD script tag."""
    body = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    # "</" would end the script element early; "<\/" is equivalent JSON
    body = body.replace("</", "<\\/")
    return f'<script type="application/ld+json">{body}</script>'


def raw_json_ld_script(markup: str) -> str:
    """Wrap a pre-serialized JSON-LD string without validating it."""
    return f'<script type="application/ld+json">{markup}</script>'


def video_object_schema(
    content: BlogContent,
    video: VideoReference,
    upload_date: datetime,
    config: RenderConfig,
) -> dict[str, Any]:
    """
    Build the VideoObject description of an embedded video.

    ``uploadDate`` is required by consumers; the render time is used as the
    content-generated date.
    """
    topic = ", ".join(content.keywords_used) or content.title
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "VideoObject",
        "name": f"Video: {content.title}",
        "description": f"Video: {topic}. {content.meta_description}".strip(),
        "thumbnailUrl": video.thumbnail_url or config.video_placeholder_thumbnail,
        "uploadDate": format_timestamp(upload_date),
        "embedUrl": video.embed_url,
        "contentUrl": video.canonical_link,
    }


def faq_page_schema(faq: list[FaqItem]) -> dict[str, Any]:
    """Build the FAQPage description of a question/answer list."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": item.question,
                "acceptedAnswer": {"@type": "Answer", "text": item.answer},
            }
            for item in faq
        ],
    }


def breadcrumb_schema(title: str, config: RenderConfig) -> dict[str, Any]:
    """Build the fixed Home -> Blog -> post breadcrumb trail."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {
                "@type": "ListItem",
                "position": 1,
                "name": config.breadcrumb_home_label,
                "item": config.site_url,
            },
            {
                "@type": "ListItem",
                "position": 2,
                "name": config.breadcrumb_blog_label,
                "item": config.blog_url,
            },
            {
                "@type": "ListItem",
                "position": 3,
                "name": title,
            },
        ],
    }


def blog_posting_schema(
    content: BlogContent,
    published: datetime,
    config: RenderConfig,
) -> dict[str, Any]:
    """Build the BlogPosting description used by page-builder templates."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BlogPosting",
        "headline": content.title,
        "description": content.meta_description,
        "datePublished": format_timestamp(published),
        "author": {"@type": "Organization", "name": config.publisher_name},
    }
