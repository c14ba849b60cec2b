"""
Export helpers for assembled blog HTML.

- Standalone document: the assembled body wrapped in a complete HTML page
  with title, meta tags, canonical link and the stylesheet in the head
- Clipboard copy: the body fragment, with the stylesheet re-prepended when
  an editor round-trip dropped it
- Download filename suggestion
"""

import html
import re
from typing import Optional

from .config import RenderConfig
from .models import BlogContent
from .styles import BLOG_CSS

DEFAULT_DOCUMENT_TITLE = "Blog Post"
ROBOTS_DIRECTIVE = "index, follow, max-image-preview:large, max-snippet:-1, max-video-preview:-1"

MAX_SLUG_LENGTH = 100


def build_standalone_document(
    body_html: str,
    content: Optional[BlogContent] = None,
    config: Optional[RenderConfig] = None,
) -> str:
    """
    Wrap assembled (or editor-modified) HTML in a complete document.

    The head layout is fixed: charset, viewport, title, description,
    keywords, canonical link, robots directive, then the stylesheet. The
    stylesheet is moved out of the body so it appears once.

    Args:
        body_html: Assembled HTML fragment.
        content: Blog content providing title and meta values.
        config: Render configuration (language, canonical fallback).

    Returns:
        Standalone HTML document, or "" when there is no body.
    """
    if not body_html:
        return ""

    config = config or RenderConfig()
    content = content or BlogContent()

    title = html.escape(content.title or DEFAULT_DOCUMENT_TITLE, quote=False)
    description = html.escape(content.meta_description, quote=True)
    keywords = html.escape(content.keywords_csv, quote=True)
    canonical = html.escape(content.canonical_url or config.blog_url, quote=True)
    body_content = body_html.replace(BLOG_CSS, "")

    return f"""<!DOCTYPE html>
<html lang="{config.language}">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <meta name="description" content="{description}">
    <meta name="keywords" content="{keywords}">
    <link rel="canonical" href="{canonical}" />
    <meta name="robots" content="{ROBOTS_DIRECTIVE}">
    {BLOG_CSS}
</head>
<body>
    {body_content}
</body>
</html>"""


def prepare_clipboard_html(body_html: Optional[str]) -> str:
    """
    Get the HTML to copy into a CMS body field.

    Editors may re-serialize the document and drop the style block; it is
    re-prepended in that case.
    """
    if not body_html:
        return ""
    if "<style>" not in body_html:
        return f"{BLOG_CSS}{body_html}"
    return body_html


def _slugify(text: str) -> str:
    """
    Convert text to a filename-safe slug.

    Args:
        text: Text to convert.

    Returns:
        Slugified text, "post" when nothing usable remains.
    """
    text = text.lower()
    text = re.sub(r"[\s_,]+", "-", text)
    text = re.sub(r"[^a-z0-9-]", "", text)
    text = re.sub(r"-+", "-", text)
    text = text.strip("-")
    return text[:MAX_SLUG_LENGTH].rstrip("-") or "post"


def suggest_download_filename(keywords: Optional[str]) -> str:
    """
    Suggest a filename for the downloaded standalone document.

    Examples:
        >>> suggest_download_filename("Houten Kaart")
        'blog-houten-kaart.html'
    """
    return f"blog-{_slugify(keywords or '')}.html"
