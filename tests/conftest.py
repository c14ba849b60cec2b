"""
Pytest fixtures and configuration for SEO Blog Builder tests.
"""

from datetime import datetime, timezone

import pytest

from seo_blog_builder.models import BlogContent, ImageAsset


# Ten words, no keyword
FILLER_SENTENCE = "Wij maken elk ontwerp met zorg en aandacht voor detail."


def keyword_paragraph() -> str:
    """A 77-word paragraph mentioning "houten kaart" once."""
    return "<p>Een houten kaart is een mooi cadeau. " + " ".join([FILLER_SENTENCE] * 7) + "</p>"


@pytest.fixture
def fixed_clock():
    """Clock returning a fixed moment."""
    moment = datetime(2024, 5, 1, 12, 30, 0, 123000, tzinfo=timezone.utc)
    return lambda: moment


@pytest.fixture
def sample_image() -> ImageAsset:
    """A tiny image asset."""
    return ImageAsset(base64="iVBORw0KGgo=", mime_type="image/png")


@pytest.fixture
def sample_content_dict() -> dict:
    """Blog content in the camelCase wire shape."""
    return {
        "title": "De houten kaart als cadeau",
        "metaDescription": "Alles wat je wilt weten over een houten kaart.",
        "canonicalUrl": "https://www.example.com/blog/houten-kaart/",
        "headerImageAlt": "Houten wereldkaart aan de muur",
        "keywordsUsed": ["houten kaart", "wereldkaart"],
        "internalLinksUsed": ["https://www.example.com/product/houten-kaart/"],
        "geoStrategy": "Direct antwoord bovenaan, daarna verdieping.",
        "semanticEntities": [
            {"concept": "Lasergravure", "definition": "Graveren met een laserstraal."},
        ],
        "faq": [
            {"question": "Is een houten kaart duurzaam?", "answer": "Ja, de houten kaart is van FSC-hout."},
            {"question": "Hoe hang ik hem op?", "answer": "Met de meegeleverde ophangset."},
        ],
        "imageAltMap": {"0": "Houten kaart close-up", "2": "Houten kaart in woonkamer"},
        "schemaMarkup": '{"@context":"https://schema.org","@type":"Article","headline":"De houten kaart"}',
        "sections": [
            {
                "layout": "hero",
                "heading": "Waarom een houten kaart?",
                "content": "<p>Een **houten kaart** geeft karakter aan je interieur.</p>",
                "snippet": "Een houten kaart is een duurzaam en persoonlijk cadeau.",
            },
            {
                "layout": "full_width",
                "heading": "Materialen",
                "content": "<p>We gebruiken berken multiplex.</p>",
            },
            {
                "layout": "two_column_image_left",
                "heading": "In je woonkamer",
                "content": "<p>Een houten kaart past in elk interieur.</p>",
            },
            {
                "layout": "cta_block",
                "heading": "Bestel nu",
                "content": "<p>Stel je eigen kaart samen.</p>",
                "ctaText": "Bekijk wereldkaarten",
                "ctaUrl": "https://www.example.com/shop/?cat=kaart&sort=new",
            },
        ],
    }


@pytest.fixture
def sample_content(sample_content_dict) -> BlogContent:
    """Parsed sample blog content."""
    return BlogContent.from_dict(sample_content_dict)


@pytest.fixture
def long_content() -> BlogContent:
    """
    Content that renders to a clean document for "houten kaart".

    Three headed sections of three 77-word paragraphs each, the keyword in
    the first heading and in every paragraph.
    """
    body = "".join(keyword_paragraph() for _ in range(3))
    return BlogContent.from_dict({
        "title": "Houten kaart gids",
        "metaDescription": "Een gids over de houten kaart.",
        "keywordsUsed": ["houten kaart"],
        "sections": [
            {"layout": "hero", "heading": "Alles over de houten kaart", "content": body},
            {"layout": "full_width", "heading": "Materialen en afwerking", "content": body},
            {"layout": "full_width", "heading": "Onderhoud en plaatsing", "content": body},
        ],
    })
