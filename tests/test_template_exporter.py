"""Tests for page-builder template export."""

import itertools
import json
import re
from datetime import datetime, timezone

import pytest

from seo_blog_builder.config import RenderConfig
from seo_blog_builder.models import BlogContent
from seo_blog_builder.template_exporter import export_page_builder_template


@pytest.fixture
def counter_ids():
    """Sequential node ids."""
    counter = itertools.count(1)
    return lambda: f"n{next(counter)}"


@pytest.fixture
def published_clock():
    return lambda: datetime(2024, 5, 1, tzinfo=timezone.utc)


def widget_types(node: dict) -> list[str]:
    return [child["widgetType"] for child in node["elements"]]


class TestTemplateShape:
    """Tests for the top-level template."""

    def test_envelope(self, sample_content, counter_ids):
        """Test version, title, type and one block per section."""
        data = export_page_builder_template(sample_content, id_factory=counter_ids).to_dict()

        assert data["version"] == "0.4"
        assert data["type"] == "page"
        assert data["title"] == "De houten kaart als cadeau"
        # Header block holds section 0, then one block per remaining section
        assert len(data["content"]) == 4

    def test_ids_from_factory_are_unique(self, sample_content, counter_ids):
        """Test that every node gets an id from the injected factory."""
        data = export_page_builder_template(sample_content, id_factory=counter_ids).to_dict()

        ids = re.findall(r'"id": "(n\d+)"', json.dumps(data))

        assert len(ids) == len(set(ids))
        assert ids

    def test_default_ids_are_short_hex(self, sample_content):
        """Test the default id factory."""
        data = export_page_builder_template(sample_content).to_dict()

        assert re.fullmatch(r"[0-9a-f]{7}", data["content"][0]["id"])

    def test_json_serializable(self, sample_content):
        """Test that the template serializes to JSON."""
        json.dumps(export_page_builder_template(sample_content).to_dict())


class TestHeaderBlock:
    """Tests for the combined header block."""

    def test_widget_order(self, sample_content):
        """Test alert, structured data, title, then section 0."""
        data = export_page_builder_template(sample_content).to_dict()

        column = data["content"][0]["elements"][0]

        assert column["settings"] == {"_column_size": 100}
        assert widget_types(column) == ["alert", "html", "heading", "heading", "text-editor"]

    def test_widget_settings(self, sample_content, published_clock):
        """Test banner, BlogPosting data and headings."""
        config = RenderConfig(publisher_name="Houtwerk BV")
        data = export_page_builder_template(sample_content, config=config, clock=published_clock).to_dict()

        alert, schema, title, heading, text = data["content"][0]["elements"][0]["elements"]

        assert alert["settings"]["alert_title"] == config.import_banner_title
        assert alert["settings"]["alert_type"] == "warning"
        assert title["settings"] == {"title": "De houten kaart als cadeau", "header_size": "h1"}
        assert heading["settings"] == {"title": "Waarom een houten kaart?", "header_size": "h2"}
        assert text["settings"]["editor"] == sample_content.sections[0].content

        markup = schema["settings"]["html"]
        payload = json.loads(markup.removeprefix('<script type="application/ld+json">').removesuffix("</script>"))
        assert payload["@type"] == "BlogPosting"
        assert payload["datePublished"] == "2024-05-01T00:00:00.000Z"
        assert payload["author"] == {"@type": "Organization", "name": "Houtwerk BV"}

    def test_no_sections(self):
        """Test a header block with only banner, data and title."""
        data = export_page_builder_template(BlogContent(title="Leeg")).to_dict()

        assert len(data["content"]) == 1
        assert widget_types(data["content"][0]["elements"][0]) == ["alert", "html", "heading"]


class TestContentBlocks:
    """Tests for sections after the first."""

    def test_section_without_alt_is_single_column(self, sample_content):
        """Test a text-only block."""
        block = export_page_builder_template(sample_content).to_dict()["content"][1]

        assert len(block["elements"]) == 1
        assert block["settings"]["margin"]["top"] == 20
        assert widget_types(block["elements"][0]) == ["heading", "text-editor"]

    def test_section_with_alt_is_two_columns(self, sample_content):
        """Test text plus placeholder image, image first on even index."""
        block = export_page_builder_template(sample_content).to_dict()["content"][2]

        image_column, text_column = block["elements"]
        image = image_column["elements"][0]

        assert block["settings"]["margin"]["top"] == 40
        assert image_column["settings"]["_column_size"] == 50
        assert text_column["settings"]["_column_size"] == 50
        assert image["widgetType"] == "image"
        assert image["settings"]["image"] == {
            "url": "https://placehold.co/800x600/ec7b5d/ffffff.png?text=Afbeelding+3",
            "id": "",
            "alt": "Houten kaart in woonkamer",
        }
        assert widget_types(text_column) == ["heading", "text-editor"]

    def test_odd_index_text_first(self):
        """Test that odd sections put the text column first."""
        content = BlogContent.from_dict({
            "imageAltMap": {"1": "Alt"},
            "sections": [{"content": "intro"}, {"heading": "Kop", "content": "tekst"}],
        })

        block = export_page_builder_template(content).to_dict()["content"][1]

        assert widget_types(block["elements"][0]) == ["heading", "text-editor"]
        assert widget_types(block["elements"][1]) == ["image"]

    def test_image_list_restricts_slots(self, sample_content, sample_image):
        """Test that with an image list, a missing image means no slot."""
        data = export_page_builder_template(sample_content, content_images=[sample_image]).to_dict()

        assert len(data["content"][2]["elements"]) == 1

    def test_image_list_with_asset_keeps_slot(self, sample_content, sample_image):
        """Test that alt text plus asset gives an image slot."""
        data = export_page_builder_template(
            sample_content, content_images=[None, None, sample_image]
        ).to_dict()

        assert len(data["content"][2]["elements"]) == 2

    def test_placeholder_pattern_from_config(self, sample_content):
        """Test a custom placeholder URL pattern."""
        config = RenderConfig(placeholder_image_url="https://cdn.example.com/slot-{number}.png")
        data = export_page_builder_template(sample_content, config=config).to_dict()

        image_column = data["content"][2]["elements"][0]

        assert image_column["elements"][0]["settings"]["image"]["url"] == "https://cdn.example.com/slot-3.png"

    def test_heading_omitted_when_empty(self):
        """Test that sections without heading get only a text widget."""
        content = BlogContent.from_dict({"sections": [{"content": "intro"}, {"content": "tekst"}]})

        data = export_page_builder_template(content).to_dict()

        assert widget_types(data["content"][1]["elements"][0]) == ["text-editor"]
