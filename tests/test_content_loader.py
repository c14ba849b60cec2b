"""Tests for content and image loading."""

import json

import pytest

from seo_blog_builder.content_loader import (
    ContentLoadError,
    load_blog_content,
    load_image_asset,
    parse_blog_content_json,
    strip_code_fences,
)


class TestStripCodeFences:
    """Tests for code fence removal."""

    def test_json_fence(self):
        """Test a ```json fence."""
        assert strip_code_fences('```json\n{"title": "x"}\n```') == '{"title": "x"}'

    def test_plain_fence(self):
        """Test a fence without language tag."""
        assert strip_code_fences('```\n{}\n```') == "{}"

    def test_unfenced_text_unchanged(self):
        """Test that bare JSON is left alone."""
        assert strip_code_fences(' {"a": 1} ') == '{"a": 1}'


class TestParseBlogContentJson:
    """Tests for parse_blog_content_json."""

    def test_fenced_response(self, sample_content_dict):
        """Test parsing a fenced model response."""
        text = f"```json\n{json.dumps(sample_content_dict)}\n```"

        content = parse_blog_content_json(text)

        assert content.title == "De houten kaart als cadeau"
        assert len(content.sections) == 4

    def test_invalid_json(self):
        """Test that malformed JSON raises ContentLoadError."""
        with pytest.raises(ContentLoadError, match="Invalid blog content JSON"):
            parse_blog_content_json("{title: x")

    def test_non_object(self):
        """Test that a JSON array is rejected."""
        with pytest.raises(ContentLoadError, match="must be a JSON object"):
            parse_blog_content_json("[1, 2]")

    def test_empty(self):
        """Test that an empty response is rejected."""
        with pytest.raises(ContentLoadError, match="Empty response"):
            parse_blog_content_json("  ")


class TestLoadFiles:
    """Tests for loading from disk."""

    def test_load_blog_content(self, tmp_path, sample_content_dict):
        """Test loading a JSON file."""
        path = tmp_path / "blog.json"
        path.write_text(json.dumps(sample_content_dict), encoding="utf-8")

        content = load_blog_content(path)

        assert content.faq[0].question == "Is een houten kaart duurzaam?"

    def test_missing_content_file(self, tmp_path):
        """Test a missing file."""
        with pytest.raises(ContentLoadError, match="File not found"):
            load_blog_content(tmp_path / "missing.json")

    def test_load_png(self, tmp_path):
        """Test that an image is base64-encoded with its MIME type."""
        path = tmp_path / "kaart.png"
        path.write_bytes(b"\x89PNG\r\n\x1a\n")

        asset = load_image_asset(path)

        assert asset.mime_type == "image/png"
        assert asset.base64 == "iVBORw0KGgo="
        assert asset.data_uri == "data:image/png;base64,iVBORw0KGgo="

    def test_non_image_rejected(self, tmp_path):
        """Test that non-image files are rejected."""
        path = tmp_path / "notes.txt"
        path.write_text("x")

        with pytest.raises(ContentLoadError, match="Unsupported image type"):
            load_image_asset(path)

    def test_missing_image(self, tmp_path):
        """Test a missing image file."""
        with pytest.raises(ContentLoadError, match="File not found"):
            load_image_asset(tmp_path / "missing.jpg")
