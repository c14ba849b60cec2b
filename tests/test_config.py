"""Tests for configuration dataclasses."""

import pytest

from seo_blog_builder.config import GenerationConfig, RenderConfig


class TestRenderConfig:
    """Tests for RenderConfig."""

    def test_defaults(self):
        """Test default URLs and labels."""
        config = RenderConfig()

        assert config.blog_url == "https://www.example.com/blog/"
        assert config.toc_title == "Inhoudsopgave"
        assert config.language == "nl"

    def test_placeholder_is_one_based(self):
        """Test the placeholder numbering."""
        assert RenderConfig().placeholder_image_for(0).endswith("text=Afbeelding+1")

    def test_for_site_adds_trailing_slash(self):
        """Test the site preset."""
        config = RenderConfig.for_site("https://shop.example.nl", toc_title="Contents")

        assert config.site_url == "https://shop.example.nl/"
        assert config.toc_title == "Contents"

    @pytest.mark.parametrize("kwargs,message", [
        ({"site_url": "shop.example.nl/"}, "must start with http"),
        ({"site_url": "https://shop.example.nl"}, "must end with '/'"),
        ({"blog_path": "/blog/"}, "relative to site_url"),
        ({"placeholder_image_url": "https://placehold.co/800x600"}, "placeholder"),
        ({"language": " "}, "language"),
    ])
    def test_validation(self, kwargs, message):
        """Test that invalid values raise ValueError."""
        with pytest.raises(ValueError, match=message):
            RenderConfig(**kwargs)


class TestGenerationConfig:
    """Tests for GenerationConfig."""

    def test_presets(self):
        """Test precise and creative temperatures."""
        assert GenerationConfig.precise().temperature == 0.2
        assert GenerationConfig.creative().temperature == 0.7
        assert GenerationConfig.creative(max_tokens=4096).max_tokens == 4096

    @pytest.mark.parametrize("kwargs", [
        {"model": ""},
        {"max_tokens": 100},
        {"temperature": 1.5},
        {"timeout_seconds": 0},
    ])
    def test_validation(self, kwargs):
        """Test that invalid values raise ValueError."""
        with pytest.raises(ValueError):
            GenerationConfig(**kwargs)
