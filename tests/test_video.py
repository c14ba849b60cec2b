"""Tests for video reference resolution."""

import pytest

from seo_blog_builder.models import VideoProvider
from seo_blog_builder.video import resolve_video_reference


class TestYouTube:
    """Tests for YouTube URL forms."""

    @pytest.mark.parametrize("url", [
        "https://youtu.be/abc123",
        "https://www.youtube.com/embed/abc123",
        "https://www.youtube.com/v/abc123",
        "https://www.youtube.com/watch?v=abc123",
        "https://www.youtube.com/watch?feature=share&v=abc123",
        "https://www.youtube.com/watch?v=abc123&t=42",
        "https://youtu.be/abc123?si=tracking",
    ])
    def test_extracts_id(self, url):
        """Test that every supported URL form yields the same id."""
        video = resolve_video_reference(url)

        assert video is not None
        assert video.provider == VideoProvider.YOUTUBE
        assert video.id == "abc123"

    def test_derived_links(self):
        """Test thumbnail, canonical and embed links."""
        video = resolve_video_reference("https://youtu.be/abc123")

        assert video.thumbnail_url == "https://img.youtube.com/vi/abc123/maxresdefault.jpg"
        assert video.canonical_link == "https://www.youtube.com/watch?v=abc123"
        assert video.embed_url == "https://www.youtube.com/embed/abc123"


class TestVimeo:
    """Tests for Vimeo URLs."""

    def test_extracts_numeric_id(self):
        """Test that a vimeo.com URL resolves."""
        video = resolve_video_reference("https://vimeo.com/555")

        assert video.provider == VideoProvider.VIMEO
        assert video.id == "555"
        assert video.canonical_link == "https://vimeo.com/555"
        assert video.embed_url == "https://player.vimeo.com/video/555"

    def test_has_no_thumbnail(self):
        """Test that no Vimeo thumbnail is derived."""
        assert resolve_video_reference("https://vimeo.com/555").thumbnail_url is None


class TestNoMatch:
    """Tests for URLs that resolve to no video."""

    @pytest.mark.parametrize("url", [None, "", "not a url", "https://example.com/video", "https://vimeo.com/channel"])
    def test_returns_none(self, url):
        """Test that unmatched input yields None rather than an error."""
        assert resolve_video_reference(url) is None
