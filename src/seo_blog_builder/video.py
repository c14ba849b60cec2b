"""
Video reference resolution.

Turns a free-form YouTube or Vimeo URL into a typed, embeddable reference.
No network calls are made; a URL that matches neither provider resolves
to None and the caller simply omits the embed.
"""

import re
from typing import Optional

from .models import VideoProvider, VideoReference


# youtu.be/<id>, youtube.com/embed/<id>, /v/<id>, watch?v=<id>, watch?...&v=<id>
_YOUTUBE_PATTERN = re.compile(
    r"(?:youtu\.be/|youtube\.com/(?:embed/|v/|watch\?v=|watch\?.+&v=))([^&?]+)"
)
_VIMEO_PATTERN = re.compile(r"vimeo\.com/(\d+)")


def resolve_video_reference(url: Optional[str]) -> Optional[VideoReference]:
    """
    Resolve a video URL into an embeddable reference.

    Args:
        url: Any user-supplied URL (may be empty).

    Returns:
        VideoReference for YouTube or Vimeo URLs, None otherwise.

    Examples:
        >>> resolve_video_reference("https://youtu.be/abc123").id
        'abc123'
        >>> resolve_video_reference("not a url") is None
        True
    """
    if not url:
        return None

    youtube_match = _YOUTUBE_PATTERN.search(url)
    if youtube_match and youtube_match.group(1):
        video_id = youtube_match.group(1)
        return VideoReference(
            provider=VideoProvider.YOUTUBE,
            id=video_id,
            canonical_link=f"https://www.youtube.com/watch?v={video_id}",
            thumbnail_url=f"https://img.youtube.com/vi/{video_id}/maxresdefault.jpg",
        )

    vimeo_match = _VIMEO_PATTERN.search(url)
    if vimeo_match:
        video_id = vimeo_match.group(1)
        # Vimeo thumbnails need an API call, so none is derived here
        return VideoReference(
            provider=VideoProvider.VIMEO,
            id=video_id,
            canonical_link=f"https://vimeo.com/{video_id}",
        )

    return None
