"""
Loading of blog content and image files.

This module handles ingestion of:
- Blog content JSON (as returned by the AI collaborator, possibly wrapped
  in a Markdown code fence)
- Image files, encoded as base64 assets for embedding
"""

import base64
import json
import mimetypes
import re
from pathlib import Path
from typing import Union

from .models import BlogContent, ImageAsset


class ContentLoadError(Exception):
    """Raised when blog content or an image cannot be loaded."""
    pass


_OPENING_FENCE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_CLOSING_FENCE = re.compile(r"\s*```$")


def strip_code_fences(text: str) -> str:
    """Remove a Markdown code fence wrapped around a JSON response."""
    if not text:
        return ""
    cleaned = text.strip()
    cleaned = _OPENING_FENCE.sub("", cleaned)
    cleaned = _CLOSING_FENCE.sub("", cleaned)
    return cleaned.strip()


def parse_blog_content_json(text: str) -> BlogContent:
    """
    Parse an AI response into blog content.

    Args:
        text: JSON text, optionally fenced with ```json ... ```.

    Returns:
        BlogContent instance.

    Raises:
        ContentLoadError: If the text is not a JSON object.
    """
    cleaned = strip_code_fences(text)
    if not cleaned:
        raise ContentLoadError("Empty response: no blog content to parse")

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ContentLoadError(f"Invalid blog content JSON: {e}")

    if not isinstance(data, dict):
        raise ContentLoadError(
            f"Blog content must be a JSON object, got {type(data).__name__}"
        )

    return BlogContent.from_dict(data)


def load_blog_content(file_path: Union[str, Path]) -> BlogContent:
    """
    Load blog content from a JSON file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        BlogContent instance.

    Raises:
        ContentLoadError: If the file cannot be read or parsed.
    """
    path = Path(file_path)

    if not path.exists():
        raise ContentLoadError(f"File not found: {file_path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ContentLoadError(f"Failed to read {file_path}: {e}")

    return parse_blog_content_json(text)


def load_image_asset(file_path: Union[str, Path]) -> ImageAsset:
    """
    Load an image file as a base64 asset.

    The MIME type is guessed from the file name; the image data itself is
    not validated.

    Args:
        file_path: Path to the image file.

    Returns:
        ImageAsset instance.

    Raises:
        ContentLoadError: If the file is missing or not an image type.
    """
    path = Path(file_path)

    if not path.exists():
        raise ContentLoadError(f"File not found: {file_path}")

    mime_type, _ = mimetypes.guess_type(path.name)
    if not mime_type or not mime_type.startswith("image/"):
        raise ContentLoadError(
            f"Unsupported image type for {path.name}: {mime_type or 'unknown'}"
        )

    try:
        data = path.read_bytes()
    except OSError as e:
        raise ContentLoadError(f"Failed to read {file_path}: {e}")

    return ImageAsset(
        base64=base64.b64encode(data).decode("ascii"),
        mime_type=mime_type,
    )
