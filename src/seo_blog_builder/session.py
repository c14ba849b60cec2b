"""
Authoring session state.

A BlogSession holds the accepted blog content together with the render-time
inputs (images, video URL, keywords) and the current editor HTML. Calls to
the AI collaborator are serialized so a modification always applies to the
latest accepted content; a failed call leaves the previous state untouched.
"""

import logging
import threading
from datetime import datetime
from typing import Callable, Optional, Sequence

from .assembler import DocumentAssembler
from .config import RenderConfig
from .export import (
    build_standalone_document,
    prepare_clipboard_html,
    suggest_download_filename,
)
from .llm_client import BlogRequest, LLMClient, LLMClientError
from .models import BlogContent, ImageAsset, SeoAnalysis
from .seo_analyzer import analyze_seo
from .template_exporter import PageBuilderTemplate, export_page_builder_template

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Raised when generating or modifying content fails; carries a user-facing message."""
    pass


class BlogSession:
    """
    One author's working state for a blog post.

    Attributes:
        content: Latest accepted BlogContent, None before the first generation.
        editor_html: Current HTML, either freshly assembled or as edited.
        keywords: Comma-separated keywords used for highlighting and scoring.
    """

    def __init__(
        self,
        generator: LLMClient,
        config: Optional[RenderConfig] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.generator = generator
        self.config = config or RenderConfig()
        self.clock = clock
        self.assembler = DocumentAssembler(config=self.config, clock=clock)

        self.content: Optional[BlogContent] = None
        self.content_images: list[Optional[ImageAsset]] = []
        self.header_image: Optional[ImageAsset] = None
        self.video_url = ""
        self.keywords = ""
        self.editor_html = ""

        self._lock = threading.Lock()

    @property
    def active_keywords(self) -> str:
        if self.keywords:
            return self.keywords
        return self.content.keywords_csv if self.content else ""

    def set_media(
        self,
        content_images: Optional[Sequence[Optional[ImageAsset]]] = None,
        header_image: Optional[ImageAsset] = None,
        video_url: Optional[str] = None,
    ) -> None:
        """
        Replace render-time media; takes effect on the next render.

        Arguments left as None keep their current value. Use
        ``remove_header_image`` to drop the header image.
        """
        if content_images is not None:
            self.content_images = list(content_images)
        if header_image is not None:
            self.header_image = header_image
        if video_url is not None:
            self.video_url = video_url

    def remove_header_image(self) -> None:
        self.header_image = None

    def render(self) -> str:
        """Re-assemble the editor HTML from the accepted content."""
        if self.content is None:
            self.editor_html = ""
        else:
            self.editor_html = self.assembler.assemble(
                self.content,
                content_images=self.content_images,
                header_image=self.header_image,
                video_url=self.video_url,
                active_keywords=self.active_keywords,
            )
        return self.editor_html

    def generate(self, request: BlogRequest) -> BlogContent:
        """
        Generate new content and render it.

        Raises:
            GenerationError: If the AI collaborator fails. The previous
                content and editor HTML are kept.
        """
        with self._lock:
            try:
                content = self.generator.generate_blog_content(request)
            except LLMClientError as e:
                logger.error(f"Generation failed: {e}")
                raise GenerationError(f"Something went wrong while generating the blog: {e}") from e

            self.content = content
            self.keywords = request.keywords
            self.render()
            logger.info(f"Accepted generated content '{content.title}'")
            return content

    def modify(self, instruction: str) -> BlogContent:
        """
        Apply a modification instruction to the latest accepted content.

        Raises:
            GenerationError: If there is no content yet or the AI
                collaborator fails. The previous state is kept.
        """
        with self._lock:
            if self.content is None:
                raise GenerationError("There is no blog to modify yet. Generate one first.")

            try:
                content = self.generator.modify_blog_content(self.content, instruction)
            except LLMClientError as e:
                logger.error(f"Modification failed: {e}")
                raise GenerationError(f"Something went wrong while modifying the blog: {e}") from e

            self.content = content
            self.render()
            logger.info(f"Accepted modified content '{content.title}'")
            return content

    def update_editor_html(self, html: str) -> None:
        """Store HTML as re-serialized by the editor after manual edits."""
        self.editor_html = html or ""

    def analyze(self) -> SeoAnalysis:
        return analyze_seo(self.editor_html, self.active_keywords)

    def standalone_document(self) -> str:
        return build_standalone_document(self.editor_html, self.content, self.config)

    def clipboard_html(self) -> str:
        return prepare_clipboard_html(self.editor_html)

    def download_filename(self) -> str:
        return suggest_download_filename(self.active_keywords)

    def page_builder_template(self) -> PageBuilderTemplate:
        """
        Export the accepted content as a page-builder template.

        Raises:
            GenerationError: If there is no content yet.
        """
        if self.content is None:
            raise GenerationError("There is no blog to export yet. Generate one first.")
        return export_page_builder_template(
            self.content,
            content_images=self.content_images or None,
            config=self.config,
            clock=self.clock,
        )
