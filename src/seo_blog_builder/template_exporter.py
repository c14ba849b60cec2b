"""
Page-builder template export.

Restructures blog content into the nested section -> column -> widget tree
a visual page builder imports. Images are not embedded: each image slot
gets a numbered placeholder that the editor replaces after uploading the
real files by hand.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Optional, Sequence

from .config import RenderConfig
from .models import BlogContent, ImageAsset, Section
from .structured_data import blog_posting_schema, json_ld_script

TEMPLATE_VERSION = "0.4"
TEMPLATE_TYPE = "page"

IdFactory = Callable[[], str]


def _short_id() -> str:
    return uuid.uuid4().hex[:7]


@dataclass
class TemplateNode:
    """A section, column or widget in the template tree."""
    id: str
    el_type: str
    settings: dict[str, Any] = field(default_factory=dict)
    elements: list["TemplateNode"] = field(default_factory=list)
    widget_type: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "elType": self.el_type,
            "settings": self.settings,
            "elements": [element.to_dict() for element in self.elements],
        }
        if self.widget_type:
            data["widgetType"] = self.widget_type
        return data


@dataclass
class PageBuilderTemplate:
    """Importable page template."""
    title: str
    content: list[TemplateNode] = field(default_factory=list)
    version: str = TEMPLATE_VERSION
    type: str = TEMPLATE_TYPE

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "title": self.title,
            "type": self.type,
            "content": [section.to_dict() for section in self.content],
        }


class TemplateExporter:
    """Builds page-builder templates from blog content."""

    def __init__(
        self,
        config: Optional[RenderConfig] = None,
        id_factory: Optional[IdFactory] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.config = config or RenderConfig()
        self.id_factory = id_factory or _short_id
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def export(
        self,
        content: BlogContent,
        content_images: Optional[Sequence[Optional[ImageAsset]]] = None,
    ) -> PageBuilderTemplate:
        """
        Convert blog content into a template tree.

        Args:
            content: Structured blog content.
            content_images: Optional section images. When given, a section
                shows an image slot only if it has both an alt text and an
                image, as in the rendered document. When omitted, the alt
                map alone decides.

        Returns:
            PageBuilderTemplate.
        """
        header_widgets = [
            self._alert_widget(),
            self._html_widget(json_ld_script(
                blog_posting_schema(content, self.clock(), self.config)
            )),
            self._heading_widget(content.title, "h1"),
        ]
        if content.sections:
            header_widgets.extend(self._text_widgets(content.sections[0]))

        sections = [self._single_column_section(header_widgets)]

        for index in range(1, len(content.sections)):
            section = content.sections[index]
            alt = content.image_alt_for(index)
            if self._has_image(alt, index, content_images):
                image_widget = self._image_widget(alt, self.config.placeholder_image_for(index))
                sections.append(self._two_column_section(
                    self._text_widgets(section),
                    [image_widget],
                    image_first=index % 2 == 0,
                ))
            else:
                sections.append(self._single_column_section(self._text_widgets(section)))

        return PageBuilderTemplate(title=content.title, content=sections)

    @staticmethod
    def _has_image(
        alt: str,
        index: int,
        content_images: Optional[Sequence[Optional[ImageAsset]]],
    ) -> bool:
        if not alt:
            return False
        if content_images is None:
            return True
        return index < len(content_images) and content_images[index] is not None

    # ------------------------------------------------------------------
    # Layout nodes
    # ------------------------------------------------------------------

    def _single_column_section(self, widgets: list[TemplateNode]) -> TemplateNode:
        column = TemplateNode(
            id=self.id_factory(),
            el_type="column",
            settings={"_column_size": 100},
            elements=widgets,
        )
        return TemplateNode(
            id=self.id_factory(),
            el_type="section",
            settings={"margin": {"unit": "px", "top": 20, "bottom": 20, "left": 0, "right": 0}},
            elements=[column],
        )

    def _two_column_section(
        self,
        text_widgets: list[TemplateNode],
        image_widgets: list[TemplateNode],
        image_first: bool,
    ) -> TemplateNode:
        text_column = TemplateNode(
            id=self.id_factory(),
            el_type="column",
            settings={"_column_size": 50, "widget_space": {"unit": "px", "size": 20}},
            elements=text_widgets,
        )
        image_column = TemplateNode(
            id=self.id_factory(),
            el_type="column",
            settings={"_column_size": 50},
            elements=image_widgets,
        )
        columns = [image_column, text_column] if image_first else [text_column, image_column]
        return TemplateNode(
            id=self.id_factory(),
            el_type="section",
            settings={"margin": {"unit": "px", "top": 40, "bottom": 40, "left": 0, "right": 0}},
            elements=columns,
        )

    # ------------------------------------------------------------------
    # Widgets
    # ------------------------------------------------------------------

    def _widget(self, widget_type: str, settings: dict[str, Any]) -> TemplateNode:
        return TemplateNode(
            id=self.id_factory(),
            el_type="widget",
            widget_type=widget_type,
            settings=settings,
        )

    def _text_widgets(self, section: Section) -> list[TemplateNode]:
        widgets = []
        if section.has_heading:
            widgets.append(self._heading_widget(section.heading, "h2"))
        widgets.append(self._widget("text-editor", {"editor": section.content}))
        return widgets

    def _alert_widget(self) -> TemplateNode:
        return self._widget("alert", {
            "alert_title": self.config.import_banner_title,
            "alert_description": self.config.import_banner_description,
            "alert_type": "warning",
        })

    def _html_widget(self, markup: str) -> TemplateNode:
        return self._widget("html", {"html": markup})

    def _heading_widget(self, text: str, tag: str) -> TemplateNode:
        return self._widget("heading", {"title": text, "header_size": tag})

    def _image_widget(self, alt: str, url: str) -> TemplateNode:
        return self._widget("image", {"image": {"url": url, "id": "", "alt": alt}})


def export_page_builder_template(
    content: BlogContent,
    content_images: Optional[Sequence[Optional[ImageAsset]]] = None,
    config: Optional[RenderConfig] = None,
    id_factory: Optional[IdFactory] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> PageBuilderTemplate:
    """
    Convenience function to export blog content as a page-builder template.

    Args:
        content: Structured blog content.
        content_images: Optional section images (see TemplateExporter.export).
        config: Optional render configuration.
        id_factory: Optional node id generator.
        clock: Optional source of the BlogPosting publish date.

    Returns:
        PageBuilderTemplate; call ``to_dict()`` for the JSON shape.
    """
    exporter = TemplateExporter(config=config, id_factory=id_factory, clock=clock)
    return exporter.export(content, content_images)
