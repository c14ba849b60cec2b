"""
SEO Blog Builder

An AI-assisted blog authoring tool that:
- Renders structured, AI-written blog content into styled, self-contained HTML
- Scores HTML documents for on-page SEO with categorized diagnostics
- Exports standalone documents and page-builder import templates
"""

__version__ = "1.0.0"
__author__ = "SEO Blog Builder Team"

from .config import GenerationConfig, RenderConfig

from .models import (
    BlogContent,
    FaqItem,
    ImageAsset,
    Section,
    SectionLayout,
    SemanticEntity,
    SeoAnalysis,
    SeoIssues,
    SiteEntry,
    TocEntry,
    VideoProvider,
    VideoReference,
)

from .video import resolve_video_reference

from .highlighting import (
    highlight_keywords,
    parse_keywords,
    strip_emphasis_markers,
)

from .assembler import DocumentAssembler, assemble_document

from .seo_analyzer import SeoAnalyzer, analyze_seo

from .template_exporter import (
    PageBuilderTemplate,
    TemplateExporter,
    export_page_builder_template,
)

from .export import (
    build_standalone_document,
    prepare_clipboard_html,
    suggest_download_filename,
)

from .content_loader import (
    ContentLoadError,
    load_blog_content,
    load_image_asset,
    parse_blog_content_json,
)

__all__ = [
    # Config
    "GenerationConfig",
    "RenderConfig",
    # Models
    "BlogContent",
    "FaqItem",
    "ImageAsset",
    "Section",
    "SectionLayout",
    "SemanticEntity",
    "SeoAnalysis",
    "SeoIssues",
    "SiteEntry",
    "TocEntry",
    "VideoProvider",
    "VideoReference",
    # Core pipeline
    "resolve_video_reference",
    "highlight_keywords",
    "parse_keywords",
    "strip_emphasis_markers",
    "DocumentAssembler",
    "assemble_document",
    "SeoAnalyzer",
    "analyze_seo",
    "PageBuilderTemplate",
    "TemplateExporter",
    "export_page_builder_template",
    # Export and loading
    "build_standalone_document",
    "prepare_clipboard_html",
    "suggest_download_filename",
    "ContentLoadError",
    "load_blog_content",
    "load_image_asset",
    "parse_blog_content_json",
]
