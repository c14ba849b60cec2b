"""
FastAPI wrapper for SEO Blog Builder - Vercel Serverless Function.

This module exposes document assembly, SEO scoring and the export formats
as a REST API for deployment on Vercel.
"""

from enum import Enum
from typing import Any, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from seo_blog_builder import __version__
from seo_blog_builder.assembler import assemble_document
from seo_blog_builder.config import RenderConfig
from seo_blog_builder.export import (
    build_standalone_document,
    prepare_clipboard_html,
    suggest_download_filename,
)
from seo_blog_builder.models import BlogContent, ImageAsset
from seo_blog_builder.seo_analyzer import analyze_seo
from seo_blog_builder.template_exporter import export_page_builder_template

app = FastAPI(
    title="SEO Blog Builder API",
    description="Render AI-written blog content into styled HTML, score it for SEO and export it",
    version=__version__,
)

# Enable CORS for all origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ImageInput(BaseModel):
    """Base64-encoded image, already resized by the client."""
    base64: str
    mime_type: str = Field("image/jpeg", description="MIME type, e.g. image/png")

    def to_asset(self) -> ImageAsset:
        return ImageAsset(base64=self.base64, mime_type=self.mime_type)


class RenderRequest(BaseModel):
    """Request model for rendering blog content to HTML."""
    content: dict[str, Any] = Field(..., description="Blog content in the camelCase JSON shape")
    images: list[Optional[ImageInput]] = Field(
        default_factory=list,
        description="Section images by position; null leaves a section without image",
    )
    header_image: Optional[ImageInput] = None
    video_url: str = ""
    keywords: Optional[str] = Field(
        None, description="Comma-separated keywords to highlight. Defaults to the content's keywordsUsed."
    )
    site_url: Optional[str] = None


class RenderResponse(BaseModel):
    """Rendered HTML with its SEO analysis."""
    html: str
    analysis: dict[str, Any]


class AnalyzeRequest(BaseModel):
    """Request model for SEO scoring."""
    html: str
    keywords: str = ""


class TemplateRequest(BaseModel):
    """Request model for page-builder template export."""
    content: dict[str, Any]
    images: Optional[list[Optional[ImageInput]]] = Field(
        None, description="When given, only sections with an image get an image slot"
    )
    site_url: Optional[str] = None


class ExportFormat(str, Enum):
    """Export format selection."""
    standalone = "standalone"  # Complete HTML document for download
    clipboard = "clipboard"  # Body fragment with stylesheet for a CMS


class ExportRequest(BaseModel):
    """Request model for exporting (possibly edited) HTML."""
    html: str
    content: dict[str, Any] = Field(default_factory=dict)
    format: ExportFormat = ExportFormat.standalone
    keywords: str = ""
    site_url: Optional[str] = None


class ExportResponse(BaseModel):
    """Exported HTML and a suggested filename."""
    html: str
    suggested_filename: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


def _render_config(site_url: Optional[str]) -> RenderConfig:
    try:
        return RenderConfig.for_site(site_url) if site_url else RenderConfig()
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.get("/api/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=__version__,
    )


@app.post("/api/render", response_model=RenderResponse)
async def render(request: RenderRequest):
    """
    Render blog content to HTML.

    Returns the assembled fragment (stylesheet included) and its SEO score.
    """
    config = _render_config(request.site_url)
    content = BlogContent.from_dict(request.content)
    keywords = request.keywords if request.keywords is not None else content.keywords_csv

    html = assemble_document(
        content,
        content_images=[image.to_asset() if image else None for image in request.images],
        header_image=request.header_image.to_asset() if request.header_image else None,
        video_url=request.video_url,
        active_keywords=keywords,
        config=config,
    )
    return RenderResponse(html=html, analysis=analyze_seo(html, keywords).to_dict())


@app.post("/api/analyze")
async def analyze(request: AnalyzeRequest):
    """Score HTML for on-page SEO."""
    return analyze_seo(request.html, request.keywords).to_dict()


@app.post("/api/template")
async def template(request: TemplateRequest):
    """Export blog content as a page-builder template."""
    config = _render_config(request.site_url)
    content = BlogContent.from_dict(request.content)
    images = None
    if request.images is not None:
        images = [image.to_asset() if image else None for image in request.images]
    return export_page_builder_template(content, content_images=images, config=config).to_dict()


@app.post("/api/export", response_model=ExportResponse)
async def export(request: ExportRequest):
    """
    Export rendered or editor-modified HTML.

    ``standalone`` wraps the HTML in a complete document; ``clipboard``
    returns the fragment with the stylesheet restored.
    """
    if not request.html.strip():
        raise HTTPException(status_code=400, detail="No HTML to export")

    config = _render_config(request.site_url)
    content = BlogContent.from_dict(request.content)
    keywords = request.keywords or content.keywords_csv

    if request.format == ExportFormat.clipboard:
        html = prepare_clipboard_html(request.html)
    else:
        html = build_standalone_document(request.html, content, config)

    return ExportResponse(html=html, suggested_filename=suggest_download_filename(keywords))


@app.get("/api/info")
async def api_info():
    """Get API information and usage instructions."""
    return {
        "name": "SEO Blog Builder API",
        "version": __version__,
        "description": "Render, score and export AI-written blog posts",
        "endpoints": {
            "GET /api/health": "Health check",
            "POST /api/render": "Render blog content JSON to HTML with SEO score",
            "POST /api/analyze": "Score HTML for on-page SEO",
            "POST /api/template": "Export blog content as a page-builder template",
            "POST /api/export": "Export HTML as standalone document or clipboard fragment",
            "GET /api/info": "This endpoint",
        },
        "documentation": "/docs",
        "openapi": "/openapi.json",
    }
