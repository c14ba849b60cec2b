"""
Command-line interface for SEO Blog Builder.

Provides commands to render blog content JSON into HTML, score HTML for
on-page SEO, export page-builder templates, generate content with the AI
collaborator and list linkable pages from a sitemap.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .assembler import assemble_document
from .config import GenerationConfig, RenderConfig
from .content_loader import ContentLoadError, load_blog_content, load_image_asset
from .export import build_standalone_document, suggest_download_filename
from .llm_client import BlogRequest, LLMClient, LLMClientError
from .models import SeoAnalysis, SiteEntry
from .seo_analyzer import analyze_seo
from .sitemap import SitemapError, fetch_page_summary, fetch_site_entries, format_url_to_name
from .template_exporter import export_page_builder_template

console = Console()


def _render_config(site_url: Optional[str]) -> RenderConfig:
    if site_url:
        return RenderConfig.for_site(site_url)
    return RenderConfig()


def _fail(label: str, error: Exception) -> None:
    console.print(f"[red]{label}:[/red] {error}")
    sys.exit(1)


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging.",
)
def main(verbose: bool) -> None:
    """
    SEO Blog Builder - Render, score and export AI-written blog posts.

    Examples:

        seo-blog render blog.json -o blog.html --image hero.jpg

        seo-blog analyze blog.html --keywords "houten kaart"
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("content_json", type=click.Path(exists=True, path_type=Path))
@click.option("--output", "-o", type=click.Path(path_type=Path), help="Output HTML path.")
@click.option(
    "--image",
    "images",
    multiple=True,
    type=click.Path(exists=True, path_type=Path),
    help="Section image, bound to sections in the given order. Repeatable.",
)
@click.option("--header-image", type=click.Path(exists=True, path_type=Path), help="Header image.")
@click.option("--video-url", default="", help="YouTube or Vimeo URL to embed.")
@click.option("--keywords", "-k", default=None, help="Comma-separated keywords to highlight.")
@click.option("--site-url", default=None, help="Site root URL for breadcrumbs and canonical fallback.")
@click.option(
    "--standalone/--fragment",
    default=True,
    help="Write a complete HTML document (default) or only the body fragment.",
)
def render(
    content_json: Path,
    output: Optional[Path],
    images: tuple[Path, ...],
    header_image: Optional[Path],
    video_url: str,
    keywords: Optional[str],
    site_url: Optional[str],
    standalone: bool,
) -> None:
    """Render blog content JSON into styled HTML."""
    try:
        config = _render_config(site_url)
        content = load_blog_content(content_json)
        content_images = [load_image_asset(path) for path in images]
        header = load_image_asset(header_image) if header_image else None
    except (ContentLoadError, ValueError) as e:
        _fail("Content loading error", e)

    active_keywords = keywords if keywords is not None else content.keywords_csv
    body = assemble_document(
        content,
        content_images=content_images,
        header_image=header,
        video_url=video_url,
        active_keywords=active_keywords,
        config=config,
    )
    html = build_standalone_document(body, content, config) if standalone else body

    output = output or Path(suggest_download_filename(active_keywords))
    output.write_text(html, encoding="utf-8")

    analysis = analyze_seo(body, active_keywords)
    console.print(
        f"[bold green]Success![/bold green] Wrote {output} "
        f"({len(content.sections)} sections, SEO score {analysis.score})"
    )


@main.command()
@click.argument("html_file", type=click.Path(exists=True, path_type=Path))
@click.option("--keywords", "-k", required=True, help="Comma-separated keywords; the first is scored.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the result as JSON.")
def analyze(html_file: Path, keywords: str, as_json: bool) -> None:
    """Score an HTML file for on-page SEO."""
    html = html_file.read_text(encoding="utf-8", errors="replace")
    analysis = analyze_seo(html, keywords)

    if as_json:
        click.echo(json.dumps(analysis.to_dict(), indent=2, ensure_ascii=False))
        return

    _display_analysis(analysis)


def _display_analysis(analysis: SeoAnalysis) -> None:
    """Display the scorecard."""
    color = "green" if analysis.score >= 80 else "yellow" if analysis.score >= 50 else "red"
    console.print(Panel.fit(
        f"[bold {color}]SEO score: {analysis.score}/100[/bold {color}]\n"
        f"Words: {analysis.word_count}  "
        f"Reading time: {analysis.reading_time_minutes} min  "
        f"Keyword: {analysis.keyword_count}x ({analysis.keyword_density_percent:g}%)",
        border_style=color,
    ))

    table = Table(title="Diagnostics", show_header=True)
    table.add_column("Severity", style="cyan")
    table.add_column("Message")

    for message in analysis.issues.critical:
        table.add_row("[red]critical[/red]", message)
    for message in analysis.issues.warning:
        table.add_row("[yellow]warning[/yellow]", message)
    for message in analysis.issues.good:
        table.add_row("[green]good[/green]", message)

    console.print(table)


@main.command()
@click.argument("content_json", type=click.Path(exists=True, path_type=Path))
@click.option("--output", "-o", type=click.Path(path_type=Path), required=True, help="Output JSON path.")
@click.option(
    "--image",
    "images",
    multiple=True,
    type=click.Path(exists=True, path_type=Path),
    help="Section image; when given, only sections with an image get an image slot.",
)
@click.option("--site-url", default=None, help="Site root URL.")
def template(content_json: Path, output: Path, images: tuple[Path, ...], site_url: Optional[str]) -> None:
    """Export blog content JSON as a page-builder template."""
    try:
        config = _render_config(site_url)
        content = load_blog_content(content_json)
        content_images = [load_image_asset(path) for path in images] or None
    except (ContentLoadError, ValueError) as e:
        _fail("Content loading error", e)

    page_template = export_page_builder_template(content, content_images=content_images, config=config)
    output.write_text(
        json.dumps(page_template.to_dict(), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    console.print(
        f"[bold green]Success![/bold green] Wrote template with "
        f"{len(page_template.content)} sections to {output}"
    )


@main.command()
@click.option("--keywords", "-k", required=True, help="Comma-separated keywords.")
@click.option("--intent", default="", help="What the post should achieve.")
@click.option("--link", "links", multiple=True, help="Page URL to link to and learn from. Repeatable.")
@click.option(
    "--image",
    "images",
    multiple=True,
    type=click.Path(exists=True, path_type=Path),
    help="Section image, described for the AI and embedded in the HTML. Repeatable.",
)
@click.option("--header-image", type=click.Path(exists=True, path_type=Path), help="Header image.")
@click.option("--video-url", default="", help="YouTube or Vimeo URL to embed.")
@click.option("--instructions", default="", help="Extra instructions for the AI.")
@click.option("--output", "-o", type=click.Path(path_type=Path), required=True, help="Output content JSON path.")
@click.option("--html", "html_output", type=click.Path(path_type=Path), help="Also write the standalone HTML here.")
@click.option("--site-url", default=None, help="Site root URL.")
@click.option("--creative", is_flag=True, default=False, help="Use a higher sampling temperature.")
@click.option(
    "--api-key",
    type=str,
    envvar="ANTHROPIC_API_KEY",
    help="Anthropic API key. Can also be set via ANTHROPIC_API_KEY env var.",
)
def generate(
    keywords: str,
    intent: str,
    links: tuple[str, ...],
    images: tuple[Path, ...],
    header_image: Optional[Path],
    video_url: str,
    instructions: str,
    output: Path,
    html_output: Optional[Path],
    site_url: Optional[str],
    creative: bool,
    api_key: Optional[str],
) -> None:
    """Generate blog content with the AI collaborator."""
    try:
        config = _render_config(site_url)
        content_images = [load_image_asset(path) for path in images]
        header = load_image_asset(header_image) if header_image else None
    except (ContentLoadError, ValueError) as e:
        _fail("Content loading error", e)

    try:
        generation_config = GenerationConfig.creative() if creative else GenerationConfig.precise()
        client = LLMClient(api_key=api_key, config=generation_config)

        with console.status("[bold green]Reading linked pages..."):
            site_entries = [
                SiteEntry(name=format_url_to_name(url), url=url, category="Page")
                for url in links
            ]
            summaries = [fetch_page_summary(url) for url in links]

        with console.status("[bold green]Describing images..."):
            image_contexts = [client.describe_image(image) for image in content_images]
            header_context = client.describe_image(header) if header else ""

        request = BlogRequest(
            keywords=keywords,
            intent=intent,
            site_entries=site_entries,
            page_summaries=summaries,
            image_contexts=image_contexts,
            header_image_context=header_context,
            extra_instructions=instructions,
        )
        with console.status("[bold green]Writing blog..."):
            content = client.generate_blog_content(request)
    except LLMClientError as e:
        _fail("LLM error", e)

    output.write_text(json.dumps(content.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
    console.print(f"[bold green]Success![/bold green] Content saved to: {output}")

    if html_output:
        body = assemble_document(
            content,
            content_images=content_images,
            header_image=header,
            video_url=video_url,
            active_keywords=keywords,
            config=config,
        )
        html_output.write_text(build_standalone_document(body, content, config), encoding="utf-8")
        console.print(f"HTML saved to: {html_output}")


@main.command()
@click.argument("sitemap_url")
@click.option("--category", default=None, help="Only show entries of this category (e.g. Product).")
def sitemap(sitemap_url: str, category: Optional[str]) -> None:
    """List linkable pages from a sitemap index."""
    try:
        with console.status("[bold green]Reading sitemap..."):
            entries = fetch_site_entries(sitemap_url)
    except SitemapError as e:
        _fail("Sitemap error", e)

    if category:
        entries = [entry for entry in entries if entry.category.lower() == category.lower()]

    table = Table(title=f"Linkable pages ({len(entries)})", show_header=True)
    table.add_column("Category", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("URL")
    for entry in entries:
        table.add_row(entry.category, entry.name, entry.url)
    console.print(table)


def run_cli() -> None:
    """Entry point for the CLI."""
    main()


if __name__ == "__main__":
    run_cli()
