"""
Site discovery for internal linking.

Reads a site's sitemap index to build the list of linkable pages (products,
blog posts, pages, categories) the author can pick from, and scrapes a
compact plain-text summary of a picked page for the AI collaborator.
"""

import logging
import re
from typing import Optional
from urllib.parse import urlparse

import requests
from bs4 import BeautifulSoup

from .models import SiteEntry

logger = logging.getLogger(__name__)

# Default headers for web requests
DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "nl,en-US;q=0.7,en;q=0.5",
}

DEFAULT_TIMEOUT = 30

# Sub-sitemap file name fragment -> entry category, checked in order
SITEMAP_CATEGORIES = [
    ("product_cat-sitemap", "Category"),
    ("category-sitemap", "Category"),
    ("product-sitemap", "Product"),
    ("post-sitemap", "Blog"),
    ("page-sitemap", "Page"),
]
FALLBACK_CATEGORY = "Other"

# CMS path prefixes that carry no name information
NAME_PREFIXES = ["product", "diensten", "product-categorie", "categorie", "blog"]

EXCLUDED_PATH_FRAGMENTS = ["/my-account/", "/cart/", "/checkout/", "/feed/", "/wp-json/"]
EXCLUDED_EXTENSIONS = (".jpg", ".png", ".xml")

MAX_SUMMARY_LENGTH = 4000
MAX_REVIEWS = 3
MIN_REVIEW_LENGTH = 10
MAX_CONTENT_PARAGRAPHS = 5


class SitemapError(Exception):
    """Raised when a sitemap or page cannot be fetched or read."""
    pass


def _fetch_text(url: str, session: Optional[requests.Session] = None, timeout: int = DEFAULT_TIMEOUT) -> str:
    http = session or requests
    try:
        response = http.get(url, headers=DEFAULT_HEADERS, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise SitemapError(f"Failed to fetch {url}: {e}")
    return response.text


def parse_sitemap_locations(xml_text: str) -> list[str]:
    """
    Extract ``<loc>`` values from a sitemap or sitemap index.

    Args:
        xml_text: Sitemap XML (namespaced or not).

    Returns:
        Non-empty locations in document order.
    """
    if not xml_text:
        return []
    soup = BeautifulSoup(xml_text, "xml")
    locations = []
    for loc in soup.find_all("loc"):
        value = loc.get_text(strip=True)
        if value:
            locations.append(value)
    return locations


def categorize_sitemap(url: str) -> Optional[str]:
    """Get the entry category for a sub-sitemap URL, None if not relevant."""
    for fragment, category in SITEMAP_CATEGORIES:
        if fragment in url:
            return category
    return None


def format_url_to_name(url: str) -> str:
    """
    Derive a readable page name from its URL.

    Examples:
        >>> format_url_to_name("https://example.com/product/houten-wereldkaart/")
        'Houten Wereldkaart'
    """
    parsed = urlparse(url)
    segments = [segment for segment in parsed.path.split("/") if segment]
    while segments and segments[0] in NAME_PREFIXES:
        segments = segments[1:]
    if not segments:
        return parsed.netloc or url

    slug = segments[-1]
    return " ".join(word[:1].upper() + word[1:] for word in slug.split("-") if word)


def filter_site_entries(entries: list[SiteEntry]) -> list[SiteEntry]:
    """
    Drop system pages and assets, and de-duplicate by URL.

    The first entry for a URL wins.
    """
    seen: set[str] = set()
    filtered = []
    for entry in entries:
        if any(fragment in entry.url for fragment in EXCLUDED_PATH_FRAGMENTS):
            continue
        if entry.url.lower().endswith(EXCLUDED_EXTENSIONS):
            continue
        if entry.url in seen:
            continue
        seen.add(entry.url)
        filtered.append(entry)
    return filtered


def _fetch_sub_sitemap(url: str, category: str, session: Optional[requests.Session]) -> list[SiteEntry]:
    try:
        locations = parse_sitemap_locations(_fetch_text(url, session))
    except SitemapError as e:
        logger.warning(f"Skipping sub-sitemap {url}: {e}")
        return []
    return [
        SiteEntry(name=format_url_to_name(location), url=location, category=category)
        for location in locations
    ]


def fetch_site_entries(sitemap_url: str, session: Optional[requests.Session] = None) -> list[SiteEntry]:
    """
    Fetch every linkable page listed under a sitemap index.

    Sub-sitemaps are categorized by file name; unrecognized ones are
    ignored. A URL that lists no sub-sitemaps but names a sitemap is read
    as a single sitemap.

    Args:
        sitemap_url: URL of the sitemap index.
        session: Optional requests session.

    Returns:
        Filtered, de-duplicated site entries.

    Raises:
        SitemapError: If the index cannot be fetched or lists nothing.
    """
    index_locations = parse_sitemap_locations(_fetch_text(sitemap_url, session))

    if not index_locations:
        if "sitemap" in sitemap_url:
            logger.info(f"No sub-sitemaps in {sitemap_url}, reading it as a single sitemap")
            return filter_site_entries(
                _fetch_sub_sitemap(sitemap_url, FALLBACK_CATEGORY, session)
            )
        raise SitemapError(f"No sitemaps found in index: {sitemap_url}")

    entries: list[SiteEntry] = []
    for location in index_locations:
        category = categorize_sitemap(location)
        if category is None:
            logger.debug(f"Ignoring sub-sitemap {location}")
            continue
        entries.extend(_fetch_sub_sitemap(location, category, session))

    result = filter_site_entries(entries)
    logger.info(f"Found {len(result)} linkable pages in {sitemap_url}")
    return result


def _select_text(soup: BeautifulSoup, *selectors: str) -> str:
    for selector in selectors:
        element = soup.select_one(selector)
        if element:
            text = element.get_text(" ", strip=True)
            if text:
                return text
    return ""


def extract_page_summary(html: str, url: str) -> str:
    """
    Build a compact plain-text summary of a shop or blog page.

    Picks up the title, WooCommerce short and long descriptions, up to three
    customer reviews and, for pages without product descriptions, the first
    paragraphs of the main content.

    Args:
        html: Page HTML.
        url: Page URL, included in the summary.

    Returns:
        Single-line summary of at most 4000 characters.
    """
    soup = BeautifulSoup(html or "", "lxml")

    title = _select_text(soup, "h1") or "Unknown name"
    short_description = _select_text(
        soup, ".woocommerce-product-details__short-description", ".term-description"
    )
    long_description = _select_text(
        soup, "#tab-description", ".woocommerce-Tabs-panel--description"
    )

    reviews = []
    for node in soup.select(".commentlist li .description, .comment-content, .review-text"):
        text = " ".join(node.get_text(" ").split())
        if len(text) > MIN_REVIEW_LENGTH:
            reviews.append(f'"{text}"')
        if len(reviews) == MAX_REVIEWS:
            break

    general_content = ""
    if not short_description and not long_description:
        container = soup.select_one(".entry-content") or soup.select_one(".elementor-widget-text-editor")
        if container:
            paragraphs = container.find_all("p")[:MAX_CONTENT_PARAGRAPHS]
            general_content = " ".join(p.get_text(" ") for p in paragraphs)

    summary = (
        f"TYPE: Page/Product/Blog "
        f"TITLE: {title} "
        f"URL: {url} "
        f"SHORT DESCRIPTION: {short_description} "
        f"DETAILS: {long_description} "
        f"CUSTOMER REVIEWS: - {' - '.join(reviews) or 'No reviews found on this page.'} "
        f"CONTENT: {general_content}"
    )
    return re.sub(r"\s+", " ", summary).strip()[:MAX_SUMMARY_LENGTH]


def fetch_page_summary(url: str, session: Optional[requests.Session] = None) -> str:
    """
    Fetch a page and summarize it.

    Returns:
        The summary, or "" when the page cannot be fetched.
    """
    try:
        html = _fetch_text(url, session)
    except SitemapError as e:
        logger.warning(f"Could not fetch page content for {url}: {e}")
        return ""
    return extract_page_summary(html, url)
