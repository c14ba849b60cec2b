"""
On-page SEO scoring for rendered HTML documents.

Parses an HTML document back into visible text and structural signals
(headings, paragraphs, images, links, robots meta) and computes a 0-100
score with diagnostics grouped by severity.

Scoring starts at 100. Each check applies its penalty at most once:

    primary keyword absent ............ -20 critical
    keyword density > 3.5% ............  -5 warning
    keyword absent from H1 (else H2) .. -10 warning
    fewer than 300 words .............. -20 critical
    300-599 words .....................  -5 warning
    fewer than 2 headings ............. -10 warning
    paragraphs over 150 words .........  -5 warning
    images without alt text ...........  -5 warning
    no links ..........................  -5 warning
    robots meta containing noindex .... -50 critical
"""

import logging
import math
import re
from typing import Optional

from bs4 import BeautifulSoup, Comment

from .models import SeoAnalysis, SeoIssues

logger = logging.getLogger(__name__)

WORDS_PER_MINUTE = 200
MAX_KEYWORD_DENSITY = 3.5
MIN_WORDS = 300
TARGET_WORDS = 600
MIN_HEADINGS = 2
MAX_PARAGRAPH_WORDS = 150

PENALTY_KEYWORD_MISSING = 20
PENALTY_KEYWORD_STUFFING = 5
PENALTY_KEYWORD_NOT_IN_TITLE = 10
PENALTY_TOO_SHORT = 20
PENALTY_SHORT = 5
PENALTY_FEW_HEADINGS = 10
PENALTY_LONG_PARAGRAPHS = 5
PENALTY_MISSING_ALT = 5
PENALTY_NO_LINKS = 5
PENALTY_NOINDEX = 50

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]

# Elements whose boundaries separate words; inline tags (strong, a, span)
# do not, so highlighting cannot change the word count
BLOCK_TAGS = HEADING_TAGS + [
    "address", "article", "aside", "blockquote", "br", "dd", "details", "div",
    "dl", "dt", "figcaption", "figure", "footer", "header", "hr", "li", "main",
    "nav", "ol", "p", "pre", "section", "summary", "table", "td", "th", "tr", "ul",
]


def _parse_document(html: str) -> BeautifulSoup:
    """Parse HTML, degrading to an empty document if the parser fails."""
    try:
        soup = BeautifulSoup(html, "lxml")
    except Exception as e:
        logger.warning(f"Could not parse HTML for SEO analysis, scoring empty document: {e}")
        soup = BeautifulSoup("", "lxml")

    # CSS and JSON-LD must not count as words
    for tag in soup.find_all(["style", "script"]):
        tag.decompose()
    for comment in soup.find_all(string=lambda text: isinstance(text, Comment)):
        comment.extract()

    for tag in soup.find_all(BLOCK_TAGS):
        tag.insert_before(" ")
        tag.insert_after(" ")

    return soup


def _text_of(element) -> str:
    """Text content with whitespace collapsed, as rendered for a reader."""
    return " ".join(element.get_text().split())


def _visible_text(soup: BeautifulSoup) -> str:
    return _text_of(soup.body or soup)


def primary_keyword(target_keywords: Optional[str]) -> str:
    """Get the first comma-separated keyword, trimmed and lower-cased."""
    if not target_keywords:
        return ""
    return target_keywords.split(",")[0].strip().lower()


def count_keyword(text: str, keyword: str) -> int:
    """Count case-insensitive literal occurrences of keyword in text."""
    if not keyword:
        return 0
    return len(re.findall(re.escape(keyword), text, re.IGNORECASE))


class SeoAnalyzer:
    """
    Scores one HTML document.

    Each ``_check_*`` method records its diagnostics and penalty; ``analyze``
    runs them in a fixed order so issues keep that order in every bucket.
    """

    def __init__(self, html: Optional[str], target_keywords: Optional[str]):
        self.soup = _parse_document(html or "")
        self.text = _visible_text(self.soup)
        self.keyword = primary_keyword(target_keywords)
        self.score = 100
        self.issues = SeoIssues()
        self.result = SeoAnalysis(issues=self.issues)

    def _critical(self, message: str, penalty: int) -> None:
        self.issues.critical.append(message)
        self.score -= penalty

    def _warning(self, message: str, penalty: int = 0) -> None:
        self.issues.warning.append(message)
        self.score -= penalty

    def _good(self, message: str) -> None:
        self.issues.good.append(message)

    def analyze(self) -> SeoAnalysis:
        word_count = len(self.text.split())
        self.result.word_count = word_count
        self.result.reading_time_minutes = math.ceil(word_count / WORDS_PER_MINUTE)

        if self.keyword:
            self._check_keyword_usage(word_count)
            self._check_keyword_in_title()
        else:
            self._warning("No target keyword supplied for analysis.")

        self._check_length(word_count)
        self._check_headings()
        self._check_paragraph_length()
        self._check_image_alt_text()
        self._check_links()
        self._check_robots_meta()

        self.result.score = max(0, min(100, self.score))
        return self.result

    def _check_keyword_usage(self, word_count: int) -> None:
        count = count_keyword(self.text, self.keyword)
        density = round(100 * count / word_count, 2) if word_count else 0.0
        self.result.keyword_count = count
        self.result.keyword_density_percent = density

        if count == 0:
            self._critical(
                f'Keyword "{self.keyword}" not found in the text.',
                PENALTY_KEYWORD_MISSING,
            )
        elif density > MAX_KEYWORD_DENSITY:
            self._warning(
                f"Keyword density is high ({density:g}%). Watch out for keyword stuffing.",
                PENALTY_KEYWORD_STUFFING,
            )
        else:
            self._good(f"Keyword appears {count} times ({density:g}%).")

    def _check_keyword_in_title(self) -> None:
        # Editor views often lack an H1, so the first H2 stands in
        title = self.soup.find("h1") or self.soup.find("h2")
        if title is None:
            return
        if self.keyword in _text_of(title).lower():
            self._good("Keyword present in the title.")
        else:
            self._warning(
                "Keyword not found in the main title (H1/H2).",
                PENALTY_KEYWORD_NOT_IN_TITLE,
            )

    def _check_length(self, word_count: int) -> None:
        if word_count < MIN_WORDS:
            self._critical(
                f"Text is too short (< {MIN_WORDS} words) to rank well.",
                PENALTY_TOO_SHORT,
            )
        elif word_count < TARGET_WORDS:
            self._warning(f"Text is on the short side (< {TARGET_WORDS} words).", PENALTY_SHORT)
        else:
            self._good(f"Good length ({word_count} words).")

    def _check_headings(self) -> None:
        if len(self.soup.find_all(HEADING_TAGS)) < MIN_HEADINGS:
            self._warning("Use more subheadings (H2/H3) for structure.", PENALTY_FEW_HEADINGS)
        else:
            self._good("Good structure with subheadings.")

    def _check_paragraph_length(self) -> None:
        long_paragraphs = sum(
            1
            for paragraph in self.soup.find_all("p")
            if len(_text_of(paragraph).split()) > MAX_PARAGRAPH_WORDS
        )
        if long_paragraphs:
            self._warning(
                f"{long_paragraphs} paragraphs are too long (>{MAX_PARAGRAPH_WORDS} words).",
                PENALTY_LONG_PARAGRAPHS,
            )

    def _check_image_alt_text(self) -> None:
        images = self.soup.find_all("img")
        missing_alt = sum(1 for image in images if not (image.get("alt") or "").strip())
        if missing_alt:
            self._warning(f"{missing_alt} images are missing ALT text.", PENALTY_MISSING_ALT)
        elif images:
            self._good("All images have ALT text.")

    def _check_links(self) -> None:
        links = self.soup.find_all("a")
        if not links:
            self._warning("No internal or external links found.", PENALTY_NO_LINKS)
        else:
            self._good(f"{len(links)} links found.")

    def _check_robots_meta(self) -> None:
        robots = self.soup.find("meta", attrs={"name": "robots"})
        if robots is None:
            return
        if "noindex" in (robots.get("content") or "").lower():
            self._critical(
                "WARNING: a 'noindex' tag is present in the markup. "
                "Search engines will NOT index this page.",
                PENALTY_NOINDEX,
            )


def analyze_seo(html: Optional[str], target_keywords: Optional[str]) -> SeoAnalysis:
    """
    Score an HTML document for on-page SEO.

    Only the first comma-separated keyword is scored; the others are
    informational. Malformed HTML never raises.

    Args:
        html: HTML document or fragment.
        target_keywords: Comma-separated keywords.

    Returns:
        SeoAnalysis with the clamped score and grouped diagnostics.
    """
    result = SeoAnalyzer(html, target_keywords).analyze()
    logger.debug(
        f"SEO score {result.score}: {result.word_count} words, "
        f"{len(result.issues.critical)} critical, {len(result.issues.warning)} warnings"
    )
    return result
