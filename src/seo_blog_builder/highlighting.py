"""
Keyword highlighting for rendered section text.

Wraps keyword occurrences in a semantic highlight marker. Matching is
case-insensitive and substring based (not word-boundary based), so a
keyword like "kaart" also matches inside "kaartje". Longer phrases are
matched before their substrings.
"""

import re
from typing import Optional

HIGHLIGHT_OPEN = '<strong class="blog-keyword">'
HIGHLIGHT_CLOSE = "</strong>"

# Legacy Markdown bold emitted by the AI collaborator
EMPHASIS_MARKER = "**"

# Keywords this short over-match (articles, prepositions)
MIN_KEYWORD_LENGTH = 3

# Segments that must never be re-wrapped: existing highlight spans and tags.
# The capturing group makes re.split() return them at odd indexes.
_PROTECTED_SEGMENT = re.compile(
    "(" + re.escape(HIGHLIGHT_OPEN) + r".*?" + re.escape(HIGHLIGHT_CLOSE) + r"|<[A-Za-z/!][^>]*>)",
    re.DOTALL,
)


def strip_emphasis_markers(text: str) -> str:
    """Remove every ``**`` emphasis marker from text."""
    if not text:
        return ""
    return text.replace(EMPHASIS_MARKER, "")


def parse_keywords(keywords_csv: Optional[str]) -> list[str]:
    """
    Parse a comma-separated keyword list for highlighting.

    Entries are trimmed, entries shorter than three characters are dropped,
    case-insensitive duplicates are removed and the result is sorted by
    length, longest first.

    Args:
        keywords_csv: Comma-separated keywords (may be None or empty).

    Returns:
        Keywords in match order.
    """
    if not keywords_csv:
        return []

    seen: set[str] = set()
    keywords = []
    for raw in keywords_csv.split(","):
        keyword = raw.strip()
        if len(keyword) < MIN_KEYWORD_LENGTH:
            continue
        if keyword.lower() in seen:
            continue
        seen.add(keyword.lower())
        keywords.append(keyword)

    return sorted(keywords, key=len, reverse=True)


def highlight_keywords(text: str, keywords_csv: Optional[str]) -> str:
    """
    Strip emphasis markers and highlight keyword occurrences.

    Text inside existing highlight spans and inside HTML tags (attribute
    values such as link targets) is left untouched, so running this twice
    with the same keywords gives the same result as running it once.

    Args:
        text: Section text, possibly containing HTML and ``**`` markers.
        keywords_csv: Comma-separated keywords.

    Returns:
        Cleaned text with keywords wrapped in the highlight marker.

    Examples:
        >>> highlight_keywords("een houten kaart", "houten kaart, houten")
        'een <strong class="blog-keyword">houten kaart</strong>'
    """
    clean_text = strip_emphasis_markers(text)
    if not clean_text:
        return ""

    keywords = parse_keywords(keywords_csv)
    if not keywords:
        return clean_text

    # Alternation order is match priority: longest phrase first
    pattern = re.compile("|".join(re.escape(k) for k in keywords), re.IGNORECASE)

    def _wrap(match: re.Match) -> str:
        return f"{HIGHLIGHT_OPEN}{match.group(0)}{HIGHLIGHT_CLOSE}"

    segments = _PROTECTED_SEGMENT.split(clean_text)
    result = []
    for position, segment in enumerate(segments):
        if position % 2 == 1:
            result.append(segment)
        else:
            result.append(pattern.sub(_wrap, segment))

    return "".join(result)
