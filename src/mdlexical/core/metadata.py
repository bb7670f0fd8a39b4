"""Heuristic title, description, and slug extraction for documents without metadata

All functions are total: missing information yields a fallback value, never an
exception.
"""

import re

from mdlexical.core.lines import split_lines
from mdlexical.core.models import DocumentMeta
from mdlexical.core.utils.slug import generate_slug


NO_DESCRIPTION = "No description available"
DEFAULT_TITLE = "Untitled"
ELLIPSIS = "..."

TITLE_RE = re.compile(r'^#\s+(.+)')
LIST_MARKER_RE = re.compile(r'^[*-]\s')


def extract_title(markdown: str, fallback: str = DEFAULT_TITLE) -> str:
    """Return the text of the first level-1 heading, else fallback unchanged."""
    for line in split_lines(markdown):
        m = TITLE_RE.match(line)
        if m:
            return m.group(1).strip()
    return fallback


def extract_description(markdown: str, max_length: int = 160) -> str:
    """Return the first line that is not blank, a heading/hashtag, or a list item.

    Lines longer than max_length are cut to max_length - 3 chars plus '...'.
    """
    for line in split_lines(markdown):
        text = line.strip()
        if not text or text.startswith('#') or LIST_MARKER_RE.match(text):
            continue
        if len(text) <= max_length:
            return text
        return text[:max(max_length - len(ELLIPSIS), 0)] + ELLIPSIS
    return NO_DESCRIPTION


def resolve_title(markdown: str, fallback: str = DEFAULT_TITLE, scan_length: int = 60) -> str:
    """extract_title, replacing an empty or '?' title with the first paragraph or fallback."""
    title = extract_title(markdown, fallback)
    if title.strip() and title.strip() != '?':
        return title

    first_para = extract_description(markdown, scan_length)
    if first_para == NO_DESCRIPTION:
        return fallback
    return first_para.removesuffix(ELLIPSIS)


def derive_metadata(
    markdown: str,
    fallback: str = DEFAULT_TITLE,
    description_length: int = 160,
    scan_length: int = 60,
    ) -> DocumentMeta:
    """Compute title, slug, and description the way legacy posts are migrated."""
    title = resolve_title(markdown, fallback, scan_length)
    return DocumentMeta(
        title=title,
        slug=generate_slug(title),
        description=extract_description(markdown, description_length),
    )
