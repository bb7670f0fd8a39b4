"""Slug generation for document identifiers"""

import re


_NON_SLUG_RE = re.compile(r'[^a-z0-9]+')


def generate_slug(title: str) -> str:
    """Lowercase title, collapse runs of non [a-z0-9] chars to '-', trim '-' ends."""
    return _NON_SLUG_RE.sub('-', title.lower()).strip('-')
