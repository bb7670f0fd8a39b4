"""Single-line classification for the line-oriented markdown converter"""

import re
from dataclasses import dataclass
from typing import Union


HEADING_RE = re.compile(r'^(#{1,6})\s+(\S.*)$')
LIST_ITEM_RE = re.compile(r'^(\s*)[*-]\s+(\S.*)$')
NEWLINE_RE = re.compile(r'\r?\n')


@dataclass(frozen=True)
class Blank:
    pass


@dataclass(frozen=True)
class Hashtag:
    """Tag line such as `#work-on-myself/blog`; produces no block."""
    text: str


@dataclass(frozen=True)
class HeadingLine:
    level: int
    text:  str


@dataclass(frozen=True)
class ListItemLine:
    indent: int                # leading spaces // 2
    text:   str


@dataclass(frozen=True)
class ParagraphLine:
    text: str


Line = Union[Blank, Hashtag, HeadingLine, ListItemLine, ParagraphLine]


def split_lines(markdown: str) -> list[str]:
    """Split on LF or CRLF only; other Unicode line breaks stay inside a line."""
    return NEWLINE_RE.split(markdown)


def classify_line(line: str) -> Line:
    """Classify one line (no trailing newline). Never looks at neighbouring lines."""
    stripped = line.strip()
    if not stripped:
        return Blank()

    # Checked before headings: any `#` not followed by a space is dropped,
    # which includes `## Sub`, `#tag/path`, and 7+ hashes.
    if stripped.startswith('#') and not stripped.startswith('# '):
        return Hashtag(text=stripped)

    m = HEADING_RE.match(line)
    if m:
        return HeadingLine(level=len(m.group(1)), text=m.group(2).rstrip())

    m = LIST_ITEM_RE.match(line)
    if m:
        return ListItemLine(indent=len(m.group(1)) // 2, text=m.group(2).strip())

    return ParagraphLine(text=stripped)
