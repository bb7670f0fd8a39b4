"""Fold classified lines into ordered blocks, accumulating bullet runs into lists"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from mdlexical.core.inline import parse_inline
from mdlexical.core.lines import (
    Blank,
    Hashtag,
    HeadingLine,
    Line,
    ListItemLine,
    ParagraphLine,
)
from mdlexical.core.models import Block, Heading, List, ListItem, Paragraph, PlainText


@dataclass
class PendingList:
    """Bullet lines collected so far for the list currently being built."""
    indent: int
    items:  list[str] = field(default_factory=list)


def build_list(pending: PendingList) -> List:
    """Turn a pending run of bullet texts into a flat List block."""
    return List(
        indent=pending.indent,
        items=tuple(
            ListItem(spans=(PlainText(text=text),), ordinal=i)
            for i, text in enumerate(pending.items, start=1)
        ),
    )


def assemble_blocks(lines: Iterable[Line]) -> list[Block]:
    """Convert classified lines to blocks in source order.

    A list is flushed on a blank line, heading, paragraph, hashtag line,
    indent change, or end of input. Indent changes never nest.
    """
    blocks: list[Block] = []
    pending: Optional[PendingList] = None

    def _flush() -> None:
        nonlocal pending
        if pending is not None and pending.items:
            blocks.append(build_list(pending))
        pending = None

    for line in lines:
        if isinstance(line, ListItemLine):
            if pending is not None and line.indent != pending.indent:
                _flush()
            if pending is None:
                pending = PendingList(indent=line.indent)
            pending.items.append(line.text)
            continue

        _flush()
        if isinstance(line, HeadingLine):
            blocks.append(Heading(level=line.level, spans=tuple(parse_inline(line.text))))
        elif isinstance(line, ParagraphLine):
            blocks.append(Paragraph(spans=tuple(parse_inline(line.text))))
        # Blank and Hashtag lines emit nothing
        elif not isinstance(line, (Blank, Hashtag)):
            raise TypeError(f"Unknown line kind: {type(line).__name__}")

    _flush()
    return blocks
