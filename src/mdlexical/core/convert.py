"""Markdown text to document tree conversion"""

import logging

from mdlexical.core.blocks import assemble_blocks
from mdlexical.core.lines import classify_line, split_lines
from mdlexical.core.models import Root


logger = logging.getLogger(__name__)


def markdown_to_tree(markdown: str) -> Root:
    """Convert raw markdown text into a Root tree. Total: never raises on text input."""
    lines = [classify_line(line) for line in split_lines(markdown)]
    blocks = assemble_blocks(lines)
    logger.debug(f"Converted {len(lines)} lines into {len(blocks)} blocks")
    return Root(blocks=tuple(blocks))
