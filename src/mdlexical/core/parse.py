"""File discovery, UTF-8 reading, and frontmatter stripping for source documents"""

import re
from pathlib import Path
from typing import Any

import yaml

from mdlexical.core.models import SourceDoc


FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)
MD_EXTENSIONS = {'.md', '.mdx'}


def _strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in MD_EXTENSIONS)


def read_source(path: Path, strip_frontmatter: bool = True) -> SourceDoc:
    """Read one markdown file; the converter only ever sees the returned body."""
    raw = path.read_text(encoding='utf-8-sig')  # editors on Windows prepend a BOM
    frontmatter, body = _strip_frontmatter(raw) if strip_frontmatter else ({}, raw)
    return SourceDoc(path=path, raw_markdown=raw, markdown=body, frontmatter=frontmatter)
