"""Batch migration: read sources, convert, and write content-store records"""

import json
import logging
from pathlib import Path

from mdlexical.config import Settings
from mdlexical.core.convert import markdown_to_tree
from mdlexical.core.export import build_record
from mdlexical.core.metadata import derive_metadata
from mdlexical.core.models import ConvertedDoc, SourceDoc
from mdlexical.core.parse import discover_files, read_source
from mdlexical.core.utils.hashing import sha256
from mdlexical.core.utils.slug import generate_slug


logger = logging.getLogger(__name__)


def convert_source(source: SourceDoc, settings: Settings) -> ConvertedDoc:
    """Convert one source; frontmatter title/slug/description beat the heuristics."""
    fm = source.frontmatter
    meta = derive_metadata(
        source.markdown,
        fallback=source.path.stem or settings.default_title,
        description_length=settings.description_length,
        scan_length=settings.title_scan_length,
    )
    title = str(fm.get('title') or meta.title)
    # frontmatter slugs become filenames, so they get the same normalization
    slug = generate_slug(str(fm.get('slug') or title))
    return ConvertedDoc(
        slug=slug,
        path=str(source.path),
        title=title,
        description=str(fm.get('description') or meta.description),
        hash=sha256(source.raw_markdown),
        frontmatter=fm,
        content=markdown_to_tree(source.markdown),
    )


def run_convert(path: str, output_dir: Path, settings: Settings) -> list[tuple[Path, Path]]:
    """Convert every markdown file under path into output_dir/<slug>.json.

    Returns (source_path, output_file) pairs. A slug already written in this
    run is skipped with a warning.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    results = []
    seen: set[str] = set()
    for p in discover_files(Path(path)):
        try:
            doc = convert_source(read_source(p, settings.strip_frontmatter), settings)
            if doc.slug in seen:
                logger.warning(f"Slug '{doc.slug}' already produced in this run, skipping {p}")
                continue
            seen.add(doc.slug)

            out_file = output_dir / f"{doc.slug or 'untitled'}.json"
            record = build_record(doc, settings.output_format)
            out_file.write_text(json.dumps(record, indent=2, ensure_ascii=False), encoding='utf-8')
        except (OSError, ValueError) as e:
            raise RuntimeError(f"Failed to convert {p}: {e}") from e

        logger.debug(f"{p}: title={doc.title!r} slug={doc.slug!r} blocks={len(doc.content.blocks)}")
        results.append((p, out_file))
    return results
