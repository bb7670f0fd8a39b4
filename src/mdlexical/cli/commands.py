"""CLI command implementations"""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdlexical.config import Settings, load_config
from mdlexical.core.export import build_record
from mdlexical.core.models import Heading, List, Paragraph
from mdlexical.core.parse import read_source
from mdlexical.core.pipeline import convert_source, run_convert


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _configure_logging(settings: Settings, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format='%(levelname)s: %(message)s')


def _describe_block(block) -> str:
    """One-line summary of a block for `inspect` output."""
    if isinstance(block, Heading):
        return f"heading h{block.level}: {''.join(s.text for s in block.spans)}"
    if isinstance(block, Paragraph):
        return f"paragraph ({len(block.spans)} spans)"
    if isinstance(block, List):
        return f"list ({len(block.items)} items, indent {block.indent})"
    return block.type


def convert_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to convert")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="Record content format: lexical or tree")] = None,
    length: Annotated[Optional[int], typer.Option("--description-length", help="Max description length")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    """Convert markdown files to JSON records with title, slug, description, and content."""
    settings = _settings(overrides={"output_dir": out, "output_format": fmt, "description_length": length})
    _configure_logging(settings, verbose)
    output_dir = Path(settings.output_dir)

    if not Path(path).exists():
        _fail(f"Path not found: {path}")
    try:
        results = run_convert(path, output_dir, settings)
    except RuntimeError as e:
        _fail(str(e))
    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Converted {len(results)} document(s) to {output_dir}/")


def inspect_cmd(
    path: Annotated[Path, typer.Argument(help="Markdown file to inspect")],
    as_json: Annotated[bool, typer.Option("--json", help="Print the full converted record as JSON")] = False,
    ):
    """Show the title, slug, description, and block layout derived from one file."""
    settings = _settings()
    _configure_logging(settings, verbose=False)
    if not path.is_file():
        _fail(f"Not a file: {path}")

    try:
        doc = convert_source(read_source(path, settings.strip_frontmatter), settings)
    except (OSError, ValueError) as e:
        _fail(f"Failed to read {path}", e)

    if as_json:
        typer.echo(json.dumps(build_record(doc, settings.output_format), indent=2, ensure_ascii=False))
        return

    typer.echo(f"Title:       {doc.title}")
    typer.echo(f"Slug:        {doc.slug}")
    typer.echo(f"Description: {doc.description}")
    typer.echo(f"Blocks:      {len(doc.content.blocks)}")
    for i, block in enumerate(doc.content.blocks):
        typer.echo(f"  [{i}] {_describe_block(block)}")
