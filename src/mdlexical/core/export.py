"""Storage shapes: Lexical editor JSON for the content store and JSON-ready records"""

from typing import Any

from mdlexical.core.models import (
    Block,
    Bold,
    ConvertedDoc,
    Heading,
    Italic,
    List,
    ListItem,
    Paragraph,
    Root,
    Span,
)


TEXT_FORMAT_PLAIN = 0
TEXT_FORMAT_BOLD = 1
TEXT_FORMAT_ITALIC = 2

OUTPUT_FORMATS = ('lexical', 'tree')


def _element(node_type: str, children: list[dict], **fields: Any) -> dict[str, Any]:
    """Common envelope shared by every Lexical element node."""
    return {
        "type": node_type,
        "children": children,
        "direction": "ltr",
        "format": "",
        "indent": 0,
        **fields,
        "version": 1,
    }


def span_to_lexical(span: Span) -> dict[str, Any]:
    if isinstance(span, Bold):
        fmt = TEXT_FORMAT_BOLD
    elif isinstance(span, Italic):
        fmt = TEXT_FORMAT_ITALIC
    else:
        fmt = TEXT_FORMAT_PLAIN
    return {
        "type": "text",
        "detail": 0,
        "format": fmt,
        "mode": "normal",
        "style": "",
        "text": span.text,
        "version": 1,
    }


def _spans(spans) -> list[dict]:
    return [span_to_lexical(s) for s in spans]


def _list_item(item: ListItem, indent: int) -> dict[str, Any]:
    return _element("listitem", _spans(item.spans), indent=indent, value=item.ordinal)


def block_to_lexical(block: Block) -> dict[str, Any]:
    """Render one block as a Lexical element node."""
    if isinstance(block, Heading):
        return _element("heading", _spans(block.spans), tag=f"h{block.level}")
    if isinstance(block, Paragraph):
        return _element("paragraph", _spans(block.spans), textFormat=0, textStyle="")
    if isinstance(block, List):
        return _element(
            "list",
            [_list_item(item, block.indent) for item in block.items],
            listType="bullet",
            start=1,
            tag="ul",
        )
    if isinstance(block, ListItem):
        return _list_item(block, 0)
    raise TypeError(f"Unknown block type: {type(block).__name__}")


def to_lexical(root: Root) -> dict[str, Any]:
    """Render the whole tree as the `{"root": {...}}` object the content store expects."""
    node = _element("root", [block_to_lexical(b) for b in root.blocks])
    return {"root": node}


def build_record(doc: ConvertedDoc, fmt: str = 'lexical') -> dict[str, Any]:
    """Return a JSON-ready dict for a converted document.

    `content` holds the Lexical object for fmt='lexical' or the compact
    discriminated tree for fmt='tree'. Frontmatter dates become ISO strings.
    """
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(f"Unknown output format {fmt!r}; expected one of {', '.join(OUTPUT_FORMATS)}")
    record = doc.model_dump(mode='json', exclude={'content'})
    record['content'] = to_lexical(doc.content) if fmt == 'lexical' else doc.content.model_dump(mode='json')
    return record
