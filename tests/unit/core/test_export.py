"""Unit tests for core/export.py"""

import pytest

from mdlexical.core.convert import markdown_to_tree
from mdlexical.core.export import build_record, to_lexical
from mdlexical.core.models import ConvertedDoc


def _children(md: str) -> list[dict]:
    return to_lexical(markdown_to_tree(md))["root"]["children"]


def test_root_envelope():
    """to_lexical wraps blocks in a root element node."""
    root = to_lexical(markdown_to_tree(""))["root"]
    assert root == {
        "type": "root", "children": [], "direction": "ltr",
        "format": "", "indent": 0, "version": 1,
    }


def test_heading_node():
    (heading,) = _children("# Hi\n")
    assert heading["type"] == "heading"
    assert heading["tag"] == "h1"
    assert heading["children"][0]["text"] == "Hi"


def test_text_format_bitmask():
    """Plain, bold, and italic spans map to format 0, 1, and 2."""
    (para,) = _children("a **b** *c*\n")
    assert para["type"] == "paragraph"
    assert para["textFormat"] == 0
    assert [(c["text"], c["format"]) for c in para["children"]] == [
        ("a ", 0), ("b", 1), (" ", 0), ("c", 2),
    ]
    assert all(c["mode"] == "normal" and c["detail"] == 0 for c in para["children"])


def test_list_nodes():
    """Lists render as bullet `ul` nodes with numbered listitem children."""
    (plain, nested) = _children("- one\n- two\n    - deep\n")
    assert plain["listType"] == "bullet"
    assert plain["tag"] == "ul"
    assert plain["start"] == 1
    assert [(i["type"], i["value"], i["indent"]) for i in plain["children"]] == [
        ("listitem", 1, 0), ("listitem", 2, 0),
    ]
    assert nested["indent"] == 0
    assert nested["children"][0]["indent"] == 2


@pytest.fixture(name="doc")
def doc_fixture():
    return ConvertedDoc(
        slug="hello", path="posts/hello.md", title="Hello", description="World",
        hash="0" * 64, frontmatter={}, content=markdown_to_tree("# Hello\n\nWorld\n"),
    )


def test_build_record_lexical(doc):
    record = build_record(doc)
    assert record["slug"] == "hello"
    assert record["content"]["root"]["type"] == "root"


def test_build_record_tree(doc):
    record = build_record(doc, "tree")
    assert record["content"]["type"] == "root"
    assert record["content"]["blocks"][0]["level"] == 1


def test_build_record_unknown_format(doc):
    with pytest.raises(ValueError, match="Unknown output format"):
        build_record(doc, "html")
