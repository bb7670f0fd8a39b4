"""Integration tests for the read -> convert -> write migration pipeline.

Each test runs the pipeline against the canonical legacy post below and asserts
stable expected values. Read this file top-to-bottom as a reference for what
each stage produces with default settings.

Canonical document (2019-03-why-i-write.md)
-------------------------------------------
    #work-on-myself/blog

    # ?

    Writing is how I find out what I *actually* think about things, which is
    why I keep doing it.   (one long line, > 160 chars)

    ## What helps

    * a quiet morning
    * **coffee**
        * more coffee

    See [my notes](https://example.com/notes).

Block layout (5 blocks; the hashtag line and `## What helps` are dropped):
    [heading h1]  "?"
    [paragraph]   plain / italic "actually" / plain
    [list]        2 items, indent 0
    [list]        1 item,  indent 2
    [paragraph]   "See ", "my notes", "."

Metadata:
    title        first 57 chars of the long line ('?' title is replaced)
    slug         generate_slug(title)
    description  first 157 chars of the long line + '...'
"""

import json

import pytest

from mdlexical.config import Settings
from mdlexical.core.pipeline import run_convert
from mdlexical.core.utils.slug import generate_slug


LONG_LINE = (
    "Writing is how I find out what I *actually* think about things, which is why I keep "
    "doing it even on the days when nothing seems to come out right and the page stays blank."
)

CANONICAL_MD = f"""\
#work-on-myself/blog

# ?

{LONG_LINE}

## What helps

* a quiet morning
* **coffee**
    * more coffee

See [my notes](https://example.com/notes).
"""


@pytest.fixture(name="record")
def record_fixture(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "2019-03-why-i-write.md").write_text(CANONICAL_MD, encoding="utf-8")
    results = run_convert(".", tmp_path / "dist", Settings())
    assert len(results) == 1
    _, out_file = results[0]
    return json.loads(out_file.read_text(encoding="utf-8"))


def test_placeholder_title_replaced_by_first_paragraph(record):
    assert record["title"] == LONG_LINE[:57]
    assert record["slug"] == generate_slug(LONG_LINE[:57])


def test_description_truncated(record):
    assert len(LONG_LINE) > 160
    assert record["description"] == LONG_LINE[:157] + "..."


def test_block_layout(record):
    children = record["content"]["root"]["children"]
    assert [c["type"] for c in children] == ["heading", "paragraph", "list", "list", "paragraph"]
    assert children[0]["children"][0]["text"] == "?"
    assert [len(c["children"]) for c in children if c["type"] == "list"] == [2, 1]


def test_hashtag_line_dropped(record):
    assert "work-on-myself" not in json.dumps(record["content"])


def test_emphasis_and_links(record):
    children = record["content"]["root"]["children"]
    para = children[1]["children"]
    assert [(t["text"], t["format"]) for t in para][1] == ("actually", 2)
    # list items keep their markers as plain text
    assert children[2]["children"][1]["children"][0]["text"] == "**coffee**"
    assert [t["text"] for t in children[4]["children"]] == ["See ", "my notes", "."]
    assert "example.com" not in json.dumps(children[4])


def test_nested_bullet_indent(record):
    nested = record["content"]["root"]["children"][3]
    assert nested["children"][0]["indent"] == 2
    assert nested["children"][0]["value"] == 1


def test_subheading_dropped(record):
    assert "What helps" not in json.dumps(record["content"])
