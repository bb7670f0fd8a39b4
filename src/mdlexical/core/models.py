"""Document tree models: inline spans, blocks, and the converted-document envelope"""

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


# --- inline spans ---

class PlainText(_Node):
    """Unformatted run of text (also used for link anchor text)."""
    type:   Literal['text'] = 'text'
    format: Literal['plain'] = 'plain'
    text:   str


class Bold(_Node):
    type:   Literal['text'] = 'text'
    format: Literal['bold'] = 'bold'
    text:   str


class Italic(_Node):
    type:   Literal['text'] = 'text'
    format: Literal['italic'] = 'italic'
    text:   str


Span = Annotated[Union[PlainText, Bold, Italic], Field(discriminator='format')]


# --- blocks ---

class Heading(_Node):
    type:  Literal['heading'] = 'heading'
    level: int = Field(ge=1, le=6)
    spans: tuple[Span, ...]


class Paragraph(_Node):
    type:  Literal['paragraph'] = 'paragraph'
    spans: tuple[Span, ...]


class ListItem(_Node):
    type:    Literal['listitem'] = 'listitem'
    spans:   tuple[Span, ...]
    ordinal: int = Field(ge=1, description="1-based position within the parent list")


class List(_Node):
    """Flat bullet list; items shared one indent level when accumulated."""
    type:   Literal['list'] = 'list'
    items:  tuple[ListItem, ...]
    indent: int = Field(default=0, ge=0)

    @model_validator(mode='after')
    def _check_ordinals(self) -> 'List':
        ordinals = [item.ordinal for item in self.items]
        if ordinals != list(range(1, len(ordinals) + 1)):
            raise ValueError(f"list item ordinals must run 1..n in order, got {ordinals}")
        return self


Block = Annotated[Union[Heading, Paragraph, List, ListItem], Field(discriminator='type')]


class Root(_Node):
    """Ordered top-level blocks of one converted document."""
    type:   Literal['root'] = 'root'
    blocks: tuple[Block, ...] = ()


# --- converted document ---

class DocumentMeta(_Node):
    title:       str
    slug:        str
    description: str


class ConvertedDoc(BaseModel):
    """A source document converted for the content store: metadata plus tree."""
    slug:        str
    path:        str
    title:       str
    description: str
    hash:        str                     # sha256 of the raw file, frontmatter included
    frontmatter: dict[str, Any] = {}
    content:     Root


@dataclass
class SourceDoc:
    """Internal read result for one markdown file; not persisted."""
    path:         Path
    raw_markdown: str          # full file content (includes frontmatter)
    markdown:     str          # body handed to the converter
    frontmatter:  dict[str, Any]
