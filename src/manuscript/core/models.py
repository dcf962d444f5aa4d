"""Data models for parsed manuscripts, inline tokens, and internal link metadata"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# --- blocks ---

class Paragraph(_Frozen):
    """Consecutive prose lines joined with a single space."""
    type: Literal["paragraph"] = "paragraph"
    text: str


class Heading(_Frozen):
    """A '## ' or '### ' line. id is 'h{level}-{lineIndex}', unique within one parse."""
    type: Literal["heading"] = "heading"
    id: str
    text: str
    level: Literal[2, 3]


class ListBlock(_Frozen):
    """A run of '- ' items."""
    type: Literal["list"] = "list"
    items: list[str]


Block = Annotated[Union[Paragraph, Heading, ListBlock], Field(discriminator="type")]


class ParsedManuscript(_Frozen):
    blocks: list[Block] = []
    headings: list[Heading] = []


# --- inline tokens ---

class TextToken(_Frozen):
    type: Literal["text"] = "text"
    value: str


class BoldToken(_Frozen):
    """Bold span; value is the raw content, children its tokenization."""
    type: Literal["bold"] = "bold"
    value: str
    children: list["InlineToken"] = []


class LinkToken(_Frozen):
    type: Literal["link"] = "link"
    label: str
    href: str

    @property
    def is_internal(self) -> bool:
        """Internal hrefs render as emphasized text; navigation goes through cards."""
        return self.href.startswith("/")


class TooltipToken(_Frozen):
    type: Literal["tooltip"] = "tooltip"
    term: str
    tip: str


InlineToken = Annotated[
    Union[TextToken, BoldToken, LinkToken, TooltipToken],
    Field(discriminator="type"),
]

BoldToken.model_rebuild()


# --- internal links ---

class ExtractedText(_Frozen):
    """Display-ready text plus internal hrefs (deduplicated, first-seen order)."""
    text: str
    internal_hrefs: list[str] = []


class LinkKind(str, Enum):
    GUIDE = "GUIDE"
    COLUMN = "COLUMN"
    CARS = "CARS"
    HERITAGE = "HERITAGE"
    PAGE = "PAGE"


class InternalLinkMeta(_Frozen):
    title: str
    kind: LinkKind


class LinkCard(_Frozen):
    """A navigation card for one extracted internal href."""
    href: str
    title: str
    kind: LinkKind


class AnnotatedText(_Frozen):
    """Renderer-ready span: cleaned text, its inline tokens, and its link cards."""
    text: str
    tokens: list[InlineToken] = []
    cards: list[LinkCard] = []


# --- section helpers ---

class StepHeading(_Frozen):
    id: str
    step_number: int
    label: str


class QuickSection(_Frozen):
    """Summary of one level-2 section: leading bullets and a few paragraphs."""
    id: str
    title: str
    bullets: list[str] = []
    paragraphs: list[str] = []


class QuickCard(_Frozen):
    """A short takeaway card built from one picked section."""
    id: str
    title: str
    bullets: list[str] = []


class AnnotatedBlock(_Frozen):
    """A block paired with annotated text for its paragraph or each list item."""
    block: Block
    spans: list[AnnotatedText] = []
