"""Intermediate Representation for structured text.

This module defines the node types produced by the block segmenter and the
inline formatter, plus the span type produced by the JSON highlighter. All
nodes are frozen dataclasses: a document tree is rebuilt from raw text on
every render and never mutated afterwards.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


# =============================================================================
# Inline Nodes
# =============================================================================

@dataclass(frozen=True)
class Text:
    """A literal run of text with no styling."""

    literal: str

    def __str__(self) -> str:
        return self.literal


@dataclass(frozen=True)
class Bold:
    """Strong emphasis (``**child**``)."""

    child: "InlineNode"


@dataclass(frozen=True)
class Strikethrough:
    """Struck-out text (``~~child~~``)."""

    child: "InlineNode"


@dataclass(frozen=True)
class InlineCode:
    """Inline code span. The literal is never formatted further."""

    literal: str


@dataclass(frozen=True)
class Link:
    """A hyperlink.

    Attributes:
        label: Formatted link text (may contain bold, strikethrough or code)
        target: Raw link destination, exactly as written
    """

    label: "InlineNode"
    target: str


@dataclass(frozen=True)
class Sequence:
    """Concatenation of two or more inline nodes."""

    children: tuple["InlineNode", ...]


InlineNode = Union[Text, Bold, Strikethrough, InlineCode, Link, Sequence]


def plain_text(node: InlineNode) -> str:
    """Get the text content of an inline node without styling."""
    if isinstance(node, (Text, InlineCode)):
        return node.literal
    if isinstance(node, (Bold, Strikethrough)):
        return plain_text(node.child)
    if isinstance(node, Link):
        return plain_text(node.label)
    if isinstance(node, Sequence):
        return "".join(plain_text(child) for child in node.children)
    raise TypeError(f"Unknown inline node: {node!r}")


# =============================================================================
# Block Nodes
# =============================================================================

class Alignment(str, Enum):
    """Column alignment declared by a table separator cell."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class Paragraph:
    """A single line of formatted text."""

    inline: InlineNode


@dataclass(frozen=True)
class UnorderedList:
    """Consecutive ``* item`` lines."""

    items: tuple[InlineNode, ...]


@dataclass(frozen=True)
class OrderedList:
    """Consecutive ``1. item`` lines.

    Attributes:
        items: Formatted item contents in line order
        start: Number written on the first item
    """

    items: tuple[InlineNode, ...]
    start: int = 1


@dataclass(frozen=True)
class CodeBlock:
    """Fenced code block. Lines are kept verbatim.

    Attributes:
        lines: Raw lines between the fences
        language: Info string following the opening fence, if any
    """

    lines: tuple[str, ...]
    language: Optional[str] = None

    @property
    def code(self) -> str:
        return "\n".join(self.lines)


@dataclass(frozen=True)
class Table:
    """Pipe table with a header row and zero or more body rows.

    Rows are kept ragged: a row may have more or fewer cells than the header.

    Attributes:
        header: Formatted header cells (always at least one)
        rows: Formatted body rows
        alignments: Per-column alignment from the separator row
    """

    header: tuple[InlineNode, ...]
    rows: tuple[tuple[InlineNode, ...], ...] = ()
    alignments: tuple[Optional[Alignment], ...] = ()

    @property
    def column_count(self) -> int:
        """Widest row, header included."""
        return max([len(self.header)] + [len(row) for row in self.rows])

    def alignment(self, column: int) -> Optional[Alignment]:
        """Get the declared alignment of a column, if any."""
        if column < len(self.alignments):
            return self.alignments[column]
        return None


DocumentNode = Union[Paragraph, UnorderedList, OrderedList, CodeBlock, Table]


# =============================================================================
# Highlight Spans
# =============================================================================

class HighlightCategory(str, Enum):
    """Display category of a highlighted JSON token."""

    STRING = "string"
    KEY = "key"
    BOOLEAN = "boolean"
    NULL = "null"
    NUMBER = "number"
    PLAIN = "plain"


@dataclass(frozen=True)
class HighlightSpan:
    """A classified slice of JSON source.

    Attributes:
        category: Token category
        text: Raw source text of the span
        escaped_text: HTML-escaped text, safe to embed in markup
    """

    category: HighlightCategory
    text: str
    escaped_text: str
