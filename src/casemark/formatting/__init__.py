"""Parsing of the structured-text dialect into a typed document tree."""

from casemark.formatting.ir import (
    Alignment,
    Bold,
    CodeBlock,
    DocumentNode,
    HighlightCategory,
    HighlightSpan,
    InlineCode,
    InlineNode,
    Link,
    OrderedList,
    Paragraph,
    Sequence,
    Strikethrough,
    Table,
    Text,
    UnorderedList,
    plain_text,
)
from casemark.formatting.inline import InlineFormatter, format_inline
from casemark.formatting.parser import MarkdownParser, segment_blocks

__all__ = [
    "Alignment",
    "Bold",
    "CodeBlock",
    "DocumentNode",
    "HighlightCategory",
    "HighlightSpan",
    "InlineCode",
    "InlineNode",
    "Link",
    "OrderedList",
    "Paragraph",
    "Sequence",
    "Strikethrough",
    "Table",
    "Text",
    "UnorderedList",
    "plain_text",
    "InlineFormatter",
    "format_inline",
    "MarkdownParser",
    "segment_blocks",
]
