"""Block segmenter: groups dialect lines into typed block nodes."""

import logging
import re
from typing import Optional

from casemark.formatting.inline import InlineFormatter
from casemark.formatting.ir import (
    Alignment,
    CodeBlock,
    DocumentNode,
    InlineNode,
    OrderedList,
    Paragraph,
    Table,
    UnorderedList,
)

logger = logging.getLogger(__name__)


def split_cells(line: str) -> list[str]:
    """Split a table line into trimmed cell texts.

    One leading and one trailing pipe are dropped before splitting, so
    ``| a | b |`` and ``a | b`` both give ``["a", "b"]``.
    """
    row = line.strip()
    if row.startswith("|"):
        row = row[1:]
    if row.endswith("|"):
        row = row[:-1]
    return [cell.strip() for cell in row.split("|")]


def _item_number(digits: str) -> int:
    """Convert an ordered item number, falling back to 1 when it is too long."""
    try:
        return int(digits)
    except ValueError:
        logger.debug("Ordered item number has %d digits, starting at 1", len(digits))
        return 1


class MarkdownParser:
    """Parse the structured-text dialect into a flat list of block nodes.

    Supported blocks:
    - paragraphs (one per non-blank line)
    - ``* item`` unordered lists
    - ``1. item`` ordered lists
    - fenced code blocks
    - pipe tables with a separator row
    """

    FENCE = "```"
    BULLET = "* "
    ORDERED_ITEM_PATTERN = re.compile(r"^(\d+)\.\s")
    SEPARATOR_CELL_PATTERN = re.compile(r"^\s*(:?)-+(:?)\s*$")

    def __init__(self, inline_formatter: Optional[InlineFormatter] = None) -> None:
        """Initialize the parser.

        Args:
            inline_formatter: Formatter used for paragraph, item and cell text
        """
        self.inline = inline_formatter or InlineFormatter()

    def parse(self, text: Optional[str]) -> list[DocumentNode]:
        """Convert dialect text into block nodes.

        Args:
            text: Raw text, possibly empty or None

        Returns:
            Block nodes in line order
        """
        if not text:
            return []

        return _Segmenter(self, text.split("\n")).run()

    def is_separator_row(self, line: str) -> bool:
        """Check whether a line confirms the table header above it."""
        if "|" not in line:
            return False
        cells = split_cells(line)
        return bool(cells) and all(
            self.SEPARATOR_CELL_PATTERN.match(cell) for cell in cells
        )

    def separator_alignments(self, line: str) -> tuple[Optional[Alignment], ...]:
        """Read column alignments from a separator row."""
        alignments: list[Optional[Alignment]] = []
        for cell in split_cells(line):
            match = self.SEPARATOR_CELL_PATTERN.match(cell)
            left, right = (match.group(1), match.group(2)) if match else ("", "")
            if left and right:
                alignments.append(Alignment.CENTER)
            elif right:
                alignments.append(Alignment.RIGHT)
            elif left:
                alignments.append(Alignment.LEFT)
            else:
                alignments.append(None)
        return tuple(alignments)

    def format_cells(self, line: str) -> tuple[InlineNode, ...]:
        return tuple(self.inline.format(cell) for cell in split_cells(line))


class _Segmenter:
    """Single forward pass over the lines of one document.

    Holds the open accumulator (a list kind or a code block) between lines.
    """

    def __init__(self, parser: MarkdownParser, lines: list[str]) -> None:
        self.parser = parser
        self.lines = lines
        self.blocks: list[DocumentNode] = []

        self.list_kind: Optional[type] = None
        self.list_items: list[InlineNode] = []
        self.list_start = 1

        self.in_code = False
        self.code_lines: list[str] = []
        self.code_language: Optional[str] = None

    def run(self) -> list[DocumentNode]:
        index = 0
        while index < len(self.lines):
            index = self._step(index)

        if self.in_code:
            logger.debug(
                "Unterminated code fence; flushing %d buffered line(s)",
                len(self.code_lines),
            )
            self._flush_code()
        self._flush_list()
        return self.blocks

    def _step(self, index: int) -> int:
        """Consume the line at ``index`` and return the next index to read."""
        line = self.lines[index]
        stripped = line.strip()

        if stripped.startswith(MarkdownParser.FENCE):
            if self.in_code:
                self._flush_code()
            else:
                self._flush_list()
                self.in_code = True
                self.code_language = stripped[len(MarkdownParser.FENCE):].strip() or None
            return index + 1

        if self.in_code:
            self.code_lines.append(line)
            return index + 1

        if self._starts_table(index):
            return self._consume_table(index)

        if stripped.startswith(MarkdownParser.BULLET):
            self._add_item(UnorderedList, stripped[len(MarkdownParser.BULLET):])
            return index + 1

        match = MarkdownParser.ORDERED_ITEM_PATTERN.match(stripped)
        if match:
            number = _item_number(match.group(1))
            self._add_item(OrderedList, stripped[match.end():], number)
            return index + 1

        self._flush_list()
        if stripped:
            self.blocks.append(Paragraph(self.parser.inline.format(line)))
        return index + 1

    def _starts_table(self, index: int) -> bool:
        return (
            "|" in self.lines[index]
            and index + 1 < len(self.lines)
            and self.parser.is_separator_row(self.lines[index + 1])
        )

    def _consume_table(self, index: int) -> int:
        self._flush_list()
        header = self.parser.format_cells(self.lines[index])
        alignments = self.parser.separator_alignments(self.lines[index + 1])

        rows: list[tuple[InlineNode, ...]] = []
        index += 2
        while index < len(self.lines) and "|" in self.lines[index]:
            rows.append(self.parser.format_cells(self.lines[index]))
            index += 1

        logger.debug(
            "Table with %d column(s) and %d row(s)", len(header), len(rows)
        )
        self.blocks.append(
            Table(header=header, rows=tuple(rows), alignments=alignments)
        )
        return index

    def _add_item(self, kind: type, content: str, number: int = 1) -> None:
        if self.list_kind is not kind:
            self._flush_list()
            self.list_kind = kind
            self.list_start = number
        self.list_items.append(self.parser.inline.format(content))

    def _flush_list(self) -> None:
        if self.list_kind is None:
            return
        if self.list_kind is OrderedList:
            self.blocks.append(
                OrderedList(items=tuple(self.list_items), start=self.list_start)
            )
        else:
            self.blocks.append(UnorderedList(items=tuple(self.list_items)))
        self.list_kind = None
        self.list_items = []
        self.list_start = 1

    def _flush_code(self) -> None:
        self.blocks.append(
            CodeBlock(lines=tuple(self.code_lines), language=self.code_language)
        )
        self.in_code = False
        self.code_lines = []
        self.code_language = None


def segment_blocks(text: Optional[str]) -> list[DocumentNode]:
    """Split ``text`` into block nodes with inline content resolved."""
    return MarkdownParser().parse(text)
