"""Plain text and markdown renderers."""

from casemark.formatting.ir import (
    Alignment,
    Bold,
    CodeBlock,
    InlineCode,
    InlineNode,
    Link,
    OrderedList,
    Paragraph,
    Strikethrough,
    Table,
    Text,
    UnorderedList,
)
from casemark.renderers.base import Renderer


class PlainTextRenderer(Renderer):
    """Render documents as plain text with all styling removed.

    Paragraphs come out exactly as written, one per line, so text without
    any dialect syntax survives a parse/render cycle unchanged (blank lines
    aside).
    """

    BULLET = "•"

    @property
    def name(self) -> str:
        return "text"

    @property
    def extension(self) -> str:
        return ".txt"

    def render_paragraph(self, block: Paragraph) -> str:
        return self.render_inline(block.inline)

    def render_unordered_list(self, block: UnorderedList) -> str:
        return "\n".join(f"{self.BULLET} {self.render_inline(item)}" for item in block.items)

    def render_ordered_list(self, block: OrderedList) -> str:
        return "\n".join(
            f"{number}. {self.render_inline(item)}"
            for number, item in enumerate(block.items, start=block.start)
        )

    def render_code_block(self, block: CodeBlock) -> str:
        return block.code

    def _render_row(self, cells: tuple[InlineNode, ...]) -> str:
        return " | ".join(self.render_inline(cell) for cell in cells)

    def render_table(self, block: Table) -> str:
        lines = [self._render_row(block.header)]
        lines.extend(self._render_row(row) for row in block.rows)
        return "\n".join(lines)

    def render_text(self, node: Text) -> str:
        return node.literal

    def render_bold(self, node: Bold) -> str:
        return self.render_inline(node.child)

    def render_strikethrough(self, node: Strikethrough) -> str:
        return self.render_inline(node.child)

    def render_inline_code(self, node: InlineCode) -> str:
        return node.literal

    def render_link(self, node: Link) -> str:
        return self.render_inline(node.label)


class MarkdownRenderer(PlainTextRenderer):
    """Serialize documents back to the structured-text dialect."""

    block_separator = "\n\n"

    SEPARATOR_CELLS = {
        None: "---",
        Alignment.LEFT: ":---",
        Alignment.CENTER: ":---:",
        Alignment.RIGHT: "---:",
    }

    @property
    def name(self) -> str:
        return "markdown"

    @property
    def extension(self) -> str:
        return ".md"

    def render_unordered_list(self, block: UnorderedList) -> str:
        return "\n".join(f"* {self.render_inline(item)}" for item in block.items)

    def render_code_block(self, block: CodeBlock) -> str:
        lines = ["```" + (block.language or "")]
        lines.extend(block.lines)
        lines.append("```")
        return "\n".join(lines)

    def _render_row(self, cells: tuple[InlineNode, ...]) -> str:
        return "| " + " | ".join(self.render_inline(cell) for cell in cells) + " |"

    def render_table(self, block: Table) -> str:
        separator = [
            self.SEPARATOR_CELLS[block.alignment(column)]
            for column in range(len(block.header))
        ]
        lines = [self._render_row(block.header), "| " + " | ".join(separator) + " |"]
        lines.extend(self._render_row(row) for row in block.rows)
        return "\n".join(lines)

    def render_bold(self, node: Bold) -> str:
        return f"**{self.render_inline(node.child)}**"

    def render_strikethrough(self, node: Strikethrough) -> str:
        return f"~~{self.render_inline(node.child)}~~"

    def render_inline_code(self, node: InlineCode) -> str:
        return f"`{node.literal}`"

    def render_link(self, node: Link) -> str:
        return f"[{self.render_inline(node.label)}]({node.target})"
