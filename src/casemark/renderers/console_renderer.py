"""Terminal renderer built on rich."""

from typing import Union

from rich.console import Console, Group, RenderableType
from rich.style import Style
from rich.syntax import Syntax
from rich.table import Table as RichTable
from rich.text import Text as RichText

from casemark.formatting.ir import (
    Bold,
    CodeBlock,
    DocumentNode,
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
)
from casemark.renderers.base import Renderer


class ConsoleRenderer(Renderer):
    """Render documents as rich renderables for terminal display.

    Inline nodes become styled ``rich.text.Text`` objects, tables become
    ``rich.table.Table`` and code blocks ``rich.syntax.Syntax``.
    """

    CODE_STYLE = "bold cyan"
    CODE_THEME = "ansi_dark"

    def __init__(self, width: int = 100) -> None:
        """Initialize the renderer.

        Args:
            width: Console width used when rendering to a string
        """
        self.width = width

    @property
    def name(self) -> str:
        return "console"

    @property
    def extension(self) -> str:
        return ".txt"

    def to_renderable(self, blocks: list[DocumentNode]) -> Group:
        """Build a rich Group holding one renderable per block."""
        return Group(*(self.render_block(block) for block in blocks))

    def render(self, blocks: list[DocumentNode]) -> str:
        """Render to uncoloured text laid out by rich."""
        console = Console(width=self.width, color_system=None, force_terminal=False)
        with console.capture() as capture:
            console.print(self.to_renderable(blocks))
        return capture.get()

    def render_paragraph(self, block: Paragraph) -> RenderableType:
        return self.render_inline(block.inline)

    def _render_items(self, markers: list[str], items: tuple[InlineNode, ...]) -> RichText:
        lines = []
        for marker, item in zip(markers, items):
            line = RichText(f"{marker} ")
            line.append_text(self.render_inline(item))
            lines.append(line)
        return RichText("\n").join(lines)

    def render_unordered_list(self, block: UnorderedList) -> RenderableType:
        return self._render_items(["•"] * len(block.items), block.items)

    def render_ordered_list(self, block: OrderedList) -> RenderableType:
        markers = [
            f"{number}." for number in range(block.start, block.start + len(block.items))
        ]
        return self._render_items(markers, block.items)

    def render_code_block(self, block: CodeBlock) -> RenderableType:
        return Syntax(
            block.code,
            block.language or "text",
            theme=self.CODE_THEME,
            background_color="default",
        )

    def render_table(self, block: Table) -> RenderableType:
        table = RichTable(show_lines=False)
        for column in range(block.column_count):
            header = block.header[column] if column < len(block.header) else Text("")
            alignment = block.alignment(column)
            table.add_column(
                self.render_inline(header),
                justify=alignment.value if alignment else "left",
            )
        for row in block.rows:
            table.add_row(*(self.render_inline(cell) for cell in row))
        return table

    def render_text(self, node: Text) -> RichText:
        return RichText(node.literal)

    def _styled(self, node: InlineNode, style: Union[str, Style]) -> RichText:
        text = self.render_inline(node)
        text.stylize(style)
        return text

    def render_bold(self, node: Bold) -> RichText:
        return self._styled(node.child, "bold")

    def render_strikethrough(self, node: Strikethrough) -> RichText:
        return self._styled(node.child, "strike")

    def render_inline_code(self, node: InlineCode) -> RichText:
        return RichText(node.literal, style=self.CODE_STYLE)

    def render_link(self, node: Link) -> RichText:
        return self._styled(node.label, Style(underline=True, link=node.target))

    def render_sequence(self, node: Sequence) -> RichText:
        text = RichText()
        for child in node.children:
            text.append_text(self.render_inline(child))
        return text
