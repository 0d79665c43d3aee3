"""HTML renderer for structured-text documents."""

import html
import logging
from typing import Optional
from urllib.parse import urlsplit

from casemark.config import get_settings
from casemark.formatting.ir import (
    Bold,
    CodeBlock,
    DocumentNode,
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

logger = logging.getLogger(__name__)


def _escape(text: str) -> str:
    return html.escape(text, quote=False)


class HTMLRenderer(Renderer):
    """Render documents as an HTML fragment.

    All text is escaped. Links whose scheme is not in the allowed list are
    rendered as their label only.
    """

    def __init__(
        self,
        wrapper_class: Optional[str] = "legal-content",
        allowed_schemes: Optional[tuple[str, ...]] = None,
        new_tab: Optional[bool] = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            wrapper_class: Class of the enclosing <div>; None for no wrapper
            allowed_schemes: Link schemes allowed in href (default from settings)
            new_tab: Open links in a new tab (default from settings)
        """
        settings = get_settings()
        self.wrapper_class = wrapper_class
        self.allowed_schemes = (
            settings.link_schemes if allowed_schemes is None else allowed_schemes
        )
        self.new_tab = settings.link_new_tab if new_tab is None else new_tab

    @property
    def name(self) -> str:
        return "html"

    @property
    def extension(self) -> str:
        return ".html"

    def render(self, blocks: list[DocumentNode]) -> str:
        body = super().render(blocks)
        if self.wrapper_class is None:
            return body
        return f'<div class="{html.escape(self.wrapper_class)}">\n{body}\n</div>'

    def render_paragraph(self, block: Paragraph) -> str:
        return f"<p>{self.render_inline(block.inline)}</p>"

    def _render_items(self, items: tuple[InlineNode, ...]) -> str:
        return "\n".join(f"<li>{self.render_inline(item)}</li>" for item in items)

    def render_unordered_list(self, block: UnorderedList) -> str:
        return f"<ul>\n{self._render_items(block.items)}\n</ul>"

    def render_ordered_list(self, block: OrderedList) -> str:
        opening = "<ol>" if block.start == 1 else f'<ol start="{block.start}">'
        return f"{opening}\n{self._render_items(block.items)}\n</ol>"

    def render_code_block(self, block: CodeBlock) -> str:
        class_attr = ""
        if block.language:
            class_attr = f' class="language-{html.escape(block.language)}"'
        return f"<pre><code{class_attr}>{_escape(block.code)}</code></pre>"

    def _render_row(self, table: Table, cells: tuple[InlineNode, ...], tag: str) -> str:
        parts = []
        for column, cell in enumerate(cells):
            alignment = table.alignment(column)
            style = f' style="text-align: {alignment.value}"' if alignment else ""
            parts.append(f"<{tag}{style}>{self.render_inline(cell)}</{tag}>")
        return f"<tr>{''.join(parts)}</tr>"

    def render_table(self, block: Table) -> str:
        lines = [
            "<table>",
            "<thead>",
            self._render_row(block, block.header, "th"),
            "</thead>",
        ]
        if block.rows:
            lines.append("<tbody>")
            lines.extend(self._render_row(block, row, "td") for row in block.rows)
            lines.append("</tbody>")
        lines.append("</table>")
        return "\n".join(lines)

    def render_text(self, node: Text) -> str:
        return _escape(node.literal)

    def render_bold(self, node: Bold) -> str:
        return f"<strong>{self.render_inline(node.child)}</strong>"

    def render_strikethrough(self, node: Strikethrough) -> str:
        return f"<del>{self.render_inline(node.child)}</del>"

    def render_inline_code(self, node: InlineCode) -> str:
        return f"<code>{_escape(node.literal)}</code>"

    def render_link(self, node: Link) -> str:
        label = self.render_inline(node.label)
        if not self.is_safe_target(node.target):
            logger.debug("Dropping link with disallowed target %r", node.target)
            return label

        attrs = f'href="{html.escape(node.target.strip(), quote=True)}"'
        if self.new_tab:
            attrs += ' target="_blank" rel="noopener noreferrer"'
        return f"<a {attrs}>{label}</a>"

    def is_safe_target(self, target: str) -> bool:
        """Check a link target against the allowed schemes.

        Relative targets (no scheme) are always allowed.
        """
        try:
            scheme = urlsplit(target.strip()).scheme
        except ValueError:
            return False
        return not scheme or scheme.lower() in self.allowed_schemes
