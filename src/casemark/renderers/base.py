"""Abstract base class for document renderers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

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


class Renderer(ABC):
    """Abstract base class for document renderers.

    Subclasses implement one method per node type. Dispatch over the closed
    set of node types lives here, so a new node type only has to be added in
    one place before every renderer fails loudly on it.
    """

    block_separator = "\n"

    @property
    @abstractmethod
    def name(self) -> str:
        """Output format name used on the command line (e.g. 'html')."""
        ...

    @property
    @abstractmethod
    def extension(self) -> str:
        """File extension for written output (e.g. '.html')."""
        ...

    def render(self, blocks: list[DocumentNode]) -> str:
        """Render a block list to a string."""
        return self.block_separator.join(self.render_block(block) for block in blocks)

    def write(self, blocks: list[DocumentNode], path: Path) -> None:
        """Render a block list and write it to a file."""
        path.write_text(self.render(blocks), encoding="utf-8")

    def render_block(self, block: DocumentNode) -> Any:
        if isinstance(block, Paragraph):
            return self.render_paragraph(block)
        if isinstance(block, UnorderedList):
            return self.render_unordered_list(block)
        if isinstance(block, OrderedList):
            return self.render_ordered_list(block)
        if isinstance(block, CodeBlock):
            return self.render_code_block(block)
        if isinstance(block, Table):
            return self.render_table(block)
        raise TypeError(f"Unknown block node: {block!r}")

    def render_inline(self, node: InlineNode) -> Any:
        if isinstance(node, Text):
            return self.render_text(node)
        if isinstance(node, Bold):
            return self.render_bold(node)
        if isinstance(node, Strikethrough):
            return self.render_strikethrough(node)
        if isinstance(node, InlineCode):
            return self.render_inline_code(node)
        if isinstance(node, Link):
            return self.render_link(node)
        if isinstance(node, Sequence):
            return self.render_sequence(node)
        raise TypeError(f"Unknown inline node: {node!r}")

    # Block nodes

    @abstractmethod
    def render_paragraph(self, block: Paragraph) -> Any: ...

    @abstractmethod
    def render_unordered_list(self, block: UnorderedList) -> Any: ...

    @abstractmethod
    def render_ordered_list(self, block: OrderedList) -> Any: ...

    @abstractmethod
    def render_code_block(self, block: CodeBlock) -> Any: ...

    @abstractmethod
    def render_table(self, block: Table) -> Any: ...

    # Inline nodes

    @abstractmethod
    def render_text(self, node: Text) -> Any: ...

    @abstractmethod
    def render_bold(self, node: Bold) -> Any: ...

    @abstractmethod
    def render_strikethrough(self, node: Strikethrough) -> Any: ...

    @abstractmethod
    def render_inline_code(self, node: InlineCode) -> Any: ...

    @abstractmethod
    def render_link(self, node: Link) -> Any: ...

    def render_sequence(self, node: Sequence) -> Any:
        """Concatenate rendered children. Override for non-string output."""
        return "".join(self.render_inline(child) for child in node.children)
