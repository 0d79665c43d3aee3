"""Inline formatter: resolves bold, strikethrough, code and links."""

import logging
import re
from typing import Optional

from casemark.config import get_settings
from casemark.formatting.ir import (
    Bold,
    InlineCode,
    InlineNode,
    Link,
    Sequence,
    Strikethrough,
    Text,
)

logger = logging.getLogger(__name__)


class InlineFormatter:
    """Parse inline markdown into a nested InlineNode tree."""

    # Order matters: at equal start offsets the earlier alternative wins,
    # so precedence is link, bold, strikethrough, code.
    INLINE_PATTERN = re.compile(
        r"\[(?P<label>[^\]]+)\]\((?P<target>[^)]+)\)"
        r"|\*\*(?P<bold>.*?)\*\*"
        r"|~~(?P<strike>.*?)~~"
        r"|`(?P<code>[^`]+)`"
    )

    def __init__(self, max_depth: Optional[int] = None) -> None:
        """Initialize the formatter.

        Args:
            max_depth: Deepest nesting level that is still resolved
                (default from settings). Text nested deeper stays literal.
        """
        settings = get_settings()
        self.max_depth = settings.max_inline_depth if max_depth is None else max_depth

    def format(self, text: Optional[str]) -> InlineNode:
        """Convert inline markdown to an InlineNode.

        Args:
            text: Text of a paragraph, list item or table cell

        Returns:
            A single node, or a Sequence when the text has several parts
        """
        if not text:
            return Text("")
        return self._format(text, 0)

    def _format(self, text: str, depth: int) -> InlineNode:
        if depth > self.max_depth:
            if self.INLINE_PATTERN.search(text):
                logger.warning(
                    "Inline nesting deeper than %d levels; keeping %r as text",
                    self.max_depth,
                    text,
                )
            return Text(text)

        children: list[InlineNode] = []
        pos = 0

        for match in self.INLINE_PATTERN.finditer(text):
            if match.start() > pos:
                children.append(Text(text[pos : match.start()]))
            children.append(self._build_node(match, depth))
            pos = match.end()

        if pos < len(text):
            children.append(Text(text[pos:]))

        if not children:
            return Text("")
        if len(children) == 1:
            return children[0]
        return Sequence(tuple(children))

    def _build_node(self, match: re.Match, depth: int) -> InlineNode:
        """Turn one alternation match into its typed node."""
        kind = match.lastgroup
        if kind == "target":
            return Link(
                label=self._format(match.group("label"), depth + 1),
                target=match.group("target"),
            )
        if kind == "bold":
            return Bold(self._format(match.group("bold"), depth + 1))
        if kind == "strike":
            return Strikethrough(self._format(match.group("strike"), depth + 1))
        return InlineCode(match.group("code"))


def format_inline(text: Optional[str], max_depth: Optional[int] = None) -> InlineNode:
    """Resolve inline styles in ``text``. Never raises."""
    return InlineFormatter(max_depth=max_depth).format(text)
