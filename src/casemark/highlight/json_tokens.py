"""JSON token highlighter.

Classifies substrings of JSON source as strings, keys, booleans, nulls and
numbers without parsing the document, so partial or invalid input still gets
highlighted. Classification runs as ordered passes over the offset ranges no
earlier pass has claimed; output escaping is applied per span afterwards.
"""

import html
import re
from typing import Callable, Optional

from rich.text import Text as RichText

from casemark.config import get_settings
from casemark.formatting.ir import HighlightCategory, HighlightSpan

# (start, end, category) over the raw source
_Range = tuple[int, int, HighlightCategory]

STRING_PATTERN = re.compile(r'"(?:\\u[a-zA-Z0-9]{4}|\\[^u]|[^\\"])*"')
KEY_SUFFIX_PATTERN = re.compile(r"\s*:")
BOOLEAN_PATTERN = re.compile(r"\b(?:true|false)\b")
NULL_PATTERN = re.compile(r"\bnull\b")
NUMBER_PATTERN = re.compile(r"-?\b\d+(?:\.\d+)?(?:[eE][+\-]?\d+)?\b")

RICH_STYLES: dict[HighlightCategory, str] = {
    HighlightCategory.STRING: "green",
    HighlightCategory.KEY: "bold blue",
    HighlightCategory.BOOLEAN: "magenta",
    HighlightCategory.NULL: "dim magenta",
    HighlightCategory.NUMBER: "cyan",
    HighlightCategory.PLAIN: "",
}


def _classify_string(source: str, match: re.Match) -> HighlightCategory:
    if KEY_SUFFIX_PATTERN.match(source, match.end()):
        return HighlightCategory.KEY
    return HighlightCategory.STRING


def _fixed(category: HighlightCategory) -> Callable[[str, re.Match], HighlightCategory]:
    return lambda source, match: category


# Pass order matters: strings must be claimed before words and numbers so
# digits inside a quoted value are never tagged separately.
PASSES: tuple[tuple[re.Pattern, Callable[[str, re.Match], HighlightCategory]], ...] = (
    (STRING_PATTERN, _classify_string),
    (BOOLEAN_PATTERN, _fixed(HighlightCategory.BOOLEAN)),
    (NULL_PATTERN, _fixed(HighlightCategory.NULL)),
    (NUMBER_PATTERN, _fixed(HighlightCategory.NUMBER)),
)


def _apply_pass(
    source: str,
    ranges: list[_Range],
    pattern: re.Pattern,
    classify: Callable[[str, re.Match], HighlightCategory],
) -> list[_Range]:
    """Split every unclaimed range around the matches of one pattern."""
    result: list[_Range] = []
    for start, end, category in ranges:
        if category is not HighlightCategory.PLAIN:
            result.append((start, end, category))
            continue

        pos = start
        for match in pattern.finditer(source, start, end):
            if match.start() == match.end():
                continue
            if match.start() > pos:
                result.append((pos, match.start(), HighlightCategory.PLAIN))
            result.append((match.start(), match.end(), classify(source, match)))
            pos = match.end()
        if pos < end:
            result.append((pos, end, HighlightCategory.PLAIN))
    return result


def tokenize_json(text: Optional[str]) -> list[HighlightSpan]:
    """Classify JSON source into ordered, non-overlapping spans.

    Args:
        text: Raw JSON text (valid, partial or not JSON at all)

    Returns:
        Spans whose escaped texts concatenate to the escaped source
    """
    if not text:
        return []

    ranges: list[_Range] = [(0, len(text), HighlightCategory.PLAIN)]
    for pattern, classify in PASSES:
        ranges = _apply_pass(text, ranges, pattern, classify)

    spans: list[HighlightSpan] = []
    for start, end, category in ranges:
        raw = text[start:end]
        spans.append(
            HighlightSpan(
                category=category,
                text=raw,
                escaped_text=html.escape(raw, quote=False),
            )
        )
    return spans


def spans_to_markup(spans: list[HighlightSpan], class_prefix: Optional[str] = None) -> str:
    """Join spans into escaped markup with one ``<span>`` per token."""
    prefix = get_settings().highlight_class_prefix if class_prefix is None else class_prefix
    parts: list[str] = []
    for span in spans:
        if span.category is HighlightCategory.PLAIN:
            parts.append(span.escaped_text)
        else:
            parts.append(
                f'<span class="{prefix}{span.category.value}">{span.escaped_text}</span>'
            )
    return "".join(parts)


def highlight_json(text: Optional[str], class_prefix: Optional[str] = None) -> str:
    """Highlight JSON source as escaped, category-tagged markup."""
    return spans_to_markup(tokenize_json(text), class_prefix)


def highlight_overlay(text: Optional[str], class_prefix: Optional[str] = None) -> str:
    """Markup for an overlay drawn over an editable text area.

    A trailing newline gets a space appended so the overlay keeps the same
    number of rendered lines as the text area underneath it.
    """
    markup = highlight_json(text, class_prefix)
    if text and text.endswith("\n"):
        markup += " "
    return markup


def to_rich_text(spans: list[HighlightSpan]) -> RichText:
    """Build a styled rich Text from highlight spans for terminal output."""
    rich_text = RichText()
    for span in spans:
        rich_text.append(span.text, style=RICH_STYLES[span.category] or None)
    return rich_text
