"""JSON syntax highlighting for read-only views and editor overlays."""

from casemark.highlight.json_tokens import (
    highlight_json,
    highlight_overlay,
    spans_to_markup,
    to_rich_text,
    tokenize_json,
)

__all__ = [
    "highlight_json",
    "highlight_overlay",
    "spans_to_markup",
    "to_rich_text",
    "tokenize_json",
]
