"""casemark - structured-text compiler and JSON highlighter."""

__version__ = "0.1.0"

from casemark.formatting.inline import format_inline
from casemark.formatting.parser import segment_blocks
from casemark.highlight.json_tokens import highlight_json

__all__ = [
    "__version__",
    "format_inline",
    "segment_blocks",
    "highlight_json",
]
