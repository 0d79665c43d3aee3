"""Document renderers for casemark."""

from casemark.renderers.base import Renderer
from casemark.renderers.console_renderer import ConsoleRenderer
from casemark.renderers.html_renderer import HTMLRenderer
from casemark.renderers.text_renderer import MarkdownRenderer, PlainTextRenderer

__all__ = [
    "Renderer",
    "ConsoleRenderer",
    "HTMLRenderer",
    "MarkdownRenderer",
    "PlainTextRenderer",
]

# Map output format names to renderers
RENDERER_MAP: dict[str, type[Renderer]] = {
    "html": HTMLRenderer,
    "text": PlainTextRenderer,
    "markdown": MarkdownRenderer,
    "console": ConsoleRenderer,
}

SUPPORTED_FORMATS = tuple(RENDERER_MAP.keys())


def get_renderer(name: str) -> type[Renderer]:
    """Get the renderer class for an output format name."""
    key = name.lower()
    if key not in RENDERER_MAP:
        raise ValueError(
            f"Unsupported output format: {name}. "
            f"Supported formats: {', '.join(SUPPORTED_FORMATS)}"
        )
    return RENDERER_MAP[key]
