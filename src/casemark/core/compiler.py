"""Compilation pipeline: dialect text in, rendered document out."""

import logging
from pathlib import Path
from typing import Optional

from casemark.config import get_settings
from casemark.formatting.inline import InlineFormatter
from casemark.formatting.ir import DocumentNode
from casemark.formatting.parser import MarkdownParser
from casemark.highlight.json_tokens import highlight_json
from casemark.renderers import Renderer, get_renderer

logger = logging.getLogger(__name__)


class CompilationError(Exception):
    """Error reading or writing a file during compilation."""

    pass


class StructuredTextCompiler:
    """Orchestrates the structured-text pipeline.

    Pipeline:
    1. Read input text (from a string or a UTF-8 file)
    2. Segment lines into block nodes, resolving inline styles per leaf
    3. Render the block list with the selected renderer
    4. Optionally write the result to a file
    """

    def __init__(
        self,
        output_format: Optional[str] = None,
        max_inline_depth: Optional[int] = None,
        renderer: Optional[Renderer] = None,
    ) -> None:
        """Initialize the compiler.

        Args:
            output_format: Renderer name (default from settings)
            max_inline_depth: Inline nesting cap (default from settings)
            renderer: Ready-made renderer, overrides output_format

        Raises:
            ValueError: If output_format is not a known renderer
        """
        settings = get_settings()
        self.output_format = (output_format or settings.default_output_format).lower()
        self.renderer = renderer or get_renderer(self.output_format)()
        self.parser = MarkdownParser(InlineFormatter(max_depth=max_inline_depth))

    def parse(self, text: Optional[str]) -> list[DocumentNode]:
        """Segment text into block nodes without rendering."""
        return self.parser.parse(text)

    def compile(self, text: Optional[str]) -> str:
        """Parse and render text in one step."""
        blocks = self.parser.parse(text)
        logger.debug(
            "Parsed %d block(s); rendering as %s", len(blocks), self.renderer.name
        )
        return self.renderer.render(blocks)

    def compile_file(
        self,
        input_path: Path,
        output_path: Optional[Path] = None,
    ) -> str:
        """Compile a UTF-8 text file.

        Args:
            input_path: Path to the dialect source
            output_path: Optional path to write the rendered output to

        Returns:
            The rendered output

        Raises:
            CompilationError: If the input cannot be read or the output written
        """
        text = read_text(input_path)
        rendered = self.compile(text)

        if output_path is not None:
            try:
                output_path.write_text(rendered, encoding="utf-8")
            except OSError as e:
                raise CompilationError(f"Cannot write {output_path}: {e}") from e

        return rendered


def read_text(path: Path) -> str:
    """Read a UTF-8 file, wrapping I/O and decoding failures.

    Raises:
        CompilationError: If the file is missing, unreadable or not UTF-8
    """
    if not path.exists():
        raise CompilationError(f"Input file not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CompilationError(f"Cannot read {path}: {e}") from e


def highlight_file(path: Path, class_prefix: Optional[str] = None) -> str:
    """Read a JSON file and return its highlighted markup."""
    return highlight_json(read_text(path), class_prefix)
