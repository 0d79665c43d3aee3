"""Command-line interface for casemark."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from casemark import __version__
from casemark.config import get_settings
from casemark.core.compiler import (
    CompilationError,
    StructuredTextCompiler,
    highlight_file,
    read_text,
)
from casemark.highlight.json_tokens import to_rich_text, tokenize_json
from casemark.logging_utils import configure_logging
from casemark.renderers import SUPPORTED_FORMATS, ConsoleRenderer

app = typer.Typer(
    name="casemark",
    help="Compile structured case-analysis text and highlight JSON records.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"casemark v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Structured-text compiler for case-analysis documents."""
    configure_logging(get_settings().log_level, verbose=verbose)


@app.command()
def render(
    path: Path = typer.Argument(
        ...,
        help="Dialect text file to compile",
        exists=True,
        dir_okay=False,
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help=f"Output format: {', '.join(SUPPORTED_FORMATS)} (default: html)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write output to this file instead of stdout",
    ),
    max_depth: Optional[int] = typer.Option(
        None,
        "--max-depth",
        min=1,
        help="Deepest inline nesting that is still formatted",
    ),
) -> None:
    """
    Compile a structured-text file.

    Examples:

        casemark render ruling.md

        casemark render ruling.md --format text

        casemark render ruling.md -f html -o ruling.html
    """
    try:
        compiler = StructuredTextCompiler(
            output_format=output_format, max_inline_depth=max_depth
        )
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    try:
        if isinstance(compiler.renderer, ConsoleRenderer) and output is None:
            blocks = compiler.parse(read_text(path))
            console.print(compiler.renderer.to_renderable(blocks))
            return

        rendered = compiler.compile_file(path, output)
    except CompilationError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if output is None:
        typer.echo(rendered)
    else:
        console.print(f"[green]Success:[/green] {output}")


@app.command()
def highlight(
    path: Path = typer.Argument(
        ...,
        help="JSON file to highlight (need not be valid JSON)",
        exists=True,
        dir_okay=False,
    ),
    as_html: bool = typer.Option(
        False,
        "--html",
        help="Emit escaped HTML markup instead of coloured terminal output",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write HTML markup to this file (implies --html)",
    ),
) -> None:
    """
    Highlight JSON source.

    Examples:

        casemark highlight analysis.json

        casemark highlight analysis.json --html -o analysis.html
    """
    try:
        if output is not None:
            output.write_text(highlight_file(path), encoding="utf-8")
            console.print(f"[green]Success:[/green] {output}")
            return

        if as_html:
            typer.echo(highlight_file(path))
            return

        console.print(to_rich_text(tokenize_json(read_text(path))), soft_wrap=True)
    except (CompilationError, OSError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
