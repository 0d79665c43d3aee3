"""Tests for the CLI interface."""

import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from casemark import __version__
from casemark.cli import app
from casemark.logging_utils import configure_logging


runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Put back the root logger handlers replaced by configure_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestCLI:
    """Tests for CLI options."""

    def test_version_flag(self):
        """Test --version flag."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"casemark v{__version__}" in result.stdout

    def test_help_flag(self):
        """Test --help flag."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "render" in result.stdout
        assert "highlight" in result.stdout


class TestRenderCommand:
    """Tests for the render command."""

    def test_render_html(self, tmp_markdown_file: Path):
        """Test HTML output on stdout."""
        result = runner.invoke(app, ["render", str(tmp_markdown_file)])

        assert result.exit_code == 0
        assert "<strong>appeal</strong>" in result.stdout

    def test_render_text(self, tmp_path: Path):
        """Test plain text output."""
        source = tmp_path / "note.md"
        source.write_text("Hello **bold**", encoding="utf-8")

        result = runner.invoke(app, ["render", str(source), "--format", "text"])

        assert result.exit_code == 0
        assert result.stdout == "Hello bold\n"

    def test_render_to_file(self, tmp_markdown_file: Path, tmp_path: Path):
        """Test writing output to a file."""
        output = tmp_path / "ruling.html"

        result = runner.invoke(
            app, ["render", str(tmp_markdown_file), "-o", str(output)]
        )

        assert result.exit_code == 0
        assert "Success" in result.stdout
        assert "<table>" in output.read_text(encoding="utf-8")

    def test_render_console(self, tmp_path: Path):
        """Test rich terminal output."""
        source = tmp_path / "list.md"
        source.write_text("* first\n* second", encoding="utf-8")

        result = runner.invoke(app, ["render", str(source), "-f", "console"])

        assert result.exit_code == 0
        assert "• first" in result.stdout

    def test_unknown_format(self, tmp_markdown_file: Path):
        """Test error for unsupported output formats."""
        result = runner.invoke(app, ["render", str(tmp_markdown_file), "-f", "pdf"])

        assert result.exit_code == 1
        assert "Unsupported output format" in result.stdout

    def test_missing_file_error(self, tmp_path: Path):
        """Test error when file doesn't exist."""
        result = runner.invoke(app, ["render", str(tmp_path / "nonexistent.md")])

        assert result.exit_code != 0

    def test_invalid_encoding_error(self, tmp_path: Path):
        """Test error for undecodable input."""
        source = tmp_path / "bad.md"
        source.write_bytes(b"\xff\xfe\xfa")

        result = runner.invoke(app, ["render", str(source)])

        assert result.exit_code == 1
        assert "Error" in result.stdout


class TestHighlightCommand:
    """Tests for the highlight command."""

    def test_highlight_html(self, tmp_json_file: Path):
        """Test HTML markup on stdout."""
        result = runner.invoke(app, ["highlight", str(tmp_json_file), "--html"])

        assert result.exit_code == 0
        assert '<span class="json-key">"title"</span>' in result.stdout

    def test_highlight_terminal(self, tmp_json_file: Path):
        """Test terminal output keeps the source text."""
        result = runner.invoke(app, ["highlight", str(tmp_json_file)])

        assert result.exit_code == 0
        assert '"title"' in result.stdout
        assert "<span" not in result.stdout

    def test_highlight_to_file(self, tmp_json_file: Path, tmp_path: Path):
        """Test writing markup to a file."""
        output = tmp_path / "analysis.html"

        result = runner.invoke(
            app, ["highlight", str(tmp_json_file), "-o", str(output)]
        )

        assert result.exit_code == 0
        assert 'class="json-null"' in output.read_text(encoding="utf-8")


class TestConfigureLogging:
    """Tests for logging setup."""

    def test_level_by_name(self):
        """Test configuring the root logger from a level name."""
        root = configure_logging("info")

        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_verbose_forces_debug(self):
        """Test that verbose mode enables debug records."""
        root = configure_logging("WARNING", verbose=True)

        assert root.level == logging.DEBUG

    def test_unknown_level_falls_back_to_warning(self):
        """Test an unrecognised level name."""
        assert configure_logging("chatty").level == logging.WARNING
