"""Tests for the inline formatter."""

import logging

import pytest

from casemark.formatting.inline import InlineFormatter, format_inline
from casemark.formatting.ir import (
    Bold,
    InlineCode,
    Link,
    Sequence,
    Strikethrough,
    Text,
    plain_text,
)


class TestInlineFormatter:
    """Tests for the InlineFormatter class."""

    @pytest.fixture
    def formatter(self) -> InlineFormatter:
        """Create a formatter instance."""
        return InlineFormatter()

    def test_plain_text_is_single_text_leaf(self, formatter: InlineFormatter):
        """Test that text without syntax comes back as one Text node."""
        assert formatter.format("Hello, world!") == Text("Hello, world!")

    def test_empty_and_none(self, formatter: InlineFormatter):
        """Test that absent or empty text yields an empty Text leaf."""
        assert formatter.format("") == Text("")
        assert formatter.format(None) == Text("")

    def test_bold(self, formatter: InlineFormatter):
        """Test parsing bold text."""
        result = formatter.format("This is **bold** text")

        assert result == Sequence(
            (Text("This is "), Bold(Text("bold")), Text(" text"))
        )

    def test_single_match_is_not_wrapped(self, formatter: InlineFormatter):
        """Test that a lone styled node is returned without a Sequence."""
        assert formatter.format("**x**") == Bold(Text("x"))
        assert formatter.format("~~gone~~") == Strikethrough(Text("gone"))

    def test_inline_code_is_literal(self, formatter: InlineFormatter):
        """Test that code content is not formatted further."""
        assert formatter.format("`a **b**`") == InlineCode("a **b**")

    def test_link(self, formatter: InlineFormatter):
        """Test parsing a link."""
        result = formatter.format("[site](https://example.org)")

        assert result == Link(Text("site"), "https://example.org")

    def test_link_label_is_formatted(self, formatter: InlineFormatter):
        """Test that styles inside a link label are resolved."""
        result = formatter.format("[**b** c](u)")

        assert result == Link(Sequence((Bold(Text("b")), Text(" c"))), "u")

    def test_nested_styles(self, formatter: InlineFormatter):
        """Test strikethrough nested in bold."""
        result = formatter.format("**a ~~b~~**")

        assert result == Bold(Sequence((Text("a "), Strikethrough(Text("b")))))

    def test_leftmost_opening_marker_wins(self, formatter: InlineFormatter):
        """Test that the earliest opening delimiter decides the match."""
        result = formatter.format("**a~~b**c~~")

        assert result == Sequence((Bold(Text("a~~b")), Text("c~~")))

    def test_strikethrough_before_bold(self, formatter: InlineFormatter):
        """Test interleaved markers when strikethrough opens first."""
        result = formatter.format("~~a **b~~ c**")

        assert result == Sequence((Strikethrough(Text("a **b")), Text(" c**")))

    def test_code_hides_bold_markers(self, formatter: InlineFormatter):
        """Test that a code span opening first swallows bold markers."""
        result = formatter.format("`**x**` **y**")

        assert result == Sequence((InlineCode("**x**"), Text(" "), Bold(Text("y"))))

    def test_mixed_markers_in_order(self, formatter: InlineFormatter):
        """Test bold, code and strikethrough side by side."""
        result = formatter.format("**a** `b` ~~c~~")

        assert result == Sequence(
            (
                Bold(Text("a")),
                Text(" "),
                InlineCode("b"),
                Text(" "),
                Strikethrough(Text("c")),
            )
        )

    def test_repeated_bold(self, formatter: InlineFormatter):
        """Test that bold is non-greedy."""
        result = formatter.format("**a** and **b**")

        assert result == Sequence((Bold(Text("a")), Text(" and "), Bold(Text("b"))))

    @pytest.mark.parametrize(
        "text",
        ["a ** b", "`open", "~~ never closed", "[a]b](c)", "[label] (u)"],
    )
    def test_unterminated_markers_stay_literal(self, formatter: InlineFormatter, text: str):
        """Test that markers without a closing pair are kept as text."""
        assert formatter.format(text) == Text(text)

    def test_empty_bold_and_strikethrough(self, formatter: InlineFormatter):
        """Test that adjacent marker pairs give empty styled nodes."""
        assert formatter.format("a****b") == Sequence(
            (Text("a"), Bold(Text("")), Text("b"))
        )
        assert formatter.format("~~~~") == Strikethrough(Text(""))

    def test_plain_text_helper(self, formatter: InlineFormatter):
        """Test flattening a formatted tree back to its text."""
        node = formatter.format("**The cat** sat on [the `mat`](u)")

        assert plain_text(node) == "The cat sat on the mat"


class TestDepthLimit:
    """Tests for the inline nesting cap."""

    def test_text_below_cap_stays_literal(self, caplog: pytest.LogCaptureFixture):
        """Test that formatting stops at the depth cap and logs a warning."""
        with caplog.at_level(logging.WARNING, logger="casemark.formatting.inline"):
            result = format_inline("**~~`x`~~**", max_depth=1)

        assert result == Bold(Strikethrough(Text("`x`")))
        assert "nesting deeper than 1" in caplog.text

    def test_cap_without_remaining_syntax_is_silent(self, caplog: pytest.LogCaptureFixture):
        """Test that reaching the cap on plain text logs nothing."""
        with caplog.at_level(logging.WARNING, logger="casemark.formatting.inline"):
            result = format_inline("[**~~x~~**](u)", max_depth=2)

        assert result == Link(Bold(Strikethrough(Text("x"))), "u")
        assert caplog.text == ""

    def test_default_cap_from_settings(self, monkeypatch: pytest.MonkeyPatch):
        """Test that the cap is read from the environment."""
        monkeypatch.setenv("CASEMARK_MAX_INLINE_DEPTH", "4")

        assert InlineFormatter().max_depth == 4

    def test_explicit_cap_overrides_settings(self):
        """Test that an explicit cap wins over settings."""
        assert InlineFormatter(max_depth=7).max_depth == 7

    def test_zero_cap_formats_top_level_only(self):
        """Test that a cap of zero is honoured rather than replaced by settings."""
        assert InlineFormatter(max_depth=0).max_depth == 0
        assert format_inline("**a ~~b~~**", max_depth=0) == Bold(Text("a ~~b~~"))
