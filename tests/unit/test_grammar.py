"""Unit tests for the font and color string grammars."""

import pytest

from vexcanvas.core.grammar import parse_color, parse_font, unparse_color, unparse_font
from vexcanvas.domain.style import Color, FontStyle


class TestParseFont:
    """Tests for parse_font."""

    def test_full_description(self):
        """Test flags, size and family are all recognized."""
        style = parse_font("bold italic 24pt Bravura")
        assert style == FontStyle(family=("Bravura",), size=24.0, bold=True, italic=True)

    def test_family_fallback_list(self):
        style = parse_font("30pt Bravura,Academico")
        assert style.family == ("Bravura", "Academico")

    def test_quoted_family_keeps_spaces(self):
        style = parse_font('12pt "Times New Roman",serif')
        assert style.family == ("Times New Roman", "serif")
        assert style.size == 12.0

    def test_px_converts_to_points(self):
        assert parse_font("16px Academico").size == 12.0

    def test_bare_number_ignored(self):
        style = parse_font("bold 12 Academico")
        assert style.size == 30.0
        assert style.family == ("Academico",)

    def test_fractional_size(self):
        assert parse_font("10.5pt").size == 10.5

    @pytest.mark.parametrize("text", ["", "   ", "12"])
    def test_defaults_when_nothing_recognized(self, text):
        """Test parsing never fails and falls back to the default style."""
        assert parse_font(text) == FontStyle()


class TestUnparseFont:
    """Tests for unparse_font."""

    def test_roundtrip(self):
        text = "bold italic 24pt Bravura"
        assert unparse_font(parse_font(text)) == text

    def test_default(self):
        assert unparse_font(FontStyle()) == "30pt"

    def test_fractional_size(self):
        assert unparse_font(FontStyle(size=10.5)) == "10.5pt"

    def test_quotes_families_with_spaces(self):
        style = FontStyle(family=("Times New Roman", "serif"), size=12.0)
        assert unparse_font(style) == '12pt "Times New Roman",serif'

    def test_px_input_is_written_as_points(self):
        assert unparse_font(parse_font("italic 16px Academico")) == "italic 12pt Academico"


class TestParseColor:
    """Tests for parse_color."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("#f00", Color(1.0, 0.0, 0.0, 1.0)),
            ("#0f08", Color(0.0, 1.0, 0.0, 136 / 255)),
            ("#0000ff", Color(0.0, 0.0, 1.0, 1.0)),
            ("#FFFFFF00", Color(1.0, 1.0, 1.0, 0.0)),
            ("rgb(255, 0, 0)", Color(1.0, 0.0, 0.0, 1.0)),
            ("rgba(0,0,255,0.25)", Color(0.0, 0.0, 1.0, 0.25)),
        ],
    )
    def test_forms(self, text, expected):
        assert parse_color(text) == expected

    def test_rgba_alpha_leading_dot(self):
        """Test '.5' and '0.5' parse to the same alpha."""
        expected = Color(0.0, 1.0, 0.0, 0.5)
        assert parse_color("rgba(0,255,0,0.5)") == expected
        assert parse_color("rgba(0,255,0,.5)") == expected

    def test_named_green_is_css_green(self):
        assert unparse_color(parse_color("green")) == "#008000ff"

    @pytest.mark.parametrize(
        ("name", "hex_value"),
        [
            ("none", "#00000000"),
            ("transparent", "#00000000"),
            ("white", "#ffffffff"),
            ("tomato", "#ff6347ff"),
            ("darkturquoise", "#00ced1ff"),
        ],
    )
    def test_named_colors(self, name, hex_value):
        assert unparse_color(parse_color(name)) == hex_value

    def test_surrounding_whitespace(self):
        assert parse_color("  red ") == Color(1.0, 0.0, 0.0, 1.0)

    @pytest.mark.parametrize(
        "text",
        ["not-a-color", "", "#12", "#12345", "rgb(300,0,0)", "rgba(0,0,0,2)", "hsl(0,0%,0%)"],
    )
    def test_fallback_black(self, text):
        """Test unparseable colors become opaque black without raising."""
        assert parse_color(text) == Color(0.0, 0.0, 0.0, 1.0)


class TestUnparseColor:
    """Tests for unparse_color."""

    def test_format(self):
        assert unparse_color(Color(1.0, 0.5, 0.0, 1.0)) == "#ff8000ff"

    @pytest.mark.parametrize("text", ["#abc", "#abcd", "#a1b2c3", "#a1b2c3d4", "#0000"])
    def test_hex_roundtrip_is_stable(self, text):
        once = unparse_color(parse_color(text))
        assert unparse_color(parse_color(once)) == once

    def test_short_hex_expands(self):
        assert unparse_color(parse_color("#abcd")) == "#aabbccdd"
