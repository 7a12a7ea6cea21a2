"""Integration tests for the command line interface."""

from typer.testing import CliRunner

from vexcanvas import __version__
from vexcanvas.cli.app import app

runner = CliRunner()


class TestVersion:
    """Tests for the --version flag."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestMeasure:
    """Tests for the measure command."""

    def test_prints_metrics_table(self, font_dir):
        result = runner.invoke(app, ["measure", "AB", "--font-dir", str(font_dir)])
        assert result.exit_code == 0, result.output
        assert "width" in result.output
        assert "fontBoundingBoxAscent" in result.output
        assert "52.00" in result.output  # 24 + 28 px

    def test_font_option(self, font_dir):
        result = runner.invoke(
            app, ["measure", "A", "--font", "15pt", "--font-dir", str(font_dir)]
        )
        assert result.exit_code == 0, result.output
        assert "12.00" in result.output

    def test_missing_font_dir(self, tmp_path):
        result = runner.invoke(app, ["measure", "A", "--font-dir", str(tmp_path / "nope")])
        assert result.exit_code == 1
        assert "Could not load font" in result.output


class TestText:
    """Tests for the text command."""

    def test_writes_png(self, font_dir, tmp_path):
        output = tmp_path / "out" / "text.png"
        result = runner.invoke(
            app,
            ["text", "A", "AB", "-o", str(output), "--font-dir", str(font_dir), "--quiet"],
        )
        assert result.exit_code == 0, result.output
        assert output.read_bytes()[:4] == b"\x89PNG"

    def test_summary_output(self, font_dir, tmp_path):
        output = tmp_path / "text.png"
        result = runner.invoke(
            app,
            ["text", "AB", "-o", str(output), "--font-dir", str(font_dir), "-z", "2"],
        )
        assert result.exit_code == 0, result.output
        assert "800x200 px" in result.output
        assert "1 lines" in result.output
        assert "2 glyphs" in result.output

    def test_summary_lists_missing_codepoints_once(self, font_dir, tmp_path):
        result = runner.invoke(
            app,
            ["text", "A\u2003\u2003", "-o", str(tmp_path / "t.png"), "--font-dir", str(font_dir)],
        )
        assert result.exit_code == 0, result.output
        assert "2 missing" in result.output
        summary = [line.strip() for line in result.output.splitlines() if "no glyph for" in line]
        assert summary == ["no glyph for U+2003"]

    def test_missing_font_dir(self, tmp_path):
        result = runner.invoke(
            app,
            ["text", "A", "-o", str(tmp_path / "x.png"), "--font-dir", str(tmp_path / "nope")],
        )
        assert result.exit_code == 1
        assert "Could not load font" in result.output
        assert not (tmp_path / "x.png").exists()

    def test_requires_output(self, font_dir):
        result = runner.invoke(app, ["text", "A", "--font-dir", str(font_dir)])
        assert result.exit_code != 0
