"""Font holder for measuring DOM spans.

Hosts that size text by assigning span.style.font and reading it back need
an object that normalizes the font string the same way DrawContext does,
without owning a surface.
"""

from dataclasses import replace

from vexcanvas.core.grammar import parse_font, unparse_font
from vexcanvas.domain.style import FontStyle


class SpanFontParser:
    """Stand-in for a span's style, holding a single parsed font.

    Example:
        span = SpanFontParser()
        span.font = "italic 12pt Academico"
        span.font_size  # "12pt"
    """

    def __init__(self) -> None:
        self._style = FontStyle()

    @property
    def style(self) -> FontStyle:
        return self._style

    @property
    def font(self) -> str:
        return unparse_font(self._style)

    @font.setter
    def font(self, font: str) -> None:
        self._style = parse_font(font)

    @property
    def font_size(self) -> str:
        """Font size as "<n>pt"."""
        size = self._style.size
        return f"{int(size) if size.is_integer() else size}pt"

    @font_size.setter
    def font_size(self, size: float) -> None:
        self._style = replace(self._style, size=float(size))
