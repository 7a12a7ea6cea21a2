"""Text measurement and glyph compositing.

Glyphs are rasterized at device resolution (the host size multiplied by the
largest scale of the current transform), then painted back through the
transform scaled down by the same factor. Rasterizing first and resampling
second keeps stems crisp under zoom while still following rotations and
shears exactly.
"""

import logging
import math

import cairo

from vexcanvas.config import ResampleFilter
from vexcanvas.core._raster import (
    CAIRO_FILTERS,
    a8_coverage,
    coverage_to_argb32,
    to_cairo_matrix,
)
from vexcanvas.core.fonts import SPACE, FontLibrary
from vexcanvas.domain.geometry import AffineTransform
from vexcanvas.domain.glyph import GlyphOutline
from vexcanvas.domain.metrics import TextMetrics
from vexcanvas.domain.style import Color, FontStyle
from vexcanvas.io.converter import draw_outline
from vexcanvas.utils.logging import RenderLogger

logger = logging.getLogger(__name__)

# Transparent border around each glyph bitmap so resampling has an edge to fade into
GLYPH_MARGIN = 1


def extra_zoom(transform: AffineTransform) -> float:
    """Supersampling factor for text drawn through a transform."""
    return transform.max_scale()


def rasterize_outline(outline: GlyphOutline, color: Color) -> cairo.ImageSurface:
    """Render an outline into a premultiplied bitmap with a transparent margin.

    Pixel (0, 0) of the result sits at (min_x - margin, min_y - margin) of
    the outline's pixel bounds.

    Args:
        outline: Glyph outline in y-down pixel space
        color: Fill color

    Returns:
        ARGB32 surface of (bounds + 2 * margin) pixels
    """
    bounds = outline.px_bounds
    width = bounds.width + 2 * GLYPH_MARGIN
    height = bounds.height + 2 * GLYPH_MARGIN

    mask = cairo.ImageSurface(cairo.FORMAT_A8, width, height)
    context = cairo.Context(mask)
    context.translate(GLYPH_MARGIN - bounds.min_x, GLYPH_MARGIN - bounds.min_y)
    context.set_antialias(cairo.ANTIALIAS_GRAY)
    context.set_fill_rule(cairo.FILL_RULE_WINDING)
    draw_outline(outline, context)
    context.set_source_rgba(0.0, 0.0, 0.0, 1.0)
    context.fill()

    return coverage_to_argb32(a8_coverage(mask), color)


class TextRenderer:
    """Measures and draws text with the glyphs of a FontLibrary."""

    def __init__(
        self,
        library: FontLibrary,
        render_logger: RenderLogger,
        resample_filter: ResampleFilter = ResampleFilter.BEST,
    ) -> None:
        self._library = library
        self._render_logger = render_logger
        self._filter = CAIRO_FILTERS[resample_filter]

    def measure_char(self, font: FontStyle, codepoint: int) -> TextMetrics:
        """Measure a single codepoint at the font's size, without supersampling.

        Args:
            font: Current font description
            codepoint: Unicode scalar value

        Returns:
            TextMetrics of the glyph; ink fields are zero for blank glyphs
        """
        scaled, glyph = self._library.resolve_glyph(codepoint, font.size, font.italic, font.bold)
        width = scaled.h_advance(glyph)
        ascent = scaled.ascent()
        descent = scaled.descent()

        outline = scaled.outline_glyph(glyph)
        if outline is None:
            return TextMetrics(width=width, font_ascent=ascent, font_descent=descent)

        bounds = outline.px_bounds
        return TextMetrics(
            width=width,
            font_ascent=ascent,
            font_descent=descent,
            ink_ascent=float(-bounds.min_y),
            ink_descent=float(bounds.max_y),
            ink_left=float(-bounds.min_x),
            ink_right=float(bounds.max_x),
        )

    def measure_text(self, font: FontStyle, text: str) -> TextMetrics:
        """Measure a run of text glyph by glyph.

        The empty string measures codepoint 0, so the font-wide fields are
        still meaningful.
        """
        if not text:
            return self.measure_char(font, 0)

        metrics: TextMetrics | None = None
        for char in text:
            char_metrics = self.measure_char(font, ord(char))
            metrics = char_metrics if metrics is None else metrics.followed_by(char_metrics)
        assert metrics is not None
        return metrics

    def fill_char(
        self,
        context: cairo.Context,
        transform: AffineTransform,
        color: Color,
        codepoint: int,
        x: float,
        y: float,
        size: float,
        zoom: float,
        italic: bool,
        bold: bool,
    ) -> float:
        """Draw one glyph with its pen origin at (x, y) in user space.

        Args:
            context: Context of the target surface
            transform: User space to device transform
            color: Fill color
            codepoint: Unicode scalar value
            x: Pen x in user units
            y: Baseline y in user units
            size: Font size in points
            zoom: Supersampling factor, see extra_zoom()
            italic: Use an italic text font
            bold: Use a bold text font

        Returns:
            Horizontal advance in user units
        """
        x_real = x * zoom
        y_real = y * zoom
        x_int = math.floor(x_real)
        y_int = math.floor(y_real)

        scaled, glyph = self._library.resolve_glyph(
            codepoint,
            size * zoom,
            italic,
            bold,
            subpixel_x=x_real - x_int,
            subpixel_y=y_real - y_int,
        )
        if not glyph.mapped:
            self._render_logger.log_unmapped_codepoint(glyph.codepoint, scaled.name)

        advance = scaled.h_advance(glyph) / zoom

        outline = scaled.outline_glyph(glyph)
        if outline is None:
            if glyph.codepoint != SPACE:
                self._render_logger.log_missing_glyph(codepoint)
            return advance

        bitmap = rasterize_outline(outline, color)
        bounds = outline.px_bounds

        context.save()
        context.set_matrix(to_cairo_matrix(transform))
        context.scale(1.0 / zoom, 1.0 / zoom)
        context.set_source_surface(
            bitmap,
            x_int + bounds.min_x - GLYPH_MARGIN,
            y_int + bounds.min_y - GLYPH_MARGIN,
        )
        context.get_source().set_filter(self._filter)
        context.set_operator(cairo.OPERATOR_OVER)
        context.paint()
        context.restore()

        self._render_logger.log_glyph_drawn(codepoint, bitmap.get_width(), bitmap.get_height())
        return advance

    def fill_text(
        self,
        context: cairo.Context,
        transform: AffineTransform,
        color: Color,
        font: FontStyle,
        text: str,
        x: float,
        y: float,
    ) -> None:
        """Draw a run of text, advancing the pen after each glyph."""
        zoom = extra_zoom(transform)
        if zoom <= 0.0:
            logger.debug("Degenerate transform, nothing to draw for %r", text)
            return

        for char in text:
            x += self.fill_char(
                context,
                transform,
                color,
                ord(char),
                x,
                y,
                font.size,
                zoom,
                font.italic,
                font.bold,
            )
