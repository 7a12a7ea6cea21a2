"""Drawing context orchestrator.

This module provides DrawContext, the canvas-like object a scripting host
drives. It owns the pixel surface, the draw state and its save stack, the
path under construction and a font library, and wires them together:

1. Style setters parse CSS-like strings into immutable values
2. Transform calls compose onto the current draw state
3. Path calls accumulate segments until fill() or stroke()
4. Text calls go through the TextRenderer glyph pipeline
5. save_png() and pixels() read the surface back
"""

import math
from dataclasses import replace
from pathlib import Path
from typing import Any

import cairo
import numpy as np
import structlog

from vexcanvas.config import VexCanvasSettings, get_default_settings
from vexcanvas.core._raster import surface_to_rgba, to_cairo_matrix
from vexcanvas.core.fonts import FontLibrary
from vexcanvas.core.grammar import parse_color, parse_font, unparse_color, unparse_font
from vexcanvas.core.path import PathBuilder, replay_path
from vexcanvas.core.state import DrawState, StateStack
from vexcanvas.core.text import TextRenderer
from vexcanvas.domain.geometry import AffineTransform, Rect
from vexcanvas.domain.metrics import TextMetrics
from vexcanvas.domain.style import Color
from vexcanvas.exceptions import NoActivePathError, SurfaceSizeError
from vexcanvas.io.writer import PngWriter
from vexcanvas.utils.logging import RenderLogger, RenderStats

logger = structlog.get_logger(__name__)


class DrawContext:
    """Canvas 2D style drawing context over an owned pixel surface.

    Coordinates given by the host are in unzoomed units; the initial
    transform scales them by the zoom factor onto the surface.

    The font files are not shipped with the package. Without an injected
    FontLibrary the context loads them from settings.fonts.font_dir (by
    default the package's fonts/ directory, see fonts/README.md) and raises
    FontLoadError until they have been copied there.

    Example:
        ctx = DrawContext(200, 100, 2.0, "#fff", "#000")
        ctx.font = "bold 24pt Academico"
        ctx.fill_text("Allegro", 10, 40)
        ctx.save_png(Path("build/allegro.png"))
    """

    def __init__(
        self,
        width: int,
        height: int,
        zoom: float | None = None,
        background: str | None = None,
        foreground: str | None = None,
        *,
        fonts: FontLibrary | None = None,
        settings: VexCanvasSettings | None = None,
        render_logger: RenderLogger | None = None,
    ) -> None:
        """Create a context and fill its surface with the background color.

        Args:
            width: Host width in unzoomed units
            height: Host height in unzoomed units
            zoom: Pixel density factor (default from settings)
            background: Clear color string (default from settings)
            foreground: Fill and stroke color string (default from settings)
            fonts: Already loaded font library to share; loaded from
                settings.fonts when None
            settings: Application settings (defaults if None)
            render_logger: Diagnostics sink (a new one if None)

        Raises:
            SurfaceSizeError: If the zoomed size is not a positive pixel size
                cairo can allocate
            FontLoadError: If fonts is None and the font assets cannot be loaded
        """
        self._settings = settings or get_default_settings()
        canvas = self._settings.canvas
        zoom = canvas.zoom if zoom is None else zoom
        background = canvas.background if background is None else background
        foreground = canvas.foreground if foreground is None else foreground

        self._width = width
        self._height = height
        self._zoom = zoom
        self._surface = self._create_surface(width, height, zoom)
        self._cairo = cairo.Context(self._surface)

        foreground_color = parse_color(foreground)
        self._state = DrawState(
            fill_style=foreground_color,
            stroke_style=foreground_color,
            clear_style=parse_color(background),
            transform=AffineTransform.from_scale(zoom, zoom),
        )
        self._stack = StateStack()
        self._path: PathBuilder | None = None

        self._render_logger = render_logger or RenderLogger()
        self._fonts = fonts if fonts is not None else FontLibrary.from_config(self._settings.fonts)
        self._text = TextRenderer(self._fonts, self._render_logger, canvas.resample_filter)

        self._paint_surface(self._state.clear_style)
        logger.debug(
            "Context created",
            width=self._surface.get_width(),
            height=self._surface.get_height(),
            zoom=zoom,
        )

    @staticmethod
    def _create_surface(width: int, height: int, zoom: float) -> cairo.ImageSurface:
        if not (math.isfinite(zoom) and zoom > 0.0):
            raise SurfaceSizeError(width, height, f"zoom must be positive, got {zoom!r}")
        pixel_width = int(width * zoom)
        pixel_height = int(height * zoom)
        if pixel_width <= 0 or pixel_height <= 0:
            raise SurfaceSizeError(pixel_width, pixel_height, "size must be positive")
        try:
            return cairo.ImageSurface(cairo.FORMAT_ARGB32, pixel_width, pixel_height)
        except (cairo.Error, MemoryError) as e:
            raise SurfaceSizeError(pixel_width, pixel_height, str(e)) from e

    # -- Properties ----------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def zoom(self) -> float:
        return self._zoom

    @property
    def surface(self) -> cairo.ImageSurface:
        return self._surface

    @property
    def state(self) -> DrawState:
        """Snapshot of the current draw state."""
        return self._state

    @property
    def stats(self) -> RenderStats:
        """Counters of degraded drawing calls so far."""
        return self._render_logger.stats

    @property
    def fill_style(self) -> str:
        return unparse_color(self._state.fill_style)

    @fill_style.setter
    def fill_style(self, style: str) -> None:
        self._state = replace(self._state, fill_style=parse_color(style))

    @property
    def stroke_style(self) -> str:
        return unparse_color(self._state.stroke_style)

    @stroke_style.setter
    def stroke_style(self, style: str) -> None:
        self._state = replace(self._state, stroke_style=parse_color(style))

    @property
    def line_width(self) -> float:
        return self._state.line_width

    @line_width.setter
    def line_width(self, width: float) -> None:
        self._state = replace(self._state, line_width=float(width))

    @property
    def font(self) -> str:
        return unparse_font(self._state.font)

    @font.setter
    def font(self, font: str) -> None:
        self._state = replace(self._state, font=parse_font(font))

    # -- Transform -----------------------------------------------------------

    def get_transform(self) -> list[float]:
        """Current transform as [sx, kx, ky, sy, tx, ty]."""
        return self._state.transform.to_list()

    def set_transform(self, values: "list[float] | tuple[float, ...]") -> None:
        """Replace the current transform.

        Raises:
            ValueError: If values does not hold exactly 6 numbers
        """
        self._state = replace(self._state, transform=AffineTransform.from_list(values))

    def scale(self, sx: float, sy: float) -> None:
        self._state = self._state.with_transform(AffineTransform.from_scale(sx, sy))

    def translate(self, x: float, y: float) -> None:
        """Compose a translation by (-x, -y) onto the current transform."""
        self._state = self._state.with_transform(AffineTransform.from_translate(-x, -y))

    def rotate(self, angle: float) -> None:
        """Compose a rotation given in radians onto the current transform."""
        self._state = self._state.with_transform(AffineTransform.from_rotate(math.degrees(angle)))

    # -- Text ----------------------------------------------------------------

    def measure_char(self, codepoint: int) -> TextMetrics:
        return self._text.measure_char(self._state.font, codepoint)

    def measure_text(self, text: str) -> TextMetrics:
        return self._text.measure_text(self._state.font, text)

    def fill_text(self, text: str, x: float, y: float) -> None:
        """Draw text with its baseline origin at (x, y) in the fill color."""
        self._text.fill_text(
            self._cairo,
            self._state.transform,
            self._state.fill_style,
            self._state.font,
            text,
            x,
            y,
        )

    # -- Path ----------------------------------------------------------------

    def _require_path(self, operation: str) -> PathBuilder:
        if self._path is None:
            raise NoActivePathError(operation)
        return self._path

    def begin_path(self) -> None:
        """Start a new, empty path, discarding the previous one."""
        self._path = PathBuilder()

    def move_to(self, x: float, y: float) -> None:
        self._require_path("move_to").move_to(x, y)

    def line_to(self, x: float, y: float) -> None:
        self._require_path("line_to").line_to(x, y)

    def close_path(self) -> None:
        self._require_path("close_path").close()

    def quadratic_curve_to(self, x1: float, y1: float, x: float, y: float) -> None:
        self._require_path("quadratic_curve_to").quad_to(x1, y1, x, y)

    def bezier_curve_to(
        self, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ) -> None:
        self._require_path("bezier_curve_to").cubic_to(x1, y1, x2, y2, x, y)

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counterclockwise: bool = False,
    ) -> None:
        """Add a full circle to the path.

        Only the sweep from 0 to 2*pi is supported; the direction flag is
        irrelevant for a full circle. Other sweeps are logged and skipped.
        """
        path = self._require_path("arc")
        epsilon = self._settings.canvas.arc_epsilon
        if start_angle == 0.0 and abs(end_angle - 2.0 * math.pi) < epsilon:
            path.push_circle(x, y, radius)
        else:
            self._render_logger.log_skipped_arc(start_angle, end_angle)

    def rect(self, x: float, y: float, width: float, height: float) -> None:
        self._require_path("rect").push_rect(x, y, width, height)

    def fill(self) -> None:
        """Fill the current path with the fill color (nonzero winding)."""
        segments = self._require_path("fill").finish()
        ctx = self._cairo
        ctx.save()
        ctx.set_matrix(to_cairo_matrix(self._state.transform))
        replay_path(segments, ctx)
        ctx.set_fill_rule(cairo.FILL_RULE_WINDING)
        ctx.set_antialias(cairo.ANTIALIAS_GRAY)
        ctx.set_operator(cairo.OPERATOR_OVER)
        ctx.set_source_rgba(*self._state.fill_style.to_tuple())
        ctx.fill()
        ctx.restore()

    def stroke(self) -> None:
        """Stroke the current path with the stroke color and line width."""
        segments = self._require_path("stroke").finish()
        ctx = self._cairo
        ctx.save()
        ctx.set_matrix(to_cairo_matrix(self._state.transform))
        replay_path(segments, ctx)
        ctx.set_line_width(self._state.line_width)
        ctx.set_line_cap(cairo.LINE_CAP_BUTT)
        ctx.set_antialias(cairo.ANTIALIAS_GRAY)
        ctx.set_operator(cairo.OPERATOR_OVER)
        ctx.set_source_rgba(*self._state.stroke_style.to_tuple())
        ctx.stroke()
        ctx.restore()

    # -- Rectangles and clearing ----------------------------------------------

    def _paint_rect(self, rect: Rect, color: Color, operator: Any) -> None:
        ctx = self._cairo
        ctx.save()
        ctx.set_matrix(to_cairo_matrix(self._state.transform))
        ctx.new_path()
        ctx.rectangle(rect.x, rect.y, rect.width, rect.height)
        ctx.set_antialias(cairo.ANTIALIAS_GRAY)
        ctx.set_operator(operator)
        ctx.set_source_rgba(*color.to_tuple())
        ctx.fill()
        ctx.restore()

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        """Blend a rectangle in the fill color; negative extents flip the corner."""
        rect = Rect.normalized(x, y, width, height)
        self._paint_rect(rect, self._state.fill_style, cairo.OPERATOR_OVER)

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        """Replace a rectangle's pixels with the clear color, alpha included."""
        rect = Rect.normalized(x, y, width, height)
        self._paint_rect(rect, self._state.clear_style, cairo.OPERATOR_SOURCE)

    def _paint_surface(self, color: Color) -> None:
        ctx = self._cairo
        ctx.save()
        ctx.identity_matrix()
        ctx.set_operator(cairo.OPERATOR_SOURCE)
        ctx.set_source_rgba(*color.to_tuple())
        ctx.paint()
        ctx.restore()

    def clear(self, red: float, green: float, blue: float, alpha: float) -> None:
        """Set every pixel of the surface to one color, ignoring the transform.

        Channels are normalized floats in [0, 1].
        """
        self._paint_surface(Color(red, green, blue, alpha))

    def set_line_dash(self, *args: Any) -> None:
        """Accepted for host compatibility; dashes are not drawn."""

    # -- State stack ---------------------------------------------------------

    def save(self) -> None:
        """Push a copy of the current draw state."""
        self._stack.push(self._state)

    def restore(self) -> None:
        """Pop the latest saved draw state; a no-op on an empty stack."""
        state = self._stack.pop()
        if state is None:
            self._render_logger.log_empty_restore()
            return
        self._state = state

    # -- Output --------------------------------------------------------------

    def save_png(self, path: "str | Path") -> None:
        """Write the surface as a PNG, creating parent directories.

        Raises:
            ImageSaveError: If the file cannot be written
        """
        output_path = Path(path)
        PngWriter(self._surface, output_path).save()
        self._render_logger.log_surface_saved(
            output_path, self._surface.get_width(), self._surface.get_height()
        )

    def pixels(self) -> np.ndarray:
        """Copy of the surface as a (height, width, 4) premultiplied RGBA array."""
        return surface_to_rgba(self._surface)
