"""Internal pycairo helpers shared by the drawing context and text pipeline.

Not intended for public use.
"""

import cairo
import numpy as np

from vexcanvas.config import ResampleFilter
from vexcanvas.domain.geometry import AffineTransform
from vexcanvas.domain.style import Color

CAIRO_FILTERS: dict[ResampleFilter, int] = {
    ResampleFilter.BEST: cairo.FILTER_BEST,
    ResampleFilter.GOOD: cairo.FILTER_GOOD,
    ResampleFilter.BILINEAR: cairo.FILTER_BILINEAR,
}


def to_cairo_matrix(transform: AffineTransform) -> cairo.Matrix:
    """Convert to cairo's (xx, yx, xy, yy, x0, y0) matrix."""
    return cairo.Matrix(
        transform.scale_x,
        transform.shear_y,
        transform.shear_x,
        transform.scale_y,
        transform.translate_x,
        transform.translate_y,
    )


def argb32_view(surface: cairo.ImageSurface) -> np.ndarray:
    """Writable (height, width) uint32 view of an ARGB32 surface.

    Each element holds one native-endian premultiplied pixel, alpha in the
    top byte. Call surface.mark_dirty() after writing through the view.
    """
    surface.flush()
    height = surface.get_height()
    width = surface.get_width()
    rows = np.ndarray(
        shape=(height, surface.get_stride() // 4),
        dtype=np.uint32,
        buffer=surface.get_data(),
    )
    return rows[:, :width]


def a8_coverage(surface: cairo.ImageSurface) -> np.ndarray:
    """Copy of an A8 surface as float coverage in [0, 1]."""
    surface.flush()
    height = surface.get_height()
    width = surface.get_width()
    rows = np.ndarray(
        shape=(height, surface.get_stride()),
        dtype=np.uint8,
        buffer=surface.get_data(),
    )
    return rows[:, :width].astype(np.float64) / 255.0


def coverage_to_argb32(coverage: np.ndarray, color: Color) -> cairo.ImageSurface:
    """Paint a coverage mask with a color into a new premultiplied surface.

    Each sample becomes color * coverage with alpha premultiplied; samples
    with zero coverage stay fully transparent.

    Args:
        coverage: (height, width) array of values in [0, 1]
        color: Straight-alpha color

    Returns:
        ARGB32 image surface of the same size
    """
    height, width = coverage.shape
    red, green, blue, alpha = (
        np.clip(np.rint(channel * 255.0), 0, 255).astype(np.uint32)
        for channel in color.premultiplied(coverage)
    )
    pixels = (alpha << 24) | (red << 16) | (green << 8) | blue

    surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, width, height)
    argb32_view(surface)[:, :] = pixels
    surface.mark_dirty()
    return surface


def surface_to_rgba(surface: cairo.ImageSurface) -> np.ndarray:
    """Copy an ARGB32 surface into a (height, width, 4) uint8 RGBA array.

    Values stay premultiplied, as stored.
    """
    pixels = argb32_view(surface)
    rgba = np.empty(pixels.shape + (4,), dtype=np.uint8)
    rgba[..., 0] = (pixels >> 16) & 0xFF
    rgba[..., 1] = (pixels >> 8) & 0xFF
    rgba[..., 2] = pixels & 0xFF
    rgba[..., 3] = (pixels >> 24) & 0xFF
    return rgba
