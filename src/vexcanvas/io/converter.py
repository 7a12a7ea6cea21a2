"""Converters between fontTools outlines and the renderer.

Glyph outlines are pulled out of fontTools with pens, transformed into the
y-down pixel space of the target surface, and later replayed onto a cairo
context for rasterization.
"""

from typing import Any

import cairo
from fontTools.pens.boundsPen import BoundsPen
from fontTools.pens.cairoPen import CairoPen
from fontTools.pens.recordingPen import DecomposingRecordingPen, replayRecording
from fontTools.pens.transformPen import TransformPen

from vexcanvas.domain.glyph import GlyphOutline, PositionedGlyph


def glyph_pixel_transform(scale: float, glyph: PositionedGlyph) -> tuple[float, ...]:
    """Matrix mapping font units to y-down pixels at the glyph's pen offset.

    Args:
        scale: Pixels per font unit
        glyph: Positioned glyph carrying the fractional pen offset

    Returns:
        fontTools-style (xx, xy, yx, yy, dx, dy) transformation
    """
    return (scale, 0.0, 0.0, -scale, glyph.x, glyph.y)


def extract_outline(
    glyph_set: Any,
    glyph: PositionedGlyph,
    scale: float,
) -> GlyphOutline | None:
    """Extract the outline of a glyph in pixel space.

    The subpixel pen offset is baked into the coordinates here, before any
    rasterization, so antialiasing reflects the exact phase of the glyph.

    Args:
        glyph_set: fontTools glyph set of the chosen font
        glyph: The glyph to draw and its fractional pen offset
        scale: Pixels per font unit

    Returns:
        GlyphOutline, or None if the glyph has no contours (e.g. space)
    """
    transformation = glyph_pixel_transform(scale, glyph)

    recording = DecomposingRecordingPen(glyph_set)
    glyph_set[glyph.name].draw(TransformPen(recording, transformation))
    if not recording.value:
        return None

    bounds_pen = BoundsPen(None)
    replayRecording(recording.value, bounds_pen)
    if bounds_pen.bounds is None:
        return None

    return GlyphOutline(
        glyph=glyph,
        commands=tuple(recording.value),
        bounds=tuple(bounds_pen.bounds),  # type: ignore[arg-type]
    )


def draw_outline(outline: GlyphOutline, context: cairo.Context) -> None:
    """Append the outline's contours to the current cairo path.

    Args:
        outline: Outline in pixel space
        context: Target context; its current matrix applies
    """
    replayRecording(outline.commands, CairoPen(None, context))
