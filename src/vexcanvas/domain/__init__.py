"""Domain models for vexcanvas.

This module contains the value types passed between the drawing context and
its collaborators. All models are designed to be:

- Immutable (frozen dataclasses), so draw state snapshots can share them
- Independent of pycairo and fontTools implementation details

Key classes:
- Color, FontStyle: Parsed style values
- AffineTransform, Rect: Geometry
- Segment, Point: Path commands
- PositionedGlyph, GlyphOutline, PixelBounds: Resolved glyphs
- TextMetrics: Measurement results
"""

from vexcanvas.domain.geometry import AffineTransform, Rect
from vexcanvas.domain.glyph import GlyphOutline, PixelBounds, PositionedGlyph
from vexcanvas.domain.metrics import TextMetrics
from vexcanvas.domain.path import Point, Segment, SegmentKind
from vexcanvas.domain.style import Color, FontStyle, pt_to_px

__all__: list[str] = [
    # Enums
    "SegmentKind",
    # Style
    "Color",
    "FontStyle",
    "pt_to_px",
    # Geometry
    "AffineTransform",
    "Rect",
    "Point",
    "Segment",
    # Glyphs
    "GlyphOutline",
    "PixelBounds",
    "PositionedGlyph",
    "TextMetrics",
]
