"""Glyph representation for rendering.

This module defines the glyph domain model: which glyph of which font was
picked for a codepoint, where its pen origin sits inside a pixel, and the
outline extracted for it at a given pixel scale.
"""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class PixelBounds:
    """Integer pixel box enclosing an outline.

    Coordinates are y-down and relative to the integer pen origin, so
    min_y is negative for ink above the baseline.
    """

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @classmethod
    def enclosing(cls, x_min: float, y_min: float, x_max: float, y_max: float) -> "PixelBounds":
        """Round a float box outwards to whole pixels."""
        return cls(
            math.floor(x_min),
            math.floor(y_min),
            math.ceil(x_max),
            math.ceil(y_max),
        )

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y


@dataclass(frozen=True, slots=True)
class PositionedGlyph:
    """A glyph chosen for a codepoint, placed at a subpixel position.

    Attributes:
        codepoint: Codepoint after remapping
        name: Glyph name in the chosen font
        x: Fractional horizontal pen offset in pixels
        y: Fractional vertical pen offset in pixels
        mapped: False when the font has no cmap entry and .notdef was used
    """

    codepoint: int
    name: str
    x: float = 0.0
    y: float = 0.0
    mapped: bool = True


@dataclass(frozen=True)
class GlyphOutline:
    """Outline of a scaled, positioned glyph.

    Attributes:
        glyph: The glyph this outline was drawn from
        commands: Pen commands in y-down pixel space, as recorded by
            fontTools' RecordingPen
        bounds: Exact (x_min, y_min, x_max, y_max) of the outline
    """

    glyph: PositionedGlyph
    commands: tuple[tuple[str, tuple[Any, ...]], ...]
    bounds: tuple[float, float, float, float]

    @property
    def px_bounds(self) -> PixelBounds:
        """Bounds rounded outwards to whole pixels."""
        return PixelBounds.enclosing(*self.bounds)
