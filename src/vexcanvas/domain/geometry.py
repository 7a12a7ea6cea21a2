"""Geometric value types for the drawing context.

This module defines:
- AffineTransform: 2D affine matrix with canvas-style composition
- Rect: Axis-aligned rectangle with non-negative extents
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AffineTransform:
    """A 2D affine transformation.

    Maps a point as::

        x' = scale_x * x + shear_x * y + translate_x
        y' = shear_y * x + scale_y * y + translate_y

    Attributes:
        scale_x: Horizontal scale (sx)
        shear_x: Contribution of y to x' (kx)
        shear_y: Contribution of x to y' (ky)
        scale_y: Vertical scale (sy)
        translate_x: Horizontal offset (tx)
        translate_y: Vertical offset (ty)
    """

    scale_x: float = 1.0
    shear_x: float = 0.0
    shear_y: float = 0.0
    scale_y: float = 1.0
    translate_x: float = 0.0
    translate_y: float = 0.0

    @classmethod
    def identity(cls) -> "AffineTransform":
        return cls()

    @classmethod
    def from_scale(cls, sx: float, sy: float) -> "AffineTransform":
        return cls(scale_x=sx, scale_y=sy)

    @classmethod
    def from_translate(cls, tx: float, ty: float) -> "AffineTransform":
        return cls(translate_x=tx, translate_y=ty)

    @classmethod
    def from_rotate(cls, degrees: float) -> "AffineTransform":
        """Rotation about the origin.

        Positive angles turn the x axis towards the y axis, which is clockwise
        on a y-down surface.
        """
        radians = math.radians(degrees)
        cos = math.cos(radians)
        sin = math.sin(radians)
        return cls(scale_x=cos, shear_x=-sin, shear_y=sin, scale_y=cos)

    @classmethod
    def from_list(cls, values: "list[float] | tuple[float, ...]") -> "AffineTransform":
        """Build from [sx, kx, ky, sy, tx, ty].

        Raises:
            ValueError: If values does not hold exactly 6 numbers
        """
        if len(values) != 6:
            raise ValueError(f"Transform needs 6 values, got {len(values)}")
        return cls(*(float(v) for v in values))

    def to_list(self) -> list[float]:
        """Convert to [sx, kx, ky, sy, tx, ty]."""
        return [
            self.scale_x,
            self.shear_x,
            self.shear_y,
            self.scale_y,
            self.translate_x,
            self.translate_y,
        ]

    def then(self, operation: "AffineTransform") -> "AffineTransform":
        """Compose so that operation is applied to points before self.

        This is how canvas scale/translate/rotate accumulate: the new
        operation acts in the current user space.
        """
        a = self
        b = operation
        return AffineTransform(
            scale_x=a.scale_x * b.scale_x + a.shear_x * b.shear_y,
            shear_x=a.scale_x * b.shear_x + a.shear_x * b.scale_y,
            shear_y=a.shear_y * b.scale_x + a.scale_y * b.shear_y,
            scale_y=a.shear_y * b.shear_x + a.scale_y * b.scale_y,
            translate_x=a.scale_x * b.translate_x + a.shear_x * b.translate_y + a.translate_x,
            translate_y=a.shear_y * b.translate_x + a.scale_y * b.translate_y + a.translate_y,
        )

    def max_scale(self) -> float:
        """Largest magnification of the linear part.

        Uses the diagonal scale factors, falling back to the column lengths
        when both are zero (quarter-turn rotations).
        """
        diagonal = max(abs(self.scale_x), abs(self.scale_y))
        if diagonal > 0.0:
            return diagonal
        return max(
            math.hypot(self.scale_x, self.shear_y),
            math.hypot(self.shear_x, self.scale_y),
        )


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle.

    Attributes:
        x: Left edge
        y: Top edge
        width: Extent to the right, never negative
        height: Extent downwards, never negative
    """

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def normalized(cls, x: float, y: float, width: float, height: float) -> "Rect":
        """Build a rect with positive extents from possibly negative ones.

        A negative width or height means the given corner is the right or
        bottom edge, as in the canvas API.
        """
        left = x + width if width < 0 else x
        top = y + height if height < 0 else y
        return cls(left, top, abs(width), abs(height))
