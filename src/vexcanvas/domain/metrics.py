"""Text measurement results."""

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class TextMetrics:
    """Measurements of one or more glyphs, in host pixel units.

    Mirrors the fields of the browser TextMetrics object. All distances are
    positive outwards from the pen origin: ascents go up from the baseline,
    descents go down, ink_left goes left and ink_right goes right.

    Attributes:
        width: Horizontal advance
        font_ascent: Font-wide ascent (fontBoundingBoxAscent)
        font_descent: Font-wide descent (fontBoundingBoxDescent)
        ink_ascent: Top of the inked pixels (actualBoundingBoxAscent)
        ink_descent: Bottom of the inked pixels (actualBoundingBoxDescent)
        ink_left: Left edge of the inked pixels (actualBoundingBoxLeft)
        ink_right: Right edge of the inked pixels (actualBoundingBoxRight)
    """

    width: float
    font_ascent: float
    font_descent: float
    ink_ascent: float = 0.0
    ink_descent: float = 0.0
    ink_left: float = 0.0
    ink_right: float = 0.0

    def followed_by(self, other: "TextMetrics") -> "TextMetrics":
        """Metrics of this run with another glyph appended.

        The right ink edge belongs to the appended glyph, offset by the
        advance accumulated so far. Vertical ink extents grow to contain both.
        """
        return replace(
            self,
            width=self.width + other.width,
            ink_right=self.width + other.ink_right,
            ink_ascent=max(self.ink_ascent, other.ink_ascent),
            ink_descent=max(self.ink_descent, other.ink_descent),
        )

    def to_host_dict(self) -> dict[str, float]:
        """Serialize with the browser TextMetrics property names."""
        return {
            "width": self.width,
            "fontBoundingBoxAscent": self.font_ascent,
            "fontBoundingBoxDescent": self.font_descent,
            "actualBoundingBoxAscent": self.ink_ascent,
            "actualBoundingBoxDescent": self.ink_descent,
            "actualBoundingBoxLeft": self.ink_left,
            "actualBoundingBoxRight": self.ink_right,
        }
