"""Style value types: colors and font descriptions.

Both types are immutable. Setting a style on a drawing context replaces the
whole value, so snapshots taken by save() can share instances safely.
"""

from dataclasses import dataclass

DEFAULT_FONT_SIZE = 30.0


def pt_to_px(size: float) -> float:
    """Convert a size in points to pixels per em (96 px to 72 pt per inch)."""
    # Multiply first so sizes divisible by 3 convert exactly
    return size * 4.0 / 3.0


@dataclass(frozen=True, slots=True)
class Color:
    """Straight (non-premultiplied) RGBA color.

    Attributes:
        red: Red channel in [0, 1]
        green: Green channel in [0, 1]
        blue: Blue channel in [0, 1]
        alpha: Opacity in [0, 1]
    """

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def black(cls) -> "Color":
        """Opaque black, the fallback for anything unparseable."""
        return cls(0.0, 0.0, 0.0, 1.0)

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (r, g, b, a) tuple."""
        return (self.red, self.green, self.blue, self.alpha)

    def to_bytes(self) -> tuple[int, int, int, int]:
        """Convert to 8-bit channels, rounded to the nearest byte."""
        return tuple(  # type: ignore[return-value]
            min(255, max(0, int(round(c * 255.0)))) for c in self.to_tuple()
        )

    def premultiplied(self, coverage: float = 1.0) -> tuple[float, float, float, float]:
        """Premultiply by alpha, optionally scaled by a coverage value.

        Args:
            coverage: Extra opacity factor in [0, 1] (e.g. antialiasing coverage);
                a numpy array of samples broadcasts to per-sample channels

        Returns:
            (r*a, g*a, b*a, a) with a = alpha * coverage
        """
        a = self.alpha * coverage
        return (self.red * a, self.green * a, self.blue * a, a)


@dataclass(frozen=True, slots=True)
class FontStyle:
    """Parsed font description.

    Attributes:
        family: Family names in fallback order
        size: Size in points (1pt = 4/3 px)
        bold: Bold weight requested
        italic: Italic style requested
    """

    family: tuple[str, ...] = ()
    size: float = DEFAULT_FONT_SIZE
    bold: bool = False
    italic: bool = False
