"""Font library and glyph resolution.

The library owns five font assets loaded once at construction: one SMuFL
music font and four text fonts (regular, italic, bold, bold italic). No font
family is ever looked up by name; the library decides which asset serves a
codepoint:

1. Music symbols (the SMuFL private-use range) come from the music font.
2. Everything else comes from the text font matching the bold/italic flags.
"""

import logging
import math
from dataclasses import dataclass

from vexcanvas.config import FontConfig, FontRole
from vexcanvas.domain.glyph import GlyphOutline, PositionedGlyph
from vexcanvas.domain.style import pt_to_px
from vexcanvas.exceptions import FontLoadError, GlyphScaleError, InvalidCodepointError
from vexcanvas.io.converter import extract_outline
from vexcanvas.io.reader import FontReader

logger = logging.getLogger(__name__)

# https://www.w3.org/2021/03/smufl14/about/recommended-chars-optional-glyphs.html
SMUFL_FIRST = 0xE000
SMUFL_LAST = 0xF8FF

SPACE = 0x20

CODEPOINT_REMAP: dict[int, int] = {
    # White Up-Pointing Triangle -> csymMajorSeventh
    0x25B3: 0xE873,
    # Latin Small Letter O with Stroke -> csymHalfDiminished
    0x00F8: 0xE871,
    # White Circle -> csymDiminished
    0x25CB: 0xE870,
    # Known gaps in the music font, drawn as blanks without diagnostics
    0xE31A: SPACE,
    0xE31B: SPACE,
    0xE3DE: SPACE,
    0xE3DF: SPACE,
}


def remap_codepoint(codepoint: int) -> int:
    """Redirect codepoints that render better as (or are missing from) music glyphs."""
    return CODEPOINT_REMAP.get(codepoint, codepoint)


def is_in_smufl(codepoint: int) -> bool:
    """Decide if a codepoint is in the SMuFL range."""
    return SMUFL_FIRST <= codepoint <= SMUFL_LAST


def check_codepoint(codepoint: int) -> str:
    """Convert a codepoint to a character.

    Raises:
        InvalidCodepointError: For negative values, values past U+10FFFF
            and UTF-16 surrogates
    """
    if 0xD800 <= codepoint <= 0xDFFF:
        raise InvalidCodepointError(codepoint)
    try:
        return chr(codepoint)
    except (ValueError, OverflowError) as e:
        raise InvalidCodepointError(codepoint) from e


@dataclass(frozen=True)
class ScaledFont:
    """A font asset viewed at a pixel size.

    Attributes:
        reader: The loaded font
        pixel_size: Pixels per em
    """

    reader: FontReader
    pixel_size: float

    @property
    def name(self) -> str:
        return self.reader.name

    @property
    def scale(self) -> float:
        """Pixels per font unit."""
        return self.pixel_size / self.reader.units_per_em

    def ascent(self) -> float:
        """Distance from baseline to the font ascender, in pixels (positive)."""
        return self.reader.ascent * self.scale

    def descent(self) -> float:
        """Distance from baseline to the font descender, in pixels (positive)."""
        return -self.reader.descent * self.scale

    def h_advance(self, glyph: PositionedGlyph) -> float:
        """Horizontal advance of a glyph in pixels."""
        return self.reader.advance_width(glyph.name) * self.scale

    def outline_glyph(self, glyph: PositionedGlyph) -> GlyphOutline | None:
        """Outline of the glyph in pixel space, or None if it has no contours."""
        return extract_outline(self.reader.glyph_set, glyph, self.scale)


class FontLibrary:
    """A library of fonts that are ready to use.

    Example:
        library = FontLibrary.from_config(FontConfig(font_dir=Path("fonts")))
        scaled, glyph = library.resolve_glyph(0xE050, 24.0, italic=False, bold=False)
        advance = scaled.h_advance(glyph)
    """

    def __init__(self, fonts: dict[FontRole, FontReader]) -> None:
        """Initialize from already loaded readers.

        Args:
            fonts: One loaded reader per role

        Raises:
            ValueError: If a role has no reader
        """
        missing = [role.value for role in FontRole if role not in fonts]
        if missing:
            raise ValueError(f"Font library is missing fonts for: {', '.join(missing)}")
        self._fonts = dict(fonts)

    @classmethod
    def from_config(cls, config: FontConfig) -> "FontLibrary":
        """Load all five font assets named by a FontConfig.

        Raises:
            FontLoadError: If any asset is missing or not a valid font
        """
        fonts: dict[FontRole, FontReader] = {}
        for role in FontRole:
            path = config.path_for(role)
            reader = FontReader(path)
            try:
                reader.load()
            except Exception as e:
                for loaded in fonts.values():
                    loaded.close()
                raise FontLoadError(str(path), str(e)) from e
            logger.debug(
                "Loaded %s font from %s (%s, %d glyphs)",
                role.value,
                path,
                reader.format,
                reader.glyph_count,
            )
            fonts[role] = reader
        return cls(fonts)

    @staticmethod
    def select_role(codepoint: int, italic: bool, bold: bool) -> FontRole:
        """Pick the asset serving a (remapped) codepoint."""
        if is_in_smufl(codepoint):
            return FontRole.MUSIC
        if italic:
            return FontRole.BOLD_ITALIC if bold else FontRole.ITALIC
        return FontRole.BOLD if bold else FontRole.REGULAR

    def resolve_glyph(
        self,
        codepoint: int,
        size: float,
        italic: bool,
        bold: bool,
        subpixel_x: float = 0.0,
        subpixel_y: float = 0.0,
    ) -> tuple[ScaledFont, PositionedGlyph]:
        """Given a codepoint, compute the scaled font and positioned glyph.

        The subpixel position should be the fractional part of the glyph's
        pixel position. It becomes part of the outline geometry, so the
        antialiasing of the rendered glyph matches where it will land.

        Args:
            codepoint: Unicode scalar value to render
            size: Font size in points
            italic: Use an italic text font
            bold: Use a bold text font
            subpixel_x: Fractional horizontal pen offset in pixels
            subpixel_y: Fractional vertical pen offset in pixels

        Returns:
            (scaled font, positioned glyph) pair

        Raises:
            InvalidCodepointError: If codepoint is not a character
            GlyphScaleError: If size is not a positive finite number
        """
        check_codepoint(codepoint)
        mapped = remap_codepoint(codepoint)

        if not math.isfinite(size) or size <= 0.0:
            raise GlyphScaleError(size)

        reader = self._fonts[self.select_role(mapped, italic, bold)]
        glyph = PositionedGlyph(
            codepoint=mapped,
            name=reader.glyph_name(mapped),
            x=subpixel_x,
            y=subpixel_y,
            mapped=reader.has_codepoint(mapped),
        )
        return ScaledFont(reader, pt_to_px(size)), glyph

    def close(self) -> None:
        """Close all font assets."""
        for reader in self._fonts.values():
            reader.close()
