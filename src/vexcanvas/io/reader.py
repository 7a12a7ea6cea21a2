"""Font reader for loading the bundled TTF/OTF assets.

This module provides the FontReader class, a thin read-only view over a
fontTools TTFont that exposes the metrics and glyph lookups the renderer
needs.
"""

from pathlib import Path
from typing import Any

from fontTools.ttLib import TTFont

NOTDEF = ".notdef"


class FontReader:
    """Loads a TTF/OTF font and answers metric and glyph queries.

    All values are in font units; scaling to pixels is done by the caller.

    Example:
        reader = FontReader(Path("Bravura.otf"))
        reader.load()
        name = reader.glyph_name(0xE050)
        advance = reader.advance_width(name)
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None
        self._cmap: dict[int, str] = {}
        self._glyph_set: Any = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            Exception: If font file is invalid or cannot be loaded
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        self._font = TTFont(str(self._font_path))
        self._cmap = self._font.getBestCmap() or {}
        self._glyph_set = self._font.getGlyphSet()

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def path(self) -> Path:
        return self._font_path

    @property
    def name(self) -> str:
        """Short name for diagnostics (the file stem)."""
        return self._font_path.stem

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for TTF fonts, 'OpenType' for OTF fonts

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()

        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["maxp"].numGlyphs

    @property
    def ascent(self) -> int:
        """Font-wide ascender from the hhea table (positive, y-up)."""
        return self._require_font()["hhea"].ascent  # type: ignore[attr-defined]

    @property
    def descent(self) -> int:
        """Font-wide descender from the hhea table (negative, y-up)."""
        return self._require_font()["hhea"].descent  # type: ignore[attr-defined]

    @property
    def glyph_set(self) -> Any:
        """The fontTools glyph set used for drawing outlines."""
        self._require_font()
        return self._glyph_set

    def has_codepoint(self, codepoint: int) -> bool:
        """Check whether the cmap maps a codepoint."""
        self._require_font()
        return codepoint in self._cmap

    def glyph_name(self, codepoint: int) -> str:
        """Get the glyph name for a codepoint.

        Unmapped codepoints resolve to .notdef, as font engines do.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        self._require_font()
        return self._cmap.get(codepoint, NOTDEF)

    def advance_width(self, glyph_name: str) -> int:
        """Get the horizontal advance of a glyph in font units.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        advance, _lsb = self._require_font()["hmtx"][glyph_name]
        return advance

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None
            self._cmap = {}
            self._glyph_set = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
