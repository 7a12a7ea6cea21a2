"""I/O layer for vexcanvas.

This module handles reading the bundled font files with fonttools and
writing finished surfaces as PNG images. It provides a clean abstraction
layer between fonttools/pycairo and the drawing context.

Key responsibilities:
- Load TTF/OTF font assets and answer cmap/metric queries
- Convert fonttools glyph outlines into pixel-space outlines
- Write surfaces to PNG, creating parent directories

Key classes:
- FontReader: Load a font and look up glyphs
- PngWriter: Save a surface
"""

from vexcanvas.io.reader import FontReader
from vexcanvas.io.writer import PngWriter

__all__ = [
    "FontReader",
    "PngWriter",
]
