"""VexCanvas - A small canvas-like drawing surface for music notation.

VexCanvas implements the subset of the browser CanvasRenderingContext2D API
that a music engraver such as VexFlow needs: solid color paths and rectangles,
save/restore, affine transforms, and sharp text rendering from a fixed set of
bundled fonts (Bravura for SMuFL glyphs, Academico for text).

Example:
    >>> from vexcanvas import DrawContext
    >>> ctx = DrawContext(200, 100, 2.0, "#fff", "#000")
    >>> ctx.font = "24pt Bravura,Academico"
    >>> ctx.fill_text("\\ue050", 10, 60)
    >>> ctx.save_png("out/clef.png")
"""

from vexcanvas.core.context import DrawContext
from vexcanvas.core.fonts import FontLibrary

__version__ = "0.1.0"

__all__ = ["DrawContext", "FontLibrary", "__version__"]
