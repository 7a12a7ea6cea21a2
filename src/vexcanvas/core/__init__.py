"""Core drawing components for vexcanvas.

This module contains the pieces the drawing context is assembled from:

- Style grammars (CSS-like font and color strings)
- Font resolution (music vs. text font selection, codepoint remapping)
- Draw state and the save/restore stack
- Path building and replay onto cairo
- Text measurement and glyph compositing

Key classes:
- DrawContext: Canvas-like orchestrator over an owned pixel surface
- FontLibrary: The five loaded font assets and glyph resolution
- TextRenderer: Glyph measurement and compositing
- PathBuilder: Path segment accumulator
- SpanFontParser: Font string normalizer for span measurement
"""

from vexcanvas.core.context import DrawContext
from vexcanvas.core.fonts import (
    CODEPOINT_REMAP,
    SMUFL_FIRST,
    SMUFL_LAST,
    FontLibrary,
    ScaledFont,
    is_in_smufl,
    remap_codepoint,
)
from vexcanvas.core.grammar import parse_color, parse_font, unparse_color, unparse_font
from vexcanvas.core.path import PathBuilder, replay_path
from vexcanvas.core.span import SpanFontParser
from vexcanvas.core.state import DrawState, StateStack
from vexcanvas.core.text import TextRenderer, extra_zoom

__all__ = [
    "CODEPOINT_REMAP",
    "SMUFL_FIRST",
    "SMUFL_LAST",
    "DrawContext",
    "DrawState",
    "FontLibrary",
    "PathBuilder",
    "ScaledFont",
    "SpanFontParser",
    "StateStack",
    "TextRenderer",
    "extra_zoom",
    "is_in_smufl",
    "parse_color",
    "parse_font",
    "remap_codepoint",
    "replay_path",
    "unparse_color",
    "unparse_font",
]
