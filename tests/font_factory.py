"""Synthetic fonts with known geometry for tests.

All fonts use 1000 units per em, ascender 800 and descender -200. At the
default 30pt (40 px/em, 0.04 px per unit) the regular "A" is a 16x28 px
box starting 4 px right of the pen with a 24 px advance.
"""

from pathlib import Path

from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from vexcanvas.config import FontConfig, FontRole

UPM = 1000
PX_PER_UNIT_30PT = 0.04

A_BOX = (100, 0, 500, 700)
B_BOX = (100, 0, 600, 700)
NOTDEF_BOX = (50, 0, 450, 700)

# Advance of "A" per text style, so the chosen font is observable
A_ADVANCES = {
    FontRole.REGULAR: 600,
    FontRole.ITALIC: 610,
    FontRole.BOLD: 620,
    FontRole.BOLD_ITALIC: 630,
}
B_ADVANCE = 700
SPACE_ADVANCE = 250
# Blank glyph that is not U+0020, drawn as nothing with a diagnostic
EM_SPACE = 0x2003
EM_SPACE_ADVANCE = 1000
NOTDEF_ADVANCE = 500

# SMuFL glyphs: codepoint -> (box, advance)
MUSIC_GLYPHS = {
    0xE050: ((0, -200, 500, 800), 600),
    0xE870: ((100, 0, 300, 200), 400),
    0xE871: ((100, 0, 300, 210), 410),
    0xE873: ((100, 0, 300, 220), 420),
}

Box = tuple[int, int, int, int]


def _box(x_min: int, y_min: int, x_max: int, y_max: int):
    pen = TTGlyphPen(None)
    pen.moveTo((x_min, y_min))
    pen.lineTo((x_min, y_max))
    pen.lineTo((x_max, y_max))
    pen.lineTo((x_max, y_min))
    pen.closePath()
    return pen.glyph()


def build_font(
    path: Path,
    style_name: str,
    glyphs: dict[str, tuple[Box | None, int]],
    cmap: dict[int, str],
) -> None:
    """Write a TrueType font of box glyphs.

    Args:
        path: Output file
        style_name: Name table style
        glyphs: glyph name -> (box, or None for an empty glyph; advance)
        cmap: codepoint -> glyph name
    """
    builder = FontBuilder(UPM, isTTF=True)
    builder.setupGlyphOrder(list(glyphs))
    builder.setupCharacterMap(cmap)
    builder.setupGlyf(
        {
            name: _box(*box) if box else TTGlyphPen(None).glyph()
            for name, (box, _) in glyphs.items()
        }
    )
    builder.setupHorizontalMetrics(
        {name: (advance, box[0] if box else 0) for name, (box, advance) in glyphs.items()}
    )
    builder.setupHorizontalHeader(ascent=800, descent=-200)
    builder.setupNameTable({"familyName": "VexTest", "styleName": style_name})
    builder.setupOS2(sTypoAscender=800, sTypoDescender=-200, usWinAscent=800, usWinDescent=200)
    builder.setupPost()
    builder.save(str(path))


def build_font_set(directory: Path) -> FontConfig:
    """Write all five fonts into a directory under their default file names.

    Returns:
        FontConfig pointing at the directory
    """
    config = FontConfig(font_dir=directory)
    notdef = (NOTDEF_BOX, NOTDEF_ADVANCE)

    for role, a_advance in A_ADVANCES.items():
        build_font(
            config.path_for(role),
            role.value,
            {
                ".notdef": notdef,
                "space": (None, SPACE_ADVANCE),
                "A": (A_BOX, a_advance),
                "B": (B_BOX, B_ADVANCE),
                "emspace": (None, EM_SPACE_ADVANCE),
            },
            {0x20: "space", 0x41: "A", 0x42: "B", EM_SPACE: "emspace"},
        )

    music_glyphs: dict[str, tuple[Box | None, int]] = {".notdef": notdef}
    music_cmap = {}
    for codepoint, (box, advance) in MUSIC_GLYPHS.items():
        name = f"uni{codepoint:04X}"
        music_glyphs[name] = (box, advance)
        music_cmap[codepoint] = name
    build_font(config.path_for(FontRole.MUSIC), "Music", music_glyphs, music_cmap)

    return config
