"""Font and color string grammars.

Just enough CSS to talk to a music engraver, not general CSS parsing.
Parsing is permissive: anything unrecognized falls back to a default
instead of raising, because style strings are cosmetic input.
"""

import logging
import re

from vexcanvas.domain.style import Color, FontStyle

logger = logging.getLogger(__name__)

NAMED_COLORS: dict[str, str] = {
    "none": "#0000",
    "transparent": "#0000",
    "black": "#000",
    "white": "#fff",
    "red": "#f00",
    "green": "#008000",
    "blue": "#00f",
    "purple": "#800080",
    "darkturquoise": "#00ced1",
    "tomato": "#ff6347",
    "lawngreen": "#7cfc00",
    "orange": "#ffa500",
    "brown": "#a52a2a",
    "lightgreen": "#90ee90",
}

# Whitespace separated terms, keeping double-quoted runs together
_FONT_TERM = re.compile(r'(?:[^\s"]+|"[^"]*")+')
_FAMILY_ITEM = re.compile(r'"([^"]*)"|([^,]+)')
_PT_SIZE = re.compile(r"^(\d+(?:\.\d*)?)pt$")
_PX_SIZE = re.compile(r"^(\d+(?:\.\d*)?)px$")
_BARE_NUMBER = re.compile(r"^\d+(?:\.\d*)?$|^\.\d+$")

_HEX = "[0-9a-fA-F]"
_HEX_PATTERNS: list[tuple[re.Pattern[str], int]] = [
    (re.compile(rf"^#({_HEX})({_HEX})({_HEX})$"), 1),
    (re.compile(rf"^#({_HEX})({_HEX})({_HEX})({_HEX})$"), 1),
    (re.compile(rf"^#({_HEX}{{2}})({_HEX}{{2}})({_HEX}{{2}})$"), 2),
    (re.compile(rf"^#({_HEX}{{2}})({_HEX}{{2}})({_HEX}{{2}})({_HEX}{{2}})$"), 2),
]
_RGB = re.compile(r"^rgb\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)$")
_RGBA = re.compile(
    r"^rgba\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+(?:\.\d*)?|\.\d+)\s*\)$"
)


def _format_size(size: float) -> str:
    if float(size).is_integer():
        return str(int(size))
    return repr(float(size))


def _split_families(term: str) -> list[str]:
    families = []
    for match in _FAMILY_ITEM.finditer(term):
        name = match.group(1) if match.group(1) is not None else match.group(2)
        name = name.strip()
        if name:
            families.append(name)
    return families


def parse_font(text: str) -> FontStyle:
    """Parse a CSS-like font string such as '30pt Bravura,Academico'.

    Recognized terms:
        bold, italic      set the matching flag
        <n>pt             size in points
        <n>px             size in pixels (converted to points, 1px = 0.75pt)
        anything else     comma separated family fallbacks, quotes allowed

    Bare numbers without a unit are ignored. Missing terms keep the default
    (30pt, no family, regular weight and style).

    Args:
        text: Font description

    Returns:
        Parsed FontStyle (never raises)
    """
    families: list[str] = []
    size = FontStyle().size
    bold = False
    italic = False

    for match in _FONT_TERM.finditer(text):
        term = match.group(0)
        if term == "bold":
            bold = True
        elif term == "italic":
            italic = True
        elif pt := _PT_SIZE.match(term):
            size = float(pt.group(1))
        elif px := _PX_SIZE.match(term):
            size = float(px.group(1)) * 0.75
        elif _BARE_NUMBER.match(term):
            logger.debug("Ignoring unitless font term %r", term)
        else:
            families.extend(_split_families(term))

    return FontStyle(family=tuple(families), size=size, bold=bold, italic=italic)


def unparse_font(style: FontStyle) -> str:
    """Format a FontStyle as '[bold] [italic] <size>pt [families]'.

    Family names containing a space are double-quoted. Sizes are always
    written in points.
    """
    terms = []
    if style.bold:
        terms.append("bold")
    if style.italic:
        terms.append("italic")
    terms.append(f"{_format_size(style.size)}pt")
    if style.family:
        terms.append(",".join(f'"{name}"' if " " in name else name for name in style.family))
    return " ".join(terms)


def _channels_to_color(channels: list[int], alpha: float = 1.0) -> Color | None:
    if any(c > 255 for c in channels) or not 0.0 <= alpha <= 1.0:
        return None
    r, g, b = channels
    return Color(r / 255.0, g / 255.0, b / 255.0, alpha)


def _parse_hex(text: str) -> Color | None:
    for pattern, digits in _HEX_PATTERNS:
        match = pattern.match(text)
        if match is None:
            continue
        # Single digit channels repeat the digit: f -> ff
        values = [int(group, 16) * (17 if digits == 1 else 1) for group in match.groups()]
        alpha = values[3] / 255.0 if len(values) == 4 else 1.0
        return _channels_to_color(values[:3], alpha)
    return None


def parse_color(text: str) -> Color:
    """Parse a CSS-like color string.

    Supported forms, tried in order after named-color substitution:
    #rgb, #rgba, #rrggbb, #rrggbbaa, rgb(r,g,b), rgba(r,g,b,a).

    Args:
        text: Color description

    Returns:
        Parsed Color, or opaque black if nothing matches (never raises)
    """
    current = text.strip()
    current = NAMED_COLORS.get(current, current)

    color = _parse_hex(current)
    if color is not None:
        return color

    if match := _RGB.match(current):
        color = _channels_to_color([int(g) for g in match.groups()])
        if color is not None:
            return color

    if match := _RGBA.match(current):
        r, g, b, a = match.groups()
        color = _channels_to_color([int(r), int(g), int(b)], float(a))
        if color is not None:
            return color

    logger.debug("Unrecognized color %r, using black", text)
    return Color.black()


def unparse_color(color: Color) -> str:
    """Format a Color as #rrggbbaa, rounding channels to the nearest byte."""
    return "#{:02x}{:02x}{:02x}{:02x}".format(*color.to_bytes())
