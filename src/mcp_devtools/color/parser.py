"""CSS-like color parsing.

Supported forms, tried in this order:

    #rgb, #rrggbb, #rrggbbaa   (alpha ignored)
    rgb(R, G, B)               (integers, clamped to 0..255)
    hsl(H, S%, L%)             (hue wraps modulo 360, S/L clamped to 0..100)
    named colors               (NAMED_COLORS, case-insensitive)

parse_color() is the only place that detects formats.
"""

import colorsys
import logging
import re
from collections.abc import Callable

from mcp_devtools.color.model import Color, clamp
from mcp_devtools.errors import UnparseableColor

logger = logging.getLogger(__name__)

NAMED_COLORS: dict[str, str] = {
    "red": "#ff0000",
    "green": "#008000",
    "blue": "#0000ff",
    "white": "#ffffff",
    "black": "#000000",
    "yellow": "#ffff00",
    "cyan": "#00ffff",
    "magenta": "#ff00ff",
    "gray": "#808080",
    "orange": "#ffa500",
    "purple": "#800080",
    "pink": "#ffc0cb",
    "brown": "#a52a2a",
    "lime": "#00ff00",
    "navy": "#000080",
}

_num = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)"
_int = r"[+-]?\d+"
_comma = r"\s*,\s*"

HEX_RE = re.compile(r"^#([0-9a-f]{3}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
RGB_RE = re.compile(rf"^rgb\(\s*({_int}){_comma}({_int}){_comma}({_int})\s*\)$", re.IGNORECASE)
HSL_RE = re.compile(rf"^hsl\(\s*({_num}){_comma}({_num})%{_comma}({_num})%\s*\)$", re.IGNORECASE)


def parse_hex(s: str) -> Color | None:
    m = HEX_RE.match(s)
    if not m:
        return None
    digits = m.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return Color.from_rgb255(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def _channel(text: str) -> int:
    # anything past three significant digits is out of range either way
    if len(text.lstrip("+-").lstrip("0")) > 3:
        return -1 if text.startswith("-") else 256
    return int(text)


def parse_rgb(s: str) -> Color | None:
    m = RGB_RE.match(s)
    if not m:
        return None
    r, g, b = (_channel(v) for v in m.groups())
    if not all(0 <= c <= 255 for c in (r, g, b)):
        logger.debug("clamping out-of-range rgb channels in %r", s)
    return Color.from_rgb255(r, g, b)


def parse_hsl(s: str) -> Color | None:
    m = HSL_RE.match(s)
    if not m:
        return None
    h, sat, light = (float(v) for v in m.groups())
    hue = (h % 360.0) / 360.0
    r, g, b = colorsys.hls_to_rgb(hue, clamp(light / 100.0), clamp(sat / 100.0))
    return Color(r, g, b)


def parse_named(s: str) -> Color | None:
    hex_value = NAMED_COLORS.get(s.lower())
    if hex_value is None:
        return None
    return parse_hex(hex_value)


MATCHERS: tuple[tuple[str, Callable[[str], Color | None]], ...] = (
    ("hex", parse_hex),
    ("rgb", parse_rgb),
    ("hsl", parse_hsl),
    ("named", parse_named),
)


def parse_color(text: str) -> Color:
    """Parse a color string into a canonical Color.

    Raises UnparseableColor (carrying the original text) when no form matches.
    """
    s = text.strip()
    for form, matcher in MATCHERS:
        color = matcher(s)
        if color is not None:
            logger.debug("parsed %r as %s", text, form)
            return color
    raise UnparseableColor(text)
