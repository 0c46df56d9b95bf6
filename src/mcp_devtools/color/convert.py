"""Derive every output representation from a canonical Color.

Everything here is a pure function of the Color; convert_color() is the one
entry point that turns user text into a ColorOutput.
"""

import colorsys

from pydantic import BaseModel, Field

from mcp_devtools.color.model import Color, clamp
from mcp_devtools.color.parser import parse_color

# ITU-R BT.709 weights, applied to gamma-encoded 8-bit channels
RED_LUMINANCE = 0.2126
GREEN_LUMINANCE = 0.7152
BLUE_LUMINANCE = 0.0722

LIGHT_THRESHOLD = 0.5

# D65 reference white
XN, YN, ZN = 0.95047, 1.00000, 1.08883

# sRGB (D65) linear RGB -> XYZ
SRGB_TO_XYZ = (
    (0.41239079926595948, 0.35758433938387796, 0.18048078840183429),
    (0.21263900587151036, 0.71516867876775593, 0.072192315360733715),
    (0.019330818715591851, 0.11919477979462599, 0.95053215224966058),
)

_LAB_EPSILON = (6 / 29) ** 3
_LAB_KAPPA = 3 * (6 / 29) ** 2


class ColorOutput(BaseModel):
    hex: str = Field(description="Hexadecimal color representation")
    rgb: str = Field(description="RGB color representation")
    hsl: str = Field(description="HSL color representation")
    hsv: str = Field(description="HSV color representation")
    cmyk: str = Field(description="CMYK color representation")
    lab: str = Field(description="LAB color representation")
    xyz: str = Field(description="XYZ color representation")
    linear_rgb: str = Field(description="Linear RGB color representation")
    luminance: float = Field(description="Relative luminance (0-1)")
    is_light: bool = Field(description="Whether the color is light (luminance > 0.5)")
    is_dark: bool = Field(description="Whether the color is dark (luminance <= 0.5)")
    original: str = Field(description="Original input color value")


def fmt(value: float, places: int) -> str:
    """Fixed-precision number; values that round to zero print without a sign."""
    text = f"{value:.{places}f}"
    if text.startswith("-") and float(text) == 0:
        return text[1:]
    return text


def to_hex(color: Color) -> str:
    r, g, b = color.rgb255()
    return f"#{r:02x}{g:02x}{b:02x}"


def to_hsl(color: Color) -> tuple[float, float, float]:
    """Hue in degrees [0, 360), saturation and lightness as fractions."""
    h, light, sat = colorsys.rgb_to_hls(*color.clamped())
    return h * 360.0, sat, light


def to_hsv(color: Color) -> tuple[float, float, float]:
    h, s, v = colorsys.rgb_to_hsv(*color.clamped())
    return h * 360.0, s, v


def to_cmyk(color: Color) -> tuple[float, float, float, float]:
    """CMYK from the 8-bit channels; pure black short-circuits to (0, 0, 0, 1)."""
    r, g, b = (c / 255.0 for c in color.rgb255())
    k = 1.0 - max(r, g, b)
    if k >= 1.0:
        return 0.0, 0.0, 0.0, 1.0
    return (1.0 - r - k) / (1.0 - k), (1.0 - g - k) / (1.0 - k), (1.0 - b - k) / (1.0 - k), k


def _linearize(v: float) -> float:
    if v <= 0.04045:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def to_linear_rgb(color: Color) -> tuple[float, float, float]:
    return tuple(_linearize(c) for c in color.clamped())  # type: ignore[return-value]


def to_xyz(color: Color) -> tuple[float, float, float]:
    lin = to_linear_rgb(color)
    return tuple(sum(m * c for m, c in zip(row, lin)) for row in SRGB_TO_XYZ)  # type: ignore[return-value]


def _lab_f(t: float) -> float:
    if t > _LAB_EPSILON:
        return t ** (1 / 3)
    return t / _LAB_KAPPA + 4 / 29


def to_lab(color: Color) -> tuple[float, float, float]:
    """CIE L*a*b* against D65, L* on the 0-100 scale."""
    x, y, z = to_xyz(color)
    fx, fy, fz = _lab_f(x / XN), _lab_f(y / YN), _lab_f(z / ZN)
    return 116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)


def luminance(color: Color) -> float:
    """Weighted sum of the gamma-encoded 8-bit channels, normalized to [0, 1].

    Not the linear-light relative luminance of WCAG; kept for output
    compatibility.
    """
    r, g, b = color.rgb255()
    return clamp((RED_LUMINANCE * r + GREEN_LUMINANCE * g + BLUE_LUMINANCE * b) / 255.0)


def describe(color: Color, original: str) -> ColorOutput:
    """Render every representation of an already-parsed Color."""
    r, g, b = color.rgb255()
    h, s, l = to_hsl(color)
    hv, sv, v = to_hsv(color)
    c, m, y, k = to_cmyk(color)
    lab_l, lab_a, lab_b = to_lab(color)
    x, yv, z = to_xyz(color)
    lr, lg, lb = to_linear_rgb(color)
    lum = luminance(color)
    light = lum > LIGHT_THRESHOLD

    return ColorOutput(
        hex=to_hex(color),
        rgb=f"rgb({r}, {g}, {b})",
        hsl=f"hsl({fmt(h, 1)}, {fmt(s * 100, 1)}%, {fmt(l * 100, 1)}%)",
        hsv=f"hsv({fmt(hv, 1)}, {fmt(sv * 100, 1)}%, {fmt(v * 100, 1)}%)",
        cmyk=f"cmyk({fmt(c * 100, 1)}%, {fmt(m * 100, 1)}%, {fmt(y * 100, 1)}%, {fmt(k * 100, 1)}%)",
        lab=f"lab({fmt(lab_l, 2)}, {fmt(lab_a, 2)}, {fmt(lab_b, 2)})",
        xyz=f"xyz({fmt(x, 3)}, {fmt(yv, 3)}, {fmt(z, 3)})",
        linear_rgb=f"linear-rgb({fmt(lr, 3)}, {fmt(lg, 3)}, {fmt(lb, 3)})",
        luminance=lum,
        is_light=light,
        is_dark=not light,
        original=original,
    )


def convert_color(text: str) -> ColorOutput:
    """Parse text once and derive all representations."""
    return describe(parse_color(text), text)
