"""Canonical color value: gamma-encoded sRGB, channels normalized to [0, 1]."""

from typing import NamedTuple


def clamp(v: float, lo: float = 0.0, hi: float = 1.0) -> float:
    """Clamp value between lo and hi."""
    return max(lo, min(hi, v))


class Color(NamedTuple):
    r: float
    g: float
    b: float

    @classmethod
    def from_rgb255(cls, r: int, g: int, b: int) -> "Color":
        """Build from 8-bit channels; out-of-range integers are clamped."""
        return cls(*(clamp(c, 0, 255) / 255.0 for c in (r, g, b)))

    def rgb255(self) -> tuple[int, int, int]:
        """Round each channel half-up to the nearest 8-bit value, clamped to [0, 255]."""
        return tuple(int(clamp(c) * 255.0 + 0.5) for c in self)  # type: ignore[return-value]

    def clamped(self) -> "Color":
        return Color(clamp(self.r), clamp(self.g), clamp(self.b))
