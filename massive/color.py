"""RGBA colors."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import ClassVar


@dataclass(frozen=True)
class Color:
    """A color with red, green, blue and alpha components in 0..1."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]

    @classmethod
    def rgb(cls, red: float, green: float, blue: float) -> Color:
        return cls(red, green, blue, 1.0)

    @classmethod
    def rgb_u32(cls, rgb: int) -> Color:
        """Build an opaque color from a 0xRRGGBB value."""
        r = (rgb & 0xFF0000) >> 16
        g = (rgb & 0xFF00) >> 8
        b = rgb & 0xFF
        return cls.rgb(r / 255.0, g / 255.0, b / 255.0)

    @classmethod
    def hsv(cls, hue: float, saturation: float, value: float) -> Color:
        """Build an opaque color from hue (degrees), saturation and value."""
        hf = math.floor(hue / 60.0) if math.isfinite(hue) else 0
        hi = int(math.fmod(int(hf), 6))
        f = hue / 60.0 - hf

        v = value
        p = value * (1.0 - saturation)
        q = value * (1.0 - f * saturation)
        t = value * (1.0 - (1.0 - f) * saturation)

        components = {
            0: (v, t, p),
            1: (q, v, p),
            2: (p, v, t),
            3: (p, q, v),
            4: (t, p, v),
        }.get(hi, (v, p, q))
        return cls.rgb(*components)

    @classmethod
    def from_bytes(cls, red: int, green: int, blue: int, alpha: int = 0) -> Color:
        """Build a color from 8-bit components; alpha defaults to 0."""
        components = (red, green, blue, alpha)
        if any(not 0 <= c <= 255 for c in components):
            raise ValueError(f"color components must be in 0..255: {components}")
        return cls(*(c / 255.0 for c in components))

    def mix(self, other: Color) -> Color:
        return (self + other) / 2.0

    def with_alpha(self, alpha: float) -> Color:
        return replace(self, alpha=alpha)

    def __add__(self, other: object) -> Color:
        if isinstance(other, Color):
            return Color(
                self.red + other.red,
                self.green + other.green,
                self.blue + other.blue,
                self.alpha + other.alpha,
            )
        return NotImplemented

    def __mul__(self, factor: float) -> Color:
        if isinstance(factor, (int, float)):
            return Color(
                self.red * factor,
                self.green * factor,
                self.blue * factor,
                self.alpha * factor,
            )
        return NotImplemented

    def __truediv__(self, divisor: float) -> Color:
        if isinstance(divisor, (int, float)):
            return Color(
                self.red / divisor,
                self.green / divisor,
                self.blue / divisor,
                self.alpha / divisor,
            )
        return NotImplemented


Color.WHITE = Color.rgb(1.0, 1.0, 1.0)
Color.BLACK = Color.rgb(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class HSV:
    """A color in hue, saturation, value form."""

    hue: float
    saturation: float
    value: float