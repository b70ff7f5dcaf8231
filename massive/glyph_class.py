"""Classification of transformed glyphs and the rasterization parameters derived from it."""

from __future__ import annotations

import enum
import math
import struct
import sys
from dataclasses import dataclass, field
from typing import Sequence, Tuple, Union

# Planar z comparisons allow this many units in the last place.
ULPS_Z = 8
# A ten-thousandth of a pixel.
PIXEL_EPSILON = 0.0001


class Pipeline(enum.Enum):
    """The render pipelines a primitive can be drawn with."""

    PLANAR_GLYPH = enum.auto()
    SDF_GLYPH = enum.auto()
    TEXT_LAYER = enum.auto()
    CIRCLE = enum.auto()
    ROUNDED_RECT = enum.auto()


class DistortionClass(enum.Enum):
    NON_PLANAR = enum.auto()
    NON_RECTANGULAR = enum.auto()
    NON_QUADRATIC = enum.auto()


@dataclass(frozen=True)
class PixelPerfect:
    """A pixel has the same size on screen as rendered."""

    alignment: Tuple[bool, bool]


@dataclass(frozen=True)
class Zoomed:
    """The center pixel is uniformly scaled by `scale`."""

    scale: float


@dataclass(frozen=True)
class Distorted:
    """Distorted by some matrix or a perspective projection."""

    distortion: DistortionClass


GlyphClass = Union[PixelPerfect, Zoomed, Distorted]


def _bits(value: float) -> int:
    return struct.unpack("<q", struct.pack("<d", value))[0]


def _ulps_eq(a: float, b: float, max_ulps: int) -> bool:
    if abs(a - b) <= sys.float_info.epsilon:
        return True
    if math.isnan(a) or math.isnan(b):
        return False
    if math.copysign(1.0, a) != math.copysign(1.0, b):
        return False
    return abs(_bits(a) - _bits(b)) <= max_ulps


def _pixel_eq(a: float, b: float) -> bool:
    return abs(a - b) <= PIXEL_EPSILON


def classify_transformed_pixel(quad: Sequence[Sequence[float]]) -> GlyphClass:
    """Classify a glyph by a pixel at its center transformed to surface pixels.

    `quad` holds four (x, y, z) points, clockwise from the glyph's top left corner.
    """
    if len(quad) != 4:
        raise ValueError(f"a quad needs 4 points, got {len(quad)}")
    (x0, y0, z0), (x1, y1, z1), (x2, y2, z2), (x3, y3, _) = (tuple(p) for p in quad)

    if not (_ulps_eq(z0, z1, ULPS_Z) and _ulps_eq(z0, z2, ULPS_Z)):
        return Distorted(DistortionClass.NON_PLANAR)

    rectangular = (
        _pixel_eq(y0, y1) and _pixel_eq(y2, y3) and _pixel_eq(x0, x3) and _pixel_eq(x1, x2)
    )
    if not rectangular:
        return Distorted(DistortionClass.NON_RECTANGULAR)

    scale_x = x1 - x0
    scale_y = y2 - y0
    if not _pixel_eq(scale_x, scale_y):
        return Distorted(DistortionClass.NON_QUADRATIC)

    if not _pixel_eq(scale_x, 1.0):
        return Zoomed((scale_x + scale_y) / 2.0)

    return PixelPerfect((_pixel_eq(x0, math.floor(x0)), _pixel_eq(y0, math.floor(y0))))


# The normal font weight.
DEFAULT_WEIGHT = 400


@dataclass(frozen=True)
class SwashRasterizationParam:
    hinted: bool = True
    # Used with variable fonts only, as the `wght` variation.
    weight: int = DEFAULT_WEIGHT


@dataclass(frozen=True)
class GlyphRasterizationParam:
    # Prefer SDF rasterization if the glyph is monochrome.
    prefer_sdf: bool = False
    swash: SwashRasterizationParam = field(default_factory=SwashRasterizationParam)

    def pipeline(self) -> Pipeline:
        return Pipeline.SDF_GLYPH if self.prefer_sdf else Pipeline.PLANAR_GLYPH

    @classmethod
    def for_class(cls, glyph_class: GlyphClass) -> GlyphRasterizationParam:
        """Hinted parameters; SDF is preferred for distorted glyphs."""
        if isinstance(glyph_class, (PixelPerfect, Zoomed)):
            prefer_sdf = False
        elif isinstance(glyph_class, Distorted):
            prefer_sdf = True
        else:
            raise TypeError(f"not a glyph class: {glyph_class!r}")
        return cls(prefer_sdf=prefer_sdf, swash=SwashRasterizationParam(hinted=True))