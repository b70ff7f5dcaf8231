"""Rasterized glyph images: one-pixel padding and signed distance field rendering."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Sequence, Union

from .distance_field import DISTANCE_FIELD_PAD, generate_distance_field

ImageData = Union[bytes, bytearray, memoryview, Sequence[int]]


class ImageContent(enum.Enum):
    """What the pixels of a glyph image hold."""

    MASK = "mask"
    SUBPIXEL_MASK = "subpixel_mask"
    COLOR = "color"

    @property
    def pixel_size(self) -> int:
        """Bytes per pixel."""
        return 1 if self is ImageContent.MASK else 4


@dataclass(frozen=True)
class Placement:
    """Position of a glyph image relative to the pen position, and its size."""

    left: int
    top: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"placement size must not be negative: {self.width}x{self.height}")


@dataclass(frozen=True)
class GlyphImage:
    """A rasterized glyph."""

    placement: Placement
    content: ImageContent
    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))


def pad_image_data(data: ImageData, width: int, height: int, pixel_size: int) -> bytes:
    """Surround an image with a one pixel wide border of zeros."""
    if width < 0 or height < 0:
        raise ValueError(f"image size must not be negative: {width}x{height}")
    if pixel_size <= 0:
        raise ValueError(f"pixel size must be positive, was {pixel_size}")
    source = bytes(data)
    src_line_size = width * pixel_size
    if len(source) < src_line_size * height:
        raise ValueError(
            f"image of {width}x{height} with {pixel_size} bytes per pixel needs "
            f"{src_line_size * height} bytes, got {len(source)}"
        )

    dst_line_size = (width + 2) * pixel_size
    padded = bytearray(dst_line_size * (height + 2))
    for line in range(height):
        dest_offset = (line + 1) * dst_line_size + pixel_size
        src_offset = line * src_line_size
        padded[dest_offset : dest_offset + src_line_size] = source[
            src_offset : src_offset + src_line_size
        ]
    return bytes(padded)


def pad_image(image: GlyphImage) -> GlyphImage:
    """Pad an image by one pixel on each side, adjusting its placement."""
    p = image.placement
    data = pad_image_data(image.data, p.width, p.height, image.content.pixel_size)
    return replace(
        image,
        placement=Placement(p.left - 1, p.top + 1, p.width + 2, p.height + 2),
        data=data,
    )


def render_sdf(image: GlyphImage) -> GlyphImage:
    """Render a mask image into a signed distance field image.

    The result is padded by DISTANCE_FIELD_PAD on each side.
    """
    p = image.placement
    # This padding only serves as input for the generator; the result carries
    # the distance field padding instead.
    padded = pad_image(image)
    distance_field = generate_distance_field(padded.data, p.width, p.height)
    pad = DISTANCE_FIELD_PAD
    return replace(
        image,
        placement=Placement(p.left - pad, p.top + pad, p.width + 2 * pad, p.height + 2 * pad),
        data=distance_field,
    )