"""Signed distance fields for 8-bit glyph images.

Edges are detected in the coverage image and the distance to the nearest edge is
propagated with Danielsson's 8SSEDT. The result is packed into bytes where 128
lies on the edge. Values below 128 are outside the glyph, values above are inside.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple, Union

# Distance values are limited to (-DISTANCE_FIELD_MAGNITUDE, DISTANCE_FIELD_MAGNITUDE].
DISTANCE_FIELD_MAGNITUDE = 4

# Padding around the glyph that leaves room for the maximum distance.
DISTANCE_FIELD_PAD = 4

_F32_EPSILON = 2.0**-23
_SQRT_2 = math.sqrt(2.0)
_ALPHA_SCALE = 0.00392156862  # 1/255
_FAR_DIST_SQ = 2000000.0
_FAR_VECTOR = 1000.0

# The 8-connected neighbours as (dx, dy).
_NEIGHBORS = (
    (-1, 0),
    (1, 0),
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 1),
    (0, 1),
    (1, 1),
)

ImageData = Union[bytes, bytearray, memoryview, Sequence[int]]


def edge_distance(dx: float, dy: float, alpha: float) -> float:
    """Distance to an edge from a texel's coverage and the edge normal (dx, dy).

    The direction is expected to be normalized.
    """
    dx = abs(dx)
    dy = abs(dy)
    if dx < _F32_EPSILON or dy < _F32_EPSILON:
        return 0.5 - alpha

    # Treat the direction as lying in the first octant; the others are symmetric.
    if dx < dy:
        dx, dy = dy, dx

    # The numerator of the smaller fractional area chopped off by the edge.
    a1num = 0.5 * dy

    if alpha * dx < a1num:
        return 0.5 * (dx + dy) - math.sqrt(2.0 * dx * dy * alpha)
    if alpha * dx < dx - a1num:
        return (0.5 - alpha) * dx
    return -0.5 * (dx + dy) + math.sqrt(2.0 * dx * dy * (1.0 - alpha))


def _pin(value: float, low: float, high: float) -> float:
    clipped = high if math.isnan(value) else min(value, high)
    return max(low, clipped)


def pack_distance_field_value(dist: float, magnitude: int = DISTANCE_FIELD_MAGNITUDE) -> int:
    """Pack a signed distance into a byte, with zero distance at 128.

    There are 128 values below 128 but only 127 above, so the positive range is
    scaled by 127/128 to avoid overflow.
    """
    if magnitude <= 0:
        raise ValueError(f"distance magnitude must be positive, was {magnitude}")
    m = float(magnitude)
    pinned = _pin(-dist, -m, m * 127.0 / 128.0) + m
    scaled = pinned / (2.0 * m) * 256.0
    # Round half away from zero; the value is never negative here.
    packed = math.floor(scaled + 0.5)
    return min(max(packed, 0), 255)


def _found_edge(image: bytes, width: int, height: int, i: int, j: int) -> bool:
    """An edge crosses from >= 128 to < 128, or joins two non-zero texels < 128."""
    current = image[j * width + i]
    current_check = current >> 7
    for di, dj in _NEIGHBORS:
        ni, nj = i + di, j + dj
        if not (0 <= ni < width and 0 <= nj < height):
            continue
        neighbor = image[nj * width + ni]
        if current_check != neighbor >> 7:
            return True
        if current_check == 0 and current != 0 and neighbor != 0:
            return True
    return False


def _unit_vector(x: float, y: float) -> Tuple[float, float]:
    magnitude = math.sqrt(x * x + y * y)
    if magnitude == 0.0 or not math.isfinite(magnitude):
        return 0.0, 0.0
    ux, uy = x / magnitude, y / magnitude
    if not (math.isfinite(ux) and math.isfinite(uy)) or (ux == 0.0 and uy == 0.0):
        return 0.0, 0.0
    return ux, uy


Step = Tuple[int, int, int]


@dataclass
class _Field:
    width: int
    height: int
    alpha: List[float] = field(init=False)
    edges: List[bool] = field(init=False)
    dist_sq: List[float] = field(init=False)
    vx: List[float] = field(init=False)
    vy: List[float] = field(init=False)

    def __post_init__(self) -> None:
        size = self.width * self.height
        self.alpha = [0.0] * size
        self.edges = [False] * size
        self.dist_sq = [0.0] * size
        self.vx = [0.0] * size
        self.vy = [0.0] * size

    def load_glyph(self, image: bytes, image_width: int, image_height: int) -> None:
        for j in range(image_height):
            base = (j + DISTANCE_FIELD_PAD) * self.width + DISTANCE_FIELD_PAD
            row = image[j * image_width : (j + 1) * image_width]
            for i, value in enumerate(row):
                self.alpha[base + i] = 1.0 if value == 255 else value * _ALPHA_SCALE
                if _found_edge(image, image_width, image_height, i, j):
                    self.edges[base + i] = True

    def init_distances(self) -> None:
        w = self.width
        alpha = self.alpha
        for idx, is_edge in enumerate(self.edges):
            if not is_edge:
                self.dist_sq[idx] = _FAR_DIST_SQ
                self.vx[idx] = _FAR_VECTOR
                self.vy[idx] = _FAR_VECTOR
                continue
            prev, nxt = idx - w, idx + w
            # The gradient points from low to high coverage; +y is down.
            gx = (
                alpha[prev + 1]
                - alpha[prev - 1]
                + alpha[idx + 1] * _SQRT_2
                - alpha[idx - 1] * _SQRT_2
                + alpha[nxt + 1]
                - alpha[nxt - 1]
            )
            gy = (
                alpha[nxt - 1]
                - alpha[prev - 1]
                + alpha[nxt] * _SQRT_2
                - alpha[prev] * _SQRT_2
                + alpha[nxt + 1]
                - alpha[prev + 1]
            )
            ux, uy = _unit_vector(gx, gy)
            dist = edge_distance(ux, uy, alpha[idx])
            self.vx[idx] = ux * dist
            self.vy[idx] = uy * dist
            self.dist_sq[idx] = dist * dist

    def relax(self, curr: int, steps: Sequence[Step]) -> None:
        for offset, ox, oy in steps:
            check = curr + offset
            cx, cy = self.vx[check], self.vy[check]
            candidate = self.dist_sq[check] + 2.0 * (ox * cx + oy * cy) + ox * ox + oy * oy
            if candidate < self.dist_sq[curr]:
                self.dist_sq[curr] = candidate
                self.vx[curr] = cx + ox
                self.vy[curr] = cy + oy

    def sweep(self, start: int, row_step: int, forward: Sequence[Step], backward: Sequence[Step]) -> None:
        inner = self.width - 2
        for _ in range(self.height - 2):
            row = range(start, start + inner)
            for curr in row:
                if not self.edges[curr]:
                    self.relax(curr, forward)
            for curr in reversed(row):
                if not self.edges[curr]:
                    self.relax(curr, backward)
            start += row_step

    def propagate(self) -> None:
        w = self.width
        # Forward in y: up-left, up, up-right and left, then right.
        self.sweep(
            w + 1,
            w,
            ((-w - 1, -1, -1), (-w, 0, -1), (-w + 1, 1, -1), (-1, -1, 0)),
            ((1, 1, 0),),
        )
        # Backward in y: left, then right, down-left, down and down-right.
        self.sweep(
            w * (self.height - 2) - 1,
            -w,
            ((-1, -1, 0),),
            ((1, 1, 0), (w - 1, -1, 1), (w, 0, 1), (w + 1, 1, 1)),
        )

    def packed(self) -> bytes:
        out = bytearray()
        w = self.width
        for j in range(1, self.height - 1):
            for idx in range(j * w + 1, j * w + w - 1):
                dist_sq = self.dist_sq[idx]
                dist = math.sqrt(dist_sq) if dist_sq >= 0.0 else math.nan
                if self.alpha[idx] > 0.5:
                    dist = -dist
                out.append(pack_distance_field_value(dist))
        return bytes(out)


def generate_distance_field(padded_image: ImageData, width: int, height: int) -> bytes:
    """Generate a distance field from an 8-bit glyph image.

    `padded_image` is the glyph padded by one zero texel on each side, so it holds
    (width + 2) * (height + 2) bytes. The result holds
    (width + 2 * DISTANCE_FIELD_PAD) * (height + 2 * DISTANCE_FIELD_PAD) bytes.
    """
    if width < 0 or height < 0:
        raise ValueError(f"image size must not be negative: {width}x{height}")
    image = bytes(padded_image)
    expected = (width + 2) * (height + 2)
    if len(image) != expected:
        raise ValueError(
            f"padded image of {width}x{height} needs {expected} bytes, got {len(image)}"
        )

    # One more texel on each side, always treated as infinitely far away.
    pad = DISTANCE_FIELD_PAD + 1
    grid = _Field(width + 2 * pad, height + 2 * pad)
    grid.load_glyph(image, width + 2, height + 2)
    grid.init_distances()
    grid.propagate()
    return grid.packed()