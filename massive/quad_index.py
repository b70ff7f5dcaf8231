"""Index data for drawing quads as pairs of triangles."""

from __future__ import annotations

import logging
import struct
from typing import ClassVar, Tuple

logger = logging.getLogger(__name__)

# The indices of the two triangles of one quad, counter-clockwise.
QUAD_INDICES: Tuple[int, ...] = (0, 1, 2, 0, 2, 3)
INDICES_PER_QUAD = len(QUAD_INDICES)
VERTICES_PER_QUAD = 4
# Indices are stored as 32-bit unsigned integers.
INDEX_SIZE = 4
INDEX_FORMAT = "uint32"
_MAX_INDEX = 0xFFFFFFFF


def generate_quad_indices(quads: int) -> Tuple[int, ...]:
    """Return the triangle indices for `quads` consecutive quads."""
    if quads < 0:
        raise ValueError(f"quad count must not be negative, was {quads}")
    if quads and (quads - 1) * VERTICES_PER_QUAD + max(QUAD_INDICES) > _MAX_INDEX:
        raise OverflowError(f"{quads} quads cannot be indexed with 32-bit indices")
    return tuple(
        index + quad * VERTICES_PER_QUAD
        for quad in range(quads)
        for index in QUAD_INDICES
    )


class QuadIndices:
    """A growing set of quad indices, able to index at least `quads` quads."""

    QUAD_INDICES: ClassVar[Tuple[int, ...]] = QUAD_INDICES
    INDICES_PER_QUAD: ClassVar[int] = INDICES_PER_QUAD
    VERTICES_PER_QUAD: ClassVar[int] = VERTICES_PER_QUAD
    INDEX_SIZE: ClassVar[int] = INDEX_SIZE
    INDEX_FORMAT: ClassVar[str] = INDEX_FORMAT

    def __init__(self) -> None:
        self._indices: Tuple[int, ...] = ()

    @property
    def indices(self) -> Tuple[int, ...]:
        return self._indices

    @property
    def quads(self) -> int:
        """The number of quads the current indices cover."""
        return len(self._indices) // INDICES_PER_QUAD

    def ensure_can_index_num_quads(self, required_quad_count: int) -> bool:
        """Grow to a power of two capacity if needed; return whether it grew."""
        current = self.quads
        if required_quad_count <= current:
            return False

        proposed = max(current, 1) << 1
        while proposed < required_quad_count:
            proposed <<= 1

        logger.debug(
            "Growing index buffer from %d to %d quads, required: %d",
            current,
            proposed,
            required_quad_count,
        )
        self._indices = generate_quad_indices(proposed)
        return True

    def slice_len(self, max_quads: int) -> int:
        """The number of bytes needed to draw `max_quads` quads."""
        if max_quads < 0:
            raise ValueError(f"quad count must not be negative, was {max_quads}")
        if max_quads > self.quads:
            raise ValueError(
                f"cannot index {max_quads} quads, capacity is {self.quads}"
            )
        return max_quads * INDICES_PER_QUAD * INDEX_SIZE

    def to_bytes(self) -> bytes:
        """The indices as little-endian 32-bit unsigned integers."""
        return struct.pack(f"<{len(self._indices)}I", *self._indices)