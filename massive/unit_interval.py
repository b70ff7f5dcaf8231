"""A value restricted to the range 0..1."""

from __future__ import annotations

import functools
import logging
import math

logger = logging.getLogger(__name__)


@functools.total_ordering
class UnitInterval:
    """A float clamped to 0.0..1.0 on construction."""

    __slots__ = ("_value",)

    def __init__(self, value: float = 0.0) -> None:
        value = float(value)
        if math.isnan(value):
            logger.warning("Unit Interval provided with NaN, set to 0.0")
            value = 0.0
        clamped = min(max(value, 0.0), 1.0)
        if clamped != value:
            logger.warning(
                "Unit Interval clamped to be in the 0.0..1.0 range, was: %s", value
            )
        self._value = clamped

    @classmethod
    def unchecked(cls, value: float) -> UnitInterval:
        """Wrap a value without clamping it."""
        instance = cls.__new__(cls)
        instance._value = float(value)
        return instance

    @property
    def value(self) -> float:
        return self._value

    def __float__(self) -> float:
        return self._value

    def __repr__(self) -> str:
        return f"UnitInterval({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, UnitInterval):
            return self._value == other._value
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, UnitInterval):
            return self._value < other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __mul__(self, factor: object) -> UnitInterval:
        if isinstance(factor, (int, float)):
            return UnitInterval.unchecked(self._value * factor)
        return NotImplemented

    __rmul__ = __mul__