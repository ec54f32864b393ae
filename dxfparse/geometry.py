"""Tolerant float comparison and 3D points."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

MIN_FLOAT_DELTA = 0.0000000001


def float_equals(a: float, b: float) -> bool:
    """Return True when ``a`` and ``b`` differ by less than MIN_FLOAT_DELTA."""
    return abs(a - b) < MIN_FLOAT_DELTA


def float_sequence_equals(a: Sequence[float], b: Sequence[float]) -> bool:
    """Compare two float sequences element by element with tolerance."""
    return len(a) == len(b) and all(float_equals(x, y) for x, y in zip(a, b))


@dataclass(eq=False)
class Point:
    """A 3D point; equality tolerates tiny floating point differences."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (
            float_equals(self.x, other.x)
            and float_equals(self.y, other.y)
            and float_equals(self.z, other.z)
        )

    __hash__ = None  # type: ignore[assignment]


def points_equal(a: Sequence[Point], b: Sequence[Point]) -> bool:
    """Compare two point sequences element by element."""
    return len(a) == len(b) and all(p == q for p, q in zip(a, b))