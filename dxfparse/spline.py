"""The SPLINE entity."""

from __future__ import annotations

from dataclasses import dataclass, field

from .entity import Entity
from .geometry import Point
from .parseable import FloatTypeParser, IntTypeParser, ParseError, TypeParser

_CLOSED_BIT = 0x1
_PERIODIC_BIT = 0x2
_RATIONAL_BIT = 0x4
_PLANAR_BIT = 0x8
_LINEAR_BIT = 0x10


def _last(points: list[Point], what: str) -> Point:
    if not points:
        raise ParseError(f"{what} coordinate found before any {what}")
    return points[-1]


@dataclass(eq=False)
class Spline(Entity):
    """A SPLINE entity; knots, weights and points accumulate as tags arrive."""

    normal_vector: Point = field(default_factory=Point)
    closed: bool = False
    periodic: bool = False
    rational: bool = False
    planar: bool = False
    linear: bool = False
    degree: int = 0
    knot_tolerance: float = 0.0000001
    control_point_tolerance: float = 0.0000001
    fit_tolerance: float = 0.0000000001
    start_tangent: Point = field(default_factory=Point)
    end_tangent: Point = field(default_factory=Point)
    knot_values: list[float] = field(default_factory=list)
    weights: list[float] = field(default_factory=list)
    control_points: list[Point] = field(default_factory=list)
    fit_points: list[Point] = field(default_factory=list)

    def _set_flags(self, flags: int) -> None:
        self.closed = bool(flags & _CLOSED_BIT)
        self.periodic = bool(flags & _PERIODIC_BIT)
        self.rational = bool(flags & _RATIONAL_BIT)
        self.planar = bool(flags & _PLANAR_BIT)
        self.linear = bool(flags & _LINEAR_BIT)

    def _add_control_point(self, x: float) -> None:
        self.control_points.append(Point(x=x))

    def _set_control_y(self, y: float) -> None:
        _last(self.control_points, "control point").y = y

    def _set_control_z(self, z: float) -> None:
        _last(self.control_points, "control point").z = z

    def _add_fit_point(self, x: float) -> None:
        self.fit_points.append(Point(x=x))

    def _set_fit_y(self, y: float) -> None:
        _last(self.fit_points, "fit point").y = y

    def _set_fit_z(self, z: float) -> None:
        _last(self.fit_points, "fit point").z = z

    def _tag_parsers(self) -> dict[int, TypeParser]:
        return {
            10: FloatTypeParser(self._add_control_point),
            20: FloatTypeParser(self._set_control_y),
            30: FloatTypeParser(self._set_control_z),
            11: FloatTypeParser(self._add_fit_point),
            21: FloatTypeParser(self._set_fit_y),
            31: FloatTypeParser(self._set_fit_z),
            **self._point_parsers(self.start_tangent, 12, 22, 32),
            **self._point_parsers(self.end_tangent, 13, 23, 33),
            40: FloatTypeParser(self.knot_values.append),
            41: FloatTypeParser(self.weights.append),
            42: FloatTypeParser.for_attribute(self, "knot_tolerance"),
            43: FloatTypeParser.for_attribute(self, "control_point_tolerance"),
            44: FloatTypeParser.for_attribute(self, "fit_tolerance"),
            70: IntTypeParser(self._set_flags),
            71: IntTypeParser.for_attribute(self, "degree"),
            **self._point_parsers(self.normal_vector, 210, 220, 230),
        }