"""Simple geometric entities: arcs, circles, ellipses, lines and points."""

from __future__ import annotations

from dataclasses import dataclass, field

from .entity import Entity, _extrusion_default
from .geometry import Point
from .parseable import FloatTypeParser, TypeParser


@dataclass(eq=False)
class Arc(Entity):
    """An ARC entity."""

    thickness: float = 0.0
    center: Point = field(default_factory=Point)
    radius: float = 1.0
    start_angle: float = 0.0
    end_angle: float = 360.0
    extrusion_direction: Point = field(default_factory=_extrusion_default)

    def _tag_parsers(self) -> dict[int, TypeParser]:
        return {
            39: FloatTypeParser.for_attribute(self, "thickness"),
            **self._point_parsers(self.center, 10, 20, 30),
            40: FloatTypeParser.for_attribute(self, "radius"),
            50: FloatTypeParser.for_attribute(self, "start_angle"),
            51: FloatTypeParser.for_attribute(self, "end_angle"),
            **self._point_parsers(self.extrusion_direction, 210, 220, 230),
        }


@dataclass(eq=False)
class Circle(Entity):
    """A CIRCLE entity."""

    thickness: float = 0.0
    center: Point = field(default_factory=Point)
    radius: float = 1.0
    extrusion_direction: Point = field(default_factory=_extrusion_default)

    def _tag_parsers(self) -> dict[int, TypeParser]:
        return {
            39: FloatTypeParser.for_attribute(self, "thickness"),
            **self._point_parsers(self.center, 10, 20, 30),
            40: FloatTypeParser.for_attribute(self, "radius"),
            **self._point_parsers(self.extrusion_direction, 210, 220, 230),
        }


@dataclass(eq=False)
class Ellipse(Entity):
    """An ELLIPSE entity."""

    center: Point = field(default_factory=Point)
    major_axis_end: Point = field(default_factory=Point)
    extrusion_direction: Point = field(default_factory=_extrusion_default)
    minor_to_major_axis_ratio: float = 1.0
    start_parameter: float = 0.0
    end_parameter: float = 360.0

    def _tag_parsers(self) -> dict[int, TypeParser]:
        return {
            **self._point_parsers(self.center, 10, 20, 30),
            **self._point_parsers(self.major_axis_end, 11, 21, 31),
            **self._point_parsers(self.extrusion_direction, 210, 220, 230),
            40: FloatTypeParser.for_attribute(self, "minor_to_major_axis_ratio"),
            41: FloatTypeParser.for_attribute(self, "start_parameter"),
            42: FloatTypeParser.for_attribute(self, "end_parameter"),
        }


@dataclass(eq=False)
class Line(Entity):
    """A LINE entity."""

    thickness: float = 0.0
    start: Point = field(default_factory=Point)
    end: Point = field(default_factory=Point)
    extrusion_direction: Point = field(default_factory=_extrusion_default)

    def _tag_parsers(self) -> dict[int, TypeParser]:
        return {
            39: FloatTypeParser.for_attribute(self, "thickness"),
            **self._point_parsers(self.start, 10, 20, 30),
            **self._point_parsers(self.end, 11, 21, 31),
            **self._point_parsers(self.extrusion_direction, 210, 220, 230),
        }


@dataclass(eq=False)
class PointEntity(Entity):
    """A POINT entity."""

    location: Point = field(default_factory=Point)
    thickness: float = 0.0
    extrusion_direction: Point = field(default_factory=_extrusion_default)
    x_axis_angle: float = 0.0

    def _tag_parsers(self) -> dict[int, TypeParser]:
        return {
            **self._point_parsers(self.location, 10, 20, 30),
            39: FloatTypeParser.for_attribute(self, "thickness"),
            50: FloatTypeParser.for_attribute(self, "x_axis_angle"),
            **self._point_parsers(self.extrusion_direction, 210, 220, 230),
        }