"""Polyline entities: VERTEX, POLYLINE and LWPOLYLINE."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum

from .entity import Entity, _enum_or_int, _extrusion_default
from .geometry import Point, float_equals
from .parseable import FloatTypeParser, IntTypeParser, ParseError, TypeParser

_EXTRA_VERTEX_CURVE_FITTING_BIT = 0x1
_CURVE_FIT_TANGENT_DEFINED_BIT = 0x2
_SPLINE_VERTEX_CREATED_BIT = 0x8
_SPLINE_FRAME_CTRL_POINT_BIT = 0x10
_POLYLINE_VERTEX_3D_BIT = 0x20
_POLYGON_MESH_3D_BIT = 0x40
_POLYFACE_MESH_VERTEX_BIT = 0x80

_CLOSED_POLYLINE_BIT = 0x1
_CURVE_FIT_VERTICES_ADDED_BIT = 0x2
_SPLINE_FIT_VERTICES_ADDED_BIT = 0x4
_IS_3D_POLYLINE_BIT = 0x8
_IS_3D_POLYGON_MESH_BIT = 0x10
_CLOSED_N_DIRECTION_BIT = 0x20
_POLYFACE_MESH_BIT = 0x40
_LINE_TYPE_PATTERN_BIT = 0x80

_LW_CLOSED_BIT = 0x1
_LW_PLINEGEN_BIT = 0x80


@dataclass(eq=False)
class Vertex(Entity):
    """A VERTEX entity, nested in a POLYLINE."""

    location: Point = field(default_factory=Point)
    starting_width: float = 0.0
    end_width: float = 0.0
    bulge: float = 0.0
    created_by_curve_fitting: bool = False
    curve_fit_tangent_defined: bool = False
    spline_vertex: bool = False
    spline_frame_ctrl_point: bool = False
    is_3d_polyline_vertex: bool = False
    is_3d_polyline_mesh: bool = False
    is_polyface_mesh_vertex: bool = False
    curve_fit_tangent_direction: float = 0.0
    id: int = 0

    def _set_flags(self, flags: int) -> None:
        self.created_by_curve_fitting = bool(flags & _EXTRA_VERTEX_CURVE_FITTING_BIT)
        self.curve_fit_tangent_defined = bool(flags & _CURVE_FIT_TANGENT_DEFINED_BIT)
        self.spline_vertex = bool(flags & _SPLINE_VERTEX_CREATED_BIT)
        self.spline_frame_ctrl_point = bool(flags & _SPLINE_FRAME_CTRL_POINT_BIT)
        self.is_3d_polyline_vertex = bool(flags & _POLYLINE_VERTEX_3D_BIT)
        self.is_3d_polyline_mesh = bool(flags & _POLYGON_MESH_3D_BIT)
        self.is_polyface_mesh_vertex = bool(flags & _POLYFACE_MESH_VERTEX_BIT)

    def _tag_parsers(self) -> dict[int, TypeParser]:
        return {
            **self._point_parsers(self.location, 10, 20, 30),
            40: FloatTypeParser.for_attribute(self, "starting_width"),
            41: FloatTypeParser.for_attribute(self, "end_width"),
            42: FloatTypeParser.for_attribute(self, "bulge"),
            50: FloatTypeParser.for_attribute(self, "curve_fit_tangent_direction"),
            70: IntTypeParser(self._set_flags),
            91: IntTypeParser.for_attribute(self, "id"),
        }


class SmoothSurfaceType(IntEnum):
    """Smooth surface type of a polygon mesh."""

    NO_SMOOTH_SURFACE_FITTED = 0
    QUADRATIC_BSPLINE = 5
    CUBIC_BSPLINE = 6
    BEZIER = 8


@dataclass(eq=False)
class Polyline(Entity):
    """A POLYLINE entity; its vertices follow it as nested entities."""

    elevation: float = 0.0
    thickness: float = 0.0
    closed: bool = False
    curve_fit_vertices_added: bool = False
    spline_fit_vertices_added: bool = False
    is_3d_polyline: bool = False
    is_3d_polygon_mesh: bool = False
    polygon_mesh_closed_n_dir: bool = False
    is_polyface_mesh: bool = False
    line_type_parent_around: bool = False
    default_start_width: float = 0.0
    default_end_width: float = 0.0
    vertex_count_m: int = 0
    vertex_count_n: int = 0
    smooth_density_m: int = 0
    smooth_density_n: int = 0
    smooth_surface: SmoothSurfaceType | int = SmoothSurfaceType.NO_SMOOTH_SURFACE_FITTED
    extrusion_direction: Point = field(default_factory=_extrusion_default)
    vertices: list[Vertex] = field(default_factory=list)

    def has_nested_entities(self) -> bool:
        """A polyline always owns the entities that follow it."""
        return True

    def add_nested_entities(self, entities: Sequence[Entity]) -> None:
        """Append the vertices among ``entities``; other entities are skipped."""
        self.vertices.extend(e for e in entities if isinstance(e, Vertex))

    def _set_flags(self, flags: int) -> None:
        self.closed = bool(flags & _CLOSED_POLYLINE_BIT)
        self.curve_fit_vertices_added = bool(flags & _CURVE_FIT_VERTICES_ADDED_BIT)
        self.spline_fit_vertices_added = bool(flags & _SPLINE_FIT_VERTICES_ADDED_BIT)
        self.is_3d_polyline = bool(flags & _IS_3D_POLYLINE_BIT)
        self.is_3d_polygon_mesh = bool(flags & _IS_3D_POLYGON_MESH_BIT)
        self.polygon_mesh_closed_n_dir = bool(flags & _CLOSED_N_DIRECTION_BIT)
        self.is_polyface_mesh = bool(flags & _POLYFACE_MESH_BIT)
        self.line_type_parent_around = bool(flags & _LINE_TYPE_PATTERN_BIT)

    def _set_smooth_surface(self, value: int) -> None:
        self.smooth_surface = _enum_or_int(SmoothSurfaceType, value)

    def _tag_parsers(self) -> dict[int, TypeParser]:
        return {
            30: FloatTypeParser.for_attribute(self, "elevation"),
            39: FloatTypeParser.for_attribute(self, "thickness"),
            40: FloatTypeParser.for_attribute(self, "default_start_width"),
            41: FloatTypeParser.for_attribute(self, "default_end_width"),
            70: IntTypeParser(self._set_flags),
            71: IntTypeParser.for_attribute(self, "vertex_count_m"),
            72: IntTypeParser.for_attribute(self, "vertex_count_n"),
            73: IntTypeParser.for_attribute(self, "smooth_density_m"),
            74: IntTypeParser.for_attribute(self, "smooth_density_n"),
            75: IntTypeParser(self._set_smooth_surface),
            **self._point_parsers(self.extrusion_direction, 210, 220, 230),
        }


@dataclass(eq=False)
class LWPolylinePoint:
    """A point of an LWPOLYLINE with its widths and bulge."""

    point: Point = field(default_factory=Point)
    id: int = 0
    starting_width: float = 0.0
    end_width: float = 0.0
    bulge: float = 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LWPolylinePoint):
            return NotImplemented
        return (
            self.point == other.point
            and self.id == other.id
            and float_equals(self.starting_width, other.starting_width)
            and float_equals(self.end_width, other.end_width)
            and float_equals(self.bulge, other.bulge)
        )

    __hash__ = None  # type: ignore[assignment]


@dataclass(eq=False)
class LWPolyline(Entity):
    """A lightweight polyline (LWPOLYLINE) entity."""

    closed: bool = False
    plinegen: bool = False
    constant_width: float = 0.0
    elevation: float = 0.0
    thickness: float = 0.0
    points: list[LWPolylinePoint] = field(default_factory=list)
    extrusion_direction: Point = field(default_factory=_extrusion_default)

    def _set_flags(self, flags: int) -> None:
        self.closed = bool(flags & _LW_CLOSED_BIT)
        self.plinegen = bool(flags & _LW_PLINEGEN_BIT)

    def _tag_parsers(self) -> dict[int, TypeParser]:
        index = -1

        def set_count(count: int) -> None:
            nonlocal index
            self.points = [LWPolylinePoint() for _ in range(count)]
            index = -1

        def current() -> LWPolylinePoint:
            if index < 0:
                raise ParseError("point attribute found before any point")
            return self.points[index]

        def new_point(x: float) -> None:
            nonlocal index
            index += 1
            if index >= len(self.points):
                self.points.append(LWPolylinePoint())
            self.points[index].point.x = x

        def set_y(y: float) -> None:
            current().point.y = y

        def set_id(value: int) -> None:
            current().id = value

        def set_starting_width(value: float) -> None:
            current().starting_width = value

        def set_end_width(value: float) -> None:
            current().end_width = value

        def set_bulge(value: float) -> None:
            current().bulge = value

        return {
            70: IntTypeParser(self._set_flags),
            90: IntTypeParser(set_count),
            38: FloatTypeParser.for_attribute(self, "elevation"),
            39: FloatTypeParser.for_attribute(self, "thickness"),
            43: FloatTypeParser.for_attribute(self, "constant_width"),
            10: FloatTypeParser(new_point),
            20: FloatTypeParser(set_y),
            91: IntTypeParser(set_id),
            40: FloatTypeParser(set_starting_width),
            41: FloatTypeParser(set_end_width),
            42: FloatTypeParser(set_bulge),
            **self._point_parsers(self.extrusion_direction, 210, 220, 230),
        }