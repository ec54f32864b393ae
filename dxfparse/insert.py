"""The INSERT (block reference) entity."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .entity import Entity, _extrusion_default
from .geometry import Point
from .parseable import FloatTypeParser, IntTypeParser, StringTypeParser, TypeParser


@dataclass(eq=False)
class Insert(Entity):
    """An INSERT entity referencing a block."""

    block_name: str = ""
    insertion_point: Point = field(default_factory=Point)
    scale_factor_x: float = 1.0
    scale_factor_y: float = 1.0
    scale_factor_z: float = 1.0
    rotation_angle: float = 0.0
    column_count: int = 1
    row_count: int = 1
    column_spacing: float = 0.0
    row_spacing: float = 0.0
    attributes_follow: bool = False
    entities: list[Entity] = field(default_factory=list)
    extrusion_direction: Point = field(default_factory=_extrusion_default)

    def has_nested_entities(self) -> bool:
        """Nested entities follow only when attributes follow."""
        return self.attributes_follow

    def add_nested_entities(self, entities: Sequence[Entity]) -> None:
        """Replace the nested entities with ``entities``."""
        self.entities = list(entities)

    def _set_attributes_follow(self, value: int) -> None:
        self.attributes_follow = value == 1

    def _tag_parsers(self) -> dict[int, TypeParser]:
        return {
            2: StringTypeParser.for_attribute(self, "block_name"),
            **self._point_parsers(self.insertion_point, 10, 20, 30),
            41: FloatTypeParser.for_attribute(self, "scale_factor_x"),
            42: FloatTypeParser.for_attribute(self, "scale_factor_y"),
            43: FloatTypeParser.for_attribute(self, "scale_factor_z"),
            44: FloatTypeParser.for_attribute(self, "column_spacing"),
            45: FloatTypeParser.for_attribute(self, "row_spacing"),
            50: FloatTypeParser.for_attribute(self, "rotation_angle"),
            66: IntTypeParser(self._set_attributes_follow),
            70: IntTypeParser.for_attribute(self, "column_count"),
            71: IntTypeParser.for_attribute(self, "row_count"),
            **self._point_parsers(self.extrusion_direction, 210, 220, 230),
        }