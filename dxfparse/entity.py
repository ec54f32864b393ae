"""The attributes every DXF entity shares, and the SEQEND marker entity."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, fields
from enum import IntEnum
from typing import TypeVar

from .colors import TrueColor
from .geometry import Point, float_equals
from .parseable import (
    FloatTypeParser,
    IntTypeParser,
    StringTypeParser,
    TagParser,
    TypeParser,
)
from .tags import Tag


class Space(IntEnum):
    """The space an entity lives in."""

    MODEL = 0
    PAPER = 1


class ShadowMode(IntEnum):
    """How shadows are handled for an entity."""

    CASTS_AND_RECEIVE = 0
    CASTS = 1
    RECEIVES = 2
    IGNORES = 3


_E = TypeVar("_E", bound=IntEnum)


def _enum_or_int(kind: type[_E], value: int) -> _E | int:
    try:
        return kind(value)
    except ValueError:
        return value


def _is_real(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _values_equal(a: object, b: object) -> bool:
    if _is_real(a) and _is_real(b) and (isinstance(a, float) or isinstance(b, float)):
        return float_equals(a, b)  # type: ignore[arg-type]
    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        return len(a) == len(b) and all(_values_equal(x, y) for x, y in zip(a, b))
    return a == b


def _extrusion_default() -> Point:
    return Point(0.0, 0.0, 1.0)


@dataclass(eq=False)
class Entity:
    """Base of all entities; holds the attributes common to every entity type.

    Equality requires the same concrete type and compares floats with a
    small tolerance.
    """

    handle: str = ""
    owner: str = ""
    space: Space | int = Space.MODEL
    layout_tab_name: str = ""
    layer_name: str = ""
    line_type_name: str = ""
    on: bool = True
    color: int = 0
    line_weight: int = 0
    line_type_scale: float = 0.0
    visible: bool = True
    true_color: TrueColor = TrueColor(0)
    color_name: str = ""
    transparency: int = 0
    shadow_mode: ShadowMode | int = ShadowMode.CASTS_AND_RECEIVE

    @classmethod
    def from_tags(cls, tags: Iterable[Tag]):
        """Build an entity from its tags.

        Raises ParseError when a tag value has an unexpected type.
        """
        entity = cls()
        parser = TagParser(entity._base_parsers())
        parser.update(entity._tag_parsers())
        parser.parse(tags)
        return entity

    def is_seq_end(self) -> bool:
        """True only for the SEQEND marker."""
        return False

    def has_nested_entities(self) -> bool:
        """Whether entities following this one belong to it."""
        return False

    def add_nested_entities(self, entities: Sequence["Entity"]) -> None:
        """Attach nested entities; plain entities take none."""

    def _tag_parsers(self) -> dict[int, TypeParser]:
        return {}

    @staticmethod
    def _point_parsers(point: Point, x_code: int, y_code: int, z_code: int) -> dict[int, TypeParser]:
        return {
            x_code: FloatTypeParser.for_attribute(point, "x"),
            y_code: FloatTypeParser.for_attribute(point, "y"),
            z_code: FloatTypeParser.for_attribute(point, "z"),
        }

    def _set_visibility(self, value: int) -> None:
        self.visible = value == 0

    def _set_color(self, value: int) -> None:
        if value < 0:
            self.on = False
            value = -value
        self.color = value

    def _set_space(self, value: int) -> None:
        self.space = _enum_or_int(Space, value)

    def _set_shadow_mode(self, value: int) -> None:
        self.shadow_mode = _enum_or_int(ShadowMode, value)

    def _set_true_color(self, value: int) -> None:
        self.true_color = TrueColor(value)

    def _base_parsers(self) -> dict[int, TypeParser]:
        return {
            5: StringTypeParser.for_attribute(self, "handle"),
            6: StringTypeParser.for_attribute(self, "line_type_name"),
            8: StringTypeParser.for_attribute(self, "layer_name"),
            48: FloatTypeParser.for_attribute(self, "line_type_scale"),
            60: IntTypeParser(self._set_visibility),
            62: IntTypeParser(self._set_color),
            67: IntTypeParser(self._set_space),
            284: IntTypeParser(self._set_shadow_mode),
            330: StringTypeParser.for_attribute(self, "owner"),
            370: IntTypeParser.for_attribute(self, "line_weight"),
            410: StringTypeParser.for_attribute(self, "layout_tab_name"),
            420: IntTypeParser(self._set_true_color),
            430: StringTypeParser.for_attribute(self, "color_name"),
            440: IntTypeParser.for_attribute(self, "transparency"),
        }

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return all(
            _values_equal(getattr(self, f.name), getattr(other, f.name))
            for f in fields(self)
        )

    __hash__ = None  # type: ignore[assignment]


@dataclass(eq=False)
class SeqEnd(Entity):
    """Marks the end of a sequence of nested entities."""

    def is_seq_end(self) -> bool:
        return True


def entities_equal(a: Sequence[Entity], b: Sequence[Entity]) -> bool:
    """Compare two entity sequences element by element."""
    return len(a) == len(b) and all(x == y for x, y in zip(a, b))


__all__ = [
    "Entity",
    "SeqEnd",
    "ShadowMode",
    "Space",
    "entities_equal",
    "field",
]