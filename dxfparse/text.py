"""TEXT and MTEXT entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .entity import Entity, _enum_or_int, _extrusion_default
from .geometry import Point
from .parseable import FloatTypeParser, IntTypeParser, StringTypeParser, TypeParser

_BACKWARD_TEXT_BIT = 0x2
_UPSIDE_DOWN_TEXT_BIT = 0x4


class HorizontalTextJustification(IntEnum):
    """Horizontal text justification."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2
    ALIGNED = 3
    MIDDLE = 4
    FIT = 5


class VerticalTextJustification(IntEnum):
    """Vertical text justification."""

    BASELINE = 0
    BOTTOM = 1
    MIDDLE = 2
    TOP = 3


@dataclass(eq=False)
class Text(Entity):
    """A TEXT entity."""

    thickness: float = 0.0
    first_alignment_point: Point = field(default_factory=Point)
    height: float = 0.0
    value: str = ""
    rotation: float = 0.0
    relative_x_scale: float = 1.0
    oblique_angle: float = 0.0
    style_name: str = "STANDARD"
    mirrored_x: bool = False
    mirrored_y: bool = False
    horizontal_justification: HorizontalTextJustification | int = (
        HorizontalTextJustification.LEFT
    )
    second_alignment_point: Point = field(default_factory=Point)
    extrusion_direction: Point = field(default_factory=_extrusion_default)
    vertical_justification: VerticalTextJustification | int = (
        VerticalTextJustification.BASELINE
    )

    def _set_flags(self, flags: int) -> None:
        self.mirrored_x = bool(flags & _BACKWARD_TEXT_BIT)
        self.mirrored_y = bool(flags & _UPSIDE_DOWN_TEXT_BIT)

    def _set_horizontal(self, value: int) -> None:
        self.horizontal_justification = _enum_or_int(HorizontalTextJustification, value)

    def _set_vertical(self, value: int) -> None:
        self.vertical_justification = _enum_or_int(VerticalTextJustification, value)

    def _tag_parsers(self) -> dict[int, TypeParser]:
        return {
            1: StringTypeParser.for_attribute(self, "value"),
            7: StringTypeParser.for_attribute(self, "style_name"),
            **self._point_parsers(self.first_alignment_point, 10, 20, 30),
            39: FloatTypeParser.for_attribute(self, "thickness"),
            40: FloatTypeParser.for_attribute(self, "height"),
            41: FloatTypeParser.for_attribute(self, "relative_x_scale"),
            50: FloatTypeParser.for_attribute(self, "rotation"),
            51: FloatTypeParser.for_attribute(self, "oblique_angle"),
            71: IntTypeParser(self._set_flags),
            72: IntTypeParser(self._set_horizontal),
            73: IntTypeParser(self._set_vertical),
            **self._point_parsers(self.second_alignment_point, 11, 21, 31),
            **self._point_parsers(self.extrusion_direction, 210, 220, 230),
        }


@dataclass(eq=False)
class MText(Text):
    """An MTEXT entity; read with the same group codes as TEXT."""