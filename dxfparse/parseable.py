"""Dispatching tag values to typed setters by group code."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any, ClassVar

from .datatypes import DataType, Float, Integer, String
from .tags import Tag, TagList


class ParseError(ValueError):
    """A tag value did not have the type its parser expects."""


class TypeParser:
    """Checks a value's type and hands the raw value to a setter."""

    kind: ClassVar[type[DataType]]
    label: ClassVar[str]

    def __init__(self, setter: Callable[[Any], None]) -> None:
        self.setter = setter

    def parse(self, value: DataType) -> None:
        """Pass the value to the setter; raise ParseError on a type mismatch."""
        if not isinstance(value, self.kind):
            raise ParseError(f"Error parsing type of {value!r} as {self.label}")
        self.setter(value.value)

    @classmethod
    def for_attribute(cls, target: object, name: str) -> "TypeParser":
        """A parser that stores the value in ``target.name``."""
        return cls(lambda value: setattr(target, name, value))


class StringTypeParser(TypeParser):
    """Parser for String values."""

    kind = String
    label = "a String"


class IntTypeParser(TypeParser):
    """Parser for Integer values."""

    kind = Integer
    label = "an Integer"


class FloatTypeParser(TypeParser):
    """Parser for Float values."""

    kind = Float
    label = "a Float"


class TagParser:
    """Routes each regular tag to the parser registered for its group code."""

    def __init__(self, parsers: Mapping[int, TypeParser] | None = None) -> None:
        self.parsers: dict[int, TypeParser] = dict(parsers or {})

    def update(self, parsers: Mapping[int, TypeParser]) -> None:
        """Add or replace parsers."""
        self.parsers.update(parsers)

    def parse(self, tags: Iterable[Tag]) -> None:
        """Parse the regular tags; tags without a parser are ignored."""
        for tag in TagList(tags).regular_tags():
            parser = self.parsers.get(tag.code)
            if parser is not None:
                parser.parse(tag.value)