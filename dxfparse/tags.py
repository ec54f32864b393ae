"""DXF tags: reading them from a text stream and slicing tag lists."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from .datatypes import (
    DataType,
    Float,
    Integer,
    String,
    parse_float,
    parse_integer,
    parse_string,
)

APP_DATA_MARKER = 102
SUBCLASS_MARKER = 100


@dataclass(frozen=True)
class Tag:
    """A group code paired with its typed value."""

    code: int
    value: DataType

    def __str__(self) -> str:
        return f"{{ Code: {self.code}; Value: {self.value} }}"


_Factory = Callable[[str], DataType]

_STRING = (parse_string, String(""))
_INTEGER = (parse_integer, Integer(0))
_FLOAT = (parse_float, Float(0.0))

_CODE_RANGES: tuple[tuple[int, int, tuple[_Factory, DataType]], ...] = (
    (0, 10, _STRING),
    (10, 60, _FLOAT),
    (60, 100, _INTEGER),
    (100, 106, _STRING),
    (110, 150, _FLOAT),
    (160, 180, _INTEGER),
    (210, 240, _FLOAT),
    (270, 300, _INTEGER),
    (300, 370, _STRING),
    (370, 390, _INTEGER),
    (390, 400, _STRING),
    (400, 410, _INTEGER),
    (410, 420, _STRING),
    (420, 430, _INTEGER),
    (430, 440, _STRING),
    (440, 460, _INTEGER),
    (460, 470, _FLOAT),
    (470, 482, _STRING),
    (999, 1010, _STRING),
    (1010, 1060, _FLOAT),
    (1060, 1072, _INTEGER),
)

_FACTORIES: dict[int, tuple[_Factory, DataType]] = {
    code: entry
    for start, stop, entry in _CODE_RANGES
    for code in range(start, stop)
}


def make_value(code: int, text: str) -> DataType:
    """Parse ``text`` into the value type that group ``code`` carries.

    Raises ValueError for an unknown group code or a malformed value.
    """
    try:
        factory, _ = _FACTORIES[code]
    except KeyError:
        raise ValueError(f"unknown group code: {code}") from None
    return factory(text)


def iter_tags(stream: Iterable[str]) -> Iterator[Tag]:
    """Yield the tags of a DXF text stream in order.

    Iteration ends at the end of the stream, at an empty code line or at a
    group code with no known value type. A malformed value becomes the zero
    value of its type; a malformed code raises ValueError and read errors
    propagate.
    """
    lines = iter(stream)

    def read_line() -> str:
        line = next(lines, None)
        return "" if line is None else line.strip()

    while True:
        code_text = read_line()
        value_text = read_line()
        if not code_text:
            return
        code = parse_integer(code_text).value
        entry = _FACTORIES.get(code)
        if entry is None:
            return
        factory, default = entry
        try:
            value = factory(value_text)
        except ValueError:
            value = default
        yield Tag(code, value)


def all_tags(stream: Iterable[str]) -> "TagList":
    """Collect the tags of ``stream``.

    Reading stops quietly at the first malformed code or read error; use
    iter_tags to have those raised.
    """
    tags = TagList()
    try:
        for tag in iter_tags(stream):
            tags.append(tag)
    except (ValueError, OSError):
        pass
    return tags


class TagList(list):
    """A list of tags with DXF-specific selections."""

    def tag_index(self, code: int, start: int, end: int) -> int:
        """Index of the first tag with ``code`` in ``[start, end)``.

        Raises ValueError when there is none.
        """
        for index in range(start, end):
            if self[index].code == code:
                return index
        raise ValueError(f"no tag with code {code} in [{start}, {end})")

    def all_with_code(self, code: int) -> "TagList":
        """All tags with group code ``code``."""
        return TagList(tag for tag in self if tag.code == code)

    def regular_tags(self) -> "TagList":
        """Tags that are neither extended data nor inside app data groups."""
        result = TagList()
        in_app_data = False
        for tag in self:
            if tag.code >= 1000:
                continue
            if tag.code == APP_DATA_MARKER:
                in_app_data = not in_app_data
                continue
            if not in_app_data:
                result.append(tag)
        return result

    def xdata_tags(self) -> "TagList":
        """Extended data tags (group code 1000 and above)."""
        return TagList(tag for tag in self if tag.code > 999)

    def app_data_tags(self) -> dict[str, "TagList"]:
        """App data groups keyed by their opening tag's value."""
        app_data: dict[str, TagList] = {}
        group: list[Tag] = []
        for tag in self:
            if tag.code == APP_DATA_MARKER:
                if str(tag.value) == "}":
                    group.append(tag)
                    app_data[str(group[0].value)] = TagList(group)
                    group = []
                else:
                    group = [tag]
            elif group:
                group.append(tag)
        return app_data

    def subclasses_tags(self) -> dict[str, "TagList"]:
        """Regular tags grouped by subclass marker; leading tags go to ``noname``."""
        classes: dict[str, TagList] = {}
        current = TagList()
        name = "noname"
        for tag in self.regular_tags():
            if tag.code == SUBCLASS_MARKER:
                classes[name] = current
                current = TagList()
                name = str(tag.value)
            else:
                current.append(tag)
        classes[name] = current
        return classes


def tag_groups(tags: Iterable[Tag], split_code: int) -> list[TagList]:
    """Split ``tags`` into groups, each starting at a tag with ``split_code``.

    Tags before the first split tag are dropped.
    """
    groups: list[TagList] = []
    group = TagList()
    for tag in tags:
        if tag.code == split_code:
            if group:
                groups.append(group)
                group = TagList()
            group.append(tag)
        elif group:
            group.append(tag)
    if group:
        groups.append(group)
    return groups