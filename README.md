# dxfparse

A small library for reading ASCII DXF (Drawing Exchange Format) files.

It reads the group-code/value pairs of a DXF text stream as typed tags. It
pulls basic drawing information out of the header. It also builds entity
objects from tag lists: arcs, circles, ellipses, lines, points, polylines,
lightweight polylines, vertices, inserts, splines, text and multi-line text.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Reading tags

```python
from dxfparse.tags import all_tags

with open("drawing.dxf", encoding="cp1252") as stream:
    tags = all_tags(stream)

for tag in tags.all_with_code(0):
    print(tag.code, tag.value)
```

A stream is any iterable of text lines, such as an open file.

- `all_tags(stream)` returns a `TagList`. It stops quietly at a malformed
  group code.
- `iter_tags(stream)` yields the same tags one at a time. It raises
  `ValueError` on a malformed group code.

Both stop at the end of the stream, at an empty code line, or at a group code
with no known value type. A value that does not parse becomes the zero value
of its type.

Each `Tag` has a `code` and a `value`. The value is a `String`, `Integer` or
`Float` from `dxfparse.datatypes`, and the group code decides which one.
`make_value(code, text)` does the same conversion for a single value and
raises `ValueError` when the value is bad. `as_string`, `as_int` and
`as_float` return the raw value, or `None` when the type is different.

`TagList` is a list with these selections:

- `tag_index(code, start, end)` gives the first index with that code. It
  raises `ValueError` when there is none.
- `all_with_code(code)`
- `regular_tags()` leaves out extended data and application data groups.
- `xdata_tags()` returns the tags with code 1000 and above.
- `app_data_tags()` returns a dict keyed by the opening `{NAME` value.
- `subclasses_tags()` returns a dict keyed by the subclass marker value. Tags
  before the first marker go under `"noname"`.

`tag_groups(tags, split_code)` splits a tag sequence into groups. Each group
starts at a tag with `split_code`.

## Header information

```python
from dxfparse.info import get_dxf_info

with open("drawing.dxf", encoding="cp1252") as stream:
    info = get_dxf_info(stream)

print(info.release, info.version, info.encoding, info.handseed)
```

`get_dxf_info` reads up to the first `ENDSEC` and raises `ValueError` on
malformed tags.

- `$ACADVER` is mapped to a release name such as `R2004`. An unknown version
  maps to `R12`.
- `$DWGCODEPAGE` becomes a Python codec name through
  `dxfparse.codepage.to_encoding`. That function falls back to `cp1252`.

## Entities

Each entity class builds itself from the tags that describe it:

```python
from dxfparse.tags import all_tags
from dxfparse.shapes import Circle

with open("circle.dxf") as stream:
    circle = Circle.from_tags(all_tags(stream))

print(circle.center, circle.radius, circle.layer_name)
```

The entity classes are:

- in `dxfparse.shapes`: `Arc`, `Circle`, `Ellipse`, `Line`, `PointEntity`
- in `dxfparse.polylines`: `Vertex`, `Polyline`, `LWPolyline` (whose points
  are `LWPolylinePoint` objects)
- in `dxfparse.insert`: `Insert`
- in `dxfparse.spline`: `Spline`
- in `dxfparse.text`: `Text`, `MText`
- in `dxfparse.entity`: `SeqEnd`

All of them derive from `dxfparse.entity.Entity`, which holds the common
attributes:

- handle, owner and layer
- line type, line weight and line type scale
- the `Space` and `ShadowMode` enums
- colour, `on` and `visible`
- true colour, colour name and transparency

A negative colour number turns the entity off and is stored as its absolute
value.

Fields that the tags leave out keep their DXF defaults. For example, the
extrusion direction defaults to `(0, 0, 1)`.

If a tag's value has the wrong type for its field, parsing raises
`dxfparse.parseable.ParseError`, which is a subclass of `ValueError`.

### Nested entities

`Polyline` and `Insert` can own the entities that follow them:

- `has_nested_entities()` tells whether they do. It is always true for
  `Polyline`, and true for `Insert` when its attributes follow.
- `Polyline.add_nested_entities` keeps only the `Vertex` objects.
- `Insert.add_nested_entities` replaces its `entities` list.
- `is_seq_end()` is true only for `SeqEnd`.

### Equality

Entities compare equal only when they are of the same class. Floating-point
fields are compared with the tolerance of `dxfparse.geometry.float_equals`.
`dxfparse.geometry.Point` uses the same tolerance, and `entities_equal`,
`points_equal` and `float_sequence_equals` compare whole sequences.

## Colours

`dxfparse.colors.TrueColor` is an `int` holding `0xRRGGBB`.

- `TrueColor.from_rgb(r, g, b)` builds one from its components.
- `rgb()` returns the `(r, g, b)` tuple.
- `r`, `g` and `b` are properties.

`DXF_COLORS` is the default palette, indexed by DXF colour number.

## What it does not do

- It does not assemble a whole drawing into its header, table, block and
  entity sections.
- It does not choose the entity class from a tag list's type name. You pick
  the class and call its `from_tags`.
- It does not write DXF files.
- It does not read binary DXF.
- It has no command-line tool.