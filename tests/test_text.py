import pytest

from dxfparse.colors import TrueColor
from dxfparse.datatypes import Float, Integer, String
from dxfparse.entity import ShadowMode, Space
from dxfparse.geometry import Point
from dxfparse.parseable import ParseError
from dxfparse.tags import Tag, all_tags
from dxfparse.text import (
    HorizontalTextJustification,
    MText,
    Text,
    VerticalTextJustification,
)

MINIMAL_TEXT = """  0
TEXT
  5
3E5
  8
0
"""

TEXT_ALL_ATTRIBS = """  0
TEXT
  5
ALL_ARGS
  8
L1
  6
CONTINUOUS
 48
2.5
 60
1
 62
2
 67
0
284
3
330
hb
370
3
410
layout
420
6835781
430
BROWN
440
5
 39
55.221
 10
10.5
 20
11.2
 30
76.3
 40
2.5
  1
THIS IS A TEXT
 50
20.5
 41
2
 51
10.0
  7
MY STYLE
 71
6
 72
2
 73
3
 11
11.5
 21
12.2
 31
77.3
210
32.1
220
12.6
230
95.1
"""

FULL_FIELDS = dict(
    handle="ALL_ARGS",
    owner="hb",
    space=Space.MODEL,
    layout_tab_name="layout",
    layer_name="L1",
    line_type_name="CONTINUOUS",
    on=True,
    color=2,
    line_weight=3,
    line_type_scale=2.5,
    visible=False,
    true_color=TrueColor(0x684E45),
    color_name="BROWN",
    transparency=5,
    shadow_mode=ShadowMode.IGNORES,
    thickness=55.221,
    height=2.5,
    value="THIS IS A TEXT",
    rotation=20.5,
    relative_x_scale=2.0,
    oblique_angle=10.0,
    style_name="MY STYLE",
    mirrored_x=True,
    mirrored_y=True,
    horizontal_justification=HorizontalTextJustification.RIGHT,
    vertical_justification=VerticalTextJustification.TOP,
)


def full_expected(cls):
    return cls(
        first_alignment_point=Point(10.5, 11.2, 76.3),
        second_alignment_point=Point(11.5, 12.2, 77.3),
        extrusion_direction=Point(32.1, 12.6, 95.1),
        **FULL_FIELDS,
    )


def parse(cls, text):
    return cls.from_tags(all_tags(text.splitlines()))


def test_minimal_text():
    expected = Text(
        handle="3E5",
        layer_name="0",
        relative_x_scale=1.0,
        style_name="STANDARD",
        extrusion_direction=Point(0.0, 0.0, 1.0),
    )
    text = parse(Text, MINIMAL_TEXT)
    assert text == expected
    assert text.is_seq_end() is False
    assert text.has_nested_entities() is False


def test_text_all_attribs():
    assert parse(Text, TEXT_ALL_ATTRIBS) == full_expected(Text)


def test_text_justification_values():
    text = parse(Text, TEXT_ALL_ATTRIBS)
    assert text.horizontal_justification is HorizontalTextJustification.RIGHT
    assert text.vertical_justification is VerticalTextJustification.TOP


def test_text_not_equal_to_different_type():
    assert (Text() == String("AAA")) is False


def test_mtext_all_attribs():
    source = TEXT_ALL_ATTRIBS.replace("TEXT\n", "MTEXT\n", 1)
    assert parse(MText, source) == full_expected(MText)


def test_mtext_defaults():
    mtext = parse(MText, MINIMAL_TEXT)
    assert mtext.style_name == "STANDARD"
    assert mtext.relative_x_scale == 1.0
    assert mtext.extrusion_direction == Point(0.0, 0.0, 1.0)


def test_text_and_mtext_are_not_equal():
    assert (Text() == MText()) is False


def test_unknown_justification_kept_as_int():
    text = Text.from_tags([Tag(72, Integer(9))])
    assert text.horizontal_justification == 9


def test_wrong_value_type_is_error():
    with pytest.raises(ParseError):
        Text.from_tags([Tag(1, Float(1.0))])