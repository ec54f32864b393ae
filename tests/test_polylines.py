import pytest

from dxfparse.colors import TrueColor
from dxfparse.datatypes import Float, Integer
from dxfparse.entity import SeqEnd, ShadowMode, Space, entities_equal
from dxfparse.geometry import Point
from dxfparse.parseable import ParseError
from dxfparse.polylines import (
    LWPolyline,
    LWPolylinePoint,
    Polyline,
    SmoothSurfaceType,
    Vertex,
)
from dxfparse.tags import Tag, all_tags

COMMON_ATTRIBS = """  5
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
1
284
{shadow}
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
"""


def _tags(text):
    return all_tags(text.splitlines())


def _all_base(shadow_mode):
    return dict(
        handle="ALL_ARGS",
        owner="hb",
        space=Space.PAPER,
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
        shadow_mode=shadow_mode,
    )


MINIMAL_VERTEX = """  0
VERTEX
  5
LH
  8
0
 10
1.1
 20
1.2
 30
1.3
"""

VERTEX_ALL = "  0\nVERTEX\n" + COMMON_ATTRIBS.format(shadow=1) + """ 10
1.1
 20
1.2
 30
1.3
 40
10.5
 41
15.8
 42
11.2
 91
3
 70
251
 50
0.2
"""


def test_minimal_vertex():
    expected = Vertex(handle="LH", layer_name="0", location=Point(1.1, 1.2, 1.3))
    vertex = Vertex.from_tags(_tags(MINIMAL_VERTEX))
    assert vertex == expected
    assert vertex.is_seq_end() is False
    assert vertex.has_nested_entities() is False


def test_vertex_all_attribs():
    expected = Vertex(
        **_all_base(ShadowMode.CASTS),
        location=Point(1.1, 1.2, 1.3),
        starting_width=10.5,
        end_width=15.8,
        bulge=11.2,
        id=3,
        created_by_curve_fitting=True,
        curve_fit_tangent_defined=True,
        spline_vertex=True,
        spline_frame_ctrl_point=True,
        is_3d_polyline_vertex=True,
        is_3d_polyline_mesh=True,
        is_polyface_mesh_vertex=True,
        curve_fit_tangent_direction=0.2,
    )
    assert Vertex.from_tags(_tags(VERTEX_ALL)) == expected


def test_vertex_not_equal_to_different_type():
    assert (Vertex() == Integer(0)) is False


@pytest.mark.parametrize(
    "a, b, equal",
    [
        ([], [], True),
        ([Vertex()], [Vertex()], True),
        ([Vertex(id=1), Vertex(id=2)], [Vertex(id=1), Vertex(id=2)], True),
        ([Vertex(id=1)], [], False),
        ([Vertex(id=1), Vertex(id=2)], [Vertex(id=2), Vertex(id=1)], False),
    ],
)
def test_vertex_sequence_equality(a, b, equal):
    assert entities_equal(a, b) is equal
    assert (a == b) is equal


MINIMAL_POLYLINE = """  0
POLYLINE
  5
3E5
  8
0
"""

POLYLINE_ALL = "  0\nPOLYLINE\n" + COMMON_ATTRIBS.format(shadow=0) + """ 39
3.3
 30
1.5
 40
0.5
 41
1.5
 70
255
 71
3
 72
4
 73
5
 74
6
 75
6
210
32.1
220
12.6
230
95.1
"""


def test_minimal_polyline():
    expected = Polyline(handle="3E5", layer_name="0")
    polyline = Polyline.from_tags(_tags(MINIMAL_POLYLINE))
    assert polyline == expected
    assert polyline.vertices == []
    assert polyline.extrusion_direction == Point(0.0, 0.0, 1.0)
    assert polyline.is_seq_end() is False
    assert polyline.has_nested_entities() is True


def test_polyline_all_attribs():
    expected = Polyline(
        **_all_base(ShadowMode.CASTS_AND_RECEIVE),
        elevation=1.5,
        thickness=3.3,
        closed=True,
        curve_fit_vertices_added=True,
        spline_fit_vertices_added=True,
        is_3d_polyline=True,
        is_3d_polygon_mesh=True,
        polygon_mesh_closed_n_dir=True,
        is_polyface_mesh=True,
        line_type_parent_around=True,
        default_start_width=0.5,
        default_end_width=1.5,
        vertex_count_m=3,
        vertex_count_n=4,
        smooth_density_m=5,
        smooth_density_n=6,
        smooth_surface=SmoothSurfaceType.CUBIC_BSPLINE,
        extrusion_direction=Point(32.1, 12.6, 95.1),
    )
    polyline = Polyline.from_tags(_tags(POLYLINE_ALL))
    assert polyline == expected
    assert polyline.smooth_surface is SmoothSurfaceType.CUBIC_BSPLINE


def test_polyline_not_equal_to_different_type():
    assert (Polyline() == Integer(0)) is False


def test_polyline_add_nested_entities_keeps_only_vertices():
    expected = Polyline(
        handle="3E5",
        layer_name="0",
        vertices=[
            Vertex(location=Point(1.5, 2.7)),
            Vertex(location=Point(10.4, 56.1)),
        ],
    )
    polyline = Polyline.from_tags(_tags(MINIMAL_POLYLINE))
    polyline.add_nested_entities(
        [
            Vertex(location=Point(1.5, 2.7)),
            SeqEnd(),
            Vertex(location=Point(10.4, 56.1)),
        ]
    )
    assert polyline == expected
    assert len(polyline.vertices) == 2


def test_polyline_flag_with_wrong_type_raises():
    with pytest.raises(ParseError):
        Polyline.from_tags([Tag(70, Float(1.0))])


MINIMAL_LWPOLYLINE = """  0
LWPOLYLINE
  5
LWP
  8
0
"""

LWPOLYLINE_ALL = "  0\nLWPOLYLINE\n" + COMMON_ATTRIBS.format(shadow=2) + """ 90
3
 70
129
 38
12.3
 39
9.1
 43
3.7
210
32.1
220
12.6
230
95.1
 10
1.0
 20
2.0
 91
0
 40
1.0
 41
2.0
 42
0.5
 10
5.0
 20
6.1
 91
1
 40
3.0
 41
2.5
 42
5.5
 10
1.0
 20
1.0
 91
2
 40
1.0
 41
2.0
 42
4.5
"""


def test_minimal_lwpolyline():
    expected = LWPolyline(handle="LWP", layer_name="0")
    polyline = LWPolyline.from_tags(_tags(MINIMAL_LWPOLYLINE))
    assert polyline == expected
    assert polyline.points == []
    assert polyline.is_seq_end() is False
    assert polyline.has_nested_entities() is False


def test_lwpolyline_all_attribs():
    expected = LWPolyline(
        **_all_base(ShadowMode.RECEIVES),
        closed=True,
        plinegen=True,
        constant_width=3.7,
        elevation=12.3,
        thickness=9.1,
        points=[
            LWPolylinePoint(Point(1, 2), 0, 1.0, 2.0, 0.5),
            LWPolylinePoint(Point(5, 6.1), 1, 3.0, 2.5, 5.5),
            LWPolylinePoint(Point(1, 1), 2, 1.0, 2.0, 4.5),
        ],
        extrusion_direction=Point(32.1, 12.6, 95.1),
    )
    assert LWPolyline.from_tags(_tags(LWPOLYLINE_ALL)) == expected


def test_lwpolyline_not_equal_to_different_type():
    assert (LWPolyline() == Float(0.1)) is False


def test_lwpolyline_point_attribute_before_point_raises():
    with pytest.raises(ParseError):
        LWPolyline.from_tags([Tag(90, Integer(1)), Tag(20, Float(1.0))])


P1 = LWPolylinePoint(Point(1, 2, 3), 0, 1.0, 2.0, 0.5)
P2 = LWPolylinePoint(Point(1, 2, 3), 0, 2.0, 3.0, 1.5)


@pytest.mark.parametrize(
    "a, b, equal",
    [
        (P1, P1, True),
        (P1, LWPolylinePoint(Point(1, 2, 3), 0, 1.0, 2.0, 0.5), True),
        (P1, LWPolylinePoint(Point(1, 3, 3), 0, 1.0, 2.0, 0.5), False),
        (P1, LWPolylinePoint(Point(1, 2, 3), 1, 1.0, 2.0, 0.5), False),
        (P1, P2, False),
    ],
)
def test_lwpolyline_point_equality(a, b, equal):
    assert (a == b) is equal


@pytest.mark.parametrize(
    "a, b, equal",
    [
        ([], [], True),
        ([P1], [P1], True),
        ([P1, P2], [P1, P2], True),
        ([P1], [], False),
        ([P1, P2], [P2, P1], False),
    ],
)
def test_lwpolyline_point_list_equality(a, b, equal):
    assert (LWPolyline(points=a) == LWPolyline(points=b)) is equal