import math

import pytest

from heronphys.mathutils import Quat, Vec2, Vec3
from heronphys.shapes import (
    Capsule,
    Cone,
    ConvexHull,
    Cuboid,
    Custom,
    CustomCollisionShape,
    Cylinder,
    HeightField,
    Sphere,
)
from heronphys.wireframe import (
    CUBOID_EDGES,
    Line,
    capsule_lines,
    cone_lines,
    cuboid_lines,
    cylinder_lines,
    height_field_lines,
    rounded_cuboid_lines,
    shape_outline,
    sphere_lines,
)

TOL = 1e-6
ORIENTS = [
    Quat.identity(),
    Quat.from_rotation_z(0.7),
    Quat.from_axis_angle(Vec3(1.0, 2.0, -1.0).normalize(), 1.3),
]


def _endpoints(lines):
    for line in lines:
        yield line.start
        yield line.end


def _close(a, b):
    return (a - b).length() < TOL


def _local(p, origin, orient):
    conj = Quat(-orient.x, -orient.y, -orient.z, orient.w)
    return conj.mul_vec3(p - origin)


def test_cuboid_has_one_line_per_edge():
    lines = cuboid_lines(Vec3.ZERO, Quat.identity(), Vec3(1.0, 2.0, 3.0))
    assert len(lines) == len(CUBOID_EDGES) == 12
    for p in _endpoints(lines):
        assert (abs(p.x), abs(p.y), abs(p.z)) == (1.0, 2.0, 3.0)


@pytest.mark.parametrize("orient", ORIENTS)
def test_sphere_points_are_on_sphere(orient):
    origin = Vec3(1.0, -2.0, 0.5)
    lines = sphere_lines(origin, orient, 2.5)
    assert lines
    for p in _endpoints(lines):
        assert (p - origin).length() == pytest.approx(2.5)


def test_translation_shifts_every_line():
    origin = Vec3(3.0, 4.0, -5.0)
    orient = ORIENTS[2]
    at_zero = capsule_lines(Vec3.ZERO, orient, 1.0, 0.5)
    moved = capsule_lines(origin, orient, 1.0, 0.5)
    assert len(at_zero) == len(moved)
    for a, b in zip(at_zero, moved):
        assert _close(a.start + origin, b.start)
        assert _close(a.end + origin, b.end)


@pytest.mark.parametrize("orient", ORIENTS)
def test_capsule_points_are_radius_from_segment(orient):
    origin = Vec3(0.5, 0.5, 0.5)
    half_segment, radius = 1.5, 0.4
    lines = capsule_lines(origin, orient, half_segment, radius)
    for p in _endpoints(lines):
        q = _local(p, origin, orient)
        axis_y = max(-half_segment, min(half_segment, q.y))
        dist = (q - Vec3(0.0, axis_y, 0.0)).length()
        assert dist == pytest.approx(radius, abs=TOL)


@pytest.mark.parametrize("orient", ORIENTS)
def test_cylinder_points_on_end_circles(orient):
    origin = Vec3(-1.0, 2.0, 0.0)
    lines = cylinder_lines(origin, orient, 2.0, 0.75)
    for p in _endpoints(lines):
        q = _local(p, origin, orient)
        assert abs(q.y) == pytest.approx(2.0, abs=TOL)
        assert math.hypot(q.x, q.z) == pytest.approx(0.75, abs=TOL)


@pytest.mark.parametrize("orient", ORIENTS)
def test_cone_points_are_apex_or_base(orient):
    origin = Vec3.ZERO
    lines = cone_lines(origin, orient, 1.0, 0.5)
    apex = orient.mul_vec3(Vec3(0.0, 1.0, 0.0))
    apex_count = 0
    for p in _endpoints(lines):
        if _close(p, apex):
            apex_count += 1
            continue
        q = _local(p, origin, orient)
        assert q.y == pytest.approx(-1.0, abs=TOL)
        assert math.hypot(q.x, q.z) == pytest.approx(0.5, abs=TOL)
    assert apex_count > 0
    assert all(_close(line.end, apex) for line in lines[-8:])


@pytest.mark.parametrize("orient", ORIENTS)
def test_rounded_cuboid_points_are_radius_from_box(orient):
    origin = Vec3(1.0, 1.0, 1.0)
    half = Vec3(1.0, 0.5, 2.0)
    radius = 0.3
    lines = rounded_cuboid_lines(origin, orient, half, radius)
    for p in _endpoints(lines):
        q = _local(p, origin, orient)
        outside = Vec3(
            max(abs(q.x) - half.x, 0.0),
            max(abs(q.y) - half.y, 0.0),
            max(abs(q.z) - half.z, 0.0),
        )
        assert outside.length() == pytest.approx(radius, abs=TOL)


def test_height_field_cell_lines_and_heights():
    heights = [[0.0, 1.0, 2.0], [3.0, 4.0, 5.0], [6.0, 7.0, 8.0]]
    lines = height_field_lines(Vec3.ZERO, Quat.identity(), Vec2(4.0, 4.0), heights)
    assert len(lines) == 5 * 2 * 2
    flat = {h for row in heights for h in row}
    for p in _endpoints(lines):
        assert p.y in flat
        assert -2.0 <= p.x <= 2.0 and -2.0 <= p.z <= 2.0


def test_height_field_single_row_has_no_lines():
    assert height_field_lines(Vec3.ZERO, Quat.identity(), Vec2(1.0, 1.0), [[1.0, 2.0]]) == []


def test_height_field_without_heights_raises():
    with pytest.raises(ValueError):
        height_field_lines(Vec3.ZERO, Quat.identity(), Vec2(1.0, 1.0), [])


def test_convex_hull_of_cube_outlines_its_edges():
    corners = [Vec3(x, y, z) for x in (-1.0, 1.0) for y in (-1.0, 1.0) for z in (-1.0, 1.0)]
    shape = ConvexHull(points=corners + [Vec3(0.1, 0.2, 0.0)])
    lines = shape_outline(shape, Vec3.ZERO, Quat.identity())
    assert len(lines) == 12
    for line in lines:
        assert line.start in corners and line.end in corners
        differing = sum(a != b for a, b in zip(line.start, line.end))
        assert differing == 1


def test_convex_hull_of_collinear_points_is_one_segment():
    shape = ConvexHull(points=[Vec3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0), Vec3(3.0, 0.0, 0.0)])
    lines = shape_outline(shape, Vec3.ZERO, Quat.identity())
    assert len(lines) == 1
    assert {lines[0].start, lines[0].end} == {Vec3(0.0, 0.0, 0.0), Vec3(3.0, 0.0, 0.0)}


@pytest.mark.parametrize(
    "shape, expected",
    [
        (Sphere(radius=1.0), sphere_lines(Vec3.ZERO, Quat.identity(), 1.0)),
        (Cuboid(half_extends=Vec3.ONE), cuboid_lines(Vec3.ZERO, Quat.identity(), Vec3.ONE)),
        (
            Cuboid(half_extends=Vec3.ONE, border_radius=0.2),
            rounded_cuboid_lines(Vec3.ZERO, Quat.identity(), Vec3.ONE, 0.2),
        ),
        (Capsule(half_segment=1.0, radius=0.5), capsule_lines(Vec3.ZERO, Quat.identity(), 1.0, 0.5)),
        (Cone(half_height=1.0, radius=0.5), cone_lines(Vec3.ZERO, Quat.identity(), 1.0, 0.5)),
        (Cylinder(half_height=1.0, radius=0.5), cylinder_lines(Vec3.ZERO, Quat.identity(), 1.0, 0.5)),
        (
            HeightField(size=Vec2(2.0, 2.0), heights=[[0.0, 1.0], [1.0, 0.0]]),
            height_field_lines(Vec3.ZERO, Quat.identity(), Vec2(2.0, 2.0), [[0.0, 1.0], [1.0, 0.0]]),
        ),
    ],
)
def test_shape_outline_dispatches(shape, expected):
    assert shape_outline(shape, Vec3.ZERO, Quat.identity()) == expected


def test_custom_shape_has_no_outline():
    shape = Custom(shape=CustomCollisionShape(object()))
    assert shape_outline(shape, Vec3.ZERO, Quat.identity()) == []


def test_line_is_value_object():
    assert Line(Vec3.X, Vec3.Y) == Line(Vec3(1.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0))
    assert Line(Vec3.X, Vec3.Y) != Line(Vec3.Y, Vec3.X)