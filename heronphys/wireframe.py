"""Wireframe outlines of 3D collision shapes, as lists of line segments."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from itertools import combinations
from typing import Iterator, Optional, Sequence

from heronphys.mathutils import Quat, Vec2, Vec3
from heronphys.shapes import (
    Capsule,
    CollisionShape,
    Cone,
    ConvexHull,
    Cuboid,
    Cylinder,
    HeightField,
    Sphere,
)

_log = logging.getLogger(__name__)

_FRAC_PI_2 = math.pi / 2.0
_QUARTER_CIRCLE_SEGMENTS = 4

CUBOID_EDGES = (
    (0, 1), (1, 2), (2, 3), (3, 0),
    (4, 5), (5, 6), (6, 7), (7, 4),
    (0, 5), (1, 6), (2, 7), (3, 4),
)

# Directions in which each cuboid edge moves once the border radius is added.
_EDGE_BEVEL_DIRECTIONS = (
    (Vec3.Z, Vec3.Y), (-Vec3.X, Vec3.Y), (-Vec3.Z, Vec3.Y), (Vec3.X, Vec3.Y),
    (Vec3.X, -Vec3.Y), (Vec3.Z, -Vec3.Y), (-Vec3.X, -Vec3.Y), (-Vec3.Z, -Vec3.Y),
    (Vec3.X, Vec3.Z), (-Vec3.X, Vec3.Z), (-Vec3.X, -Vec3.Z), (Vec3.X, -Vec3.Z),
)


@dataclass(frozen=True)
class Line:
    """A line segment in world space."""

    start: Vec3
    end: Vec3


def _cuboid_vertices(h: Vec3) -> tuple[Vec3, ...]:
    x, y, z = h
    return (
        Vec3(x, y, z), Vec3(-x, y, z), Vec3(-x, y, -z), Vec3(x, y, -z),
        Vec3(x, -y, -z), Vec3(x, -y, z), Vec3(-x, -y, z), Vec3(-x, -y, -z),
    )


def _corner_bevel_rotations() -> tuple[Quat, ...]:
    # Rotations that carry a rounded corner from one cuboid vertex to the next,
    # in the order of ``_cuboid_vertices``.
    y_rot = Quat.from_rotation_y(-_FRAC_PI_2)
    return (
        y_rot, y_rot, y_rot,
        Quat.from_rotation_z(-_FRAC_PI_2),
        Quat.from_rotation_x(_FRAC_PI_2),
        Quat.from_rotation_x(_FRAC_PI_2),
        Quat.from_rotation_x(_FRAC_PI_2),
    )


def _quarter_circle(origin: Vec3, orient: Quat, radius: float) -> Iterator[Line]:
    angle = _FRAC_PI_2 / _QUARTER_CIRCLE_SEGMENTS
    current = orient.mul_vec3(Vec3.X * radius)
    step = Quat.from_axis_angle(orient.mul_vec3(Vec3.Z), angle)
    for _ in range(_QUARTER_CIRCLE_SEGMENTS):
        following = step.mul_vec3(current)
        yield Line(origin + current, origin + following)
        current = following


def _semicircle(origin: Vec3, orient: Quat, radius: float) -> Iterator[Line]:
    yield from _quarter_circle(origin, orient, radius)
    yield from _quarter_circle(origin, orient * Quat.from_rotation_y(math.pi), radius)


def _circle(origin: Vec3, orient: Quat, radius: float) -> Iterator[Line]:
    yield from _semicircle(origin, orient, radius)
    yield from _semicircle(origin, orient * Quat.from_rotation_x(math.pi), radius)


def _rounded_corner(origin: Vec3, orient: Quat, radius: float) -> Iterator[Line]:
    yield from _quarter_circle(origin, orient * Quat.from_rotation_y(-_FRAC_PI_2), radius)
    yield from _quarter_circle(origin, orient * Quat.from_rotation_x(_FRAC_PI_2), radius)
    yield from _quarter_circle(origin, orient, radius)


def cuboid_lines(origin: Vec3, orient: Quat, half_extents: Vec3) -> list[Line]:
    """The twelve edges of a box."""
    verts = [origin + orient.mul_vec3(v) for v in _cuboid_vertices(half_extents)]
    return [Line(verts[a], verts[b]) for a, b in CUBOID_EDGES]


def rounded_cuboid_lines(
    origin: Vec3, orient: Quat, half_extents: Vec3, radius: float
) -> list[Line]:
    """A box grown by ``radius``: rounded corners plus two lines per edge."""
    verts = _cuboid_vertices(half_extents)
    rotations = _corner_bevel_rotations()
    lines: list[Line] = []
    direction = Quat.identity()
    for i, vertex in enumerate(verts):
        corner = origin + orient.mul_vec3(vertex)
        lines.extend(_rounded_corner(corner, orient * direction, radius))
        direction = direction * rotations[i % len(rotations)]

    def bevel(index: int, p: Vec3) -> tuple[Vec3, Vec3]:
        d0, d1 = _EDGE_BEVEL_DIRECTIONS[index]
        return (
            origin + orient.mul_vec3(p + d0 * radius),
            origin + orient.mul_vec3(p + d1 * radius),
        )

    for index, (a, b) in enumerate(CUBOID_EDGES):
        p00, p01 = bevel(index, verts[a])
        p10, p11 = bevel(index, verts[b])
        lines.append(Line(p00, p10))
        lines.append(Line(p01, p11))
    return lines


def sphere_lines(origin: Vec3, orient: Quat, radius: float) -> list[Line]:
    """Three orthogonal great circles."""
    lines = list(_circle(origin, orient, radius))
    lines.extend(_circle(origin, orient * Quat.from_rotation_x(_FRAC_PI_2), radius))
    lines.extend(_circle(origin, orient * Quat.from_rotation_y(_FRAC_PI_2), radius))
    return lines


def capsule_lines(
    origin: Vec3, orient: Quat, half_segment: float, radius: float
) -> list[Line]:
    """Four side lines, two rings and the arcs of both hemispheres, along y."""
    x_rotate = Quat.from_rotation_x(_FRAC_PI_2)
    y_rotate = Quat.from_rotation_y(_FRAC_PI_2)
    invert = Quat.from_rotation_z(math.pi)

    def ring(y: float) -> list[Vec3]:
        return [
            origin + orient.mul_vec3(Vec3(0.0, y, -radius)),
            origin + orient.mul_vec3(Vec3(0.0, y, radius)),
            origin + orient.mul_vec3(Vec3(-radius, y, 0.0)),
            origin + orient.mul_vec3(Vec3(radius, y, 0.0)),
        ]

    lines = [Line(a, b) for a, b in zip(ring(half_segment), ring(-half_segment))]

    lower = origin + orient.mul_vec3(-Vec3.Y * half_segment)
    upper = origin + orient.mul_vec3(Vec3.Y * half_segment)
    lines.extend(_semicircle(lower, orient * invert * y_rotate, radius))
    lines.extend(_semicircle(lower, orient * invert, radius))
    lines.extend(_circle(lower, orient * x_rotate, radius))
    lines.extend(_semicircle(upper, orient * y_rotate, radius))
    lines.extend(_semicircle(upper, orient, radius))
    lines.extend(_circle(upper, orient * x_rotate, radius))
    return lines


def _base_directions() -> Iterator[Vec3]:
    for factor in range(8):
        angle = 2.0 * factor * (math.pi / 8.0)
        yield Vec3(math.cos(angle), 0.0, math.sin(angle))


def cone_lines(origin: Vec3, orient: Quat, half_height: float, radius: float) -> list[Line]:
    """The base circle and eight lines up to the apex, along y."""
    base = orient.mul_vec3(Vec3.Y * -half_height) + origin
    top = orient.mul_vec3(Vec3.Y * half_height) + origin
    lines = list(_circle(base, orient * Quat.from_rotation_x(_FRAC_PI_2), radius))
    lines.extend(
        Line(base + orient.mul_vec3(d) * radius, top) for d in _base_directions()
    )
    return lines


def cylinder_lines(
    origin: Vec3, orient: Quat, half_height: float, radius: float
) -> list[Line]:
    """Both end circles and eight lines joining them, along y."""
    base = orient.mul_vec3(Vec3.Y * -half_height) + origin
    top = orient.mul_vec3(Vec3.Y * half_height) + origin
    flat = orient * Quat.from_rotation_x(_FRAC_PI_2)
    lines = list(_circle(base, flat, radius))
    lines.extend(_circle(top, flat, radius))
    for d in _base_directions():
        offset = orient.mul_vec3(d) * radius
        lines.append(Line(base + offset, top + offset))
    return lines


def height_field_lines(
    origin: Vec3, orient: Quat, size: Vec2, heights: Sequence[Sequence[float]]
) -> list[Line]:
    """A triangulated grid over the heights, centred on the origin.

    Raises ``ValueError`` if there are no heights at all.
    """
    rows = len(heights)
    if rows == 0 or len(heights[0]) == 0:
        raise ValueError("height field needs at least one height")
    x_length = len(heights[0]) - 1
    if rows < 2 or x_length < 1:
        return []

    y_step = size.y / (rows - 1)
    y_org = -size.y / 2.0
    x_step = size.x / x_length
    x_org = -size.x / 2.0

    def point(x: float, h: float, y: float) -> Vec3:
        return origin + orient.mul_vec3(Vec3(x, h, y))

    lines: list[Line] = []
    for y_i in range(rows - 1):
        for x_i in range(x_length):
            x0 = x_org + x_i * x_step
            x1 = x_org + (x_i + 1) * x_step
            y0 = y_org + y_i * y_step
            y1 = y_org + (y_i + 1) * y_step
            p00 = point(x0, heights[x_i][y_i], y0)
            p01 = point(x1, heights[x_i + 1][y_i], y0)
            p10 = point(x0, heights[x_i][y_i + 1], y1)
            p11 = point(x1, heights[x_i + 1][y_i + 1], y1)
            lines.extend(
                (Line(p00, p01), Line(p00, p10), Line(p10, p11), Line(p01, p11), Line(p10, p01))
            )
    return lines


def _face_outline(
    points: Sequence[Vec3], face: frozenset[int], normal: Vec3
) -> list[tuple[int, int]]:
    indices = sorted(face)
    anchor = points[indices[0]]
    u: Optional[Vec3] = None
    for i in indices[1:]:
        offset = points[i] - anchor
        if offset.length_squared() > 0.0:
            u = offset.normalize()
            break
    if u is None:
        return []
    v = normal.cross(u)
    coords = {
        i: ((points[i] - anchor).dot(u), (points[i] - anchor).dot(v)) for i in indices
    }

    def turn(a: int, b: int, c: int) -> float:
        (ax, ay), (bx, by), (cx, cy) = coords[a], coords[b], coords[c]
        return (bx - ax) * (cy - ay) - (by - ay) * (cx - ax)

    def chain(order: Sequence[int]) -> list[int]:
        result: list[int] = []
        for i in order:
            while len(result) >= 2 and turn(result[-2], result[-1], i) <= 0.0:
                result.pop()
            result.append(i)
        return result

    order = sorted(indices, key=lambda i: coords[i])
    ring = chain(order)[:-1] + chain(order[::-1])[:-1]
    if len(ring) < 2:
        return []
    return list(zip(ring, ring[1:] + ring[:1]))


def _convex_hull_edges(points: Sequence[Vec3]) -> list[tuple[Vec3, Vec3]]:
    pts = list(dict.fromkeys(points))
    if len(pts) < 2:
        return []
    scale = max(1.0, max(abs(c) for p in pts for c in p))
    eps = 1e-6 * scale

    faces: dict[frozenset[int], Vec3] = {}
    for a, b, c in combinations(range(len(pts)), 3):
        normal = (pts[b] - pts[a]).cross(pts[c] - pts[a])
        length = normal.length()
        if length <= eps * scale:
            continue
        normal = normal / length
        dists = [normal.dot(p - pts[a]) for p in pts]
        if all(d <= eps for d in dists) or all(d >= -eps for d in dists):
            key = frozenset(i for i, d in enumerate(dists) if abs(d) <= eps)
            faces.setdefault(key, normal)

    edges: dict[frozenset[int], tuple[int, int]] = {}
    for face, normal in faces.items():
        for i, j in _face_outline(pts, face, normal):
            edges.setdefault(frozenset((i, j)), (i, j))

    if not edges:
        a, b = max(
            combinations(range(len(pts)), 2),
            key=lambda ij: (pts[ij[0]] - pts[ij[1]]).length_squared(),
        )
        return [(pts[a], pts[b])]
    return [(pts[i], pts[j]) for i, j in edges.values()]


def convex_hull_lines(origin: Vec3, orient: Quat, points: Sequence[Vec3]) -> list[Line]:
    """The edges of the convex hull of ``points``."""
    return [
        Line(origin + orient.mul_vec3(a), origin + orient.mul_vec3(b))
        for a, b in _convex_hull_edges(points)
    ]


def shape_outline(shape: CollisionShape, origin: Vec3, orient: Quat) -> list[Line]:
    """The wireframe of ``shape`` placed at ``origin`` with rotation ``orient``.

    Shapes without a wireframe renderer are logged and give no lines. A
    convex hull's border radius is not drawn.
    """
    match shape:
        case Cuboid(half_extends=half, border_radius=None):
            return cuboid_lines(origin, orient, half)
        case Cuboid(half_extends=half, border_radius=radius):
            return rounded_cuboid_lines(origin, orient, half, radius)
        case Sphere(radius=radius):
            return sphere_lines(origin, orient, radius)
        case Capsule(half_segment=half_segment, radius=radius):
            return capsule_lines(origin, orient, half_segment, radius)
        case ConvexHull(points=points):
            return convex_hull_lines(origin, orient, points)
        case HeightField(size=size, heights=heights):
            return height_field_lines(origin, orient, size, heights)
        case Cone(half_height=half_height, radius=radius):
            return cone_lines(origin, orient, half_height, radius)
        case Cylinder(half_height=half_height, radius=radius):
            return cylinder_lines(origin, orient, half_height, radius)
    _log.warning("Debug render for this shape %r is unimplemented", shape)
    return []