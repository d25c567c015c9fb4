"""Small vector and quaternion types used by the physics components."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator, Union

EPSILON = 1.1920929e-07
"""Machine epsilon of a 32-bit float, the tolerance for "near zero" checks."""

_AXIS_EPSILON_SQUARED = 1.0e-8 * 1.0e-8


@dataclass(frozen=True)
class Vec2:
    """A two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vec2]
    X: ClassVar[Vec2]
    Y: ClassVar[Vec2]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def extend(self, z: float) -> Vec3:
        """Return a 3D vector with this vector's components and the given ``z``."""
        return Vec3(self.x, self.y, z)

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)


Vec2.ZERO = Vec2(0.0, 0.0)
Vec2.X = Vec2(1.0, 0.0)
Vec2.Y = Vec2(0.0, 1.0)


@dataclass(frozen=True)
class Vec3:
    """A three-dimensional vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar[Vec3]
    ONE: ClassVar[Vec3]
    X: ClassVar[Vec3]
    Y: ClassVar[Vec3]
    Z: ClassVar[Vec3]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3:
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def length_squared(self) -> float:
        """Squared Euclidean length."""
        return self.dot(self)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_squared())

    def normalize(self) -> Vec3:
        """Return the unit vector with the same direction.

        Raises ``ValueError`` for a zero-length vector.
        """
        length = self.length()
        if length == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return self / length

    def dot(self, other: Vec3) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Cross product."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def is_near_zero(self) -> bool:
        """True if every component is within float epsilon of zero."""
        return all(is_near_zero(c) for c in self)


Vec3.ZERO = Vec3(0.0, 0.0, 0.0)
Vec3.ONE = Vec3(1.0, 1.0, 1.0)
Vec3.X = Vec3(1.0, 0.0, 0.0)
Vec3.Y = Vec3(0.0, 1.0, 0.0)
Vec3.Z = Vec3(0.0, 0.0, 1.0)


@dataclass(frozen=True)
class Quat:
    """A rotation quaternion stored as ``(x, y, z, w)``."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def identity(cls) -> Quat:
        """The rotation that does nothing."""
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_axis_angle(cls, axis: Vec3, angle: float) -> Quat:
        """Rotation of ``angle`` radians around the (unit) ``axis``."""
        half = angle * 0.5
        s = math.sin(half)
        return cls(axis.x * s, axis.y * s, axis.z * s, math.cos(half))

    @classmethod
    def from_rotation_x(cls, angle: float) -> Quat:
        """Rotation around the x axis."""
        return cls.from_axis_angle(Vec3.X, angle)

    @classmethod
    def from_rotation_y(cls, angle: float) -> Quat:
        """Rotation around the y axis."""
        return cls.from_axis_angle(Vec3.Y, angle)

    @classmethod
    def from_rotation_z(cls, angle: float) -> Quat:
        """Rotation around the z axis."""
        return cls.from_axis_angle(Vec3.Z, angle)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def length(self) -> float:
        """Norm of the quaternion."""
        return math.sqrt(sum(c * c for c in self))

    def to_axis_angle(self) -> tuple[Vec3, float]:
        """Return the rotation axis and the angle in radians.

        A rotation too small to define an axis yields ``(Vec3.X, 0.0)``.
        """
        scale_sq = max(1.0 - self.w * self.w, 0.0)
        if scale_sq >= _AXIS_EPSILON_SQUARED:
            inv = 1.0 / math.sqrt(scale_sq)
            angle = 2.0 * math.acos(max(-1.0, min(1.0, self.w)))
            return Vec3(self.x * inv, self.y * inv, self.z * inv), angle
        return Vec3.X, 0.0

    def mul_vec3(self, v: Vec3) -> Vec3:
        """Rotate the vector ``v``."""
        q = Vec3(self.x, self.y, self.z)
        t = q.cross(v) * 2.0
        return v + t * self.w + q.cross(t)

    def __mul__(self, other: Union[Quat, Vec3]) -> Union[Quat, Vec3]:
        if isinstance(other, Vec3):
            return self.mul_vec3(other)
        if isinstance(other, Quat):
            return Quat(
                self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
                self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
                self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
                self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
            )
        return NotImplemented


def is_near_zero(value) -> bool:
    """True if a number, or every part of a vector-like value, is near zero."""
    if isinstance(value, (int, float)):
        return abs(value) < EPSILON
    return value.is_near_zero()