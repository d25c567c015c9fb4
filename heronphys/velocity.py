"""Linear and angular velocity, acceleration and damping components."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Union

from heronphys.mathutils import Quat, Vec2, Vec3

VectorLike = Union[Vec2, Vec3]


def _as_vec3(v: VectorLike) -> Vec3:
    if isinstance(v, Vec2):
        return v.extend(0.0)
    if isinstance(v, Vec3):
        return v
    raise TypeError(f"expected Vec2 or Vec3, got {type(v).__name__}")


@dataclass(frozen=True)
class AxisAngle:
    """An axis-angle rotation: a vector whose direction is the axis and whose length is the angle."""

    vector: Vec3 = Vec3.ZERO

    @classmethod
    def new(cls, axis: Vec3, angle: float) -> AxisAngle:
        """Rotation of ``angle`` radians around ``axis`` (normalized here).

        Raises ``ValueError`` if ``axis`` has zero length.
        """
        return cls(axis.normalize() * angle)

    @classmethod
    def from_quat(cls, quat: Quat) -> AxisAngle:
        """The axis-angle equivalent of ``quat``, scaled by the quaternion's norm."""
        length = quat.length()
        axis, angle = quat.to_axis_angle()
        return cls(axis.normalize() * (angle * length))

    def to_quat(self) -> Quat:
        """The rotation as a quaternion; identity when the angle is near zero."""
        if self.is_near_zero():
            return Quat.identity()
        angle = self.vector.length()
        return Quat.from_axis_angle(self.vector / angle, angle)

    def angle_squared(self) -> float:
        """Squared angle; cheaper than ``angle`` for comparisons."""
        return self.vector.length_squared()

    def angle(self) -> float:
        """Angle around the axis, in radians."""
        return self.vector.length()

    def axis(self) -> Vec3:
        """The axis, **not** normalized."""
        return self.vector

    def is_near_zero(self) -> bool:
        """True if every component is near zero."""
        return self.vector.is_near_zero()

    def __float__(self) -> float:
        return self.angle()

    def __mul__(self, scalar: float) -> AxisAngle:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return AxisAngle(self.vector * scalar)

    __rmul__ = __mul__


@dataclass
class Velocity:
    """Linear velocity in units per second and angular velocity in radians per second."""

    linear: Vec3 = Vec3.ZERO
    angular: AxisAngle = field(default_factory=AxisAngle)

    @classmethod
    def from_linear(cls, linear: VectorLike) -> Velocity:
        """Only a linear part; a 2D vector is extended with ``z = 0``."""
        return cls(linear=_as_vec3(linear))

    @classmethod
    def from_angular(cls, angular: AxisAngle) -> Velocity:
        """Only an angular part."""
        return cls(angular=angular)

    @classmethod
    def from_quat(cls, quat: Quat) -> Velocity:
        """Only an angular part, given as a quaternion."""
        return cls(angular=AxisAngle.from_quat(quat))

    def with_linear(self, linear: VectorLike) -> Velocity:
        """Copy with the given linear part."""
        return dataclasses.replace(self, linear=_as_vec3(linear))

    def with_angular(self, angular: AxisAngle) -> Velocity:
        """Copy with the given angular part."""
        return dataclasses.replace(self, angular=angular)

    def is_near_zero(self) -> bool:
        """True if both the linear and angular parts are near zero."""
        return self.linear.is_near_zero() and self.angular.is_near_zero()


@dataclass
class Acceleration:
    """Linear acceleration in units/s² and angular acceleration in radians/s²."""

    linear: Vec3 = Vec3.ZERO
    angular: AxisAngle = field(default_factory=AxisAngle)

    @classmethod
    def from_linear(cls, linear: VectorLike) -> Acceleration:
        """Only a linear part; a 2D vector is extended with ``z = 0``."""
        return cls(linear=_as_vec3(linear))

    @classmethod
    def from_angular(cls, angular: AxisAngle) -> Acceleration:
        """Only an angular part."""
        return cls(angular=angular)

    @classmethod
    def from_quat(cls, quat: Quat) -> Acceleration:
        """Only an angular part, given as a quaternion."""
        return cls(angular=AxisAngle.from_quat(quat))

    def with_linear(self, linear: VectorLike) -> Acceleration:
        """Copy with the given linear part."""
        return dataclasses.replace(self, linear=_as_vec3(linear))

    def with_angular(self, angular: AxisAngle) -> Acceleration:
        """Copy with the given angular part."""
        return dataclasses.replace(self, angular=angular)

    def is_near_zero(self) -> bool:
        """True if both the linear and angular parts are near zero."""
        return self.linear.is_near_zero() and self.angular.is_near_zero()


@dataclass
class Damping:
    """Linear and angular damping coefficients; zero means no damping."""

    linear: float = 0.0
    angular: float = 0.0

    @classmethod
    def from_linear(cls, linear: float) -> Damping:
        """Only linear damping."""
        return cls(linear=linear)

    @classmethod
    def from_angular(cls, angular: float) -> Damping:
        """Only angular damping."""
        return cls(angular=angular)

    def with_linear(self, linear: float) -> Damping:
        """Copy with the given linear damping."""
        return dataclasses.replace(self, linear=linear)

    def with_angular(self, angular: float) -> Damping:
        """Copy with the given angular damping."""
        return dataclasses.replace(self, angular=angular)