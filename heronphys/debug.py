"""Colours used to draw collision shapes for debugging."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from heronphys.mathutils import EPSILON
from heronphys.shapes import RigidBody

DEBUG_ALPHA_2D = 0.4
"""Opacity of debug shapes in 2D, where they are drawn filled."""

DEBUG_ALPHA_3D = 0.8
"""Opacity of debug shapes in 3D; wireframes read better when more opaque."""


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components between 0 and 1."""

    r: float
    g: float
    b: float
    a: float = 1.0


@dataclass(frozen=True)
class DebugColor:
    """The colour used for each kind of collider."""

    sensor: Color
    static_body: Color
    dynamic_body: Color
    kinematic_body: Color

    @classmethod
    def for_dimension(cls, three_d: bool = True) -> DebugColor:
        """The default palette for 3D wireframes or, if ``three_d`` is false, 2D fills."""
        alpha = DEBUG_ALPHA_3D if three_d else DEBUG_ALPHA_2D
        return cls(
            sensor=Color(0.0, 0.63, 0.0, alpha),
            static_body=Color(0.64, 0.0, 0.16, alpha),
            dynamic_body=Color(0.0, 0.18, 0.54, alpha),
            kinematic_body=Color(0.21, 0.07, 0.7, alpha),
        )

    def for_collider_type(
        self, rigid_body: Optional[RigidBody], is_sensor_shape: bool
    ) -> Color:
        """The colour of a collider given its body type and sensor flag.

        A shape without a rigid body is drawn as a dynamic body.
        """
        if is_sensor_shape or rigid_body is RigidBody.SENSOR:
            return self.sensor
        if rigid_body is RigidBody.STATIC:
            return self.static_body
        if rigid_body in (
            RigidBody.KINEMATIC_POSITION_BASED,
            RigidBody.KINEMATIC_VELOCITY_BASED,
        ):
            return self.kinematic_body
        return self.dynamic_body


def is_near(v1: float, v2: float) -> bool:
    """True if the two values differ by at most float epsilon."""
    return abs(v2 - v1) <= EPSILON