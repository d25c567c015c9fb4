"""Collision shapes, rigid body types and physics materials."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Iterable, Optional, Sequence, Type, TypeVar

from heronphys.mathutils import Vec2, Vec3

_T = TypeVar("_T")


class PhysicsSystem(Enum):
    """Labels of the physics systems."""

    VELOCITY_UPDATE = "velocity_update"
    """Updates ``Velocity`` to reflect the velocity in the physics world."""

    TRANSFORM_UPDATE = "transform_update"
    """Updates transforms to reflect the positions in the physics world."""

    EVENTS = "events"
    """Emits collision events."""


class CustomCollisionShape:
    """An opaque wrapper around a backend-specific collision shape."""

    __slots__ = ("_shape", "_type_name")

    def __init__(self, shape: Any) -> None:
        self._shape = shape
        kind = type(shape)
        self._type_name = f"{kind.__module__}.{kind.__qualname__}"

    @property
    def type_name(self) -> str:
        """Fully qualified name of the wrapped value's type."""
        return self._type_name

    def downcast_ref(self, type_: Type[_T]) -> Optional[_T]:
        """The wrapped value if its type is exactly ``type_``, else ``None``."""
        if type(self._shape) is type_:
            return self._shape
        return None

    def __repr__(self) -> str:
        return f"CustomCollisionShape({self._type_name})"


@dataclass(frozen=True)
class CollisionShape:
    """Base of every collision shape attached to a rigid body.

    A shape attaches to the rigid body of its own entity, or failing that,
    to the rigid body of its parent entity.
    """

    @classmethod
    def default(cls) -> CollisionShape:
        """The default shape: a sphere of radius 1."""
        return Sphere(radius=1.0)


@dataclass(frozen=True)
class Sphere(CollisionShape):
    """A sphere (a circle in 2D) defined by its radius."""

    radius: float


@dataclass(frozen=True)
class Capsule(CollisionShape):
    """A capsule: a segment swept by a sphere."""

    half_segment: float
    """Distance from the centre of the capsule to the centre of a hemisphere."""

    radius: float
    """Radius of the hemispheres."""


@dataclass(frozen=True)
class Cuboid(CollisionShape):
    """A box given by its half extents; ``z`` is ignored in 2D.

    ``border_radius``, if set, is added around the box to round its corners.
    """

    half_extends: Vec3
    border_radius: Optional[float] = None


@dataclass(frozen=True)
class ConvexHull(CollisionShape):
    """A convex polygon or polyhedron given by its points.

    ``border_radius``, if set, is added around the hull to round its corners.
    """

    points: tuple[Vec3, ...]
    border_radius: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))


@dataclass(frozen=True)
class HeightField(CollisionShape):
    """A surface defined by the heights of a grid of points.

    In 2D only ``size.x`` and the first row of ``heights`` are used.
    """

    size: Vec2
    heights: tuple[tuple[float, ...], ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "heights", tuple(tuple(row) for row in self.heights))


@dataclass(frozen=True)
class Cone(CollisionShape):
    """A cone with a circular base (3D only)."""

    half_height: float
    radius: float


@dataclass(frozen=True)
class Cylinder(CollisionShape):
    """A cylinder (3D only)."""

    half_height: float
    radius: float


@dataclass(frozen=True)
class Custom(CollisionShape):
    """A backend-specific shape."""

    shape: CustomCollisionShape


class RigidBody(Enum):
    """The kind of rigid body an entity is; ``DYNAMIC`` is the default."""

    DYNAMIC = "dynamic"
    """Affected by forces and affects other bodies."""

    STATIC = "static"
    """Not moved by forces, but affects other bodies."""

    KINEMATIC_POSITION_BASED = "kinematic_position_based"
    """Moved by user-defined positions; not affected by other bodies."""

    KINEMATIC_VELOCITY_BASED = "kinematic_velocity_based"
    """Moved by user-defined velocity; not affected by other bodies."""

    SENSOR = "sensor"
    """Neither affected by nor affecting other bodies; only reports collisions."""

    def can_have_velocity(self) -> bool:
        """True if this body type can be moved by a velocity."""
        return self in (RigidBody.DYNAMIC, RigidBody.KINEMATIC_VELOCITY_BASED)


@dataclass(frozen=True)
class SensorShape:
    """Marks the collision shape of the same entity as a sensor."""


@dataclass(frozen=True)
class PhysicMaterial:
    """Restitution, density and friction of a rigid body."""

    PERFECTLY_INELASTIC_RESTITUTION: ClassVar[float] = 0.0
    PERFECTLY_ELASTIC_RESTITUTION: ClassVar[float] = 1.0

    restitution: float = 0.0
    density: float = 1.0
    friction: float = 0.0


@dataclass(frozen=True)
class PendingConvexCollision:
    """A request to give meshes a rigid body and a convex-hull collision shape."""

    body_type: RigidBody = field(default=RigidBody.DYNAMIC)
    border_radius: Optional[float] = None

    def shape_for(self, vertices: Iterable[Sequence[float]]) -> ConvexHull:
        """The convex hull built from a mesh's vertex positions.

        Each vertex must have exactly three coordinates; otherwise
        ``ValueError`` is raised.
        """
        points = []
        for vertex in vertices:
            coords = tuple(vertex)
            if len(coords) != 3:
                raise ValueError(
                    f"mesh vertices must have 3 coordinates, got {len(coords)}"
                )
            points.append(Vec3(*coords))
        return ConvexHull(points=tuple(points), border_radius=self.border_radius)