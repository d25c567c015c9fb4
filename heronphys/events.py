"""Collision events between pairs of entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Hashable, Iterable

from heronphys.layers import CollisionLayers
from heronphys.mathutils import Vec2


@dataclass(frozen=True)
class CollisionData:
    """Data about one of the two entities involved in a collision."""

    rigid_body_entity: Hashable
    collision_shape_entity: Hashable
    collision_layers: CollisionLayers = field(default_factory=CollisionLayers)
    normals: tuple[Vec2, ...] = ()

    def __post_init__(self) -> None:
        normals: Iterable[Vec2] = self.normals
        object.__setattr__(self, "normals", tuple(normals))


class CollisionState(Enum):
    """Whether a collision started or stopped."""

    STARTED = "started"
    STOPPED = "stopped"


@dataclass(frozen=True)
class CollisionEvent:
    """The collision state between two entities changed."""

    state: CollisionState
    first: CollisionData
    second: CollisionData

    @classmethod
    def started(cls, first: CollisionData, second: CollisionData) -> CollisionEvent:
        """The two entities started to collide."""
        return cls(CollisionState.STARTED, first, second)

    @classmethod
    def stopped(cls, first: CollisionData, second: CollisionData) -> CollisionEvent:
        """The two entities no longer collide."""
        return cls(CollisionState.STOPPED, first, second)

    def is_started(self) -> bool:
        """True if this is the start of a collision."""
        return self.state is CollisionState.STARTED

    def is_stopped(self) -> bool:
        """True if this is the end of a collision."""
        return self.state is CollisionState.STOPPED

    def data(self) -> tuple[CollisionData, CollisionData]:
        """The data for both entities."""
        return self.first, self.second

    def collision_shape_entities(self) -> tuple[Hashable, Hashable]:
        """The entities holding the collision shapes involved."""
        return self.first.collision_shape_entity, self.second.collision_shape_entity

    def rigid_body_entities(self) -> tuple[Hashable, Hashable]:
        """The entities holding the rigid bodies involved."""
        return self.first.rigid_body_entity, self.second.rigid_body_entity

    def collision_layers(self) -> tuple[CollisionLayers, CollisionLayers]:
        """The collision layers of both shapes."""
        return self.first.collision_layers, self.second.collision_layers