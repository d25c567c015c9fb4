# heronphys

Data types and rules for the physics side of a game world. It covers
collision shapes, collision layers, velocities, gravity, physics step timing,
collision events and the line segments used to draw debug wireframes of 3D
shapes.

The package needs nothing beyond the standard library.

## Installation

```
pip install heronphys
```

To run the tests:

```
pip install "heronphys[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `heronphys.mathutils` | `Vec2`, `Vec3`, `Quat`, `is_near_zero` |
| `heronphys.layers` | `PhysicsLayer`, `CollisionLayers` |
| `heronphys.gravity` | `Gravity` |
| `heronphys.constraints` | `RotationConstraints` |
| `heronphys.physics_time` | `PhysicsTime` |
| `heronphys.velocity` | `AxisAngle`, `Velocity`, `Acceleration`, `Damping` |
| `heronphys.events` | `CollisionData`, `CollisionEvent`, `CollisionState` |
| `heronphys.step` | `PhysicsSteps`, `PhysicsStepDuration`, `StepDurationKind`, `should_run` |
| `heronphys.shapes` | `CollisionShape` and its kinds (`Sphere`, `Capsule`, `Cuboid`, `ConvexHull`, `HeightField`, `Cone`, `Cylinder`, `Custom`), `CustomCollisionShape`, `RigidBody`, `SensorShape`, `PhysicMaterial`, `PhysicsSystem`, `PendingConvexCollision` |
| `heronphys.debug` | `Color`, `DebugColor`, `is_near` |
| `heronphys.wireframe` | `Line`, `shape_outline` and one outline builder per shape |

## Collision layers

Layers are declared as a subclass of the `PhysicsLayer` enum. Each member
gets one bit, in declaration order, and an enum may have at most 32 members.
More than that raises `TypeError`. Members need distinct values, and
`enum.auto()` is the simplest way to get them.

```python
from enum import auto
from heronphys.layers import CollisionLayers, PhysicsLayer

class Layer(PhysicsLayer):
    WORLD = auto()
    PLAYER = auto()
    ENEMY = auto()

assert Layer.ENEMY.to_bits() == 4
assert Layer.all_bits() == 0b111

player = CollisionLayers.new(Layer.PLAYER, Layer.ENEMY)
enemy = CollisionLayers.none().with_group(Layer.ENEMY).with_mask(Layer.PLAYER)
assert player.interacts_with(enemy)
```

Two shapes interact only when each one's groups share a bit with the other's
masks. `CollisionLayers()` has all 32 bits set in both groups and masks.
`CollisionLayers.none()` has none and so interacts with nothing. The
`with_*` and `without_*` methods return new values, and they also accept raw
integer bits.

## Velocity and rotation

```python
import math
from heronphys.mathutils import Vec2, Vec3
from heronphys.velocity import AxisAngle, Velocity

velocity = Velocity.from_linear(Vec2(300.0, 0.0)).with_angular(
    AxisAngle.new(Vec3.Z, -math.pi)
)
assert velocity.linear == Vec3(300.0, 0.0, 0.0)
```

The methods that take a `Vec2` extend it with `z = 0`. These are
`Velocity.from_linear`, `Acceleration.from_linear` and `Gravity.from_vector`.
`AxisAngle.to_quat` and `AxisAngle.from_quat` convert between axis-angle
values and `Quat`.

## Time scale and physics steps

```python
from datetime import timedelta
from heronphys.physics_time import PhysicsTime
from heronphys.step import PhysicsSteps, should_run

time = PhysicsTime(1.0)
steps = PhysicsSteps.from_steps_per_second(10.0)

steps.update(timedelta(seconds=0.11))
assert should_run(steps, time)

time.pause()
assert time.scale == 0.0
assert not should_run(steps, time)
time.resume()
assert time.scale == 1.0
```

`PhysicsTime` raises `ValueError` when given a negative scale, both in its
constructor and through the `scale` setter.

`PhysicsSteps` supports the following modes:

- `PhysicsSteps()` steps on every frame. Each step lasts the frame's delta
  time, capped at 0.2 seconds. `from_max_delta_time` sets a different cap.
- `from_steps_per_second` and `from_delta_time` step only on frames where the
  timer has run out.
- `every_frame` steps on every frame, always by the same fixed duration.

Durations can be given in seconds or as a `timedelta`. Invalid rates and
durations raise `ValueError`.

## Shapes, bodies and materials

```python
from heronphys.mathutils import Vec3
from heronphys.shapes import Cuboid, PendingConvexCollision, RigidBody

box = Cuboid(half_extends=Vec3(0.5, 0.5, 0.5))
assert RigidBody.DYNAMIC.can_have_velocity()
assert not RigidBody.STATIC.can_have_velocity()

hull = PendingConvexCollision(RigidBody.STATIC).shape_for([(0, 0, 0), (1, 0, 0), (0, 1, 0)])
assert len(hull.points) == 3
```

`CollisionShape.default()` returns a sphere of radius 1. `PhysicMaterial()`
has restitution 0, density 1 and friction 0.

## Collision events

`CollisionEvent.started(a, b)` and `CollisionEvent.stopped(a, b)` build an
event from two `CollisionData` values. The event can report its rigid body
entities, its collision shape entities and the collision layers of both
sides. Entities can be any hashable value.

## Debug colours and wireframes

```python
from heronphys.debug import DebugColor
from heronphys.mathutils import Quat, Vec3
from heronphys.shapes import Cuboid, RigidBody
from heronphys.wireframe import shape_outline

lines = shape_outline(Cuboid(Vec3(0.5, 0.5, 0.5)), Vec3(0.0, 3.0, 0.0), Quat.identity())
assert len(lines) == 12

colors = DebugColor.for_dimension(three_d=True)
assert colors.for_collider_type(RigidBody.DYNAMIC, True) == colors.sensor
```

`shape_outline` returns `Line` segments in world space. For a shape kind that
has no outline builder, such as `Custom`, it logs a warning and returns an
empty list. The border radius of a convex hull is not drawn.

## What it does not do

- No physics solver: nothing here moves bodies or detects collisions.
- No ray or shape casting.
- No drawing: the wireframe functions produce line segments, and rendering
  them is left to the caller.
- Outlines are only available for 3D shapes; there are no filled 2D debug
  shapes.
- No mesh loading: `PendingConvexCollision.shape_for` takes vertex positions
  that the caller has already read.