import pytest

from heronphys.mathutils import Vec2, Vec3
from heronphys.shapes import (
    Capsule,
    CollisionShape,
    Cone,
    ConvexHull,
    Cuboid,
    Custom,
    CustomCollisionShape,
    Cylinder,
    HeightField,
    PendingConvexCollision,
    PhysicMaterial,
    PhysicsSystem,
    RigidBody,
    SensorShape,
    Sphere,
)


class _Payload:
    def __init__(self, value):
        self.value = value


def test_default_shape_is_unit_sphere():
    assert CollisionShape.default() == Sphere(radius=1.0)


@pytest.mark.parametrize(
    "shape,attr,expected",
    [
        (Sphere(1.0), "radius", 1.0),
        (Capsule(half_segment=1.0, radius=0.5), "half_segment", 1.0),
        (Cuboid(Vec3(1.0, 1.0, 1.0)), "border_radius", None),
        (ConvexHull([Vec3.X, Vec3.Y]), "points", (Vec3.X, Vec3.Y)),
        (HeightField(Vec2(1.0, 1.0), [[0.0, 1.0]]), "heights", ((0.0, 1.0),)),
        (Cone(half_height=2.0, radius=1.0), "half_height", 2.0),
        (Cylinder(half_height=1.0, radius=0.5), "radius", 0.5),
    ],
)
def test_variants_are_collision_shapes(shape, attr, expected):
    assert isinstance(shape, CollisionShape)
    assert getattr(shape, attr) == expected


def test_custom_variant_wraps_custom_shape():
    custom = CustomCollisionShape(_Payload(1))
    shape = Custom(custom)
    assert isinstance(shape, CollisionShape)
    assert shape == Custom(custom)


def test_cuboid_border_radius_defaults_to_none():
    assert Cuboid(Vec3(0.5, 0.5, 0.5)).border_radius is None


def test_convex_hull_points_become_tuple():
    hull = ConvexHull([Vec3.X, Vec3.Y], border_radius=0.3)
    assert hull.points == (Vec3.X, Vec3.Y)
    assert hull == ConvexHull((Vec3.X, Vec3.Y), border_radius=0.3)


def test_height_field_rows_become_tuples():
    field = HeightField(Vec2(700.0, 0.0), [[50.0, 0.0, 10.0]])
    assert field.heights == ((50.0, 0.0, 10.0),)


def test_custom_shape_downcast_matches_type():
    payload = _Payload(42)
    custom = CustomCollisionShape(payload)
    assert custom.downcast_ref(_Payload) is payload
    assert custom.downcast_ref(int) is None


def test_custom_shape_repr_names_type():
    custom = CustomCollisionShape(_Payload(1))
    assert "_Payload" in repr(custom)
    assert custom.type_name.endswith("_Payload")


@pytest.mark.parametrize(
    "body, expected",
    [
        (RigidBody.DYNAMIC, True),
        (RigidBody.KINEMATIC_VELOCITY_BASED, True),
        (RigidBody.STATIC, False),
        (RigidBody.SENSOR, False),
        (RigidBody.KINEMATIC_POSITION_BASED, False),
    ],
)
def test_can_have_velocity(body, expected):
    assert body.can_have_velocity() is expected


def test_physic_material_defaults():
    material = PhysicMaterial()
    assert material.restitution == PhysicMaterial.PERFECTLY_INELASTIC_RESTITUTION
    assert material.density == 1.0
    assert material.friction == 0.0
    assert PhysicMaterial.PERFECTLY_ELASTIC_RESTITUTION == 1.0


def test_physic_material_override_keeps_other_defaults():
    material = PhysicMaterial(restitution=0.7, friction=0.1)
    assert (material.restitution, material.density, material.friction) == (0.7, 1.0, 0.1)


def test_sensor_shapes_are_equal_markers():
    markers = [SensorShape(), SensorShape()]
    assert markers.count(SensorShape()) == 2
    assert markers.count(Sphere(1.0)) == 0


def test_physics_system_labels_distinct():
    members = list(PhysicsSystem)
    assert len(set(members)) == 3
    assert all(PhysicsSystem(member.value) is member for member in members)


def test_pending_collision_builds_convex_hull_from_vertices():
    request = PendingConvexCollision(body_type=RigidBody.STATIC, border_radius=None)
    vertices = [[0.5, -0.5, 0.5], [-0.5, 0.5, -0.5], (1.0, 2.0, 3.0)]
    hull = request.shape_for(vertices)
    assert isinstance(hull, ConvexHull)
    assert hull.border_radius == request.border_radius
    assert len(hull.points) == len(vertices)
    for point, vertex in zip(hull.points, vertices):
        assert (point.x, point.y, point.z) == tuple(vertex)


def test_pending_collision_keeps_border_radius():
    request = PendingConvexCollision(body_type=RigidBody.DYNAMIC, border_radius=0.3)
    assert request.shape_for([(0.0, 0.0, 0.0)]).border_radius == 0.3


def test_pending_collision_rejects_non_3d_vertices():
    request = PendingConvexCollision(body_type=RigidBody.STATIC)
    with pytest.raises(ValueError):
        request.shape_for([(1.0, 2.0)])