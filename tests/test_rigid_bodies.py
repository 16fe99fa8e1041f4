import math

import pytest

from bvcreator.rigid_bodies import (
    ERROR_NAME,
    KINEMATIC_OBJECT,
    MAX_NAME_LENGTH,
    MIN_SCALE,
    PhysicsWorld,
    RigidBody,
    RigidBodyCollection,
    RigidBodyEntry,
)
from bvcreator.shapes import BulletShape, ShapeType, create_shape


@pytest.fixture
def world():
    return PhysicsWorld()


def test_world_add_and_remove(world):
    body = RigidBody()
    world.add_rigid_body(body)
    assert world.num_collision_objects == 1
    with pytest.raises(ValueError):
        world.add_rigid_body(body)
    world.remove_rigid_body(body)
    world.remove_rigid_body(body)
    assert world.num_collision_objects == 0


def test_entry_from_shape_adds_to_world_and_takes_shape(world):
    shape = create_shape(ShapeType.SPHERE, 2.0)
    entry = RigidBodyEntry.from_shape(world, shape)
    assert not shape
    assert entry.shape.shape_type is ShapeType.SPHERE
    assert entry.name == "btSphereShape"
    assert entry.body in world
    assert entry.body.flags == KINEMATIC_OBJECT
    assert entry.body.mass == 0.0


def test_entry_from_body_not_added_and_named(world):
    raw = create_shape(ShapeType.BOX, 1, 2, 3).raw
    body = RigidBody(collision_shape=raw, position=(1.0, 2.0, 3.0))
    entry = RigidBodyEntry(world, body, "crate")
    assert entry.name == "crate"
    assert entry.shape.shape_type is ShapeType.BOX
    assert entry.position == (1.0, 2.0, 3.0)
    assert body not in world


def test_entry_without_body_rejected(world):
    with pytest.raises(ValueError):
        RigidBodyEntry(world, None)


def test_entry_without_shape_reports_error_name(world):
    entry = RigidBodyEntry(world, RigidBody())
    assert entry.name == ERROR_NAME
    assert entry.scale is None


def test_name_is_truncated(world):
    entry = RigidBodyEntry(world, RigidBody(), "n" * 80)
    assert len(entry.name) == MAX_NAME_LENGTH
    entry.name = "q" * 60
    assert entry.name == "q" * MAX_NAME_LENGTH
    entry.reset_name()
    assert entry.name == ERROR_NAME


def test_scale_replaces_zero(world):
    entry = RigidBodyEntry.from_shape(world, create_shape(ShapeType.SPHERE, 1.0))
    entry.set_scale((0.0, 2.0, 0.5))
    assert entry.scale == (MIN_SCALE, 2.0, 0.5)


def test_rotation_round_trip_and_reset(world):
    entry = RigidBodyEntry(world, RigidBody())
    entry.set_rotation_degrees((30.0, -45.0, 90.0))
    for got, want in zip(entry.rotation_degrees, (30.0, -45.0, 90.0)):
        assert math.isclose(got, want)
    entry.reset_rotation()
    assert entry.rotation_degrees == (0.0, 0.0, 0.0)


def test_set_position_validates(world):
    entry = RigidBodyEntry(world, RigidBody())
    entry.set_position([4, 5, 6])
    assert entry.position == (4.0, 5.0, 6.0)
    with pytest.raises(ValueError):
        entry.set_position((1.0, 2.0))


def test_change_collision(world):
    entry = RigidBodyEntry.from_shape(world, create_shape(ShapeType.SPHERE, 1.0))
    entry.name = "custom"
    new_shape = create_shape(ShapeType.CONE_X, 1.0, 2.0)
    raw = new_shape.raw
    entry.change_collision(new_shape)
    assert not new_shape
    assert entry.body.collision_shape is raw
    assert entry.body.active
    assert entry.name == "btConeShapeX"


def test_collection_create_and_remove(world):
    collection = RigidBodyCollection(world)
    entry = collection.create_shape_body(ShapeType.CAPSULE_Z, (0.5, 2.0, 0.0))
    assert entry.shape.raw.params == (0.5, 2.0)
    box = collection.create_shape_body(ShapeType.BOX, (1.0, 2.0, 3.0))
    assert box.shape.raw.params == ((1.0, 2.0, 3.0),)
    assert len(collection) == 2
    assert world.num_collision_objects == 2
    collection.remove(5)
    assert len(collection) == 2
    collection.remove(0)
    assert list(collection) == [box]
    assert world.bodies == [box.body]


def test_collection_default_is_sphere(world):
    collection = RigidBodyCollection(world)
    entry = collection.create_shape_body()
    assert entry.shape.shape_type is ShapeType.SPHERE
    assert entry.shape.raw.params == (1.0,)


@pytest.mark.parametrize(
    "kind",
    [ShapeType.CONVEX_HULL, ShapeType.COMPOUND, ShapeType.TRIANGLE_MESH,
     ShapeType.STATIC_PLANE, ShapeType.INVALID],
)
def test_collection_rejects_unsupported(world, kind):
    collection = RigidBodyCollection(world)
    with pytest.raises(ValueError):
        collection.create_shape_body(kind, (1.0, 1.0, 1.0))
    assert len(collection) == 0
    assert world.num_collision_objects == 0


def test_kill_all_children(world):
    collection = RigidBodyCollection(world)
    collection.create_shape_body(ShapeType.SPHERE, (1.0, 1.0, 1.0))
    collection.create_shape_body(ShapeType.CYLINDER_Y, (1.0, 1.0, 1.0))
    child = collection.add_new_child(RigidBody(), "loaded")
    assert child.name == "loaded"
    assert len(collection) == 3
    collection.kill_all_children()
    assert len(collection) == 0
    assert world.num_collision_objects == 0


def test_add_new_child_auto_name(world):
    collection = RigidBodyCollection(world)
    raw = create_shape(ShapeType.CYLINDER_Z, 1, 1, 1).raw
    entry = collection.add_new_child(RigidBody(collision_shape=raw))
    assert entry.name == "btCylinderShapeZ"
    assert isinstance(entry.shape, BulletShape)
    assert entry.shape.shape_type is ShapeType.CYLINDER_Z