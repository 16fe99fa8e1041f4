"""Rigid bodies placed in a physics world, each wrapping one collision shape."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from numbers import Real

from bvcreator.shapes import BulletShape, CollisionShape, ShapeType, create_shape

Vec3 = tuple[float, float, float]

KINEMATIC_OBJECT = 2
"""Collision flag marking a body as kinematic (moved by hand, not simulated)."""

MAX_NAME_LENGTH = 50
"""Longest name an entry keeps; longer names are cut."""

MIN_SCALE = 0.0001
"""Scale used in place of a zero scale component."""

ERROR_NAME = "ERROR!"
"""Shape name reported when an entry holds no shape."""


def _vec3(value: Sequence[float], what: str) -> Vec3:
    items = tuple(value)
    if len(items) != 3:
        raise ValueError(f"{what} needs three components, got {len(items)}")
    for item in items:
        if isinstance(item, bool) or not isinstance(item, Real):
            raise TypeError(f"{what} components must be numbers, got {item!r}")
    x, y, z = (float(item) for item in items)
    return (x, y, z)


def _clip_name(name: str) -> str:
    return name[:MAX_NAME_LENGTH]


@dataclass(eq=False)
class RigidBody:
    """A rigid body: its shape, mass, world transform and collision flags.

    ``rotation`` holds Euler angles in radians about the x, y and z axes.
    """

    collision_shape: CollisionShape | None = None
    mass: float = 0.0
    position: Vec3 = (0.0, 0.0, 0.0)
    rotation: Vec3 = (0.0, 0.0, 0.0)
    flags: int = 0
    active: bool = False

    def activate(self) -> None:
        self.active = True


@dataclass
class PhysicsWorld:
    """A collection of rigid bodies taking part in simulation."""

    gravity: Vec3 = (0.0, 0.0, 0.0)
    bodies: list[RigidBody] = field(default_factory=list)

    @property
    def num_collision_objects(self) -> int:
        return len(self.bodies)

    @property
    def num_constraints(self) -> int:
        return 0

    def __contains__(self, body: object) -> bool:
        return any(existing is body for existing in self.bodies)

    def add_rigid_body(self, body: RigidBody) -> None:
        """Add a body; adding one that is already in the world is an error."""
        if body in self:
            raise ValueError("body is already in the world")
        self.bodies.append(body)

    def remove_rigid_body(self, body: RigidBody) -> None:
        """Remove a body; bodies not in the world are ignored."""
        self.bodies = [existing for existing in self.bodies if existing is not body]


class RigidBodyEntry:
    """A named, kinematic rigid body together with the shape it owns."""

    def __init__(
        self, world: PhysicsWorld, body: RigidBody | None, name: str | None = None
    ) -> None:
        """Wrap an existing body; the body is not added to the world."""
        if body is None:
            raise ValueError("a rigid body is required")
        self.world = world
        self.body = body
        self.body.flags = KINEMATIC_OBJECT
        self.shape = BulletShape()
        if body.collision_shape is not None:
            self.shape.assign(body.collision_shape)
        self.name = _clip_name(name) if name is not None else _clip_name(self.shape_name)

    @classmethod
    def from_shape(cls, world: PhysicsWorld, shape: BulletShape) -> RigidBodyEntry:
        """Create a massless body for ``shape``, taking it over, and add it to the world."""
        owned = shape.take()
        body = RigidBody(collision_shape=owned.raw, mass=0.0)
        entry = cls(world, body)
        entry.shape = owned
        entry.reset_name()
        world.add_rigid_body(body)
        return entry

    @property
    def shape_name(self) -> str:
        """Name of the held collision shape, or "ERROR!" when there is none."""
        raw = self.shape.raw
        return ERROR_NAME if raw is None else raw.name

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = _clip_name(value)

    @property
    def position(self) -> Vec3:
        return self.body.position

    @property
    def scale(self) -> Vec3 | None:
        raw = self.shape.raw
        return None if raw is None else raw.local_scaling

    @property
    def rotation_degrees(self) -> Vec3:
        x, y, z = (math.degrees(angle) for angle in self.body.rotation)
        return (x, y, z)

    def reset_name(self) -> None:
        """Set the name back to the shape's name."""
        self.name = self.shape_name

    def set_position(self, position: Sequence[float]) -> None:
        self.body.position = _vec3(position, "position")

    def set_scale(self, scale: Sequence[float]) -> None:
        """Set the shape's scaling; zero components become a tiny positive value."""
        values = _vec3(scale, "scale")
        raw = self.shape.raw
        if raw is None:
            return
        x, y, z = (MIN_SCALE if value == 0.0 else value for value in values)
        raw.local_scaling = (x, y, z)

    def set_rotation_degrees(self, rotation: Sequence[float]) -> None:
        x, y, z = (math.radians(angle) for angle in _vec3(rotation, "rotation"))
        self.body.rotation = (x, y, z)

    def reset_rotation(self) -> None:
        self.body.rotation = (0.0, 0.0, 0.0)

    def change_collision(self, shape: BulletShape) -> None:
        """Replace the body's shape with ``shape``, taking it over, and reset the name."""
        owned = shape.take()
        self.body.collision_shape = owned.raw
        self.body.activate()
        self.shape = owned
        self.reset_name()

    def remove(self) -> None:
        """Take the body out of the world."""
        self.world.remove_rigid_body(self.body)


class RigidBodyCollection:
    """Keeps the rigid body entries created in one physics world."""

    def __init__(self, world: PhysicsWorld) -> None:
        self.world = world
        self.entries: list[RigidBodyEntry] = []

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[RigidBodyEntry]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> RigidBodyEntry:
        return self.entries[index]

    def kill_all_children(self) -> None:
        """Remove every entry, taking its body out of the world."""
        for entry in self.entries:
            entry.remove()
        self.entries.clear()

    def add_new_child(self, body: RigidBody, name: str | None = None) -> RigidBodyEntry:
        """Add an entry for ``body``; the body is not added to the world."""
        entry = RigidBodyEntry(self.world, body, name)
        self.entries.append(entry)
        return entry

    def create_shape_body(
        self,
        shape_type: ShapeType = ShapeType.SPHERE,
        values: Sequence[float] = (1.0, 1.0, 1.0),
    ) -> RigidBodyEntry:
        """Create a primitive shape, wrap it in a new body in the world and keep it.

        ``values`` holds radius and height for capsules and cones, the half
        extents for cylinders and boxes and the radius for spheres.
        """
        a, b, c = _vec3(values, "values")
        if shape_type in (
            ShapeType.CAPSULE_X, ShapeType.CAPSULE_Y, ShapeType.CAPSULE_Z,
            ShapeType.CONE_X, ShapeType.CONE_Y, ShapeType.CONE_Z,
        ):
            shape = create_shape(shape_type, a, b)
        elif shape_type in (
            ShapeType.CYLINDER_X, ShapeType.CYLINDER_Y, ShapeType.CYLINDER_Z, ShapeType.BOX,
        ):
            shape = create_shape(shape_type, (a, b, c))
        elif shape_type is ShapeType.SPHERE:
            shape = create_shape(shape_type, a)
        else:
            raise ValueError(f"cannot create a body of kind {shape_type!r}")
        entry = RigidBodyEntry.from_shape(self.world, shape)
        self.entries.append(entry)
        return entry

    def remove(self, index: int) -> None:
        """Remove the entry at ``index``; indices out of range are ignored."""
        if 0 <= index < len(self.entries):
            self.entries.pop(index).remove()