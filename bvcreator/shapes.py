"""Collision shape kinds and an owning holder for a single collision shape."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from numbers import Real
from typing import Any


class ShapeType(Enum):
    """Supported collision shape kinds; INVALID is last and marks an error."""

    COMPOUND = 0
    CAPSULE_Y = 1
    CAPSULE_X = 2
    CAPSULE_Z = 3
    CONE_Y = 4
    CONE_X = 5
    CONE_Z = 6
    CYLINDER_Y = 7
    CYLINDER_X = 8
    CYLINDER_Z = 9
    BOX = 10
    SPHERE = 11
    CONVEX_HULL = 12
    STATIC_PLANE = 13
    TRIANGLE_MESH = 14
    INVALID = 15

    @classmethod
    def valid(cls) -> list[ShapeType]:
        """All shape kinds except INVALID, in declaration order."""
        return [member for member in cls if member is not cls.INVALID]


INVALID_SHAPE_NAME = "InvalidShape"

_NAMES: dict[ShapeType, str] = {
    ShapeType.COMPOUND: "btCompoundShape",
    ShapeType.CAPSULE_Y: "btCapsuleShape",
    ShapeType.CAPSULE_X: "btCapsuleShapeX",
    ShapeType.CAPSULE_Z: "btCapsuleShapeZ",
    ShapeType.CONE_Y: "btConeShape",
    ShapeType.CONE_X: "btConeShapeX",
    ShapeType.CONE_Z: "btConeShapeZ",
    ShapeType.CYLINDER_Y: "btCylinderShape",
    ShapeType.CYLINDER_X: "btCylinderShapeX",
    ShapeType.CYLINDER_Z: "btCylinderShapeZ",
    ShapeType.BOX: "btBoxShape",
    ShapeType.SPHERE: "btSphereShape",
    ShapeType.CONVEX_HULL: "btConvexHullShape",
    ShapeType.STATIC_PLANE: "btStaticPlaneShape",
    ShapeType.TRIANGLE_MESH: "btBvhTriangleMeshShape",
}

_BY_NAME: dict[str, ShapeType] = {name: kind for kind, name in _NAMES.items()}

# Shape family of each kind; families with an axis variant pick it from the name.
_FAMILIES: dict[ShapeType, str] = {
    ShapeType.COMPOUND: "compound",
    ShapeType.CAPSULE_Y: "capsule",
    ShapeType.CAPSULE_X: "capsule",
    ShapeType.CAPSULE_Z: "capsule",
    ShapeType.CONE_Y: "cone",
    ShapeType.CONE_X: "cone",
    ShapeType.CONE_Z: "cone",
    ShapeType.CYLINDER_Y: "cylinder",
    ShapeType.CYLINDER_X: "cylinder",
    ShapeType.CYLINDER_Z: "cylinder",
    ShapeType.BOX: "box",
    ShapeType.SPHERE: "sphere",
    ShapeType.CONVEX_HULL: "convex_hull",
    ShapeType.STATIC_PLANE: "static_plane",
    ShapeType.TRIANGLE_MESH: "triangle_mesh",
}

_AXIS_FAMILIES: dict[str, dict[str, ShapeType]] = {
    "capsule": {"X": ShapeType.CAPSULE_X, "Z": ShapeType.CAPSULE_Z, "Y": ShapeType.CAPSULE_Y},
    "cone": {"X": ShapeType.CONE_X, "Z": ShapeType.CONE_Z, "Y": ShapeType.CONE_Y},
    "cylinder": {"X": ShapeType.CYLINDER_X, "Z": ShapeType.CYLINDER_Z, "Y": ShapeType.CYLINDER_Y},
}

_PLAIN_FAMILIES: dict[str, ShapeType] = {
    "compound": ShapeType.COMPOUND,
    "box": ShapeType.BOX,
    "sphere": ShapeType.SPHERE,
    "convex_hull": ShapeType.CONVEX_HULL,
    "static_plane": ShapeType.STATIC_PLANE,
    "triangle_mesh": ShapeType.TRIANGLE_MESH,
}


def shape_name(shape_type: ShapeType) -> str:
    """Return the name of a shape kind, or "InvalidShape" for anything else."""
    if not isinstance(shape_type, ShapeType):
        return INVALID_SHAPE_NAME
    return _NAMES.get(shape_type, INVALID_SHAPE_NAME)


def shape_type_from_name(name: str) -> ShapeType:
    """Return the shape kind with the given name, or ShapeType.INVALID."""
    return _BY_NAME.get(name, ShapeType.INVALID)


@dataclass
class CollisionShape:
    """A collision shape: its family, name, construction values and scaling."""

    family: str
    name: str
    params: tuple[Any, ...] = ()
    local_scaling: tuple[float, float, float] = (1.0, 1.0, 1.0)
    children: list[CollisionShape] = field(default_factory=list)

    def classify(self) -> ShapeType:
        """Work out the shape kind from the family and the name's last letter."""
        axes = _AXIS_FAMILIES.get(self.family)
        if axes is not None:
            last = self.name[-1:] if self.name else ""
            return axes.get(last, axes["Y"])
        return _PLAIN_FAMILIES.get(self.family, ShapeType.INVALID)


def _number(value: Any, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"{what} must be a number, got {value!r}")
    return float(value)


def _vector3(args: tuple[Any, ...], what: str) -> tuple[float, float, float]:
    if len(args) == 1 and isinstance(args[0], Sequence) and not isinstance(args[0], str):
        args = tuple(args[0])
    if len(args) != 3:
        raise TypeError(f"{what} needs three values, got {len(args)}")
    x, y, z = (_number(value, what) for value in args)
    return (x, y, z)


def _params_for(shape_type: ShapeType, args: tuple[Any, ...]) -> tuple[Any, ...]:
    family = _FAMILIES[shape_type]
    if family in ("capsule", "cone"):
        if len(args) != 2:
            raise TypeError(f"{shape_name(shape_type)} needs radius and height")
        return (_number(args[0], "radius"), _number(args[1], "height"))
    if family in ("cylinder", "box"):
        return (_vector3(args, "half extents"),)
    if family == "sphere":
        if len(args) != 1:
            raise TypeError("btSphereShape needs a radius")
        return (_number(args[0], "radius"),)
    return tuple(args)


def create_shape(shape_type: ShapeType, *args: Any) -> BulletShape:
    """Build a new shape of the given kind and return it held by a BulletShape."""
    if not isinstance(shape_type, ShapeType) or shape_type is ShapeType.INVALID:
        raise ValueError(f"cannot create a shape of kind {shape_type!r}")
    shape = CollisionShape(
        family=_FAMILIES[shape_type],
        name=_NAMES[shape_type],
        params=_params_for(shape_type, args),
    )
    holder = BulletShape()
    holder._shape = shape
    holder._type = shape_type
    return holder


class BulletShape:
    """Owns at most one collision shape together with its kind."""

    __slots__ = ("_shape", "_type")

    def __init__(self, shape: CollisionShape | None = None) -> None:
        self._shape: CollisionShape | None = None
        self._type = ShapeType.INVALID
        if shape is not None:
            self.assign(shape)

    @property
    def shape_type(self) -> ShapeType:
        return self._type

    @property
    def raw(self) -> CollisionShape | None:
        """The held shape, or None."""
        return self._shape

    def __bool__(self) -> bool:
        return self._shape is not None

    def assign(self, shape: CollisionShape) -> None:
        """Hold ``shape``, replacing any shape held before."""
        self.erase()
        self._shape = shape
        self._type = shape.classify()

    def erase(self) -> None:
        """Drop the held shape, if any."""
        self._shape = None
        self._type = ShapeType.INVALID

    def take(self) -> BulletShape:
        """Move the held shape into a new holder, leaving this one empty."""
        moved = BulletShape()
        moved._shape, moved._type = self._shape, self._type
        self._shape, self._type = None, ShapeType.INVALID
        return moved

    def get(self, shape_type: ShapeType) -> CollisionShape | None:
        """Return the held shape if it is of ``shape_type``, otherwise None."""
        if not isinstance(shape_type, ShapeType) or shape_type is ShapeType.INVALID:
            raise ValueError(f"not a supported shape kind: {shape_type!r}")
        if self._type is shape_type:
            return self._shape
        return None

    def __repr__(self) -> str:
        return f"BulletShape({self._type.name}, {self._shape!r})"