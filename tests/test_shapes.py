import pytest

from bvcreator.shapes import (
    BulletShape,
    CollisionShape,
    ShapeType,
    create_shape,
    shape_name,
    shape_type_from_name,
)


def test_shape_names_fixed_by_source():
    assert shape_name(ShapeType.CAPSULE_Y) == "btCapsuleShape"
    assert shape_name(ShapeType.TRIANGLE_MESH) == "btBvhTriangleMeshShape"
    assert shape_name(ShapeType.INVALID) == "InvalidShape"


def test_shape_name_of_non_enum_is_invalid():
    assert shape_name("box") == "InvalidShape"


@pytest.mark.parametrize("kind", ShapeType.valid())
def test_name_round_trip(kind):
    assert shape_type_from_name(shape_name(kind)) is kind


def test_unknown_name_is_invalid():
    assert shape_type_from_name("not-a-shape") is ShapeType.INVALID


def test_valid_excludes_invalid_and_keeps_order():
    kinds = ShapeType.valid()
    assert ShapeType.INVALID not in kinds
    assert kinds[0] is ShapeType.COMPOUND
    assert len(kinds) == len(ShapeType) - 1


def test_create_sphere():
    holder = create_shape(ShapeType.SPHERE, 2)
    assert holder
    assert holder.shape_type is ShapeType.SPHERE
    assert holder.raw.params == (2.0,)
    assert holder.raw.name == "btSphereShape"


def test_create_box_accepts_tuple_or_three_values():
    a = create_shape(ShapeType.BOX, (1, 2, 3))
    b = create_shape(ShapeType.BOX, 1, 2, 3)
    assert a.raw.params == b.raw.params == ((1.0, 2.0, 3.0),)


def test_create_capsule_needs_two_values():
    with pytest.raises(TypeError):
        create_shape(ShapeType.CAPSULE_X, 1.0)


def test_create_rejects_non_numbers():
    with pytest.raises(TypeError):
        create_shape(ShapeType.SPHERE, "big")


def test_create_invalid_kind_raises():
    with pytest.raises(ValueError):
        create_shape(ShapeType.INVALID)


@pytest.mark.parametrize("kind", ShapeType.valid())
def test_created_shape_classifies_as_its_kind(kind):
    args = {
        "capsule": (1.0, 2.0),
        "cone": (1.0, 2.0),
        "cylinder": ((1.0, 1.0, 1.0),),
        "box": ((1.0, 1.0, 1.0),),
        "sphere": (1.0,),
    }
    holder = create_shape(kind)  if kind in (
        ShapeType.COMPOUND,
        ShapeType.CONVEX_HULL,
        ShapeType.STATIC_PLANE,
        ShapeType.TRIANGLE_MESH,
    ) else None
    if holder is None:
        family = shape_name(kind)
        for key, values in args.items():
            if key in family.lower():
                holder = create_shape(kind, *values)
                break
    reassigned = BulletShape(holder.raw)
    assert reassigned.shape_type is kind


def test_assign_uses_last_letter_for_axis():
    holder = BulletShape()
    holder.assign(CollisionShape(family="cone", name="ConeZ"))
    assert holder.shape_type is ShapeType.CONE_Z
    holder.assign(CollisionShape(family="cone", name="Cone"))
    assert holder.shape_type is ShapeType.CONE_Y


def test_assign_unknown_family_is_invalid_but_held():
    shape = CollisionShape(family="heightfield", name="Terrain")
    holder = BulletShape(shape)
    assert holder.shape_type is ShapeType.INVALID
    assert holder.raw is shape


def test_erase_empties_holder():
    holder = create_shape(ShapeType.SPHERE, 1.0)
    holder.erase()
    assert not holder
    assert holder.raw is None
    assert holder.shape_type is ShapeType.INVALID


def test_take_moves_shape():
    holder = create_shape(ShapeType.BOX, 1, 1, 1)
    shape = holder.raw
    moved = holder.take()
    assert moved.raw is shape
    assert moved.shape_type is ShapeType.BOX
    assert not holder
    assert holder.shape_type is ShapeType.INVALID


def test_get_matches_kind():
    holder = create_shape(ShapeType.CYLINDER_X, 1, 2, 3)
    assert holder.get(ShapeType.CYLINDER_X) is holder.raw
    assert holder.get(ShapeType.CYLINDER_Y) is None


def test_get_invalid_kind_raises():
    holder = create_shape(ShapeType.SPHERE, 1.0)
    with pytest.raises(ValueError):
        holder.get(ShapeType.INVALID)


def test_empty_holder_is_false():
    holder = BulletShape()
    assert bool(holder) is False
    assert holder.get(ShapeType.SPHERE) is None