# bvcreator

Building blocks for a tool that attaches collision volumes to 3D models. It
covers collision shape kinds, mesh storage, kinematic rigid bodies and debug
line recording, plus a small synchronous event system.

The package is a library. It has no command-line entry point and no
dependencies outside the standard library.

## Modules

- `bvcreator.events`
  - The `EventType` enum and the payload records `WindowResize`,
    `WindowKeyAction`, `WindowMouseMotion` and `EcsComponent`.
  - `Event` holds an event type and optional data. `Event.get_data(expected_type)`
    returns the data. It raises `TypeError` when the event has no data or the
    data is of another type.
  - `EventManager.on(event_type, listener)` registers a listener and returns its
    id, which is never 0.
  - `EventManager.unregister(listener_id)` removes a listener. Unknown ids are
    ignored.
  - `EventManager.emit(event)` calls the listeners for the event's type in the
    order they were registered.
- `bvcreator.shader_types`: the `ShaderType` and `ShaderTypeCompute` enums.
  `shader_name` returns a kind's display name, for example `"DebugLine"`.
- `bvcreator.shapes`
  - The `ShapeType` enum. Its last member is `INVALID`.
  - `shape_name` and `shape_type_from_name` convert between kinds and names
    such as `"btBoxShape"`.
  - `CollisionShape` records a shape's family, name, construction values and
    local scaling.
  - `create_shape(shape_type, *args)` checks the arguments and returns a new
    shape inside a `BulletShape`. Capsules and cones take a radius and a
    height, cylinders and boxes take half extents, and spheres take a radius.
  - `BulletShape` holds at most one shape. It has `assign`, `erase` and
    `take`, which moves the shape into a new holder. `get(shape_type)` returns
    the shape only if it is of that kind.
- `bvcreator.debug_draw`: `DebugLineRecorder` collects line end points as
  `Vertex` pairs.
  - `draw_line` takes an optional end colour.
  - `clear_lines` empties the list.
  - `flush_lines` copies the vertices into an in-memory buffer. It recreates the
    buffer when the buffer is too small, or when the buffer is big enough that
    the vertices do not fill more than half of it.
  - `debug_mode` reports the supported `DebugDrawMode` flags.
- `bvcreator.meshes`: `MeshContainer` holds `MeshPhysics` meshes, grouped by
  model name, each under a unique id.
  - `load_scene(file_name, root, meshes)` takes a tree of `SceneNode` objects
    and a list of `(name, vertices, faces)` triples. It walks the tree with
    `flatten_nodes` and stores the meshes as a new model named after the file
    plus a counter. Faces that are not triangles are skipped. Meshes without a
    name are named `Unnamed_Mesh_<n>`.
  - `get_mesh`, `move_mesh` and `unload_mesh` work with a `MeshDragDropID`, or a
    model name and a mesh id.
- `bvcreator.rigid_bodies`
  - `PhysicsWorld` keeps a list of `RigidBody` objects.
  - `RigidBodyEntry` wraps one body, marks it kinematic and owns its shape. Its
    name is cut to 50 characters and defaults to the shape's name. It has
    setters for position, scale and rotation in degrees. A zero scale component
    is replaced by 0.0001.
  - `RigidBodyCollection` keeps the entries. `create_shape_body` builds a
    primitive shape body in the world. `add_new_child` wraps an existing body
    but does not add it to the world. `remove(index)` and `kill_all_children`
    also take bodies out of the world.

## Example

```python
from bvcreator.meshes import MeshContainer, MeshDragDropID, SceneNode
from bvcreator.rigid_bodies import PhysicsWorld, RigidBodyCollection
from bvcreator.shapes import ShapeType

world = PhysicsWorld()
bodies = RigidBodyCollection(world)
box = bodies.create_shape_body(ShapeType.BOX, (1.0, 2.0, 3.0))
assert box.name == "btBoxShape"
assert world.num_collision_objects == 1

container = MeshContainer()
model = container.load_scene(
    "models/crate.obj",
    SceneNode(mesh_indices=[0]),
    [("", [(0, 0, 0), (1, 0, 0), (0, 1, 0)], [(0, 1, 2)])],
)
mesh = container.get_mesh(MeshDragDropID(model, 1))
assert model == "crate.obj1" and mesh.name == "Unnamed_Mesh_0"
```

## What the package does not do

- It does not read model files from disk. Scenes are passed to
  `MeshContainer.load_scene` already parsed.
- It does not simulate physics. `PhysicsWorld` only records which bodies it
  holds.
- It does not render anything or provide an editing window. The debug line
  buffer is kept in memory.
- It does not save or load worlds.

## Running the tests

```
pip install -e .[test]
pytest
```