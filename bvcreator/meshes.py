"""Mesh storage, grouped by the model each mesh was loaded from."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import PurePath

logger = logging.getLogger(__name__)

INVALID_MESH_ID = 0

Vec3 = tuple[float, float, float]


@dataclass(frozen=True)
class MeshDragDropID:
    """Identifies a mesh by its model name and mesh id."""

    model: str
    mesh_id: int = INVALID_MESH_ID


@dataclass
class MeshPhysics:
    """Triangle mesh data used to build collision shapes."""

    name: str = "Mesh"
    positions: list[Vec3] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def index_count(self) -> int:
        return len(self.indices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3


@dataclass
class SceneNode:
    """A node of a loaded scene: indices into the scene's meshes and children."""

    mesh_indices: list[int] = field(default_factory=list)
    children: list[SceneNode] = field(default_factory=list)


def _walk(node: SceneNode) -> Iterator[int]:
    yield from node.mesh_indices
    for child in node.children:
        yield from _walk(child)


def flatten_nodes(root: SceneNode, meshes: Sequence) -> list:
    """Return the meshes referenced by the node tree, depth first, in node order."""
    result = []
    for index in _walk(root):
        if not 0 <= index < len(meshes):
            raise ValueError(f"node refers to mesh {index}, scene has {len(meshes)}")
        result.append(meshes[index])
    return result


def _position(vertex: Sequence[float]) -> Vec3:
    x, y, z = vertex
    return (float(x), float(y), float(z))


class MeshContainer:
    """Holds meshes per loaded model, each mesh under a unique id."""

    def __init__(self) -> None:
        self.meshes: dict[str, dict[int, MeshPhysics]] = {}
        self._next_id = INVALID_MESH_ID + 1
        self._next_model_id = 1

    def get_mesh(self, drop_id: MeshDragDropID) -> MeshPhysics | None:
        """Return the mesh named by ``drop_id``, or None if there is none."""
        return self.meshes.get(drop_id.model, {}).get(drop_id.mesh_id)

    def load_scene(
        self,
        file_name: str,
        root: SceneNode | None,
        meshes: Sequence[tuple[str, Sequence[Sequence[float]], Sequence[Sequence[int]]]],
    ) -> str:
        """Add the meshes of a loaded scene as a new model and return its name.

        ``meshes`` holds (name, vertices, faces) triples; faces that are not
        triangles are skipped.
        """
        if root is None:
            raise ValueError(f"scene of {file_name!r} is incomplete: no root node")

        loaded: list[MeshPhysics] = []
        for position, (name, vertices, faces) in enumerate(flatten_nodes(root, meshes)):
            mesh = MeshPhysics(
                name=name if name else f"Unnamed_Mesh_{position}",
                positions=[_position(vertex) for vertex in vertices],
            )
            for face in faces:
                if len(face) != 3:
                    logger.warning("The number of vertices in a face is not 3")
                    continue
                mesh.indices.extend(int(index) for index in face)
            loaded.append(mesh)

        model_name = f"{PurePath(file_name).name}{self._next_model_id}"
        self._next_model_id += 1
        model: dict[int, MeshPhysics] = {}
        for mesh in loaded:
            model[self._next_id] = mesh
            self._next_id += 1
        self.meshes[model_name] = model
        return model_name

    def move_mesh(self, drop_id: MeshDragDropID, target_model: str) -> None:
        """Move a mesh to another model, keeping its id."""
        if target_model not in self.meshes:
            raise KeyError(target_model)
        if drop_id.model == target_model:
            return
        source = self.meshes[drop_id.model]
        self.meshes[target_model][drop_id.mesh_id] = source.pop(drop_id.mesh_id)

    def unload_mesh(self, model: str, mesh_id: int) -> None:
        """Remove one mesh from a model."""
        del self.meshes[model][mesh_id]