"""Collision-volume building blocks: shapes, meshes, rigid bodies, debug lines and events."""

__version__ = "0.0.1"
__all__ = ["debug_draw", "events", "meshes", "rigid_bodies", "shader_types", "shapes"]