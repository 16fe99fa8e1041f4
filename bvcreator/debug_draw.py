"""Recording of physics debug lines into a vertex list and an upload buffer."""

from __future__ import annotations

import itertools
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntFlag
from numbers import Real

Vec3 = tuple[float, float, float]


class DebugDrawMode(IntFlag):
    """Debug drawing features a physics debug drawer can support."""

    NO_DEBUG = 0
    DRAW_WIREFRAME = 1
    DRAW_AABB = 2
    DRAW_FEATURES_TEXT = 4
    DRAW_CONTACT_POINTS = 8
    NO_DEACTIVATION = 16
    NO_HELP_TEXT = 32
    DRAW_TEXT = 64
    PROFILE_TIMINGS = 128
    ENABLE_SAT_COMPARISON = 256
    DISABLE_BULLET_LCP = 512
    ENABLE_CCD = 1024
    DRAW_CONSTRAINTS = 2048
    DRAW_CONSTRAINT_LIMITS = 4096
    FAST_WIREFRAME = 8192
    DRAW_NORMALS = 16384
    DRAW_FRAMES = 32768


SUPPORTED_MODES = (
    DebugDrawMode.DRAW_AABB
    | DebugDrawMode.DRAW_CONSTRAINT_LIMITS
    | DebugDrawMode.DRAW_CONSTRAINTS
    | DebugDrawMode.DRAW_FRAMES
    | DebugDrawMode.DRAW_NORMALS
    | DebugDrawMode.DRAW_WIREFRAME
    | DebugDrawMode.ENABLE_CCD
    | DebugDrawMode.PROFILE_TIMINGS
)


def _vec3(value: Sequence[float], what: str) -> Vec3:
    items = tuple(value)
    if len(items) != 3:
        raise ValueError(f"{what} needs three components, got {len(items)}")
    for item in items:
        if isinstance(item, bool) or not isinstance(item, Real):
            raise TypeError(f"{what} components must be numbers, got {item!r}")
    x, y, z = (float(item) for item in items)
    return (x, y, z)


@dataclass(frozen=True)
class Vertex:
    """A line end point: position and colour in the range 0..1."""

    position: Vec3 = (0.0, 0.0, 0.0)
    colour: Vec3 = (0.0, 0.0, 0.0)


class DebugLineRecorder:
    """Collects debug lines as vertex pairs and keeps an uploaded copy of them."""

    def __init__(self) -> None:
        self._vertices: list[Vertex] = []
        self._draw_count = 0
        self._buffer_id = 0
        self._buffer_capacity = 0
        self._buffer_data: tuple[Vertex, ...] = ()
        self._ids = itertools.count(1)
        self.warnings: list[str] = []

    @property
    def debug_mode(self) -> DebugDrawMode:
        """The debug drawing features this recorder supports."""
        return SUPPORTED_MODES

    @property
    def vertices(self) -> list[Vertex]:
        """The vertices recorded since the last clear."""
        return list(self._vertices)

    @property
    def draw_count(self) -> int:
        """Number of vertices to draw, two per line."""
        return self._draw_count

    @property
    def buffer(self) -> int:
        """Id of the uploaded buffer, or 0 when none exists."""
        return self._buffer_id

    @property
    def buffer_capacity(self) -> int:
        """Number of vertices the uploaded buffer can hold."""
        return self._buffer_capacity

    @property
    def buffer_data(self) -> tuple[Vertex, ...]:
        """The vertices last uploaded to the buffer."""
        return self._buffer_data

    def draw_line(
        self,
        start: Sequence[float],
        end: Sequence[float],
        color: Sequence[float],
        end_color: Sequence[float] | None = None,
    ) -> None:
        """Record a line; its colour is interpolated to ``end_color`` when given."""
        start_colour = _vec3(color, "colour")
        finish_colour = start_colour if end_color is None else _vec3(end_color, "colour")
        self._vertices.append(Vertex(_vec3(start, "start"), start_colour))
        self._vertices.append(Vertex(_vec3(end, "end"), finish_colour))
        self._draw_count += 2

    def clear_lines(self) -> None:
        """Forget every recorded line."""
        self._vertices.clear()
        self._draw_count = 0

    def report_error_warning(self, message: str) -> None:
        """Keep a warning reported by the physics engine."""
        self.warnings.append(message)

    def _create_buffer(self) -> None:
        self._buffer_id = next(self._ids)
        self._buffer_data = tuple(self._vertices)
        self._buffer_capacity = len(self._vertices)

    def _delete_buffer(self) -> None:
        self._buffer_id = 0
        self._buffer_capacity = 0
        self._buffer_data = ()

    def flush_lines(self) -> None:
        """Upload the recorded vertices, recreating the buffer when its size is off."""
        count = len(self._vertices)
        if self._buffer_id and (
            self._buffer_capacity * 2 > count or self._buffer_capacity < count
        ):
            self._delete_buffer()

        if not self._buffer_id:
            self._create_buffer()
            return

        if self._buffer_capacity >= count:
            self._buffer_data = tuple(self._vertices) + self._buffer_data[count:]
        else:
            self._delete_buffer()
            self._create_buffer()