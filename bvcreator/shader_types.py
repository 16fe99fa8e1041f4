"""Shader kinds and their names."""

from __future__ import annotations

from enum import Enum


class ShaderType(Enum):
    """Vertex/fragment shader kinds; COUNT is last and marks an invalid value."""

    SIMPLE_COLOR = 0
    DEBUG_LINE = 1
    MODEL_TEXTURED = 2
    BILLBOARD_ICON = 3
    COUNT = 4


class ShaderTypeCompute(Enum):
    """Compute shader kinds; COUNT is last and marks an invalid value."""

    COUNT = 0


_NAMES: dict[ShaderType | ShaderTypeCompute, str] = {
    ShaderType.SIMPLE_COLOR: "SimpleColor",
    ShaderType.DEBUG_LINE: "DebugLine",
    ShaderType.MODEL_TEXTURED: "ModelTextured",
    ShaderType.BILLBOARD_ICON: "BillboardIcon",
    ShaderType.COUNT: "Count",
    ShaderTypeCompute.COUNT: "Count",
}


def shader_name(shader_type: ShaderType | ShaderTypeCompute) -> str:
    """Return the display name of a shader kind."""
    try:
        return _NAMES[shader_type]
    except (KeyError, TypeError):
        raise ValueError(f"not a shader type: {shader_type!r}") from None