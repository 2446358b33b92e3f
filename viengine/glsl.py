"""Reading combined GLSL files and OpenGL enumeration values."""

from __future__ import annotations

import re
from pathlib import Path

from .logger import core_logger
from .renderer_api import ERendererMode, ERendererPrimitive

TYPE_TOKEN = "#type"
SHADER_TYPES = ("vertex", "fragment")

GL_POINTS = 0x0000
GL_LINES = 0x0001
GL_TRIANGLES = 0x0004
GL_STREAM_DRAW = 0x88E0
GL_STATIC_DRAW = 0x88E4
GL_DYNAMIC_DRAW = 0x88E8

_LINE_BREAK = re.compile(r"[\r\n]")
_NOT_LINE_BREAK = re.compile(r"[^\r\n]")


class ShaderSyntaxError(ValueError):
    """Raised when a combined shader source is malformed."""


def parse_glsl(source: str) -> dict[str, str]:
    """Split a source marked with ``#type vertex`` / ``#type fragment`` lines into stages."""
    stages: dict[str, str] = {}
    pos = source.find(TYPE_TOKEN)
    while pos != -1:
        eol_match = _LINE_BREAK.search(source, pos)
        if eol_match is None:
            raise ShaderSyntaxError("shader type line is not terminated")
        eol = eol_match.start()
        stage = source[pos + len(TYPE_TOKEN) + 1 : eol]
        if stage not in SHADER_TYPES:
            raise ShaderSyntaxError(f"invalid shader type {stage!r}")
        body_match = _NOT_LINE_BREAK.search(source, eol)
        if body_match is None:
            stages[stage] = ""
            break
        body_start = body_match.start()
        pos = source.find(TYPE_TOKEN, body_start)
        stages[stage] = source[body_start:] if pos == -1 else source[body_start:pos]
    return stages


def read_shader_file(path: str | Path) -> str:
    """The file's text, or an empty string when it cannot be read."""
    try:
        return Path(path).read_bytes().decode("utf-8")
    except OSError:
        core_logger().warning("Could not read shader file %s", path)
        return ""


def load_shader_sources(path: str | Path) -> dict[str, str]:
    return parse_glsl(read_shader_file(path))


def gl_usage_mode(mode: ERendererMode) -> int:
    """The buffer usage hint for ``mode``; static unless dynamic or stream."""
    if mode is ERendererMode.DYNAMIC:
        return GL_DYNAMIC_DRAW
    if mode is ERendererMode.STREAM:
        return GL_STREAM_DRAW
    return GL_STATIC_DRAW


def gl_primitive(primitive: ERendererPrimitive) -> int:
    """The draw mode for ``primitive``; triangles unless points or lines."""
    if primitive is ERendererPrimitive.POINTS:
        return GL_POINTS
    if primitive is ERendererPrimitive.LINES:
        return GL_LINES
    return GL_TRIANGLES