"""Names shared by renderers and their resources."""

from enum import Enum


class ERendererSpec(Enum):
    OPENGL = 0
    DIRECTX = 1


class ERendererMode(Enum):
    STATIC = 0
    DYNAMIC = 1
    STREAM = 2


class ERendererResource(Enum):
    VERTEX_SHADER = 0
    FRAGMENT_SHADER = 1
    SHADER = 2


class ERendererPrimitive(Enum):
    TRIANGLES = 0
    POINTS = 1
    LINES = 2