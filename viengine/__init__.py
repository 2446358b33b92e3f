"""Game engine building blocks: events, input, timing, entity ids, memory accounting, object pools, a render command queue and GLSL parsing."""

__version__ = "0.1.0"