"""Mesh, texture, text-layout and picking utilities for real-time 3D rendering."""

__version__ = "0.1.0"
__all__ = [
    "objloader",
    "tangentspace",
    "vboindexer",
    "texture",
    "text2d",
    "shader",
    "glerrors",
    "picking",
    "colorpick",
]