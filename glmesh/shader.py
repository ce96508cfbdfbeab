"""Reading GLSL vertex and fragment shader sources from disk."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Union

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class ShaderSources:
    """The source text of a vertex and a fragment shader."""

    vertex: str
    fragment: str


def read_shader_source(path: PathLike) -> str:
    """Read a shader file, each line preceded by a newline.

    Lines are split on ``\\n`` only; a trailing newline adds no empty line.
    """
    with open(path, encoding="utf-8", newline="") as handle:
        text = handle.read()
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return "".join("\n" + line for line in lines)


def load_shader_sources(vertex_file_path: PathLike, fragment_file_path: PathLike) -> ShaderSources:
    """Read both shader sources.

    A missing vertex shader raises; a missing fragment shader yields empty source.
    """
    vertex = read_shader_source(vertex_file_path)
    try:
        fragment = read_shader_source(fragment_file_path)
    except OSError:
        logger.warning("Could not open fragment shader %s", fragment_file_path)
        fragment = ""
    return ShaderSources(vertex=vertex, fragment=fragment)