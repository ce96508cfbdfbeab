"""Quad and UV layout for text drawn from a 16x16 glyph atlas."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

Vec2 = tuple[float, float]

_GRID = 16
_CELL = 1.0 / _GRID


@dataclass
class TextGeometry:
    """Two triangles per character: screen positions and atlas coordinates."""

    vertices: list[Vec2] = field(default_factory=list)
    uvs: list[Vec2] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.vertices)


def _signed_byte(character: Union[str, int]) -> int:
    code = ord(character) if isinstance(character, str) else int(character)
    if not -128 <= code <= 255:
        raise ValueError(f"character {character!r} does not fit in one byte")
    return code - 256 if code >= 128 else code


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // b
    return -quotient if a < 0 else quotient


def glyph_uv_origin(character: Union[str, int]) -> Vec2:
    """Top-left atlas coordinate of a character's cell.

    Characters are treated as signed bytes, so codes above 127 give
    negative coordinates, with division and remainder truncating toward zero.
    """
    code = _signed_byte(character)
    quotient = _trunc_div(code, _GRID)
    remainder = code - quotient * _GRID
    return remainder / _GRID, quotient / _GRID


def layout_text(text: str, x: int, y: int, size: int) -> TextGeometry:
    """Build the triangles for ``text`` with its lower-left corner at (x, y)."""
    geometry = TextGeometry()
    for i, character in enumerate(text):
        left = float(x + i * size)
        right = float(x + i * size + size)
        top = float(y + size)
        bottom = float(y)

        up_left = (left, top)
        up_right = (right, top)
        down_right = (right, bottom)
        down_left = (left, bottom)
        geometry.vertices.extend(
            [up_left, down_left, up_right, down_right, up_right, down_left]
        )

        uv_x, uv_y = glyph_uv_origin(character)
        uv_up_left = (uv_x, uv_y)
        uv_up_right = (uv_x + _CELL, uv_y)
        uv_down_right = (uv_x + _CELL, uv_y + _CELL)
        uv_down_left = (uv_x, uv_y + _CELL)
        geometry.uvs.extend(
            [uv_up_left, uv_down_left, uv_up_right, uv_down_right, uv_up_right, uv_down_left]
        )
    return geometry