"""Colour-coded picking: mesh identifiers encoded as RGB colours and back."""

from __future__ import annotations

from typing import Sequence

# A cleared framebuffer reads back as full white, which is never a mesh.
BACKGROUND_ID = 0x00FFFFFF

RGB = tuple[int, int, int]


def id_to_color(mesh_id: int) -> RGB:
    """Encode the low 24 bits of ``mesh_id`` as an (r, g, b) triple of bytes.

    Red holds the lowest byte, blue the highest.
    """
    mesh_id = int(mesh_id)
    r = mesh_id & 0x000000FF
    g = (mesh_id & 0x0000FF00) >> 8
    b = (mesh_id & 0x00FF0000) >> 16
    return r, g, b


def color_to_id(rgb: Sequence[int]) -> int:
    """Decode a pixel read back from the framebuffer into a mesh identifier.

    Only the first three components are used, so an RGBA pixel is accepted.
    """
    if len(rgb) < 3:
        raise ValueError(f"a colour needs at least 3 components, got {len(rgb)}")
    r, g, b = (int(component) for component in rgb[:3])
    for component in (r, g, b):
        if not 0 <= component <= 255:
            raise ValueError(f"colour component {component} is not a byte")
    return r + g * 256 + b * 256 * 256


def pick_message(picked_id: int) -> str:
    """Text describing what was picked: ``"background"`` or ``"mesh <id>"``."""
    if picked_id == BACKGROUND_ID:
        return "background"
    return f"mesh {picked_id}"