"""Mouse picking: unprojecting screen positions into rays and testing them against boxes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

import numpy as np

Vec3 = tuple[float, float, float]

# Bounds of the slab-test parameter, as the picking code uses them.
_T_MIN_START = 0.0
_T_MAX_START = 100000.0
# Below this, a ray is treated as parallel to a pair of box planes.
_PARALLEL_EPSILON = 0.001


@dataclass(frozen=True)
class Ray:
    """A ray in world space; ``direction`` has unit length."""

    origin: Vec3
    direction: Vec3


def _matrix(values, name: str) -> np.ndarray:
    matrix = np.asarray(values, dtype=np.float64)
    if matrix.shape != (4, 4):
        raise ValueError(f"{name} must be a 4x4 matrix, got shape {matrix.shape}")
    return matrix


def _vector3(values: Sequence[float], name: str) -> np.ndarray:
    vector = np.asarray(values, dtype=np.float64)
    if vector.shape != (3,):
        raise ValueError(f"{name} must have 3 components, got shape {vector.shape}")
    return vector


def _as_vec3(vector: np.ndarray) -> Vec3:
    x, y, z = (float(component) for component in vector[:3])
    return x, y, z


def _normalized(vector: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(vector))
    if length == 0.0:
        raise ValueError("cannot normalise a zero-length direction")
    return vector / length


def screen_pos_to_world_ray(
    mouse_x: float,
    mouse_y: float,
    screen_width: float,
    screen_height: float,
    view_matrix,
    projection_matrix,
) -> Ray:
    """Ray through a pixel, measured from the bottom-left corner of the window.

    Matrices act on column vectors (``M @ v``), so a translation sits in the
    last column. The ray starts on the near plane, not at the camera.
    """
    if screen_width <= 0 or screen_height <= 0:
        raise ValueError("screen dimensions must be positive")
    view = _matrix(view_matrix, "view_matrix")
    projection = _matrix(projection_matrix, "projection_matrix")

    ndc_x = (mouse_x / screen_width - 0.5) * 2.0
    ndc_y = (mouse_y / screen_height - 0.5) * 2.0
    # The near plane maps to z = -1 in normalised device coordinates.
    start_ndc = np.array([ndc_x, ndc_y, -1.0, 1.0])
    end_ndc = np.array([ndc_x, ndc_y, 0.0, 1.0])

    inverse_projection = np.linalg.inv(projection)
    inverse_view = np.linalg.inv(view)

    def unproject(point: np.ndarray) -> np.ndarray:
        camera = inverse_projection @ point
        camera = camera / camera[3]
        world = inverse_view @ camera
        return world / world[3]

    start_world = unproject(start_ndc)
    end_world = unproject(end_ndc)
    direction = _normalized((end_world - start_world)[:3])
    return Ray(origin=_as_vec3(start_world), direction=_as_vec3(direction))


def ray_obb_intersection(
    ray_origin: Sequence[float],
    ray_direction: Sequence[float],
    aabb_min: Sequence[float],
    aabb_max: Sequence[float],
    model_matrix,
) -> Optional[float]:
    """Distance along the ray to an oriented bounding box, or None on a miss.

    The box is ``aabb_min``..``aabb_max`` in model space, placed in the world
    by ``model_matrix``. ``ray_direction`` must be normalised. A ray starting
    inside the box reports distance 0; hits beyond 100000 are misses.
    """
    origin = _vector3(ray_origin, "ray_origin")
    direction = _vector3(ray_direction, "ray_direction")
    lows = _vector3(aabb_min, "aabb_min")
    highs = _vector3(aabb_max, "aabb_max")
    model = _matrix(model_matrix, "model_matrix")

    t_min = _T_MIN_START
    t_max = _T_MAX_START
    delta = model[:3, 3] - origin

    for axis, low, high in zip(model[:3, :3].T, lows, highs):
        e = float(np.dot(axis, delta))
        f = float(np.dot(direction, axis))

        if abs(f) > _PARALLEL_EPSILON:
            t1 = (e + low) / f
            t2 = (e + high) / f
            if t1 > t2:
                t1, t2 = t2, t1
            t_max = min(t_max, t2)
            t_min = max(t_min, t1)
            if t_max < t_min:
                return None
        elif -e + low > 0.0 or -e + high < 0.0:
            # Almost parallel to this pair of planes and outside the slab.
            return None

    return t_min


def pick_first(
    ray: Ray,
    model_matrices: Iterable,
    aabb_min: Sequence[float],
    aabb_max: Sequence[float],
) -> Optional[int]:
    """Index of the first box, in the given order, that the ray hits; None if none."""
    for index, model in enumerate(model_matrices):
        if ray_obb_intersection(ray.origin, ray.direction, aabb_min, aabb_max, model) is not None:
            return index
    return None