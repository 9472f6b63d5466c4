"""Grid-based fluid solver: diffusion, advection and projection on numpy arrays.

Scalar fields have shape ``(nx, ny)``; vector fields have shape ``(nx, ny, 2)``.
All functions that take a field to update change it in place.
"""

from __future__ import annotations

import math
from typing import Callable, Iterator, List, Sequence, Tuple

import numpy as np

from genart.vector import Rect, Vec2, map_range

_MIRROR_Y = np.array([1.0, -1.0])
_MIRROR_X = np.array([-1.0, 1.0])


def neighbours(pair: Tuple[int, int]) -> List[Tuple[int, int]]:
    """The four axis neighbours of a grid cell: left, right, below, above."""
    x, y = pair
    if x < 1 or y < 1:
        raise ValueError("a cell on the lower edges has no lower neighbour")
    return [(x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)]


def _require_grid(array: np.ndarray, vector: bool) -> Tuple[int, int]:
    expected = 3 if vector else 2
    if array.ndim != expected or (vector and array.shape[2] != 2):
        kind = "(nx, ny, 2)" if vector else "(nx, ny)"
        raise ValueError(f"expected a field of shape {kind}, got {array.shape}")
    nx, ny = array.shape[:2]
    if nx < 2 or ny < 2:
        raise ValueError("a field needs at least two cells along each axis")
    return nx, ny


def set_boundaries(array: np.ndarray) -> None:
    """Set each corner to the mean of its two edge neighbours."""
    nx, ny = array.shape[:2]
    if nx < 2 or ny < 2:
        raise ValueError("a field needs at least two cells along each axis")
    array[0, 0] = (array[1, 0] + array[0, 1]) * 0.5
    array[0, ny - 1] = (array[1, ny - 1] + array[0, ny - 2]) * 0.5
    array[nx - 1, 0] = (array[nx - 1, 1] + array[nx - 2, 0]) * 0.5
    array[nx - 1, ny - 1] = (array[nx - 1, ny - 2] + array[nx - 2, ny - 1]) * 0.5


def set_boundaries_vec(array: np.ndarray) -> None:
    """Reflect the normal velocity component at the edges, then fix the corners.

    The far row is chosen by the grid's second dimension, so a grid wider in y
    than in x has no such row and raises IndexError.
    """
    nx, ny = _require_grid(array, vector=True)
    inner_x = slice(1, nx - 1)
    array[inner_x, 0] = array[inner_x, 1] * _MIRROR_Y
    array[inner_x, ny - 1] = array[inner_x, ny - 2] * _MIRROR_Y
    inner_y = slice(1, ny - 1)
    array[0, inner_y] = array[1, inner_y] * _MIRROR_X
    array[ny - 1, inner_y] = array[nx - 2, inner_y] * _MIRROR_X
    set_boundaries(array)


def _diagonals(nx: int, ny: int) -> List[Tuple[np.ndarray, np.ndarray]]:
    """Interior cells grouped by x + y, in the order a row-major sweep needs them.

    Cells on one anti-diagonal do not depend on each other, so updating the
    diagonals in turn gives the same result as visiting cells row by row.
    """
    groups = []
    for k in range(2, nx + ny - 3):
        lo, hi = max(1, k - (ny - 2)), min(nx - 2, k - 1)
        if lo <= hi:
            xs = np.arange(lo, hi + 1)
            groups.append((xs, k - xs))
    return groups


def _relax(
    array: np.ndarray,
    array_prev: np.ndarray,
    iterations: int,
    dt: float,
    visc: float,
    boundary: Callable[[np.ndarray], None],
) -> None:
    if array.shape != array_prev.shape:
        raise ValueError("field and previous field must have the same shape")
    nx, ny = array_prev.shape[:2]
    multiplier = dt * visc * nx * ny
    factor = 1.0 / (1.0 + 4 * multiplier)
    groups = _diagonals(nx, ny)
    for _ in range(iterations):
        for xs, ys in groups:
            total = (
                array[xs - 1, ys] + array[xs + 1, ys] + array[xs, ys - 1] + array[xs, ys + 1]
            )
            array[xs, ys] = (array_prev[xs, ys] + multiplier * total) * factor
        boundary(array)


def diffuse(
    array: np.ndarray, array_prev: np.ndarray, iterations: int, dt: float, visc: float
) -> None:
    """Gauss-Seidel relaxation of ``prev = x - a * laplacian(x)`` on a scalar field."""
    _require_grid(array, vector=False)
    _relax(array, array_prev, iterations, dt, visc, set_boundaries)


def diffuse_vec(
    array: np.ndarray, array_prev: np.ndarray, iterations: int, dt: float, visc: float
) -> None:
    """Gauss-Seidel relaxation of ``prev = x - a * laplacian(x)`` on a vector field."""
    _require_grid(array, vector=True)
    _relax(array, array_prev, iterations, dt, visc, set_boundaries_vec)


def _advect(
    field: np.ndarray,
    velocity: np.ndarray,
    dt: float,
    boundary: Callable[[np.ndarray], None],
) -> np.ndarray:
    nx, ny = field.shape[:2]
    if velocity.shape[:2] != (nx, ny):
        raise ValueError("velocity must cover the same grid as the field")
    output = np.zeros(field.shape, dtype=float)
    if nx > 2 and ny > 2:
        xs, ys = np.meshgrid(np.arange(1, nx - 1), np.arange(1, ny - 1), indexing="ij")
        inner = velocity[1:-1, 1:-1]
        px = np.fmin(np.fmax(xs - dt * nx * inner[..., 0], 0.5), nx + 0.5)
        py = np.fmin(np.fmax(ys - dt * ny * inner[..., 1], 0.5), ny + 0.5)
        fx, fy = np.floor(px), np.floor(py)
        sx, sy = px - fx, py - fy
        tx, ty = 1.0 - sx, 1.0 - sy
        ix, iy = fx.astype(np.intp), fy.astype(np.intp)
        if field.ndim == 3:
            sx, sy, tx, ty = (w[..., None] for w in (sx, sy, tx, ty))
        output[1:-1, 1:-1] = tx * (ty * field[ix, iy] + sy * field[ix, iy + 1]) + sx * (
            ty * field[ix + 1, iy] + sy * field[ix + 1, iy + 1]
        )
    boundary(output)
    return output


def advect(density_prev: np.ndarray, velocity: np.ndarray, dt: float) -> np.ndarray:
    """Trace each cell back along the velocity and interpolate the old density there.

    A trace that lands on the last row or column has no cell beyond it to
    interpolate with and raises IndexError.
    """
    _require_grid(density_prev, vector=False)
    _require_grid(velocity, vector=True)
    return _advect(density_prev, velocity, dt, set_boundaries)


def advect_vec(velocity_prev: np.ndarray, velocity: np.ndarray, dt: float) -> np.ndarray:
    """Trace each cell back along ``velocity`` and interpolate ``velocity_prev`` there."""
    _require_grid(velocity_prev, vector=True)
    _require_grid(velocity, vector=True)
    return _advect(velocity_prev, velocity, dt, set_boundaries_vec)


def project(velocity: np.ndarray, iterations: int) -> None:
    """Subtract a pressure gradient relaxed from the field's divergence."""
    nx, ny = _require_grid(velocity, vector=True)
    rx, ry = 1.0 / nx, 1.0 / ny

    div = np.zeros((nx, ny))
    div[1:-1, 1:-1] = -0.5 * (
        rx * (velocity[2:, 1:-1, 0] - velocity[:-2, 1:-1, 0])
        + ry * (velocity[1:-1, 2:, 1] - velocity[1:-1, :-2, 1])
    )
    set_boundaries(div)

    pressure = np.zeros((nx, ny))
    groups = _diagonals(nx, ny)
    for _ in range(iterations):
        for xs, ys in groups:
            pressure[xs, ys] = 0.25 * (
                div[xs, ys]
                + pressure[xs + 1, ys]
                - pressure[xs - 1, ys]
                + pressure[xs, ys + 1]
                - pressure[xs, ys - 1]
            )
        set_boundaries(pressure)

    velocity[1:-1, 1:-1, 0] -= 0.5 * (pressure[2:, 1:-1] - pressure[:-2, 1:-1]) / rx
    velocity[1:-1, 1:-1, 1] -= 0.5 * (pressure[1:-1, 2:] - pressure[1:-1, :-2]) / ry
    set_boundaries_vec(velocity)


def fluid_pos(pos: Tuple[int, int], rect: Rect, dim: Sequence[int]) -> Vec2:
    """Position in the rectangle of the lower-left corner of a grid cell."""
    return Vec2(
        map_range(pos[0], 0, dim[0], rect.left, rect.right),
        map_range(pos[1], 0, dim[1], rect.bottom, rect.top),
    )


def _to_index(value: float) -> int:
    if math.isnan(value) or math.isinf(value) or value <= -1.0:
        raise ValueError(f"position maps outside the grid: {value}")
    return int(value)


def pos_fluid(pos: Vec2, rect: Rect, dim: Sequence[int]) -> Tuple[int, int]:
    """Grid cell containing a position in the rectangle."""
    return (
        _to_index(map_range(pos.x, rect.left, rect.right, 0, dim[0])),
        _to_index(map_range(pos.y, rect.bottom, rect.top, 0, dim[1])),
    )


def iter_cells(dim: Sequence[int]) -> Iterator[Tuple[int, int]]:
    """Every grid cell, x outer and y inner."""
    for x in range(dim[0]):
        for y in range(dim[1]):
            yield x, y