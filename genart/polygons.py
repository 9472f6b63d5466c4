"""Regular polygons with interpolated inner lines, and a skewed tile grid."""

from __future__ import annotations

import math
import random
from itertools import pairwise
from typing import List, Optional, Sequence, Tuple

import numpy as np

from genart.vector import Vec2, map_range

TAU = math.tau

Hsla = Tuple[float, float, float, float]

TILE_POINTS = (
    Vec2(0.75, 0.5),
    Vec2(0.5, -0.5),
    Vec2(-0.75, -0.5),
    Vec2(-0.5, 0.5),
)
_DIRECTIONS = (Vec2(1.0, 0.0), Vec2(0.0, -1.0))


def corner(i: int, radius: float, number_of_sides: int) -> Vec2:
    """The i-th corner of a regular polygon, starting straight up and turning clockwise."""
    if number_of_sides < 1:
        raise ValueError("a polygon needs at least one side")
    radian = TAU * (i / number_of_sides)
    return Vec2(math.sin(radian) * radius, math.cos(radian) * radius)


def poly_points(number_of_sides: int, radius: float) -> List[Vec2]:
    """The closed outline: every corner, then the first corner again."""
    poly = [corner(i, radius, number_of_sides) for i in range(number_of_sides)]
    poly.append(corner(0, radius, number_of_sides))
    return poly


def gen_line_points(step: float, poly: Sequence[Vec2]) -> List[Vec2]:
    """For each ratio step, 2*step, ... below one, the points that far along each edge.

    The ratio is accumulated in single precision, which fixes how many passes run.
    """
    if not step > 0:
        raise ValueError("step must be positive")
    first = poly[0] if poly else Vec2()
    points: List[Vec2] = []
    step32 = np.float32(step)
    ratio = step32
    while ratio < 1.0:
        fraction = float(ratio)
        points.extend(prev + (cur - prev) * fraction for prev, cur in pairwise(poly))
        points.append(first)
        ratio = np.float32(ratio + step32)
    return points


class PolyThing:
    """A rotating polygon with its web of interpolated lines."""

    def __init__(
        self,
        radius: float,
        number_of_sides: int,
        step: float,
        angle: float,
        color: Hsla,
    ) -> None:
        self.number_of_sides = number_of_sides
        self.radius = radius
        self.angle = angle
        self.color = color
        self.poly = poly_points(number_of_sides, radius)
        self.points = gen_line_points(step, self.poly)

    def set_angle(self, new_angle: float) -> None:
        self.angle = new_angle

    def update(self, radius: float, step: float) -> None:
        """Rebuild the outline and lines for a new radius and step."""
        self.poly = poly_points(self.number_of_sides, radius)
        self.points = gen_line_points(step, self.poly)
        self.radius = radius


def new_things(
    radius: float,
    step: float,
    min_sides: int,
    max_sides: int,
    rng: Optional[random.Random] = None,
) -> List[PolyThing]:
    """One polygon for each side count in ``min_sides..max_sides`` (exclusive)."""
    rng = rng or random.Random()
    rand_angle = rng.random()
    return [
        PolyThing(
            radius,
            sides,
            step,
            math.fmod(TAU * rand_angle * sides, TAU),
            (map_range(sides, min_sides, max_sides, 0.1, 0.9), 0.6, 0.6, 0.8),
        )
        for sides in range(min_sides, max_sides)
    ]


def tile_grid(start: Vec2, tile_size: float, step_size: float, n: int) -> List[List[Vec2]]:
    """Outlines of an n by n grid of skewed tiles, running right and down from ``start``."""
    grid = []
    for i in range(n):
        for j in range(n):
            offset = (_DIRECTIONS[0] * i + _DIRECTIONS[1] * j) * step_size
            grid.append([start + point * tile_size + offset for point in TILE_POINTS])
    return grid