"""Translucent dots that drift towards the centre at adjustable speeds."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from genart.vector import Vec2

Rgba = Tuple[float, float, float, float]

N_THINGS = 1000
SIZE = 500


@dataclass
class Dot:
    position: Vec2
    color: Rgba


def create_dots(
    count: int = N_THINGS, size: float = SIZE, rng: Optional[random.Random] = None
) -> List[Dot]:
    """Blue dots of random opacity scattered over a square of side ``size``.

    Dots are made for indices 1 up to ``count`` exclusive, one fewer than ``count``.
    """
    rng = rng or random.Random()
    dots = []
    for _ in range(1, count):
        position = Vec2((rng.random() - 0.5) * size, (rng.random() - 0.5) * size)
        dots.append(Dot(position, (0.1, 0.1, 0.8, rng.random())))
    return dots


def contract(dots: List[Dot], x_speed: float, y_speed: float) -> None:
    """Pull every dot towards the origin by a fraction of each coordinate."""
    for dot in dots:
        p = dot.position
        dot.position = p - Vec2(p.x * x_speed, p.y * y_speed)