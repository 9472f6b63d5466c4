"""Step rules for random walkers, and a walk that applies one repeatedly."""

from __future__ import annotations

import math
import random
from typing import Callable, Iterator, Optional

from genart.vector import Vec2

StepFn = Callable[[Vec2], Vec2]

_STEP_SCALE = 2.0


def cardinal_step(r: float) -> Vec2:
    """One unit step right, left, up or down, chosen by ``r`` in 0..1 by quarters."""
    if r < 0.25:
        return Vec2(1.0, 0.0)
    if r < 0.5:
        return Vec2(-1.0, 0.0)
    if r < 0.75:
        return Vec2(0.0, 1.0)
    return Vec2(0.0, -1.0)


def skew_step(rng: Optional[random.Random] = None) -> Vec2:
    """A random step that, one time in five, leans right and down."""
    rng = rng or random.Random()
    if rng.random() < 0.8:
        step = Vec2(rng.random() - 0.5, rng.random() - 0.5)
    else:
        step = Vec2(rng.random() - 0.25, rng.random() - 0.75)
    return step * _STEP_SCALE


def mouse_step(
    position: Vec2, mouse: Vec2, rng: Optional[random.Random] = None
) -> Vec2:
    """Half the time a step towards the mouse, otherwise a small random step.

    A walker already on the mouse has no direction to go and stays put.
    """
    rng = rng or random.Random()
    if rng.random() < 0.5:
        step = (mouse - position).normalize_or_zero()
    else:
        step = Vec2(rng.random() - 0.5, rng.random() - 0.5)
    return step * _STEP_SCALE


def custom_step(max_size: float, rng: Optional[random.Random] = None) -> Vec2:
    """A random step whose size is weighted towards small values, up to ``max_size``."""
    if max_size < 0:
        raise ValueError("max_size must not be negative")
    rng = rng or random.Random()
    size = (math.sqrt(max_size) * rng.random()) ** 2
    return Vec2(rng.random() - 0.5, rng.random() - 0.5) * size


def gaussian_step(rng: Optional[random.Random] = None) -> Vec2:
    """A cardinal step scaled by a standard normal sample."""
    rng = rng or random.Random()
    direction = cardinal_step(rng.random())
    return direction * rng.gauss(0.0, 1.0)


def walk(start: Vec2, steps: int, step_fn: StepFn) -> Iterator[Vec2]:
    """Yield ``start`` and then each position after adding ``step_fn(position)``."""
    if steps < 0:
        raise ValueError("steps must not be negative")
    position = start
    yield position
    for _ in range(steps):
        position = position + step_fn(position)
        yield position