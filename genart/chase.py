"""Balls that accelerate towards the mouse pointer up to a top speed."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional

from genart.vector import Rect, Vec2

CHASE_ACCELERATION = 0.2


@dataclass
class Chaser:
    """A ball steering towards a point."""

    position: Vec2 = field(default_factory=Vec2)
    velocity: Vec2 = field(default_factory=Vec2)
    acceleration: Vec2 = field(default_factory=Vec2)
    top_speed: float = 3.0

    def update(self, mouse: Vec2) -> None:
        self.acceleration = (mouse - self.position).normalize_or_zero() * CHASE_ACCELERATION
        self.velocity = (self.velocity + self.acceleration).clamp_length_max(self.top_speed)
        self.position = self.position + self.velocity


def make_chasers(
    count: int = 20, rect: Optional[Rect] = None, rng: Optional[random.Random] = None
) -> List[Chaser]:
    """Chasers at rest, scattered over ``0..width`` by ``0..height``."""
    rect = rect or Rect.from_wh(500.0, 500.0)
    rng = rng or random.Random()
    return [
        Chaser(Vec2(rng.random() * rect.w, rng.random() * rect.h)) for _ in range(count)
    ]