"""Balls leaving the centre that bounce off some walls and pass through others."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from genart.vector import Rect, Vec2

Hsl = Tuple[float, float, float]

_HUE_INCREMENT = 1.0 / 16.0


@dataclass
class WallBounce:
    """Which walls reflect a ball; the rest wrap it to the opposite side."""

    left: bool
    right: bool
    bottom: bool
    top: bool

    def hue(self) -> float:
        """A hue that encodes the four flags as a binary fraction of sixteenths."""
        return _HUE_INCREMENT * (
            int(self.left) + 2 * int(self.right) + 4 * int(self.bottom) + 8 * int(self.top)
        )


@dataclass
class Ball:
    position: Vec2
    speed: Vec2
    color: Hsl
    wall_bounce: WallBounce

    @classmethod
    def random(cls, init_speed: float, rng: Optional[random.Random] = None) -> Ball:
        """A ball at the origin with random walls and a speed up to half ``init_speed``."""
        rng = rng or random.Random()
        left = rng.random() < 0.5
        right = rng.random() < 0.5
        top = rng.random() < 0.5
        bottom = rng.random() < 0.5
        wall_bounce = WallBounce(left=left, right=right, bottom=bottom, top=top)
        speed = Vec2(init_speed * (rng.random() - 0.5), init_speed * (rng.random() - 0.5))
        return cls(Vec2(), speed, (wall_bounce.hue(), 0.8, 0.5), wall_bounce)

    def update(self) -> None:
        self.position = self.position + self.speed

    def check_edges(self, rect: Rect) -> None:
        """Reverse the whole speed at a bouncing wall, otherwise wrap across."""
        x, y = self.position.x, self.position.y
        if x < rect.left:
            if self.wall_bounce.left:
                self.speed = -self.speed
            else:
                x = rect.right
        elif x > rect.right:
            if self.wall_bounce.right:
                self.speed = -self.speed
            else:
                x = rect.left
        if y < rect.bottom:
            if self.wall_bounce.bottom:
                self.speed = -self.speed
            else:
                y = rect.top
        elif y > rect.top:
            if self.wall_bounce.top:
                self.speed = -self.speed
            else:
                y = rect.bottom
        self.position = Vec2(x, y)


def create_balls(
    n_balls: int, init_speed: float, rng: Optional[random.Random] = None
) -> List[Ball]:
    rng = rng or random.Random()
    return [Ball.random(init_speed, rng) for _ in range(n_balls)]