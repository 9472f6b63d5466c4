"""Paint splats scattered by normal distributions."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from genart.interaction import Key
from genart.vector import Vec2

Rgb = Tuple[float, float, float]


@dataclass
class Splat:
    position: Vec2
    color: Rgb
    radius: float

    @classmethod
    def random(
        cls,
        position_ratio: float,
        color_ratio: float,
        radius_ratio: float,
        rng: Optional[random.Random] = None,
    ) -> Splat:
        """A splat whose position, colour and radius come from standard normal samples."""
        rng = rng or random.Random()

        def normal() -> float:
            return rng.gauss(0.0, 1.0)

        position = Vec2(normal(), normal()) * position_ratio
        color = (normal() * color_ratio, normal() * color_ratio, normal() * color_ratio)
        radius = radius_ratio * abs(normal())
        return cls(position, color, radius)


@dataclass
class SplatterFields:
    """The adjustable settings of the splatter."""

    color_ratio: float = 0.5
    number_of_balls: int = 500
    position_ratio: float = 50.0
    radius_ratio: float = 3.0

    def adjust(self, key: Key) -> bool:
        """Apply a key press; return True when a frame should be captured."""
        if key is Key.S:
            return True
        if key is Key.UP:
            self.color_ratio += 0.001
        elif key is Key.DOWN:
            if self.color_ratio > 0.0:
                self.color_ratio -= 0.001
        elif key is Key.RIGHT:
            self.position_ratio += 1.0
        elif key is Key.LEFT:
            if self.position_ratio > 0.0:
                self.position_ratio -= 0.1
        elif key is Key.PAGE_UP:
            self.radius_ratio += 1.0
        elif key is Key.PAGE_DOWN:
            if self.radius_ratio > 0.0:
                self.radius_ratio -= 0.1
        elif key is Key.COMMA:
            self.number_of_balls += 1
        elif key is Key.STOP:
            if self.number_of_balls > 0:
                self.number_of_balls -= 1
        return False

    def splats(self, rng: Optional[random.Random] = None) -> List[Splat]:
        """A fresh set of splats drawn with the current settings."""
        rng = rng or random.Random()
        return [
            Splat.random(self.position_ratio, self.color_ratio, self.radius_ratio, rng)
            for _ in range(max(self.number_of_balls, 0))
        ]