"""Bodies attracting each other by clamped gravity inside a wrapping window."""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass, field
from typing import List, Tuple

from genart.vector import Rect, Vec2, wrap_edges

F32_EPSILON = 2.0**-23


@dataclass
class Body:
    """A point mass; acceleration accumulates and is never reset."""

    mass: float
    pos: Vec2
    velocity: Vec2
    acc: Vec2 = field(default_factory=Vec2)

    def update(self, rect: Rect, top_speed: float) -> None:
        self.velocity = self.velocity + self.acc
        self.pos = self.pos + self.velocity
        self.velocity = self.velocity.clamp_length_max(top_speed)
        self.check_edges(rect)

    def add_gravity(self, other: Body, grav: float) -> None:
        """Accelerate towards ``other``; the distance used is clamped to 5..25."""
        direction = (other.pos - self.pos).clamp_length(5.0, 25.0)
        recip = self.mass * other.mass / direction.length_squared()
        self.acc = self.acc + direction.normalize() * (grav * recip)

    def check_edges(self, rect: Rect) -> None:
        self.pos = wrap_edges(self.pos, rect)


@dataclass
class StartingPosition:
    """Initial (position, velocity) pairs."""

    pairs: List[Tuple[Vec2, Vec2]]

    @classmethod
    def circle(cls, n: int, radius: float, speed: float) -> StartingPosition:
        """``n`` bodies evenly on a circle, each moving along its tangent."""
        if radius == 0:
            raise ValueError("radius must be non-zero")
        pairs = []
        for i in range(n):
            theta = math.tau * i * (1.0 / n)
            pos = Vec2(math.cos(theta), math.sin(theta)) * radius
            if pos.y > F32_EPSILON:
                tangent = Vec2(1.0, -pos.x / pos.y)
            else:
                tangent = Vec2(pos.y / pos.x, -1.0)
            pairs.append((pos, tangent.normalize() * speed))
        return cls(pairs)


class System:
    """All bodies, with the gravity strength and speed limit they share."""

    def __init__(
        self, starting_position: StartingPosition, top_speed: float, grav: float
    ) -> None:
        self.bodies = [
            Body(min(max(pos.x, 1.0), 20.0), pos, velocity)
            for pos, velocity in starting_position.pairs
        ]
        self.grav = grav
        self.top_speed = top_speed

    def update(self, rect: Rect) -> None:
        """Pull every body towards a snapshot of the others, then move it."""
        snapshot = copy.deepcopy(self.bodies)
        for body in self.bodies:
            for other in snapshot:
                if (other.pos - body.pos).length_squared() > F32_EPSILON:
                    body.add_gravity(other, self.grav)
            body.update(rect, self.top_speed)