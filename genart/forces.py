"""Movers pushed about by gravity, wind and forces from the window edges."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from genart.vector import Rect, Vec2, bounce_velocity, map_range

BALLOON_GRAVITY = Vec2(0.0, 0.05)
MAKE_IT_UP_GRAVITY = Vec2(0.0, 0.1)
EDGE_GRAVITY = Vec2(0.0, -0.05)
STEADY_WIND = Vec2(0.01, 0.0)
EDGE_WIND_SCALE = 0.5
_EDGE_STRENGTH = 0.1


def _ieee_div(a: float, b: float) -> float:
    """Floating-point division that yields infinities and NaN instead of raising."""
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


@dataclass
class Mover:
    """A mass whose acceleration is rebuilt from the forces of every frame."""

    position: Vec2 = field(default_factory=Vec2)
    velocity: Vec2 = field(default_factory=Vec2)
    acceleration: Vec2 = field(default_factory=Vec2)
    mass: float = 5.0

    def update(self) -> None:
        self.velocity = self.velocity + self.acceleration
        self.position = self.position + self.velocity
        self.acceleration = self.acceleration * 0.0

    def apply_force(self, force: Vec2) -> None:
        """Accelerate by ``force / mass``; a massless mover gets infinite acceleration."""
        scaled = Vec2(_ieee_div(force.x, self.mass), _ieee_div(force.y, self.mass))
        self.acceleration = self.acceleration + scaled

    def check_edges(self, rect: Rect) -> None:
        """Bounce off any edge the mover has crossed."""
        self.velocity = bounce_velocity(self.position, self.velocity, rect)

    def edge_force(self, rect: Rect) -> None:
        """Push away from the nearer side edge and bounce off the top and bottom."""
        x = self.position.x
        if rect.left <= x < rect.right - rect.w * 0.5:
            push = _ieee_div(_EDGE_STRENGTH, x - rect.left)
        else:
            push = _ieee_div(_EDGE_STRENGTH, x - rect.right)
        self.apply_force(Vec2(push, 0.0))
        if self.position.y > rect.top or self.position.y < rect.bottom:
            self.velocity = Vec2(self.velocity.x, -self.velocity.y)


def wind_from_noise(noise_value: float, scale: float = 1.0) -> Vec2:
    """A horizontal wind from a noise sample in -1..1, mapped to -0.1..0.1."""
    return Vec2(map_range(noise_value, -1.0, 1.0, -0.1, 0.1), 0.0) * scale