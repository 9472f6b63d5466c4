"""Plane vectors, axis-aligned rectangles and the motion helpers the sketches share."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Optional, Tuple


def _components(other: object) -> Optional[Tuple[float, float]]:
    if isinstance(other, Vec2):
        return other.x, other.y
    if isinstance(other, Real):
        return float(other), float(other)
    return None


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: object) -> Vec2:
        parts = _components(other)
        if parts is None:
            return NotImplemented
        return Vec2(self.x + parts[0], self.y + parts[1])

    __radd__ = __add__

    def __sub__(self, other: object) -> Vec2:
        parts = _components(other)
        if parts is None:
            return NotImplemented
        return Vec2(self.x - parts[0], self.y - parts[1])

    def __rsub__(self, other: object) -> Vec2:
        parts = _components(other)
        if parts is None:
            return NotImplemented
        return Vec2(parts[0] - self.x, parts[1] - self.y)

    def __mul__(self, other: object) -> Vec2:
        parts = _components(other)
        if parts is None:
            return NotImplemented
        return Vec2(self.x * parts[0], self.y * parts[1])

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Vec2:
        parts = _components(other)
        if parts is None:
            return NotImplemented
        return Vec2(self.x / parts[0], self.y / parts[1])

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalize(self) -> Vec2:
        """Return the unit vector in the same direction; a zero vector has none."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            raise ValueError("cannot normalize a zero-length or non-finite vector")
        return Vec2(self.x / length, self.y / length)

    def normalize_or_zero(self) -> Vec2:
        try:
            return self.normalize()
        except ValueError:
            return Vec2()

    def clamp_length_max(self, maximum: float) -> Vec2:
        squared = self.length_squared()
        if squared > maximum * maximum:
            return self * (maximum / math.sqrt(squared))
        return self

    def clamp_length(self, minimum: float, maximum: float) -> Vec2:
        if minimum > maximum:
            raise ValueError("minimum length must not exceed maximum length")
        squared = self.length_squared()
        if squared < minimum * minimum:
            return self.normalize() * minimum
        if squared > maximum * maximum:
            return self * (maximum / math.sqrt(squared))
        return self

    def angle(self) -> float:
        """Angle of the vector from the positive x axis, in radians."""
        return math.atan2(self.y, self.x)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its four edges."""

    left: float
    right: float
    bottom: float
    top: float

    @classmethod
    def from_wh(cls, width: float, height: float) -> Rect:
        """A rectangle of the given size centred on the origin."""
        return cls(-width / 2.0, width / 2.0, -height / 2.0, height / 2.0)

    @property
    def w(self) -> float:
        return self.right - self.left

    @property
    def h(self) -> float:
        return self.top - self.bottom

    @property
    def wh(self) -> Vec2:
        return Vec2(self.w, self.h)

    @property
    def x(self) -> float:
        return (self.left + self.right) / 2.0

    @property
    def y(self) -> float:
        return (self.bottom + self.top) / 2.0

    @property
    def xy(self) -> Vec2:
        return Vec2(self.x, self.y)

    @property
    def top_left(self) -> Vec2:
        return Vec2(self.left, self.top)

    def pad(self, amount: float) -> Rect:
        """Shrink every edge inwards by ``amount``."""
        return Rect(
            self.left + amount,
            self.right - amount,
            self.bottom + amount,
            self.top - amount,
        )

    def shift_x(self, amount: float) -> Rect:
        return Rect(self.left + amount, self.right + amount, self.bottom, self.top)

    def shift_y(self, amount: float) -> Rect:
        return Rect(self.left, self.right, self.bottom + amount, self.top + amount)

    def contains(self, point: Vec2) -> bool:
        """True when the point lies inside the rectangle or on its edge."""
        return self.left <= point.x <= self.right and self.bottom <= point.y <= self.top


def map_range(
    value: float, in_min: float, in_max: float, out_min: float, out_max: float
) -> float:
    """Linearly map ``value`` from one range to another."""
    return (value - in_min) / (in_max - in_min) * (out_max - out_min) + out_min


def wrap_edges(position: Vec2, rect: Rect) -> Vec2:
    """Move a point that left the rectangle to the opposite edge."""
    x, y = position.x, position.y
    if x < rect.left:
        x = rect.right
    elif x > rect.right:
        x = rect.left
    if y < rect.bottom:
        y = rect.top
    elif y > rect.top:
        y = rect.bottom
    return Vec2(x, y)


def bounce_velocity(position: Vec2, velocity: Vec2, rect: Rect) -> Vec2:
    """Reverse each velocity component whose coordinate lies outside the rectangle."""
    vx, vy = velocity.x, velocity.y
    if position.x > rect.right or position.x < rect.left:
        vx = -vx
    if position.y > rect.top or position.y < rect.bottom:
        vy = -vy
    return Vec2(vx, vy)