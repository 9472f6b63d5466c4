"""A fluid grid holding density and velocity, with what it takes to draw it."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, NamedTuple, Tuple

import numpy as np

from genart.fluid import (
    advect,
    advect_vec,
    diffuse,
    diffuse_vec,
    fluid_pos,
    iter_cells,
    pos_fluid,
    project,
)
from genart.vector import Rect, Vec2

Hsv = Tuple[float, float, float]


@dataclass
class DensColor:
    """Hue and saturation used to colour density; brightness follows the density."""

    hue: float
    sat: float

    def color_map(self, ratio: float) -> Hsv:
        return (self.hue, self.sat, min(max(ratio, 0.0), 1.0))


class DensityCell(NamedTuple):
    position: Vec2
    size: Vec2
    color: Hsv


class VelocityLine(NamedTuple):
    start: Vec2
    end: Vec2


class FluidCube:
    """Density and velocity fields with their previous states."""

    def __init__(self, size: Tuple[int, int]) -> None:
        nx, ny = size
        self.density = np.zeros((nx, ny))
        self.density_prev = np.zeros((nx, ny))
        self.velocity = np.zeros((nx, ny, 2))
        self.velocity_prev = np.zeros((nx, ny, 2))

    @property
    def shape(self) -> Tuple[int, int]:
        return self.density.shape

    def add_density(self, pos: Vec2, amount: float, rect: Rect) -> None:
        cell = pos_fluid(pos, rect, self.shape)
        self.density[cell] += amount

    def add_velocity(self, pos: Vec2, amount: Vec2, rect: Rect) -> None:
        cell = pos_fluid(pos, rect, self.shape)
        self.velocity[cell] += (amount.x, amount.y)

    def _dens_step(self, visc: float, dt: float, iterations: int) -> None:
        diffuse(self.density, self.density_prev, iterations, dt, visc)
        new_density = advect(self.density, self.velocity, dt)
        self.density_prev, self.density = self.density, new_density

    def _vel_step(self, diff: float, dt: float, iterations: int) -> None:
        diffuse_vec(self.velocity, self.velocity_prev, iterations, dt, diff)
        project(self.velocity, iterations)
        new_velocity = advect_vec(self.velocity_prev, self.velocity_prev, dt)
        project(new_velocity, iterations)
        self.velocity_prev, self.velocity = self.velocity, new_velocity

    def step(self, vel_diff: float, dens_visc: float, dt: float, iterations: int) -> None:
        """Advance velocity, then density, by one time step."""
        self._vel_step(vel_diff, dt, iterations)
        self._dens_step(dens_visc, dt, iterations)

    def density_cells(self, rect: Rect, density_color: DensColor) -> Iterator[DensityCell]:
        """One coloured rectangle per cell, x outer and y inner."""
        nx, ny = self.shape
        size = rect.wh / Vec2(nx, ny)
        for cell in iter_cells(self.shape):
            yield DensityCell(
                fluid_pos(cell, rect, self.shape),
                size,
                density_color.color_map(float(self.density[cell])),
            )

    def velocity_lines(self, rect: Rect, line_length: float) -> Iterator[VelocityLine]:
        """One fixed-length line per cell pointing along the velocity there."""
        for cell in iter_cells(self.shape):
            start = fluid_pos(cell, rect, self.shape)
            vx, vy = self.velocity[cell]
            angle = math.atan2(vy, vx)
            yield VelocityLine(
                start, start + Vec2(math.cos(angle), math.sin(angle)) * line_length
            )


def _saturating_floor(value: float) -> int:
    if math.isnan(value):
        return 0
    return max(0, math.floor(value))


def scaled_fluid_cube(scale: float, rect: Rect) -> Tuple[int, int]:
    """Grid size for a window scaled down by ``scale``."""
    wh = rect.wh * scale
    return _saturating_floor(wh.x), _saturating_floor(wh.y)