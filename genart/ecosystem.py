"""A pond of species that wander, flee and chase the nearest prey."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from genart.vector import Rect, Vec2, wrap_edges

F32_EPSILON = 2.0**-23

Rgb = Tuple[int, int, int]

BLACK: Rgb = (0, 0, 0)
GREEN: Rgb = (0, 128, 0)
BLUE: Rgb = (0, 0, 255)
ORANGE: Rgb = (255, 165, 0)
GREY: Rgb = (128, 128, 128)


@dataclass(frozen=True)
class Visual:
    """How an animal of a species is drawn."""

    radius: float
    color: Rgb


class SpeciesName(Enum):
    FROG = 0
    MOSQUITO = 1
    POND_SKATER = 2
    GOLDFISH = 3
    WATER_BOATMAN = 4
    NEWT = 5
    MOUSE = 6


@dataclass
class Motion:
    """Position with the velocity and acceleration that move it."""

    position: Vec2
    velocity: Vec2 = field(default_factory=Vec2)
    acceleration: Vec2 = field(default_factory=Vec2)

    def update(self, new_acc: Vec2, top_speed: float) -> None:
        self.acceleration = new_acc
        self.velocity = (self.velocity + self.acceleration).clamp_length_max(top_speed)
        self.position = self.position + self.velocity

    def check_edges(self, rect: Rect) -> None:
        self.position = wrap_edges(self.position, rect)


def _coin(rng: random.Random) -> bool:
    return rng.random() < 0.5


def _random_acceleration(factor: float, rng: random.Random) -> Vec2:
    return Vec2(factor * rng.uniform(-1.0, 1.0), factor * rng.uniform(-1.0, 1.0))


@dataclass
class Species:
    """Movement rules shared by every animal of one kind."""

    name: SpeciesName
    top_speed: float
    acceleration_ratio: float
    prey: Optional[FrozenSet[SpeciesName]]
    visual: Visual

    def _towards(self, motion: Motion, target: Vec2) -> Vec2:
        # A prey sitting exactly on the hunter exerts no pull.
        return (target - motion.position).normalize_or_zero() * self.acceleration_ratio

    def new_acceleration(
        self,
        motion: Motion,
        closest_pos: Optional[Vec2],
        rng: Optional[random.Random] = None,
    ) -> Vec2:
        """The acceleration this species chooses for its next move."""
        rng = rng or random.Random()
        ratio = self.acceleration_ratio
        speed = motion.velocity.length()
        name = self.name

        if name is SpeciesName.FROG:
            coin = _coin(rng)
            if (
                coin
                and abs(speed) > 0.0
                and abs(motion.acceleration.angle() - motion.velocity.angle()) < F32_EPSILON
            ):
                return -motion.acceleration
            if closest_pos is not None:
                return self._towards(motion, closest_pos)
            return motion.acceleration

        if name is SpeciesName.MOSQUITO:
            if abs(speed - self.top_speed) < F32_EPSILON:
                return -_random_acceleration(ratio, rng)
            if speed == 0.0:
                return _random_acceleration(ratio, rng)
            return motion.acceleration + _random_acceleration(ratio, rng)

        if name is SpeciesName.POND_SKATER:
            if _coin(rng):
                return Vec2()
            if abs(speed - self.top_speed) < F32_EPSILON:
                return motion.acceleration * -ratio
            if speed == 0.0:
                return _random_acceleration(ratio, rng)
            return motion.acceleration

        if name is SpeciesName.GOLDFISH:
            if closest_pos is not None:
                return self._towards(motion, closest_pos)
            return motion.acceleration

        if name in (SpeciesName.WATER_BOATMAN, SpeciesName.NEWT):
            return _random_acceleration(ratio, rng)

        return Vec2(1.0, 1.0) * ratio


def closest_prey_position(
    current_pos: Vec2,
    animals: Sequence[Tuple[SpeciesName, Vec2]],
    prey: Optional[FrozenSet[SpeciesName]],
) -> Optional[Vec2]:
    """Position of the nearest animal of a prey species.

    A species without prey gets None. When no animal is prey, the first
    animal's position is returned.
    """
    if prey is None:
        return None
    best = animals[0] if animals else None
    best_distance = float("inf")
    for animal in animals:
        if animal[0] not in prey:
            continue
        distance = abs((current_pos - animal[1]).length_squared())
        if distance < best_distance:
            best_distance = distance
            best = animal
    return best[1] if best is not None else None


class Animal:
    """One individual: its species and how it is moving."""

    def __init__(self, species: SpeciesName, position: Vec2) -> None:
        self.species = species
        self.motion = Motion(position)

    @property
    def position(self) -> Vec2:
        return self.motion.position

    def check_edges(self, rect: Rect) -> None:
        self.motion.check_edges(rect)

    def update(
        self,
        species: Species,
        close_pos: Optional[Vec2],
        rng: Optional[random.Random] = None,
    ) -> None:
        self.motion.update(
            species.new_acceleration(self.motion, close_pos, rng), species.top_speed
        )


def random_position(rect: Rect, rng: Optional[random.Random] = None) -> Vec2:
    """A uniformly random point inside the rectangle."""
    rng = rng or random.Random()
    return Vec2(rng.uniform(rect.left, rect.right), rng.uniform(rect.bottom, rect.top))


def create_species() -> Dict[SpeciesName, Species]:
    """The pond's species with their speeds, prey and looks."""
    insects = frozenset(
        {SpeciesName.MOSQUITO, SpeciesName.WATER_BOATMAN, SpeciesName.POND_SKATER}
    )
    hunters_prey = insects | {SpeciesName.MOUSE}
    table = [
        Species(SpeciesName.MOSQUITO, 10.0, 0.5, None, Visual(1.0, BLACK)),
        Species(SpeciesName.FROG, 5.0, 1.0, hunters_prey, Visual(7.0, GREEN)),
        Species(SpeciesName.WATER_BOATMAN, 2.0, 0.5, None, Visual(3.0, BLUE)),
        Species(SpeciesName.GOLDFISH, 1.0, 0.01, hunters_prey, Visual(10.0, ORANGE)),
        Species(SpeciesName.NEWT, 0.1, 0.05, insects, Visual(5.0, BLACK)),
        Species(SpeciesName.POND_SKATER, 3.0, 0.5, None, Visual(3.0, GREY)),
        Species(SpeciesName.MOUSE, 0.0, 0.0, None, Visual(0.0, BLACK)),
    ]
    return {species.name: species for species in table}


class Ecosystem:
    """Every animal of every species living in one rectangle."""

    def __init__(
        self,
        rect: Rect,
        per_species: int = 200,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.rng = rng or random.Random()
        self.species = create_species()
        self.animals: List[Animal] = [
            Animal(name, random_position(rect, self.rng))
            for name in self.species
            for _ in range(per_species)
        ]

    def step(self, rect: Rect, mouse: Vec2) -> None:
        """Move every animal once; the mouse pointer counts as a mouse."""
        positions = [(animal.species, animal.position) for animal in self.animals]
        positions.append((SpeciesName.MOUSE, mouse))
        for animal in self.animals:
            species = self.species[animal.species]
            prey_pos = closest_prey_position(animal.position, positions, species.prey)
            animal.update(species, prey_pos, self.rng)
            animal.check_edges(rect)