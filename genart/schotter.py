"""A grid of squares that scatter and turn more the further down they lie."""

from __future__ import annotations

import math
import os
import random
from dataclasses import dataclass, field
from typing import List, Optional

from genart.interaction import Key

ROWS = 22
COLS = 12
SIZE = 30
MARGIN = 35
WIDTH = COLS * SIZE + 2 * MARGIN
HEIGHT = ROWS * SIZE + 2 * MARGIN
LINE_WIDTH = 0.06
SEED_LIMIT = 1_000_000
MAX_RECORDED_FRAMES = 9999
_MIN_CYCLES = 50
_MAX_CYCLES = 300
_QUARTER_PI = math.pi / 4.0


@dataclass
class Stone:
    """One square: its grid cell, its offset from it, and how that offset moves."""

    x: float
    y: float
    x_offset: float = 0.0
    y_offset: float = 0.0
    rotation: float = 0.0
    x_velocity: float = 0.0
    y_velocity: float = 0.0
    rot_velocity: float = 0.0
    cycles: int = 0


def make_gravel(rows: int = ROWS, cols: int = COLS) -> List[Stone]:
    """One stone per cell, row by row."""
    return [Stone(float(x), float(y)) for y in range(rows) for x in range(cols)]


def randomize_gravel(
    gravel: List[Stone],
    seed: int,
    disp_adj: float,
    rot_adj: float,
    rows: int = ROWS,
) -> None:
    """Set every stone's offset and rotation from a seeded generator."""
    rng = random.Random(seed)
    for stone in gravel:
        factor = stone.y / rows
        disp_factor = factor * disp_adj
        rot_factor = factor * rot_adj
        stone.x_offset = disp_factor * rng.uniform(-0.5, 0.5)
        stone.y_offset = disp_factor * rng.uniform(-0.5, 0.5)
        stone.rotation = rot_factor * rng.uniform(-_QUARTER_PI, _QUARTER_PI)


def animate_gravel(
    gravel: List[Stone],
    motion: float,
    disp_adj: float,
    rot_adj: float,
    rows: int = ROWS,
    rng: Optional[random.Random] = None,
) -> None:
    """Advance each stone one frame towards its target, or pick a new target or rest."""
    rng = rng or random.Random()
    for stone in gravel:
        if stone.cycles == 0:
            if rng.random() > motion:
                stone.x_velocity = 0.0
                stone.y_velocity = 0.0
                stone.rot_velocity = 0.0
                stone.cycles = rng.randrange(_MIN_CYCLES, _MAX_CYCLES)
            else:
                factor = stone.y / rows
                disp_factor = factor * disp_adj
                new_x = disp_factor * rng.uniform(-0.5, 0.5)
                new_y = disp_factor * rng.uniform(-0.5, 0.5)
                new_rot = factor * rot_adj * rng.uniform(-_QUARTER_PI, _QUARTER_PI)
                cycles = rng.randrange(_MIN_CYCLES, _MAX_CYCLES)
                stone.x_velocity = (new_x - stone.x_offset) / cycles
                stone.y_velocity = (new_y - stone.y_offset) / cycles
                stone.rot_velocity = (new_rot - stone.rotation) / cycles
                stone.cycles = cycles
        else:
            stone.x_offset += stone.x_velocity
            stone.y_offset += stone.y_velocity
            stone.rotation += stone.rot_velocity
            stone.cycles -= 1


def frame_filename(frames_dir: str, frame: int) -> str:
    """File name of a recorded frame, numbered with four digits."""
    return f"{frames_dir}/schotter{frame:04}.png"


@dataclass
class Controls:
    """The adjustable settings and the recording state.

    With ``frames_dir`` set, R starts and stops recording into it; otherwise
    R picks a new random seed.
    """

    disp_adj: float = 1.0
    rot_adj: float = 1.0
    motion: float = 0.5
    random_seed: Optional[int] = None
    frames_dir: Optional[str] = None
    recording: bool = False
    cur_frame: int = 0
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.random_seed is None:
            self.random_seed = self.rng.randrange(0, SEED_LIMIT)

    def adjust(self, key: Key) -> bool:
        """Apply a key press; return True when a frame should be captured."""
        if key is Key.R:
            if self.frames_dir is None:
                self.random_seed = self.rng.randrange(0, SEED_LIMIT)
            elif self.recording:
                self.recording = False
            else:
                os.makedirs(self.frames_dir, exist_ok=True)
                self.recording = True
                self.cur_frame = 0
        elif key is Key.S:
            return True
        elif key is Key.UP:
            self.disp_adj += 0.1
        elif key is Key.DOWN:
            if self.disp_adj > 0.0:
                self.disp_adj -= 0.1
        elif key is Key.RIGHT:
            self.rot_adj += 0.1
        elif key is Key.LEFT:
            if self.rot_adj > 0.0:
                self.rot_adj -= 0.1
        return False

    def recorded_frame(self, elapsed_frames: int) -> Optional[str]:
        """File to capture this frame into while recording every other frame."""
        if not self.recording or elapsed_frames % 2 != 0 or self.frames_dir is None:
            return None
        self.cur_frame += 1
        if self.cur_frame > MAX_RECORDED_FRAMES:
            self.recording = False
            return None
        return frame_filename(self.frames_dir, self.cur_frame)