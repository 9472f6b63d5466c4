"""Keyboard handling and image output paths shared by the sketches."""

from __future__ import annotations

from datetime import date, datetime, timezone
from enum import Enum
from pathlib import Path
from typing import NamedTuple, Optional, Union

STEP = 0.001


class Key(Enum):
    """Keys the sketches respond to."""

    A = "a"
    D = "d"
    E = "e"
    R = "r"
    S = "s"
    V = "v"
    W = "w"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    COMMA = "comma"
    STOP = "stop"
    SPACE = "space"
    ESCAPE = "escape"
    KEY1 = "1"
    KEY2 = "2"
    KEY3 = "3"
    KEY4 = "4"
    KEY5 = "5"


class KeyOutcome(NamedTuple):
    """The adjusted fields after a key press, and whether a frame should be saved."""

    up_down: float
    left_right: float
    capture: bool


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


def save_path(
    assets_path: Union[str, Path], exe_name: str, today: Optional[date] = None
) -> Path:
    """Directory for today's images of the named sketch."""
    day = today if today is not None else _utc_today()
    stamp = f"{day.year}-{day.month:02}-{day.day:02}"
    return Path(assets_path) / "images" / stamp / exe_name


def frame_path(
    assets_path: Union[str, Path],
    exe_name: str,
    elapsed_frames: int,
    today: Optional[date] = None,
) -> Path:
    """PNG path for a captured frame, named by its zero-padded frame number."""
    return save_path(assets_path, exe_name, today) / f"{elapsed_frames:03}.png"


def key_pressed(up_down: float, left_right: float, key: Key) -> KeyOutcome:
    """Apply the common arrow-key adjustments; S asks the caller to capture a frame."""
    if key is Key.S:
        return KeyOutcome(up_down, left_right, True)
    if key is Key.UP:
        up_down += STEP
    elif key is Key.DOWN:
        if up_down > 0.0:
            up_down -= STEP
    elif key is Key.RIGHT:
        left_right += STEP
    elif key is Key.LEFT:
        if left_right > 0.0:
            left_right -= STEP
    return KeyOutcome(up_down, left_right, False)