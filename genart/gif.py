"""Assemble frames or a folder of PNG images into an animated GIF."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import List, Optional, Sequence, Union

import numpy as np
from PIL import Image

DEFAULT_FOLDER = "./assets/images/gif/output/cube_flow"
DEFAULT_FPS = 25.0
DEFAULT_OUTPUT = "cube_flow1.gif"

Frame = Union[Image.Image, np.ndarray]
PathLike = Union[str, "os.PathLike[str]"]


def _as_image(frame: Frame) -> Image.Image:
    if isinstance(frame, Image.Image):
        return frame.convert("RGBA")
    array = np.asarray(frame, dtype=np.uint8)
    if array.ndim != 3 or array.shape[2] != 4:
        raise ValueError(f"expected an RGBA frame of shape (h, w, 4), got {array.shape}")
    return Image.fromarray(array).convert("RGBA")


def _write(images: List[Image.Image], frames_per_sec: float, output_path: PathLike) -> None:
    if not images:
        raise ValueError("a GIF needs at least one frame")
    if not frames_per_sec > 0.0:
        raise ValueError("frames per second must be positive")
    print(f"collecting {len(images)} frames")
    duration = max(1, round(1000.0 / frames_per_sec))
    first, *rest = images
    first.save(
        output_path,
        format="GIF",
        save_all=True,
        append_images=rest,
        duration=duration,
        loop=0,
        disposal=2,
    )


def images_to_gif(
    frames: Sequence[Frame], frames_per_sec: float, output_path: PathLike
) -> None:
    """Write RGBA frames, shown ``1 / frames_per_sec`` seconds each, as a GIF."""
    _write([_as_image(frame) for frame in frames], frames_per_sec, output_path)


def get_frames(path: PathLike) -> List[Path]:
    """Files directly inside a directory, sorted by name; subdirectories are skipped."""
    print(f"Beginning directory read for {str(path)!r}")
    with os.scandir(path) as entries:
        return sorted(Path(entry.path) for entry in entries if not entry.is_dir())


def folder_gif(path: PathLike, frames_per_sec: float, output_path: PathLike) -> None:
    """Turn every image file in a directory into one GIF frame."""
    images = []
    for frame_path in get_frames(path):
        with Image.open(frame_path) as img:
            images.append(img.convert("RGBA"))
    _write(images, frames_per_sec, output_path)
    print(f"gifski created {output_path}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Make an animated GIF from a folder of images.")
    parser.add_argument("folder", nargs="?", default=DEFAULT_FOLDER)
    parser.add_argument("--fps", type=float, default=DEFAULT_FPS)
    parser.add_argument("--output", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)
    folder_gif(args.folder, args.fps, args.output)
    return 0