"""Colour tiles sampled from an image and sorted, and the grid they are laid out on."""

from __future__ import annotations

import math
from enum import Enum
from typing import Iterator, List, NamedTuple, Sequence, Tuple

from PIL import Image

from genart.vector import Rect, map_range

Rgba = Tuple[float, float, float, float]


class SortMode(Enum):
    """How sampled colours are ordered."""

    HUE = "hue"
    SATURATION = "saturation"
    BRIGHTNESS = "brightness"
    GRAYSCALE = "grayscale"
    NULL = "null"


class GridCell(NamedTuple):
    """One tile of the grid with the hue and saturation its position gives it."""

    rect: Rect
    hue: float
    saturation: float


def translate_type(pixel: Sequence[int]) -> Rgba:
    """An 8-bit RGBA pixel as four components in 0..1."""
    if len(pixel) != 4:
        raise ValueError(f"expected four channels, got {len(pixel)}")
    r, g, b, a = pixel
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def get_colors(img: Image.Image, tile_count: int, rect_size: float) -> List[Rgba]:
    """Sample the centre of each tile of a ``tile_count`` square grid, row by row."""
    rgba = img.convert("RGBA")
    colors = []
    for y in range(tile_count):
        for x in range(tile_count):
            px = x * rect_size + rect_size * 0.5
            py = y * rect_size + rect_size * 0.5
            colors.append(translate_type(rgba.getpixel((int(px), int(py)))))
    return colors


def _hsl(color: Rgba) -> Tuple[float, float, float]:
    """Hue in degrees, saturation and lightness of an RGB colour."""
    r, g, b = color[0], color[1], color[2]
    high, low = max(r, g, b), min(r, g, b)
    chroma = high - low
    lightness = (high + low) / 2.0
    if chroma == 0.0:
        return 0.0, 0.0, lightness
    if high == r:
        hue = 60.0 * math.fmod((g - b) / chroma, 6.0)
    elif high == g:
        hue = 60.0 * ((b - r) / chroma + 2.0)
    else:
        hue = 60.0 * ((r - g) / chroma + 4.0)
    saturation = chroma / (1.0 - abs(2.0 * lightness - 1.0))
    return hue, saturation, lightness


def sort_colors(colors: Sequence[Rgba], mode: SortMode) -> List[Rgba]:
    """A stably sorted copy of the colours; grayscale mode orders by alpha."""
    if mode is SortMode.NULL:
        return list(colors)
    if mode is SortMode.HUE:
        return sorted(colors, key=lambda c: math.radians(_hsl(c)[0]))
    if mode is SortMode.SATURATION:
        return sorted(colors, key=lambda c: _hsl(c)[1])
    if mode is SortMode.BRIGHTNESS:
        return sorted(colors, key=lambda c: _hsl(c)[2])
    return sorted(colors, key=lambda c: c[3])


def grid_cells(
    width: float, height: float, step_x: float, step_y: float
) -> Iterator[GridCell]:
    """Tiles covering a window centred on the origin, from its top-left, x outer."""
    if not step_x > 0.0 or not step_y > 0.0:
        raise ValueError("grid steps must be positive")
    window = Rect.from_wh(width, height)
    inc_x = 0.0
    while inc_x < width:
        inc_y = 0.0
        while inc_y < height:
            left = window.left + inc_x
            top = window.top - inc_y
            rect = Rect(left, left + step_x, top - step_y, top)
            hue = map_range(inc_x, 0.0, width, 0.0, 1.0)
            saturation = map_range(height - inc_y, 0.0, height, 0.0, 1.0)
            yield GridCell(rect, hue, saturation)
            inc_y += step_y
        inc_x += step_x