"""Colour reduction, Floyd-Steinberg dithering and posterisation of RGBA images."""

from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

U8_MAX = 255

Pixel = Tuple[int, int, int, int]


def _round(value: float) -> float:
    """Round half away from zero."""
    if not math.isfinite(value):
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _to_u8(value: float) -> int:
    """Truncate towards zero and saturate into 0..255; NaN becomes 0."""
    if math.isnan(value):
        return 0
    return int(min(max(value, 0.0), float(U8_MAX)))


def _rgba_array(img) -> np.ndarray:
    pixels = np.array(img, dtype=np.uint8)
    if pixels.ndim != 3 or pixels.shape[2] != 4:
        raise ValueError("expected an RGBA image of shape (height, width, 4)")
    if pixels.shape[0] == 0 or pixels.shape[1] == 0:
        raise ValueError("image must not be empty")
    return pixels


def reduce_color(value: int, factor: float) -> int:
    """Quantise one channel down to ``factor`` levels above zero."""
    if factor == 0:
        raise ValueError("factor must be non-zero")
    level = math.floor(factor * value / U8_MAX)
    return _to_u8(_round((U8_MAX / factor) * level))


def add_color_array(first: Sequence[int], second: Sequence[int], factor: float) -> Pixel:
    """Channel-wise ``first + second * factor``, saturated to bytes."""
    return tuple(_to_u8(a + b * factor) for a, b in zip(first, second, strict=True))


def reduce_pixel(pixel: Sequence[int], factor: float) -> Pixel:
    return tuple(reduce_color(channel, factor) for channel in pixel)


def dither_image(img, factor: float) -> np.ndarray:
    """Spread each interior pixel's quantisation error to its neighbours.

    The pixel itself keeps its value; only the error is diffused. Returns a new
    array and leaves ``img`` untouched.
    """
    pixels = _rgba_array(img)
    height, width = pixels.shape[:2]
    rows = pixels.tolist()
    for y in range(1, height - 1):
        row, below = rows[y], rows[y + 1]
        for x in range(1, width - 1):
            current = row[x]
            diff = add_color_array(current, reduce_pixel(current, factor), -1.0)
            row[x + 1] = list(add_color_array(row[x + 1], diff, 7.0 / 16.0))
            below[x - 1] = list(add_color_array(below[x - 1], diff, 3.0 / 16.0))
            below[x] = list(add_color_array(below[x], diff, 5.0 / 16.0))
            below[x + 1] = list(add_color_array(below[x + 1], diff, 1.0 / 16.0))
    return np.array(rows, dtype=np.uint8)


def poster_color(color: int, areas: float, values: float) -> int:
    """Map one channel onto the posterised value of its area."""
    area_f = color / areas
    area = _to_u8(_round(area_f))
    if area > area_f:
        area -= 1
    value_f = values * area
    value = _to_u8(_round(value_f))
    if value > value_f:
        value = min(value + 1, U8_MAX)
    return value


def posterize_pixel(pixel: Sequence[int], areas: float, values: float) -> Pixel:
    return tuple(poster_color(channel, areas, values) for channel in pixel)


def posterize_image(img, factor: float) -> np.ndarray:
    """Posterise interior pixels to ``factor`` levels; the one-pixel border is kept."""
    if factor in (0, 1):
        raise ValueError("factor must be neither 0 nor 1")
    pixels = _rgba_array(img)
    areas = U8_MAX / factor
    values = (U8_MAX - 1.0) / (factor - 1.0)
    table = np.array(
        [poster_color(c, areas, values) for c in range(U8_MAX + 1)], dtype=np.uint8
    )
    pixels[1:-1, 1:-1] = table[pixels[1:-1, 1:-1]]
    return pixels