import numpy as np
import pytest
from PIL import Image

from genart.imaging import (
    add_color_array,
    dither_image,
    poster_color,
    posterize_image,
    posterize_pixel,
    reduce_color,
    reduce_pixel,
)


@pytest.mark.parametrize("factor", [1, 2, 3, 4.5, 8])
def test_reduce_color_never_exceeds_input(factor):
    for value in range(256):
        reduced = reduce_color(value, factor)
        assert 0 <= reduced <= value


@pytest.mark.parametrize("factor", [1, 2, 3, 4])
def test_reduce_color_keeps_extremes(factor):
    assert reduce_color(0, factor) == 0
    assert reduce_color(255, factor) == 255


def test_reduce_color_factor_one_is_binary():
    assert {reduce_color(v, 1) for v in range(255)} == {0}


def test_reduce_color_zero_factor():
    with pytest.raises(ValueError):
        reduce_color(10, 0)


def test_add_color_array_saturates():
    assert add_color_array((250, 250, 250, 250), (10, 10, 10, 10), 1.0) == (255,) * 4
    assert add_color_array((5, 5, 5, 5), (10, 10, 10, 10), -1.0) == (0,) * 4


def test_add_color_array_zero_factor_is_identity():
    first = (10, 20, 30, 40)
    assert add_color_array(first, (200, 200, 200, 200), 0.0) == first


def test_reduce_pixel_is_channelwise():
    pixel = (13, 130, 201, 255)
    assert reduce_pixel(pixel, 2) == tuple(reduce_color(c, 2) for c in pixel)


def test_dither_uniform_white_unchanged():
    img = np.full((6, 5, 4), 255, dtype=np.uint8)
    assert np.array_equal(dither_image(img, 1.0), img)


def test_dither_returns_new_array():
    rng = np.random.default_rng(3)
    img = rng.integers(0, 256, size=(8, 9, 4), dtype=np.uint8)
    original = img.copy()
    result = dither_image(img, 2.0)
    assert result.shape == img.shape
    assert np.array_equal(img, original)
    assert np.array_equal(result[0], original[0])


def test_dither_spreads_error_to_neighbours():
    img = np.zeros((4, 4, 4), dtype=np.uint8)
    img[1, 1] = 100
    result = dither_image(img, 1.0)
    assert np.array_equal(result[1, 1], img[1, 1])
    assert (result[1, 2] > 0).all()
    assert (result[2, 0] > 0).all()
    assert (result[2, 1] > 0).all()
    assert (result[2, 2] > 0).all()


def test_dither_accepts_pil_image():
    img = Image.new("RGBA", (4, 4), (255, 255, 255, 255))
    assert np.array_equal(dither_image(img, 1.0), np.full((4, 4, 4), 255, dtype=np.uint8))


def test_dither_rejects_rgb():
    with pytest.raises(ValueError):
        dither_image(np.zeros((4, 4, 3), dtype=np.uint8), 1.0)


def test_poster_color_range():
    areas, values = 255 / 3, 254 / 2
    results = [poster_color(c, areas, values) for c in range(256)]
    assert all(0 <= r <= 255 for r in results)
    assert results[0] == 0
    assert results[255] == 255
    assert results == sorted(results)


def test_posterize_pixel_is_channelwise():
    areas, values = 255 / 4, 254 / 3
    pixel = (3, 90, 180, 250)
    assert posterize_pixel(pixel, areas, values) == tuple(
        poster_color(c, areas, values) for c in pixel
    )


def test_posterize_image_interior_and_border():
    rng = np.random.default_rng(7)
    img = rng.integers(0, 256, size=(6, 7, 4), dtype=np.uint8)
    result = posterize_image(img, 3.0)
    allowed = {poster_color(c, 255 / 3.0, 254 / 2.0) for c in range(256)}
    assert set(np.unique(result[1:-1, 1:-1]).tolist()) <= allowed
    assert np.array_equal(result[0], img[0])
    assert np.array_equal(result[-1], img[-1])
    assert np.array_equal(result[:, 0], img[:, 0])
    assert np.array_equal(result[:, -1], img[:, -1])


def test_posterize_factor_one_rejected():
    with pytest.raises(ValueError):
        posterize_image(np.zeros((3, 3, 4), dtype=np.uint8), 1.0)