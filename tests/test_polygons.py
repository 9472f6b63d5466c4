import math
import random

import pytest

from genart.polygons import (
    TILE_POINTS,
    PolyThing,
    corner,
    gen_line_points,
    new_things,
    poly_points,
    tile_grid,
)
from genart.vector import Vec2


def test_corner_zero_points_up():
    assert tuple(corner(0, 5.0, 6)) == pytest.approx((0.0, 5.0))


def test_corners_lie_on_circle():
    for i in range(7):
        assert corner(i, 3.0, 7).length() == pytest.approx(3.0)


def test_poly_points_closed():
    poly = poly_points(5, 2.0)
    assert len(poly) == 5 + 1
    assert poly[0] == poly[-1]


def test_poly_points_needs_sides():
    with pytest.raises(ValueError):
        poly_points(0, 1.0)


def test_gen_line_points_half_step_gives_midpoints():
    poly = poly_points(4, 1.0)
    points = gen_line_points(0.5, poly)
    assert len(points) == len(poly)
    midpoint = (poly[0] + poly[1]) * 0.5
    assert tuple(points[0]) == pytest.approx(tuple(midpoint))
    assert points[-1] == poly[0]


def test_gen_line_points_tenth_step_pass_count():
    poly = poly_points(4, 1.0)
    assert len(gen_line_points(0.1, poly)) == 9 * len(poly)


def test_gen_line_points_empty_poly():
    assert gen_line_points(0.5, []) == [Vec2(0.0, 0.0)]


def test_gen_line_points_rejects_bad_step():
    with pytest.raises(ValueError):
        gen_line_points(0.0, poly_points(3, 1.0))


def test_polything_update():
    thing = PolyThing(10.0, 3, 0.5, 0.0, (0.1, 0.6, 0.6, 0.8))
    thing.update(20.0, 0.25)
    assert thing.radius == 20.0
    assert all(p.length() == pytest.approx(20.0) for p in thing.poly)
    assert thing.points == gen_line_points(0.25, thing.poly)


def test_polything_set_angle():
    thing = PolyThing(10.0, 4, 0.5, 0.0, (0.1, 0.6, 0.6, 0.8))
    thing.set_angle(thing.angle + 1.5)
    assert thing.angle == pytest.approx(1.5)


def test_new_things():
    things = new_things(200.0, 0.1, 3, 7, random.Random(1))
    assert [t.number_of_sides for t in things] == [3, 4, 5, 6]
    assert things[0].color[0] == pytest.approx(0.1)
    hues = [t.color[0] for t in things]
    assert hues == sorted(hues)
    assert all(0.0 <= t.angle < math.tau for t in things)
    assert all(t.radius == 200.0 for t in things)


def test_tile_grid():
    start = Vec2(-250.0, 250.0)
    grid = tile_grid(start, 10.0, 15.0, 3)
    assert len(grid) == 3 * 3
    assert all(len(tile) == len(TILE_POINTS) for tile in grid)
    assert grid[0] == [start + p * 10.0 for p in TILE_POINTS]
    for first, below in zip(grid[0], grid[1]):
        assert below.x == pytest.approx(first.x)
        assert below.y == pytest.approx(first.y - 15.0)
    for first, right in zip(grid[0], grid[3]):
        assert right.x == pytest.approx(first.x + 15.0)
        assert right.y == pytest.approx(first.y)