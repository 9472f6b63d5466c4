import math
import random

import pytest

from genart.vector import Vec2
from genart.walks import (
    cardinal_step,
    custom_step,
    gaussian_step,
    mouse_step,
    skew_step,
    walk,
)


class _FixedRng:
    def __init__(self, values):
        self._values = iter(values)

    def random(self):
        return next(self._values)


@pytest.mark.parametrize(
    "r, expected",
    [
        (0.1, Vec2(1.0, 0.0)),
        (0.25, Vec2(-1.0, 0.0)),
        (0.6, Vec2(0.0, 1.0)),
        (0.9, Vec2(0.0, -1.0)),
    ],
)
def test_cardinal_step_quarters(r, expected):
    assert cardinal_step(r) == expected


def test_skew_step_within_bounds_and_leans():
    rng = random.Random(3)
    steps = [skew_step(rng) for _ in range(20000)]
    assert all(-1.5 <= s.x <= 1.5 and -1.5 <= s.y <= 1.5 for s in steps)
    mean_x = sum(s.x for s in steps) / len(steps)
    mean_y = sum(s.y for s in steps) / len(steps)
    assert mean_x > 0.0
    assert mean_y < 0.0


def test_mouse_step_towards_mouse_has_length_two():
    step = mouse_step(Vec2(1.0, 1.0), Vec2(4.0, 5.0), _FixedRng([0.1]))
    assert step.length() == pytest.approx(2.0)
    assert step.x * 4.0 == pytest.approx(step.y * 3.0)


def test_mouse_step_on_mouse_stays():
    assert mouse_step(Vec2(2.0, 2.0), Vec2(2.0, 2.0), _FixedRng([0.2])) == Vec2()


def test_mouse_step_random_branch_bounded():
    step = mouse_step(Vec2(), Vec2(10.0, 0.0), _FixedRng([0.7, 0.0, 1.0]))
    assert step.x == pytest.approx(-1.0)
    assert step.y == pytest.approx(1.0)


def test_custom_step_bounded_by_max_size():
    rng = random.Random(5)
    for _ in range(1000):
        step = custom_step(50.0, rng)
        assert step.length() <= 50.0 * math.sqrt(0.5) + 1e-9


def test_custom_step_zero_size():
    assert custom_step(0.0, random.Random(1)) == Vec2()


def test_custom_step_negative_size_rejected():
    with pytest.raises(ValueError):
        custom_step(-1.0)


def test_gaussian_step_is_axis_aligned():
    rng = random.Random(9)
    for _ in range(200):
        step = gaussian_step(rng)
        assert step.x == 0.0 or step.y == 0.0


def test_walk_yields_start_then_each_step():
    positions = list(walk(Vec2(1.0, 2.0), 3, lambda p: Vec2(1.0, 0.0)))
    assert len(positions) == 4
    assert positions[0] == Vec2(1.0, 2.0)
    assert positions[-1] == Vec2(4.0, 2.0)


def test_walk_step_sees_current_position():
    positions = list(walk(Vec2(1.0, 1.0), 2, lambda p: p))
    assert positions[1] == Vec2(2.0, 2.0)
    assert positions[2] == Vec2(4.0, 4.0)


def test_walk_negative_steps_rejected():
    with pytest.raises(ValueError):
        list(walk(Vec2(), -1, lambda p: p))