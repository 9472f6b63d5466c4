import random

import pytest

from genart.swarm import Dot, contract, create_dots
from genart.vector import Vec2


def test_create_dots_makes_one_fewer():
    assert len(create_dots(10, 500.0, random.Random(1))) == 9


def test_create_dots_positions_and_colors():
    dots = create_dots(200, 100.0, random.Random(2))
    for dot in dots:
        assert -50.0 <= dot.position.x <= 50.0
        assert -50.0 <= dot.position.y <= 50.0
        assert dot.color[:3] == (0.1, 0.1, 0.8)
        assert 0.0 <= dot.color[3] < 1.0


def test_contract_zero_speed_keeps_positions():
    dots = [Dot(Vec2(10.0, -4.0), (0.1, 0.1, 0.8, 0.5))]
    contract(dots, 0.0, 0.0)
    assert dots[0].position == Vec2(10.0, -4.0)


def test_contract_full_speed_reaches_origin():
    dots = [Dot(Vec2(10.0, -4.0), (0.1, 0.1, 0.8, 0.5))]
    contract(dots, 1.0, 1.0)
    assert dots[0].position == Vec2(0.0, 0.0)


def test_contract_axes_independent():
    dots = [Dot(Vec2(10.0, -4.0), (0.1, 0.1, 0.8, 0.5))]
    contract(dots, 0.5, 0.0)
    assert dots[0].position.x == pytest.approx(5.0)
    assert dots[0].position.y == pytest.approx(-4.0)