"""Tests for the compass direction resolver."""
import math

import pytest

from compass import get_direction_vector
from vector2 import Vector2


def test_cardinal_directions():
    assert get_direction_vector("east") == Vector2(1, 0)
    assert get_direction_vector("west") == Vector2(-1, 0)
    assert get_direction_vector("north") == Vector2(0, -1)
    assert get_direction_vector("south") == Vector2(0, 1)


def test_up_and_down_are_unit_diagonals():
    up = get_direction_vector("up")
    down = get_direction_vector("down")
    assert up.x == pytest.approx(math.sqrt(0.5))
    assert up.y == pytest.approx(-math.sqrt(0.5))
    assert down.x == pytest.approx(-math.sqrt(0.5))
    assert down.y == pytest.approx(math.sqrt(0.5))
    assert up.magnitude() == pytest.approx(1.0)


def test_case_insensitive():
    assert get_direction_vector("EAST") == get_direction_vector("east")
    assert get_direction_vector("North") == get_direction_vector("north")
    assert get_direction_vector(" south ") == Vector2(0, 1)


def test_unknown_directions_give_zero_bias():
    for d in ["northeast", "in", "out", "", "portal", "ea st"]:
        v = get_direction_vector(d)
        assert v == Vector2.zero(), d
        assert v.is_finite()


def test_non_string_input_gives_zero_bias():
    assert get_direction_vector(None) == Vector2.zero()
    assert get_direction_vector(3) == Vector2.zero()
