from __future__ import annotations

import pytest

from tick_pong.collision import (
    BoxCollider,
    CircleCollider,
    Collision,
    collide_with_side,
)

BOX = BoxCollider.from_size((0.0, 0.0), (20.0, 20.0))


def test_from_size_halves_the_size():
    box = BoxCollider.from_size((1.0, 2.0), (10.0, 4.0))
    assert box.half_size == (5.0, 2.0)
    assert box.min == (-4.0, 0.0)
    assert box.max == (6.0, 4.0)


def test_closest_point_clamps_to_the_box():
    assert BOX.closest_point((30.0, 5.0)) == (10.0, 5.0)
    assert BOX.closest_point((-30.0, -30.0)) == (-10.0, -10.0)
    assert BOX.closest_point((3.0, 4.0)) == (3.0, 4.0)


def test_no_contact_returns_none():
    assert collide_with_side(CircleCollider((16.0, 0.0), 5.0), BOX) is None


def test_touching_counts_as_contact():
    ball = CircleCollider((15.0, 0.0), 5.0)
    assert collide_with_side(ball, BOX) is Collision.RIGHT


@pytest.mark.parametrize(
    "center, expected",
    [
        ((-14.0, 0.0), Collision.LEFT),
        ((14.0, 2.0), Collision.RIGHT),
        ((3.0, 14.0), Collision.TOP),
        ((-3.0, -14.0), Collision.BOTTOM),
    ],
)
def test_side_follows_the_larger_offset(center, expected):
    side = collide_with_side(CircleCollider(center, 5.0), BOX)
    assert side is expected


def test_diagonal_tie_goes_vertical_when_strict():
    ball = CircleCollider((15.0, 15.0), 10.0)
    assert collide_with_side(ball, BOX) is Collision.TOP


def test_diagonal_tie_goes_horizontal_when_x_wins():
    ball = CircleCollider((15.0, 15.0), 10.0)
    assert collide_with_side(ball, BOX, x_wins_ties=True) is Collision.RIGHT


def test_center_inside_box():
    ball = CircleCollider((0.0, 0.0), 5.0)
    assert collide_with_side(ball, BOX) is Collision.BOTTOM
    assert collide_with_side(ball, BOX, x_wins_ties=True) is Collision.RIGHT

