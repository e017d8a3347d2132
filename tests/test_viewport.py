from __future__ import annotations

from tick_pong.viewport import to_screen_rect


def test_origin_maps_to_screen_center():
    assert to_screen_rect((0.0, 0.0), (10.0, 10.0)) == (395, 295, 10, 10)


def test_y_axis_is_flipped():
    _, top_y, _, _ = to_screen_rect((0.0, 100.0), (10.0, 10.0))
    _, bottom_y, _, _ = to_screen_rect((0.0, -100.0), (10.0, 10.0))
    assert top_y < bottom_y


def test_top_wall_hangs_off_the_screen_edge():
    assert to_screen_rect((0.0, 300.0), (820.0, 20.0)) == (-10, -10, 820, 20)
