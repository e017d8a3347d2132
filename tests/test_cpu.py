from __future__ import annotations

import pytest
from mini_arcade_core.spaces.geometry.bounds import Position2D

from tick_pong.controllers import cpu
from tick_pong.controllers.cpu import CpuConfig, CpuPaddleController
from tick_pong.difficulty import DIFFICULTY_PRESETS, cpu_config_for


@pytest.fixture
def controller(make_world):
    world = make_world("versus")
    return CpuPaddleController(
        world.enemy_paddle,
        world.ball,
        config=CpuConfig(max_speed=200.0, dead_zone=5.0),
    )


def test_controller_sets_paddle_speed(controller):
    assert controller.paddle.speed == 200.0


@pytest.mark.parametrize(
    "ball_y, expected", [(50.0, 1.0), (-50.0, -1.0), (4.0, 0.0), (-4.9, 0.0)]
)
def test_compute_move_follows_ball(controller, ball_y, expected):
    controller.ball.position = Position2D(0.0, ball_y)
    assert controller.compute_move() == expected


def test_aim_error_shifts_target(monkeypatch, make_world):
    monkeypatch.setattr(cpu.random, "uniform", lambda a, b: b)
    world = make_world("versus")
    controller = CpuPaddleController(
        world.enemy_paddle,
        world.ball,
        config=CpuConfig(dead_zone=1.0, error_margin=20.0),
    )

    # ball level with the paddle, but the CPU aims 20 units high
    assert controller.compute_move() == 1.0


def test_difficulty_lookup():
    assert cpu_config_for("HARD") is DIFFICULTY_PRESETS["hard"]
    assert cpu_config_for("nightmare") is DIFFICULTY_PRESETS["normal"]
