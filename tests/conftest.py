from __future__ import annotations

from types import SimpleNamespace

import pytest

from tick_pong.constants import FPS
from tick_pong.scenes.pong.models import PongIntent, create_world
from tick_pong.scenes.pong.systems import (
    BallMovementSystem,
    BallResetSystem,
    PaddleSystem,
    PongCollisionSystem,
)
from tick_pong.variants import VARIANT_PRESETS

DT = 1.0 / FPS


@pytest.fixture
def make_world():
    def _make(variant: str = "classic"):
        return create_world(VARIANT_PRESETS[variant])

    return _make


def make_ctx(world, intent=None):
    """Bare tick context carrying only what the systems read."""
    return SimpleNamespace(
        world=world, intent=intent or PongIntent(), dt=DT, commands=None
    )


def run_ticks(world, ticks=1, intent=None, systems=None):
    systems = systems or [
        PaddleSystem(),
        BallMovementSystem(),
        PongCollisionSystem(),
        BallResetSystem(),
    ]
    for _ in range(ticks):
        ctx = make_ctx(world, intent)
        for system in sorted(systems, key=lambda s: s.order):
            system.step(ctx)


@pytest.fixture
def tick():
    return run_ticks


@pytest.fixture
def ctx_for():
    return make_ctx
