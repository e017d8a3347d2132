from __future__ import annotations

from types import SimpleNamespace

import pytest
from mini_arcade_core.backend.keys import Key

from tick_pong.scenes.pong.models import PongIntent
from tick_pong.scenes.pong.scene import PongInputSystem


def intent_for(keys_down=(), keys_pressed=()):
    ctx = SimpleNamespace(
        input_frame=SimpleNamespace(
            keys_down=set(keys_down), keys_pressed=set(keys_pressed)
        )
    )
    return PongInputSystem().build_intent(ctx)


@pytest.mark.parametrize(
    "keys_down, expected",
    [
        ({Key.UP}, 1.0),
        ({Key.DOWN}, -1.0),
        ({Key.UP, Key.DOWN}, 0.0),
        (set(), 0.0),
    ],
)
def test_arrow_keys_drive_player_paddle(keys_down, expected):
    intent = intent_for(keys_down=keys_down)

    assert intent.move_player == expected
    assert intent.move_enemy == 0.0
    assert not intent.pause


def test_escape_requests_pause():
    assert intent_for(keys_pressed={Key.ESCAPE}) == PongIntent(pause=True)


def test_held_escape_does_not_repeat_pause():
    assert not intent_for(keys_down={Key.ESCAPE}).pause
