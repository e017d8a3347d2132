"""
Pong scene Model
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from mini_arcade_core.scenes.sim_scene import (  # pyright: ignore[reportMissingImports]
    BaseIntent,
    BaseTickContext,
    BaseWorld,
)
from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D
from mini_arcade_core.spaces.d2.physics2d import Velocity2D

from tick_pong.collision import BoxCollider
from tick_pong.constants import (
    BALL_VELOCITY,
    MAX_WIDTH,
    PADDLE_SIZE,
    PADDLE_WALL_GAP,
)
from tick_pong.entities import Ball, Paddle, Wall, WallLocation
from tick_pong.variants import Variant


@dataclass
class PongWorld(BaseWorld):
    """
    Pong world state.

    :ivar variant (Variant): Rules in play.
    :ivar ball (Ball): The one ball.
    :ivar paddles (list[Paddle]): Player and optional enemy paddles.
    :ivar walls (list[Wall]): Top and bottom walls.
    :ivar initial_ball_velocity (tuple[float, float]): Serve velocity.
    :ivar paused (bool): Whether the simulation is frozen.
    """

    variant: Variant
    ball: Ball
    paddles: list[Paddle] = field(default_factory=list)
    walls: list[Wall] = field(default_factory=list)
    initial_ball_velocity: tuple[float, float] = BALL_VELOCITY
    paused: bool = False

    def _paddle(self, side: str) -> Optional[Paddle]:
        for paddle in self.paddles:
            if paddle.side == side:
                return paddle
        return None

    @property
    def player_paddle(self) -> Optional[Paddle]:
        """Keyboard-driven paddle, if any."""
        return self._paddle("PLAYER")

    @property
    def enemy_paddle(self) -> Optional[Paddle]:
        """CPU-driven paddle, if any."""
        return self._paddle("ENEMY")

    @property
    def colliders(self) -> list[tuple[BoxCollider, Optional[Paddle]]]:
        """
        Everything the ball can bounce off, walls first.

        Each entry pairs a collider with its paddle (None for walls).
        """
        entries: list[tuple[BoxCollider, Optional[Paddle]]] = [
            (wall.collider, None) for wall in self.walls
        ]
        entries.extend((paddle.collider, paddle) for paddle in self.paddles)
        return entries


@dataclass(frozen=True)
class PongIntent(BaseIntent):
    """
    Movement intent for one tick.

    :ivar move_player (float): Player paddle intent (-1.0 down to +1.0 up).
    :ivar move_enemy (float): Enemy paddle intent (-1.0 down to +1.0 up).
    :ivar pause (bool): Whether to toggle pause.
    """

    move_player: float = 0.0
    move_enemy: float = 0.0
    pause: bool = False


@dataclass
class PongTickContext(BaseTickContext[PongWorld, PongIntent]):
    """
    Context for a Pong scene tick.

    :ivar input_frame (InputFrame): Current input frame.
    :ivar dt (float): Delta time since last tick.

    :ivar world (PongWorld): Current Pong world state.
    :ivar commands (CommandQueue): Command queue.

    :ivar intent (Optional[PongIntent]): Player intent for this tick.
    """


def _spawn_paddle(x: float, side: str) -> Paddle:
    pad_w, pad_h = PADDLE_SIZE
    return Paddle(
        position=Position2D(x, 0.0),
        size=Size2D(pad_w, pad_h),
        velocity=Velocity2D(0.0, 0.0),
        side=side,
    )


def create_world(variant: Variant) -> PongWorld:
    """
    Spawn walls, paddles and the ball for ``variant``.

    The player paddle sits on the right edge, the enemy (when the variant
    has one) mirrors it on the left.
    """
    pad_w, _ = PADDLE_SIZE
    paddle_x = MAX_WIDTH - pad_w - PADDLE_WALL_GAP

    paddles = [_spawn_paddle(paddle_x, "PLAYER")]
    if variant.enemy:
        paddles.append(_spawn_paddle(-paddle_x, "ENEMY"))

    vx, vy = BALL_VELOCITY
    return PongWorld(
        variant=variant,
        ball=Ball(position=Position2D(0.0, 0.0), velocity=Velocity2D(vx, vy)),
        paddles=paddles,
        walls=[Wall.at(WallLocation.BOTTOM), Wall.at(WallLocation.TOP)],
        initial_ball_velocity=BALL_VELOCITY,
    )
