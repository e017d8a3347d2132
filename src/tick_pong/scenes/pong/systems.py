"""
Per-tick simulation systems for the Pong scene.

Systems run in ascending ``order``: input (10), pause (12), the fixed step
(15), render (100). The fixed step runs CPU intent, paddles, ball movement,
collision and reset in slices of exactly ``FIXED_DT``, however long the frame
was.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from mini_arcade_core.spaces.geometry.bounds import Position2D
from mini_arcade_core.spaces.d2.physics2d import Velocity2D
from mini_arcade_core.utils import logger

from tick_pong.collision import Collision, collide_with_side
from tick_pong.constants import (
    FIXED_DT,
    MAX_STEPS_PER_FRAME,
    MAX_WIDTH,
    PADDLE_LIMIT,
)
from tick_pong.controllers.cpu import CpuPaddleController
from tick_pong.difficulty import cpu_config_for
from tick_pong.entities import Ball, Paddle
from tick_pong.scenes.pong.models import PongIntent, PongTickContext, PongWorld


def clamp_paddle_y(y: float) -> float:
    """Keep a paddle center inside the arena, off the walls."""
    return max(-PADDLE_LIMIT, min(PADDLE_LIMIT, y))


@dataclass
class PongPauseSystem:
    """System to toggle pausing the Pong game."""

    name: str = "pong_pause"
    order: int = 12  # right after input

    def step(self, ctx: PongTickContext):
        """Flip the paused flag if pause intent is triggered."""
        if not ctx.intent or not ctx.intent.pause:
            return

        ctx.world.paused = not ctx.world.paused
        logger.info(
            "Game paused" if ctx.world.paused else "Resuming game from pause"
        )


@dataclass
class CpuIntentSystem:
    """
    Simple CPU intent system for the enemy paddle.
    """

    name: str = "pong_cpu_intent"
    order: int = 15  # after input, before paddles

    controller: CpuPaddleController | None = None

    def enabled(self, _ctx: PongTickContext) -> bool:
        """Whether CPU control is enabled."""
        return self.controller is not None

    def step(self, ctx: PongTickContext):
        """Update intent for the CPU-controlled paddle."""
        if not self.enabled(ctx) or ctx.intent is None:
            return

        move = self.controller.compute_move()

        # override only the CPU side
        ctx.intent = PongIntent(
            move_player=ctx.intent.move_player,
            move_enemy=move,
            pause=ctx.intent.pause,
        )


@dataclass
class PaddleSystem:
    """
    Move paddles based on intent.
    """

    name: str = "pong_paddles"
    order: int = 20

    @staticmethod
    def _move(paddle: Optional[Paddle], move: float, dt: float):
        if paddle is None:
            return

        paddle.velocity.vy = move * paddle.speed

        x, y = paddle.position.x, paddle.position.y
        _, y = paddle.velocity.advance(x, y, dt)
        paddle.position = Position2D(x, clamp_paddle_y(y))

    def step(self, ctx: PongTickContext):
        """Move paddles based on intent."""
        if ctx.world.paused:
            return

        if ctx.intent is None:
            return

        self._move(ctx.world.player_paddle, ctx.intent.move_player, ctx.dt)
        self._move(ctx.world.enemy_paddle, ctx.intent.move_enemy, ctx.dt)


@dataclass
class BallMovementSystem:
    """
    Move the ball based on its velocity.
    """

    name: str = "pong_ball_move"
    order: int = 30

    def step(self, ctx: PongTickContext):
        """Move the ball based on its velocity."""
        if ctx.world.paused:
            return

        ball = ctx.world.ball
        x, y = ball.velocity.advance(ball.position.x, ball.position.y, ctx.dt)
        ball.position = Position2D(x, y)


def reflect(ball: Ball, side: Collision) -> bool:
    """
    Send the ball away from the side it touched.

    Returns True if the velocity actually changed direction, so a ball that
    stays in contact over several ticks only bounces once.
    """
    vel = ball.velocity
    if side is Collision.LEFT:
        reversed_ = vel.vx > 0
        vel.vx = -abs(vel.vx)
    elif side is Collision.RIGHT:
        reversed_ = vel.vx < 0
        vel.vx = abs(vel.vx)
    elif side is Collision.TOP:
        reversed_ = vel.vy < 0
        vel.vy = abs(vel.vy)
    else:
        reversed_ = vel.vy > 0
        vel.vy = -abs(vel.vy)
    return reversed_


@dataclass
class PongCollisionSystem:
    """
    Handle ball collisions with walls and paddles.
    """

    name: str = "pong_collision"
    order: int = 40

    def step(self, ctx: PongTickContext):
        """Bounce the ball off every collider it touches."""
        if ctx.world.paused:
            return

        ball = ctx.world.ball
        variant = ctx.world.variant

        for collider, paddle in ctx.world.colliders:
            side = collide_with_side(
                ball.collider, collider, x_wins_ties=variant.x_wins_ties
            )
            if side is None:
                continue

            logger.debug(f"collided: {side.value}")
            bounced = reflect(ball, side)

            speedup = variant.paddle_speedup
            if bounced and paddle is not None and speedup != 1.0:
                ball.velocity.vx *= speedup
                ball.velocity.vy *= speedup


@dataclass
class BallResetSystem:
    """
    Recenter the ball once it leaves the arena horizontally.
    """

    name: str = "pong_reset"
    order: int = 50

    def step(self, ctx: PongTickContext):
        """Reset the ball if it crossed the left or right edge."""
        if ctx.world.paused:
            return

        ball = ctx.world.ball
        x = ball.position.x
        if -MAX_WIDTH < x < MAX_WIDTH:
            return

        edge = "right" if x >= MAX_WIDTH else "left"
        logger.info(f"Ball left the arena on the {edge}, resetting")

        ball.position = Position2D(0.0, 0.0)
        if ctx.world.variant.reset == "INITIAL":
            vx, vy = ctx.world.initial_ball_velocity
            ball.velocity = Velocity2D(vx, vy)
        else:
            ball.velocity.vx = abs(ball.velocity.vx)


def build_cpu_system(world: PongWorld, difficulty: str) -> CpuIntentSystem:
    """CPU intent system driving the world's enemy paddle, if it has one."""
    enemy = world.enemy_paddle
    if enemy is None:
        return CpuIntentSystem()

    return CpuIntentSystem(
        controller=CpuPaddleController(
            paddle=enemy, ball=world.ball, config=cpu_config_for(difficulty)
        )
    )


@dataclass
class FixedStepSystem:
    """
    Run the simulation systems at a fixed rate.

    Frame time is banked in an accumulator and spent in ``FIXED_DT``
    slices; each slice runs every inner system once, in order, with
    ``ctx.dt`` set to ``FIXED_DT``. Whatever is left over waits for the
    next frame.
    """

    systems: list = field(default_factory=list)
    name: str = "pong_fixed_step"
    order: int = 15  # after input and pause, before render
    step_dt: float = FIXED_DT
    max_steps: int = MAX_STEPS_PER_FRAME
    accumulator: float = 0.0

    def step(self, ctx: PongTickContext):
        """Advance the simulation by as many fixed steps as the frame owes."""
        if ctx.world.paused:
            self.accumulator = 0.0
            return

        self.accumulator += ctx.dt
        frame_dt = ctx.dt
        systems = sorted(self.systems, key=lambda s: s.order)

        steps = 0
        ctx.dt = self.step_dt
        try:
            while self.accumulator >= self.step_dt:
                if steps == self.max_steps:
                    logger.debug(
                        f"Dropping {self.accumulator:.3f}s of simulation time"
                    )
                    self.accumulator = 0.0
                    break
                for system in systems:
                    system.step(ctx)
                self.accumulator -= self.step_dt
                steps += 1
        finally:
            ctx.dt = frame_dt
