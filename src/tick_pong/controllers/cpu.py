"""
Minimal CPU paddle controller for Tick Pong.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from tick_pong.entities import Ball, Paddle


@dataclass(frozen=True)
class CpuConfig:
    """
    Basic CPU difficulty settings.

    - max_speed: how fast the CPU paddle can move (units/sec)
    - dead_zone: how close to the ball center before it stops moving
    - error_margin: max vertical aim error, picked once per controller
    """

    max_speed: float = 240.0
    # at least half of max_speed * FIXED_DT, or the paddle jitters
    dead_zone: float = 4.0
    error_margin: float = 0.0


class CpuPaddleController:
    """
    Very simple CPU:
    - Looks at the ball's center Y.
    - Moves paddle up/down to follow it at a fixed speed.
    """

    def __init__(
        self,
        paddle: Paddle,
        ball: Ball,
        *,
        config: CpuConfig | None = None,
    ):
        """
        :param paddle: The paddle to control.
        :type paddle: Paddle

        :param ball: The ball to track.
        :type ball: Ball

        :param config: The CPU configuration settings.
        :type config: CpuConfig, optional
        """
        self.paddle = paddle
        self.ball = ball
        self.config = config or CpuConfig()

        self.paddle.speed = self.config.max_speed
        self._aim_offset_y = self._new_offset()

    def _new_offset(self) -> float:
        # vertical error in [-error_margin, error_margin]
        m = self.config.error_margin
        return random.uniform(-m, m) if m > 0 else 0.0

    def compute_move(self) -> float:
        """
        Decide paddle move direction:
            +1.0 = up
            0.0 = stop
            -1.0 = down
        """
        target_y = self.ball.position.y + self._aim_offset_y
        diff = target_y - self.paddle.position.y

        if abs(diff) < self.config.dead_zone:
            return 0.0

        return 1.0 if diff > 0 else -1.0
