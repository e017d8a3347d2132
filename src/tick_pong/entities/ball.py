"""
Ball entity for the Pong scene.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.spaces.geometry.bounds import Position2D
from mini_arcade_core.spaces.d2.physics2d import Velocity2D

from tick_pong.collision import CircleCollider
from tick_pong.constants import BALL_RADIUS


@dataclass
class Ball:
    """
    Ball entity for the Pong scene.

    :ivar position (Position2D): Center of the ball.
    :ivar velocity (Velocity2D): Velocity of the ball (units/sec).
    :ivar radius (float): Radius of the ball.
    """

    position: Position2D
    velocity: Velocity2D
    radius: float = BALL_RADIUS

    @property
    def collider(self) -> CircleCollider:
        """Collider for the ball."""
        return CircleCollider((self.position.x, self.position.y), self.radius)
