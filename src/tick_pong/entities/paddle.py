"""
Paddle entity for Tick Pong.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D
from mini_arcade_core.spaces.d2.physics2d import Velocity2D

from tick_pong.collision import BoxCollider
from tick_pong.constants import PADDLE_SPEED

PaddleSide = Literal["PLAYER", "ENEMY"]


@dataclass
class Paddle:
    """
    Paddle entity for the Pong scene.

    :ivar position (Position2D): Center of the paddle.
    :ivar size (Size2D): Size of the paddle.
    :ivar velocity (Velocity2D): Velocity of the paddle.
    :ivar speed (float): Movement speed of the paddle (units/sec).
    :ivar side (Optional[PaddleSide]): Who drives the paddle.
    """

    position: Position2D
    size: Size2D
    velocity: Velocity2D
    speed: float = PADDLE_SPEED
    side: Optional[PaddleSide] = None

    @property
    def collider(self) -> BoxCollider:
        """Collider for the paddle."""
        return BoxCollider.from_size(
            (self.position.x, self.position.y),
            (self.size.width, self.size.height),
        )
