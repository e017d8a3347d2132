"""
Circle vs. axis-aligned box collision for Tick Pong.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Collision(Enum):
    """Side of a box that a circle touched."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class CircleCollider:
    """
    Bounding circle.

    :ivar center (tuple[float, float]): Center of the circle.
    :ivar radius (float): Radius of the circle.
    """

    center: tuple[float, float]
    radius: float


@dataclass(frozen=True)
class BoxCollider:
    """
    Axis-aligned bounding box.

    :ivar center (tuple[float, float]): Center of the box.
    :ivar half_size (tuple[float, float]): Half width and half height.
    """

    center: tuple[float, float]
    half_size: tuple[float, float]

    @classmethod
    def from_size(
        cls, center: tuple[float, float], size: tuple[float, float]
    ) -> "BoxCollider":
        """Build a box from its center and full size."""
        width, height = size
        return cls(center, (width / 2, height / 2))

    @property
    def min(self) -> tuple[float, float]:
        """Bottom-left corner."""
        return (
            self.center[0] - self.half_size[0],
            self.center[1] - self.half_size[1],
        )

    @property
    def max(self) -> tuple[float, float]:
        """Top-right corner."""
        return (
            self.center[0] + self.half_size[0],
            self.center[1] + self.half_size[1],
        )

    def closest_point(
        self, point: tuple[float, float]
    ) -> tuple[float, float]:
        """Point of the box closest to ``point``, itself when inside."""
        (min_x, min_y), (max_x, max_y) = self.min, self.max
        x, y = point
        return (max(min_x, min(max_x, x)), max(min_y, min(max_y, y)))

    def intersects_circle(self, circle: CircleCollider) -> bool:
        """Whether the circle touches or overlaps the box."""
        cx, cy = self.closest_point(circle.center)
        dx = circle.center[0] - cx
        dy = circle.center[1] - cy
        return dx * dx + dy * dy <= circle.radius * circle.radius


def collide_with_side(
    ball: CircleCollider,
    box: BoxCollider,
    *,
    x_wins_ties: bool = False,
) -> Optional[Collision]:
    """
    Test a ball against a box and classify the contact side.

    The side comes from the offset between the ball center and the box's
    closest point: the larger absolute component picks the axis, its sign
    picks the side.

    :param ball: The ball's bounding circle.
    :type ball: CircleCollider

    :param box: The collider's bounding box.
    :type box: BoxCollider

    :param x_wins_ties: Pick left/right when both offset components are equal.
    :type x_wins_ties: bool

    :return: The touched side, or None when there is no contact.
    :rtype: Optional[Collision]
    """
    if not box.intersects_circle(ball):
        return None

    closest_x, closest_y = box.closest_point(ball.center)
    offset_x = ball.center[0] - closest_x
    offset_y = ball.center[1] - closest_y

    if x_wins_ties:
        horizontal = abs(offset_x) >= abs(offset_y)
    else:
        horizontal = abs(offset_x) > abs(offset_y)

    if horizontal:
        return Collision.LEFT if offset_x < 0 else Collision.RIGHT
    return Collision.TOP if offset_y > 0 else Collision.BOTTOM
