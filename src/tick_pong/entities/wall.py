"""
Static walls bounding the top and bottom of the arena.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tick_pong.collision import BoxCollider
from tick_pong.constants import (
    BOTTOM_WALL,
    MAX_WIDTH,
    TOP_WALL,
    WALL_THICKNESS,
)


class WallLocation(Enum):
    """Where a wall sits in the arena."""

    BOTTOM = "bottom"
    TOP = "top"

    def position(self) -> tuple[float, float]:
        """Center of the wall."""
        if self is WallLocation.TOP:
            return (0.0, TOP_WALL)
        return (0.0, BOTTOM_WALL)

    def size(self) -> tuple[float, float]:
        """(width, height) of the wall."""
        arena_height = TOP_WALL - BOTTOM_WALL
        arena_width = MAX_WIDTH * 2
        if arena_height <= 0 or arena_width <= 0:
            raise ValueError(
                f"Arena must have a positive size, got "
                f"{arena_width}x{arena_height}"
            )

        return (arena_width + WALL_THICKNESS, WALL_THICKNESS)


@dataclass(frozen=True)
class Wall:
    """
    Wall entity for the Pong scene.

    :ivar position (tuple[float, float]): Center of the wall.
    :ivar size (tuple[float, float]): Size of the wall.
    """

    position: tuple[float, float]
    size: tuple[float, float]

    @classmethod
    def at(cls, location: WallLocation) -> "Wall":
        """Build the wall for ``location``."""
        return cls(position=location.position(), size=location.size())

    @property
    def collider(self) -> BoxCollider:
        """Collider for the wall."""
        return BoxCollider.from_size(self.position, self.size)
