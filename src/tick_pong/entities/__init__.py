"""
Entities package for Tick Pong.
This package contains all entity definitions used in the game.
"""

from __future__ import annotations

from .ball import Ball
from .paddle import Paddle, PaddleSide
from .wall import Wall, WallLocation

__all__ = [
    "Ball",
    "Paddle",
    "PaddleSide",
    "Wall",
    "WallLocation",
]
