"""
Constants for Tick Pong.

World coordinates are centered on the origin with y growing upward.
"""

from __future__ import annotations

FPS = 60
FIXED_DT = 1.0 / FPS
# simulation steps allowed per frame, longer stalls are dropped
MAX_STEPS_PER_FRAME = 15
WINDOW_SIZE = (800, 600)

# Arena half extents
MAX_WIDTH = 400.0
MAX_HEIGHT = 300.0

# y coordinates of the wall centers
TOP_WALL = MAX_HEIGHT
BOTTOM_WALL = -MAX_HEIGHT
WALL_THICKNESS = 20.0

PADDLE_WALL_GAP = 5.0
PADDLE_SIZE = (5.0, 50.0)
PADDLE_SPEED = 300.0  # units/sec, 5 units per tick
PADDLE_LIMIT = MAX_HEIGHT - WALL_THICKNESS

BALL_RADIUS = 5.0
BALL_VELOCITY = (150.0, 60.0)  # units/sec, (2.5, 1) per tick

BACKGROUND = (0, 0, 0)
WHITE = (255, 255, 255)
