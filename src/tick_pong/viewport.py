"""
Mapping from world coordinates to screen pixels.
"""

from __future__ import annotations

from tick_pong.constants import MAX_HEIGHT, MAX_WIDTH


def to_screen_rect(
    center: tuple[float, float], size: tuple[float, float]
) -> tuple[int, int, int, int]:
    """
    Convert a world-space box to a screen rect.

    World space is centered on the origin with y up; screen space has its
    origin at the top-left corner with y down.

    :param center: Center of the box in world space.
    :type center: tuple[float, float]

    :param size: (width, height) of the box.
    :type size: tuple[float, float]

    :return: (x, y, width, height) of the top-left anchored rect.
    :rtype: tuple[int, int, int, int]
    """
    (x, y), (w, h) = center, size
    left = x - w / 2 + MAX_WIDTH
    top = MAX_HEIGHT - (y + h / 2)
    return int(left), int(top), int(w), int(h)
