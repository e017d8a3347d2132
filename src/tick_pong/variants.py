"""
Rule sets for the three iterations of the game.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ResetMode = Literal["SERVE_RIGHT", "INITIAL"]


@dataclass(frozen=True)
class Variant:
    """
    Rules for one iteration of the game.

    - enemy: spawn a CPU-driven paddle on the left
    - x_wins_ties: contact classification picks left/right on equal offsets
    - paddle_speedup: velocity multiplier applied on each paddle hit
    - reset: how the ball's velocity is restored after leaving the arena
    """

    name: str
    enemy: bool = False
    x_wins_ties: bool = False
    paddle_speedup: float = 1.0
    reset: ResetMode = "SERVE_RIGHT"


VARIANT_PRESETS: dict[str, Variant] = {
    "classic": Variant(name="classic"),
    "versus": Variant(name="versus", enemy=True, x_wins_ties=True),
    "rally": Variant(
        name="rally",
        enemy=True,
        x_wins_ties=True,
        paddle_speedup=1.1,
        reset="INITIAL",
    ),
}

DEFAULT_VARIANT = "rally"
