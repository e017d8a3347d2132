"""
CPU difficulty presets for Tick Pong.
"""

from __future__ import annotations

from tick_pong.controllers.cpu import CpuConfig

DIFFICULTY_PRESETS: dict[str, CpuConfig] = {
    "easy": CpuConfig(max_speed=150.0, dead_zone=8.0, error_margin=20.0),
    "normal": CpuConfig(),
    "hard": CpuConfig(max_speed=300.0, dead_zone=5.0),
}


def cpu_config_for(difficulty: str) -> CpuConfig:
    """Preset for ``difficulty``, falling back to ``normal``."""
    return DIFFICULTY_PRESETS.get(
        difficulty.lower(), DIFFICULTY_PRESETS["normal"]
    )
