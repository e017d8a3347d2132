"""
Minimal main application for Tick Pong.
"""

from __future__ import annotations

import argparse

from mini_arcade_core import (  # pyright: ignore[reportMissingImports]
    GameConfig,
    SceneRegistry,
    run_game,
)
from mini_arcade_core.utils import logger

# Justification: in editable installs, this module is provided by the package.
# pylint: disable=no-name-in-module
from mini_arcade_native_backend import (  # pyright: ignore[reportMissingImports]
    AudioSettings,
    BackendSettings,
    NativeBackend,
    RendererSettings,
    WindowSettings,
)

from tick_pong.constants import BACKGROUND, FPS, WINDOW_SIZE
from tick_pong.difficulty import DIFFICULTY_PRESETS
from tick_pong.scenes.pong.scene import PongScene
from tick_pong.variants import DEFAULT_VARIANT, VARIANT_PRESETS

# pylint: enable=no-name-in-module


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line options.

    :param argv: Arguments to parse, defaults to ``sys.argv[1:]``.
    :type argv: list[str], optional

    :return: Parsed options.
    :rtype: argparse.Namespace
    """
    parser = argparse.ArgumentParser(
        prog="tick-pong", description="Minimal Pong, in three iterations."
    )
    parser.add_argument(
        "--variant",
        choices=sorted(VARIANT_PRESETS),
        default=DEFAULT_VARIANT,
        help="which iteration of the game to play",
    )
    parser.add_argument(
        "--difficulty",
        choices=list(DIFFICULTY_PRESETS),
        default="normal",
        help="how well the CPU paddle plays",
    )
    return parser.parse_args(argv)


def run(argv: list[str] | None = None):
    """
    Main entry point for Tick Pong.

    - Auto-discovers scenes from the `tick_pong.scenes` package.
    - Sets up the game window with specified dimensions and background color.
    - Hands the chosen difficulty to the Pong scenes.
    - Runs the game with the initial scene set to the chosen variant.
    """
    args = parse_args(argv)
    PongScene.difficulty = args.difficulty

    scene_registry = SceneRegistry(_factories={}).discover(
        "tick_pong.scenes", "mini_arcade_core.scenes"
    )

    w_width, w_height = WINDOW_SIZE
    backend_settings = BackendSettings(
        window=WindowSettings(
            width=w_width,
            height=w_height,
            title=f"Tick Pong ({args.variant})",
            high_dpi=False,
        ),
        renderer=RendererSettings(background_color=BACKGROUND),
        audio=AudioSettings(enable=False),
    )
    backend = NativeBackend(settings=backend_settings)

    game_config = GameConfig(
        initial_scene=f"pong_{args.variant}",
        fps=FPS,
        backend=backend,
    )
    logger.info(f"Starting Tick Pong ({args.variant}, {args.difficulty})...")
    run_game(game_config=game_config, scene_registry=scene_registry)


if __name__ == "__main__":
    run()
