"""
Pong scenes, one per game variant, using mini-arcade-core.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.backend import Backend
from mini_arcade_core.backend.keys import Key
from mini_arcade_core.scenes.autoreg import (  # pyright: ignore[reportMissingImports]
    register_scene,
)
from mini_arcade_core.scenes.sim_scene import (  # pyright: ignore[reportMissingImports]
    Drawable,
    DrawCall,
    SimScene,
)
from mini_arcade_core.scenes.systems.builtins import (
    BaseRenderSystem,
    InputIntentSystem,
)
from mini_arcade_core.utils import logger

from tick_pong.constants import WHITE
from tick_pong.scenes.pong.models import (
    PongIntent,
    PongTickContext,
    PongWorld,
    create_world,
)
from tick_pong.scenes.pong.systems import (
    BallMovementSystem,
    BallResetSystem,
    FixedStepSystem,
    PaddleSystem,
    PongCollisionSystem,
    PongPauseSystem,
    build_cpu_system,
)
from tick_pong.variants import VARIANT_PRESETS
from tick_pong.viewport import to_screen_rect


@dataclass
class PongInputSystem(InputIntentSystem):
    """
    Process input and update intent.
    """

    name: str = "pong_input"

    def build_intent(self, ctx: PongTickContext):
        """Process input and update intent."""
        down = ctx.input_frame.keys_down

        # player paddle: UP/DOWN
        player = (1.0 if Key.UP in down else 0.0) - (
            1.0 if Key.DOWN in down else 0.0
        )

        return PongIntent(
            move_player=player,
            pause=Key.ESCAPE in ctx.input_frame.keys_pressed,
        )


class DrawWalls(Drawable[PongTickContext]):
    """
    Drawable to render the top and bottom walls.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        for wall in ctx.world.walls:
            x, y, w, h = to_screen_rect(wall.position, wall.size)
            backend.render.draw_rect(x, y, w, h, color=WHITE)


class DrawPaddles(Drawable[PongTickContext]):
    """
    Drawable to render every paddle.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        for paddle in ctx.world.paddles:
            x, y, w, h = to_screen_rect(
                (paddle.position.x, paddle.position.y),
                (paddle.size.width, paddle.size.height),
            )
            backend.render.draw_rect(x, y, w, h, color=WHITE)


class DrawBall(Drawable[PongTickContext]):
    """
    Drawable to render the ball.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        ball = ctx.world.ball
        diameter = ball.radius * 2
        x, y, w, h = to_screen_rect(
            (ball.position.x, ball.position.y), (diameter, diameter)
        )
        backend.render.draw_rect(x, y, w, h, color=WHITE)


@dataclass
class PongRenderSystem(BaseRenderSystem):
    """
    Render the Pong world.
    """

    name: str = "pong_render"
    order: int = 100

    def step(self, ctx: PongTickContext):
        """Render the Pong world."""

        ctx.draw_ops = [
            DrawCall(drawable=DrawWalls(), ctx=ctx),
            DrawCall(drawable=DrawPaddles(), ctx=ctx),
            DrawCall(drawable=DrawBall(), ctx=ctx),
        ]
        super().step(ctx)


class PongScene(SimScene[PongTickContext, PongWorld]):
    """
    Base Pong scene: spawns the world for ``variant_name`` and wires up
    the systems. Concrete scenes below pick the variant.
    """

    tick_context_type = PongTickContext
    variant_name: str = "classic"
    # set by the app from --difficulty before the game starts
    difficulty: str = "normal"

    def on_enter(self):
        variant = VARIANT_PRESETS[self.variant_name]
        self.world = create_world(variant)

        cpu_system = build_cpu_system(self.world, self.difficulty)

        logger.info(
            f"Entering pong scene ({variant.name}, {self.difficulty})"
        )
        self.systems.extend(
            [
                PongInputSystem(),
                PongPauseSystem(),
                FixedStepSystem(
                    systems=[
                        cpu_system,
                        PaddleSystem(),
                        BallMovementSystem(),
                        PongCollisionSystem(),
                        BallResetSystem(),
                    ]
                ),
                PongRenderSystem(),
            ]
        )


@register_scene("pong_classic")
class ClassicPongScene(PongScene):
    """Ball bounces between walls and the player's paddle."""

    variant_name = "classic"


@register_scene("pong_versus")
class VersusPongScene(PongScene):
    """Adds a CPU-driven enemy paddle."""

    variant_name = "versus"


@register_scene("pong_rally")
class RallyPongScene(PongScene):
    """Ball speeds up on every paddle hit."""

    variant_name = "rally"
