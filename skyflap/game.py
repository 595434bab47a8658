"""The bird-and-pipes game built from scene objects and components."""

from __future__ import annotations

import math
import random
from os import PathLike

from skyflap.components.behaviour import (
    BirdController,
    DelayedCallback,
    KeyTrigger,
    PipeHeightRandomizer,
    PositionRecycler,
    PositionResetter,
    ScoreManager,
)
from skyflap.components.physics import BoxCollider, Rigidbody
from skyflap.components.rendering import (
    Camera,
    CounterRenderer,
    SpriteAnimator,
    SpriteRenderer,
    TiledRenderer,
)
from skyflap.keys import InputState, Key
from skyflap.random_source import UniformRNG
from skyflap.scene import Scene
from skyflap.sprite_factory import SpriteFactory
from skyflap.surface import Surface
from skyflap.vector2 import Vector2

DEFAULT_ATLAS_PATH = "assets/atlas.bin"
DEFAULT_SPRITE_LIST_PATH = "assets/atlas.txt"

VIEWPORT_HEIGHT = 192.0

PIPE_INTERVAL = 90.0
PIPE_SIZE = Vector2(26.0, 160.0)
PIPE_SPEED = Vector2(-50.0, 0.0)
PIPE_GAP = 45.0
GROUND_Y = VIEWPORT_HEIGHT - 25.0
GROUND_TILE_PERIOD = 12.0
RESTART_DELAY = 3.0


class FlappyBirdGame:
    """Builds the scene and drives it each frame."""

    def __init__(
        self,
        screen: Surface,
        input_state: InputState | None = None,
        atlas_path: str | PathLike = DEFAULT_ATLAS_PATH,
        sprite_list_path: str | PathLike = DEFAULT_SPRITE_LIST_PATH,
        seed: int | None = None,
    ) -> None:
        self._screen = screen
        self._input = input_state if input_state is not None else InputState()
        self._sprites = SpriteFactory(
            atlas_path, sprite_list_path, screen.height / VIEWPORT_HEIGHT
        )
        self._seeds = random.Random(seed) if seed is not None else None
        self._scene = Scene()
        self._build_scene()

    @property
    def scene(self) -> Scene:
        return self._scene

    @property
    def input_state(self) -> InputState:
        return self._input

    def act(self, dt: float) -> None:
        """Advance the game by dt seconds; Escape asks to quit."""
        if self._input.is_key_pressed(Key.ESCAPE):
            self._input.schedule_quit()
        self._scene.update(dt)

    def draw(self) -> None:
        self._scene.draw()

    def _next_seed(self) -> int | None:
        return self._seeds.getrandbits(32) if self._seeds is not None else None

    def _build_scene(self) -> None:
        scene = self._scene
        sprites = self._sprites
        screen = self._screen
        scene.clear()

        viewport_width = VIEWPORT_HEIGHT / screen.height * screen.width
        centre_x = viewport_width * 0.5

        scene.create_object(Vector2()).add_component(Camera(screen, sprites.scale))

        scene.create_object(Vector2(0.0, -40.0)).add_component(
            TiledRenderer(sprites.create("bg_day"), 0, Vector2(float(screen.width), 1.0))
        )

        pipe_count = math.ceil((viewport_width + PIPE_SIZE.x) / PIPE_INTERVAL)
        for i in range(pipe_count):
            position = Vector2(i * PIPE_INTERVAL + viewport_width + PIPE_SIZE.x, 0.0)

            pipe_up = scene.create_object(position)
            pipe_up.add_component(SpriteRenderer(sprites.create("pipe_up"), 20))
            pipe_up.add_component(Rigidbody(PIPE_SPEED, Vector2()))
            pipe_up.add_component(BoxCollider(PIPE_SIZE, 1))

            pipe_down = scene.create_object(position)
            pipe_down.add_component(SpriteRenderer(sprites.create("pipe_down"), 20))
            pipe_down.add_component(Rigidbody(PIPE_SPEED, Vector2()))
            pipe_down.add_component(BoxCollider(PIPE_SIZE, 1))
            pipe_down.add_component(
                PositionRecycler(-PIPE_SIZE.x * 0.5, pipe_count * PIPE_INTERVAL)
            )
            pipe_down.add_component(
                PipeHeightRandomizer(
                    PIPE_SIZE.y + PIPE_GAP,
                    UniformRNG(45.0, GROUND_Y - 45.0, self._next_seed()),
                    pipe_up,
                )
            )
            pipe_down.add_component(PositionResetter())

        ground = scene.create_object(Vector2(0.0, GROUND_Y))
        ground.add_component(
            TiledRenderer(
                sprites.create("land"),
                30,
                Vector2(screen.width + GROUND_TILE_PERIOD * sprites.scale, 1.0),
            )
        )
        ground.add_component(Rigidbody(PIPE_SPEED, Vector2()))
        ground.add_component(PositionRecycler(-GROUND_TILE_PERIOD, GROUND_TILE_PERIOD))

        scene.create_object(Vector2(centre_x, GROUND_Y)).add_component(
            BoxCollider(Vector2(viewport_width, 0.0), 1)
        )
        scene.create_object(Vector2(centre_x, -20.0)).add_component(
            BoxCollider(Vector2(viewport_width, 0.0), 1)
        )

        score_display = scene.create_object(Vector2(centre_x, 20.0))
        score_display.add_component(
            CounterRenderer(
                (sprites.create(f"number_score_{digit:02d}") for digit in range(10)), 100
            )
        )
        score_manager = score_display.add_component(ScoreManager())

        score_trigger = scene.create_object(
            Vector2(viewport_width + PIPE_SIZE.x, VIEWPORT_HEIGHT * 0.5)
        )
        score_trigger.add_component(Rigidbody(PIPE_SPEED, Vector2()))
        score_collider = score_trigger.add_component(
            BoxCollider(Vector2(0.0, VIEWPORT_HEIGHT), 1)
        )
        score_trigger.add_component(PositionResetter())

        ready_label = scene.create_object(
            Vector2(centre_x, VIEWPORT_HEIGHT * 0.3)
        ).add_component(SpriteRenderer(sprites.create("text_ready"), 120))

        tutorial_picture = scene.create_object(
            Vector2(centre_x, VIEWPORT_HEIGHT * 0.6)
        ).add_component(SpriteRenderer(sprites.create("tutorial"), 110))

        game_over_label = scene.create_object(
            Vector2(centre_x, VIEWPORT_HEIGHT * 0.3)
        ).add_component(SpriteRenderer(sprites.create("text_game_over"), 130))
        game_over_label.enabled = False

        bird = scene.create_object(Vector2(60.0, VIEWPORT_HEIGHT * 0.4))
        bird.add_component(SpriteRenderer(sprites.create("bird0_0"), 10))
        bird.add_component(Rigidbody(Vector2(), Vector2(0.0, 500.0)))
        bird_collider = bird.add_component(BoxCollider(Vector2(8.0, 8.0), 0))
        bird.add_component(BirdController(Key.SPACE, -160.0, 220.0, self._input))
        bird_animator = bird.add_component(
            SpriteAnimator(
                [sprites.create(name) for name in ("bird0_0", "bird0_1", "bird0_2", "bird0_1")],
                10.0,
            )
        )
        bird.add_component(PositionResetter())

        state_manager = scene.create_object()

        start_trigger = state_manager.add_component(KeyTrigger(Key.SPACE, self._input))

        def start() -> None:
            tutorial_picture.enabled = False
            ready_label.enabled = False
            start_trigger.enabled = False
            scene.set_physics_time_scale(1.0)

        start_trigger.set_callback(start)

        resettables = scene.get_components(PositionResetter)
        reset_trigger = state_manager.add_component(DelayedCallback(RESTART_DELAY))

        def restart() -> None:
            game_over_label.enabled = False
            reset_trigger.reset(RESTART_DELAY)
            reset_trigger.enabled = False
            score_manager.reset()

            tutorial_picture.enabled = True
            ready_label.enabled = True
            start_trigger.enabled = True

            bird_animator.enabled = True

            for resettable in resettables:
                resettable.reset_position()
                randomizer = resettable.get_component(PipeHeightRandomizer)
                if randomizer is not None:
                    randomizer.randomize_height()

        reset_trigger.set_callback(restart)
        reset_trigger.enabled = False

        def on_bird_collision(other: BoxCollider) -> None:
            if other is score_collider:
                score_manager.increment()
                score_collider.game_object.position.x += PIPE_INTERVAL
            else:
                scene.set_physics_time_scale(0.0)
                bird_animator.enabled = False
                game_over_label.enabled = True
                reset_trigger.enabled = True

        bird_collider.set_collision_callback(on_bird_collision)

        scene.set_physics_time_scale(0.0)
        scene.initialize()