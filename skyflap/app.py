"""The window, input handling and main loop."""

from __future__ import annotations

import argparse
import os
import signal
import sys
import time

import numpy as np

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from skyflap.game import (  # noqa: E402
    DEFAULT_ATLAS_PATH,
    DEFAULT_SPRITE_LIST_PATH,
    FlappyBirdGame,
)
from skyflap.keys import InputState, Key  # noqa: E402
from skyflap.surface import Screen  # noqa: E402

SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 768
MAX_FRAME_TIME = 0.1
TITLE = "game"

_KEY_MAP = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_UP: Key.UP,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_RETURN: Key.RETURN,
}

# pygame numbers buttons from 1: left, middle, right, then the wheel.
_BUTTON_MAP = {1: 0, 2: 2, 3: 1, 4: 3}


def clamp_frame_time(seconds: float) -> float:
    """Limit a frame's duration so a long stall does not jump the game ahead."""
    return min(seconds, MAX_FRAME_TIME)


def key_for_pygame(pygame_key: int) -> Key | None:
    """Return the game key for a pygame key code, or None if it is not used."""
    return _KEY_MAP.get(pygame_key)


def _to_rgb(pixels: np.ndarray) -> np.ndarray:
    """Turn (height, width) 0xAARRGGBB pixels into a (width, height, 3) array."""
    rgb = np.empty(pixels.shape + (3,), dtype=np.uint8)
    rgb[..., 0] = (pixels >> 16) & 0xFF
    rgb[..., 1] = (pixels >> 8) & 0xFF
    rgb[..., 2] = pixels & 0xFF
    return rgb.transpose(1, 0, 2)


def _handle_event(event: pygame.event.Event, input_state: InputState) -> None:
    if event.type in (pygame.KEYDOWN, pygame.KEYUP):
        key = key_for_pygame(event.key)
        if key is not None:
            input_state.set_key(key, event.type == pygame.KEYDOWN)
    elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
        button = _BUTTON_MAP.get(event.button)
        if button is not None:
            input_state.set_mouse_button(button, event.type == pygame.MOUSEBUTTONDOWN)
    elif event.type == pygame.QUIT:
        input_state.schedule_quit()


def _run(
    game: FlappyBirdGame,
    input_state: InputState,
    screen: Screen,
    display: pygame.Surface,
) -> None:
    previous = time.monotonic_ns()
    while True:
        time.sleep(0)
        for event in pygame.event.get():
            _handle_event(event, input_state)
        input_state.set_cursor(*pygame.mouse.get_pos())

        now = time.monotonic_ns()
        if now == previous:
            continue
        game.act(clamp_frame_time((now - previous) * 1e-9))
        previous = now

        if input_state.quit_requested:
            break

        game.draw()
        pygame.surfarray.blit_array(display, _to_rgb(screen.pixels))
        pygame.display.flip()


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="skyflap", description="Fly between the pipes.")
    parser.add_argument("--atlas", default=DEFAULT_ATLAS_PATH, help="sprite atlas file")
    parser.add_argument(
        "--sprites", default=DEFAULT_SPRITE_LIST_PATH, help="sprite coordinate list"
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for pipe heights")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the game until it is closed."""
    args = _parse_args(argv)
    input_state = InputState()
    screen = Screen(SCREEN_WIDTH, SCREEN_HEIGHT)
    try:
        game = FlappyBirdGame(screen, input_state, args.atlas, args.sprites, args.seed)
    except (OSError, ValueError, KeyError) as error:
        print(f"{TITLE}: cannot load assets: {error}", file=sys.stderr)
        return 1

    pygame.init()
    try:
        try:
            display = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        except pygame.error as error:
            print(f"{TITLE}: cannot open display: {error}", file=sys.stderr)
            return 1
        pygame.display.set_caption(TITLE)

        def request_quit(signum, frame) -> None:
            input_state.schedule_quit()

        previous_int = signal.signal(signal.SIGINT, request_quit)
        previous_term = signal.signal(signal.SIGTERM, request_quit)
        try:
            _run(game, input_state, screen, display)
        finally:
            signal.signal(signal.SIGINT, previous_int)
            signal.signal(signal.SIGTERM, previous_term)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())