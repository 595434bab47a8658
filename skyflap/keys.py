"""Keys and the shared input state read by game components."""

from __future__ import annotations

from enum import IntEnum

MOUSE_BUTTON_COUNT = 5


class Key(IntEnum):
    """Keys the game can query."""

    ESCAPE = 0
    SPACE = 1
    LEFT = 2
    UP = 3
    RIGHT = 4
    DOWN = 5
    RETURN = 6


class InputState:
    """Current keyboard, mouse and quit state."""

    def __init__(self) -> None:
        self._pressed: set[Key] = set()
        self._mouse = [False] * MOUSE_BUTTON_COUNT
        self._cursor = (0, 0)
        self._quit = False

    def set_key(self, key: Key | int, pressed: bool) -> None:
        """Record a key as pressed or released."""
        key = Key(key)
        if pressed:
            self._pressed.add(key)
        else:
            self._pressed.discard(key)

    def is_key_pressed(self, key: Key | int) -> bool:
        """Return whether key is held; unknown keys are never held."""
        try:
            key = Key(key)
        except ValueError:
            return False
        return key in self._pressed

    @staticmethod
    def _check_button(button: int) -> None:
        if not 0 <= button < MOUSE_BUTTON_COUNT:
            raise IndexError(f"mouse button {button} out of range")

    def set_mouse_button(self, button: int, pressed: bool) -> None:
        self._check_button(button)
        self._mouse[button] = bool(pressed)

    def is_mouse_button_pressed(self, button: int) -> bool:
        self._check_button(button)
        return self._mouse[button]

    def set_cursor(self, x: int, y: int) -> None:
        self._cursor = (x, y)

    @property
    def cursor(self) -> tuple[int, int]:
        return self._cursor

    def schedule_quit(self) -> None:
        """Ask the main loop to stop after the current update."""
        self._quit = True

    @property
    def quit_requested(self) -> bool:
        return self._quit