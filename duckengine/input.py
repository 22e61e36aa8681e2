"""Keyboard and mouse input state fed by window event callbacks."""

from enum import IntEnum

__all__ = ["Action", "Input"]


class Action(IntEnum):
    """Kind of key or button event."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class Input:
    """Per-frame keyboard and mouse state.

    ``*_pressed`` and ``*_released`` report events since the last
    :meth:`process`; ``*_held`` reports the current state.
    """

    def __init__(self):
        self.mouse_position = (0.0, 0.0)
        self.mouse_delta = (0.0, 0.0)
        self.keys_down = set()
        self.keys_up = set()
        self.mouse_buttons_down = set()
        self.mouse_buttons_up = set()
        self._keys_held = set()
        self._buttons_held = set()

    def key_held(self, key):
        return key in self._keys_held

    def key_pressed(self, key):
        return key in self.keys_down

    def key_released(self, key):
        return key in self.keys_up

    def mouse_button_held(self, button):
        return button in self._buttons_held

    def mouse_button_pressed(self, button):
        return button in self.mouse_buttons_down

    def mouse_button_released(self, button):
        return button in self.mouse_buttons_up

    def process(self, cursor_x, cursor_y):
        """Start a new frame at the given cursor position."""
        old_x, old_y = self.mouse_position
        self.mouse_delta = (cursor_x - old_x, cursor_y - old_y)
        self.mouse_position = (cursor_x, cursor_y)
        self.keys_up.clear()
        self.keys_down.clear()
        self.mouse_buttons_up.clear()
        self.mouse_buttons_down.clear()

    @staticmethod
    def _record(code, action, down, up, held):
        action = Action(action)
        if action is Action.PRESS:
            down.add(code)
            held.add(code)
        elif action is Action.RELEASE:
            up.add(code)
            held.discard(code)

    def key_callback(self, key, action):
        self._record(key, action, self.keys_down, self.keys_up, self._keys_held)

    def mouse_button_callback(self, button, action):
        self._record(
            button,
            action,
            self.mouse_buttons_down,
            self.mouse_buttons_up,
            self._buttons_held,
        )