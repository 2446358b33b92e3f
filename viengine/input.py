"""Keyboard and mouse state as seen by layers each frame."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from .keycodes import EKeyCode, EKeyState, EMouseButton

StatePoll = Callable[[int], Optional[EKeyState]]
"""Looks up the current state of a key or button code; ``None`` means no state."""

_DOWN_STATES = frozenset({EKeyState.PRESSED, EKeyState.HELD})


def _no_input(_code: int) -> EKeyState:
    return EKeyState.NONE


class _PolledInput:
    """Shared state lookup of keyboards and mice."""

    def __init__(self, poll: StatePoll | None = None) -> None:
        self.poll: StatePoll = poll or _no_input

    def _state(self, code: int) -> EKeyState:
        state = self.poll(int(code))
        return EKeyState.NONE if state is None else EKeyState(state)

    def _down_value(self, code: int) -> int:
        state = self._state(code)
        return int(state in _DOWN_STATES)


class KeyboardInput(_PolledInput):
    """Keyboard whose key states come from a polling function."""

    def get_state(self, key_code: EKeyCode | int) -> EKeyState:
        return self._state(key_code)

    def is_pressed(self, key_code: EKeyCode | int) -> bool:
        return self._state(key_code) is EKeyState.PRESSED

    def is_held(self, key_code: EKeyCode | int) -> bool:
        return self._state(key_code) is EKeyState.HELD

    def is_released(self, key_code: EKeyCode | int) -> bool:
        return self._state(key_code) is EKeyState.RELEASED

    def get_value(self, key_code: EKeyCode | int) -> int:
        """1 while the key is down (pressed or held), otherwise 0."""
        value = self._down_value(key_code)
        return value


class MouseInput(_PolledInput):
    """Mouse buttons from a polling function, plus the last cursor and scroll values."""

    def __init__(self, poll: StatePoll | None = None) -> None:
        super().__init__(poll)
        self.x = 0.0
        self.y = 0.0
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.scroll_x = 0.0
        self.scroll_y = 0.0

    def get_state(self, button: EMouseButton | int) -> EKeyState:
        return self._state(button)

    def is_pressed(self, button: EMouseButton | int) -> bool:
        return self._state(button) is EKeyState.PRESSED

    def is_held(self, button: EMouseButton | int) -> bool:
        return self._state(button) is EKeyState.HELD

    def is_released(self, button: EMouseButton | int) -> bool:
        return self._state(button) is EKeyState.RELEASED

    def get_value(self, button: EMouseButton | int) -> int:
        """1 while the button is down (pressed or held), otherwise 0."""
        value = self._down_value(button)
        return value

    def set_position(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def set_offset(self, offset_x: float, offset_y: float) -> None:
        self.offset_x = float(offset_x)
        self.offset_y = float(offset_y)

    def set_scroll(self, scroll_x: float, scroll_y: float) -> None:
        self.scroll_x = float(scroll_x)
        self.scroll_y = float(scroll_y)


@dataclass
class InputState:
    """The keyboard and mouse of one window."""

    keyboard: KeyboardInput = field(default_factory=KeyboardInput)
    mouse: MouseInput = field(default_factory=MouseInput)