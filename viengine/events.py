"""Window and input events and the dispatcher that delivers them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TypeVar

from .keycodes import EKeyCode, EMouseButton


class EventContext:
    """Base of every event the dispatcher carries."""

    __slots__ = ()


@dataclass(frozen=True)
class WindowResizedEvent(EventContext):
    width: int
    height: int


@dataclass(frozen=True)
class _KeyEvent(EventContext):
    key_code: int

    def is_key(self, key_code: EKeyCode | int) -> bool:
        """True when this event concerns ``key_code``."""
        return self.key_code == int(key_code)


class KeyPressedEvent(_KeyEvent):
    """A key went down."""

    def is_key(self, key_code: EKeyCode | int) -> bool:
        return super().is_key(key_code)


class KeyHeldEvent(_KeyEvent):
    """A key is repeating while held down."""

    def is_key(self, key_code: EKeyCode | int) -> bool:
        return super().is_key(key_code)


class KeyReleasedEvent(_KeyEvent):
    """A key went up."""

    def is_key(self, key_code: EKeyCode | int) -> bool:
        return super().is_key(key_code)


@dataclass(frozen=True)
class MouseMovedEvent(EventContext):
    x: float
    y: float
    offset_x: float
    offset_y: float


@dataclass(frozen=True)
class MouseScrolledEvent(EventContext):
    scroll_x: float
    scroll_y: float


@dataclass(frozen=True)
class _MouseButtonEvent(EventContext):
    button: int

    def is_button(self, button: EMouseButton | int) -> bool:
        """True when this event concerns ``button``."""
        return self.button == int(button)


class MouseButtonPressedEvent(_MouseButtonEvent):
    """A mouse button went down."""

    def is_button(self, button: EMouseButton | int) -> bool:
        return super().is_button(button)


class MouseButtonHeldEvent(_MouseButtonEvent):
    """A mouse button is held down."""

    def is_button(self, button: EMouseButton | int) -> bool:
        return super().is_button(button)


class MouseButtonReleasedEvent(_MouseButtonEvent):
    """A mouse button went up."""

    def is_button(self, button: EMouseButton | int) -> bool:
        return super().is_button(button)


_E = TypeVar("_E", bound=EventContext)
EventCallback = Callable[[_E], bool]


class EventDispatcher:
    """Delivers events to listeners registered for their exact type."""

    def __init__(self) -> None:
        self._listeners: dict[type[EventContext], list[Callable[[EventContext], bool]]] = {}

    def add_event_listener(self, event_type: type[_E], callback: Callable[[_E], bool]) -> None:
        """Register ``callback`` for events of exactly ``event_type``."""
        if not (isinstance(event_type, type) and issubclass(event_type, EventContext)):
            raise TypeError(f"{event_type!r} is not an event type")
        self._listeners.setdefault(event_type, []).append(callback)

    def dispatch(self, event: EventContext) -> bool:
        """Call listeners in order until one returns true; report whether one did."""
        if not isinstance(event, EventContext):
            raise TypeError(f"{event!r} is not an event")
        for callback in tuple(self._listeners.get(type(event), ())):
            if callback(event):
                return True
        return False