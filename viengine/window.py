"""Native window interface and a window that needs no display."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from .events import EventContext
from .input import InputState


class EWindowPlatformSpec(Enum):
    GLFW = 0
    SDL = 1
    NONE = 2


@dataclass
class WindowData:
    """Size, event sink and input devices of a window."""

    width: int = 0
    height: int = 0
    dispatcher: Any = None
    input: InputState = field(default_factory=InputState)


class NativeWindow(ABC):
    """A window the application polls for events, time and closing."""

    def __init__(self) -> None:
        self.data = WindowData()

    @property
    def input_state(self) -> InputState:
        return self.data.input

    @abstractmethod
    def init(self, config: Any, dispatcher: Any) -> bool:
        """Open the window; false when it could not be opened."""

    @abstractmethod
    def shutdown(self) -> None:
        """Close the window and release what it holds."""

    @abstractmethod
    def swap_buffers(self) -> None:
        """Present the frame just drawn."""

    @abstractmethod
    def poll_events(self) -> None:
        """Deliver pending events to the dispatcher."""

    @abstractmethod
    def should_close(self) -> bool:
        """True once the window was asked to close."""

    @abstractmethod
    def time_seconds(self) -> float:
        """Seconds since the window was opened."""


class HeadlessWindow(NativeWindow):
    """A window without a display; events are posted to it by code.

    ``clock`` returns seconds; by default a monotonic clock started at ``init``.
    """

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        super().__init__()
        self._clock = clock
        self._start = 0.0
        self._pending: deque[EventContext] = deque()
        self._closed = False
        self.is_open = False
        self.frames_presented = 0

    def init(self, config: Any, dispatcher: Any) -> bool:
        self.data.width = int(config.width)
        self.data.height = int(config.height)
        self.data.dispatcher = dispatcher
        self._start = time.perf_counter()
        self._closed = False
        self.is_open = True
        return True

    def shutdown(self) -> None:
        self.is_open = False
        self._pending.clear()

    def swap_buffers(self) -> None:
        self.frames_presented += 1

    def post_event(self, event: EventContext) -> None:
        """Queue ``event`` for the next :meth:`poll_events`."""
        if not isinstance(event, EventContext):
            raise TypeError(f"{event!r} is not an event")
        self._pending.append(event)

    def poll_events(self) -> None:
        while self._pending:
            event = self._pending.popleft()
            if self.data.dispatcher is not None:
                self.data.dispatcher.dispatch(event)

    def should_close(self) -> bool:
        return self._closed

    def time_seconds(self) -> float:
        if self._clock is not None:
            return float(self._clock())
        return time.perf_counter() - self._start

    def close(self) -> None:
        """Ask the window to close."""
        self._closed = True