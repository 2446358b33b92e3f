"""Deferred render commands, executed together once per frame."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .memory import MemoryManager

RenderCallback = Callable[[], None]


@dataclass
class RenderCommandCallback:
    """A render callback and the frame it was recorded in."""

    callback: Optional[RenderCallback] = None
    frame_index: int = 0

    def execute(self) -> None:
        if self.callback is None:
            raise RuntimeError("render command has no callback")
        self.callback()


class RenderCommandQueue:
    """Collects render callbacks in per-frame memory and runs them in order."""

    def __init__(self) -> None:
        self._commands: list[RenderCommandCallback] = []
        self._memory = MemoryManager()

    def enqueue(self, callback: RenderCallback, frame_index: int) -> RenderCommandCallback:
        """Record ``callback`` for the frame ``frame_index``."""
        command = self._memory.new_per_frame(RenderCommandCallback, callback, frame_index)
        self._commands.append(command)
        return command

    def process_and_render(self) -> None:
        """Run every recorded command; commands recorded meanwhile wait for the next call."""
        commands, self._commands = self._commands, []
        for command in commands:
            command.execute()

    def __len__(self) -> int:
        return len(self._commands)