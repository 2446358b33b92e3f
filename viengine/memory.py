"""Per-frame and stack memory managers, their monitor and the global instance."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, TypeVar

from .allocators import AllocatorError, LinearAllocator, StackAllocator, align_forward
from .logger import core_logger

_T = TypeVar("_T")

DEFAULT_ALIGNMENT = 8
_PAGE_SIZE = 4096
_reserved_end = 0x10000


def _reserve(size: int) -> int:
    """Hand out a fresh, page-aligned address range of ``size`` bytes."""
    global _reserved_end
    start = _reserved_end
    _reserved_end = align_forward(start + max(size, 1), _PAGE_SIZE)
    return start


def _footprint(obj: object) -> int:
    return max(1, sys.getsizeof(obj))


@dataclass
class MemoryConfiguration:
    """Buffer sizes of a memory manager, 10 MiB each by default."""

    per_frame_buffer_size: int = 10 * 1024 * 1024
    stack_buffer_size: int = 10 * 1024 * 1024


@dataclass
class MemoryUsage:
    """A live stack block: who asked for it, where it is, and what lives there."""

    resource_name: str
    resource_address: int
    resource: Any = None


class MemoryManager:
    """Owns a per-frame allocator and a stack allocator with leak tracking."""

    def __init__(self, config: MemoryConfiguration | None = None) -> None:
        self.config = MemoryConfiguration() if config is None else config
        self.per_frame_allocator = LinearAllocator(
            self.config.per_frame_buffer_size, _reserve(self.config.per_frame_buffer_size)
        )
        self.stack_allocator = StackAllocator(
            self.config.stack_buffer_size, _reserve(self.config.stack_buffer_size)
        )
        self._active: list[MemoryUsage] = []
        self._freed: list[int] = []
        MemoryMonitor.get().add(self)

    @property
    def active_memories(self) -> tuple[MemoryUsage, ...]:
        return tuple(self._active)

    @property
    def freed_memories(self) -> tuple[int, ...]:
        return tuple(self._freed)

    def update(self) -> None:
        """Drop the memory handed out for the current frame."""
        self.per_frame_allocator.clear()

    def clear(self) -> None:
        """Drop everything both allocators handed out."""
        self.per_frame_allocator.clear()
        self.stack_allocator.clear()

    def allocate_per_frame(self, size: int, alignment: int) -> int:
        return self.per_frame_allocator.allocate(size, alignment)

    def allocate_on_stack(self, usage: str, size: int, alignment: int) -> int:
        address = self.stack_allocator.allocate(size, alignment)
        self._active.append(MemoryUsage(usage, address))
        return address

    def free_on_stack(self, address: int) -> None:
        """Release a stack block; out-of-order releases wait for the blocks above them."""
        if self._active and address == self._active[-1].resource_address:
            self.stack_allocator.free(address)
            self._active.pop()
            while self._active and self._active[-1].resource_address in self._freed:
                top = self._active.pop().resource_address
                self.stack_allocator.free(top)
                self._freed.remove(top)
        else:
            core_logger().warning("User did not free memory %#x in order of stack", address)
            self._freed.append(address)

    def clear_on_stack(self) -> None:
        self.stack_allocator.clear()

    def detect_memory_leaks(self) -> list[MemoryUsage]:
        """Report and return the stack blocks that were never released."""
        if self._freed and not self._active:
            raise AllocatorError("freed blocks are pending but nothing is allocated")
        leaks = [usage for usage in self._active if usage.resource_address not in self._freed]
        logger = core_logger()
        if leaks:
            logger.warning("!!!  M E M O R Y  L E A K  D E T E C T E D  !!!")
            for usage in leaks:
                logger.warning(
                    "%s memory user did not release allocated memory %#x!",
                    usage.resource_name,
                    usage.resource_address,
                )
        elif not self._active:
            logger.info("No memory leaks detected")
        return leaks

    def new_per_frame(self, factory: Callable[..., _T], *args: Any, **kwargs: Any) -> _T:
        """Build an object whose memory lasts until the end of the frame."""
        obj = factory(*args, **kwargs)
        self.allocate_per_frame(_footprint(obj), DEFAULT_ALIGNMENT)
        return obj

    def new_on_stack(self, usage: str, factory: Callable[..., _T], *args: Any, **kwargs: Any) -> _T:
        """Build an object on the stack, recorded under ``usage``."""
        obj = factory(*args, **kwargs)
        self.allocate_on_stack(usage, _footprint(obj), DEFAULT_ALIGNMENT)
        self._active[-1].resource = obj
        return obj

    def _address_of(self, obj: object) -> int:
        for usage in reversed(self._active):
            if usage.resource is obj:
                return usage.resource_address
        raise KeyError(f"{obj!r} was not allocated on this stack")


class MemoryMonitor:
    """Process-wide registry of memory managers."""

    _instance: ClassVar[MemoryMonitor | None] = None

    @classmethod
    def get(cls) -> MemoryMonitor:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def __init__(self) -> None:
        self._usages: list[MemoryManager] = []

    def add(self, manager: MemoryManager | None) -> None:
        if manager is not None:
            self._usages.append(manager)

    def remove(self, manager: MemoryManager) -> None:
        """Clear ``manager``, report its leaks and stop watching it."""
        for index, usage in enumerate(self._usages):
            if usage is manager:
                manager.clear()
                manager.detect_memory_leaks()
                del self._usages[index]
                return

    def update(self) -> None:
        for manager in self._usages:
            manager.update()

    def clear(self) -> None:
        for manager in self._usages:
            manager.clear()

    def detect_memory_leaks(self) -> list[MemoryUsage]:
        leaks: list[MemoryUsage] = []
        for manager in self._usages:
            leaks.extend(manager.detect_memory_leaks())
        return leaks


class GlobalMemoryUsage:
    """The engine-wide memory manager."""

    _instance: ClassVar[GlobalMemoryUsage | None] = None

    @classmethod
    def get(cls) -> GlobalMemoryUsage:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def __init__(self) -> None:
        self._memory_manager = MemoryManager()

    def free_on_stack(self, obj: object) -> None:
        """Release an object built with :meth:`new_on_stack`."""
        self._memory_manager.free_on_stack(self._memory_manager._address_of(obj))

    def new_per_frame(self, factory: Callable[..., _T], *args: Any, **kwargs: Any) -> _T:
        return self._memory_manager.new_per_frame(factory, *args, **kwargs)

    def new_on_stack(self, usage: str, factory: Callable[..., _T], *args: Any, **kwargs: Any) -> _T:
        return self._memory_manager.new_on_stack(usage, factory, *args, **kwargs)