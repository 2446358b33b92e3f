"""Pools of same-typed objects grown one chunk at a time."""

from __future__ import annotations

from itertools import chain
from typing import Any, Callable, Generic, Iterator, TypeVar

from .allocators import FREE_NODE_SIZE, AllocatorError, PoolAllocator, align_forward
from .memory import DEFAULT_ALIGNMENT, MemoryConfiguration, MemoryManager, MemoryMonitor

_T = TypeVar("_T")

DEFAULT_OBJECTS_PER_CHUNK = 100
DEFAULT_OBJECT_SIZE = 64

_EMPTY = object()


class _MemoryChunk:
    """One pool allocator and the objects living in its slots."""

    def __init__(self, allocator: PoolAllocator) -> None:
        self.allocator = allocator
        self.slots: dict[int, Any] = {}

    @property
    def start_address(self) -> int:
        return self.allocator.start_address

    def allocate(self) -> int:
        address = self.allocator.allocate()
        self.slots[address] = _EMPTY
        return address

    def bind(self, address: int, obj: Any) -> None:
        self.slots[address] = obj

    def free(self, address: int) -> None:
        self.allocator.free(address)
        self.slots.pop(address, None)

    def has_slot(self, capacity: int) -> bool:
        return len(self.slots) < capacity

    def address_of(self, obj: Any) -> int | None:
        return next((address for address, held in self.slots.items() if held is obj), None)

    def objects(self) -> Iterator[Any]:
        return (obj for obj in self.slots.values() if obj is not _EMPTY)

    def close(self) -> None:
        self.allocator.clear()
        self.slots.clear()


class MemoryChunkManager(MemoryManager, Generic[_T]):
    """Builds objects of one type in fixed-size chunks taken from its own stack."""

    def __init__(
        self,
        object_type: Callable[..., _T],
        usage: str | None = None,
        max_objects_per_chunk: int = DEFAULT_OBJECTS_PER_CHUNK,
        *,
        object_size: int = DEFAULT_OBJECT_SIZE,
        alignment: int = DEFAULT_ALIGNMENT,
        config: MemoryConfiguration | None = None,
    ) -> None:
        if max_objects_per_chunk < 1:
            raise ValueError("a chunk must hold at least one object")
        super().__init__(config)
        self.object_type = object_type
        self.usage = usage or getattr(object_type, "__name__", "objects")
        self.max_objects_per_chunk = max_objects_per_chunk
        self.alignment = alignment
        self.object_size = align_forward(max(object_size, FREE_NODE_SIZE), alignment)
        self._chunks: list[_MemoryChunk] = []

    @property
    def chunk_count(self) -> int:
        return len(self._chunks)

    def _allocate(self) -> tuple[_MemoryChunk, int]:
        for chunk in self._chunks:
            if chunk.has_slot(self.max_objects_per_chunk):
                return chunk, chunk.allocate()
        size = self.object_size * self.max_objects_per_chunk
        base = self.allocate_on_stack(self.usage, size, self.alignment)
        chunk = _MemoryChunk(PoolAllocator(size, base, self.object_size, self.alignment))
        self._chunks.append(chunk)
        return chunk, chunk.allocate()

    def allocate(self) -> int:
        """Reserve one slot, opening a new chunk when all are full."""
        return self._allocate()[1]

    def new_object(self, *args: Any, **kwargs: Any) -> _T:
        """Build an object in a free slot."""
        chunk, address = self._allocate()
        try:
            obj = self.object_type(*args, **kwargs)
        except BaseException:
            chunk.free(address)
            raise
        chunk.bind(address, obj)
        return obj

    def free_object(self, obj: Any) -> None:
        """Release an object built here, or a raw slot address from :meth:`allocate`."""
        for chunk in self._chunks:
            address = chunk.address_of(obj)
            if address is None and isinstance(obj, int) and obj in chunk.slots:
                address = obj
            if address is not None:
                chunk.free(address)
                return
        raise AllocatorError(f"{obj!r} was not allocated by {self.usage}")

    def reset(self) -> None:
        """Release every chunk and stop being monitored."""
        for chunk in reversed(self._chunks):
            self.free_on_stack(chunk.start_address)
            chunk.close()
        self._chunks.clear()
        MemoryMonitor.get().remove(self)

    def __iter__(self) -> Iterator[_T]:
        return chain.from_iterable(chunk.objects() for chunk in self._chunks)

    def __len__(self) -> int:
        return sum(1 for _ in self)