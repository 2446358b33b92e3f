"""Bookkeeping allocators that hand out addresses from a reserved range."""

from __future__ import annotations

from .logger import core_logger

INVALID_MEMORY_SIZE = 0
MAX_ALLOWED_ALIGNMENT = 128
STACK_HEADER_SIZE = 1
"""Bytes a stack allocation reserves in front of its block to remember its padding."""
FREE_NODE_SIZE = 8
"""Smallest chunk a pool can thread its free list through."""


class AllocatorError(RuntimeError):
    """Raised when an allocator cannot serve or take back a block."""


def is_power_of_two(alignment: int) -> bool:
    """True when ``alignment`` has at most one bit set."""
    return alignment & (alignment - 1) == 0


def _check_alignment(alignment: int) -> None:
    if alignment <= 0 or not is_power_of_two(alignment):
        raise ValueError(f"alignment {alignment} is not a power of two")


def _check_request(size: int, alignment: int) -> None:
    if size <= INVALID_MEMORY_SIZE:
        raise ValueError(f"cannot allocate {size} bytes")
    if alignment >= MAX_ALLOWED_ALIGNMENT:
        raise ValueError(f"alignment {alignment} is not below {MAX_ALLOWED_ALIGNMENT}")
    _check_alignment(alignment)


def address_adjustment(address: int, alignment: int, extra: int = 0) -> int:
    """Bytes to skip from ``address`` to reach an aligned one with at least ``extra`` bytes before it."""
    _check_alignment(alignment)
    remainder = address & (alignment - 1)
    padding = 0 if remainder == 0 else alignment - remainder
    if padding < extra:
        remaining = extra - padding
        blocks = remaining // alignment
        if remaining & (alignment - 1):
            blocks += 1
        padding += alignment * blocks
    return padding


def align_forward(size: int, alignment: int) -> int:
    """Round ``size`` up to the next multiple of ``alignment``."""
    _check_alignment(alignment)
    remainder = size & (alignment - 1)
    return size if remainder == 0 else size + alignment - remainder


class MemoryAllocator:
    """Common state of an allocator over ``memory_size`` bytes starting at ``start_address``."""

    def __init__(self, memory_size: int, start_address: int = 0) -> None:
        if memory_size < 0:
            raise ValueError(f"memory size {memory_size} is negative")
        self.memory_size = memory_size
        self.start_address = start_address
        self.used_memory = 0
        self.allocation_count = 0

    def allocate(self, size: int, alignment: int) -> int:
        """Reserve a block; this kind of allocator serves none."""
        raise AllocatorError(f"{type(self).__name__} does not serve sized allocations")

    def free(self, address: int) -> None:
        """Give a block back; this kind of allocator takes none."""
        raise AllocatorError(f"{type(self).__name__} does not free single blocks")

    def clear(self) -> None:
        """Forget every allocation."""
        self.used_memory = 0
        self.allocation_count = 0


class LinearAllocator(MemoryAllocator):
    """Bump allocator that is only ever emptied as a whole."""

    def allocate(self, size: int, alignment: int) -> int:
        _check_request(size, alignment)
        current = self.start_address + self.used_memory
        adjustment = address_adjustment(current, alignment)
        if self.used_memory + size + adjustment > self.memory_size:
            core_logger().warning(
                "LinearAllocator is full, can not allocate for new data with size %s", size
            )
            raise AllocatorError(f"LinearAllocator is full, cannot allocate {size} bytes")
        self.used_memory += size + adjustment
        self.allocation_count += 1
        return current + adjustment

    def free(self, address: int) -> None:
        raise AllocatorError("LinearAllocator does not support freeing an address")

    def clear(self) -> None:
        super().clear()


class StackAllocator(MemoryAllocator):
    """Allocator whose blocks are released last-in, first-out."""

    def __init__(self, memory_size: int, start_address: int = 0) -> None:
        super().__init__(memory_size, start_address)
        self._paddings: dict[int, int] = {}

    def allocate(self, size: int, alignment: int) -> int:
        _check_request(size, alignment)
        current = self.start_address + self.used_memory
        padding = address_adjustment(current, alignment, STACK_HEADER_SIZE)
        if self.used_memory + padding + size > self.memory_size:
            core_logger().warning(
                "StackAllocator is full, can not allocate for new data with size %s", size
            )
            raise AllocatorError(f"StackAllocator is full, cannot allocate {size} bytes")
        self.used_memory += size + padding
        self.allocation_count += 1
        address = current + padding
        self._paddings[address] = padding
        return address

    def free(self, address: int) -> None:
        """Release ``address`` and everything allocated after it."""
        if not self.start_address <= address < self.start_address + self.memory_size:
            raise AllocatorError(f"free of out-of-bounds address {address:#x}")
        try:
            padding = self._paddings[address]
        except KeyError:
            raise AllocatorError(f"address {address:#x} was not allocated here") from None
        self.used_memory = address - self.start_address - padding
        self._paddings = {a: p for a, p in self._paddings.items() if a < address}
        self.allocation_count -= 1

    def clear(self) -> None:
        super().clear()
        self._paddings.clear()


class PoolAllocator(MemoryAllocator):
    """Allocator of equally sized chunks kept on a free list."""

    def __init__(
        self, memory_size: int, start_address: int, chunk_size: int, chunk_alignment: int
    ) -> None:
        super().__init__(memory_size, start_address)
        _check_alignment(chunk_alignment)
        self.chunk_alignment = chunk_alignment
        self.address_offset = align_forward(start_address, chunk_alignment) - start_address
        self.memory_size -= self.address_offset
        self.chunk_size = align_forward(chunk_size, chunk_alignment)
        if self.chunk_size < FREE_NODE_SIZE:
            raise ValueError(f"chunk size {self.chunk_size} is below {FREE_NODE_SIZE}")
        if self.memory_size < self.chunk_size:
            raise ValueError(f"memory size {self.memory_size} cannot hold one chunk")
        self._free_list: list[int] = []
        self._free_set: set[int] = set()
        self.clear()

    @property
    def chunk_count(self) -> int:
        return self.memory_size // self.chunk_size

    @property
    def _first_chunk(self) -> int:
        return self.start_address + self.address_offset

    def allocate(self) -> int:  # type: ignore[override]
        """Take one chunk off the free list."""
        if not self._free_list:
            raise AllocatorError("PoolAllocator is full, no more chunk to allocate")
        address = self._free_list.pop()
        self._free_set.discard(address)
        self.used_memory += self.chunk_size
        self.allocation_count += 1
        return address

    def free(self, address: int) -> None:
        if not self.contains(address):
            raise AllocatorError(f"free of out-of-bounds address {address:#x}")
        if address in self._free_set:
            raise AllocatorError(f"address {address:#x} is already free")
        self._free_list.append(address)
        self._free_set.add(address)
        self.used_memory -= self.chunk_size
        self.allocation_count -= 1

    def clear(self) -> None:
        super().clear()
        first = self._first_chunk
        self._free_list = [first + index * self.chunk_size for index in range(self.chunk_count)]
        self._free_set = set(self._free_list)

    def contains(self, address: int) -> bool:
        """True when ``address`` lies within the pool's chunks."""
        last = self._first_chunk + (self.chunk_count - 1) * self.chunk_size
        return self.start_address <= address <= last