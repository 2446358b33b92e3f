import pytest

from viengine.allocators import AllocatorError
from viengine.memory import (
    GlobalMemoryUsage,
    MemoryConfiguration,
    MemoryManager,
    MemoryMonitor,
)


class Widget:
    def __init__(self, name="w", size=0):
        self.name = name
        self.size = size


def test_default_configuration_is_ten_megabytes():
    config = MemoryConfiguration()
    assert config.per_frame_buffer_size == 10 * 1024 * 1024
    assert config.stack_buffer_size == 10 * 1024 * 1024


def test_new_on_stack_builds_object_and_records_usage():
    manager = MemoryManager()
    widget = manager.new_on_stack("widgets", Widget, "a", size=3)
    assert (widget.name, widget.size) == ("a", 3)
    [record] = manager.active_memories
    assert record.resource_name == "widgets"
    assert record.resource is widget
    assert manager.stack_allocator.used_memory > 0


def test_in_order_free_releases_everything():
    manager = MemoryManager()
    first = manager.allocate_on_stack("a", 32, 8)
    second = manager.allocate_on_stack("b", 16, 8)
    manager.free_on_stack(second)
    manager.free_on_stack(first)
    assert manager.active_memories == ()
    assert manager.freed_memories == ()
    assert manager.stack_allocator.used_memory == 0
    assert manager.detect_memory_leaks() == []


def test_out_of_order_free_waits_for_the_top():
    manager = MemoryManager()
    first = manager.allocate_on_stack("a", 32, 8)
    second = manager.allocate_on_stack("b", 16, 8)
    manager.free_on_stack(first)
    assert len(manager.active_memories) == 2
    assert manager.freed_memories == (first,)
    manager.free_on_stack(second)
    assert manager.active_memories == ()
    assert manager.freed_memories == ()
    assert manager.stack_allocator.used_memory == 0


def test_leaks_report_only_unreleased_blocks():
    manager = MemoryManager()
    first = manager.allocate_on_stack("a", 8, 8)
    manager.allocate_on_stack("b", 8, 8)
    manager.free_on_stack(first)
    assert [usage.resource_name for usage in manager.detect_memory_leaks()] == ["b"]


def test_update_clears_per_frame_memory_only():
    manager = MemoryManager()
    manager.allocate_per_frame(64, 8)
    manager.allocate_on_stack("a", 8, 8)
    manager.update()
    assert manager.per_frame_allocator.used_memory == 0
    assert manager.stack_allocator.used_memory > 0


def test_clear_resets_both_allocators():
    manager = MemoryManager()
    manager.allocate_per_frame(64, 8)
    manager.allocate_on_stack("a", 8, 8)
    manager.clear()
    assert manager.per_frame_allocator.used_memory == 0
    assert manager.stack_allocator.used_memory == 0


def test_new_per_frame_returns_constructed_object():
    manager = MemoryManager()
    widget = manager.new_per_frame(Widget, "frame")
    assert widget.name == "frame"
    assert manager.per_frame_allocator.allocation_count == 1


def test_per_frame_overflow_raises():
    manager = MemoryManager(MemoryConfiguration(per_frame_buffer_size=32, stack_buffer_size=32))
    with pytest.raises(AllocatorError):
        manager.allocate_per_frame(64, 8)


def test_failed_stack_allocation_is_not_recorded():
    manager = MemoryManager(MemoryConfiguration(per_frame_buffer_size=32, stack_buffer_size=32))
    with pytest.raises(AllocatorError):
        manager.allocate_on_stack("big", 64, 8)
    assert manager.active_memories == ()


def test_monitor_is_a_singleton():
    monitor = MemoryMonitor.get()
    assert monitor is MemoryMonitor.get()
    manager = MemoryManager()
    manager.allocate_per_frame(16, 8)
    monitor.update()
    assert manager.per_frame_allocator.used_memory == 0


def test_monitor_update_reaches_registered_managers():
    manager = MemoryManager()
    manager.allocate_per_frame(16, 8)
    MemoryMonitor.get().update()
    assert manager.per_frame_allocator.used_memory == 0


def test_removed_manager_is_cleared_and_no_longer_updated():
    manager = MemoryManager()
    manager.allocate_on_stack("a", 8, 8)
    MemoryMonitor.get().remove(manager)
    assert manager.stack_allocator.used_memory == 0
    manager.allocate_per_frame(16, 8)
    MemoryMonitor.get().update()
    assert manager.per_frame_allocator.used_memory > 0


def test_monitor_collects_leaks_of_its_managers():
    manager = MemoryManager()
    manager.allocate_on_stack("monitor-leak", 8, 8)
    leaks = MemoryMonitor.get().detect_memory_leaks()
    assert any(usage.resource_name == "monitor-leak" for usage in leaks)
    MemoryMonitor.get().remove(manager)


def test_global_memory_usage_round_trip():
    usage = GlobalMemoryUsage.get()
    assert usage is GlobalMemoryUsage.get()
    widget = usage.new_on_stack("global-widget", Widget, "g")
    assert widget.name == "g"
    usage.free_on_stack(widget)
    with pytest.raises(KeyError):
        usage.free_on_stack(widget)


def test_global_free_of_unknown_object_raises():
    with pytest.raises(KeyError):
        GlobalMemoryUsage.get().free_on_stack(Widget())


def test_global_new_per_frame_builds_object():
    widget = GlobalMemoryUsage.get().new_per_frame(Widget, "pf", size=2)
    assert (widget.name, widget.size) == ("pf", 2)