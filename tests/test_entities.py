from viengine.entities import EntityManager
from viengine.identity import INVALID_ID


def test_fresh_id_is_valid_64_bit():
    manager = EntityManager()
    entity = manager.next_id()
    assert INVALID_ID < entity < 2**64


def test_add_and_contains():
    manager = EntityManager()
    entity = manager.next_id()
    manager.add_entity(entity)
    assert entity in manager
    assert len(manager) == 1


def test_duplicate_add_is_ignored():
    manager = EntityManager()
    manager.add_entity(42)
    manager.add_entity(42)
    assert len(manager) == 1


def test_remove_entity():
    manager = EntityManager()
    manager.add_entity(7)
    manager.remove_entity(7)
    assert 7 not in manager
    assert len(manager) == 0


def test_remove_unknown_entity_changes_nothing():
    manager = EntityManager()
    manager.add_entity(7)
    manager.remove_entity(8)
    assert len(manager) == 1


def test_released_ids_are_reused_first_in_first_out():
    manager = EntityManager()
    first, second = manager.next_id(), manager.next_id()
    manager.add_entity(first)
    manager.add_entity(second)
    manager.release_for_reuse(first)
    manager.release_for_reuse(second)
    assert first not in manager
    assert manager.next_id() == first
    assert manager.next_id() == second


def test_removed_ids_are_not_reused():
    manager = EntityManager()
    entity = manager.next_id()
    manager.add_entity(entity)
    manager.remove_entity(entity)
    assert all(manager.next_id() != entity for _ in range(5))