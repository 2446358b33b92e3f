"""Shared names of the entity-component-system."""

from enum import IntEnum

EntityID = int
ComponentID = int
ComponentTypeID = int
SystemID = int
SystemTypeID = int


class ESystemPriority(IntEnum):
    """Lower values run earlier."""

    LOW = 300
    MEDIUM = 200
    HIGH = 100