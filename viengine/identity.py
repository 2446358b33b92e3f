"""Unique identifiers for entities, components, systems and types."""

from __future__ import annotations

import random

INVALID_ID = 0
"""Identifier value that never names anything."""

_UUID_BITS = 64

_generator = random.SystemRandom()
_type_uuids: dict[type, int] = {}


def get_uuid() -> int:
    """Return a random 64-bit identifier that is never ``INVALID_ID``."""
    while True:
        uuid = _generator.getrandbits(_UUID_BITS)
        if uuid != INVALID_ID:
            return uuid


def get_type_uuid(cls: type) -> int:
    """Return the identifier of ``cls``, generated on first request and stable afterwards."""
    uuid = _type_uuids.get(cls)
    if uuid is None:
        uuid = _type_uuids[cls] = get_uuid()
    return uuid