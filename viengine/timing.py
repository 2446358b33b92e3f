"""Frame time values."""

from __future__ import annotations

from dataclasses import dataclass


def _delta(value: object) -> float:
    if isinstance(value, Time):
        return value.delta_time
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    raise TypeError(f"expected Time or a number, got {type(value).__name__}")


@dataclass
class Time:
    """Elapsed time of a frame in seconds, with a scale factor."""

    delta_time: float = 0.0
    time_scale: float = 1.0

    def __iadd__(self, other: Time | float) -> Time:
        self.delta_time += _delta(other)
        return self

    def __isub__(self, other: Time | float) -> Time:
        self.delta_time -= _delta(other)
        return self

    def _compare_to(self, other: object) -> float | None:
        try:
            return _delta(other)
        except TypeError:
            return None

    def __lt__(self, other: object) -> bool:
        value = self._compare_to(other)
        return NotImplemented if value is None else self.delta_time < value

    def __le__(self, other: object) -> bool:
        value = self._compare_to(other)
        return NotImplemented if value is None else self.delta_time <= value

    def __gt__(self, other: object) -> bool:
        value = self._compare_to(other)
        return NotImplemented if value is None else self.delta_time > value

    def __ge__(self, other: object) -> bool:
        value = self._compare_to(other)
        return NotImplemented if value is None else self.delta_time >= value

    def __float__(self) -> float:
        return self.delta_time