"""High-resolution interval timing built on the monotonic performance counter."""

from __future__ import annotations

import time
from enum import Enum
from types import TracebackType


class Unit(Enum):
    """Units an elapsed counter interval can be expressed in, as counter ticks."""

    NANO_SEC = 1
    MICRO_SEC = 1_000
    MILLI_SEC = 1_000_000
    SEC = 1_000_000_000


def read_counter() -> int:
    """Return the current value of the monotonic counter, in nanoseconds."""
    return time.perf_counter_ns()


def counter_works() -> bool:
    """Tell whether two consecutive counter reads show time moving forward."""
    first = read_counter()
    second = read_counter()
    return second - first > 0


class CycleTimer:
    """Context manager recording the counter on entry and on exit."""

    def __init__(self) -> None:
        self.start: int | None = None
        self.stop: int | None = None

    def __enter__(self) -> "CycleTimer":
        self.stop = None
        self.start = read_counter()
        return self

    def __exit__(
        self,
        *args: type[BaseException] | BaseException | TracebackType | None,
    ) -> None:
        self.stop = read_counter()

    def elapsed(self, unit: Unit | float = Unit.NANO_SEC) -> float:
        """Return the measured interval divided by the given unit."""
        if self.start is None or self.stop is None:
            raise RuntimeError("timer has not completed a measurement")
        divisor = unit.value if isinstance(unit, Unit) else unit
        if divisor <= 0:
            raise ValueError("unit must be positive")
        return self.stop / divisor - self.start / divisor