from dataclasses import dataclass, field
import time

from turf_arena.types import ClockFn


def monotonic_ms() -> float:
    """Milliseconds from an arbitrary fixed point (``time.perf_counter``)."""
    return time.perf_counter() * 1000.0


@dataclass(frozen=True)
class Flash:
    """Blink timing for flashing indicators.

    Attributes:
        period_ms: Length of each on/off phase.
        clock: Wall-clock source in milliseconds; injectable for tests.
    """

    period_ms: int = 1000
    clock: ClockFn = field(default=monotonic_ms, compare=False)
