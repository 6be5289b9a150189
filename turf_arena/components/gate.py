from dataclasses import dataclass

from turf_arena.types import Direction


@dataclass(frozen=True)
class Gate:
    """One-way gate; blocks only entries made in the ``facing`` direction."""

    facing: Direction = Direction.NORTH
