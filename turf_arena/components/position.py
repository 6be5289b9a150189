"""Position component.

Immutable integer grid coordinates. A tile's position is authoritative only
while the tile is the one stored at that coordinate in the arena.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int
