"""Player snapshot.

The turn engine owns players in an authoritative mapping keyed by id. Tiles
receive a ``Player`` value that may be stale; any change is written back by
replacing the entry in that mapping.
"""

from dataclasses import dataclass, field

from turf_arena.types import PlayerID
from .position import Position


@dataclass(frozen=True)
class Player:
    """Player state as seen by tiles.

    Attributes:
        id: Stable small integer, also the key in the players mapping.
        color: Display color (hex or named).
        keys: Number of keys carried.
        position: Current grid coordinate.
    """

    id: PlayerID
    color: str
    keys: int = 0
    position: Position = field(default_factory=lambda: Position(0, 0))
