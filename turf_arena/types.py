"""Common type aliases and enumerations.

``TileKind`` is the closed set of tile variants; every system dispatches on
it. ``Direction`` indices follow the arena convention 0=north, 1=east,
2=south, 3=west.
"""

from enum import IntEnum, StrEnum, auto
from typing import Callable, MutableMapping, Tuple, TYPE_CHECKING


# Forward declarations to avoid circular imports:
if TYPE_CHECKING:
    from turf_arena.components import Player

PlayerID = int

Players = MutableMapping[PlayerID, "Player"]
ClockFn = Callable[[], float]


class Direction(IntEnum):
    """Cardinal directions in arena index order."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def offset(self) -> Tuple[int, int]:
        """Grid delta (dx, dy) of one step; north decreases ``y``."""
        return _OFFSETS[self]

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def coerce(cls, value: object) -> "Direction":
        """Return ``value`` as a Direction, clamping anything invalid to NORTH."""
        if isinstance(value, bool) or not isinstance(value, int):
            return cls.NORTH
        if 0 <= value < 4:
            return cls(value)
        return cls.NORTH


_OFFSETS = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}


class TileKind(StrEnum):
    """Tile variant tags."""

    SPACE = auto()
    SPAWNABLE_SPACE = auto()
    WALL = auto()
    OCCUPIED = auto()
    COLORED_WALL = auto()
    POWER_SOURCE = auto()
    POWER_INDICATOR = auto()
    FLASHING_INDICATOR = auto()
    POWER_CARRIER = auto()
    POWER_CARRIER_WALL = auto()
    TELEPORTER = auto()
    TURF = auto()
    POWER_TURF = auto()
    HOME_SPACE = auto()
    LOCKED_WALL = auto()
    DIRECTIONAL_WALL = auto()
    TOGGLEABLE_WALL = auto()
    ITEM_BOX = auto()

    @property
    def display_name(self) -> str:
        """CamelCase variant name, e.g. ``LockedWall``."""
        return "".join(part.capitalize() for part in self.value.split("_"))


class RenderKind(StrEnum):
    """Rendering descriptor categories consumed by the display layer."""

    COLOR = auto()
    IMAGE = auto()
