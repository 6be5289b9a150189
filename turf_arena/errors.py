"""Exception types raised by the tile engine."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from turf_arena.components import Position


class TurfArenaError(Exception):
    """Base class for engine errors."""


class NoTeleportPartnerError(TurfArenaError):
    """A teleporter was entered but no exit of the same group is on the grid."""

    def __init__(self, group: int, position: "Position") -> None:
        super().__init__(
            f"No teleport partner for group {group} at ({position.x}, {position.y})"
        )
        self.group = group
        self.position = position


class NoSpawnPointError(TurfArenaError):
    """No spawnable space is open to the player being placed."""

    def __init__(self, player_id: int) -> None:
        super().__init__(f"No spawn point available for player {player_id}")
        self.player_id = player_id
