"""Collision resolution.

``collides`` is called once per movement attempt, on the tile the player is
trying to enter, before the move is committed. ``True`` blocks the move.
Several variants change state as a side effect whatever the outcome.

Player state is always read from and written back to the authoritative
``players`` mapping when one is given; the ``player`` argument may be a stale
snapshot. Without a mapping (probe contexts) the boolean is still computed but
no player state changes; turf captures record the given snapshot.
"""

from __future__ import annotations

from dataclasses import replace
import logging
from typing import Callable, Dict, Optional, TYPE_CHECKING

from turf_arena.components import Player
from turf_arena.config import DEFAULT_CONFIG
from turf_arena.types import Direction, Players, TileKind

if TYPE_CHECKING:
    from turf_arena.tile import Tile

logger = logging.getLogger(__name__)

CollideFn = Callable[["Tile", int, Optional[Player], Optional[Players]], bool]


def authoritative_player(
    player: Optional[Player], players: Optional[Players]
) -> Optional[Player]:
    """Return the current record for ``player`` from ``players`` if present."""
    if player is None or players is None:
        return player
    return players.get(player.id, player)


def passable(
    tile: Tile, direction: int, player: Optional[Player], players: Optional[Players]
) -> bool:
    return False


def solid(
    tile: Tile, direction: int, player: Optional[Player], players: Optional[Players]
) -> bool:
    return True


def turf_collides(
    tile: Tile, direction: int, player: Optional[Player], players: Optional[Players]
) -> bool:
    """Never blocks; captures the turf for the entering player when allowed."""
    capture = tile.capture
    if capture is None or player is None:
        return False
    if capture.can_capture:
        owner = authoritative_player(player, players)
        tile.capture = replace(capture, owner=owner, count=capture.count + 1)
        logger.debug(
            "Turf at (%d, %d) captured by player %d (%d/%d)",
            tile.position.x,
            tile.position.y,
            player.id,
            tile.capture.count,
            capture.recaptures,
        )
    return False


def locked_wall_collides(
    tile: Tile, direction: int, player: Optional[Player], players: Optional[Players]
) -> bool:
    """Blocks players holding fewer keys than required; may consume keys."""
    lock = tile.lock
    current = authoritative_player(player, players)
    if lock is None:
        return True
    if current is None or current.keys < lock.keys_needed:
        return True
    if lock.take_away_keys and players is not None:
        players[current.id] = replace(current, keys=current.keys - lock.keys_needed)
        logger.debug(
            "Player %d spent %d key(s) at (%d, %d)",
            current.id,
            lock.keys_needed,
            tile.position.x,
            tile.position.y,
        )
    return False


def directional_wall_collides(
    tile: Tile, direction: int, player: Optional[Player], players: Optional[Players]
) -> bool:
    facing = tile.gate.facing if tile.gate is not None else Direction.NORTH
    return direction == facing


def toggleable_wall_collides(
    tile: Tile, direction: int, player: Optional[Player], players: Optional[Players]
) -> bool:
    return tile.toggle is None or tile.toggle.closed


def item_box_collides(
    tile: Tile, direction: int, player: Optional[Player], players: Optional[Players]
) -> bool:
    """Never blocks; an active box grants one key and deactivates."""
    supply = tile.supply
    current = authoritative_player(player, players)
    if supply is None or not supply.active or current is None or players is None:
        return False
    players[current.id] = replace(current, keys=current.keys + 1)
    tile.supply = replace(supply, active=False)
    logger.debug(
        "Item box at (%d, %d) granted a key to player %d",
        tile.position.x,
        tile.position.y,
        current.id,
    )
    return False


def home_space_collides(
    tile: Tile, direction: int, player: Optional[Player], players: Optional[Players]
) -> bool:
    if player is None or tile.ownership is None:
        return True
    return player.id != tile.ownership.owner.id


COLLIDE_RULES: Dict[TileKind, CollideFn] = {
    TileKind.SPACE: passable,
    TileKind.SPAWNABLE_SPACE: passable,
    TileKind.POWER_CARRIER: passable,
    TileKind.TELEPORTER: passable,
    TileKind.TURF: turf_collides,
    TileKind.POWER_TURF: turf_collides,
    TileKind.ITEM_BOX: item_box_collides,
    TileKind.LOCKED_WALL: locked_wall_collides,
    TileKind.DIRECTIONAL_WALL: directional_wall_collides,
    TileKind.TOGGLEABLE_WALL: toggleable_wall_collides,
    TileKind.HOME_SPACE: home_space_collides,
}


def collides(
    tile: Tile,
    direction: Optional[int] = None,
    player: Optional[Player] = None,
    players: Optional[Players] = None,
) -> bool:
    """Return True if ``tile`` blocks ``player`` entering it.

    Args:
        tile (Tile): Tile being entered.
        direction (int | None): Direction of travel (0-3). Defaults to south
            for callers without a real direction.
        player (Player | None): Entering player, possibly a snapshot.
        players (Players | None): Authoritative players mapping; receives any
            key changes.

    Returns:
        bool: True blocks the move, False permits it.
    """
    if direction is None:
        direction = DEFAULT_CONFIG.default_direction
    rule = COLLIDE_RULES.get(tile.kind, solid)
    return rule(tile, direction, player, players)
