"""Reference single-move turn step.

A minimal driver for the tile protocols, in the order a turn engine calls
them:

1. ``collides`` on the tile being entered (may block, may have side effects).
2. The player's previous occupation marker is reverted (unless trails are
   kept) and a new marker is laid over the entered tile with ``change_to``.
3. ``after_turn`` on the entered tile (teleporters relocate the marker).

Players are held in an authoritative mapping; every function here writes
player changes back into it. A real engine can replace this module freely.
"""

from dataclasses import replace
import logging
from typing import Optional

from turf_arena.arena import Arena
from turf_arena.errors import NoSpawnPointError, NoTeleportPartnerError
from turf_arena.levels.factories import create_occupied
from turf_arena.tile import Tile
from turf_arena.types import Direction, PlayerID, Players, TileKind

logger = logging.getLogger(__name__)


def _own_marker(arena: Arena, players: Players, player_id: PlayerID) -> Optional[Tile]:
    position = players[player_id].position
    tile = arena.get_tile(position.x, position.y)
    if (
        tile is not None
        and tile.kind is TileKind.OCCUPIED
        and tile.ownership is not None
        and tile.ownership.owner.id == player_id
    ):
        return tile
    return None


def spawn_player(arena: Arena, players: Players, player_id: PlayerID) -> Tile:
    """Place a player on a random spawn point open to them.

    Returns:
        Tile: The occupation marker laid over the spawn point.

    Raises:
        NoSpawnPointError: No spawnable space accepts the player.
    """
    candidates = arena.spawn_points(player_id)
    if not candidates:
        raise NoSpawnPointError(player_id)
    spawn = arena.rng.choice(candidates)
    player = replace(players[player_id], position=spawn.position)
    marker = create_occupied(player)
    spawn.change_to(marker, arena)
    players[player_id] = player
    logger.debug(
        "Player %d spawned at (%d, %d)", player_id, spawn.position.x, spawn.position.y
    )
    return marker


def attempt_move(
    arena: Arena,
    players: Players,
    player_id: PlayerID,
    direction: int,
    leave_trail: bool = False,
) -> bool:
    """Try to move a player one tile.

    Args:
        arena (Arena): Arena being played.
        players (Players): Authoritative players mapping.
        player_id (PlayerID): Moving player.
        direction (int): Direction index 0-3.
        leave_trail (bool): Keep the previous occupation marker in place
            instead of reverting it.

    Returns:
        bool: True if the move was committed.
    """
    direction = Direction.coerce(direction)
    player = players[player_id]
    dx, dy = direction.offset
    target = arena.get_tile(player.position.x + dx, player.position.y + dy)
    if target is None:
        return False
    if target.collides(direction, player, players):
        logger.debug(
            "Player %d blocked by %s at (%d, %d)",
            player_id,
            target.describe(),
            target.position.x,
            target.position.y,
        )
        return False

    previous = _own_marker(arena, players, player_id)
    if previous is not None and not leave_trail:
        previous.change_back(arena)

    current = replace(players[player_id], position=target.position)
    target.change_to(create_occupied(current), arena)
    players[player_id] = current

    try:
        target.after_turn(current, players, arena)
    except NoTeleportPartnerError as exc:
        logger.warning("Teleport skipped for player %d: %s", player_id, exc)
    return True


def face_action(
    arena: Arena, players: Players, player_id: PlayerID, direction: int
) -> bool:
    """Apply the facing action to the tile next to a player.

    Returns:
        bool: True if the faced tile reacted.
    """
    position = players[player_id].position
    dx, dy = Direction.coerce(direction).offset
    faced = arena.get_tile(position.x + dx, position.y + dy)
    if faced is None:
        return False
    return faced.do_facing_action()
