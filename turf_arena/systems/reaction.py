"""Post-turn reactions.

``after_turn`` runs once after a move has been committed onto a tile. Only
teleporters react; every other kind is a no-op.
"""

from __future__ import annotations

from dataclasses import replace
import logging
from typing import Callable, Dict, TYPE_CHECKING

from turf_arena.components import Player
from turf_arena.errors import NoTeleportPartnerError
from turf_arena.systems.collision import authoritative_player
from turf_arena.systems.transform import change_back, change_to
from turf_arena.types import Players, TileKind

if TYPE_CHECKING:
    from turf_arena.arena import Arena
    from turf_arena.tile import Tile

logger = logging.getLogger(__name__)

ReactionFn = Callable[["Tile", Player, Players, "Arena"], None]


def no_reaction(tile: Tile, player: Player, players: Players, arena: Arena) -> None:
    return None


def teleporter_after_turn(
    tile: Tile, player: Player, players: Players, arena: Arena
) -> None:
    """Send the player to a random teleporter of the same group.

    The tile standing in for the player (usually an occupation marker laid
    over this teleporter) is reverted and re-laid over the exit.

    Raises:
        NoTeleportPartnerError: No other teleporter of the group is on the
            grid. Nothing is changed in that case.
    """
    if tile.teleport is None:
        return
    group = tile.teleport.group
    candidates = arena.get_matching_tiles(
        lambda other: other is not tile
        and other.kind is TileKind.TELEPORTER
        and other.teleport is not None
        and other.teleport.group == group
    )
    if not candidates:
        logger.warning(
            "Teleporter group %d has no exit for (%d, %d)",
            group,
            tile.position.x,
            tile.position.y,
        )
        raise NoTeleportPartnerError(group, tile.position)

    exit_tile = arena.rng.choice(candidates)
    exit_position = exit_tile.position
    current = authoritative_player(player, players) or player

    standing = arena.get_tile(current.position.x, current.position.y)
    if standing is not None and standing is not tile:
        change_back(standing, arena)
        change_to(exit_tile, standing, arena)

    players[current.id] = replace(current, position=exit_position)
    logger.debug(
        "Player %d teleported (%d, %d) -> (%d, %d)",
        current.id,
        current.position.x,
        current.position.y,
        exit_position.x,
        exit_position.y,
    )


REACTION_RULES: Dict[TileKind, ReactionFn] = {
    TileKind.TELEPORTER: teleporter_after_turn,
}


def after_turn(tile: Tile, player: Player, players: Players, arena: Arena) -> None:
    """Run ``tile``'s post-turn reaction for ``player``."""
    rule = REACTION_RULES.get(tile.kind, no_reaction)
    rule(tile, player, players, arena)
