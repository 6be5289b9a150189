"""Transformation / reversion protocol.

The only way grid contents change after construction. ``change_to`` swaps a
tile for another and records the displaced one on the newcomer;
``change_back`` undoes exactly one such swap. The undo link is depth 1: the
restored tile keeps whatever link it had before it was displaced.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from turf_arena.arena import Arena
    from turf_arena.tile import Tile

logger = logging.getLogger(__name__)


def change_to(tile: Tile, new_tile: Tile, arena: Arena) -> None:
    """Replace ``tile`` in the arena with ``new_tile``.

    ``new_tile`` takes over the position, remembers ``tile`` as its prior tile
    and records the displaced variant's display name in ``occupying``. Swapping
    a tile for itself is a no-op.
    """
    if new_tile is tile:
        return
    new_tile.position = tile.position
    new_tile.prior_tile = tile
    new_tile.occupying = tile.kind.display_name
    arena.set_tile(tile.position.x, tile.position.y, new_tile)
    logger.debug(
        "(%d, %d): %s -> %s",
        tile.position.x,
        tile.position.y,
        tile.kind.display_name,
        new_tile.kind.display_name,
    )


def change_back(tile: Tile, arena: Arena) -> bool:
    """Restore the tile ``tile`` displaced, consuming the undo link.

    Returns:
        bool: True if a prior tile was restored, False if there was none (no
            mutation in that case).
    """
    prior = tile.prior_tile
    if prior is None:
        return False
    tile.prior_tile = None
    arena.set_tile(tile.position.x, tile.position.y, prior)
    logger.debug(
        "(%d, %d): %s restored",
        tile.position.x,
        tile.position.y,
        prior.kind.display_name,
    )
    return True
