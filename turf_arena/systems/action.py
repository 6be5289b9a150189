"""Explicit player-initiated actions on a facing tile."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from turf_arena.types import TileKind

if TYPE_CHECKING:
    from turf_arena.tile import Tile


def do_facing_action(tile: Tile) -> bool:
    """Apply the facing action to ``tile``.

    Toggleable walls flip between open and closed. Other kinds ignore the
    action.

    Returns:
        bool: True if the tile reacted.
    """
    if tile.kind is TileKind.TOGGLEABLE_WALL and tile.toggle is not None:
        tile.toggle = replace(tile.toggle, closed=not tile.toggle.closed)
        return True
    return False
