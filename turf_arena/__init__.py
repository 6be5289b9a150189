"""turf_arena
=============

Per-cell rule engine for a turn-based, grid-occupancy arena game.

Every arena cell holds a :class:`Tile` whose ``kind`` decides how it reacts
to the turn engine: whether it blocks an entering player (and what it does to
them), how it renders, what happens after a move lands on it, and how it is
swapped for another tile and back. Behavior lives in :mod:`turf_arena.systems`;
tiles are built with :mod:`turf_arena.levels.factories` or from text with
:func:`turf_arena.levels.layout.parse_layout`.

Example::

    from turf_arena import Player, parse_layout
    from turf_arena.step import attempt_move, spawn_player

    arena = parse_layout('''
        S.B
        #L.
    ''', seed=0)
    players = {0: Player(id=0, color="#3366ff")}
    spawn_player(arena, players, 0)
    attempt_move(arena, players, 0, 1)
"""

from turf_arena.types import Direction, PlayerID, Players, RenderKind, TileKind
from turf_arena.components import Player, Position, Rendering
from turf_arena.config import DEFAULT_CONFIG, TileConfig
from turf_arena.errors import (
    NoSpawnPointError,
    NoTeleportPartnerError,
    TurfArenaError,
)
from turf_arena.tile import Tile
from turf_arena.arena import Arena
from turf_arena.systems.power import is_energized, neighbor_energized
from turf_arena.levels.layout import format_layout, parse_layout

__all__ = [
    "Arena",
    "DEFAULT_CONFIG",
    "Direction",
    "NoSpawnPointError",
    "NoTeleportPartnerError",
    "Player",
    "PlayerID",
    "Players",
    "Position",
    "RenderKind",
    "Rendering",
    "Tile",
    "TileConfig",
    "TileKind",
    "TurfArenaError",
    "format_layout",
    "is_energized",
    "neighbor_energized",
    "parse_layout",
]
