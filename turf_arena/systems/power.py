"""Power propagation rule.

A tile is energized if it is a power source, or if its own rule derives power
from adjacency (captured power turf). ``neighbor_energized`` looks at the four
orthogonal neighbors only and is recomputed on every query, so the answer
depends only on the arena's current contents.

Adjacency-driven tiles can be mutual neighbors. Evaluation carries the set of
tiles already being evaluated; a tile met again on the same query counts as
not energized.
"""

from __future__ import annotations

from typing import AbstractSet, Callable, Dict, Optional, TYPE_CHECKING

from turf_arena.types import Direction, TileKind

if TYPE_CHECKING:
    from turf_arena.arena import Arena
    from turf_arena.tile import Tile

EnergizeFn = Callable[["Tile", Optional["Arena"], AbstractSet["Tile"]], bool]


def _unpowered(
    tile: Tile, arena: Optional[Arena], visiting: AbstractSet[Tile]
) -> bool:
    return False


def _source(tile: Tile, arena: Optional[Arena], visiting: AbstractSet[Tile]) -> bool:
    return True


def _power_turf(
    tile: Tile, arena: Optional[Arena], visiting: AbstractSet[Tile]
) -> bool:
    if tile.capture is None or tile.capture.owner is None or arena is None:
        return False
    return _neighbor_energized(tile, arena, visiting)


ENERGIZE_RULES: Dict[TileKind, EnergizeFn] = {
    TileKind.POWER_SOURCE: _source,
    TileKind.POWER_TURF: _power_turf,
}


def _is_energized(
    tile: Tile, arena: Optional[Arena], visiting: AbstractSet[Tile]
) -> bool:
    if tile in visiting:
        return False
    rule = ENERGIZE_RULES.get(tile.kind, _unpowered)
    return rule(tile, arena, visiting | {tile})


def _neighbor_energized(
    tile: Tile, arena: Arena, visiting: AbstractSet[Tile]
) -> bool:
    for direction in Direction:
        neighbor = arena.neighbor(tile, direction)
        if neighbor is not None and _is_energized(neighbor, arena, visiting):
            return True
    return False


def is_energized(tile: Tile, arena: Optional[Arena] = None) -> bool:
    """Return True if ``tile`` currently supplies or carries power.

    Without an ``arena`` only intrinsic sources report True.
    """
    return _is_energized(tile, arena, frozenset())


def neighbor_energized(tile: Tile, arena: Arena) -> bool:
    """Return True if any on-grid orthogonal neighbor of ``tile`` is energized."""
    return _neighbor_energized(tile, arena, frozenset({tile}))
