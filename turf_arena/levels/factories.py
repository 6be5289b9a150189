"""Convenience factory functions for every tile variant.

Each helper returns a fresh :class:`Tile` with its ``kind``, base color and
variant state populated from :data:`turf_arena.config.DEFAULT_CONFIG`. All
helpers take trailing ``x``/``y`` coordinates; tiles placed through
:meth:`turf_arena.arena.Arena.set_tile` have their position synced anyway.
"""

from __future__ import annotations

from typing import Optional

from turf_arena.components import (
    Capture,
    Flash,
    Gate,
    Lock,
    Ownership,
    Player,
    Position,
    Spawn,
    Supply,
    Teleport,
    Toggle,
    monotonic_ms,
)
from turf_arena.config import DEFAULT_CONFIG
from turf_arena.tile import Tile
from turf_arena.types import ClockFn, Direction, PlayerID, TileKind


def create_space(x: int = 0, y: int = 0) -> Tile:
    """Plain walkable tile."""
    return Tile(
        kind=TileKind.SPACE, position=Position(x, y), color=DEFAULT_CONFIG.space_color
    )


def create_spawnable_space(
    restricted_to: Optional[PlayerID] = None, x: int = 0, y: int = 0
) -> Tile:
    """Walkable spawn marker, optionally reserved for one player."""
    return Tile(
        kind=TileKind.SPAWNABLE_SPACE,
        position=Position(x, y),
        color=DEFAULT_CONFIG.space_color,
        spawn=Spawn(restricted_to=restricted_to),
    )


def _wall(kind: TileKind, x: int, y: int, **slots: object) -> Tile:
    tile = Tile(kind=kind, position=Position(x, y), color=DEFAULT_CONFIG.wall_color)
    for name, value in slots.items():
        setattr(tile, name, value)
    return tile


def create_wall(x: int = 0, y: int = 0) -> Tile:
    """Solid black wall."""
    return _wall(TileKind.WALL, x, y)


def create_occupied(player: Player, x: int = 0, y: int = 0) -> Tile:
    """Occupation marker left by ``player``; blocks everyone."""
    return _wall(TileKind.OCCUPIED, x, y, ownership=Ownership(owner=player))


def create_colored_wall(color: str, x: int = 0, y: int = 0) -> Tile:
    """Solid wall with a custom, changeable color."""
    tile = _wall(TileKind.COLORED_WALL, x, y)
    tile.color = color
    return tile


def change_color(tile: Tile, color: str) -> None:
    """Recolor a colored wall. Other kinds are left untouched."""
    if tile.kind is TileKind.COLORED_WALL:
        tile.color = color


def create_power_source(x: int = 0, y: int = 0) -> Tile:
    """Solid, always-energized tile."""
    return _wall(TileKind.POWER_SOURCE, x, y)


def create_power_indicator(x: int = 0, y: int = 0) -> Tile:
    """Solid tile that lights up when a neighbor is energized."""
    return _wall(TileKind.POWER_INDICATOR, x, y)


def create_flashing_indicator(
    period_ms: int = DEFAULT_CONFIG.flash_period_ms,
    clock: Optional[ClockFn] = None,
    x: int = 0,
    y: int = 0,
) -> Tile:
    """Solid tile that blinks on a fixed period."""
    flash = Flash(period_ms=period_ms, clock=clock or monotonic_ms)
    return _wall(TileKind.FLASHING_INDICATOR, x, y, flash=flash)


def create_power_carrier(x: int = 0, y: int = 0) -> Tile:
    """Walkable tile used to route power adjacency."""
    return Tile(
        kind=TileKind.POWER_CARRIER,
        position=Position(x, y),
        color=DEFAULT_CONFIG.space_color,
    )


def create_power_carrier_wall(x: int = 0, y: int = 0) -> Tile:
    """Solid counterpart of :func:`create_power_carrier`."""
    return _wall(TileKind.POWER_CARRIER_WALL, x, y)


def create_teleporter(group: int, x: int = 0, y: int = 0) -> Tile:
    """Walkable teleporter linked to every other teleporter of ``group``."""
    return Tile(
        kind=TileKind.TELEPORTER,
        position=Position(x, y),
        color=DEFAULT_CONFIG.teleporter_color,
        teleport=Teleport(group=group),
    )


def create_turf(recaptures: int, x: int = 0, y: int = 0) -> Tile:
    """Walkable turf captured by whoever enters it, up to ``recaptures`` times."""
    return Tile(
        kind=TileKind.TURF,
        position=Position(x, y),
        color=DEFAULT_CONFIG.turf_color,
        capture=Capture(recaptures=recaptures),
    )


def create_power_turf(recaptures: int, x: int = 0, y: int = 0) -> Tile:
    """Turf that carries power from a neighbor once captured."""
    return Tile(
        kind=TileKind.POWER_TURF,
        position=Position(x, y),
        color=DEFAULT_CONFIG.turf_color,
        capture=Capture(recaptures=recaptures),
    )


def create_home_space(owner: Player, x: int = 0, y: int = 0) -> Tile:
    """Wall that only its owner may enter."""
    return _wall(TileKind.HOME_SPACE, x, y, ownership=Ownership(owner=owner))


def create_locked_wall(
    x: int = 0, y: int = 0, keys_needed: int = 1, take_away_keys: bool = False
) -> Tile:
    """Wall passable with enough keys; optionally consumes them."""
    tile = _wall(
        TileKind.LOCKED_WALL,
        x,
        y,
        lock=Lock(keys_needed=keys_needed, take_away_keys=take_away_keys),
    )
    tile.color = DEFAULT_CONFIG.locked_wall_color
    return tile


def create_directional_wall(direction: int, x: int = 0, y: int = 0) -> Tile:
    """One-way gate blocking entries made in ``direction``.

    Out-of-range directions are clamped to north.
    """
    tile = _wall(
        TileKind.DIRECTIONAL_WALL, x, y, gate=Gate(facing=Direction.coerce(direction))
    )
    tile.color = DEFAULT_CONFIG.directional_wall_color
    return tile


def create_toggleable_wall(x: int = 0, y: int = 0) -> Tile:
    """Wall opened and closed by facing actions; starts closed."""
    tile = _wall(TileKind.TOGGLEABLE_WALL, x, y, toggle=Toggle(closed=True))
    tile.color = DEFAULT_CONFIG.toggleable_wall_color
    return tile


def create_item_box(x: int = 0, y: int = 0) -> Tile:
    """Walkable box granting one key to the first player to enter."""
    return Tile(
        kind=TileKind.ITEM_BOX,
        position=Position(x, y),
        color=DEFAULT_CONFIG.item_box_color,
        supply=Supply(active=True),
    )


__all__ = [
    "change_color",
    "create_colored_wall",
    "create_directional_wall",
    "create_flashing_indicator",
    "create_home_space",
    "create_item_box",
    "create_locked_wall",
    "create_occupied",
    "create_power_carrier",
    "create_power_carrier_wall",
    "create_power_indicator",
    "create_power_source",
    "create_power_turf",
    "create_space",
    "create_spawnable_space",
    "create_teleporter",
    "create_toggleable_wall",
    "create_turf",
    "create_wall",
]
