"""Human readable tile labels for debugging and UI tooltips."""

from __future__ import annotations

from typing import Callable, Dict, TYPE_CHECKING

from turf_arena.types import TileKind

if TYPE_CHECKING:
    from turf_arena.tile import Tile

DescribeFn = Callable[["Tile"], str]


def _player_label(player_id: int) -> str:
    return f"Player {player_id + 1}"


def _spawn(tile: Tile) -> str:
    return "Spawn space"


def _occupied(tile: Tile) -> str:
    if tile.ownership is None:
        return tile.kind.display_name
    return f"{_player_label(tile.ownership.owner.id)}'s tile"


def _colored_wall(tile: Tile) -> str:
    return f"Wall colored {tile.color}"


def _turf(tile: Tile) -> str:
    if tile.capture is None or tile.capture.owner is None:
        return tile.kind.display_name
    return f"{_player_label(tile.capture.owner.id)}'s turf"


def _power_turf(tile: Tile) -> str:
    if tile.capture is None or tile.capture.owner is None:
        return "Power-connecting turf"
    return f"{_player_label(tile.capture.owner.id)}'s power-connecting turf"


def _home_space(tile: Tile) -> str:
    if tile.ownership is None:
        return tile.kind.display_name
    return f"{_player_label(tile.ownership.owner.id)}'s home tile"


def _locked_wall(tile: Tile) -> str:
    lock = tile.lock
    if lock is None:
        return tile.kind.display_name
    prefix = "Unstable locked" if lock.take_away_keys else "Locked"
    plural = "" if lock.keys_needed == 1 else "s"
    return f"{prefix} wall requiring {lock.keys_needed} key{plural}"


def _directional_wall(tile: Tile) -> str:
    if tile.gate is None:
        return tile.kind.display_name
    return f"One-way gate facing {tile.gate.facing.label}"


def _toggleable_wall(tile: Tile) -> str:
    closed = tile.toggle is None or tile.toggle.closed
    return "Closed toggleable wall" if closed else "Toggleable wall"


def _item_box(tile: Tile) -> str:
    active = tile.supply is not None and tile.supply.active
    return "Item box" if active else "Empty item box"


DESCRIBE_RULES: Dict[TileKind, DescribeFn] = {
    TileKind.SPAWNABLE_SPACE: _spawn,
    TileKind.OCCUPIED: _occupied,
    TileKind.COLORED_WALL: _colored_wall,
    TileKind.TURF: _turf,
    TileKind.POWER_TURF: _power_turf,
    TileKind.HOME_SPACE: _home_space,
    TileKind.LOCKED_WALL: _locked_wall,
    TileKind.DIRECTIONAL_WALL: _directional_wall,
    TileKind.TOGGLEABLE_WALL: _toggleable_wall,
    TileKind.ITEM_BOX: _item_box,
}


def describe(tile: Tile) -> str:
    """Return a label summarizing the variant and its dynamic state."""
    rule = DESCRIBE_RULES.get(tile.kind)
    if rule is None:
        return tile.kind.display_name
    return rule(tile)
