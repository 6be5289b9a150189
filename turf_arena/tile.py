"""Mutable grid cell object.

A :class:`Tile` is one cell's behavioral object. Its ``kind`` selects the
rules applied by :mod:`turf_arena.systems`; the optional component slots hold
per-variant state. Only the slots relevant to ``kind`` are populated (see the
constructors in :mod:`turf_arena.levels.factories`).

Tiles compare and hash by identity: the arena, the undo link and callers that
hold on to a tile all rely on reference equality.

The protocol methods below are thin conveniences over the system functions,
so ``tile.collides(...)`` and ``collides(tile, ...)`` are interchangeable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING

from turf_arena.components import (
    Capture,
    Flash,
    Gate,
    Lock,
    Ownership,
    Player,
    Position,
    Rendering,
    Spawn,
    Supply,
    Teleport,
    Toggle,
)
from turf_arena.systems import action, collision, describe, power, reaction, render
from turf_arena.systems import transform
from turf_arena.types import Players, TileKind

if TYPE_CHECKING:
    from turf_arena.arena import Arena


@dataclass(eq=False)
class Tile:
    """One grid cell.

    Attributes:
        kind: Variant tag driving every rule.
        position: Grid coordinate, kept in sync by the arena.
        color: Display color used by plain color renderings.
        prior_tile: Tile displaced by this one (depth-1 undo link).
        occupying: Display name of the displaced tile's variant.
        spawn: Spawn restriction (spawnable spaces).
        ownership: Owning player (occupation markers, home tiles).
        capture: Capture state (turf, power turf).
        lock: Key requirement (locked walls).
        gate: Blocked entry direction (one-way gates).
        toggle: Open/closed flag (toggleable walls).
        supply: Remaining item (item boxes).
        teleport: Teleporter group.
        flash: Blink timing (flashing indicators).
    """

    kind: TileKind
    position: Position = field(default_factory=lambda: Position(0, 0))
    color: str = "white"
    prior_tile: Optional[Tile] = None
    occupying: Optional[str] = None

    spawn: Optional[Spawn] = None
    ownership: Optional[Ownership] = None
    capture: Optional[Capture] = None
    lock: Optional[Lock] = None
    gate: Optional[Gate] = None
    toggle: Optional[Toggle] = None
    supply: Optional[Supply] = None
    teleport: Optional[Teleport] = None
    flash: Optional[Flash] = None

    # -------- Protocol --------

    def collides(
        self,
        direction: Optional[int] = None,
        player: Optional[Player] = None,
        players: Optional[Players] = None,
    ) -> bool:
        return collision.collides(self, direction, player, players)

    def render(self, arena: Optional[Arena] = None) -> Rendering:
        return render.render(self, arena)

    def preview_render(self, arena: Optional[Arena] = None) -> Rendering:
        return render.preview_render(self, arena)

    def is_energized(self, arena: Optional[Arena] = None) -> bool:
        return power.is_energized(self, arena)

    def after_turn(self, player: Player, players: Players, arena: Arena) -> None:
        reaction.after_turn(self, player, players, arena)

    def change_to(self, new_tile: Tile, arena: Arena) -> None:
        transform.change_to(self, new_tile, arena)

    def change_back(self, arena: Arena) -> bool:
        return transform.change_back(self, arena)

    def do_facing_action(self) -> bool:
        return action.do_facing_action(self)

    def describe(self) -> str:
        return describe.describe(self)

    def __str__(self) -> str:
        return self.describe()
