"""Rendering descriptors.

``render`` is pulled once per frame for every tile and never mutates state.
``preview_render`` is the planning-mode view: tiles that would leak ownership
report a uniform blocked color instead.
"""

from __future__ import annotations

from typing import Callable, Dict, FrozenSet, Optional, TYPE_CHECKING

from turf_arena.components import Rendering
from turf_arena.config import DEFAULT_CONFIG
from turf_arena.systems.power import neighbor_energized
from turf_arena.types import TileKind
from turf_arena.utils.color import brighten, mix

if TYPE_CHECKING:
    from turf_arena.arena import Arena
    from turf_arena.tile import Tile

RenderFn = Callable[["Tile", Optional["Arena"]], Rendering]

PREVIEW_HIDDEN: FrozenSet[TileKind] = frozenset(
    {TileKind.OCCUPIED, TileKind.HOME_SPACE}
)


def indicator_rendering(lit: bool) -> Rendering:
    if lit:
        return Rendering.image(DEFAULT_CONFIG.indicator_on_asset)
    return Rendering.color(DEFAULT_CONFIG.indicator_off_color)


def plain_color(tile: Tile, arena: Optional[Arena]) -> Rendering:
    return Rendering.color(tile.color)


def owner_color(tile: Tile, arena: Optional[Arena]) -> Rendering:
    if tile.ownership is None:
        return plain_color(tile, arena)
    return Rendering.color(tile.ownership.owner.color)


def power_source_color(tile: Tile, arena: Optional[Arena]) -> Rendering:
    return Rendering.color(DEFAULT_CONFIG.power_source_color)


def power_indicator(tile: Tile, arena: Optional[Arena]) -> Rendering:
    return indicator_rendering(arena is not None and neighbor_energized(tile, arena))


def flashing_indicator(tile: Tile, arena: Optional[Arena]) -> Rendering:
    flash = tile.flash
    if flash is None or flash.period_ms <= 0:
        return indicator_rendering(False)
    return indicator_rendering(round(flash.clock() / flash.period_ms) % 2 == 1)


def _captor_color(tile: Tile) -> Optional[str]:
    if tile.capture is None or tile.capture.owner is None:
        return None
    return tile.capture.owner.color


def turf_color(tile: Tile, arena: Optional[Arena]) -> Rendering:
    color = _captor_color(tile)
    return Rendering.color(brighten(color) if color else DEFAULT_CONFIG.turf_color)


def power_turf_color(tile: Tile, arena: Optional[Arena]) -> Rendering:
    color = _captor_color(tile) or DEFAULT_CONFIG.turf_color
    return Rendering.color(
        mix(
            brighten(color),
            DEFAULT_CONFIG.power_tint,
            DEFAULT_CONFIG.power_tint_amount,
        )
    )


RENDER_RULES: Dict[TileKind, RenderFn] = {
    TileKind.OCCUPIED: owner_color,
    TileKind.HOME_SPACE: owner_color,
    TileKind.POWER_SOURCE: power_source_color,
    TileKind.POWER_INDICATOR: power_indicator,
    TileKind.FLASHING_INDICATOR: flashing_indicator,
    TileKind.TURF: turf_color,
    TileKind.POWER_TURF: power_turf_color,
}


def render(tile: Tile, arena: Optional[Arena] = None) -> Rendering:
    """Return the display descriptor of ``tile``.

    ``arena`` is needed by tiles that render from their surroundings (power
    indicators); without it those render as unlit.
    """
    rule = RENDER_RULES.get(tile.kind, plain_color)
    return rule(tile, arena)


def preview_render(tile: Tile, arena: Optional[Arena] = None) -> Rendering:
    """Planning-mode descriptor; hides ownership of occupied and home tiles."""
    if tile.kind in PREVIEW_HIDDEN:
        return Rendering.color(DEFAULT_CONFIG.blocked_preview_color)
    return render(tile, arena)
