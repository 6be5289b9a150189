"""Build an :class:`Arena` from a text layout.

Each non-empty line is a row; each character is a cell looked up in a legend
mapping characters to zero-argument tile factories. Rows must all have the
same width.

Default legend::

    .  space            #  wall            S  spawn space
    T  turf (1 recap.)  W  power turf      P  power source
    I  power indicator  F  flashing ind.   C  power carrier
    H  carrier wall     L  locked wall     U  key-consuming locked wall
    B  item box         =  toggleable wall ^ > v <  one-way gates
    0-9 teleporter of that group
"""

from __future__ import annotations

from functools import partial
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from turf_arena.arena import Arena
from turf_arena.tile import Tile
from turf_arena.types import Direction
from . import factories

TileFactory = Callable[[], Tile]

DEFAULT_LEGEND: Dict[str, TileFactory] = {
    ".": factories.create_space,
    "#": factories.create_wall,
    "S": factories.create_spawnable_space,
    "T": partial(factories.create_turf, 1),
    "W": partial(factories.create_power_turf, 1),
    "P": factories.create_power_source,
    "I": factories.create_power_indicator,
    "F": factories.create_flashing_indicator,
    "C": factories.create_power_carrier,
    "H": factories.create_power_carrier_wall,
    "L": factories.create_locked_wall,
    "U": partial(factories.create_locked_wall, take_away_keys=True),
    "B": factories.create_item_box,
    "=": factories.create_toggleable_wall,
    "^": partial(factories.create_directional_wall, Direction.NORTH),
    ">": partial(factories.create_directional_wall, Direction.EAST),
    "v": partial(factories.create_directional_wall, Direction.SOUTH),
    "<": partial(factories.create_directional_wall, Direction.WEST),
}
DEFAULT_LEGEND.update(
    {str(group): partial(factories.create_teleporter, group) for group in range(10)}
)


def parse_layout(
    text: str,
    legend: Optional[Mapping[str, TileFactory]] = None,
    seed: Optional[int] = None,
) -> Arena:
    """Create an arena from ``text``.

    Args:
        text (str): Rows separated by newlines; blank lines and surrounding
            whitespace are ignored.
        legend (Mapping[str, TileFactory] | None): Extra or overriding
            character mappings, merged over :data:`DEFAULT_LEGEND`.
        seed (int | None): Seed for the arena's random source.

    Returns:
        Arena: Arena with one freshly built tile per character.

    Raises:
        ValueError: On an empty layout, ragged rows or unknown characters.
    """
    rows: List[str] = [line.strip() for line in text.splitlines() if line.strip()]
    if not rows:
        raise ValueError("Layout is empty")
    width = len(rows[0])
    for y, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"Row {y} has width {len(row)}, expected {width}")

    table: Dict[str, TileFactory] = dict(DEFAULT_LEGEND)
    if legend is not None:
        table.update(legend)

    arena = Arena(width=width, height=len(rows), seed=seed)
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            factory = table.get(char)
            if factory is None:
                raise ValueError(f"Unknown layout character {char!r} at {(x, y)}")
            arena.set_tile(x, y, factory())
    return arena


def _layout_key(tile: Tile) -> Tuple[object, ...]:
    return (
        tile.kind,
        tile.gate.facing if tile.gate is not None else None,
        tile.teleport.group if tile.teleport is not None else None,
    )


def format_layout(
    arena: Arena, legend: Optional[Mapping[str, TileFactory]] = None
) -> str:
    """Render ``arena`` back to text using each tile's kind.

    Tiles are matched on kind, gate facing and teleporter group; other
    parameters (recapture limits, key counts) are not round-tripped. Kinds
    without a character render as ``?``.
    """
    table: Dict[str, TileFactory] = dict(DEFAULT_LEGEND)
    if legend is not None:
        table.update(legend)
    by_kind: Dict[Tuple[object, ...], str] = {}
    for char, factory in table.items():
        by_kind.setdefault(_layout_key(factory()), char)
    lines = []
    for row in arena.rows():
        line = ""
        for tile in row:
            line += by_kind.get(_layout_key(tile), "?")
        lines.append(line)
    return "\n".join(lines)
