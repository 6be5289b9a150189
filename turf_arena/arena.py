"""Arena grid container.

The :class:`Arena` owns every tile. Tiles live in a persistent map keyed by
:class:`Position`; writes replace the map, so a snapshot taken with
``arena.tiles`` is never disturbed by later transformations.

The arena also owns the random source used by teleporters. Pass ``seed`` for
reproducible outcomes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import random
from typing import Callable, Iterator, List, Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from turf_arena.components import Position
from turf_arena.levels.factories import create_space
from turf_arena.tile import Tile
from turf_arena.types import Direction, PlayerID, TileKind

TileFactory = Callable[[], Tile]
TilePredicate = Callable[[Tile], bool]


@dataclass
class Arena:
    """Rectangular grid of tiles.

    Attributes:
        width: Grid width in tiles.
        height: Grid height in tiles.
        seed: Seed for ``rng``; ``None`` seeds from system entropy.
        fill: Factory used for every cell at construction.
        tiles: Persistent map of position to tile.
        rng: Random source for teleport exit selection.
    """

    width: int
    height: int
    seed: Optional[int] = None
    fill: TileFactory = create_space

    tiles: PMap[Position, Tile] = field(init=False)
    rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Invalid arena size {self.width}x{self.height}")
        self.rng = random.Random(self.seed)
        cells = {}
        for y in range(self.height):
            for x in range(self.width):
                tile = self.fill()
                tile.position = Position(x, y)
                cells[tile.position] = tile
        self.tiles = pmap(cells)

    # -------- Lookup --------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_tile(self, x: int, y: int) -> Optional[Tile]:
        """Return the tile at (x, y), or None off-grid."""
        return self.tiles.get(Position(x, y))

    def neighbor(self, tile: Tile, direction: int) -> Optional[Tile]:
        """Return the tile one step from ``tile`` in ``direction``, or None off-grid."""
        dx, dy = Direction.coerce(direction).offset
        return self.get_tile(tile.position.x + dx, tile.position.y + dy)

    def neighbors(self, tile: Tile) -> List[Tile]:
        """On-grid orthogonal neighbors in direction order."""
        found: List[Tile] = []
        for direction in Direction:
            neighbor = self.neighbor(tile, direction)
            if neighbor is not None:
                found.append(neighbor)
        return found

    def get_matching_tiles(self, predicate: TilePredicate) -> List[Tile]:
        """Return every tile satisfying ``predicate``, in row-major order."""
        return [tile for tile in self if predicate(tile)]

    def spawn_points(self, player_id: Optional[PlayerID] = None) -> List[Tile]:
        """Spawnable spaces open to ``player_id`` (any player if None)."""
        return self.get_matching_tiles(
            lambda tile: tile.kind is TileKind.SPAWNABLE_SPACE
            and (tile.spawn is None or tile.spawn.allows(player_id))
        )

    # -------- Mutation --------

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        """Store ``tile`` at (x, y) and sync its position."""
        self._check_bounds(x, y)
        tile.position = Position(x, y)
        self.tiles = self.tiles.set(tile.position, tile)

    # -------- Iteration --------

    def rows(self) -> Iterator[List[Tile]]:
        for y in range(self.height):
            yield [self.tiles[Position(x, y)] for x in range(self.width)]

    def __iter__(self) -> Iterator[Tile]:
        for row in self.rows():
            yield from row

    def __len__(self) -> int:
        return self.width * self.height

    # -------- Internal helpers --------

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(
                f"Out of bounds: {(x, y)} for arena {self.width}x{self.height}"
            )
