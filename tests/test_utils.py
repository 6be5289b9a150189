from dataclasses import replace
from typing import Dict, Tuple, Union

from turf_arena.arena import Arena
from turf_arena.components import Player, Position
from turf_arena.tile import Tile
from turf_arena.types import PlayerID


def make_players(*colors: str, keys: int = 0) -> Dict[PlayerID, Player]:
    """Players with ids 0..n-1 in the given colors."""
    return {
        pid: Player(id=pid, color=color, keys=keys) for pid, color in enumerate(colors)
    }


def make_arena(width: int = 5, height: int = 5, seed: int = 0) -> Arena:
    """All-space arena with a fixed seed."""
    return Arena(width=width, height=height, seed=seed)


def place(arena: Arena, pos: Tuple[int, int], tile: Tile) -> Tile:
    """Store ``tile`` at ``pos`` and return it."""
    arena.set_tile(pos[0], pos[1], tile)
    return tile


def at(arena: Arena, pos: Union[Tuple[int, int], Position]) -> Tile:
    if isinstance(pos, Position):
        pos = (pos.x, pos.y)
    tile = arena.get_tile(*pos)
    assert tile is not None
    return tile


def move_player(
    players: Dict[PlayerID, Player], player_id: PlayerID, pos: Tuple[int, int]
) -> Player:
    players[player_id] = replace(players[player_id], position=Position(*pos))
    return players[player_id]
