from collections import Counter
from typing import Dict, Tuple

import pytest

from turf_arena.arena import Arena
from turf_arena.components import Player, Position
from turf_arena.errors import NoTeleportPartnerError
from turf_arena.levels.factories import (
    create_item_box,
    create_occupied,
    create_teleporter,
    create_turf,
)
from turf_arena.systems.reaction import after_turn
from turf_arena.tile import Tile
from turf_arena.types import PlayerID, TileKind
from tests.test_utils import at, make_arena, make_players, move_player, place


def _enter(
    arena: Arena,
    players: Dict[PlayerID, Player],
    player_id: PlayerID,
    pos: Tuple[int, int],
) -> Tile:
    """Lay the player's marker over ``pos`` the way a turn engine would."""
    entered = at(arena, pos)
    player = move_player(players, player_id, pos)
    entered.change_to(create_occupied(player), arena)
    return entered


def test_default_reaction_is_noop() -> None:
    arena = make_arena()
    players = make_players("red")
    box = place(arena, (1, 1), create_item_box())
    before = arena.tiles
    after_turn(box, players[0], players, arena)
    box.after_turn(players[0], players, arena)
    assert arena.tiles is before
    assert players[0].position == Position(0, 0)


def test_teleporter_moves_player_and_marker_to_partner() -> None:
    arena = make_arena()
    players = make_players("red")
    entry = place(arena, (0, 0), create_teleporter(7))
    exit_tile = place(arena, (4, 4), create_teleporter(7))

    entered = _enter(arena, players, 0, (0, 0))
    marker = at(arena, (0, 0))
    entered.after_turn(players[0], players, arena)

    assert players[0].position == Position(4, 4)
    assert at(arena, (0, 0)) is entry
    assert at(arena, (4, 4)) is marker
    assert marker.prior_tile is exit_tile
    assert marker.occupying == "Teleporter"
    assert entry.prior_tile is None


def test_teleporter_ignores_other_groups() -> None:
    arena = make_arena()
    players = make_players("red")
    place(arena, (0, 0), create_teleporter(1))
    place(arena, (2, 2), create_teleporter(2))
    place(arena, (4, 0), create_teleporter(1))

    entered = _enter(arena, players, 0, (0, 0))
    entered.after_turn(players[0], players, arena)
    assert players[0].position == Position(4, 0)


def test_teleporter_without_partner_raises_and_changes_nothing() -> None:
    arena = make_arena()
    players = make_players("red")
    place(arena, (1, 1), create_teleporter(3))
    place(arena, (3, 3), create_teleporter(9))

    entered = _enter(arena, players, 0, (1, 1))
    before = arena.tiles
    with pytest.raises(NoTeleportPartnerError) as info:
        entered.after_turn(players[0], players, arena)
    assert info.value.group == 3
    assert arena.tiles is before
    assert players[0].position == Position(1, 1)


def test_teleporter_without_marker_moves_only_player() -> None:
    arena = make_arena()
    players = make_players("red")
    entry = place(arena, (0, 0), create_teleporter(5))
    exit_tile = place(arena, (2, 0), create_teleporter(5))
    move_player(players, 0, (0, 0))

    entry.after_turn(players[0], players, arena)
    assert players[0].position == Position(2, 0)
    assert at(arena, (0, 0)) is entry
    assert at(arena, (2, 0)) is exit_tile


def test_teleporter_exit_is_reproducible_with_seed() -> None:
    def run(seed: int) -> Position:
        arena = make_arena(seed=seed)
        players = make_players("red")
        for x in range(5):
            place(arena, (x, 4), create_teleporter(1))
        entered = _enter(arena, players, 0, (0, 4))
        entered.after_turn(players[0], players, arena)
        return players[0].position

    assert run(11) == run(11)


def test_teleporter_picks_every_partner_eventually() -> None:
    arena = make_arena(seed=1)
    players = make_players("red")
    entry = place(arena, (2, 2), create_teleporter(1))
    place(arena, (0, 0), create_teleporter(1))
    place(arena, (4, 0), create_teleporter(1))

    exits: Counter[Position] = Counter()
    for _ in range(40):
        move_player(players, 0, (1, 2))
        entered = _enter(arena, players, 0, (2, 2))
        entered.after_turn(players[0], players, arena)
        exits[players[0].position] += 1
        marker = at(arena, players[0].position)
        marker.change_back(arena)

    assert set(exits) == {Position(0, 0), Position(4, 0)}
    assert at(arena, (2, 2)) is entry
    assert all(tile.kind is not TileKind.OCCUPIED for tile in arena)


def test_turf_under_teleport_marker_is_restored() -> None:
    arena = make_arena()
    players = make_players("red")
    place(arena, (0, 0), create_teleporter(2))
    place(arena, (0, 4), create_teleporter(2))
    turf = place(arena, (1, 0), create_turf(1))

    entered = _enter(arena, players, 0, (0, 0))
    entered.after_turn(players[0], players, arena)
    assert at(arena, (1, 0)) is turf
