from typing import Callable, List

import pytest

from turf_arena.components import Player
from turf_arena.levels.factories import (
    create_colored_wall,
    create_directional_wall,
    create_flashing_indicator,
    create_home_space,
    create_item_box,
    create_locked_wall,
    create_occupied,
    create_power_carrier,
    create_power_carrier_wall,
    create_power_indicator,
    create_power_source,
    create_power_turf,
    create_space,
    create_spawnable_space,
    create_teleporter,
    create_toggleable_wall,
    create_turf,
    create_wall,
)
from turf_arena.systems.collision import collides
from turf_arena.tile import Tile
from turf_arena.types import Direction
from tests.test_utils import make_players


OWNER = Player(id=0, color="#3366ff")

PASSABLE: List[Callable[[], Tile]] = [
    create_space,
    create_spawnable_space,
    create_power_carrier,
    lambda: create_teleporter(1),
    lambda: create_turf(1),
    lambda: create_power_turf(1),
    create_item_box,
]

SOLID: List[Callable[[], Tile]] = [
    create_wall,
    lambda: create_occupied(OWNER),
    lambda: create_colored_wall("blue"),
    create_power_source,
    create_power_indicator,
    create_flashing_indicator,
    create_power_carrier_wall,
    create_toggleable_wall,
]


@pytest.mark.parametrize("factory", PASSABLE)
def test_passable_tiles_never_block(factory: Callable[[], Tile]) -> None:
    players = make_players("red")
    tile = factory()
    for direction in Direction:
        assert tile.collides(direction, players[0], players) is False


@pytest.mark.parametrize("factory", SOLID)
def test_solid_tiles_block(factory: Callable[[], Tile]) -> None:
    players = make_players("red")
    tile = factory()
    for direction in Direction:
        assert tile.collides(direction, players[0], players) is True


def test_solid_tile_blocks_without_arguments() -> None:
    assert collides(create_wall()) is True
    assert collides(create_space()) is False


# --- Turf ---


def test_turf_first_capture_sets_owner_and_count() -> None:
    players = make_players("red", "blue")
    turf = create_turf(1)
    assert turf.collides(Direction.EAST, players[0], players) is False
    assert turf.capture is not None
    assert turf.capture.owner is not None
    assert turf.capture.owner.id == 0
    assert turf.capture.count == 1


def test_turf_recapture_limit_freezes_owner() -> None:
    players = make_players("red", "blue")
    turf = create_turf(1)
    turf.collides(Direction.EAST, players[0], players)
    turf.collides(Direction.EAST, players[1], players)
    assert turf.capture is not None and turf.capture.owner is not None
    assert turf.capture.owner.id == 1
    assert turf.capture.count == 2

    turf.collides(Direction.EAST, players[0], players)
    turf.collides(Direction.WEST, players[0], players)
    assert turf.capture.owner.id == 1
    assert turf.capture.count == 2


def test_turf_accepts_initial_capture_plus_recaptures() -> None:
    players = make_players("red", "blue")
    turf = create_turf(2)
    for pid in (0, 1, 0):
        turf.collides(Direction.SOUTH, players[pid], players)
    assert turf.capture is not None and turf.capture.owner is not None
    assert turf.capture.owner.id == 0
    assert turf.capture.count == 3

    turf.collides(Direction.SOUTH, players[1], players)
    assert turf.capture.owner.id == 0
    assert turf.capture.count == 3


def test_turf_zero_recaptures_only_first_capture_counts() -> None:
    players = make_players("red", "blue")
    turf = create_turf(0)
    turf.collides(Direction.NORTH, players[0], players)
    turf.collides(Direction.NORTH, players[1], players)
    assert turf.capture is not None and turf.capture.owner is not None
    assert turf.capture.owner.id == 0
    assert turf.capture.count == 1


def test_turf_records_authoritative_player() -> None:
    players = make_players("red")
    stale = players[0]
    players[0] = Player(id=0, color="green", keys=4)
    turf = create_turf(2)
    turf.collides(Direction.NORTH, stale, players)
    assert turf.capture is not None
    assert turf.capture.owner == players[0]


def test_turf_capture_without_players_mapping_uses_snapshot() -> None:
    player = Player(id=3, color="orange")
    turf = create_power_turf(1)
    assert turf.collides(Direction.SOUTH, player) is False
    assert turf.capture is not None
    assert turf.capture.owner == player


def test_turf_probe_without_player_changes_nothing() -> None:
    turf = create_turf(1)
    assert turf.collides() is False
    assert turf.capture is not None
    assert turf.capture.owner is None
    assert turf.capture.count == 0


# --- LockedWall ---


def test_locked_wall_blocks_player_without_enough_keys() -> None:
    players = make_players("red", keys=1)
    wall = create_locked_wall(keys_needed=2, take_away_keys=True)
    assert wall.collides(Direction.EAST, players[0], players) is True
    assert players[0].keys == 1


def test_locked_wall_admits_and_takes_keys() -> None:
    players = make_players("red", keys=3)
    wall = create_locked_wall(keys_needed=2, take_away_keys=True)
    assert wall.collides(Direction.EAST, players[0], players) is False
    assert players[0].keys == 1


def test_locked_wall_keeps_keys_when_not_consuming() -> None:
    players = make_players("red", keys=1)
    wall = create_locked_wall()
    assert wall.collides(Direction.EAST, players[0], players) is False
    assert wall.collides(Direction.EAST, players[0], players) is False
    assert players[0].keys == 1


def test_locked_wall_deducts_through_players_mapping_not_snapshot() -> None:
    players = make_players("red", keys=2)
    snapshot = players[0]
    wall = create_locked_wall(keys_needed=2, take_away_keys=True)
    assert wall.collides(Direction.EAST, snapshot, players) is False
    assert snapshot.keys == 2
    assert players[0].keys == 0
    # The stale snapshot still claims two keys; the mapping says otherwise.
    assert wall.collides(Direction.EAST, snapshot, players) is True


def test_locked_wall_blocks_missing_player() -> None:
    assert create_locked_wall(keys_needed=0).collides() is True


# --- DirectionalWall ---


def test_north_gate_blocks_only_northward_entry() -> None:
    gate = create_directional_wall(0)
    assert gate.collides(0) is True
    for direction in (1, 2, 3):
        assert gate.collides(direction) is False


@pytest.mark.parametrize("facing", list(Direction))
def test_gate_blocks_matching_direction(facing: Direction) -> None:
    gate = create_directional_wall(facing)
    for direction in Direction:
        assert gate.collides(direction) is (direction == facing)


def test_gate_defaults_to_south_when_direction_missing() -> None:
    assert create_directional_wall(Direction.SOUTH).collides() is True
    assert create_directional_wall(Direction.NORTH).collides() is False


@pytest.mark.parametrize("raw", [-1, 4, 99])
def test_gate_clamps_out_of_range_facing_to_north(raw: int) -> None:
    gate = create_directional_wall(raw)
    assert gate.gate is not None
    assert gate.gate.facing is Direction.NORTH
    assert gate.collides(Direction.NORTH) is True


# --- ToggleableWall ---


def test_toggleable_wall_strict_parity() -> None:
    wall = create_toggleable_wall()
    assert wall.collides() is True
    assert wall.do_facing_action() is True
    assert wall.collides() is False
    assert wall.do_facing_action() is True
    assert wall.collides() is True


def test_toggleable_wall_unchanged_by_collision() -> None:
    players = make_players("red")
    wall = create_toggleable_wall()
    for _ in range(3):
        assert wall.collides(Direction.NORTH, players[0], players) is True


# --- ItemBox ---


def test_item_box_grants_one_key_once() -> None:
    players = make_players("red", "blue")
    box = create_item_box()
    assert box.collides(Direction.EAST, players[0], players) is False
    assert players[0].keys == 1
    assert box.supply is not None and box.supply.active is False

    assert box.collides(Direction.EAST, players[0], players) is False
    assert box.collides(Direction.EAST, players[1], players) is False
    assert players[0].keys == 1
    assert players[1].keys == 0


def test_item_box_probe_without_players_keeps_item() -> None:
    box = create_item_box()
    assert box.collides(Direction.EAST, Player(id=0, color="red")) is False
    assert box.supply is not None and box.supply.active is True


# --- HomeSpace ---


def test_home_space_admits_only_owner() -> None:
    players = make_players("red", "blue")
    home = create_home_space(players[0])
    assert home.collides(Direction.NORTH, players[0], players) is False
    assert home.collides(Direction.NORTH, players[1], players) is True


def test_home_space_matches_owner_by_id() -> None:
    players = make_players("red")
    home = create_home_space(players[0])
    recolored = Player(id=0, color="black", keys=5)
    assert home.collides(Direction.NORTH, recolored, players) is False
