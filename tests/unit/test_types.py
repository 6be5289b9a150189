import pytest

from turf_arena.types import Direction, TileKind


@pytest.mark.parametrize(
    "direction, offset",
    [
        (Direction.NORTH, (0, -1)),
        (Direction.EAST, (1, 0)),
        (Direction.SOUTH, (0, 1)),
        (Direction.WEST, (-1, 0)),
    ],
)
def test_direction_offsets(direction: Direction, offset: tuple[int, int]) -> None:
    assert direction.offset == offset


@pytest.mark.parametrize(
    "raw, expected",
    [
        (0, Direction.NORTH),
        (1, Direction.EAST),
        (2, Direction.SOUTH),
        (3, Direction.WEST),
        (4, Direction.NORTH),
        (-1, Direction.NORTH),
        ("east", Direction.NORTH),
        (None, Direction.NORTH),
        (True, Direction.NORTH),
    ],
)
def test_direction_coerce(raw: object, expected: Direction) -> None:
    assert Direction.coerce(raw) is expected


def test_tile_kind_display_names() -> None:
    assert TileKind.SPACE.display_name == "Space"
    assert TileKind.LOCKED_WALL.display_name == "LockedWall"
    assert TileKind.POWER_CARRIER_WALL.display_name == "PowerCarrierWall"
