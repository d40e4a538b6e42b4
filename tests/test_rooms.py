import pytest

from dungeonweave.dungeon import DungeonConfig, InsufficientRooms, Room
from dungeonweave.dungeon.rng import RandomSource
from dungeonweave.dungeon.rooms import ROOM_NORMAL, ROOM_START, iter_padded_overlaps, place_rooms
from dungeon_test_utils import compact_config

SEEDS = [1, 7, 42, 1234, 9999]


@pytest.mark.parametrize("seed", SEEDS)
def test_room_count_within_bounds(seed):
    cfg = compact_config(seed=seed)
    rooms = place_rooms(cfg, RandomSource(seed))
    assert cfg.min_rooms <= len(rooms) <= cfg.max_rooms


@pytest.mark.parametrize("seed", SEEDS)
def test_first_room_is_start(seed):
    rooms = place_rooms(compact_config(seed=seed), RandomSource(seed))
    assert rooms[0].room_type == ROOM_START
    assert all(r.room_type == ROOM_NORMAL for r in rooms[1:])


@pytest.mark.parametrize("seed", SEEDS)
def test_rooms_keep_padding_and_margin(seed):
    cfg = compact_config(seed=seed)
    rooms = place_rooms(cfg, RandomSource(seed))
    assert list(iter_padded_overlaps(rooms)) == []
    for r in rooms:
        assert r.x >= 2 and r.y >= 2
        assert r.x + r.w <= cfg.level_width - 2
        assert r.y + r.h <= cfg.level_height - 2
        assert cfg.min_room_size[0] <= r.w <= cfg.max_room_size[0]
        assert cfg.min_room_size[1] <= r.h <= cfg.max_room_size[1]


def test_insufficient_rooms_raised():
    cfg = DungeonConfig(level_width=10, level_height=10, min_rooms=50, max_rooms=50, max_placement_attempts=5)
    with pytest.raises(InsufficientRooms) as exc:
        place_rooms(cfg, RandomSource(3))
    assert exc.value.placed < 50
    assert exc.value.required == 50


def test_room_filling_margin_box_is_placed():
    # 8 + two margins of 2 on each side exactly spans a 12-wide level
    cfg = DungeonConfig(level_width=12, level_height=12, min_rooms=1, max_rooms=1, min_room_size=(8, 8), max_room_size=(8, 8))
    rooms = place_rooms(cfg, RandomSource(0))
    assert rooms[0].bounds() == (2, 2, 10, 10)


def test_oversized_rooms_never_placed():
    # a 9-wide room leaves no legal position on a 12-wide level
    cfg = DungeonConfig(level_width=12, level_height=12, min_rooms=1, max_rooms=1, min_room_size=(9, 9), max_room_size=(9, 9))
    with pytest.raises(InsufficientRooms):
        place_rooms(cfg, RandomSource(0))


def test_room_rejects_non_positive_size():
    with pytest.raises(ValueError):
        Room(0, 0, 0, 3)


def test_room_geometry():
    r = Room(4, 6, 5, 3)
    assert r.center == (6, 7)
    assert r.bounds() == (4, 6, 9, 9)
    assert len(list(r.cells())) == 15
    assert r.contains(8, 8) and not r.contains(9, 8)
    assert r.on_perimeter(4, 7)
    assert not r.on_perimeter(6, 7)


def test_padded_overlap():
    a = Room(2, 2, 4, 4)
    # gap of 3 cells between them: too close with padding 2 on each side
    b = Room(9, 2, 4, 4)
    assert a.overlaps(b, padding=2)
    # gap of 4 cells clears the padding
    c = Room(10, 2, 4, 4)
    assert not a.overlaps(c, padding=2)


def test_grow_to_include_never_shrinks():
    r = Room(5, 5, 3, 3)
    assert r.grow_to_include(10, 6)
    assert r.size == (6, 3)
    assert not r.grow_to_include(4, 4)
    assert r.position == (5, 5)
    assert r.size == (6, 3)
