import pytest

from fallen_kingdom.collisions import (
    check_door,
    check_position,
    collision_areas,
    door_areas,
    load_collisions,
    load_doors,
)
from fallen_kingdom.core import Rect


def test_collision_area_of_first_cell():
    assert collision_areas(["#"]) == [Rect(48.0, 32.0, 32.0, 32.0)]


def test_door_area_of_cell():
    assert door_areas(["...", ".+."]) == [Rect(32.0, 0.0, 32.0, 32.0)]


def test_collision_areas_count_and_order():
    grid = ["#.#", "..#", "+.."]
    areas = collision_areas(grid)
    assert len(areas) == sum(line.count("#") for line in grid)
    assert areas == sorted(areas, key=lambda r: (r.top, r.left))


def test_adjacent_walls_are_one_tile_apart():
    first, second = collision_areas(["##"])
    assert second.left - first.left == first.width
    assert first.top == second.top


def test_walls_and_doors_are_separate():
    grid = ["#+", "+#"]
    assert len(collision_areas(grid)) == 2
    assert len(door_areas(grid)) == 2


def test_check_position_inside_and_outside():
    areas = collision_areas(["#"])
    area = areas[0]
    assert check_position(area.left + 1.0, area.top + 1.0, areas) is True
    assert check_position(area.left - 1.0, area.top + 1.0, areas) is False
    assert check_position(0.0, 0.0, []) is False


def test_check_door_returns_one_based_number():
    doors = door_areas(["+.+"])
    second = doors[1]
    assert check_door(second.left + 1.0, second.top + 1.0, doors) == 2
    assert check_door(doors[0].left, doors[0].top, doors) == 1


def test_check_door_none_when_outside():
    doors = door_areas(["+"])
    assert check_door(5000.0, 5000.0, doors) is None


def test_load_from_file_matches_grid(tmp_path):
    path = tmp_path / "collisions.txt"
    path.write_text("#.+\n\n.#\t+\n", encoding="utf-8")
    grid = ["#.+", ".#", "+"]
    assert load_collisions(path) == collision_areas(grid)
    assert load_doors(path) == door_areas(grid)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_collisions(tmp_path / "nope.txt")