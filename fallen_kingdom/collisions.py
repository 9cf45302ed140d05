"""Obstacle and door areas read from the collision map."""

from __future__ import annotations

from collections.abc import Iterable

from .core import TILE_SIZE, Rect
from .text import StrPath, read_lines

WALL = "#"
DOOR = "+"


def collision_areas(grid: list[str]) -> list[Rect]:
    """Return one tile-sized area for every wall cell, in reading order."""
    return [
        Rect((column + 1.5) * TILE_SIZE, (row + 1) * TILE_SIZE, TILE_SIZE, TILE_SIZE)
        for row, line in enumerate(grid)
        for column, cell in enumerate(line)
        if cell == WALL
    ]


def door_areas(grid: list[str]) -> list[Rect]:
    """Return one tile-sized area for every door cell, in reading order."""
    return [
        Rect(column * TILE_SIZE, (row - 1) * TILE_SIZE, TILE_SIZE, TILE_SIZE)
        for row, line in enumerate(grid)
        for column, cell in enumerate(line)
        if cell == DOOR
    ]


def load_collisions(path: StrPath) -> list[Rect]:
    """Read wall areas from a collision map file."""
    return collision_areas(read_lines(path))


def load_doors(path: StrPath) -> list[Rect]:
    """Read door areas from a collision map file."""
    return door_areas(read_lines(path))


def check_position(x: float, y: float, areas: Iterable[Rect]) -> bool:
    """Return True if the point lies in any of the areas."""
    return any(area.contains(x, y) for area in areas)


def check_door(x: float, y: float, areas: Iterable[Rect]) -> int | None:
    """Return the 1-based number of the door containing the point, or None."""
    for number, area in enumerate(areas, start=1):
        if area.contains(x, y):
            return number
    return None