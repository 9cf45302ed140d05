"""Shared geometry, enumerations and constants for the game."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto

WEAPON_SIZE = 151
LIVES = 5
XP_BAR_LENGTH = 193
TILE_SIZE = 32.0


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in world coordinates."""

    left: float
    top: float
    width: float
    height: float

    def contains(self, x: float, y: float) -> bool:
        """Return True if the point lies inside; right and bottom edges are excluded."""
        min_x = min(self.left, self.left + self.width)
        max_x = max(self.left, self.left + self.width)
        min_y = min(self.top, self.top + self.height)
        max_y = max(self.top, self.top + self.height)
        return min_x <= x < max_x and min_y <= y < max_y

    def grown(self, left: float, top: float, width: float, height: float) -> Rect:
        """Return a copy moved up-left by ``left``/``top`` and enlarged by ``width``/``height``."""
        return Rect(
            self.left - left,
            self.top - top,
            self.width + width,
            self.height + height,
        )


class Scene(Enum):
    """The screen the game is currently showing."""

    MAIN = auto()
    OPTIONS = auto()
    GAME = auto()
    INVENTORY = auto()
    SAVED = auto()
    STATS = auto()
    COMMANDS = auto()


class ButtonState(Enum):
    """Interaction state of a menu button."""

    NONE = auto()
    HOVER = auto()
    PRESSED = auto()
    RELEASED = auto()


class Facing(Enum):
    """Direction the player is facing."""

    NONE = auto()
    NORTH = auto()
    SOUTH = auto()
    EAST = auto()
    WEST = auto()


def normalize(x: float, y: float) -> tuple[float, float]:
    """Scale a vector to unit length; the zero vector is returned unchanged."""
    length = math.hypot(x, y)
    if length == 0:
        return (x, y)
    return (x / length, y / length)


def distance(a: tuple[float, float], b: tuple[float, float]) -> float:
    """Euclidean distance between two points."""
    return math.dist(a, b)