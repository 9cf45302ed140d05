"""The player: stats, movement, hearts and experience."""

from __future__ import annotations

from collections.abc import Collection, Iterable
from dataclasses import dataclass, field

from .collisions import check_position
from .core import LIVES, XP_BAR_LENGTH, Facing, Rect
from .inventory import Inventory
from .savegame import SaveData

START_POSITION = (2304.0, 2368.0)
FRAME_SIZE = 32
WALK_STRIP_END = 160
STEP = 3
PROBE = 8
FRAME_SECONDS = 0.1
PORTRAIT_FRAME_SECONDS = 0.3
HEART_FULL, HEART_HALF, HEART_EMPTY = 0, 16, 32

# direction: (dx, dy, sprite row, seconds before a step is taken)
_MOVES = {
    Facing.NORTH: (0, -1, 96, 0.01),
    Facing.SOUTH: (0, 1, 0, 0.001),
    Facing.WEST: (-1, 0, 32, 0.01),
    Facing.EAST: (1, 0, 64, 0.001),
}


def next_portrait_frame(left: int) -> int:
    """Next frame of the idle animation shown on the inventory and stats pages."""
    return 128 if left + FRAME_SIZE >= 256 else left + FRAME_SIZE


def _next_walk_frame(left: int) -> int:
    return 0 if left + FRAME_SIZE >= WALK_STRIP_END else left + FRAME_SIZE


@dataclass
class Player:
    """Player state; movement keys are given as Facing directions."""

    position: tuple[float, float] = START_POSITION
    frame_left: int = 0
    frame_top: int = 0
    facing: Facing = Facing.NONE
    energy: int = 10
    experience: int = 35
    attack: int = 5
    speed: int = 8
    level: int = 1
    armor: int = 0
    inventory: Inventory = field(default_factory=Inventory)

    @property
    def texture_rect(self) -> tuple[int, int, int, int]:
        """Area of the sprite sheet currently shown."""
        return (self.frame_left, self.frame_top, FRAME_SIZE, FRAME_SIZE)

    def step(
        self, keys: Collection[Facing], elapsed: float, obstacles: Iterable[Rect]
    ) -> bool:
        """Move for the held keys; return True when the animation clock restarts."""
        obstacles = list(obstacles)
        restarted = False
        for direction, (dx, dy, row, threshold) in _MOVES.items():
            if direction not in keys:
                continue
            x, y = self.position
            if check_position(x + dx * PROBE, y + dy * PROBE, obstacles):
                continue
            self.frame_top = row
            self.facing = direction
            if elapsed > threshold:
                self.position = (x + dx * STEP, y + dy * STEP)
            if elapsed > FRAME_SECONDS:
                self.frame_left = _next_walk_frame(self.frame_left)
                restarted = True
                elapsed = 0.0
        if not any(direction in keys for direction in _MOVES):
            self.frame_left = 0
            self.frame_top = 0
        return restarted

    def heart_frames(self) -> list[int]:
        """Sprite offset of each heart: full, half or empty."""
        frames = []
        for index in range(LIVES):
            rest = self.energy - 2 * (index + 1)
            if rest >= 0:
                frames.append(HEART_FULL)
            elif rest == -1:
                frames.append(HEART_HALF)
            else:
                frames.append(HEART_EMPTY)
        return frames

    def xp_bar_width(self) -> float:
        """Width in pixels of the filled part of the experience bar."""
        return self.experience * XP_BAR_LENGTH / 100.0

    def apply_save(self, data: SaveData) -> None:
        """Restore what a save file recorded."""
        if data.life is not None:
            self.energy = data.life
        if data.x is not None and data.y is not None:
            self.position = (data.x, data.y)
        self.inventory.unlock(data.weapon_ids)

    def to_save(self) -> SaveData:
        """The data a save file records for this player."""
        x, y = self.position
        return SaveData(
            life=self.energy,
            x=x,
            y=y,
            weapon_ids=self.inventory.unlocked_ids(),
        )