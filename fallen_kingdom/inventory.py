"""Weapon inventory: slots, locking, selection and descriptions."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .core import Rect

WEAPON_COUNT = 9
WEAPON_DAMAGES = (30, 40, 34, 4, 50, 68, 18, 83, 62)
SLOT_SPACING = 151.0 + 30.0
SLOT_ORIGIN = (739.0, 304.0)
SLOT_SIZE = 154.0
SLOT_OUTLINE = 1.5
DESCRIPTION_POSITION = (1337.0, 638.0)
BACKGROUND_IMAGE = "assets/img/Inv_bg.png"
LOCK_IMAGE = "assets/inv/locker.png"
PORTRAIT_IMAGE = "assets/img/character.png"
PORTRAIT_RECT = (128, 128, 32, 32)
PORTRAIT_POSITION = (85.0, 340.0)
PORTRAIT_SCALE = 14.5


def _check_number(number: int) -> None:
    if not 0 <= number <= 9:
        raise ValueError(f"weapon number must be a single digit: {number}")


def weapon_image_path(number: int) -> str:
    """Image file of the weapon numbered ``number`` (1 to 9)."""
    _check_number(number)
    return f"assets/inv/weapon{number}.png"


def description_image_path(number: int) -> str:
    """Description image of the weapon numbered ``number`` (1 to 9)."""
    _check_number(number)
    return f"assets/inv/weapon{number}desc.png"


def weapon_slot(index: int) -> Rect:
    """Frame of the inventory slot at ``index``, laid out three per row."""
    row, column = divmod(index, 3)
    return Rect(
        SLOT_ORIGIN[0] + column * SLOT_SPACING,
        SLOT_ORIGIN[1] + row * SLOT_SPACING,
        SLOT_SIZE,
        SLOT_SIZE,
    )


@dataclass
class Weapon:
    """One weapon of the inventory."""

    id: int
    damage: int
    unlocked: bool = False

    @property
    def slot(self) -> Rect:
        """Frame drawn around the weapon."""
        return weapon_slot(self.id)

    @property
    def bounds(self) -> Rect:
        """Clickable area: the frame including its outline."""
        return self.slot.grown(
            SLOT_OUTLINE, SLOT_OUTLINE, 2 * SLOT_OUTLINE, 2 * SLOT_OUTLINE
        )

    @property
    def position(self) -> tuple[float, float]:
        """Where the weapon and its lock are drawn."""
        slot = self.slot
        return (slot.left + 1.0, slot.top + 1.0)

    @property
    def image(self) -> str:
        return weapon_image_path(self.id + 1)

    @property
    def description_image(self) -> str:
        return description_image_path(self.id + 1)


def _default_weapons() -> list[Weapon]:
    return [
        Weapon(id=index, damage=WEAPON_DAMAGES[index % 8], unlocked=index == 0)
        for index in range(WEAPON_COUNT)
    ]


@dataclass
class Inventory:
    """The player's weapons, the selected one and the hovered one."""

    weapons: list[Weapon] = field(default_factory=_default_weapons)
    selected: int = 0
    hovered: int | None = None

    def click(self, x: float, y: float) -> int:
        """Handle a mouse press at (x, y) and return the selected weapon index."""
        for index, weapon in enumerate(self.weapons):
            if weapon.bounds.contains(x, y):
                self.selected = index
            if not weapon.unlocked:
                self.selected = 0
        return self.selected

    def hover(self, x: float, y: float) -> int | None:
        """Handle a mouse move to (x, y) and return the hovered weapon index."""
        self.hovered = None
        for index, weapon in enumerate(self.weapons):
            if weapon.bounds.contains(x, y):
                self.hovered = index
                break
        return self.hovered

    def shown_description(self) -> int:
        """Index of the weapon whose description is shown."""
        return self.selected if self.hovered is None else self.hovered

    def highlighted(self, weapon: Weapon) -> bool:
        """True if the weapon is drawn with the selection outline."""
        return weapon.unlocked and weapon.id == self.selected

    def unlock(self, ids: Iterable[int]) -> None:
        """Unlock the weapons with the given indices."""
        for weapon_id in ids:
            if not 0 <= weapon_id < len(self.weapons):
                raise ValueError(f"no such weapon: {weapon_id}")
            self.weapons[weapon_id].unlocked = True

    def unlocked_ids(self) -> tuple[int, ...]:
        """Indices of the unlocked weapons, in order."""
        return tuple(weapon.id for weapon in self.weapons if weapon.unlocked)