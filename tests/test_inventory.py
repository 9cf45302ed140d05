import pytest

from fallen_kingdom.core import Rect
from fallen_kingdom.inventory import (
    Inventory,
    description_image_path,
    weapon_image_path,
    weapon_slot,
)


def _centre(index):
    slot = weapon_slot(index)
    return (slot.left + slot.width / 2, slot.top + slot.height / 2)


def test_image_paths():
    assert weapon_image_path(1) == "assets/inv/weapon1.png"
    assert description_image_path(9) == "assets/inv/weapon9desc.png"


@pytest.mark.parametrize("number", [-1, 10])
def test_image_path_rejects_bad_number(number):
    with pytest.raises(ValueError):
        weapon_image_path(number)
    with pytest.raises(ValueError):
        description_image_path(number)


def test_first_slot():
    assert weapon_slot(0) == Rect(739.0, 304.0, 154.0, 154.0)


def test_slot_grid_is_regular():
    step_x = weapon_slot(1).left - weapon_slot(0).left
    step_y = weapon_slot(3).top - weapon_slot(0).top
    assert step_x == step_y
    assert weapon_slot(5).left == weapon_slot(2).left
    assert weapon_slot(8).top - weapon_slot(5).top == step_y
    assert weapon_slot(2).left - weapon_slot(1).left == step_x


def test_default_weapons():
    inv = Inventory()
    assert len(inv.weapons) == 9
    assert inv.weapons[3].damage == 4
    assert inv.weapons[8].damage == inv.weapons[0].damage
    assert inv.unlocked_ids() == (0,)
    assert inv.selected == 0


def test_click_locked_weapon_keeps_first():
    inv = Inventory()
    assert inv.click(*_centre(4)) == 0


def test_click_when_all_unlocked():
    inv = Inventory()
    inv.unlock(range(9))
    assert inv.click(*_centre(4)) == 4
    assert inv.highlighted(inv.weapons[4])
    assert not inv.highlighted(inv.weapons[0])


def test_click_outside_keeps_selection():
    inv = Inventory()
    inv.unlock(range(9))
    inv.click(*_centre(2))
    assert inv.click(0.0, 0.0) == 2


def test_hover_and_description():
    inv = Inventory()
    assert inv.hover(*_centre(2)) == 2
    assert inv.shown_description() == 2
    assert inv.hover(0.0, 0.0) is None
    assert inv.shown_description() == inv.selected


def test_unlock_rejects_unknown():
    inv = Inventory()
    with pytest.raises(ValueError):
        inv.unlock([9])


def test_unlock_round_trip():
    inv = Inventory()
    inv.unlock([5, 2])
    assert inv.unlocked_ids() == (0, 2, 5)