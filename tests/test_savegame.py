import stat

import pytest

from fallen_kingdom.savegame import (
    SaveData,
    existing_slots,
    format_save,
    next_save_path,
    parse_save,
    read_save,
    save_slot_path,
    write_save,
)


def test_format_save_layout():
    data = SaveData(life=10, x=2304.0, y=2368.0, weapon_ids=(0,))
    assert format_save(data) == "Life: 10\nX: 2304.000000 Y: 2368.000000\nWeapon_ids:0\n"


def test_format_without_weapons_has_bare_key():
    text = format_save(SaveData(life=3, x=1.0, y=2.0))
    assert text.splitlines()[-1] == "Weapon_ids"


def test_round_trip():
    data = SaveData(life=7, x=1495.5, y=-20.25, weapon_ids=(0, 3, 8))
    assert parse_save(format_save(data)) == data


def test_format_requires_life_and_position():
    with pytest.raises(ValueError):
        format_save(SaveData(x=1.0, y=1.0))
    with pytest.raises(ValueError):
        format_save(SaveData(life=1, x=1.0))


def test_parse_missing_fields_stay_unset():
    data = parse_save("Life: 4\n")
    assert data.life == 4
    assert data.x is None and data.y is None
    assert data.weapon_ids == ()


def test_parse_empty_text():
    assert parse_save("") == SaveData()


def test_parse_lenient_numbers():
    data = parse_save("Life: 6hp\nX: abc Y: 12.5\n")
    assert data.life == 6
    assert data.x == 0.0
    assert data.y == 12.5


def test_parse_ignores_unknown_and_blank_lines():
    data = parse_save("Gold: 99\n   \nLife: 2\n")
    assert data == SaveData(life=2)


def test_parse_malformed_position():
    with pytest.raises(ValueError):
        parse_save("X: 1.0\n")


def test_save_slot_path_and_invalid_slot(tmp_path):
    assert save_slot_path(2, tmp_path) == tmp_path / "save2.rpg"
    with pytest.raises(ValueError):
        save_slot_path(4, tmp_path)


def test_next_save_path_fills_slots_then_reuses_last(tmp_path):
    assert next_save_path(tmp_path) == save_slot_path(1, tmp_path)
    save_slot_path(1, tmp_path).write_text("")
    assert next_save_path(tmp_path) == save_slot_path(2, tmp_path)
    save_slot_path(2, tmp_path).write_text("")
    assert next_save_path(tmp_path) == save_slot_path(3, tmp_path)
    save_slot_path(3, tmp_path).write_text("")
    assert next_save_path(tmp_path) == save_slot_path(3, tmp_path)


def test_existing_slots(tmp_path):
    assert existing_slots(tmp_path) == []
    save_slot_path(3, tmp_path).write_text("")
    save_slot_path(1, tmp_path).write_text("")
    assert existing_slots(tmp_path) == [1, 3]


def test_write_and_read_save(tmp_path):
    data = SaveData(life=9, x=100.0, y=200.0, weapon_ids=(0, 2))
    first = write_save(data, tmp_path)
    second = write_save(data, tmp_path)
    assert first == save_slot_path(1, tmp_path)
    assert second == save_slot_path(2, tmp_path)
    assert read_save(first) == data
    assert existing_slots(tmp_path) == [1, 2]


def test_written_save_is_read_only(tmp_path):
    data = SaveData(life=1, x=0.0, y=0.0)
    path = write_save(data, tmp_path)
    assert path == save_slot_path(1, tmp_path)
    assert read_save(path) == data
    assert not path.stat().st_mode & stat.S_IWUSR


def test_read_missing_save(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_save(tmp_path / "save1.rpg")