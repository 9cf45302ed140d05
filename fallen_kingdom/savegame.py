"""Reading and writing save files."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

from .text import StrPath, split_words

SAVE_SLOTS = (1, 2, 3)
_SAVE_MODE = 0o444

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass
class SaveData:
    """What a save file records; None means the value was not stored."""

    life: int | None = None
    x: float | None = None
    y: float | None = None
    weapon_ids: tuple[int, ...] = ()


def _to_int(text: str) -> int:
    match = _INT.match(text)
    return int(match.group(1)) if match else 0


def _to_float(text: str) -> float:
    match = _FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


def _field(fields: list[str], index: int, line: str) -> str:
    try:
        return fields[index]
    except IndexError:
        raise ValueError(f"malformed save line: {line!r}") from None


def format_save(data: SaveData) -> str:
    """Render save data in the save file format."""
    if data.life is None or data.x is None or data.y is None:
        raise ValueError("life and position are required to save")
    ids = "".join(f":{weapon_id}" for weapon_id in data.weapon_ids)
    return f"Life: {data.life}\nX: {data.x:f} Y: {data.y:f}\nWeapon_ids{ids}\n"


def parse_save(text: str) -> SaveData:
    """Parse the contents of a save file."""
    data = SaveData()
    for line in split_words(text, "\n"):
        fields = split_words(line, " :")
        if not fields:
            continue
        key = fields[0]
        if key == "Life":
            data.life = _to_int(_field(fields, 1, line))
        elif key == "X":
            data.x = _to_float(_field(fields, 1, line))
            data.y = _to_float(_field(fields, 3, line))
        elif key == "Weapon_ids":
            data.weapon_ids += tuple(_to_int(field) for field in fields[1:])
    return data


def save_slot_path(slot: int, directory: StrPath = ".") -> Path:
    """Path of the save file for a slot numbered 1 to 3."""
    if slot not in SAVE_SLOTS:
        raise ValueError(f"no such save slot: {slot}")
    return Path(directory) / f"save{slot}.rpg"


def next_save_path(directory: StrPath = ".") -> Path:
    """First free slot among 1 and 2, otherwise slot 3."""
    for slot in SAVE_SLOTS[:-1]:
        path = save_slot_path(slot, directory)
        if not path.exists():
            return path
    return save_slot_path(SAVE_SLOTS[-1], directory)


def existing_slots(directory: StrPath = ".") -> list[int]:
    """Slots that have a save file, in order."""
    return [slot for slot in SAVE_SLOTS if save_slot_path(slot, directory).exists()]


def write_save(data: SaveData, directory: StrPath = ".") -> Path:
    """Write a read-only save file to the next slot and return its path."""
    path = next_save_path(directory)
    content = format_save(data)
    fd = os.open(path, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, _SAVE_MODE)
    with os.fdopen(fd, "w", encoding="utf-8") as handle:
        handle.write(content)
    return path


def read_save(path: StrPath) -> SaveData:
    """Read and parse a save file."""
    return parse_save(Path(path).read_text(encoding="utf-8"))