"""Splitting text into words and reading map files."""

from __future__ import annotations

import re
from os import PathLike
from pathlib import Path

StrPath = str | PathLike


def split_words(text: str, delimiters: str) -> list[str]:
    """Split ``text`` on any character of ``delimiters``, dropping empty words."""
    if not delimiters:
        return [text] if text else []
    pattern = "[" + "".join(re.escape(char) for char in delimiters) + "]"
    return [word for word in re.split(pattern, text) if word]


def read_lines(path: StrPath) -> list[str]:
    """Read a file and split it on newlines and tabs."""
    return split_words(Path(path).read_text(encoding="utf-8"), "\n\t")


def load_map(path: StrPath) -> list[str]:
    """Read a map file as its non-empty lines."""
    return split_words(Path(path).read_text(encoding="utf-8"), "\n")


def player_position(grid: list[str]) -> tuple[float, float]:
    """Return (row, column) of the first 'P' in the grid, or (-1.0, -1.0)."""
    for row, line in enumerate(grid):
        column = line.find("P")
        if column != -1:
            return (float(row), float(column))
    return (-1.0, -1.0)