"""Loading of images, fonts and music from the game's asset directory."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import pygame

from .text import StrPath

WINDOW_TITLE = "My_RPG"
WINDOW_SIZE = (1920, 1080)
FRAMERATE = 60

FONT_CALIBRI = "assets/fonts/calibri.ttf"
FONT_POPPINS = "assets/fonts/Poppins.ttf"
FONT_ZELDA = "assets/fonts/zelda.ttf"
FONTS = (FONT_CALIBRI, FONT_POPPINS, FONT_ZELDA)

MENU_MUSIC = "assets/sounds/music.ogg"
VILLAGE_MUSIC = "assets/sounds/village.ogg"

GROUND_IMAGE = "assets/img/ground.png"
TREES_IMAGE = "assets/img/trees.png"
CHARACTER_IMAGE = "assets/img/character.png"
COMMANDS_IMAGE = "assets/img/gameplay.png"
MAIN_MENU_IMAGE = "assets/img/main_menu.png"
OPTIONS_IMAGE = "assets/img/options.png"
PAUSE_IMAGE = "assets/img/board.png"


@dataclass
class Assets:
    """Resolves asset names against ``root`` and caches what it loads."""

    root: Path = Path(".")
    _images: dict[str, pygame.Surface] = field(default_factory=dict, repr=False)
    _fonts: dict[tuple[Optional[str], int], Any] = field(
        default_factory=dict, repr=False
    )

    def __post_init__(self) -> None:
        self.root = Path(self.root)

    def _existing(self, name: StrPath) -> Path:
        path = self.root / name
        if not path.is_file():
            raise FileNotFoundError(f"missing asset: {path}")
        return path

    def image(self, name: StrPath) -> pygame.Surface:
        """Load an image; the same surface is returned for repeated requests."""
        key = str(name)
        if key not in self._images:
            self._images[key] = pygame.image.load(str(self._existing(name)))
        return self._images[key]

    def font(self, name: Optional[StrPath], size: int) -> Any:
        """Load a font at ``size``; None gives pygame's default font."""
        if size <= 0:
            raise ValueError(f"font size must be positive: {size}")
        key = (None if name is None else str(name), size)
        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            source = None if name is None else str(self._existing(name))
            self._fonts[key] = pygame.font.Font(source, size)
        return self._fonts[key]

    def music_path(self, name: StrPath) -> Path:
        """Path of a music file, which must exist."""
        return self._existing(name)

    def play_music(self, name: StrPath) -> bool:
        """Play a music file in a loop; return False if it cannot be played."""
        try:
            path = self.music_path(name)
        except FileNotFoundError:
            return False
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            pygame.mixer.music.load(str(path))
            pygame.mixer.music.play(loops=-1)
        except pygame.error:
            return False
        return True

    @staticmethod
    def stop_music() -> None:
        """Stop whatever music is playing."""
        if pygame.mixer.get_init():
            pygame.mixer.music.stop()