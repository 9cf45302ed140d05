"""The screen listing saved games and loading the chosen one."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

import pygame

from .core import ButtonState, Rect
from .menus import Action, FontLoader
from .savegame import SaveData, existing_slots, read_save, save_slot_path
from .text import StrPath
from .widgets import (
    OPTION_HOVER_OUTLINE,
    OPTION_IDLE_OUTLINE,
    OPTION_SIZE,
    Label,
    TextButton,
)

SAVE_BUTTON_IMAGE = "assets/img/btn_bg.png"
LOAD_BACKGROUND = "assets/img/options.png"
SAVE_TEXT_SIZE = 48
SAVE_TEXT_COLOR = (255, 255, 255)
SAVE_TEXT_OFFSET = (200.0, 36.0)
SAVE_OUTLINE = 2.0
SAVE_HOVER_COLOR = (216, 159, 225, 150)
SAVE_POSITIONS = {
    1: (680.0, 320.0),
    2: (680.0, 500.0),
    3: (680.0, 684.0),
}
BACK_TEXT = "Back"
BACK_POSITION = (620.0, 180.0)
EMPTY_TEXT = "Empty"
EMPTY_POSITION = (849.0, 371.0)
EMPTY_SIZE = 48
EMPTY_COLOR = (51, 35, 30)


@dataclass
class SaveButton:
    """A button standing for one save slot."""

    slot: int
    position: tuple[float, float]
    font: Any = None
    image: Optional[pygame.Surface] = None
    image_size: Optional[tuple[float, float]] = None
    hovered: bool = False
    state: ButtonState = ButtonState.NONE

    def __post_init__(self) -> None:
        if self.image_size is None:
            self.image_size = (
                tuple(self.image.get_size()) if self.image is not None else (0.0, 0.0)
            )

    @property
    def text(self) -> str:
        return f"SAVE {self.slot}"

    @property
    def text_position(self) -> tuple[float, float]:
        """Where the slot name is drawn."""
        return (
            self.position[0] + SAVE_TEXT_OFFSET[0],
            self.position[1] + SAVE_TEXT_OFFSET[1],
        )

    @property
    def frame(self) -> Rect:
        """Rectangle drawn around the button image."""
        width, height = self.image_size
        return Rect(self.position[0] - 1, self.position[1] - 1, width + 2, height + 2)

    @property
    def bounds(self) -> Rect:
        """Area reacting to the mouse: the frame including its outline."""
        return self.frame.grown(
            SAVE_OUTLINE, SAVE_OUTLINE, 2 * SAVE_OUTLINE, 2 * SAVE_OUTLINE
        )

    @property
    def outline_color(self) -> Optional[tuple[int, int, int, int]]:
        """Colour of the frame outline, or None when it is transparent."""
        return SAVE_HOVER_COLOR if self.hovered else None

    def contains(self, x: float, y: float) -> bool:
        """True if the point lies on the button."""
        return self.bounds.contains(x, y)

    def hover(self, x: float, y: float) -> bool:
        """Handle the mouse moving to (x, y); return True if it is over the button."""
        self.hovered = self.contains(x, y)
        return self.hovered

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the outline, the image and the slot name onto ``surface``."""
        color = self.outline_color
        if color is not None:
            bounds = self.bounds
            size = (max(round(bounds.width), 1), max(round(bounds.height), 1))
            overlay = pygame.Surface(size, pygame.SRCALPHA)
            pygame.draw.rect(
                overlay, color, overlay.get_rect(), width=round(SAVE_OUTLINE)
            )
            surface.blit(overlay, (bounds.left, bounds.top))
        if self.image is not None:
            surface.blit(self.image, self.position)
        if self.font is not None:
            surface.blit(
                self.font.render(self.text, True, SAVE_TEXT_COLOR), self.text_position
            )


@dataclass
class LoadScreen:
    """Lists the existing save slots; a click on one loads it."""

    directory: StrPath = "."
    font: Optional[FontLoader] = None
    background: Optional[pygame.Surface] = None
    button_image: Optional[pygame.Surface] = None
    buttons: list[SaveButton] = field(init=False)
    back: TextButton = field(init=False)
    empty: Label = field(init=False)
    loaded: Optional[SaveData] = field(init=False, default=None)

    def __post_init__(self) -> None:
        save_font = self.font(SAVE_TEXT_SIZE) if self.font else None
        self.buttons = [
            SaveButton(
                slot,
                SAVE_POSITIONS[slot],
                font=save_font,
                image=self.button_image,
            )
            for slot in existing_slots(self.directory)
        ]
        self.back = TextButton(
            BACK_TEXT,
            BACK_POSITION,
            OPTION_SIZE,
            font=self.font(OPTION_SIZE) if self.font else None,
            action=Action.MAIN_MENU,
            latch=True,
            idle_outline=OPTION_IDLE_OUTLINE,
            hover_outline=OPTION_HOVER_OUTLINE,
        )
        self.empty = Label(
            EMPTY_TEXT,
            EMPTY_POSITION,
            EMPTY_SIZE,
            font=self.font(EMPTY_SIZE) if self.font else None,
            color=EMPTY_COLOR,
        )

    def _clear_hover(self) -> None:
        for button in self.buttons:
            button.hovered = False
        self.back.hovered = False
        if self.back.state is not ButtonState.PRESSED:
            self.back.state = ButtonState.NONE

    def handle(self, event: Any) -> Optional[Action]:
        """Process one pygame event and return the action it triggers, if any.

        A click on a save slot reads that save into ``loaded`` and returns START.
        """
        if event.type == pygame.QUIT:
            return Action.QUIT
        if event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            for button in self.buttons:
                button.hover(x, y)
            self.back.hover(x, y)
            return None
        self._clear_hover()
        if event.type != pygame.MOUSEBUTTONDOWN:
            return None
        x, y = event.pos
        for button in self.buttons:
            if button.contains(x, y):
                self.loaded = read_save(save_slot_path(button.slot, self.directory))
                return Action.START
            button.state = ButtonState.RELEASED
        if self.back.click(x, y):
            return self.back.action
        return None

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the background, the back button and the slots or the empty notice."""
        if self.background is not None:
            surface.blit(self.background, (0, 0))
        self.back.draw(surface)
        if self.buttons:
            for button in self.buttons:
                button.draw(surface)
        else:
            self.empty.draw(surface)