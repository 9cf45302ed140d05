"""Text buttons and labels used by the menus."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import product
from typing import Any, Optional, Tuple

import pygame

from .core import ButtonState, Rect

Color = Tuple[int, int, int]
Outline = Tuple[float, Optional[Color]]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
YELLOW: Color = (255, 255, 0)

NO_OUTLINE: Outline = (0.0, None)
MENU_IDLE_OUTLINE: Outline = (4.0, None)
MENU_HOVER_OUTLINE: Outline = (4.0, BLACK)
OPTION_IDLE_OUTLINE: Outline = (0.0, None)
OPTION_HOVER_OUTLINE: Outline = (2.0, YELLOW)
PAUSE_IDLE_OUTLINE: Outline = (0.0, None)
PAUSE_HOVER_OUTLINE: Outline = (2.0, BLACK)

MAIN_BUTTON_SIZE = 50
MAIN_BUTTONS = (
    ("START", (150.0, 600.0)),
    ("LOAD SAVE", (150.0, 670.0)),
    ("OPTIONS", (150.0, 740.0)),
    ("EXIT GAME", (150.0, 810.0)),
)
MAIN_TEXT_OUTLINE: Outline = (3.0, BLACK)
MAIN_TEXTS = (
    ("The Fallen Kingdom", (750.0, 150.0), 115),
    ("FORBIDDEN QUEST", (950.0, 250.0), 70),
)

OPTION_SIZE = 35
OPTION_BUTTONS = (
    ("<", (1000.0, 440.0)),
    (">", (1300.0, 440.0)),
    ("Back", (620.0, 180.0)),
)
OPTION_TEXTS = (
    ("Resolution", (620.0, 340.0)),
    ("1920 x 1080", (1075.0, 340.0)),
    ("Sound", (620.0, 440.0)),
    ("Frame Per Second", (620.0, 540.0)),
    ("60", (1140.0, 540.0)),
    ("Fullscreen", (620.0, 700.0)),
)


def _blit_text(
    surface: pygame.Surface,
    font: Any,
    text: str,
    position: tuple[float, float],
    color: Color,
    outline: Outline,
) -> None:
    if font is None:
        raise ValueError(f"no font to draw {text!r}")
    x, y = position
    thickness, outline_color = outline
    reach = round(thickness)
    if reach > 0 and outline_color is not None:
        shadow = font.render(text, True, outline_color)
        for dx, dy in product(range(-reach, reach + 1), repeat=2):
            if dx or dy:
                surface.blit(shadow, (x + dx, y + dy))
    surface.blit(font.render(text, True, color), (x, y))


@dataclass
class Label:
    """Static text drawn on a menu."""

    text: str
    position: tuple[float, float]
    size: int
    font: Any = None
    color: Color = WHITE
    outline: Outline = NO_OUTLINE

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the label onto ``surface``."""
        _blit_text(surface, self.font, self.text, self.position, self.color, self.outline)


@dataclass
class TextButton:
    """Clickable text; ``action`` tells the owning menu what a click means."""

    text: str
    position: tuple[float, float]
    size: int
    font: Any = None
    action: Any = None
    latch: bool = False
    idle_outline: Outline = NO_OUTLINE
    hover_outline: Outline = NO_OUTLINE
    color: Color = WHITE
    extent: Optional[tuple[float, float]] = None
    state: ButtonState = ButtonState.NONE
    hovered: bool = False

    def __post_init__(self) -> None:
        if self.extent is None:
            self.extent = tuple(self.font.size(self.text)) if self.font else (0.0, 0.0)

    @property
    def bounds(self) -> Rect:
        """Area that reacts to the mouse."""
        width, height = self.extent
        return Rect(self.position[0], self.position[1], width, height)

    @property
    def outline(self) -> Outline:
        """Outline currently drawn around the text."""
        return self.hover_outline if self.hovered else self.idle_outline

    def contains(self, x: float, y: float) -> bool:
        """True if the point lies on the button."""
        return self.bounds.contains(x, y)

    def hover(self, x: float, y: float) -> bool:
        """Handle the mouse moving to (x, y); return True if it is over the button."""
        self.hovered = self.contains(x, y)
        if self.state is not ButtonState.PRESSED:
            self.state = ButtonState.HOVER if self.hovered else ButtonState.NONE
        return self.hovered

    def click(self, x: float, y: float) -> bool:
        """Handle a mouse press at (x, y); return True if it hit the button."""
        if not self.contains(x, y):
            return False
        if self.latch:
            self.state = ButtonState.PRESSED
        return True

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the button onto ``surface``."""
        _blit_text(surface, self.font, self.text, self.position, self.color, self.outline)