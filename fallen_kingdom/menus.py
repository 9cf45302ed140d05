"""Main, options and pause menus built from text buttons."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Optional

import pygame

from .widgets import (
    MAIN_BUTTON_SIZE,
    MAIN_BUTTONS,
    MAIN_TEXT_OUTLINE,
    MAIN_TEXTS,
    MENU_HOVER_OUTLINE,
    MENU_IDLE_OUTLINE,
    OPTION_BUTTONS,
    OPTION_HOVER_OUTLINE,
    OPTION_IDLE_OUTLINE,
    OPTION_SIZE,
    OPTION_TEXTS,
    PAUSE_HOVER_OUTLINE,
    PAUSE_IDLE_OUTLINE,
    Label,
    TextButton,
)
from .core import ButtonState

FontLoader = Callable[[int], Any]

PAUSE_SIZE = 48
PAUSE_SCALE = 1.65
PAUSE_BACKGROUND_OFFSET = (-550.0, -310.0)
# text, offset from the centre, action name
_PAUSE_BUTTONS = (
    ("Save game", (-85.0, -145.0), "SAVE"),
    ("Commands", (-85.0, -35.0), "COMMANDS"),
    ("Back to main menu", (-160.0, 75.0), "MAIN_MENU"),
)


class Action(Enum):
    """What a menu asks the game to do."""

    START = auto()
    LOAD = auto()
    OPTIONS = auto()
    EXIT = auto()
    MAIN_MENU = auto()
    SAVE = auto()
    COMMANDS = auto()
    RESUME = auto()
    QUIT = auto()


@dataclass
class Menu:
    """A background with buttons and labels that turns events into actions."""

    buttons: list[TextButton] = field(default_factory=list)
    labels: list[Label] = field(default_factory=list)
    background: Optional[pygame.Surface] = None
    background_position: tuple[float, float] = (0.0, 0.0)
    escape_action: Optional[Action] = None
    to_world: Optional[Callable[[tuple[int, int]], tuple[float, float]]] = None

    def _point(self, pos: tuple[int, int]) -> tuple[float, float]:
        return self.to_world(pos) if self.to_world else (float(pos[0]), float(pos[1]))

    def _clear_hover(self) -> None:
        for button in self.buttons:
            button.hovered = False
            if button.state is not ButtonState.PRESSED:
                button.state = ButtonState.NONE

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the background, then the buttons, then the labels."""
        if self.background is not None:
            surface.blit(self.background, self.background_position)
        for button in self.buttons:
            button.draw(surface)
        for label in self.labels:
            label.draw(surface)

    def handle(self, event: Any) -> Optional[Action]:
        """Process one pygame event and return the action it triggers, if any."""
        if event.type == pygame.QUIT:
            return Action.QUIT
        if event.type == pygame.MOUSEMOTION:
            x, y = self._point(event.pos)
            for button in self.buttons:
                button.hover(x, y)
            return None
        self._clear_hover()
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return self.escape_action
        if event.type == pygame.MOUSEBUTTONDOWN:
            x, y = self._point(event.pos)
            for button in self.buttons:
                if button.click(x, y):
                    return button.action
        return None


def _load(font: Optional[FontLoader], size: int) -> Any:
    return font(size) if font is not None else None


def main_menu(font: Optional[FontLoader], background: Optional[pygame.Surface]) -> Menu:
    """The title screen; ``font`` maps a character size to a font."""
    actions = (Action.START, Action.LOAD, Action.OPTIONS, Action.EXIT)
    buttons = [
        TextButton(
            text,
            position,
            MAIN_BUTTON_SIZE,
            font=_load(font, MAIN_BUTTON_SIZE),
            action=action,
            latch=action is Action.LOAD,
            idle_outline=MENU_IDLE_OUTLINE,
            hover_outline=MENU_HOVER_OUTLINE,
        )
        for (text, position), action in zip(MAIN_BUTTONS, actions)
    ]
    labels = [
        Label(text, position, size, font=_load(font, size), outline=MAIN_TEXT_OUTLINE)
        for text, position, size in MAIN_TEXTS
    ]
    return Menu(buttons=buttons, labels=labels, background=background)


def options_menu(
    font: Optional[FontLoader], background: Optional[pygame.Surface]
) -> Menu:
    """The options screen; the arrows start the game as the title button does."""
    actions = (Action.START, Action.START, Action.MAIN_MENU)
    buttons = [
        TextButton(
            text,
            position,
            OPTION_SIZE,
            font=_load(font, OPTION_SIZE),
            action=action,
            idle_outline=OPTION_IDLE_OUTLINE,
            hover_outline=OPTION_HOVER_OUTLINE,
        )
        for (text, position), action in zip(OPTION_BUTTONS, actions)
    ]
    labels = [
        Label(text, position, OPTION_SIZE, font=_load(font, OPTION_SIZE))
        for text, position in OPTION_TEXTS
    ]
    return Menu(buttons=buttons, labels=labels, background=background)


def pause_menu(
    font: Optional[FontLoader],
    background: Optional[pygame.Surface],
    center: tuple[float, float],
) -> Menu:
    """The in-game pause board laid out around ``center``; Escape resumes."""
    cx, cy = center
    if background is not None:
        width, height = background.get_size()
        background = pygame.transform.scale(
            background, (round(width * PAUSE_SCALE), round(height * PAUSE_SCALE))
        )
    buttons = [
        TextButton(
            text,
            (cx + dx, cy + dy),
            PAUSE_SIZE,
            font=_load(font, PAUSE_SIZE),
            action=Action[action],
            idle_outline=PAUSE_IDLE_OUTLINE,
            hover_outline=PAUSE_HOVER_OUTLINE,
        )
        for text, (dx, dy), action in _PAUSE_BUTTONS
    ]
    return Menu(
        buttons=buttons,
        background=background,
        background_position=(
            cx + PAUSE_BACKGROUND_OFFSET[0],
            cy + PAUSE_BACKGROUND_OFFSET[1],
        ),
        escape_action=Action.RESUME,
    )