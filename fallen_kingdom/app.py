"""The game window: scenes, the main loop and the command-line entry point."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from pathlib import Path
from typing import Any, Optional

import pygame

from .assets import (
    CHARACTER_IMAGE,
    COMMANDS_IMAGE,
    FONT_ZELDA,
    FRAMERATE,
    GROUND_IMAGE,
    MAIN_MENU_IMAGE,
    MENU_MUSIC,
    OPTIONS_IMAGE,
    PAUSE_IMAGE,
    TREES_IMAGE,
    VILLAGE_MUSIC,
    WINDOW_SIZE,
    WINDOW_TITLE,
    Assets,
)
from .bots import BOT_SCALE, MESSAGE_SCALE, Bot
from .collisions import check_door, load_collisions, load_doors
from .core import Facing, Rect, Scene
from .inventory import (
    BACKGROUND_IMAGE,
    DESCRIPTION_POSITION,
    LOCK_IMAGE,
    PORTRAIT_IMAGE,
    PORTRAIT_POSITION,
    PORTRAIT_RECT,
    PORTRAIT_SCALE,
    SLOT_OUTLINE,
)
from .loadscreen import LOAD_BACKGROUND, SAVE_BUTTON_IMAGE, LoadScreen
from .menus import Action, Menu, main_menu, options_menu, pause_menu
from .player import FRAME_SIZE, PORTRAIT_FRAME_SECONDS, Player, next_portrait_frame
from .savegame import write_save
from .stats import STAT_FONT_SIZE, STAT_OUTLINE, STATS_BACKGROUND, stat_texts
from .text import StrPath
from .transition import OVERLAY_OFFSET, OVERLAY_SIZE, Fade
from .widgets import BLACK, YELLOW, Label

ZOOM = 0.7
COLLISIONS_FILE = "assets/collisions.txt"
HEARTS_IMAGE = "assets/img/hearts.png"
HEART_SIZE = 16
HEART_SCALE = 2.0
HEART_SPACING = 40.0
HEARTS_OFFSET = (650.0, 350.0)
XP_OFFSET = (650.0, 300.0)
XP_HEIGHT = 19.0
XP_BORDER_SIZE = (193.0, 21.0)
XP_BORDER_THICKNESS = 2
XP_COLOR = (233, 224, 26)
PLAYER_SCALE = 3.0
INVENTORY_BACKGROUND_SCALE = (1.0, 0.95)

# image, speech image, seconds per frame, position
BOT_SPECS = (
    ("assets/img/bot1.png", "assets/img/mes1.png", 0.2, (1495.0, 1580.0)),
    ("assets/img/bot2.png", "assets/img/mes2.png", 0.24, (2332.0, 2050.0)),
)

KEY_DIRECTIONS = {
    pygame.K_z: Facing.NORTH,
    pygame.K_s: Facing.SOUTH,
    pygame.K_q: Facing.WEST,
    pygame.K_d: Facing.EAST,
}


class Game:
    """All the state of a running game and the logic that moves between scenes."""

    def __init__(
        self,
        root: StrPath = ".",
        surface: Optional[pygame.Surface] = None,
        save_directory: StrPath = ".",
    ) -> None:
        self.assets = Assets(Path(root))
        self.surface = surface if surface is not None else pygame.Surface(WINDOW_SIZE)
        self.save_directory = save_directory
        self.scene = Scene.MAIN
        self.running = True
        self.player = Player()
        self.collisions, self.doors = self._load_map()
        self.bots = [
            Bot(position, duration, image=image, message_image=message)
            for image, message, duration, position in BOT_SPECS
        ]
        self.fade = Fade()
        self.held: set[Facing] = set()
        self.clock = 0.0
        self.inventory_frame = PORTRAIT_RECT[0]
        self.stats_frame = PORTRAIT_RECT[0]
        self.music: Optional[str] = None
        self.view_center = (WINDOW_SIZE[0] / 2, WINDOW_SIZE[1] / 2)
        self.view_size = (float(WINDOW_SIZE[0]), float(WINDOW_SIZE[1]))
        self._images: dict[str, Optional[pygame.Surface]] = {}
        self.main = main_menu(self._font, self._image(MAIN_MENU_IMAGE))
        self.options = options_menu(self._font, self._image(OPTIONS_IMAGE))
        self.pause: Optional[Menu] = None
        self.load_screen: Optional[LoadScreen] = None

    # resources

    def _load_map(self) -> tuple[list[Rect], list[Rect]]:
        path = self.assets.root / COLLISIONS_FILE
        if not path.is_file():
            return [], []
        return load_collisions(path), load_doors(path)

    def _font(self, size: int) -> Any:
        try:
            return self.assets.font(FONT_ZELDA, size)
        except FileNotFoundError:
            return self.assets.font(None, size)

    def _image(self, name: str) -> Optional[pygame.Surface]:
        if name not in self._images:
            try:
                self._images[name] = self.assets.image(name)
            except (FileNotFoundError, pygame.error):
                self._images[name] = None
        return self._images[name]

    def _frame(
        self,
        image: Optional[pygame.Surface],
        rect: tuple[int, int, int, int],
        scale: float,
    ) -> Optional[pygame.Surface]:
        if image is None:
            return None
        area = pygame.Rect(rect).clip(image.get_rect())
        if area.width == 0 or area.height == 0:
            return None
        size = (round(area.width * scale), round(area.height * scale))
        return pygame.transform.scale(image.subsurface(area), size)

    # music and view

    def _play(self, name: str) -> None:
        self.music = name
        self.assets.play_music(name)

    def _stop(self) -> None:
        Assets.stop_music()
        self.music = None

    def _reset_view(self) -> None:
        self.view_center = (WINDOW_SIZE[0] / 2, WINDOW_SIZE[1] / 2)
        self.view_size = (float(WINDOW_SIZE[0]), float(WINDOW_SIZE[1]))

    def _zoom(self) -> None:
        width, height = self.view_size
        self.view_size = (width * ZOOM, height * ZOOM)

    def _screen_to_view(self, pos: tuple[int, int]) -> tuple[float, float]:
        screen_width, screen_height = self.surface.get_size()
        width, height = self.view_size
        return (pos[0] * width / screen_width, pos[1] * height / screen_height)

    def _enter(self, scene: Scene) -> None:
        self.scene = scene
        if scene is not Scene.MAIN and self.music == MENU_MUSIC:
            self._stop()

    def _start_game(self) -> None:
        self._enter(Scene.GAME)
        self._stop()
        self._play(VILLAGE_MUSIC)
        self._zoom()

    # events

    def handle_event(self, event: Any) -> None:
        """Process one pygame event for the current scene."""
        if event.type == pygame.KEYDOWN and event.key in KEY_DIRECTIONS:
            self.held.add(KEY_DIRECTIONS[event.key])
        elif event.type == pygame.KEYUP and event.key in KEY_DIRECTIONS:
            self.held.discard(KEY_DIRECTIONS[event.key])
        if event.type == pygame.QUIT:
            self.running = False
            return
        handlers: dict[Scene, Callable[[Any], None]] = {
            Scene.MAIN: self._handle_main,
            Scene.OPTIONS: self._handle_options,
            Scene.SAVED: self._handle_saved,
            Scene.GAME: self._handle_game,
            Scene.INVENTORY: self._handle_inventory,
            Scene.STATS: self._handle_stats,
            Scene.COMMANDS: self._handle_commands,
        }
        handlers[self.scene](event)

    def _handle_main(self, event: Any) -> None:
        self._menu_action(self.main.handle(event))

    def _handle_options(self, event: Any) -> None:
        self._menu_action(self.options.handle(event))

    def _menu_action(self, action: Optional[Action]) -> None:
        if action is Action.START:
            self._start_game()
        elif action is Action.LOAD:
            self.load_screen = LoadScreen(
                self.save_directory,
                self._font,
                self._image(LOAD_BACKGROUND),
                self._image(SAVE_BUTTON_IMAGE),
            )
            self._enter(Scene.SAVED)
        elif action is Action.OPTIONS:
            self._enter(Scene.OPTIONS)
        elif action is Action.MAIN_MENU:
            self._enter(Scene.MAIN)
        elif action in (Action.EXIT, Action.QUIT):
            self.running = False

    def _handle_saved(self, event: Any) -> None:
        if self.load_screen is None:
            self._enter(Scene.MAIN)
            return
        action = self.load_screen.handle(event)
        if action is Action.START:
            loaded = self.load_screen.loaded
            self.load_screen = None
            self._start_game()
            if loaded is not None:
                self.player.apply_save(loaded)
        elif action is Action.MAIN_MENU:
            self.load_screen = None
            self._enter(Scene.MAIN)
        elif action is Action.QUIT:
            self.running = False

    def _handle_game(self, event: Any) -> None:
        if self.pause is not None:
            self._handle_pause(event)
            return
        if self.fade.is_opaque() or event.type != pygame.KEYDOWN:
            return
        if event.key == pygame.K_p:
            width, height = self.view_size
            self.pause = pause_menu(
                self._font, self._image(PAUSE_IMAGE), (width / 2, height / 2)
            )
            self.pause.to_world = self._screen_to_view
        elif event.key == pygame.K_t:
            self.fade.start()
        elif event.key == pygame.K_i:
            self._reset_view()
            self._enter(Scene.INVENTORY)

    def _handle_pause(self, event: Any) -> None:
        action = self.pause.handle(event)
        if action is None:
            return
        self.pause = None
        if action is Action.SAVE:
            write_save(self.player.to_save(), self.save_directory)
        elif action is Action.COMMANDS:
            self._reset_view()
            self._enter(Scene.COMMANDS)
        elif action is Action.MAIN_MENU:
            self._enter(Scene.MAIN)
            self._stop()
            self._play(MENU_MUSIC)
            self._reset_view()
        elif action is Action.QUIT:
            self.running = False

    def _handle_inventory(self, event: Any) -> None:
        inventory = self.player.inventory
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self._enter(Scene.GAME)
                self._zoom()
            elif event.key == pygame.K_k:
                self._enter(Scene.STATS)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            inventory.click(*event.pos)
        elif event.type == pygame.MOUSEMOTION:
            inventory.hover(*event.pos)

    def _handle_stats(self, event: Any) -> None:
        if event.type != pygame.KEYDOWN:
            return
        if event.key == pygame.K_ESCAPE:
            self._zoom()
            self._enter(Scene.GAME)
        elif event.key == pygame.K_i:
            self._enter(Scene.INVENTORY)

    def _handle_commands(self, event: Any) -> None:
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.view_center = self.player.position
            self._zoom()
            self._enter(Scene.GAME)

    # per-frame logic

    def update(self, elapsed: float) -> None:
        """Advance the current scene by ``elapsed`` seconds."""
        if self.scene is Scene.GAME and self.pause is None:
            self._update_world(elapsed)
        elif self.scene is Scene.INVENTORY:
            self.inventory_frame = self._animate_portrait(self.inventory_frame, elapsed)
        elif self.scene is Scene.STATS:
            self.stats_frame = self._animate_portrait(self.stats_frame, elapsed)

    def _animate_portrait(self, frame: int, elapsed: float) -> int:
        self.clock += elapsed
        if self.clock >= PORTRAIT_FRAME_SECONDS:
            self.clock = 0.0
            return next_portrait_frame(frame)
        return frame

    def _update_world(self, elapsed: float) -> None:
        self.clock += elapsed
        if self.fade.update(self.clock):
            self.clock = 0.0
        if self.fade.is_opaque():
            return
        x, y = self.player.position
        if check_door(x, y, self.doors) is not None:
            self.fade.start()
        for bot in self.bots:
            bot.update(elapsed, self.player.position)
        if self.player.step(self.held, self.clock, self.collisions):
            self.clock = 0.0
        self.view_center = self.player.position

    # drawing

    def draw(self) -> None:
        """Draw the current scene onto the game surface."""
        self.surface.fill(BLACK)
        if self.scene is Scene.MAIN:
            self.main.draw(self.surface)
        elif self.scene is Scene.OPTIONS:
            self.options.draw(self.surface)
        elif self.scene is Scene.SAVED and self.load_screen is not None:
            self.load_screen.draw(self.surface)
        elif self.scene is Scene.GAME:
            self._draw_world()
        elif self.scene is Scene.INVENTORY:
            self._draw_inventory()
        elif self.scene is Scene.STATS:
            self._draw_stats()
        elif self.scene is Scene.COMMANDS:
            image = self._image(COMMANDS_IMAGE)
            if image is not None:
                self.surface.blit(image, (0, 0))

    def _draw_world(self) -> None:
        width, height = self.view_size
        view = pygame.Surface((max(round(width), 1), max(round(height), 1)))
        origin_x = self.view_center[0] - width / 2
        origin_y = self.view_center[1] - height / 2

        def put(image: Optional[pygame.Surface], x: float, y: float) -> None:
            if image is not None:
                view.blit(image, (round(x - origin_x), round(y - origin_y)))

        px, py = self.player.position
        put(self._image(GROUND_IMAGE), 0.0, 0.0)
        reach = FRAME_SIZE * PLAYER_SCALE
        put(
            self._frame(
                self._image(CHARACTER_IMAGE), self.player.texture_rect, PLAYER_SCALE
            ),
            px - reach,
            py - reach,
        )
        put(self._image(TREES_IMAGE), 0.0, 0.0)
        for bot in self.bots:
            put(
                self._frame(self._image(bot.image), bot.texture_rect, BOT_SCALE),
                *bot.position,
            )
            message = self._image(bot.message_image)
            if bot.talking and message is not None:
                size = message.get_size()
                scaled = pygame.transform.scale(
                    message,
                    (round(size[0] * MESSAGE_SCALE), round(size[1] * MESSAGE_SCALE)),
                )
                put(scaled, *bot.message_position)
        hearts = self._image(HEARTS_IMAGE)
        for index, left in enumerate(self.player.heart_frames()):
            put(
                self._frame(hearts, (left, 0, HEART_SIZE, HEART_SIZE), HEART_SCALE),
                px - HEARTS_OFFSET[0] + index * HEART_SPACING,
                py - HEARTS_OFFSET[1],
            )
        bar_x = round(px - XP_OFFSET[0] - origin_x)
        bar_y = round(py - XP_OFFSET[1] - origin_y)
        bar_width = round(self.player.xp_bar_width())
        if bar_width > 0:
            pygame.draw.rect(
                view, XP_COLOR, pygame.Rect(bar_x, bar_y, bar_width, round(XP_HEIGHT))
            )
        pygame.draw.rect(
            view,
            BLACK,
            pygame.Rect(
                bar_x - XP_BORDER_THICKNESS,
                bar_y - XP_BORDER_THICKNESS,
                round(XP_BORDER_SIZE[0]) + 2 * XP_BORDER_THICKNESS,
                round(XP_BORDER_SIZE[1]) + 2 * XP_BORDER_THICKNESS,
            ),
            width=XP_BORDER_THICKNESS,
        )
        if self.fade.alpha > 0:
            overlay = pygame.Surface(
                (round(OVERLAY_SIZE[0]), round(OVERLAY_SIZE[1])), pygame.SRCALPHA
            )
            overlay.fill((0, 0, 0, self.fade.alpha))
            put(overlay, px - OVERLAY_OFFSET[0], py - OVERLAY_OFFSET[1])
        if self.pause is not None:
            self.pause.draw(view)
        self.surface.blit(pygame.transform.scale(view, self.surface.get_size()), (0, 0))

    def _portrait(self, frame: int) -> Optional[pygame.Surface]:
        _, top, width, height = PORTRAIT_RECT
        return self._frame(
            self._image(PORTRAIT_IMAGE), (frame, top, width, height), PORTRAIT_SCALE
        )

    def _draw_inventory(self) -> None:
        inventory = self.player.inventory
        background = self._image(BACKGROUND_IMAGE)
        if background is not None:
            width, height = background.get_size()
            scale_x, scale_y = INVENTORY_BACKGROUND_SCALE
            self.surface.blit(
                pygame.transform.scale(
                    background, (round(width * scale_x), round(height * scale_y))
                ),
                (0, 0),
            )
        portrait = self._portrait(self.inventory_frame)
        if portrait is not None:
            self.surface.blit(portrait, PORTRAIT_POSITION)
        lock = self._image(LOCK_IMAGE)
        for weapon in inventory.weapons:
            image = self._image(weapon.image)
            if image is not None:
                self.surface.blit(image, weapon.position)
            if not weapon.unlocked and lock is not None:
                self.surface.blit(lock, weapon.position)
            if inventory.highlighted(weapon):
                bounds = weapon.bounds
                pygame.draw.rect(
                    self.surface,
                    YELLOW,
                    pygame.Rect(
                        round(bounds.left),
                        round(bounds.top),
                        round(bounds.width),
                        round(bounds.height),
                    ),
                    width=round(SLOT_OUTLINE),
                )
        shown = inventory.weapons[inventory.shown_description()]
        description = self._image(shown.description_image)
        if description is not None:
            self.surface.blit(description, DESCRIPTION_POSITION)

    def _draw_stats(self) -> None:
        background = self._image(STATS_BACKGROUND)
        if background is not None:
            self.surface.blit(background, (0, 0))
        font = self._font(STAT_FONT_SIZE)
        for text, position in stat_texts(self.player):
            Label(
                text, position, STAT_FONT_SIZE, font=font, outline=(STAT_OUTLINE, BLACK)
            ).draw(self.surface)
        portrait = self._portrait(self.stats_frame)
        if portrait is not None:
            self.surface.blit(portrait, PORTRAIT_POSITION)

    # main loop

    def run(self) -> None:
        """Open the window and play until it is closed."""
        pygame.init()
        try:
            self.surface = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(WINDOW_TITLE)
            ticker = pygame.time.Clock()
            self._play(MENU_MUSIC)
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                self.update(ticker.tick(FRAMERATE) / 1000.0)
                self.draw()
                pygame.display.flip()
        finally:
            pygame.quit()


def main(argv: Optional[list[str]] = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(
        prog="fallen-kingdom", description="Play The Fallen Kingdom."
    )
    parser.add_argument(
        "--root", default=".", help="directory that holds the assets folder"
    )
    parser.add_argument("--saves", default=".", help="directory for save files")
    args = parser.parse_args(argv)
    Game(args.root, save_directory=args.saves).run()
    return 0