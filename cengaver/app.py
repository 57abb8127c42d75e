"""The application: title picture, menu, splash screens and the game loop."""

from __future__ import annotations

import argparse
import os

import pygame

from .constants import WINDOWHEIGHT, WINDOWWIDTH
from .gadgets import _load_bitmap
from .game import TICKS_PER_SECOND, Game, GameEvent
from .params import PARAMS, load_params
from .saves import default_save_path, load_game, save_game
from .ui import Menu, MenuChoice, SplashScreen, SplashScreens

PARAMS_FILE = "Resources/Params.ini"
TITLE_BITMAP = "Resources/SplashScreen.bmp"
TITLE = "SelSor-2"

# Ticks the title picture stays up before the main window appears.
SPLASH_TICKS = 40 * 2

_KEY_NAMES = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_SPACE: "space",
    pygame.K_RETURN: "return",
    pygame.K_BACKSPACE: "backspace",
    pygame.K_ESCAPE: "escape",
    pygame.K_F5: "f5",
    pygame.K_z: "z",
    pygame.K_x: "x",
    pygame.K_e: "e",
    pygame.K_r: "r",
    pygame.K_d: "d",
    pygame.K_m: "m",
    pygame.K_1: "1",
    pygame.K_2: "2",
    pygame.K_3: "3",
    pygame.K_4: "4",
    pygame.K_5: "5",
    pygame.K_6: "6",
    pygame.K_7: "7",
    pygame.K_8: "8",
    pygame.K_KP1: "kp1",
    pygame.K_KP2: "kp2",
    pygame.K_KP3: "kp3",
    pygame.K_KP5: "kp5",
}


class App:
    """Ties the menu, the splash screens and the running game together, one tick at a time."""

    def __init__(self, save_path=None, params_path=None):
        self.save_path = save_path if save_path is not None else default_save_path()
        load_params(params_path if params_path is not None else PARAMS_FILE)
        self.level_files = None
        self.running = True
        self.splash_time = SPLASH_TICKS
        self.menu = Menu()
        self.splash = SplashScreen()
        self.game = None
        if os.path.exists(self.save_path):
            data = load_game(self.save_path)
            self.menu.set_highscore(data.highscore)
            self.menu.set_lowtime(data.lowtime)

    @property
    def in_intro(self):
        """True while the title picture is still shown."""
        return self.splash_time >= 0

    def _save(self, level, time, health):
        save_game(
            self.save_path,
            level,
            time,
            health,
            self.menu.highscore,
            self.menu.lowtime,
        )

    def tick(self, keys):
        """Advance everything by one frame; returns False once the program should stop."""
        keys = frozenset(keys)
        if self.splash_time > 0:
            self.splash_time -= 1
            return self.running
        if self.splash_time == 0:
            self.splash_time = -1
            return self.running

        if self.splash.running:
            finished = self.splash.update(keys)
            if finished in (SplashScreens.CREDITS, SplashScreens.DEAD, SplashScreens.SPLASH):
                self.menu.running = True
            elif finished == SplashScreens.END_LEVEL and self.game is not None:
                self.game.running = True

        if self.game is not None and self.game.running:
            self._update_game(keys)
        elif not self.splash.running:
            self.menu.running = True

        if self.menu.running:
            self.menu.update(keys)
            self.handle_menu_selection()
        return self.running

    def _update_game(self, keys):
        game = self.game
        event = game.update(keys)
        if event == GameEvent.END:
            game.running = False
            self.splash.set_screen(SplashScreens.END_GAME)
            self.splash.running = True
            self.menu.set_highscore(game.score)
            self.menu.set_lowtime(game.current_time)
            self.menu.set_left_menu(False)
            self._save(0, 0, PARAMS.hero_max_health)
        elif event == GameEvent.DEAD:
            game.running = False
            self.splash.set_screen(SplashScreens.DEAD)
            self.splash.running = True
            self.menu.set_left_menu(False)
        elif event == GameEvent.LEVEL:
            game.running = False
            self._save(game.current_level, game.current_time, game.hero.health)
            self.splash.set_screen(SplashScreens.END_LEVEL)
            self.splash.running = True

    def _start_game(self):
        self.game = None
        self.menu.set_left_menu(True)
        self.menu.running = False
        self.game = Game(self.level_files)

    def handle_menu_selection(self):
        """Act on the menu entry chosen since the last tick, if any."""
        choice = self.menu.take_selection()
        if choice == MenuChoice.NEW:
            self._start_game()
            save_game(self.save_path, 1, 0, PARAMS.hero_max_health, -1, -1)
        elif choice == MenuChoice.LOAD:
            if self.game is not None and self.game.current_level not in (0, 1):
                self._start_game()
                data = load_game(self.save_path)
                self.game.current_level = data.level & 0xFF
                self.game.current_time = data.time
                self.game.hero.health = ((data.health + 128) % 256) - 128
                self.game.next_level()
        elif choice == MenuChoice.CREDITS:
            self.splash.set_screen(SplashScreens.CREDITS)
            self.splash.running = True
            self.menu.running = False
        elif choice == MenuChoice.EXIT:
            self.running = False
        elif choice == MenuChoice.RESUME:
            if self.game is not None and self.menu.is_resumable:
                self.game.running = True
        return choice

    def draw(self, surface):
        """Draw whatever is active this frame onto ``surface``."""
        if self.in_intro:
            image = _load_bitmap(TITLE_BITMAP)
            if image is not None:
                surface.blit(image, (0, 0))
            return
        if self.splash.running:
            self.splash.draw(surface)
        if self.game is not None and self.game.running:
            self.game.draw(surface)
        if self.menu.running:
            self.menu.draw(surface)


def _pressed_keys():
    pressed = pygame.key.get_pressed()
    return frozenset(name for code, name in _KEY_NAMES.items() if pressed[code])


def main(argv=None):
    parser = argparse.ArgumentParser(prog="cengaver", description="Side-scrolling platform game.")
    parser.add_argument("--save", default=None, help="path of the save file")
    parser.add_argument("--params", default=PARAMS_FILE, help="path of the parameter file")
    args = parser.parse_args(argv)

    app = App(args.save, args.params)
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOWWIDTH, WINDOWHEIGHT), pygame.NOFRAME)
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        main_shown = False
        while app.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    app.running = False
            if not app.running:
                break
            keys = _pressed_keys() if pygame.key.get_focused() else frozenset()
            app.tick(keys)
            if not app.in_intro and not main_shown:
                screen = pygame.display.set_mode((WINDOWWIDTH, WINDOWHEIGHT))
                pygame.display.set_caption(TITLE)
                main_shown = True
            app.draw(screen)
            pygame.display.flip()
            clock.tick(TICKS_PER_SECOND)
    finally:
        pygame.quit()
    return 0