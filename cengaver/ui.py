"""Menu, splash screens and the status bar shown during play."""

from __future__ import annotations

from enum import IntEnum
from functools import lru_cache

import pygame

from .constants import (
    MAX_TIME,
    MENU_CREDITS,
    MENU_EXIT,
    MENU_LOAD,
    MENU_NEW,
    MENU_RESUME,
    MENU_SIZE,
)
from .gadgets import _load_bitmap

RIGHT_BITMAPS = (
    "Resources/Menu/menu-new.bmp",
    "Resources/Menu/menu-load.bmp",
    "Resources/Menu/menu-credits.bmp",
    "Resources/Menu/menu-exit.bmp",
)
LEFT_BITMAPS = (
    "Resources/Menu/menu-left.bmp",
    "Resources/Menu/menu-left-resume.bmp",
)

INITIAL_LOWTIME = 99999 * 40
UPDATE_TIME = 3

_MENU_HALF = (288, 320)
_SCREEN = (576, 320)
_TEXT_COLOR = (255, 255, 255)


@lru_cache(maxsize=None)
def _font(size):
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


class MenuChoice(IntEnum):
    NEW = MENU_NEW
    LOAD = MENU_LOAD
    CREDITS = MENU_CREDITS
    EXIT = MENU_EXIT
    RESUME = MENU_RESUME


class Menu:
    """Main menu driven by "up", "down", "return" and "r" key names."""

    def __init__(self):
        # Return is treated as held so the key that closed the splash does not select.
        self._latched = "return"
        self.is_resumable = False
        self.running = False
        self.no_game_running = True
        self.selected = 0
        self._activated = MenuChoice.NEW
        self._update_timer = 0
        self._new_selected = False
        self.highscore = 0
        self.lowtime = INITIAL_LOWTIME

    @property
    def right_bitmap(self):
        return RIGHT_BITMAPS[self.selected]

    @property
    def left_bitmap(self):
        return LEFT_BITMAPS[1 if self.is_resumable else 0]

    def _press_once(self, keys, name):
        if name in keys and self._latched != name:
            self._latched = name
            return True
        return False

    def update(self, keys):
        keys = frozenset(keys)
        if self._press_once(keys, "up"):
            self.select_up()
        if self._press_once(keys, "down"):
            self.select_down()
        if self._press_once(keys, "return"):
            self.running = False
            self._new_selected = True
            self._activated = MenuChoice(self.selected)
        if "r" in keys:
            self.running = False
            self._new_selected = True
            self._activated = MenuChoice.RESUME

        self._update_timer = (self._update_timer + 1) & 0xFFFF
        if self._update_timer % 40 == 0 or self._latched not in keys:
            self._latched = None

    def draw(self, surface):
        width, height = _MENU_HALF
        area = pygame.Rect(0, 0, width, height)
        left = _load_bitmap(self.left_bitmap)
        if left is not None:
            surface.blit(left, (0, 0), area)
        right = _load_bitmap(self.right_bitmap)
        if right is not None:
            surface.blit(right, (width, 0), area)
        text = f"Highscore: {self.highscore} Stars"
        surface.blit(_font(24).render(text, True, _TEXT_COLOR), (10, 10))

    def take_selection(self):
        """The choice made since the last call, or None."""
        if self._new_selected:
            self._new_selected = False
            return self._activated
        return None

    def set_left_menu(self, resume):
        self.is_resumable = bool(resume)

    def select_up(self):
        self.selected = (self.selected - 1) % MENU_SIZE

    def select_down(self):
        self.selected = (self.selected + 1) % MENU_SIZE

    def set_highscore(self, score):
        if score > self.highscore:
            self.highscore = score

    def set_lowtime(self, time):
        if time < self.lowtime:
            self.lowtime = time


class SplashScreens(IntEnum):
    NONE = 0
    SPLASH = 1
    CREDITS = 2
    DEAD = 3
    END_LEVEL = 4
    END_GAME = 5


_SPLASH_BITMAPS = {
    SplashScreens.SPLASH: "Resources/Splashscreen2.bmp",
    SplashScreens.CREDITS: "Resources/Credits.bmp",
    SplashScreens.DEAD: "Resources/Gameover.bmp",
    SplashScreens.END_LEVEL: "Resources/EndLevel.bmp",
    SplashScreens.END_GAME: "Resources/EndGame.bmp",
}


class SplashScreen:
    """A full-window picture shown for MAX_TIME ticks; the title can be skipped."""

    def __init__(self):
        self._latched = None
        self.running = True
        self._update_timer = 0
        self.time_left = MAX_TIME
        self.current = SplashScreens.SPLASH
        self.set_screen(SplashScreens.SPLASH)

    def update(self, keys):
        """Count down; returns the screen that just finished, else SplashScreens.NONE."""
        keys = frozenset(keys)
        is_title = self.current == SplashScreens.SPLASH
        if self._update_timer >= UPDATE_TIME:
            if is_title and "return" in keys and self._latched != "return":
                self._latched = "return"
                self.time_left = 0
            self._update_timer = 0
        else:
            self._update_timer += 1
            if is_title and self._latched == "return" and "return" not in keys:
                self._latched = None

        self.time_left = (self.time_left - 1) & 0xFFFF
        if self.time_left <= 0 or self.time_left > MAX_TIME:
            self.running = False
            return self.current
        return SplashScreens.NONE

    def draw(self, surface):
        image = _load_bitmap(_SPLASH_BITMAPS[self.current])
        if image is not None:
            surface.blit(image, (0, 0), pygame.Rect((0, 0), _SCREEN))

    def set_screen(self, screen):
        if screen in _SPLASH_BITMAPS:
            self.current = SplashScreens(screen)
        self.time_left = MAX_TIME


class StatusBar:
    """Time, health and score shown along the top of the window."""

    def fields(self, health, time, score):
        """(label, label position, value text, value position) for each field."""
        return [
            ("Score", (526, 0), str(score & 0xFF), (536, 15)),
            ("Health", (68, 0), str(health & 0xFF), (78, 15)),
            ("Time", (9, 0), str((time & 0xFFFFFFFF) // 40), (15, 15)),
        ]

    def draw(self, surface, health, time, score):
        font = _font(16)
        for label, label_pos, value, value_pos in self.fields(health, time, score):
            surface.blit(font.render(label, True, _TEXT_COLOR), label_pos)
            surface.blit(font.render(value, True, _TEXT_COLOR), value_pos)