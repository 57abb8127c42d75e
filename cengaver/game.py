"""One play-through: the hero, the current level, score and the countdown."""

from __future__ import annotations

from enum import IntEnum

from .constants import (
    GAME_END_DEAD,
    GAME_END_END,
    GAME_END_LEVEL,
    INVENTORY_SIZE,
    LEVEL_MAX_HEIGHT,
    LEVEL_MAX_WIDTH,
    SCROLL_BORDERX,
    SCROLL_BORDERY,
    SCROLL_RESOLUTION,
    TILESIZE,
)
from .gadgets import STAR_ID
from .hero import Hero
from .level import Level
from .params import PARAMS
from .ui import StatusBar
from .viewpoint import Viewpoint

DEFAULT_LEVEL_FILES = {number: f"Levels/level{number}.properties" for number in range(1, 5)}

TICKS_PER_SECOND = 40

_SELECT_KEYS = {str(index + 1): index for index in range(INVENTORY_SIZE)}


class GameEvent(IntEnum):
    """What an update of the game ended with."""

    DEAD = GAME_END_DEAD
    END = GAME_END_END
    LEVEL = GAME_END_LEVEL


class Game:
    """A running game.

    ``update`` takes the set of key names held down this tick: "left", "right",
    "down", "space", "z", "x", "e", "1".."8", "backspace", "escape", "f5" and,
    in debug mode, "kp1", "kp2", "kp3", "kp5", "d" and "m".
    """

    def __init__(self, level_files=None):
        self.level_files = dict(DEFAULT_LEVEL_FILES if level_files is None else level_files)
        self.running = True
        self.current_level = 1
        self.level = None
        self.score = 0
        self._gadget_selector = 0
        self._latched = None
        self.hero = Hero(5, 5)
        self.status_bar = StatusBar()
        self.window = Viewpoint()
        self.next_level()
        self.window.view_x = self.hero.x - self.window.width // 2
        self.window.view_y = self.hero.y - self.window.height // 2
        self.current_time = PARAMS.current_time * TICKS_PER_SECOND

    def update(self, keys):
        """Advance one tick; returns a GameEvent when the level or game ends, else None."""
        if self.level is None:
            raise RuntimeError("no level loaded")
        keys = frozenset(keys)
        hero = self.hero
        prev_x, prev_y = hero.x, hero.y

        self._handle_keys(keys)

        x_mod, y_mod = self.level.calculate_tile_modifiers(hero.prev_collisions)
        abs_mod = self.level.calculate_tile_abs_mod(hero.prev_collisions)
        hero.move(x_mod, y_mod, abs_mod)
        self._pick_up_gadget()

        if self.level.touch_end(hero.prev_collisions):
            self.current_level += 1
            if not self.next_level():
                self.current_level = 0
                return GameEvent.END
            self.adjust_viewpoint(prev_x, prev_y)
            return GameEvent.LEVEL

        door = self.level.check_door(hero.prev_collisions)
        if door is not None and hero.inventory.find_and_remove_key():
            self.level.remove_door(door[0], door[1], 0, 0)

        if hero.is_dead():
            return GameEvent.DEAD

        hero.increase_health(self.level.calc_environment_damage(hero.prev_collisions))
        self.level.world.update_enemies(self.window)
        self.level.change_parallax_x(hero.movement_vector, 1)
        self.level.change_parallax_x(hero.movement_vector, 2)
        self.adjust_viewpoint(prev_x, prev_y)
        self._update_timer(keys)
        return None

    def draw(self, surface):
        if self.level is None:
            return
        level, window = self.level, self.window
        level.draw_parallax_backgrounds(surface, window)
        level.draw(surface, window, -1)
        level.world.draw_gadgets(surface, window)
        level.world.draw_enemies(surface, window)
        self.hero.draw(surface, window)
        level.draw(surface, window, 1)
        self.hero.inventory.draw(surface, window)
        self.status_bar.draw(surface, self.hero.health, self.current_time, self.score)

    def load_level(self, number):
        """Load level ``number``; False when there is no such level."""
        filename = self.level_files.get(number)
        if filename is not None:
            self.level = Level()
            self.level.read_level(filename)
        self.hero.set_ai_level(self.level)
        return filename is not None

    def next_level(self):
        """Load the current level and put the hero on its begin tile."""
        self.level = None
        if not self.load_level(self.current_level):
            return False
        column, row = self.level.find_begin_point()
        vector = self.hero.movement_vector
        vector.x = column * TILESIZE
        vector.y = row * TILESIZE
        vector.set_dx(0)
        vector.set_dy(0)
        self.adjust_viewpoint(vector.x, vector.y)
        return True

    def adjust_viewpoint(self, prev_x, prev_y):
        """Scroll the window after the hero when it nears an edge, within the map."""
        w = self.window
        hx, hy = self.hero.x, self.hero.y
        diff_x = abs(hx - prev_x)
        diff_y = abs(hy - prev_y)

        if hx > w.view_x + w.width - SCROLL_BORDERX:
            w.view_x += diff_x
        if hx < w.view_x + SCROLL_BORDERX:
            w.view_x -= diff_x
        w.view_x = min(max(w.view_x, 0), LEVEL_MAX_WIDTH * TILESIZE - w.width)

        if hy > w.view_y + w.height - SCROLL_BORDERY:
            w.view_y += diff_y
        if hy < w.view_y + SCROLL_BORDERY:
            w.view_y -= diff_y
        w.view_y = min(max(w.view_y, 0), LEVEL_MAX_HEIGHT * TILESIZE - w.height)

    def increase_score(self, value):
        self.score += value

    def _pick_up_gadget(self):
        gadget = self.level.world.gadget_at(self.hero)
        if gadget is None or len(self.hero.inventory) == INVENTORY_SIZE:
            return
        self.level.world.remove_gadget(gadget)
        if gadget.tile_id == STAR_ID:
            self.increase_score(1)
        else:
            self.hero.inventory.add_gadget(gadget)

    def _press_once(self, keys, name):
        """True on the tick ``name`` goes down; held keys repeat only after a release."""
        if name in keys and self._latched != name:
            self._latched = name
            return True
        return False

    def _select(self, index):
        self._gadget_selector = index
        self.hero.select_gadget(index)

    def _handle_keys(self, keys):
        hero = self.hero
        if "left" in keys:
            hero.move_left()
        if "right" in keys:
            hero.move_right()
        if "down" in keys:
            hero.stop()
        if "space" in keys:
            hero.jump()

        if "f5" in keys:
            PARAMS.debug_mode = not PARAMS.debug_mode

        if self._press_once(keys, "z"):
            self._select((self._gadget_selector - 1) % INVENTORY_SIZE)
        if self._press_once(keys, "x"):
            self._select((self._gadget_selector + 1) % INVENTORY_SIZE)
        for name, index in _SELECT_KEYS.items():
            if name in keys:
                self._select(index)

        if "backspace" in keys:
            hero.delete_selected_gadget()
        if "escape" in keys:
            self.running = False
        if self._press_once(keys, "e"):
            hero.inventory.use_gadget()

        if PARAMS.debug_mode:
            self._handle_debug_keys(keys)

    def _handle_debug_keys(self, keys):
        w = self.window
        if "kp5" in keys and w.view_y - SCROLL_RESOLUTION > 0:
            w.view_y -= SCROLL_RESOLUTION
        if "kp2" in keys and w.view_y + SCROLL_RESOLUTION < LEVEL_MAX_HEIGHT * TILESIZE - w.height:
            w.view_y += SCROLL_RESOLUTION
        if "kp1" in keys and w.view_x - SCROLL_RESOLUTION > 0:
            w.view_x -= SCROLL_RESOLUTION
        if "kp3" in keys and w.view_x + SCROLL_RESOLUTION < LEVEL_MAX_WIDTH * TILESIZE - w.width:
            w.view_x += SCROLL_RESOLUTION
        if "d" in keys:
            self.hero.take_hit(10)
        if "m" in keys:
            self.hero.increase_health(-100)

    def _update_timer(self, keys):
        self.current_time -= 1
        if int(self.current_time / TICKS_PER_SECOND) == 0:
            self.hero.increase_health(-100)
            self.current_time = PARAMS.current_time * TICKS_PER_SECOND
        if self.current_time % TICKS_PER_SECOND == 0 or self._latched not in keys:
            self._latched = None