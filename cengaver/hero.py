"""The player character."""

from __future__ import annotations

from functools import lru_cache

import pygame

from .constants import ANIMATIONRATE
from .inventory import Inventory
from .movable import MovableObject
from .params import PARAMS
from .states import Waiting
from .tiles import get_tile_manager
from .vector import Vector2D

HERO_BITMAP = "Resources/cengaver.bmp"
_HERO_KEY = (186, 254, 202)
_DEBUG_COLOR = (255, 255, 0)
_START_TILE = (12, 92)


def _s8(value):
    return ((value + 128) % 256) - 128


@lru_cache(maxsize=None)
def _load_sprite(path, key):
    try:
        image = pygame.image.load(path)
    except (pygame.error, OSError):
        return None
    image.set_colorkey(key)
    return image


@lru_cache(maxsize=None)
def _font(size):
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


class Hero(MovableObject):
    """The player: moves on key input, carries an inventory and can die."""

    def __init__(self, max_speed, mass):
        super().__init__(max_speed, mass)
        tile = self.movement_vector.__class__
        self.movement_vector = tile(_START_TILE[0] * 16, _START_TILE[1] * 16)
        self.animation_counter = 0
        self.state = Waiting()
        self.tp = get_tile_manager().get(self.state.tile)
        self.inventory = Inventory(self)
        self.health = PARAMS.hero_max_health
        self.max_key_movement_speed = 4
        self.use_friction = True

    def move_left(self):
        if self.movement_vector.dx > -self.max_key_movement_speed:
            super().move_left()

    def move_right(self):
        if self.movement_vector.dx < self.max_key_movement_speed:
            super().move_right()

    def jump(self):
        super().jump()
        self.state.press_spacebar(self)

    def move(self, x_mod, y_mod, abs_mod):
        """Move, resolve enemy contact and update the state from the motion."""
        super().move(x_mod, y_mod, abs_mod)
        self.ai.check_collision_with_enemies(self)
        v = self.movement_vector
        if v.new_x == v.x and v.new_y == v.y:
            self.set_state(Waiting())
        if v.new_x == v.x:
            self.state.stop_moving(self)
        if v.dx > 0:
            self.state.press_right_arrow(self)
        if v.dx < 0:
            self.state.press_left_arrow(self)

    def select_gadget(self, index):
        self.inventory.set_selected_index(index)

    def delete_selected_gadget(self):
        self.inventory.remove_selected()

    def is_dead(self):
        return self.health <= 0

    def take_hit(self, amount):
        self.health = _s8(self.health - amount)
        if self.is_dead():
            self.state.touch_enemy(self)

    def increase_health(self, value):
        """Add ``value`` to the health, never above the maximum."""
        value = _s8(value)
        if self.health + value < PARAMS.hero_max_health:
            self.health = _s8(self.health + value)
        else:
            self.health = PARAMS.hero_max_health

    def set_state(self, state):
        self.state = state

    def draw(self, surface, window):
        self.tp = tp = get_tile_manager().get(self.state.tile)
        image = _load_sprite(HERO_BITMAP, _HERO_KEY)
        if image is not None:
            source = pygame.Rect(
                (tp.bitmap_x + self.animation_counter // ANIMATIONRATE) * tp.bitmap_width,
                tp.bitmap_y * tp.bitmap_height,
                tp.bitmap_width,
                tp.bitmap_height,
            )
            surface.blit(image, (self.x - window.view_x, self.y - window.view_y), source)

        if PARAMS.debug_mode:
            name = _font(14).render(self.state.name, True, _DEBUG_COLOR)
            surface.blit(
                name,
                (self.new_x - window.view_x - 22, self.new_y - window.view_y - 42),
            )
            pygame.draw.line(
                surface,
                _DEBUG_COLOR,
                (self.x - window.view_x, self.y - window.view_y),
                (self.new_x - window.view_x, self.new_y - window.view_y),
                2,
            )

        self.animation_counter = (self.animation_counter + 1) & 0xFF
        period = tp.bitmap_count * ANIMATIONRATE
        if period:
            self.animation_counter %= period


__all__ = ["Hero", "Vector2D"]