"""Enemies that patrol, hop, ram or fight as the boss."""

from __future__ import annotations

from functools import lru_cache

import pygame

from .constants import ANIMATIONRATE, TILESIZE
from .movable import MovableObject
from .params import PARAMS
from .states import BossEnemy, DyingEnemy, HoppingEnemy, PatrollingEnemy, RammingEnemy, WaitingEnemy
from .tiles import get_tile_manager

ENEMY_BITMAP = "Resources/Enemies.bmp"
_ENEMY_KEY = (255, 255, 255)
_DEBUG_COLOR = (255, 0, 0)
_VIEW_MARGIN = 100

WEAK_ENEMY = 30
AGILE_ENEMY = 31
STRONG_ENEMY = 32
BOSS_ENEMY = 33


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


class Enemy(MovableObject):
    """An enemy whose behaviour is chosen by its tile id once it comes into view."""

    def __init__(self, max_speed, mass, tile_id, vector):
        super().__init__(max_speed, mass)
        self.movement_vector = vector
        self.animation_counter = 0
        self.tile_id = tile_id
        self.tp = get_tile_manager().get(tile_id)
        self.state = WaitingEnemy()
        self.use_friction = False
        self.health = 1

    def update_visibility(self, window):
        """Tell the state whether the enemy is near the visible window."""
        if window.contains(self.x, self.y, _VIEW_MARGIN):
            self.state.enter_viewpoint(self)
        else:
            self.state.exit_viewpoint(self)

    def draw(self, surface, window):
        self.update_visibility(window)
        self.tp = tp = get_tile_manager().get(self.tile_id)
        image = _load_sprite(ENEMY_BITMAP, _ENEMY_KEY)
        if image is not None:
            source = pygame.Rect(
                (tp.bitmap_x + self.animation_counter // ANIMATIONRATE) * tp.bitmap_width,
                tp.bitmap_y * TILESIZE * 2,
                tp.bitmap_width,
                tp.bitmap_height,
            )
            surface.blit(image, (self.x - window.view_x, self.y - window.view_y), source)

        if PARAMS.debug_mode:
            sx, sy = self.new_x - window.view_x, self.new_y - window.view_y
            pygame.draw.rect(surface, _DEBUG_COLOR, pygame.Rect(sx - 2, sy - 2, 4, 4), 2)
            pygame.draw.rect(
                surface,
                _DEBUG_COLOR,
                pygame.Rect(tp.bitmap_x + self.new_x, tp.bitmap_y + self.new_y, tp.bitmap_width, tp.bitmap_height),
                2,
            )
            surface.blit(_font(14).render(self.state.name, True, _DEBUG_COLOR), (sx - 22, sy - 42))

        self.animation_counter = (self.animation_counter + 1) & 0xFF
        period = tp.bitmap_count * ANIMATIONRATE
        if period:
            self.animation_counter %= period

    def move(self, x_mod, y_mod, abs_mod):
        super().move(x_mod, y_mod, abs_mod)
        self.state.execute(self)

    def set_state(self, state):
        self.state.exit(self)
        self.state = state

    def set_starting_state(self):
        """Pick the behaviour and health belonging to the enemy's tile id."""
        if self.tile_id == WEAK_ENEMY:
            self.health = 10
            self.set_state(PatrollingEnemy())
        elif self.tile_id == AGILE_ENEMY:
            self.health = 1
            self.set_state(HoppingEnemy())
        elif self.tile_id == STRONG_ENEMY:
            self.health = 1
            self.set_state(RammingEnemy())
        elif self.tile_id == BOSS_ENEMY:
            self.health = 1
            self.set_state(BossEnemy())

    def _lose_health(self):
        self.health = (self.health - 1) & 0xFF
        if self.health <= 0:
            self.set_state(DyingEnemy())
            return True
        return False

    def take_hit(self, amount):
        self._lose_health()

    def take_boss_hit(self):
        """Lose one point of health; True when that killed the enemy."""
        return self._lose_health()