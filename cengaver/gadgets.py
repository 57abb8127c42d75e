"""Collectable gadgets: health potions, stars, keys and prisms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

import pygame

from .constants import ANIMATIONRATE, TILESIZE, TRANSPARENCYCOLOR
from .params import PARAMS
from .tiles import get_tile_manager

STAR_ID = 70
HEALTH_ID = 71
KEY_ID = 72
PRISM_ID = 73

_bitmaps = {}


def _load_bitmap(path):
    """Load a bitmap with the transparency key set; None when it cannot be read."""
    if path not in _bitmaps:
        try:
            image = pygame.image.load(path)
            image.set_colorkey(TRANSPARENCYCOLOR)
        except (pygame.error, OSError):
            image = None
        _bitmaps[path] = image
    return _bitmaps[path]


class GadgetUse(Enum):
    """What using a gadget produces."""

    NONE = 0


class Gadget(ABC):
    """An item lying in the level or carried in the inventory."""

    def __init__(self, x, y, in_inventory=False, tile_id=0):
        tp = get_tile_manager().get(tile_id)
        self.amount = 1
        self.in_inventory = in_inventory
        self.x = x
        self.y = y
        self.tile_id = tile_id
        self.bitmap_file = tp.bitmap_file
        self.gadget_type = tp.gadget_type
        self.animation_counter = 0
        self._animation_indent = ANIMATIONRATE

    @abstractmethod
    def use(self, owner):
        """Apply the gadget to ``owner`` and report what it produced."""

    def decrease_amount(self, value):
        self.amount = 0 if value > self.amount else self.amount - value

    def advance_animation(self):
        """Move to the next animation frame every ANIMATIONRATE calls."""
        if self._animation_indent == ANIMATIONRATE:
            count = get_tile_manager().get(self.tile_id).bitmap_count
            if self.animation_counter < count - 1:
                self.animation_counter += 1
            else:
                self.animation_counter = 0
            self._animation_indent = 0
        else:
            self._animation_indent += 1

    def draw(self, surface, window):
        if not (window.contains(self.x, self.y, TILESIZE) or self.in_inventory):
            return
        tp = get_tile_manager().get(self.tile_id)
        image = _load_bitmap(self.bitmap_file)
        if image is not None:
            source = pygame.Rect(
                (tp.bitmap_x + self.animation_counter) * tp.bitmap_width,
                tp.bitmap_y * tp.bitmap_height,
                tp.bitmap_width,
                tp.bitmap_height,
            )
            surface.blit(image, (self.x - window.view_x, self.y - window.view_y), source)
        self.advance_animation()


class Health(Gadget):
    """Ten doses that each restore one point of health."""

    def __init__(self, x, y, in_inventory=False, tile_id=HEALTH_ID):
        super().__init__(x, y, in_inventory, tile_id)
        self.amount = 10

    def use(self, owner):
        if self.amount > 0 and owner.health != PARAMS.hero_max_health:
            owner.increase_health(1)
            self.decrease_amount(1)
        return GadgetUse.NONE


class Key(Gadget):
    """Opens a door; using it directly does nothing."""

    def __init__(self, x, y, in_inventory=False, tile_id=KEY_ID):
        super().__init__(x, y, in_inventory, tile_id)

    def use(self, owner):
        return GadgetUse.NONE


class Prism(Gadget):
    """The prism; using it does nothing."""

    def __init__(self, x, y, in_inventory=False, tile_id=PRISM_ID):
        super().__init__(x, y, in_inventory, tile_id)

    def use(self, owner):
        return GadgetUse.NONE


class Star(Gadget):
    """A star, used up on use."""

    def __init__(self, x, y, in_inventory=False, tile_id=STAR_ID):
        super().__init__(x, y, in_inventory, tile_id)

    def use(self, owner):
        if self.amount > 0:
            self.decrease_amount(1)
        return GadgetUse.NONE


_KINDS = {STAR_ID: Star, HEALTH_ID: Health, KEY_ID: Key, PRISM_ID: Prism}


def make_gadget(x, y, tile_id):
    """Create the gadget for ``tile_id`` lying at (x, y), or None for an unknown id."""
    kind = _KINDS.get(tile_id)
    return kind(x, y, False, tile_id) if kind is not None else None