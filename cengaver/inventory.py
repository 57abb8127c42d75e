"""The hero's inventory: eight gadget slots with one of them selected."""

from __future__ import annotations

from functools import lru_cache

import pygame

from .constants import INVENTORY_SIZE
from .gadgets import KEY_ID, GadgetUse, _load_bitmap

INVENTORY_BITMAP = "Resources/Inventory.bmp"
SELECTED_BITMAP = "Resources/SelectedGadget.bmp"

_IMAGE_WIDTH = 160
_IMAGE_HEIGHT = 27
_FIRST_INDENT = 5
_SLOT_SPACING = 18
_GROUP_GAP = 6
_SELECTOR_SIZE = 16
_TEXT_COLOR = (255, 255, 255)


@lru_cache(maxsize=None)
def _font(size):
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


class Inventory:
    """Fixed number of gadget slots; empty slots hold None."""

    def __init__(self, owner=None):
        self.owner = owner
        self.slots = [None] * INVENTORY_SIZE
        self.selected_index = 0

    def __len__(self):
        return sum(1 for gadget in self.slots if gadget is not None)

    def add_gadget(self, gadget):
        """Put ``gadget`` into the first free slot; False when the inventory is full."""
        for index, slot in enumerate(self.slots):
            if slot is None:
                self.slots[index] = gadget
                gadget.in_inventory = True
                return True
        return False

    def remove_gadget(self, index):
        if 0 <= index < INVENTORY_SIZE and self.slots[index] is not None:
            self.slots[index] = None

    def remove_selected(self):
        self.remove_gadget(self.selected_index)

    def selected_gadget(self):
        return self.slots[self.selected_index]

    def set_selected_index(self, index):
        if 0 <= index < INVENTORY_SIZE:
            self.selected_index = index

    def use_gadget(self):
        """Use the selected gadget; a used-up gadget is replaced by one of its kind."""
        gadget = self.slots[self.selected_index]
        if gadget is None:
            return GadgetUse.NONE
        result = gadget.use(self.owner)
        if gadget.amount == 0:
            self._replace_with_same_type(self.selected_index)
        return result

    def find_and_remove_key(self):
        """Remove the first key in the inventory; True if there was one."""
        for index, gadget in enumerate(self.slots):
            if gadget is not None and gadget.tile_id == KEY_ID:
                self.remove_gadget(index)
                return True
        return False

    def _replace_with_same_type(self, index):
        """Drop the gadget at ``index`` and move another of its kind there.

        Returns the slot the replacement came from, or -1 if there was none.
        """
        target = self.slots[index]
        for other_index, gadget in enumerate(self.slots):
            if gadget is not None and other_index != index and target.tile_id == gadget.tile_id:
                self.remove_gadget(index)
                self.slots[index] = gadget
                self.slots[other_index] = None
                return other_index
        self.remove_gadget(index)
        return -1

    def draw(self, surface, window):
        origin = window.width // 2 - _IMAGE_WIDTH // 2
        background = _load_bitmap(INVENTORY_BITMAP)
        if background is not None:
            surface.blit(background, (origin, 0), pygame.Rect(0, 0, _IMAGE_WIDTH, _IMAGE_HEIGHT))
        selector = _load_bitmap(SELECTED_BITMAP)

        for index, gadget in enumerate(self.slots):
            indent = _FIRST_INDENT + index * _SLOT_SPACING + (_GROUP_GAP if index >= 4 else 0)
            if index == self.selected_index and selector is not None:
                surface.blit(
                    selector,
                    (origin + indent, 7),
                    pygame.Rect(0, 0, _SELECTOR_SIZE, _SELECTOR_SIZE),
                )
            if gadget is None:
                continue
            gadget.x = origin + indent + window.view_x
            gadget.y = 6 + window.view_y
            text = str(gadget.amount)
            offset = {1: 6, 2: 3}.get(len(text), 1)
            gadget.draw(surface, window)
            rendered = _font(12).render(text, True, _TEXT_COLOR)
            surface.blit(rendered, (origin + indent + offset, 25))