"""Everything living in a level: gadgets lying around and enemies."""

from __future__ import annotations

from .constants import TILESIZE

_UPDATE_MARGIN = 100


def _insert_at_first_gap(items, item):
    """Insert before the first empty slot, or append when there is none."""
    gap = next((i for i, existing in enumerate(items) if existing is None), len(items))
    items.insert(gap, item)


class WorldRepository:
    """The gadgets and enemies of a level; removed enemies leave an empty slot."""

    def __init__(self):
        self.gadgets = []
        self.enemies = []

    def add_enemy(self, enemy):
        _insert_at_first_gap(self.enemies, enemy)

    def add_gadget(self, gadget):
        _insert_at_first_gap(self.gadgets, gadget)

    def gadget_at(self, obj):
        """The first gadget whose tile overlaps ``obj``, or None."""
        for gadget in self.gadgets:
            if gadget is not None and obj.ai.bounding_box_collision(
                obj, gadget.x, gadget.x + TILESIZE, gadget.y, gadget.y + TILESIZE
            ):
                return gadget
        return None

    def remove_gadget(self, gadget):
        for index, existing in enumerate(self.gadgets):
            if existing is gadget:
                del self.gadgets[index]
                return gadget
        return None

    def remove_enemy(self, enemy):
        for index, existing in enumerate(self.enemies):
            if existing is enemy:
                self.enemies[index] = None
                return enemy
        return None

    def draw_gadgets(self, surface, window):
        for gadget in self.gadgets:
            if gadget is not None:
                gadget.draw(surface, window)

    def draw_enemies(self, surface, window):
        for enemy in self.enemies:
            if enemy is not None:
                enemy.draw(surface, window)

    def update_enemies(self, window):
        """Move the enemies near the window, then drop the emptied slots."""
        for enemy in self.enemies:
            if enemy is not None and window.contains(
                enemy.movement_vector.x, enemy.movement_vector.y, _UPDATE_MARGIN
            ):
                enemy.move(0, 0, False)
        self.enemies[:] = [enemy for enemy in self.enemies if enemy is not None]