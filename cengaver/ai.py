"""Enemy behaviours and the link between a moving object and its level."""

from __future__ import annotations

import random


class AI:
    """Steers an object and forwards collision queries to the current level."""

    def __init__(self, level=None, rng=None):
        self.level = level
        self.rng = rng if rng is not None else random
        self._counter = 0
        self._offset = 10
        self._prev_dx = 2
        self._gen_bool = False
        self._switch_bool = False

    def set_level(self, level):
        self.level = level

    def check_collision(self, obj):
        return self.level.check_collision(obj)

    def check_collision_with_enemies(self, obj):
        return self.level.check_collision_with_enemies(obj)

    def will_fall(self, obj, steps):
        return self.level.will_fall(obj, steps)

    def bounding_box_collision(self, obj, left, right, top, bottom):
        return self.level.bounding_box_collision(obj, left, right, top, bottom)

    def remove_from_repository(self, enemy):
        self.level.remove_from_repository(enemy)

    def enemy_patrol(self, obj):
        """Walk back and forth, turning at walls, ledges and random moments."""
        vector = obj.movement_vector
        self._offset = self.rng.randrange(30)
        direction = vector.dx
        if direction == 0:
            vector.set_dx(1)
        if self._counter in (50 + self._offset, 80 + self._offset):
            vector.set_dx(-direction)
        direction = vector.dx
        self.check_collision(obj)
        if vector.dx != direction or self.will_fall(obj, 1):
            vector.set_dx(-direction)
            self._gen_bool = True
        self._counter = (self._counter + 1) & 0xFF
        if self._counter > 110 + self._offset:
            self._counter = 0

    def enemy_hopping(self, obj):
        """Walk, and every so often jump a random height, usually turning."""
        vector = obj.movement_vector
        direction = vector.dx
        if direction == 0 and vector.dy == 0:
            vector.set_dx(self._prev_dx)
        if vector.dy != 0 and vector.dx != 0:
            self._prev_dx = vector.dx
            vector.set_dx(0)
            self._gen_bool = True
        if self._counter > 20 + self._offset:
            if self.rng.randrange(100) < 80:
                vector.set_dx(-direction)
            vector.set_dy(-(self.rng.randrange(6) + 10))
            self._counter = 0
            self._offset = self.rng.randrange(20)
        else:
            self._counter = (self._counter + 1) & 0xFF
        direction = vector.dx
        self.check_collision(obj)
        if vector.dx != direction or self.will_fall(obj, 1):
            vector.set_dx(-direction)

    def enemy_ram(self, obj):
        """Accelerate to the edge of the platform, pause, then charge back."""
        vector = obj.movement_vector
        direction = vector.dx
        if self._counter == 0:
            direction = int(self._prev_dx * 1.5)
            self._prev_dx = direction
            if direction > 14 or direction < -14:
                direction = 14 if direction > 0 else -14
                self._prev_dx = direction
            vector.set_dx(direction)
        else:
            self._counter -= 1
        self.check_collision(obj)
        if vector.dx != direction or self.will_fall(obj, 1):
            vector.set_dx(-direction)
            self._counter = self.rng.randrange(100) + 50
            self._prev_dx = 2 if vector.dx > 0 else -2
            vector.set_dx(0)
            self._gen_bool = True

    def enemy_boss(self, obj):
        """Alternate between ramming and hopping whenever a behaviour turns."""
        if self._switch_bool:
            self.enemy_hopping(obj)
        else:
            self.enemy_ram(obj)
        if self._gen_bool:
            self._switch_bool = not self._switch_bool
            self._gen_bool = False

    def enemy_stop(self, obj):
        obj.movement_vector.set_dx(0)