"""A position paired with the position it will move to next."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Optional

from .constants import COLL_BOTTOM, COLL_LEFT, COLL_NONE, COLL_RIGHT, COLL_TOP


@dataclass
class Vector2D:
    """Current position (x, y) and next position (new_x, new_y)."""

    x: int = 0
    y: int = 0
    new_x: Optional[int] = None
    new_y: Optional[int] = None

    def __post_init__(self):
        if self.new_x is None:
            self.new_x = self.x
        if self.new_y is None:
            self.new_y = self.y

    @property
    def dx(self):
        return self.new_x - self.x

    @property
    def dy(self):
        return self.new_y - self.y

    def set_dx(self, dx):
        self.new_x = self.x + dx

    def set_dy(self, dy):
        self.new_y = self.y + dy

    def increase_dx(self, dx):
        self.new_x = self.x + self.dx + dx

    def increase_dy(self, dy):
        self.new_y = self.y + self.dy + dy

    def length(self):
        """Length of the step from the current to the next position."""
        return math.sqrt(float(self.dx * self.dx + self.dy * self.dy))

    def step(self):
        """Move to the next position, keeping the same velocity."""
        dx, dy = self.dx, self.dy
        self.x, self.y = self.new_x, self.new_y
        self.new_x = self.x + dx
        self.new_y = self.y + dy

    def direction_flags(self):
        """Movement direction as a combination of the COLL_* flags."""
        flags = COLL_NONE
        if self.new_y < self.y:
            flags |= COLL_TOP
        if self.new_y > self.y:
            flags |= COLL_BOTTOM
        if self.new_x < self.x:
            flags |= COLL_LEFT
        if self.new_x > self.x:
            flags |= COLL_RIGHT
        return flags

    def copy(self):
        return replace(self)