"""Objects that move through a level under gravity and friction."""

from __future__ import annotations

from .ai import AI
from .collision import CollisionPointGroup
from .constants import LEVEL_MAX_HEIGHT, LEVEL_MAX_WIDTH, TILESIZE
from .params import PARAMS
from .tiles import TileProperties
from .vector import Vector2D


class MovableObject:
    """A body with a movement vector, an AI link and a bounding box."""

    def __init__(self, max_speed, mass):
        self.max_speed = max_speed
        self.mass = mass
        self.acceleration = 0.2
        self.movement_vector = Vector2D()
        self.prev_collisions = CollisionPointGroup()
        self.ai = AI()
        self.tp = TileProperties()
        self.use_friction = False
        self.jumping = 0
        self.friction_counter = PARAMS.friction_max

    @property
    def x(self):
        return self.movement_vector.x

    @property
    def y(self):
        return self.movement_vector.y

    @property
    def new_x(self):
        return self.movement_vector.new_x

    @property
    def new_y(self):
        return self.movement_vector.new_y

    @property
    def width(self):
        return self.tp.bitmap_width

    @property
    def height(self):
        return self.tp.bitmap_height

    def move_left(self):
        self.movement_vector.increase_dx(-1)

    def move_right(self):
        self.movement_vector.increase_dx(1)

    def jump(self):
        if self.jumping == 0:
            self.movement_vector.increase_dy(-20)
            self.jumping = 20

    def stop(self):
        self.movement_vector.new_x = self.movement_vector.x

    def take_hit(self, amount):
        """Plain movable objects take no damage."""

    def move(self, x_mod, y_mod, abs_mod):
        """Apply gravity, friction and tile modifiers, resolve collisions and step."""
        v = self.movement_vector
        v.increase_dy(PARAMS.gravity)

        if self.use_friction:
            if self.friction_counter > 0:
                self.friction_counter -= 1
            else:
                if v.dx > 0:
                    v.increase_dx(-1)
                if v.dx < 0:
                    v.increase_dx(1)
                self.friction_counter = PARAMS.friction_max

        if abs_mod:
            v.set_dx(0)
            v.set_dy(0)
        v.increase_dx(x_mod)
        v.increase_dy(y_mod)

        if self.jumping > 0:
            self.jumping -= 1

        if v.dx > TILESIZE - 1:
            v.set_dx(TILESIZE - 2)
        elif v.dx < -(TILESIZE - 1):
            v.set_dx(-(TILESIZE - 2))

        if v.x < TILESIZE:
            v.x = TILESIZE
            v.set_dx(0)
        elif v.x > LEVEL_MAX_WIDTH * TILESIZE:
            v.x = LEVEL_MAX_WIDTH * TILESIZE - TILESIZE
            v.set_dx(0)
        if v.y < TILESIZE:
            v.y = TILESIZE
            v.set_dy(0)
        elif v.y > (LEVEL_MAX_HEIGHT - 1) * TILESIZE:
            v.y = (LEVEL_MAX_HEIGHT - 1) * TILESIZE - TILESIZE
            v.set_dy(0)

        self.prev_collisions = self.ai.check_collision(self)
        v.step()

    def set_ai_level(self, level):
        if self.ai is not None:
            self.ai.set_level(level)