"""A level: the tile map, its inhabitants, collision checks and drawing."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

import pygame

from .collision import CollisionPointGroup
from .constants import (
    ANIMATIONRATE,
    COLL_BOTTOM,
    COLL_LEFT,
    COLL_RIGHT,
    COLL_TOP,
    LEVEL_MAX_HEIGHT,
    LEVEL_MAX_WIDTH,
    TILESIZE,
    TRANSPARENCYCOLOR,
    WINDOWWIDTH,
    contains,
)
from .enemy import BOSS_ENEMY, Enemy
from .gadgets import KEY_ID, Key, make_gadget
from .inireader import IniReader
from .params import PARAMS
from .tiles import get_tile_manager
from .vector import Vector2D
from .world import WorldRepository

BACKGROUND_BITMAP = "Resources/MainBackground.bmp"
TILEMAP_BITMAP = "Resources/BackgroundTiles.bmp"
PARALLAX1_BITMAP = "Resources/paralaxBackground1.bmp"
PARALLAX2_BITMAP = "Resources/paralaxBackground2.bmp"
ENEMY_BITMAP = "Resources/Enemies.bmp"
GADGET_BITMAP = "Resources/Gadgets.bmp"

BEGIN_TILE = 88
END_TILE = 89
DOOR_TILE = 90

_BACKGROUND_SIZE = (600, 350)
_PARALLAX1_KEY = (255, 255, 255)
_PARALLAX2_KEY = (80, 179, 247)
_DEBUG_COLOR = (255, 0, 0)
_ENEMY_DAMAGE = {30: 1, 31: 2, 32: 1, 33: 1}
_MAP_CHAR_OFFSET = 33


def _tdiv(a, b):
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _is_valid(point):
    return (
        point.x > 0
        and point.y > 0
        and point.x < LEVEL_MAX_WIDTH * TILESIZE
        and point.y < LEVEL_MAX_HEIGHT * TILESIZE
    )


@lru_cache(maxsize=None)
def _load_image(path, key):
    try:
        image = pygame.image.load(path)
    except (pygame.error, OSError):
        return None
    image.set_colorkey(key)
    return image


@dataclass
class _ParallaxLayer:
    x_pos: int = 0
    prev_hero_x: int = 0
    distance: int = 0


class Level:
    """Tile map of LEVEL_MAX_HEIGHT rows by LEVEL_MAX_WIDTH columns plus its world."""

    def __init__(self):
        self.map = [bytearray(LEVEL_MAX_WIDTH) for _ in range(LEVEL_MAX_HEIGHT)]
        self.world = WorldRepository()
        self.parallax = {
            1: _ParallaxLayer(distance=PARAMS.parallax_speed1),
            2: _ParallaxLayer(distance=PARAMS.parallax_speed2),
        }
        self.animation_counter = 0
        self._animation_indent = 0
        self.debug_tile_points = []

    def tile_at(self, x, y):
        """Tile id at column x, row y; 0 outside the map."""
        if 0 <= y < LEVEL_MAX_HEIGHT and 0 <= x < LEVEL_MAX_WIDTH:
            return self.map[y][x]
        return 0

    def _props(self, x, y):
        return get_tile_manager().get(self.tile_at(x, y))

    def read_level(self, filename):
        """Load map, enemies and gadgets from a level INI file."""
        ini = IniReader(filename)
        for section in ini.sections()[: ini.section_count()]:
            if section.startswith("enemy"):
                vector = Vector2D(
                    ini.read_integer(section, "x", 0) * TILESIZE,
                    ini.read_integer(section, "y", 0) * TILESIZE,
                )
                enemy = Enemy(5, 5, ini.read_integer(section, "id", 0) & 0xFF, vector)
                enemy.set_ai_level(self)
                self.world.add_enemy(enemy)
            elif section.startswith("gadget"):
                tile_id = ini.read_integer(section, "id", 0)
                x = ini.read_integer(section, "x", 0) * TILESIZE
                y = ini.read_integer(section, "y", 0) * TILESIZE
                gadget = make_gadget(x, y, tile_id)
                if gadget is not None:
                    self.world.add_gadget(gadget)
            else:
                self._read_map(ini, section)

    def _read_map(self, ini, section):
        data = ini.read_large_string(section, "map", "").encode("latin-1")
        width = ini.read_integer(section, "width", 0)
        height = ini.read_integer(section, "height", 0)
        if width > LEVEL_MAX_WIDTH or height > LEVEL_MAX_HEIGHT:
            raise ValueError(f"level of {width}x{height} tiles does not fit the map")
        self.map = [bytearray(LEVEL_MAX_WIDTH) for _ in range(LEVEL_MAX_HEIGHT)]
        for y in range(height):
            for x in range(width):
                index = y * width + x
                char = data[index] if index < len(data) else 0
                self.map[y][x] = (char - _MAP_CHAR_OFFSET) & 0xFF

    def create_box_collision_group(self, obj, distance):
        """Tiles around ``obj`` in its direction of movement, nearest first."""
        v = obj.movement_vector
        left, right = obj.x, obj.x + obj.width
        top, bottom = obj.y, obj.y + obj.height
        group = CollisionPointGroup()

        tx, ty = _tdiv(v.x, TILESIZE), _tdiv(v.y, TILESIZE)
        for row in (ty, ty + 1):
            tp = self._props(tx, row)
            if not tp.solid and tp.id != 0:
                group.add_at(tx, row, COLL_TOP)

        if v.length() == 0:
            return group

        direction = v.direction_flags()
        fx = fy = 0
        if contains(direction, COLL_LEFT):
            for y in range(_tdiv(top, TILESIZE), _tdiv(bottom - 1, TILESIZE) + 1):
                group.add_at(_tdiv(left, TILESIZE), y, COLL_LEFT)
            fx -= 1
        if contains(direction, COLL_RIGHT):
            for y in range(_tdiv(top, TILESIZE), _tdiv(bottom, TILESIZE)):
                group.add_at(_tdiv(right, TILESIZE), y, COLL_RIGHT)
            fx += 1
        if contains(direction, COLL_TOP):
            for x in range(_tdiv(left, TILESIZE), _tdiv(right - 1, TILESIZE) + 1):
                group.add_at(x, _tdiv(top, TILESIZE) - 1, COLL_TOP)
            fy -= 1
        for x in range(_tdiv(left, TILESIZE), _tdiv(right - 1, TILESIZE) + 1):
            group.add_at(x, _tdiv(bottom, TILESIZE), COLL_BOTTOM)
        fy += 1

        group.add_by_moving(fx, fy, distance)

        for point in group:
            ddx = obj.x - point.x * TILESIZE
            ddy = obj.y - point.y * TILESIZE
            point.pseudo_distance = ddx * ddx + ddy * ddy

        if len(group):
            group.points.sort(key=lambda p: p.pseudo_distance)
            previous = group.points[0]
            for point in group.points[1:]:
                if point == previous:
                    point.direction |= previous.direction
                previous = point
        return group

    def check_collision(self, obj):
        """Stop ``obj`` at solid tiles and return the tiles it touched."""
        v = obj.movement_vector
        group = self.create_box_collision_group(obj, int(v.length() / TILESIZE))
        collisions = CollisionPointGroup()
        group.copy_to(self.debug_tile_points)
        width_tiles = _tdiv(obj.width, TILESIZE)
        height_tiles = _tdiv(obj.height, TILESIZE)

        for point in group:
            tp = self._props(point.x, point.y)
            if (tp.health_mod or tp.x_mod or tp.y_mod) and tp.id != 0 and not tp.solid:
                collisions.add(point)
            elif _is_valid(point) and tp.solid:
                if contains(point.direction, COLL_RIGHT):
                    limit = (point.x - width_tiles) * TILESIZE - TILESIZE
                    if v.new_x > limit:
                        v.x = limit
                        v.set_dx(0)
                        collisions.add(point)
                elif contains(point.direction, COLL_LEFT):
                    limit = (point.x + width_tiles) * TILESIZE
                    if v.new_x < limit:
                        v.x = limit
                        v.set_dx(0)
                        collisions.add(point)

                if contains(point.direction, COLL_BOTTOM):
                    limit = (point.y - height_tiles) * TILESIZE
                    if v.new_y > limit:
                        v.y = limit
                        v.set_dy(0)
                        collisions.add(point)
                elif contains(point.direction, COLL_TOP):
                    limit = (point.y + height_tiles) * TILESIZE
                    if v.new_y < limit:
                        v.y = limit
                        v.set_dy(0)
                        collisions.add(point)
        return collisions

    def bounding_box_collision(self, obj, left, right, top, bottom):
        """True when the box of ``obj`` touches the given box."""
        return not (
            obj.y + obj.height < top
            or obj.y > bottom
            or obj.x + obj.width < left
            or obj.x > right
        )

    def objects_collide(self, first, second):
        return self.bounding_box_collision(
            first, second.x, second.x + second.width, second.y, second.y + second.height
        )

    def check_collision_with_enemies(self, obj):
        """Let ``obj`` stomp enemies or be hurt by them; True when it was hurt."""
        v = obj.movement_vector
        hurt = False
        for enemy in list(self.world.enemies):
            if enemy is None:
                continue
            collided = self.objects_collide(obj, enemy)
            direction = v.direction_flags()
            if collided and contains(direction, COLL_BOTTOM):
                if enemy.tile_id == BOSS_ENEMY:
                    killed = enemy.take_boss_hit()
                    v.set_dy(-15)
                    if killed:
                        self.world.add_gadget(Key(enemy.x, enemy.y, False, KEY_ID))
                else:
                    enemy.take_hit(1)
                    v.set_dy(-10)
                continue
            if collided:
                enemy_dx = enemy.movement_vector.dx
                if v.dx != 0:
                    v.set_dx(-v.dx)
                elif enemy_dx < 0:
                    v.set_dx(enemy_dx - 2)
                elif enemy_dx > 0:
                    v.set_dx(enemy_dx + 2)
                hurt = True
                damage = _ENEMY_DAMAGE.get(enemy.tile_id)
                if damage:
                    obj.take_hit(damage)
        return hurt

    def will_fall(self, obj, steps):
        """True when a non-solid tile lies under ``obj`` within ``steps`` tiles ahead."""
        left = obj.x
        right = obj.x + obj.width
        row = _tdiv(obj.y + obj.height, TILESIZE)
        direction = obj.movement_vector.direction_flags()
        if contains(direction, COLL_LEFT):
            for x in range(steps):
                if not self._props(_tdiv(left, TILESIZE) - x, row).solid:
                    return True
        if contains(direction, COLL_RIGHT):
            for x in range(steps):
                if not self._props(_tdiv(right, TILESIZE) + x, row).solid:
                    return True
        return False

    def change_parallax_x(self, vector, layer):
        """Shift parallax layer 1 or 2 once the hero has moved far enough."""
        if layer not in self.parallax:
            raise ValueError(f"no parallax layer {layer}")
        p = self.parallax[layer]
        if vector.x - p.prev_hero_x > p.distance:
            p.x_pos = p.x_pos + 1 if p.x_pos < WINDOWWIDTH else 0
            p.prev_hero_x = vector.x
        if vector.x - p.prev_hero_x < -p.distance:
            p.x_pos = p.x_pos - 1 if p.x_pos > -WINDOWWIDTH else 0
            p.prev_hero_x = vector.x

    def _raise_animation_counter(self):
        if self._animation_indent == ANIMATIONRATE:
            self.animation_counter = self.animation_counter + 1 if self.animation_counter < 7 else 0
            self._animation_indent = 0
        else:
            self._animation_indent += 1

    def _nonzero_tiles(self, group):
        for point in group:
            if self.tile_at(point.x, point.y) != 0:
                yield self._props(point.x, point.y)

    def calculate_tile_modifiers(self, group):
        """Sum of the (x_mod, y_mod) of the non-empty tiles in ``group``."""
        props = list(self._nonzero_tiles(group))
        return sum(tp.x_mod for tp in props), sum(tp.y_mod for tp in props)

    def calculate_tile_abs_mod(self, group):
        return any(self._props(p.x, p.y).abs_mod for p in group)

    def calc_environment_damage(self, group):
        return sum(tp.health_mod for tp in self._nonzero_tiles(group))

    def find_begin_point(self):
        """(column, row) of the first begin tile, or (5, 5) without one."""
        for y, row in enumerate(self.map):
            x = row.find(BEGIN_TILE)
            if x != -1:
                return x, y
        return 5, 5

    def touch_end(self, group):
        return any(tp.id == END_TILE for tp in self._nonzero_tiles(group))

    def check_door(self, group):
        """(column, row) of the last door tile in ``group``, or None."""
        door = None
        for point in group:
            if self._props(point.x, point.y).id == DOOR_TILE:
                door = (point.x, point.y)
        return door

    def remove_door(self, x, y, to_id1, to_id2):
        self.map[y][x] = to_id1 & 0xFF
        self.map[y + 1][x] = to_id2 & 0xFF

    def remove_from_repository(self, enemy):
        self.world.remove_enemy(enemy)

    def draw(self, surface, window, layer):
        """Draw the visible tiles belonging to ``layer``."""
        tiles = _load_image(TILEMAP_BITMAP, TRANSPARENCYCOLOR)
        manager = get_tile_manager()
        first_row = _tdiv(window.view_y, TILESIZE)
        first_col = _tdiv(window.view_x, TILESIZE)
        off_x = window.view_x % TILESIZE
        off_y = window.view_y % TILESIZE
        i = first_row
        while i * TILESIZE < window.view_y + window.height and i < LEVEL_MAX_HEIGHT:
            j = first_col
            while j * TILESIZE < window.view_x + window.width and j < LEVEL_MAX_WIDTH:
                tile_id = self.tile_at(j, i)
                tp = manager.get(tile_id)
                if tile_id and tp.layer == layer and tp.bitmap_count and tiles is not None:
                    modifier = 0
                    if tp.variation:
                        modifier += i * 47 + j * 41
                    if tp.animation:
                        modifier += self.animation_counter
                    modifier &= 0xFFFF
                    source = pygame.Rect(
                        ((tp.bitmap_x + modifier) % tp.bitmap_count) * tp.bitmap_width,
                        tp.bitmap_y * tp.bitmap_height,
                        tp.bitmap_width,
                        tp.bitmap_height,
                    )
                    dest = ((j - first_col) * TILESIZE - off_x, (i - first_row) * TILESIZE - off_y)
                    surface.blit(tiles, dest, source)
                j += 1
            i += 1
        if layer == -1:
            self._raise_animation_counter()
        if PARAMS.debug_mode:
            for point in self.debug_tile_points:
                rect = pygame.Rect(
                    point.x * TILESIZE - window.view_x,
                    point.y * TILESIZE - window.view_y,
                    TILESIZE,
                    TILESIZE,
                )
                pygame.draw.rect(surface, _DEBUG_COLOR, rect)
        self.debug_tile_points.clear()

    def draw_parallax_backgrounds(self, surface, window):
        area = pygame.Rect((0, 0), _BACKGROUND_SIZE)
        background = _load_image(BACKGROUND_BITMAP, TRANSPARENCYCOLOR)
        if background is not None:
            surface.blit(background, (0, 0), area)
        for layer, path, key in (
            (2, PARALLAX2_BITMAP, _PARALLAX2_KEY),
            (1, PARALLAX1_BITMAP, _PARALLAX1_KEY),
        ):
            image = _load_image(path, key)
            if image is None:
                continue
            pos = self.parallax[layer].x_pos
            for x in (-pos, window.width - pos, -window.width - pos):
                surface.blit(image, (x, 0), area)