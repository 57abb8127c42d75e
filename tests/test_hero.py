import pygame
import pytest

from cengaver.collision import CollisionPointGroup
from cengaver.hero import Hero
from cengaver.params import PARAMS
from cengaver.states import Dead, Jumping, MoveRight, Waiting
from cengaver.tiles import TileManager, set_tile_manager
from cengaver.vector import Vector2D
from cengaver.gadgets import Key
from cengaver.viewpoint import Viewpoint


@pytest.fixture(autouse=True)
def tile_table():
    set_tile_manager(TileManager(""))
    yield
    set_tile_manager(None)


class StubLevel:
    def __init__(self):
        self.enemy_checks = 0

    def check_collision(self, obj):
        return CollisionPointGroup()

    def check_collision_with_enemies(self, obj):
        self.enemy_checks += 1
        return False


@pytest.fixture
def hero():
    h = Hero(5, 5)
    h.set_ai_level(StubLevel())
    return h


def test_initial_state(hero):
    assert hero.health == PARAMS.hero_max_health
    assert isinstance(hero.state, Waiting)
    assert hero.inventory.owner is hero
    assert hero.use_friction is True


def test_increase_health_is_capped(hero):
    hero.health = PARAMS.hero_max_health - 5
    hero.increase_health(10)
    assert hero.health == PARAMS.hero_max_health
    hero.increase_health(-20)
    assert hero.health == PARAMS.hero_max_health - 20


def test_take_hit_kills(hero):
    hero.take_hit(1)
    assert hero.health == PARAMS.hero_max_health - 1
    assert not hero.is_dead()
    hero.take_hit(hero.health)
    assert hero.is_dead()
    assert isinstance(hero.state, Dead)


def test_key_movement_is_limited(hero):
    hero.movement_vector.set_dx(-hero.max_key_movement_speed)
    hero.move_left()
    assert hero.movement_vector.dx == -hero.max_key_movement_speed
    hero.move_right()
    assert hero.movement_vector.dx == -hero.max_key_movement_speed + 1


def test_jump_enters_jumping(hero):
    hero.jump()
    assert isinstance(hero.state, Jumping)
    assert hero.movement_vector.dy == -20
    hero.jump()
    assert hero.movement_vector.dy == -20


def test_move_right_changes_state(hero):
    start = hero.x
    hero.move_right()
    hero.move(0, 0, False)
    assert isinstance(hero.state, MoveRight)
    assert hero.x == start + 1
    assert hero.ai.level.enemy_checks == 1


def test_standing_still_returns_to_waiting(hero):
    hero.movement_vector = Vector2D(100, 100)
    hero.set_state(MoveRight())
    hero.move(0, -PARAMS.gravity, False)
    assert isinstance(hero.state, Waiting)
    assert hero.state.name == "Waiting"
    assert (hero.x, hero.y) == (100, 100)
    assert hero.movement_vector.dx == 0
    assert hero.movement_vector.dy == 0


def test_select_and_delete_gadget(hero):
    key = Key(0, 0)
    hero.inventory.add_gadget(Key(0, 0))
    hero.inventory.add_gadget(key)
    hero.select_gadget(1)
    assert hero.inventory.selected_gadget() is key
    hero.delete_selected_gadget()
    assert hero.inventory.selected_gadget() is None
    assert len(hero.inventory) == 1


def test_draw_advances_animation(hero):
    window = Viewpoint(0, 0)
    surface = pygame.Surface((window.width, window.height))
    hero.draw(surface, window)
    assert hero.animation_counter == 1
    for _ in range(3):
        hero.draw(surface, window)
    assert hero.animation_counter == 0