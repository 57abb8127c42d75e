import pygame
import pytest

from cengaver.collision import CollisionPointGroup
from cengaver.enemy import Enemy
from cengaver.states import (
    BossEnemy,
    DyingEnemy,
    HoppingEnemy,
    PatrollingEnemy,
    RammingEnemy,
    WaitingEnemy,
)
from cengaver.tiles import TileManager, set_tile_manager
from cengaver.vector import Vector2D
from cengaver.viewpoint import Viewpoint


@pytest.fixture(autouse=True)
def tile_table():
    set_tile_manager(TileManager(""))
    yield
    set_tile_manager(None)


class StubLevel:
    def __init__(self):
        self.removed = []

    def check_collision(self, obj):
        return CollisionPointGroup()

    def will_fall(self, obj, steps):
        return False

    def remove_from_repository(self, enemy):
        self.removed.append(enemy)


def make_enemy(tile_id, x=100, y=100):
    enemy = Enemy(5, 5, tile_id, Vector2D(x, y))
    enemy.set_ai_level(StubLevel())
    return enemy


def test_starts_waiting():
    enemy = make_enemy(30)
    assert isinstance(enemy.state, WaitingEnemy)
    assert enemy.health == 1


@pytest.mark.parametrize(
    "tile_id, state_type, name, health",
    [
        (30, PatrollingEnemy, "Patrolling", 10),
        (31, HoppingEnemy, "Hopping", 1),
        (32, RammingEnemy, "Ramming", 1),
        (33, BossEnemy, "Boss", 1),
    ],
)
def test_entering_view_picks_behaviour(tile_id, state_type, name, health):
    enemy = make_enemy(tile_id)
    enemy.update_visibility(Viewpoint(0, 0))
    assert isinstance(enemy.state, state_type)
    assert enemy.state.name == name
    assert enemy.health == health


def test_weak_enemy_has_ten_health():
    enemy = make_enemy(30)
    enemy.update_visibility(Viewpoint(0, 0))
    assert enemy.health == 10


def test_leaving_view_waits_again():
    enemy = make_enemy(30)
    enemy.update_visibility(Viewpoint(0, 0))
    enemy.movement_vector.set_dx(3)
    enemy.update_visibility(Viewpoint(5000, 5000))
    assert isinstance(enemy.state, WaitingEnemy)
    assert enemy.state.name == "Waiting"
    assert enemy.movement_vector.dx == 0


def test_leaving_state_stops_enemy():
    enemy = make_enemy(30)
    enemy.update_visibility(Viewpoint(0, 0))
    enemy.movement_vector.set_dx(5)
    enemy.set_state(WaitingEnemy())
    assert enemy.movement_vector.dx == 0


def test_hit_kills_and_next_move_removes():
    enemy = make_enemy(31)
    enemy.update_visibility(Viewpoint(0, 0))
    enemy.take_hit(1)
    assert isinstance(enemy.state, DyingEnemy)
    enemy.move(0, 0, False)
    assert enemy.ai.level.removed == [enemy]


def test_boss_hit_reports_kill():
    weak = make_enemy(30)
    weak.update_visibility(Viewpoint(0, 0))
    assert weak.take_boss_hit() is False
    assert weak.health == 9
    boss = make_enemy(33)
    boss.update_visibility(Viewpoint(0, 0))
    assert boss.take_boss_hit() is True
    assert isinstance(boss.state, DyingEnemy)


def test_patrolling_enemy_starts_walking():
    enemy = make_enemy(30)
    enemy.update_visibility(Viewpoint(0, 0))
    enemy.move(0, 0, False)
    assert enemy.movement_vector.dx == 1


def test_draw_updates_state_and_animation():
    enemy = make_enemy(32)
    window = Viewpoint(0, 0)
    enemy.draw(pygame.Surface((window.width, window.height)), window)
    assert isinstance(enemy.state, RammingEnemy)
    assert enemy.animation_counter == 1