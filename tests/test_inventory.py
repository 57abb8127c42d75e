import pygame
import pytest

from cengaver.constants import INVENTORY_SIZE
from cengaver.gadgets import GadgetUse, Health, Key, Star
from cengaver.inventory import Inventory
from cengaver.params import PARAMS
from cengaver.tiles import TileManager, set_tile_manager
from cengaver.viewpoint import Viewpoint


@pytest.fixture(autouse=True)
def tile_table():
    set_tile_manager(TileManager(""))
    yield
    set_tile_manager(None)


class Owner:
    def __init__(self, health):
        self.health = health

    def increase_health(self, value):
        self.health += value


def test_add_until_full():
    inventory = Inventory(Owner(10))
    for _ in range(INVENTORY_SIZE):
        assert inventory.add_gadget(Key(0, 0)) is True
    assert len(inventory) == INVENTORY_SIZE
    assert inventory.add_gadget(Key(0, 0)) is False


def test_added_gadget_is_marked_in_inventory():
    inventory = Inventory()
    key = Key(0, 0)
    inventory.add_gadget(key)
    assert key.in_inventory is True
    assert inventory.slots[0] is key


def test_remove_gadget_frees_slot():
    inventory = Inventory()
    inventory.add_gadget(Key(0, 0))
    inventory.add_gadget(Star(0, 0))
    inventory.remove_gadget(0)
    assert len(inventory) == 1
    assert inventory.slots[0] is None
    inventory.remove_gadget(0)
    assert len(inventory) == 1


def test_remove_selected():
    inventory = Inventory()
    inventory.add_gadget(Key(0, 0))
    star = Star(0, 0)
    inventory.add_gadget(star)
    inventory.set_selected_index(0)
    inventory.remove_selected()
    assert inventory.slots == [None, star] + [None] * (INVENTORY_SIZE - 2)


def test_set_selected_index_ignores_out_of_range():
    inventory = Inventory()
    inventory.set_selected_index(3)
    inventory.set_selected_index(INVENTORY_SIZE)
    assert inventory.selected_index == 3


def test_use_health_heals_owner():
    owner = Owner(PARAMS.hero_max_health - 10)
    inventory = Inventory(owner)
    potion = Health(0, 0)
    inventory.add_gadget(potion)
    assert inventory.use_gadget() is GadgetUse.NONE
    assert owner.health == PARAMS.hero_max_health - 9
    assert potion.amount == 9


def test_use_on_empty_slot():
    inventory = Inventory(Owner(1))
    assert inventory.use_gadget() is GadgetUse.NONE
    assert len(inventory) == 0


def test_used_up_gadget_replaced_by_same_kind():
    inventory = Inventory(Owner(1))
    first, key, second = Star(0, 0), Key(0, 0), Star(0, 0)
    for gadget in (first, key, second):
        inventory.add_gadget(gadget)
    inventory.use_gadget()
    assert inventory.selected_gadget() is second
    assert inventory.slots[2] is None
    assert len(inventory) == 2


def test_used_up_gadget_without_replacement_removed():
    inventory = Inventory(Owner(1))
    inventory.add_gadget(Star(0, 0))
    inventory.use_gadget()
    assert inventory.selected_gadget() is None
    assert len(inventory) == 0


def test_find_and_remove_key():
    inventory = Inventory()
    star = Star(0, 0)
    inventory.add_gadget(star)
    inventory.add_gadget(Key(0, 0))
    assert inventory.find_and_remove_key() is True
    assert inventory.slots[0] is star
    assert len(inventory) == 1
    assert inventory.find_and_remove_key() is False


def test_draw_places_gadgets_in_slots():
    inventory = Inventory()
    gadgets = [Key(0, 0) for _ in range(5)]
    for gadget in gadgets:
        inventory.add_gadget(gadget)
    window = Viewpoint(10, 20)
    inventory.draw(pygame.Surface((window.width, window.height)), window)
    assert all(g.y == 6 + window.view_y for g in gadgets)
    assert gadgets[1].x - gadgets[0].x == gadgets[2].x - gadgets[1].x
    assert gadgets[4].x - gadgets[0].x == 78