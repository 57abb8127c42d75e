"""Tile properties, their INI loader and the shared tile table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .inireader import IniReader
from .params import PARAMS

TABLE_SIZE = 256


class GadgetType(IntEnum):
    NONE = 0
    HEALTH = 1
    STAR = 2
    KEY = 3


@dataclass
class TileProperties:
    """How a tile is drawn and how it affects the things touching it."""

    id: int = 0
    bitmap_file: str = "Resources/BackgroundTiles.bmp"
    bitmap_x: int = 0
    bitmap_y: int = 0
    bitmap_width: int = 16
    bitmap_height: int = 16
    bitmap_count: int = 1
    animation: bool = False
    variation: bool = False
    layer: int = 0
    solid: bool = False
    x_mod: int = 0
    y_mod: int = 0
    abs_mod: bool = False
    gadget_type: GadgetType = GadgetType.NONE
    health_mod: int = 0


def _u8(value):
    return value & 0xFF


def _s8(value):
    return ((value + 128) % 256) - 128


def load_tile_properties(filename, table):
    """Overwrite entries of ``table`` from sections pref0, pref1, ... of an INI file."""
    ini = IniReader(filename)
    for index in range(ini.section_count()):
        section = f"pref{index}"
        tile_id = _u8(ini.read_integer(section, "id", index))
        table[tile_id] = TileProperties(
            id=tile_id,
            bitmap_file=ini.read_string(section, "bitmapFile", ""),
            bitmap_x=_u8(ini.read_integer(section, "bitmapXPos", 0)),
            bitmap_y=_u8(ini.read_integer(section, "bitmapYPos", 0)),
            bitmap_width=_u8(ini.read_integer(section, "bitmapWidth", 0)),
            bitmap_height=_u8(ini.read_integer(section, "bitmapHeight", 0)),
            bitmap_count=_u8(ini.read_integer(section, "bitmapCount", 0)),
            animation=ini.read_boolean(section, "animation", False),
            variation=ini.read_boolean(section, "variation", False),
            layer=_s8(ini.read_integer(section, "layer", -1)),
            solid=ini.read_boolean(section, "solid", False),
            gadget_type=GadgetType(ini.read_integer(section, "gadgetType", 0)),
            x_mod=_s8(ini.read_integer(section, "xMod", 0)),
            y_mod=_s8(ini.read_integer(section, "yMod", 0)),
            abs_mod=ini.read_boolean(section, "absMod", False),
            health_mod=_s8(ini.read_integer(section, "healthMod", 0)),
        )
    return table


class TileManager:
    """Table of properties for every tile id."""

    def __init__(self, filename=None):
        self.table = [TileProperties(id=i) for i in range(TABLE_SIZE)]
        source = PARAMS.tiles_properties if filename is None else filename
        if source:
            self.load_from_file(source)

    def get(self, tile_id):
        return self.table[tile_id]

    __getitem__ = get

    def is_interesting_for_collision(self, tile_id):
        """True for a non-empty tile that is solid or modifies movement or health."""
        tp = tile_id if isinstance(tile_id, TileProperties) else self.table[tile_id]
        if tp.id == 0:
            return False
        return bool(tp.health_mod or tp.x_mod or tp.y_mod or tp.solid)

    def load_from_file(self, filename):
        load_tile_properties(filename, self.table)


_manager = None


def get_tile_manager():
    """The shared tile manager, created on first use."""
    global _manager
    if _manager is None:
        _manager = TileManager()
    return _manager


def set_tile_manager(manager):
    """Replace the shared tile manager; None makes the next call create a fresh one."""
    global _manager
    _manager = manager