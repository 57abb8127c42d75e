"""Tunable game parameters loaded from the params INI file."""

from __future__ import annotations

from dataclasses import dataclass

from .inireader import IniReader

_SECTION = "params"


def _s8(value):
    return ((value + 128) % 256) - 128


@dataclass
class Params:
    """Game-wide tunables; the defaults are used when the file lacks a key."""

    tiles_properties: str = ""
    friction_max: int = 8
    gravity: int = 2
    hero_max_health: int = 100
    parallax_speed1: int = 20
    parallax_speed2: int = 50
    animation_speed: int = 40
    current_time: int = 300
    debug_mode: bool = False

    def load(self, filename):
        ini = IniReader(filename)
        self.tiles_properties = ini.read_string(_SECTION, "TILESPROPERTIES", "")
        self.friction_max = ini.read_integer(_SECTION, "FRICTION_MAX", 8)
        self.gravity = ini.read_integer(_SECTION, "GRAVITY", 2)
        self.hero_max_health = _s8(ini.read_integer(_SECTION, "HERO_MAX_HEALTH", 100))
        self.parallax_speed1 = ini.read_integer(_SECTION, "PARALAXSPEED1", 20)
        self.parallax_speed2 = ini.read_integer(_SECTION, "PARALAXSPEED2", 50)
        self.animation_speed = ini.read_integer(_SECTION, "ANIMATIONSPEED", 40)
        self.current_time = ini.read_integer(_SECTION, "CURRENTTIME", 300) & 0xFFFFFFFF
        return self


PARAMS = Params()


def load_params(filename):
    """Load the shared parameters from ``filename`` and return them."""
    return PARAMS.load(filename)