"""Fixed game constants and the flag helper used by collision code."""

TILESIZE = 16

COLL_NONE = 0x00
COLL_TOP = 0x01
COLL_BOTTOM = 0x02
COLL_LEFT = 0x04
COLL_RIGHT = 0x08

WINDOWWIDTH = 576
WINDOWHEIGHT = 320

TRANSPARENCYCOLOR = (255, 0, 255)

ANIMATIONRATE = 4

INVENTORY_SIZE = 8

LEVEL_MAX_HEIGHT = 64
LEVEL_MAX_WIDTH = 256

HS_NONE = 20
HS_WAITING = 20
HS_MOVELEFT = 21
HS_MOVERIGHT = 22
HS_DEAD = 23
HS_USEGADGET = 20

SCROLL_RESOLUTION = 25
SCROLL_BORDERY = 100
SCROLL_BORDERX = 200

GAME_END_DEAD = 1
GAME_END_END = 2
GAME_END_LEVEL = 3

MENU_SIZE = 4
MENU_NEW = 0
MENU_LOAD = 1
MENU_CREDITS = 2
MENU_EXIT = 3
MENU_RESUME = 4

MAX_TIME = 100


def contains(value, flags):
    """Return True when every bit of ``flags`` is set in ``value``."""
    return (value & flags) == flags