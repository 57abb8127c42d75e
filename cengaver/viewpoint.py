"""The visible rectangle of the level."""

from dataclasses import dataclass

from .constants import WINDOWHEIGHT, WINDOWWIDTH


@dataclass
class Viewpoint:
    """Top-left corner and size of the window onto the level, in pixels."""

    view_x: int = 0
    view_y: int = 0
    width: int = WINDOWWIDTH
    height: int = WINDOWHEIGHT

    def contains(self, x, y, margin=0):
        """True when (x, y) lies strictly inside the window grown by ``margin``."""
        return (
            self.view_x - margin < x < self.view_x + self.width + margin
            and self.view_y - margin < y < self.view_y + self.height + margin
        )