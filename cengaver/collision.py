"""Tile collision points and ordered groups of them."""

from __future__ import annotations

from dataclasses import dataclass, replace
from itertools import groupby


@dataclass(eq=False)
class CollisionPoint:
    """A tile coordinate together with the side it was probed from."""

    x: int = 0
    y: int = 0
    pseudo_distance: float = 0.0
    direction: int = 0
    is_enemy: bool = False

    def __eq__(self, other):
        if not isinstance(other, CollisionPoint):
            return NotImplemented
        return (
            self.x == other.x
            and self.y == other.y
            and self.pseudo_distance == other.pseudo_distance
        )

    __hash__ = None


class CollisionPointGroup:
    """An ordered list of collision points."""

    def __init__(self, points=None):
        self.points = list(points) if points is not None else []

    def add(self, point):
        self.points.append(point)

    def add_at(self, x, y, direction):
        self.points.append(CollisionPoint(x, y, -1.0, direction))

    def add_by_moving_x(self, offset):
        """Append a copy of every point shifted horizontally."""
        self.points.extend([replace(p, x=p.x + offset) for p in self.points])

    def add_by_moving_y(self, offset):
        """Append a copy of every point shifted vertically."""
        self.points.extend([replace(p, y=p.y + offset) for p in self.points])

    def add_by_moving(self, dx, dy, times):
        """Append copies shifted 1..times steps of (dx, dy), then drop adjacent duplicates."""
        moved = [
            replace(p, x=p.x + dx * i, y=p.y + dy * i)
            for i in range(1, times + 1)
            for p in self.points
        ]
        self.points.extend(moved)
        self.points = [first for first, _ in groupby(self.points)]

    def copy_to(self, collection):
        collection.extend(self.points)

    def __iter__(self):
        return iter(self.points)

    def __len__(self):
        return len(self.points)

    def __getitem__(self, index):
        return self.points[index]