# grid.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import random


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}

# ----- Unit deltas (dx, dy); y grows upward -----
DELTAS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
}


@dataclass(frozen=True)
class Position:
    x: int = 0
    y: int = 0

    def moved(self, direction: Direction) -> Position:
        dx, dy = DELTAS[direction]
        return Position(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Grid:
    width: int
    height: int

    def contains(self, position: Position) -> bool:
        """Check if a cell is inside the grid."""
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def random_cell(self, rng: random.Random) -> Position:
        return Position(rng.randrange(self.width), rng.randrange(self.height))
