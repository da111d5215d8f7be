# observe.py
from __future__ import annotations

import numpy as np  # type: ignore

from .events import Role
from .game import GameState

EMPTY, SEGMENT, HEAD, FOOD = 0, 1, 2, 3


def occupancy(state: GameState) -> np.ndarray:
    """
    Board as an int8 array of shape (height, width), indexed [y, x]:
      0: empty
      1: snake segment
      2: snake head
      3: food
    Cells outside the grid (a head that just left it) are left out.
    """
    board = np.zeros((state.grid.height, state.grid.width), dtype=np.int8)

    for entity in state.arena.with_role(Role.FOOD):
        p = state.arena.position(entity)
        board[p.y, p.x] = FOOD

    for i, p in enumerate(state.snake.positions(state.arena)):
        if state.grid.contains(p):
            board[p.y, p.x] = HEAD if i == 0 else SEGMENT

    return board


GLYPHS = {EMPTY: ".", SEGMENT: "o", HEAD: "@", FOOD: "*"}


def board_text(board: np.ndarray) -> str:
    """Text rendering of an occupancy board, top row is the highest y."""
    return "\n".join("".join(GLYPHS[int(v)] for v in row) for row in board[::-1])
