"""Deterministic, tick-driven snake simulation core."""

from .config import CFG, Config
from .events import EntityCreated, EntityDestroyed, PositionChanged, Role
from .game import GameState, new_game_state, step_game
from .grid import Direction, Grid, Position
from .observe import board_text, occupancy

__all__ = [
    "CFG",
    "Config",
    "Direction",
    "EntityCreated",
    "EntityDestroyed",
    "GameState",
    "Grid",
    "Position",
    "PositionChanged",
    "Role",
    "board_text",
    "new_game_state",
    "occupancy",
    "step_game",
]
