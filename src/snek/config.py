# config.py
from dataclasses import dataclass

from .grid import Direction, Position

# ----- Arena -----
ARENA_WIDTH, ARENA_HEIGHT = 20, 20

# ----- Timers (ms) -----
MOVE_EVERY_MS = 200
SPAWN_EVERY_MS = 1000

# ----- Food -----
MAX_FOOD = 5  # spawning is allowed while fewer than this many exist

# ----- Starting snake -----
START_HEAD = Position(10, 6)
START_TAIL = Position(10, 5)
START_DIRECTION = Direction.UP


# ----- Tunables -----
@dataclass(frozen=True)
class Config:
    width: int = ARENA_WIDTH
    height: int = ARENA_HEIGHT
    move_every_ms: float = MOVE_EVERY_MS
    spawn_every_ms: float = SPAWN_EVERY_MS
    max_food: int = MAX_FOOD
    start_head: Position = START_HEAD
    start_tail: Position = START_TAIL
    start_direction: Direction = START_DIRECTION
    seed: int = 0
    # A turn only registers once a move has been made and differs from it
    debounce_turns: bool = True
    # False: at most one new segment per tick however many foods were eaten
    grow_per_signal: bool = False

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Arena must be non-empty, got {self.width}x{self.height}")
        if self.move_every_ms <= 0 or self.spawn_every_ms <= 0:
            raise ValueError("Timer periods must be positive")
        if self.max_food < 0:
            raise ValueError(f"max_food must be >= 0, got {self.max_food}")


CFG = Config()
