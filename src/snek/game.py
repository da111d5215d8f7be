# game.py
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import random
from typing import List, Optional

from .config import CFG, Config
from .entities import Arena
from .events import GameOver, Growth, PresentationEvent, SignalQueue
from .food import FoodManager
from .grid import Direction, Grid, Position
from .snake import Snake, advance, grow, spawn_snake, steer
from .timer import RepeatTimer

logger = logging.getLogger(__name__)


# ---------- State ----------
@dataclass
class GameState:
    cfg: Config
    grid: Grid
    arena: Arena
    snake: Snake
    food: FoodManager
    move_timer: RepeatTimer
    spawn_timer: RepeatTimer
    rng: random.Random
    growth: SignalQueue[Growth] = field(default_factory=SignalQueue)
    game_over: SignalQueue[GameOver] = field(default_factory=SignalQueue)
    ticks: int = 0
    moves: int = 0
    games: int = 0          # completed games (resets)
    food_eaten: int = 0     # in the current game
    best_length: int = 0


def new_game_state(cfg: Config = CFG, seed: Optional[int] = None) -> GameState:
    """
    Build a fresh simulation. The creation events of the starting snake are
    left queued on the arena for the presentation layer to pick up.
    """
    grid = Grid(cfg.width, cfg.height)
    arena = Arena()
    snake = spawn_snake(arena, cfg)
    return GameState(
        cfg=cfg,
        grid=grid,
        arena=arena,
        snake=snake,
        food=FoodManager(grid, cfg.max_food),
        move_timer=RepeatTimer(cfg.move_every_ms),
        spawn_timer=RepeatTimer(cfg.spawn_every_ms),
        rng=random.Random(cfg.seed if seed is None else seed),
        best_length=len(snake.segments),
    )


# ---------- Systems ----------
def detect_collisions(state: GameState, head: Position, before: List[Position]) -> int:
    """
    Wall and self checks against the body as it was before the move, tail
    cell included. Each violated rule sends its own game-over signal.
    """
    sent = 0
    if not state.grid.contains(head):
        state.game_over.send(GameOver("wall"))
        sent += 1
    if head in before:
        state.game_over.send(GameOver("self"))
        sent += 1
    return sent


def reset_game(state: GameState) -> None:
    """
    Wipe food and snake and respawn the starting snake. Timers and the
    heading applied on the last move survive the reset.
    """
    previous = state.snake.last_direction
    state.food.clear(state.arena)
    for entity in state.snake.segments:
        state.arena.despawn(entity)
    state.snake = spawn_snake(state.arena, state.cfg)
    state.snake.last_direction = previous
    state.growth.clear()
    state.food_eaten = 0


def react_game_over(state: GameState) -> bool:
    signals = state.game_over.drain()
    if not signals:
        return False
    length = len(state.snake.segments)
    logger.info(
        "Game over (%s) after %d food, length %d",
        ", ".join(s.reason for s in signals), state.food_eaten, length,
    )
    state.games += 1
    reset_game(state)
    return True


def react_growth(state: GameState) -> int:
    signals = state.growth.drain()
    if not signals:
        return 0
    n = len(signals) if state.cfg.grow_per_signal else 1
    for _ in range(n):
        grow(state.snake, state.arena)
    state.best_length = max(state.best_length, len(state.snake.segments))
    return n


def spawn_food(state: GameState) -> Optional[int]:
    occupied = set(state.snake.positions(state.arena))
    return state.food.try_spawn(state.arena, occupied, state.rng)


# ---------- Tick ----------
def step_game(state: GameState, delta_ms: float,
              requested: Optional[Direction] = None) -> List[PresentationEvent]:
    """
    Advance the simulation by one tick of delta_ms. The heading may change on
    any tick; positions only change when the move timer fires.
    Returns the presentation events produced by this tick.
    """
    moved = state.move_timer.tick(delta_ms)
    spawn_due = state.spawn_timer.tick(delta_ms)
    state.ticks += 1

    steer(state.snake, requested, debounce=state.cfg.debounce_turns)

    if moved and state.snake.segments:
        before = advance(state.snake, state.arena)
        state.moves += 1
        detect_collisions(state, state.arena.position(state.snake.head), before)

    react_game_over(state)

    if moved and state.snake.segments:
        head = state.arena.position(state.snake.head)
        state.food_eaten += state.food.check_eaten(state.arena, head, state.growth)

    react_growth(state)

    if spawn_due:
        spawn_food(state)

    return state.arena.drain_events()


def head_position(state: GameState) -> Position:
    return state.arena.position(state.snake.head)


def snake_length(state: GameState) -> int:
    return len(state.snake.segments)
