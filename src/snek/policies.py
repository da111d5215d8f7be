# policies.py
"""Scripted input sources for the headless runner."""

from __future__ import annotations

import random
from typing import List, Optional

from .game import GameState
from .grid import Direction, Position


def policy_idle(state: GameState, rng: random.Random) -> Optional[Direction]:
    """No input: the snake keeps its heading."""
    return None


def policy_random(state: GameState, rng: random.Random) -> Optional[Direction]:
    """
    Random policy: pick a uniformly random direction.
    Reversals are left for the simulation to reject.
    """
    return rng.choice(list(Direction))


def best_moves_toward(head: Position, target: Position) -> List[Direction]:
    """
    Preference ordering of moves that reduce Manhattan distance to target,
    followed by the remaining directions. Does NOT check collisions.
    """
    prefs = []
    if target.x < head.x:
        prefs.append(Direction.LEFT)
    elif target.x > head.x:
        prefs.append(Direction.RIGHT)
    if target.y < head.y:
        prefs.append(Direction.DOWN)
    elif target.y > head.y:
        prefs.append(Direction.UP)
    for d in Direction:
        if d not in prefs:
            prefs.append(d)
    return prefs


def policy_greedy(state: GameState, rng: random.Random) -> Optional[Direction]:
    """
    Head for the nearest food, avoiding the body and walls where possible and
    never asking for a reversal. Idles when there is no food.
    """
    positions = state.snake.positions(state.arena)
    foods = state.food.positions(state.arena)
    if not foods:
        return None
    head = positions[0]
    target = min(foods, key=lambda f: abs(f.x - head.x) + abs(f.y - head.y))

    back = state.snake.direction.opposite()
    body = set(positions)
    options = [d for d in best_moves_toward(head, target) if d != back]
    for d in options:
        nxt = head.moved(d)
        if state.grid.contains(nxt) and nxt not in body:
            return d
    return options[0]
