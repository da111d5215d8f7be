# snake.py
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import List, Optional

from .config import Config
from .entities import Arena
from .errors import NoTailPositionError
from .events import Role
from .grid import Direction, Position

logger = logging.getLogger(__name__)


@dataclass
class Snake:
    segments: List[int] = field(default_factory=list)  # head at index 0
    direction: Direction = Direction.UP
    last_direction: Optional[Direction] = None  # applied on the previous move
    last_tail: Optional[Position] = None        # vacated by the previous move

    @property
    def head(self) -> int:
        return self.segments[0]

    def positions(self, arena: Arena) -> List[Position]:
        return [arena.position(e) for e in self.segments]


def spawn_snake(arena: Arena, cfg: Config) -> Snake:
    """Two segments at the start cell; the head carries the heading."""
    head = arena.spawn(Role.HEAD, cfg.start_head)
    tail = arena.spawn(Role.SEGMENT, cfg.start_tail)
    return Snake(segments=[head, tail], direction=cfg.start_direction)


def steer(snake: Snake, requested: Optional[Direction], debounce: bool = True) -> bool:
    """
    Apply a requested heading (None keeps the current one). Returns True if the
    heading changed.

    A 180° reversal is always rejected. With debounce on, a candidate is only
    taken once the snake has moved at least once and the candidate differs
    from the heading applied on that move.
    """
    cand = requested if requested is not None else snake.direction
    if cand == snake.direction.opposite():
        return False
    if debounce and (snake.last_direction is None or snake.last_direction == cand):
        return False
    changed = cand != snake.direction
    snake.direction = cand
    return changed


def advance(snake: Snake, arena: Arena) -> List[Position]:
    """
    Move one cell: the head steps in its heading, every other segment takes
    the pre-move position of the one ahead of it. Returns pre-move positions.
    Collisions are not checked here.
    """
    if not snake.segments:
        return []

    old = snake.positions(arena)
    arena.set_position(snake.head, old[0].moved(snake.direction))
    for entity, pos in zip(snake.segments[1:], old):
        arena.set_position(entity, pos)

    snake.last_tail = old[-1]
    snake.last_direction = snake.direction
    return old


def grow(snake: Snake, arena: Arena) -> int:
    """Append one segment where the tail was before the last move."""
    if snake.last_tail is None:
        raise NoTailPositionError()
    entity = arena.spawn(Role.SEGMENT, snake.last_tail)
    snake.segments.append(entity)
    logger.debug("Grew to %d segments at %s", len(snake.segments), snake.last_tail)
    return entity
