# food.py
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import random
from typing import Collection, List, Optional

from .entities import Arena
from .events import Growth, Role, SignalQueue
from .grid import Grid, Position

logger = logging.getLogger(__name__)


@dataclass
class FoodManager:
    grid: Grid
    max_food: int
    foods: List[int] = field(default_factory=list)

    def try_spawn(self, arena: Arena, occupied: Collection[Position],
                  rng: random.Random) -> Optional[int]:
        """
        One attempt at a random cell. Skips (no retry) when the cell is under
        the snake or the cap is reached. Food-on-food is not checked.
        """
        cell = self.grid.random_cell(rng)
        if cell in occupied or len(self.foods) >= self.max_food:
            logger.debug("Food spawn skipped at %s (%d active)", cell, len(self.foods))
            return None
        entity = arena.spawn(Role.FOOD, cell)
        self.foods.append(entity)
        logger.debug("Food %d spawned at %s", entity, cell)
        return entity

    def check_eaten(self, arena: Arena, head: Position, growth: SignalQueue[Growth]) -> int:
        """Despawn every food under the head; one growth signal per food."""
        eaten = [e for e in self.foods if arena.position(e) == head]
        for entity in eaten:
            self.foods.remove(entity)
            arena.despawn(entity)
            growth.send(Growth())
            logger.debug("Food %d eaten at %s", entity, head)
        return len(eaten)

    def positions(self, arena: Arena) -> List[Position]:
        return [arena.position(e) for e in self.foods]

    def clear(self, arena: Arena) -> None:
        for entity in self.foods:
            arena.despawn(entity)
        self.foods.clear()
