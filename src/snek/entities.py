# entities.py
from __future__ import annotations

from dataclasses import dataclass
from itertools import count
from typing import Dict, Iterator, List

from .errors import MissingEntityError
from .events import EntityCreated, EntityDestroyed, PositionChanged, PresentationEvent, Role
from .grid import Position


@dataclass
class Record:
    role: Role
    position: Position


class Arena:
    """
    Owns every entity of the simulation.

    Ids come from a monotonic counter and are never reused, so a stale id
    always fails loudly instead of aliasing a newer entity. Every mutation
    queues the matching presentation event.
    """

    def __init__(self) -> None:
        self._ids = count(1)
        self._records: Dict[int, Record] = {}
        self._events: List[PresentationEvent] = []

    def spawn(self, role: Role, position: Position) -> int:
        entity = next(self._ids)
        self._records[entity] = Record(role, position)
        self._events.append(EntityCreated(entity, role, position))
        return entity

    def despawn(self, entity: int) -> None:
        if self._records.pop(entity, None) is None:
            raise MissingEntityError(entity)
        self._events.append(EntityDestroyed(entity))

    def _record(self, entity: int) -> Record:
        try:
            return self._records[entity]
        except KeyError:
            raise MissingEntityError(entity) from None

    def position(self, entity: int) -> Position:
        return self._record(entity).position

    def role(self, entity: int) -> Role:
        return self._record(entity).role

    def set_position(self, entity: int, position: Position) -> None:
        record = self._record(entity)
        if record.position != position:
            record.position = position
            self._events.append(PositionChanged(entity, position))

    def with_role(self, role: Role) -> Iterator[int]:
        return (e for e, r in self._records.items() if r.role is role)

    def drain_events(self) -> List[PresentationEvent]:
        out = self._events
        self._events = []
        return out

    def __contains__(self, entity: int) -> bool:
        return entity in self._records

    def __len__(self) -> int:
        return len(self._records)
