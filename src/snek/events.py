# events.py
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Generic, List, TypeVar, Union

from .grid import Position


# ---------- Signals (core -> core) ----------
@dataclass(frozen=True)
class Growth:
    pass


@dataclass(frozen=True)
class GameOver:
    reason: str = ""


S = TypeVar("S")


class SignalQueue(Generic[S]):
    """
    Plain FIFO between a detecting system and its reaction.

    A reaction drains whatever was sent before it ran; anything sent later in
    the same tick stays queued for the next drain.
    """

    def __init__(self) -> None:
        self._pending: Deque[S] = deque()

    def send(self, signal: S) -> None:
        self._pending.append(signal)

    def drain(self) -> List[S]:
        out = list(self._pending)
        self._pending.clear()
        return out

    def clear(self) -> None:
        self._pending.clear()

    def __len__(self) -> int:
        return len(self._pending)


# ---------- Presentation events (core -> outside) ----------
class Role(Enum):
    HEAD = "head"
    SEGMENT = "segment"
    FOOD = "food"


@dataclass(frozen=True)
class EntityCreated:
    entity: int
    role: Role
    position: Position


@dataclass(frozen=True)
class EntityDestroyed:
    entity: int


@dataclass(frozen=True)
class PositionChanged:
    entity: int
    position: Position


PresentationEvent = Union[EntityCreated, EntityDestroyed, PositionChanged]
