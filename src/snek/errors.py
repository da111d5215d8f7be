# errors.py
"""Invariant violations. Collisions are game state, not errors."""


class SnekError(Exception):
    """Base class for simulation defects."""


class MissingEntityError(SnekError, KeyError):
    def __init__(self, entity: int):
        super().__init__(f"Entity {entity} does not exist")
        self.entity = entity


class NoTailPositionError(SnekError):
    def __init__(self):
        super().__init__("Cannot grow: no tail position recorded yet (snake has not moved)")
