# timer.py
from dataclasses import dataclass


@dataclass
class RepeatTimer:
    """
    Fixed-period accumulator.

    tick() adds the elapsed time and reports whether the period was crossed
    during this call. On a fire the accumulator wraps around the period, so
    leftover time carries into the next cycle.
    """
    period_ms: float
    elapsed_ms: float = 0.0
    finished: bool = False

    def __post_init__(self):
        if self.period_ms <= 0:
            raise ValueError(f"period_ms must be positive, got {self.period_ms}")

    def tick(self, delta_ms: float) -> bool:
        if delta_ms < 0:
            raise ValueError(f"delta_ms must be >= 0, got {delta_ms}")
        self.elapsed_ms += delta_ms
        self.finished = self.elapsed_ms >= self.period_ms
        if self.finished:
            self.elapsed_ms %= self.period_ms
        return self.finished
