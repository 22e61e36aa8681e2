"""Frame timing."""

import math
from dataclasses import dataclass

__all__ = ["Time"]


@dataclass
class Time:
    """Tracks frame delta, total elapsed time and frames per second."""

    delta_time: float = 0.0
    elapsed_time: float = 0.0
    fps: float = 0.0

    def update(self, now):
        """Advance to the clock reading ``now`` (seconds)."""
        self.delta_time = now - self.elapsed_time
        self.elapsed_time = now
        self.fps = 1.0 / self.delta_time if self.delta_time else math.inf