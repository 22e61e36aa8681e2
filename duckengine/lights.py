"""Allocation of the fixed number of light slots a shader supports."""

__all__ = ["MAX_LIGHTS", "NoFreeLightSlot", "LightSlots"]

MAX_LIGHTS = 25


class NoFreeLightSlot(RuntimeError):
    """Raised when every light slot is already occupied."""


class LightSlots:
    """A fixed pool of light slots, handed out lowest index first."""

    def __init__(self, capacity=MAX_LIGHTS):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._occupied = [False] * capacity

    @property
    def capacity(self):
        return len(self._occupied)

    @property
    def occupied(self):
        """Indices of the slots currently in use, in ascending order."""
        return tuple(index for index, used in enumerate(self._occupied) if used)

    def __len__(self):
        return sum(self._occupied)

    def acquire(self):
        """Occupy the lowest free slot and return its index."""
        for index, used in enumerate(self._occupied):
            if not used:
                self._occupied[index] = True
                return index
        raise NoFreeLightSlot(f"all {self.capacity} light slots are occupied")

    def release(self, spot):
        """Mark ``spot`` as free again."""
        if not 0 <= spot < self.capacity:
            raise IndexError(f"light slot {spot} out of range 0..{self.capacity - 1}")
        self._occupied[spot] = False