"""Per-team load bounds domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoadBounds:
    """Target load per team and the tolerated range around it."""

    target: float
    min_load: float
    max_load: float

    def contains(self, load: float) -> bool:
        """Check whether a load lies within [min_load, max_load]."""
        return self.min_load <= load <= self.max_load
