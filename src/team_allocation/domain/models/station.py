"""Station domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Station:
    """Represents a geotagged unit of work carrying a workload weight."""

    code: str
    latitude: float
    longitude: float
    weight: int
    display_name: str | None = None
