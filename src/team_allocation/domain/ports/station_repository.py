"""Station repository port."""

from typing import Protocol

from team_allocation.domain.models.station import Station


class StationRepository(Protocol):
    """Port for loading validated stations from an upstream source."""

    def load_stations(self) -> list[Station]:
        """Load all valid stations, in source order."""
        ...
