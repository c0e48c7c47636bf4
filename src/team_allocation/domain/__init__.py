"""Domain layer - core models, geometry and errors."""

from team_allocation.domain.errors import InvalidMoveError, LockedTeamError
from team_allocation.domain.models import (
    ClusteringResult,
    LoadBounds,
    ProcessingParams,
    Station,
    Team,
)
from team_allocation.domain.ports import StationRepository

__all__ = [
    "ClusteringResult",
    "InvalidMoveError",
    "LoadBounds",
    "LockedTeamError",
    "ProcessingParams",
    "Station",
    "StationRepository",
    "Team",
]
