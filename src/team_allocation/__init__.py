"""Geographic team allocation: balanced, compact partitioning of weighted stations."""

from team_allocation.application.services import move_station, run_clustering
from team_allocation.domain.models import ProcessingParams, Station, Team

__all__ = [
    "ProcessingParams",
    "Station",
    "Team",
    "move_station",
    "run_clustering",
]
