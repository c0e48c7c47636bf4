"""Domain models for team allocation."""

from team_allocation.domain.models.clustering_result import ClusteringResult, FallbackAssignment
from team_allocation.domain.models.load_bounds import LoadBounds
from team_allocation.domain.models.processing_params import ProcessingParams
from team_allocation.domain.models.rebalance_settings import RebalanceSettings
from team_allocation.domain.models.station import Station
from team_allocation.domain.models.team import Team

__all__ = [
    "ClusteringResult",
    "FallbackAssignment",
    "LoadBounds",
    "ProcessingParams",
    "RebalanceSettings",
    "Station",
    "Team",
]
