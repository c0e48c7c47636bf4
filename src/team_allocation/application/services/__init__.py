"""Application services for team allocation."""

from team_allocation.application.services.capacity_planner import plan_load_bounds
from team_allocation.application.services.clustering_service import (
    ClusteringService,
    run_clustering,
)
from team_allocation.application.services.greedy_assignment import GreedyAssignmentEngine
from team_allocation.application.services.move_handler import move_station, set_team_lock
from team_allocation.application.services.rebalancer import Rebalancer
from team_allocation.application.services.seeding import select_seed_indices, select_seeds

__all__ = [
    "ClusteringService",
    "GreedyAssignmentEngine",
    "Rebalancer",
    "move_station",
    "plan_load_bounds",
    "run_clustering",
    "select_seed_indices",
    "select_seeds",
    "set_team_lock",
]
