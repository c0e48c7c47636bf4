"""Clustering service: orchestrates planning, seeding, greedy assignment and rebalancing."""

import logging
from collections.abc import Sequence

from team_allocation.application.services.capacity_planner import plan_load_bounds
from team_allocation.application.services.greedy_assignment import (
    GreedyAssignmentEngine,
    LeftoverFallback,
)
from team_allocation.application.services.rebalancer import Rebalancer
from team_allocation.application.services.seeding import select_seed_indices
from team_allocation.domain.models.clustering_result import ClusteringResult, FallbackAssignment
from team_allocation.domain.models.load_bounds import LoadBounds
from team_allocation.domain.models.processing_params import ProcessingParams
from team_allocation.domain.models.rebalance_settings import RebalanceSettings
from team_allocation.domain.models.station import Station
from team_allocation.domain.models.team import Team

logger = logging.getLogger(__name__)


def team_id_for(position: int) -> str:
    """Identifier of the team at a zero-based position."""
    return f"team_{position + 1}"


def team_name_for(position: int) -> str:
    """Display name of the team at a zero-based position."""
    return f"Team {position + 1}"


class ClusteringService:
    """Service for partitioning stations into balanced, compact teams."""

    def __init__(
        self,
        settings: RebalanceSettings | None = None,
        engine: GreedyAssignmentEngine | None = None,
    ) -> None:
        """Initialize with rebalancer settings and an optional assignment engine."""
        self._settings = settings or RebalanceSettings()
        self._engine = engine or GreedyAssignmentEngine()
        self._rebalancer = Rebalancer(self._settings)

    def run(self, stations: Sequence[Station], params: ProcessingParams) -> ClusteringResult:
        """Partition stations into at most ``params.number_of_teams`` teams.

        An empty station list, a non-positive team count or a zero total
        weight are normal inputs and produce an empty result. The input
        sequence is never modified.
        """
        working = list(stations)
        total_weight = sum(s.weight for s in working)

        if not working:
            logger.info("No stations given, nothing to allocate")
            return ClusteringResult(status="empty")

        bounds = plan_load_bounds(total_weight, params.number_of_teams, params.tolerance_percent)
        if bounds is None:
            logger.info(
                f"Nothing to allocate: {len(working)} station(s), total weight {total_weight}, "
                f"{params.number_of_teams} team(s) requested"
            )
            return ClusteringResult(status="empty")

        logger.info(
            f"Allocating {len(working)} station(s) (total weight {total_weight}) into "
            f"{params.number_of_teams} team(s): target {bounds.target:.2f}, "
            f"range [{bounds.min_load:.2f}, {bounds.max_load:.2f}]"
        )

        seeds = select_seed_indices(working, params.number_of_teams)
        outcome = self._engine.assign(working, seeds, bounds)
        groups = outcome.groups

        passes = 0
        swaps = 0
        if self._settings.enabled and len(groups) > 1:
            rebalanced = self._rebalancer.rebalance(working, groups, bounds)
            groups = rebalanced.groups
            passes = rebalanced.passes
            swaps = rebalanced.swaps

        # Members are listed in input order
        teams = [
            Team(
                id=team_id_for(t),
                display_name=team_name_for(t),
                members=tuple(working[i] for i in sorted(group)),
            )
            for t, group in enumerate(groups)
        ]

        fallbacks = self._final_fallbacks(working, groups, teams, outcome.fallbacks, bounds)

        out_of_range = [t.id for t in teams if not bounds.contains(t.aggregate_weight)]
        if out_of_range:
            logger.warning(f"Teams outside load range after allocation: {out_of_range}")
        logger.info(
            f"Allocation finished: {len(teams)} team(s), loads "
            f"{[t.aggregate_weight for t in teams]}, {swaps} rebalancing swap(s)"
        )

        return ClusteringResult(
            status="completed",
            teams=teams,
            bounds=bounds,
            fallback_assignments=fallbacks,
            rebalance_passes=passes,
            swaps_applied=swaps,
        )

    @staticmethod
    def _final_fallbacks(
        stations: list[Station],
        groups: list[list[int]],
        teams: list[Team],
        leftovers: list[LeftoverFallback],
        bounds: LoadBounds,
    ) -> list[FallbackAssignment]:
        """Report greedy fallbacks against the final teams.

        The rebalancer may move a fallback station or bring its team back under
        max_load. Only stations whose final team is still above max_load are
        reported, with that team's actual load.
        """
        team_of = {i: t for t, group in enumerate(groups) for i in group}
        records: list[FallbackAssignment] = []
        for leftover in leftovers:
            code = stations[leftover.station_index].code
            team = teams[team_of[leftover.station_index]]
            if team.aggregate_weight <= bounds.max_load:
                logger.info(f"Fallback for station {code} resolved by rebalancing")
                continue
            records.append(
                FallbackAssignment(
                    station_code=code,
                    team_id=team.id,
                    resulting_load=team.aggregate_weight,
                    max_load=bounds.max_load,
                )
            )
        return records


def run_clustering(
    stations: Sequence[Station],
    params: ProcessingParams,
    settings: RebalanceSettings | None = None,
) -> list[Team]:
    """Partition stations into balanced, compact teams and return the teams."""
    return ClusteringService(settings).run(stations, params).teams
