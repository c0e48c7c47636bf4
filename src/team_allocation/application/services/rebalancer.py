"""Local-search rebalancer: pairwise station swaps between teams."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from team_allocation.domain.geometry import centroid, haversine_distance
from team_allocation.domain.models.load_bounds import LoadBounds
from team_allocation.domain.models.rebalance_settings import RebalanceSettings
from team_allocation.domain.models.station import Station

logger = logging.getLogger(__name__)

IMPROVEMENT_EPSILON = 1e-9


@dataclass
class RebalanceOutcome:
    """Rebalanced team memberships and how much work it took."""

    groups: list[list[int]]
    passes: int
    swaps: int


class Rebalancer:
    """Improves team memberships by swapping single stations between pairs of teams.

    Each team is scored by a hard term for loads outside [min_load, max_load],
    a load term for the distance from target and a spread term for geographic
    dispersion. A pass scans all team pairs and applies the first pair's best
    strictly improving swap, then the scan restarts. This finds a local
    optimum, not a certified one.
    """

    def __init__(self, settings: RebalanceSettings | None = None) -> None:
        """Initialize with rebalancer settings."""
        self._settings = settings or RebalanceSettings()

    def rebalance(
        self,
        stations: Sequence[Station],
        groups: Sequence[Sequence[int]],
        bounds: LoadBounds,
    ) -> RebalanceOutcome:
        """Rebalance a private copy of ``groups`` (positions into ``stations``).

        Stops after a pass without an improving swap or after max_passes passes.
        """
        working = [list(group) for group in groups]
        passes = 0
        swaps = 0

        while passes < self._settings.max_passes:
            passes += 1
            if not self._apply_best_swap(stations, working, bounds):
                break
            swaps += 1

        logger.debug(f"Rebalancer finished after {passes} pass(es) with {swaps} swap(s)")
        return RebalanceOutcome(groups=working, passes=passes, swaps=swaps)

    def team_score(
        self,
        stations: Sequence[Station],
        members: Sequence[int],
        bounds: LoadBounds,
        average_spread: float,
    ) -> float:
        """Score a team; lower is better."""
        load = sum(stations[i].weight for i in members)

        if load < bounds.min_load:
            violation = (bounds.min_load - load) / bounds.target
        elif load > bounds.max_load:
            violation = (load - bounds.max_load) / bounds.target
        else:
            violation = 0.0

        load_term = abs(load - bounds.target) / bounds.target
        spread_term = self._spread(stations, members) / average_spread

        return (
            self._settings.hard_penalty_weight * violation
            + self._settings.load_weight * load_term
            + self._settings.spread_weight * spread_term
        )

    def _apply_best_swap(
        self, stations: Sequence[Station], groups: list[list[int]], bounds: LoadBounds
    ) -> bool:
        """Scan team pairs and apply the best improving swap of the first pair that has one."""
        spreads = [self._spread(stations, group) for group in groups]
        average_spread = sum(spreads) / len(spreads) if spreads else 0.0
        if average_spread <= 0:
            average_spread = 1.0

        for a in range(len(groups)):
            for b in range(a + 1, len(groups)):
                swap = self._best_swap_for_pair(
                    stations, groups[a], groups[b], bounds, average_spread
                )
                if swap is None:
                    continue
                out_of_a, out_of_b = swap
                groups[a][groups[a].index(out_of_a)] = out_of_b
                groups[b][groups[b].index(out_of_b)] = out_of_a
                logger.debug(
                    f"Swapped {stations[out_of_a].code} (team #{a + 1}) with "
                    f"{stations[out_of_b].code} (team #{b + 1})"
                )
                return True
        return False

    def _best_swap_for_pair(
        self,
        stations: Sequence[Station],
        group_a: list[int],
        group_b: list[int],
        bounds: LoadBounds,
        average_spread: float,
    ) -> tuple[int, int] | None:
        current = self.team_score(stations, group_a, bounds, average_spread) + self.team_score(
            stations, group_b, bounds, average_spread
        )
        best_score = current - IMPROVEMENT_EPSILON
        best: tuple[int, int] | None = None

        for out_of_a in self._candidates(stations, group_a):
            rest_a = [i for i in group_a if i != out_of_a]
            for out_of_b in self._candidates(stations, group_b):
                new_a = [*rest_a, out_of_b]
                new_b = [i for i in group_b if i != out_of_b] + [out_of_a]
                score = self.team_score(stations, new_a, bounds, average_spread) + self.team_score(
                    stations, new_b, bounds, average_spread
                )
                if score < best_score:
                    best_score = score
                    best = (out_of_a, out_of_b)
        return best

    def _candidates(self, stations: Sequence[Station], members: list[int]) -> list[int]:
        """Bounded swap candidates: the farthest and the nearest members to the centroid."""
        limit = self._settings.candidate_limit
        if len(members) <= limit:
            return list(members)

        center_lat, center_lng = centroid(
            [(stations[i].latitude, stations[i].longitude) for i in members]
        )
        by_distance = sorted(
            members,
            key=lambda i: (
                -haversine_distance(
                    center_lat, center_lng, stations[i].latitude, stations[i].longitude
                ),
                stations[i].code,
                i,
            ),
        )
        farthest_count = (limit + 1) // 2
        nearest_count = limit - farthest_count
        picked = by_distance[:farthest_count]
        if nearest_count:
            picked += by_distance[-nearest_count:]
        return picked

    @staticmethod
    def _spread(stations: Sequence[Station], members: Sequence[int]) -> float:
        """Sum of member distances to the team centroid."""
        if not members:
            return 0.0
        center_lat, center_lng = centroid(
            [(stations[i].latitude, stations[i].longitude) for i in members]
        )
        return sum(
            haversine_distance(center_lat, center_lng, stations[i].latitude, stations[i].longitude)
            for i in members
        )
