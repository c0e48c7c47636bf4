"""Greedy assignment engine: grows teams from their seeds and resolves leftovers."""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from team_allocation.domain.geometry import haversine_distance
from team_allocation.domain.models.load_bounds import LoadBounds
from team_allocation.domain.models.station import Station

logger = logging.getLogger(__name__)

# Lower bound of the fairness divisor, so a team at or above target still accepts neighbours
MIN_FAIRNESS_FACTOR = 0.3


@dataclass(frozen=True)
class LeftoverFallback:
    """A station placed on the lowest-load team although it exceeds max_load."""

    station_index: int
    team_index: int
    resulting_load: int


@dataclass
class AssignmentOutcome:
    """Team memberships as positions into the station sequence, plus any fallbacks."""

    groups: list[list[int]]
    fallbacks: list[LeftoverFallback] = field(default_factory=list)


def fairness_factor(load: float, target: float) -> float:
    """Distance tolerance of a team: the further below target, the more distance it accepts."""
    return max(MIN_FAIRNESS_FACTOR, 1 - load / target)


class GreedyAssignmentEngine:
    """Round-based global greedy assignment of stations to seeded teams."""

    def assign(
        self,
        stations: Sequence[Station],
        seed_indices: Sequence[int],
        bounds: LoadBounds,
    ) -> AssignmentOutcome:
        """Assign every station to exactly one of the seeded teams.

        Each round scores every (unassigned station, team) pair that keeps the
        team at or below max_load and assigns the single best pair. When no
        pair fits any more, the remaining stations go through leftover
        resolution.

        Args:
            stations: All stations of the run.
            seed_indices: Positions of the seed stations, one per team.
            bounds: Load bounds of the run.

        Returns:
            AssignmentOutcome with one member list per seed.
        """
        groups = [[seed] for seed in seed_indices]
        loads = [stations[seed].weight for seed in seed_indices]
        seed_set = set(seed_indices)

        # Unassigned stations in tie-break order (code, then input position)
        pool = sorted(
            (i for i in range(len(stations)) if i not in seed_set),
            key=lambda i: (stations[i].code, i),
        )

        # dist_sums[t][i]: sum of distances from station i to all members of team t
        dist_sums: list[dict[int, float]] = []
        for seed in seed_indices:
            dist_sums.append({i: self._distance(stations, seed, i) for i in pool})

        rounds = 0
        while pool:
            best = self._best_pair(stations, pool, loads, dist_sums, bounds)
            if best is None:
                break
            station_idx, team_idx = best
            pool.remove(station_idx)
            self._add_member(stations, groups, loads, dist_sums, pool, station_idx, team_idx)
            rounds += 1

        logger.debug(f"Greedy phase assigned {rounds} station(s), {len(pool)} leftover(s)")

        fallbacks = self._resolve_leftovers(stations, pool, groups, loads, dist_sums, bounds)
        return AssignmentOutcome(groups=groups, fallbacks=fallbacks)

    def _best_pair(
        self,
        stations: Sequence[Station],
        pool: list[int],
        loads: list[int],
        dist_sums: list[dict[int, float]],
        bounds: LoadBounds,
    ) -> tuple[int, int] | None:
        """Find the globally best (station, team) pair under the load ceiling."""
        best: tuple[int, int] | None = None
        best_score = math.inf
        for i in pool:
            weight = stations[i].weight
            for t, load in enumerate(loads):
                if load + weight > bounds.max_load:
                    continue
                score = dist_sums[t][i] / fairness_factor(load, bounds.target)
                # Strict comparison keeps the first pair in (code, team) order on ties
                if score < best_score:
                    best_score = score
                    best = (i, t)
        return best

    def _resolve_leftovers(
        self,
        stations: Sequence[Station],
        pool: list[int],
        groups: list[list[int]],
        loads: list[int],
        dist_sums: list[dict[int, float]],
        bounds: LoadBounds,
    ) -> list[LeftoverFallback]:
        """Place stations no team could accept during the greedy phase.

        Heaviest first. A station goes to the fitting team with the smallest
        added distance; if none fits, it goes to the team with the lowest load
        regardless of max_load and the deviation is recorded.
        """
        fallbacks: list[LeftoverFallback] = []
        leftovers = sorted(pool, key=lambda i: (-stations[i].weight, stations[i].code, i))

        while leftovers:
            station_idx = leftovers.pop(0)
            station = stations[station_idx]

            team_idx = -1
            min_added = math.inf
            for t, load in enumerate(loads):
                if load + station.weight > bounds.max_load:
                    continue
                if dist_sums[t][station_idx] < min_added:
                    min_added = dist_sums[t][station_idx]
                    team_idx = t

            if team_idx == -1:
                team_idx = min(range(len(loads)), key=lambda t: (loads[t], t))
                fallbacks.append(
                    LeftoverFallback(
                        station_index=station_idx,
                        team_index=team_idx,
                        resulting_load=loads[team_idx] + station.weight,
                    )
                )
                logger.warning(
                    f"Station {station.code} (weight {station.weight}) fits no team under "
                    f"max load {bounds.max_load:.2f}; assigned to lowest-load team #{team_idx + 1} "
                    f"(load {loads[team_idx]} -> {loads[team_idx] + station.weight})"
                )

            self._add_member(stations, groups, loads, dist_sums, leftovers, station_idx, team_idx)

        return fallbacks

    def _add_member(
        self,
        stations: Sequence[Station],
        groups: list[list[int]],
        loads: list[int],
        dist_sums: list[dict[int, float]],
        unassigned: list[int],
        station_idx: int,
        team_idx: int,
    ) -> None:
        """Append a station to a team and update the running load and distance sums."""
        groups[team_idx].append(station_idx)
        loads[team_idx] += stations[station_idx].weight
        team_sums = dist_sums[team_idx]
        for i in unassigned:
            team_sums[i] += self._distance(stations, station_idx, i)

    @staticmethod
    def _distance(stations: Sequence[Station], a: int, b: int) -> float:
        return haversine_distance(
            stations[a].latitude, stations[a].longitude, stations[b].latitude, stations[b].longitude
        )
