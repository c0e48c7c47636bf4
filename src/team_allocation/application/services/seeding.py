"""Seeding strategy: geographically diverse starting stations, one per team."""

import logging
import math
from collections.abc import Sequence

from team_allocation.domain.geometry import centroid, haversine_distance
from team_allocation.domain.models.station import Station

logger = logging.getLogger(__name__)


def select_seed_indices(stations: Sequence[Station], count: int) -> list[int]:
    """Pick up to ``count`` seed positions into ``stations`` by farthest-point diversification.

    The first seed is the station farthest from the centroid of all stations
    (ties: larger weight, then smaller code). Each further seed is the
    remaining station whose distance to its nearest chosen seed is largest
    (ties: smaller code).
    """
    count = min(count, len(stations))
    if count <= 0:
        return []

    center_lat, center_lng = centroid([(s.latitude, s.longitude) for s in stations])
    first = min(
        range(len(stations)),
        key=lambda i: (
            -haversine_distance(
                center_lat, center_lng, stations[i].latitude, stations[i].longitude
            ),
            -stations[i].weight,
            stations[i].code,
            i,
        ),
    )
    seeds = [first]

    # Distance from every station to its nearest seed so far
    nearest_seed_dist = [
        haversine_distance(
            stations[first].latitude, stations[first].longitude, s.latitude, s.longitude
        )
        for s in stations
    ]
    remaining = sorted(
        (i for i in range(len(stations)) if i != first), key=lambda i: (stations[i].code, i)
    )

    while len(seeds) < count:
        best_idx = -1
        best_dist = -math.inf
        for i in remaining:
            if nearest_seed_dist[i] > best_dist:
                best_dist = nearest_seed_dist[i]
                best_idx = i

        seeds.append(best_idx)
        remaining.remove(best_idx)
        seed = stations[best_idx]
        for i in remaining:
            dist = haversine_distance(
                seed.latitude, seed.longitude, stations[i].latitude, stations[i].longitude
            )
            if dist < nearest_seed_dist[i]:
                nearest_seed_dist[i] = dist

    logger.debug(f"Selected seeds: {[stations[i].code for i in seeds]}")
    return seeds


def select_seeds(stations: Sequence[Station], count: int) -> list[Station]:
    """Pick up to ``count`` geographically diverse seed stations."""
    return [stations[i] for i in select_seed_indices(stations, count)]
