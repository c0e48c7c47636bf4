"""Geometry primitives: great-circle distance, centroids and tour estimates."""

import math
from collections.abc import Sequence

EARTH_RADIUS_KM = 6371.0

Point = tuple[float, float]


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in km between two points given in degrees."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def centroid(points: Sequence[Point]) -> Point:
    """Arithmetic mean of (lat, lng) pairs; (0.0, 0.0) for no points.

    Planar approximation, good enough at the scale of a single team.
    """
    if not points:
        return (0.0, 0.0)
    sum_lat = sum(p[0] for p in points)
    sum_lng = sum(p[1] for p in points)
    return (sum_lat / len(points), sum_lng / len(points))


def estimate_travel_distance(points: Sequence[Point]) -> float:
    """Estimate the tour length in km with a nearest-neighbour heuristic.

    Starts at the first point and repeatedly jumps to the nearest unvisited
    point. Ties go to the point encountered first. Rounded to 2 decimals.
    """
    if len(points) <= 1:
        return 0.0

    unvisited = list(points[1:])
    current = points[0]
    total = 0.0

    while unvisited:
        nearest_idx = 0
        nearest_dist = math.inf
        for i, candidate in enumerate(unvisited):
            dist = haversine_distance(current[0], current[1], candidate[0], candidate[1])
            if dist < nearest_dist:
                nearest_dist = dist
                nearest_idx = i
        total += nearest_dist
        current = unvisited.pop(nearest_idx)

    return round(total, 2)
