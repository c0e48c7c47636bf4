"""Shared test helpers for building stations."""

from team_allocation.domain.models import Station


def make_station(code: str, lng: float, weight: int = 10, lat: float = 10.0) -> Station:
    """Create a station on a parallel at ``lat`` (default 10°N)."""
    return Station(code=code, latitude=lat, longitude=lng, weight=weight)
