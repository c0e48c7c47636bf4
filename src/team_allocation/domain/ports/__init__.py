"""Ports (interfaces) for the ports-and-adapters architecture."""

from team_allocation.domain.ports.station_repository import StationRepository

__all__ = ["StationRepository"]
