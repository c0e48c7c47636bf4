"""Tests for domain models."""

from dataclasses import FrozenInstanceError

import pytest
from pydantic import ValidationError

from team_allocation.domain.geometry import estimate_travel_distance
from team_allocation.domain.models import LoadBounds, ProcessingParams, Station, Team


def test_station_creation() -> None:
    """Given station data, when creating a Station, then all fields are set correctly."""
    station = Station(code="T001", latitude=21.0285, longitude=105.8542, weight=12)

    assert station.code == "T001"
    assert station.latitude == 21.0285
    assert station.longitude == 105.8542
    assert station.weight == 12
    assert station.display_name is None


def test_station_is_frozen() -> None:
    """Given a Station, when trying to modify it, then FrozenInstanceError is raised."""
    station = Station(code="T001", latitude=21.0, longitude=105.0, weight=1)

    with pytest.raises(FrozenInstanceError):
        station.weight = 2  # type: ignore[misc]


def test_team_derives_weight_and_distance_from_members() -> None:
    """Given member stations, when creating a Team, then aggregates are computed from them."""
    members = [
        Station(code="A", latitude=21.00, longitude=105.80, weight=3),
        Station(code="B", latitude=21.05, longitude=105.85, weight=4),
    ]

    team = Team(id="team_1", display_name="Team 1", members=tuple(members))

    assert team.aggregate_weight == 7
    assert team.travel_distance_estimate == estimate_travel_distance(
        [(21.00, 105.80), (21.05, 105.85)]
    )
    assert team.station_count == 2
    assert team.locked is False


def test_team_accepts_member_list_and_stores_tuple() -> None:
    """Given members as a list, when creating a Team, then they are stored as a tuple."""
    station = Station(code="A", latitude=21.0, longitude=105.8, weight=3)

    team = Team(id="team_1", display_name="Team 1", members=[station])  # type: ignore[arg-type]

    assert team.members == (station,)


def test_team_aggregates_cannot_be_passed_in() -> None:
    """Given an explicit aggregate weight, when creating a Team, then TypeError is raised."""
    with pytest.raises(TypeError):
        Team(id="team_1", display_name="Team 1", aggregate_weight=5)  # type: ignore[call-arg]


def test_team_is_frozen() -> None:
    """Given a Team, when trying to modify its load, then FrozenInstanceError is raised."""
    team = Team(id="team_1", display_name="Team 1")

    with pytest.raises(FrozenInstanceError):
        team.aggregate_weight = 10  # type: ignore[misc]


def test_empty_team_has_zero_aggregates() -> None:
    """Given no members, when creating a Team, then load and distance are zero."""
    team = Team(id="team_1", display_name="Team 1")

    assert team.aggregate_weight == 0
    assert team.travel_distance_estimate == 0


def test_team_with_members_recomputes_aggregates() -> None:
    """Given a team, when replacing members, then a new team with recomputed aggregates is returned."""
    a = Station(code="A", latitude=21.0, longitude=105.8, weight=3)
    b = Station(code="B", latitude=21.1, longitude=105.9, weight=5)
    team = Team(id="team_1", display_name="Team 1", members=(a,), locked=True)

    updated = team.with_members([a, b])

    assert updated is not team
    assert updated.aggregate_weight == 8
    assert updated.locked is True
    assert team.aggregate_weight == 3


def test_team_contains_checks_station_code() -> None:
    """Given a team, when checking membership by code, then only member codes match."""
    team = Team(
        id="team_1",
        display_name="Team 1",
        members=(Station(code="A", latitude=21.0, longitude=105.8, weight=3),),
    )

    assert team.contains("A")
    assert not team.contains("B")


def test_processing_params_accepts_non_positive_team_count() -> None:
    """Given zero teams, when creating ProcessingParams, then it is accepted."""
    params = ProcessingParams(number_of_teams=0, tolerance_percent=10)

    assert params.number_of_teams == 0


@pytest.mark.parametrize("tolerance", [-1.0, 100.5, 250.0])
def test_processing_params_rejects_tolerance_out_of_range(tolerance: float) -> None:
    """Given a tolerance outside 0..100, when creating ProcessingParams, then validation fails."""
    with pytest.raises(ValidationError):
        ProcessingParams(number_of_teams=3, tolerance_percent=tolerance)


def test_load_bounds_contains() -> None:
    """Given load bounds, when checking loads, then the range is inclusive."""
    bounds = LoadBounds(target=110.0, min_load=88.0, max_load=132.0)

    assert bounds.contains(88)
    assert bounds.contains(132)
    assert not bounds.contains(87)
    assert not bounds.contains(133)
