"""Tests for the team formatter."""

import pytest

from team_allocation.adapters.team_formatter import TeamFormatter
from team_allocation.domain.models import (
    ClusteringResult,
    FallbackAssignment,
    LoadBounds,
    Station,
    Team,
)


@pytest.fixture
def teams() -> list[Team]:
    """Two small teams, the second one locked."""
    return [
        Team(
            id="team_1",
            display_name="Team 1",
            members=(
                Station(code="HN001", latitude=21.028, longitude=105.854, weight=12),
                Station(code="HN002", latitude=21.036, longitude=105.834, weight=8),
            ),
        ),
        Team(
            id="team_2",
            display_name="Team 2",
            members=(
                Station(
                    code="HN003",
                    latitude=20.995,
                    longitude=105.810,
                    weight=15,
                    display_name="Thanh Xuan",
                ),
            ),
            locked=True,
        ),
    ]


def test_team_to_dict(teams: list[Team]) -> None:
    """Given a team, when converting to dict, then aggregates and members are included."""
    data = TeamFormatter().team_to_dict(teams[1])

    assert data["id"] == "team_2"
    assert data["locked"] is True
    assert data["aggregate_weight"] == 15
    assert data["travel_distance_estimate"] == 0.0
    assert data["members"] == [
        {
            "code": "HN003",
            "display_name": "Thanh Xuan",
            "latitude": 20.995,
            "longitude": 105.810,
            "weight": 15,
        }
    ]


def test_result_to_dict(teams: list[Team]) -> None:
    """Given a completed result, when converting to dict, then bounds are rounded and fallbacks listed."""
    result = ClusteringResult(
        status="completed",
        teams=teams,
        bounds=LoadBounds(target=17.5, min_load=15.75, max_load=19.25),
        fallback_assignments=[
            FallbackAssignment(
                station_code="HN003", team_id="team_2", resulting_load=15, max_load=19.25
            )
        ],
        rebalance_passes=2,
        swaps_applied=1,
    )

    data = TeamFormatter().result_to_dict(result)

    assert data["status"] == "completed"
    assert data["bounds"] == {"target": 17.5, "min_load": 15.75, "max_load": 19.25}
    assert data["total_weight"] == 35
    assert [t["id"] for t in data["teams"]] == ["team_1", "team_2"]
    assert data["fallback_assignments"][0]["station_code"] == "HN003"
    assert data["rebalance_passes"] == 2
    assert data["swaps_applied"] == 1


def test_result_to_dict_empty() -> None:
    """Given an empty result, when converting to dict, then bounds are None and teams empty."""
    data = TeamFormatter().result_to_dict(ClusteringResult(status="empty"))

    assert data["status"] == "empty"
    assert data["bounds"] is None
    assert data["teams"] == []
    assert data["total_weight"] == 0


def test_format_table(teams: list[Team]) -> None:
    """Given teams, when formatting a table, then one header, a rule and one row per team are produced."""
    lines = TeamFormatter().format_table(teams)

    assert len(lines) == 4
    assert "Stations" in lines[0]
    assert "Distance (km)" in lines[0]
    assert set(lines[1]) == {"-"}
    assert lines[2].startswith("Team 1")
    assert "20" in lines[2]
    assert lines[3].endswith("[locked]")
    assert not lines[2].endswith("[locked]")


def test_format_members(teams: list[Team]) -> None:
    """Given a team, when formatting members, then codes are comma separated."""
    assert TeamFormatter().format_members(teams[0]) == "HN001, HN002"


def test_team_rows(teams: list[Team]) -> None:
    """Given teams, when flattening to rows, then each member gets its team's totals."""
    rows = TeamFormatter().team_rows(teams)

    assert [r["MA_TRAM"] for r in rows] == ["HN001", "HN002", "HN003"]
    assert rows[0]["Team_ID"] == "team_1"
    assert rows[0]["Team_Total_SL"] == 20
    assert rows[2]["Team_Name"] == "Team 2"
    assert rows[2]["SL_VITRI"] == 15
    assert rows[2]["LAT"] == 20.995
    assert rows[2]["LNG"] == 105.810
