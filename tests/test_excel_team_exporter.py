"""Tests for the Excel team exporter."""

from pathlib import Path

import pandas as pd
import pytest

from team_allocation.adapters.excel_team_exporter import EXPORT_COLUMNS, ExcelTeamExporter
from team_allocation.domain.models import Station, Team


def test_export_writes_allocated_teams_sheet(tmp_path: Path) -> None:
    """Given two teams, when exporting, then one row per station lands on the Allocated Teams sheet."""
    teams = [
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
            members=(Station(code="HN003", latitude=20.995, longitude=105.810, weight=15),),
        ),
    ]

    path = ExcelTeamExporter().export(teams, tmp_path / "allocation.xlsx")

    frame = pd.read_excel(path, sheet_name="Allocated Teams", engine="openpyxl")
    assert tuple(frame.columns) == EXPORT_COLUMNS
    assert frame["MA_TRAM"].tolist() == ["HN001", "HN002", "HN003"]
    assert frame["Team_ID"].tolist() == ["team_1", "team_1", "team_2"]
    assert frame["Team_Total_SL"].tolist() == [20, 20, 15]
    assert frame["Team_Distance_KM"].tolist()[0] == pytest.approx(teams[0].travel_distance_estimate)


def test_export_with_no_members_writes_header_only(tmp_path: Path) -> None:
    """Given a team without members, when exporting, then only the header row is written."""
    path = ExcelTeamExporter().export(
        [Team(id="team_1", display_name="Team 1")], tmp_path / "empty.xlsx"
    )

    frame = pd.read_excel(path, sheet_name="Allocated Teams", engine="openpyxl")
    assert frame.empty
    assert tuple(frame.columns) == EXPORT_COLUMNS
