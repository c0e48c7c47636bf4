"""Adapters layer - configuration, station sources and output formatting."""

from team_allocation.adapters.config import AppConfig, ClusteringSettingsLoader
from team_allocation.adapters.excel_team_exporter import ExcelTeamExporter
from team_allocation.adapters.spreadsheet_station_repository import SpreadsheetStationRepository
from team_allocation.adapters.team_formatter import TeamFormatter

__all__ = [
    "AppConfig",
    "ClusteringSettingsLoader",
    "ExcelTeamExporter",
    "SpreadsheetStationRepository",
    "TeamFormatter",
]
