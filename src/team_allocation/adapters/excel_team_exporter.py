"""Excel export of allocated teams."""

import logging
from pathlib import Path

import pandas as pd

from team_allocation.adapters.team_formatter import TeamFormatter
from team_allocation.domain.models.team import Team

logger = logging.getLogger(__name__)

SHEET_NAME = "Allocated Teams"
EXPORT_COLUMNS = (
    "Team_ID",
    "Team_Name",
    "Team_Total_SL",
    "Team_Distance_KM",
    "MA_TRAM",
    "SL_VITRI",
    "LAT",
    "LNG",
)


class ExcelTeamExporter:
    """Writes teams to an .xlsx workbook, one row per member station."""

    def __init__(self, formatter: TeamFormatter | None = None) -> None:
        """Initialize with the formatter that flattens teams into rows."""
        self._formatter = formatter or TeamFormatter()

    def export(self, teams: list[Team], path: str | Path) -> Path:
        """Write the teams to ``path`` on a single sheet and return the path."""
        output = Path(path)
        rows = self._formatter.team_rows(teams)
        frame = pd.DataFrame(rows, columns=list(EXPORT_COLUMNS))
        frame.to_excel(output, sheet_name=SHEET_NAME, index=False, engine="openpyxl")
        logger.info(f"Exported {len(rows)} row(s) for {len(teams)} team(s) to {output}")
        return output
