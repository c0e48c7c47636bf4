"""Spreadsheet station repository adapter (.xlsx and .csv)."""

import logging
import math
import zipfile
from pathlib import Path

import pandas as pd

from team_allocation.domain.models.station import Station

logger = logging.getLogger(__name__)

CODE_COLUMN = "MA_TRAM"
LATITUDE_COLUMN = "LATITUDE"
LONGITUDE_COLUMN = "LONGITUDE"
WEIGHT_COLUMN = "SL_VITRI"
NAME_COLUMN = "TEN_TRAM"  # Optional

REQUIRED_COLUMNS = (CODE_COLUMN, LATITUDE_COLUMN, LONGITUDE_COLUMN, WEIGHT_COLUMN)
EXCEL_SUFFIXES = (".xlsx", ".xlsm")


def _to_number(column: pd.Series) -> pd.Series:
    """Coerce a text column to floats; blanks and garbage become NaN. Accepts a decimal comma."""
    return pd.to_numeric(column.str.strip().str.replace(",", ".", regex=False), errors="coerce")


def _is_finite(column: pd.Series) -> pd.Series:
    return column.notna() & (column.abs() != math.inf)


class SpreadsheetStationRepository:
    """Loads stations from the first sheet of an Excel workbook or from a CSV export.

    Rows are skipped when the code is missing, a coordinate is not a finite
    non-zero number, or the weight is not a finite non-negative integer. A
    blank weight counts as zero. The allocation core relies on this filtering.
    """

    def __init__(self, path: str | Path, encoding: str = "utf-8-sig") -> None:
        """Initialize with the workbook or CSV path."""
        self._path = Path(path)
        self._encoding = encoding

    def load_stations(self) -> list[Station]:
        """Load all valid stations, in sheet order.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file cannot be read, required columns are missing
                or no valid row remains.
        """
        if not self._path.exists():
            raise FileNotFoundError(f"Station file not found: {self._path}")

        df = self._read_frame()
        df.columns = df.columns.astype(str).str.strip()
        missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
        if missing:
            raise ValueError(
                f"Station file {self._path} is missing column(s) {missing}. "
                f"Expected headers: {', '.join(REQUIRED_COLUMNS)}"
            )
        if NAME_COLUMN not in df.columns:
            df[NAME_COLUMN] = ""

        df = df.fillna("")
        codes = df[CODE_COLUMN].str.strip()
        latitudes = _to_number(df[LATITUDE_COLUMN])
        longitudes = _to_number(df[LONGITUDE_COLUMN])
        raw_weights = df[WEIGHT_COLUMN].str.strip()
        weights = _to_number(raw_weights).where(raw_weights != "", 0.0)

        has_code = codes != ""
        valid_lat = _is_finite(latitudes) & (latitudes != 0)
        valid_lng = _is_finite(longitudes) & (longitudes != 0)
        valid_weight = _is_finite(weights) & (weights >= 0)
        valid_weight &= weights.where(valid_weight, 0.0).mod(1) == 0
        valid = has_code & valid_lat & valid_lng & valid_weight

        skipped = int((~valid).sum())
        if skipped:
            logger.debug(
                f"Invalid rows in {self._path}: {int((~has_code).sum())} without code, "
                f"{int((has_code & ~(valid_lat & valid_lng)).sum())} with bad coordinates, "
                f"{int((has_code & valid_lat & valid_lng & ~valid_weight).sum())} with bad weight"
            )
            logger.warning(f"Skipped {skipped} invalid row(s) in {self._path}")

        stations = [
            Station(
                code=code,
                latitude=float(lat),
                longitude=float(lng),
                weight=int(weight),
                display_name=name.strip() or None,
            )
            for code, lat, lng, weight, name in zip(
                codes[valid],
                latitudes[valid],
                longitudes[valid],
                weights[valid],
                df.loc[valid, NAME_COLUMN],
                strict=True,
            )
        ]

        if not stations:
            raise ValueError(
                f"No valid data found in {self._path}. "
                f"Check column headers: {', '.join(REQUIRED_COLUMNS)}"
            )

        logger.info(f"Loaded {len(stations)} station(s) from {self._path}")
        return stations

    def _read_frame(self) -> pd.DataFrame:
        """Read every cell as text so both formats are parsed the same way."""
        try:
            if self._path.suffix.lower() in EXCEL_SUFFIXES:
                return pd.read_excel(self._path, engine="openpyxl", dtype=str)
            return pd.read_csv(
                self._path, dtype=str, keep_default_na=False, encoding=self._encoding
            )
        except (ValueError, zipfile.BadZipFile) as e:
            raise ValueError(f"Cannot read station file {self._path}: {e}") from e
