"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Keys accepted in the [clustering] section of the TOML file
CLUSTERING_KEYS = (
    "number_of_teams",
    "tolerance_percent",
    "rebalance_enabled",
    "rebalance_max_passes",
    "rebalance_candidate_limit",
    "hard_penalty_weight",
    "load_weight",
    "spread_weight",
)


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Run parameters
    number_of_teams: int = Field(default=5, description="Number of teams to allocate stations to")
    tolerance_percent: float = Field(
        default=10.0,
        description="Allowed deviation of a team's load from the even per-team target, in percent",
    )

    # Rebalancer configuration
    rebalance_enabled: bool = Field(
        default=True, description="Run the pairwise-swap refinement after greedy assignment"
    )
    rebalance_max_passes: int = Field(default=60, description="Maximum number of rebalancer passes")
    rebalance_candidate_limit: int = Field(
        default=12,
        description="Maximum number of swap candidates considered per team and team pair",
    )
    hard_penalty_weight: float = Field(
        default=1000.0, description="Weight of load-range violations in the team score"
    )
    load_weight: float = Field(
        default=1.0, description="Weight of the distance from target load in the team score"
    )
    spread_weight: float = Field(
        default=1.0, description="Weight of geographic spread in the team score"
    )

    log_level: str = Field(default="INFO", description="Logging level")

    # Optional TOML config file with a [clustering] section
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file overriding clustering settings",
    )

    @field_validator("number_of_teams")
    @classmethod
    def validate_number_of_teams(cls, v: int) -> int:
        """Validate the team count is positive."""
        if v <= 0:
            raise ValueError("number_of_teams must be a positive integer")
        return v

    @field_validator("tolerance_percent")
    @classmethod
    def validate_tolerance_percent(cls, v: float) -> float:
        """Validate tolerance is a percentage."""
        if not 0 <= v <= 100:
            raise ValueError("tolerance_percent must be between 0 and 100")
        return v

    @field_validator("rebalance_max_passes", "rebalance_candidate_limit")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate rebalancer bounds are positive."""
        if v <= 0:
            raise ValueError("rebalancer limits must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file."""
        if not self.config_file:
            raise ValueError("config_file must be set to load clustering configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            return tomllib.load(f)

    def apply_config_file(self) -> None:
        """Override settings from the [clustering] section of config_file, if one is set."""
        if not self.config_file:
            return

        toml_data = self._load_toml_data()
        clustering = toml_data.get("clustering", {})
        if not isinstance(clustering, dict):
            raise ValueError("TOML config 'clustering' must be a table")

        for key in CLUSTERING_KEYS:
            if key in clustering:
                setattr(self, key, clustering[key])
