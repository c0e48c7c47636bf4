"""Clustering settings loader."""

from team_allocation.adapters.config.app_config import AppConfig
from team_allocation.domain.models.processing_params import ProcessingParams
from team_allocation.domain.models.rebalance_settings import RebalanceSettings


class ClusteringSettingsLoader:
    """Builds domain settings from app config."""

    @staticmethod
    def load_rebalance_settings(config: AppConfig) -> RebalanceSettings:
        """Build rebalancer settings from app config."""
        return RebalanceSettings(
            enabled=config.rebalance_enabled,
            max_passes=config.rebalance_max_passes,
            candidate_limit=config.rebalance_candidate_limit,
            hard_penalty_weight=config.hard_penalty_weight,
            load_weight=config.load_weight,
            spread_weight=config.spread_weight,
        )

    @staticmethod
    def load_processing_params(
        config: AppConfig,
        number_of_teams: int | None = None,
        tolerance_percent: float | None = None,
    ) -> ProcessingParams:
        """Build run parameters, letting explicit values override the configured defaults."""
        return ProcessingParams(
            number_of_teams=(
                number_of_teams if number_of_teams is not None else config.number_of_teams
            ),
            tolerance_percent=(
                tolerance_percent if tolerance_percent is not None else config.tolerance_percent
            ),
        )
