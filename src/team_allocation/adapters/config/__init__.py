"""Configuration adapters."""

from team_allocation.adapters.config.app_config import AppConfig
from team_allocation.adapters.config.clustering_settings_loader import ClusteringSettingsLoader

__all__ = ["AppConfig", "ClusteringSettingsLoader"]
