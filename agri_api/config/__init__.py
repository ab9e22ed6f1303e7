"""
Configuration package for application settings.
"""

from .settings import (
    ApplicationConfig, APIConfig, DataConfig, AnalyticsConfig, LoggingConfig, app_config
)
from .datastore import DataStoreManager, data_manager

__all__ = [
    "ApplicationConfig",
    "APIConfig",
    "DataConfig",
    "AnalyticsConfig",
    "LoggingConfig",
    "app_config",
    "DataStoreManager",
    "data_manager"
]
