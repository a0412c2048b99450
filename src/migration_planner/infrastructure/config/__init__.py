"""Infrastructure configuration module.

Centralized configuration management using Pydantic Settings.
"""

from migration_planner.infrastructure.config.settings import (
    AnalysisSettings,
    Settings,
    get_settings,
)

__all__ = [
    "AnalysisSettings",
    "Settings",
    "get_settings",
]
