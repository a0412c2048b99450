"""Application configuration using Pydantic Settings.

Centralized configuration management following Clean Architecture principles.
All environment variables should be accessed through this module.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    """API server configuration settings."""

    model_config = SettingsConfigDict(env_prefix="API_", case_sensitive=False)

    host: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server",
    )
    port: int = Field(
        default=8000,
        description="Port to bind the API server",
    )
    workers: int = Field(
        default=1,
        description="Number of Uvicorn worker processes",
    )


class ObservabilitySettings(BaseSettings):
    """Observability configuration settings (logging, trace correlation)."""

    model_config = SettingsConfigDict(env_prefix="OTEL_", case_sensitive=False)

    service_name: str = Field(
        default="lwc-migration-planner",
        description="Service name bound to every log event",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json_format: bool = Field(
        default=True,
        description="Enable JSON structured logging",
    )


class AnalysisSettings(BaseSettings):
    """Dependency analysis and conversion planning settings."""

    model_config = SettingsConfigDict(env_prefix="ANALYSIS_", case_sensitive=False)

    max_traversal_depth: int = Field(
        default=100,
        ge=1,
        description="Ceiling for computed node depth",
    )
    hours_per_component: float = Field(
        default=2.0,
        ge=0.0,
        description="Estimated conversion effort per component (hours)",
    )
    hours_per_coordinated_component: float = Field(
        default=4.0,
        ge=0.0,
        description="Estimated effort per component in a wave with circular dependencies (hours)",
    )
    include_base_components: bool = Field(
        default=False,
        description="Keep base component (lightning:, ui:, force:) edges when a request does not say",
    )


class Settings(BaseSettings):
    """Main application settings.

    Aggregates all configuration modules and provides a single settings object.
    Load from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Environment
    environment: str = Field(
        default="development",
        description="Application environment (development, staging, production)",
    )

    # Sub-settings
    api: APISettings = Field(default_factory=APISettings)
    observability: ObservabilitySettings = Field(
        default_factory=ObservabilitySettings
    )
    analysis: AnalysisSettings = Field(default_factory=AnalysisSettings)


# Global settings instance (singleton)
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get global settings instance (singleton pattern).

    Returns:
        Settings instance loaded from environment
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
