"""
Configuration settings for the geoconvert application.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Attributes:
        epsg_database_path: Alternate EPSG database file; the bundled
            resource is used when unset
        default_source_epsg: EPSG code preselected as transform source
        default_target_epsg: EPSG code preselected as transform target
        default_indentation: GeoJSON indentation used when none is requested
        max_input_length: Largest accepted input text, in characters
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="GEOCONVERT_",
    )

    # EPSG registry
    epsg_database_path: Optional[Path] = None

    # Conversion defaults
    default_source_epsg: int = 4326
    default_target_epsg: int = 3857
    default_indentation: Literal["two_spaces", "four_spaces", "compact"] = "two_spaces"
    max_input_length: int = 5_000_000

    # Logging
    log_level: Optional[str] = None
    log_file: Optional[Path] = None

    # API settings
    api_v1_prefix: str = "/api/v1"
    port: int = 8000

    # CORS settings
    cors_origins: str = "http://localhost:5173,http://localhost:3000"

    # Environment
    environment: Literal["development", "staging", "production"] = "development"

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Global settings instance
settings = Settings()
