"""
Configuration management for the H3 query facade.

This module provides centralized configuration loading and validation using Pydantic.
All environment variables are loaded and validated at import time.
"""

import os
from pydantic import BaseModel, Field, field_validator
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class GridConfig(BaseModel):
    """Output formatting for grid query results."""

    boundary_separator: str = Field(
        default=",", description="Default separator between latitude and longitude"
    )

    @field_validator("boundary_separator")
    @classmethod
    def validate_separator(cls, v):
        if not v:
            raise ValueError("boundary_separator must not be empty")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Logging level")
    format_str: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string",
    )
    enable_structured_logging: bool = Field(
        default=True, description="Enable structured JSON logging"
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v):
        """Ensure the level name is one the logging module knows."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level


class AppConfig(BaseModel):
    """Main application configuration."""

    grid: GridConfig
    logging: LoggingConfig

    # Environment
    environment: str = Field(default="development", description="Environment name")
    debug: bool = Field(default=False, description="Enable debug mode")


def load_config() -> AppConfig:
    """Load and validate configuration from environment variables."""

    config_dict = {
        "grid": {
            "boundary_separator": os.getenv("BOUNDARY_SEPARATOR", ","),
        },
        "logging": {
            "level": os.getenv("LOG_LEVEL", "INFO"),
            "enable_structured_logging": os.getenv(
                "ENABLE_STRUCTURED_LOGGING", "true"
            ).lower()
            == "true",
        },
        "environment": os.getenv("ENVIRONMENT", "development"),
        "debug": os.getenv("DEBUG", "false").lower() == "true",
    }

    return AppConfig(**config_dict)


# Global configuration instance
config = load_config()
