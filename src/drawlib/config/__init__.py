"""Configuration management for drawlib.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Path flattening settings
- TextConfig: Text layout defaults
- LoggingConfig: Logging settings
- DrawLibSettings: Main application settings
"""

from drawlib.config.settings import (
    DrawLibSettings,
    GeometryConfig,
    LoggingConfig,
    TextConfig,
    get_default_settings,
)

__all__ = [
    "DrawLibSettings",
    "GeometryConfig",
    "LoggingConfig",
    "TextConfig",
    "get_default_settings",
]
