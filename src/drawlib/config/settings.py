"""Configuration settings for drawlib."""

from pathlib import Path

from pydantic import BaseModel, Field

_LOG_LEVEL_PATTERN = r"(?i)^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$"


class GeometryConfig(BaseModel):
    """Configuration for path flattening.

    Distances are in path-local units (the same units as the path commands).
    """

    flatten_tolerance: float = Field(
        default=0.5,
        gt=0.0,
        le=100.0,
        description="Maximum deviation between a curve and its flattened polyline",
    )
    min_segment_length: float = Field(
        default=1e-9,
        ge=0.0,
        le=1.0,
        description="Consecutive points closer than this are collapsed into one",
    )
    max_subdivision_depth: int = Field(
        default=16,
        ge=1,
        le=32,
        description="Recursion limit for cubic Bezier subdivision",
    )


class TextConfig(BaseModel):
    """Defaults for text layout."""

    halign: float = Field(
        default=0.0,
        ge=0.0,
        le=1.0,
        description="0.0 starts text at the path start, 1.0 ends it at the path end",
    )
    valign: float = Field(
        default=0.0,
        ge=0.0,
        le=1.0,
        description="0.0 puts the glyph bottom on the path, 1.0 the glyph top",
    )
    font_size: float = Field(
        default=12.0,
        gt=0.0,
        description="Font size used when none is given",
    )
    fixed_advance_em: float = Field(
        default=0.6,
        gt=0.0,
        le=4.0,
        description="Advance width (in em) used by fixed metrics",
    )
    fixed_ascent_em: float = Field(
        default=0.8,
        ge=0.0,
        le=4.0,
        description="Ascent (in em) used by fixed metrics",
    )
    fixed_descent_em: float = Field(
        default=0.2,
        ge=0.0,
        le=4.0,
        description="Descent (in em) used by fixed metrics",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        pattern=_LOG_LEVEL_PATTERN,
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        pattern=_LOG_LEVEL_PATTERN,
        description="File log level (more verbose)",
    )


class DrawLibSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    text: TextConfig = Field(default_factory=TextConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> DrawLibSettings:
    """Get default application settings."""
    return DrawLibSettings()
