"""Utility functions for drawlib.

This module provides utility functions including:

- Logging setup and configuration
- Layout statistics tracking
"""

from drawlib.utils.logging import (
    LayoutLogger,
    LayoutStats,
    configure_logging,
)

__all__ = [
    "LayoutLogger",
    "LayoutStats",
    "configure_logging",
]
