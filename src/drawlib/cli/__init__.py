"""Command-line interface for drawlib.

This module provides the CLI using Typer with rich output.

Key features:
- Flatten path files and inspect their arc lengths
- Lay text out along a path with fixed or font-file metrics
- JSON output for scripting
"""

from drawlib.cli.app import cli, main

__all__ = ["cli", "main"]
