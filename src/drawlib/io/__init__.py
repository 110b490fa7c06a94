"""Font and path file I/O for drawlib.

This module reads the external inputs of layout: font metrics through
fonttools and path command files in the JSON wire format.

Key classes and functions:
- FontToolsMetrics: Text metrics read from a TTF/OTF font
- load_path_commands: Read path commands from a JSON file
"""

from drawlib.io.fonts import FontToolsMetrics
from drawlib.io.paths import load_path_commands, parse_path_commands

__all__ = [
    "FontToolsMetrics",
    "load_path_commands",
    "parse_path_commands",
]
