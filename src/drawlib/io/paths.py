"""Path command files.

A path file is a JSON document holding a list of commands in the wire form
``{"type": "curve_to", "args": [x1, y1, x2, y2, x3, y3]}``, or an object
with such a list under ``"commands"``.
"""

import json
from pathlib import Path
from typing import Any

from drawlib.domain import PathCommand, commands_from_dicts
from drawlib.exceptions import PathError


def parse_path_commands(data: Any) -> list[PathCommand]:
    """Convert a decoded JSON document into path commands.

    Raises:
        PathError: If the document is not a list of command objects
        MalformedCommandError: If a command has an unknown tag or wrong arity
    """
    if isinstance(data, dict):
        data = data.get("commands")

    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise PathError("Path document must be a list of command objects")

    return commands_from_dicts(data)


def load_path_commands(path: Path) -> list[PathCommand]:
    """Read path commands from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        PathError: If the file is not UTF-8 JSON or not a command list
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise PathError(f"Path file is not UTF-8 text: '{path}'") from e
    except json.JSONDecodeError as e:
        raise PathError(f"Invalid JSON in '{path}': {e}") from e

    return parse_path_commands(data)
