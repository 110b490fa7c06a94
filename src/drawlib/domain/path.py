"""Path types for flattening and text-on-path layout.

This module defines the geometric value types used throughout drawlib:
- Point: A 2D point in screen coordinates (y grows downward)
- PathCommandType: The closed set of path command tags and their arities
- PathCommand: A single tagged path command
- FlattenedPath: A polyline with its cumulative arc-length table
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from drawlib.exceptions import MalformedCommandError


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D screen space.

    Immutable and hashable. The origin is the top-left corner and y grows
    downward.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def translate(self, tx: float, ty: float) -> "Point":
        """Return this point moved by (tx, ty)."""
        return Point(self.x + tx, self.y + ty)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])


class PathCommandType(str, Enum):
    """Path command tag.

    Move and line variants carry one (x, y) pair, curve variants carry two
    control points and an endpoint. Relative variants are offsets from the
    current point.
    """

    MOVE_TO = "move_to"
    LINE_TO = "line_to"
    REL_LINE_TO = "rel_line_to"
    CURVE_TO = "curve_to"
    REL_CURVE_TO = "rel_curve_to"

    @property
    def arity(self) -> int:
        """Number of numeric arguments this command takes."""
        if self in (PathCommandType.CURVE_TO, PathCommandType.REL_CURVE_TO):
            return 6
        return 2

    @property
    def is_relative(self) -> bool:
        """True for commands whose arguments are offsets from the current point."""
        return self in (PathCommandType.REL_LINE_TO, PathCommandType.REL_CURVE_TO)


@dataclass(frozen=True, slots=True)
class PathCommand:
    """A single path command with its numeric arguments.

    The argument count is checked on construction against the tag's fixed
    arity.

    Attributes:
        type: Command tag
        args: Numeric arguments (2 for move/line, 6 for curves)
    """

    type: PathCommandType
    args: tuple[float, ...]

    def __post_init__(self) -> None:
        try:
            args = tuple(float(a) for a in self.args)
        except (TypeError, ValueError) as e:
            raise MalformedCommandError(self.type.value, self.type.arity, None, str(e)) from e
        if len(args) != self.type.arity:
            raise MalformedCommandError(self.type.value, self.type.arity, len(args))
        object.__setattr__(self, "args", args)

    def points(self) -> list[Point]:
        """Return the arguments grouped as (x, y) points."""
        return [Point(self.args[i], self.args[i + 1]) for i in range(0, len(self.args), 2)]

    def translate(self, tx: float, ty: float) -> "PathCommand":
        """Return this command moved by (tx, ty).

        Relative commands are offsets and are returned unchanged.
        """
        if self.type.is_relative:
            return self
        shifted = [
            value + (tx if i % 2 == 0 else ty) for i, value in enumerate(self.args)
        ]
        return PathCommand(self.type, tuple(shifted))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire form {"type": tag, "args": [...]}."""
        return {"type": self.type.value, "args": list(self.args)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PathCommand":
        """Deserialize from the wire form.

        Raises:
            MalformedCommandError: If the tag is unknown or the arity is wrong
        """
        tag = str(data.get("type", ""))
        try:
            command_type = PathCommandType(tag)
        except ValueError:
            raise MalformedCommandError(tag, None, None) from None
        args = data.get("args", [])
        if not isinstance(args, (list, tuple)) or not all(_is_number(a) for a in args):
            raise MalformedCommandError(
                tag, command_type.arity, None, "args must be a list of numbers"
            )
        return cls(command_type, tuple(args))


def _is_number(value: Any) -> bool:
    # JSON true/false decode to bool, which is an int subclass
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def move_to(x: float, y: float) -> PathCommand:
    """Start a new subpath at (x, y)."""
    return PathCommand(PathCommandType.MOVE_TO, (x, y))


def line_to(x: float, y: float) -> PathCommand:
    """Straight line to (x, y)."""
    return PathCommand(PathCommandType.LINE_TO, (x, y))


def rel_line_to(dx: float, dy: float) -> PathCommand:
    """Straight line by the offset (dx, dy)."""
    return PathCommand(PathCommandType.REL_LINE_TO, (dx, dy))


def curve_to(
    x1: float, y1: float, x2: float, y2: float, x3: float, y3: float
) -> PathCommand:
    """Cubic Bezier with control points (x1, y1), (x2, y2) ending at (x3, y3)."""
    return PathCommand(PathCommandType.CURVE_TO, (x1, y1, x2, y2, x3, y3))


def rel_curve_to(
    dx1: float, dy1: float, dx2: float, dy2: float, dx3: float, dy3: float
) -> PathCommand:
    """Cubic Bezier with all three points given relative to the current point."""
    return PathCommand(PathCommandType.REL_CURVE_TO, (dx1, dy1, dx2, dy2, dx3, dy3))


def commands_from_dicts(data: Iterable[dict[str, Any]]) -> list[PathCommand]:
    """Deserialize a list of wire-form commands."""
    return [PathCommand.from_dict(item) for item in data]


@dataclass(frozen=True)
class FlattenedPath:
    """A polyline together with its cumulative arc-length table.

    Attributes:
        points: Ordered polyline points (the contour)
        arc_lengths: Distance along the polyline at each point;
            arc_lengths[0] is 0 and the table never decreases
    """

    points: tuple[Point, ...]
    arc_lengths: tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.points) != len(self.arc_lengths):
            raise ValueError(
                f"Arc-length table has {len(self.arc_lengths)} entries "
                f"for {len(self.points)} points"
            )

    @property
    def length(self) -> float:
        """Total path length."""
        if not self.arc_lengths:
            return 0.0
        return self.arc_lengths[-1]

    def __len__(self) -> int:
        return len(self.points)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "points": [p.to_dict() for p in self.points],
            "arc_lengths": list(self.arc_lengths),
            "length": self.length,
        }
