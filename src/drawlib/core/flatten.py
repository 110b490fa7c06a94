"""Path flattening.

Converts a sequence of move/line/cubic-curve commands into a single
polyline plus its cumulative arc-length table. Only the first subpath is
flattened: text follows one open curve.
"""

import math
from collections.abc import Sequence

import structlog

from drawlib.core._bezier import flatten_cubic
from drawlib.domain import FlattenedPath, PathCommand, PathCommandType, Point
from drawlib.exceptions import EmptyPathError

logger = structlog.get_logger(__name__)


class _PolylineBuilder:
    """Accumulates polyline points and running arc lengths in one pass."""

    def __init__(self, min_segment_length: float) -> None:
        self._min_segment_length = min_segment_length
        self.points: list[Point] = []
        self.arc_lengths: list[float] = []

    def append(self, point: Point) -> None:
        if not self.points:
            self.points.append(point)
            self.arc_lengths.append(0.0)
            return

        last = self.points[-1]
        step = math.hypot(point.x - last.x, point.y - last.y)
        # Zero-length segments have no tangent
        if step <= self._min_segment_length:
            return

        self.points.append(point)
        self.arc_lengths.append(self.arc_lengths[-1] + step)

    def build(self) -> FlattenedPath:
        return FlattenedPath(points=tuple(self.points), arc_lengths=tuple(self.arc_lengths))


def flatten_path(
    commands: Sequence[PathCommand],
    tolerance: float = 0.5,
    *,
    min_segment_length: float = 1e-9,
    max_depth: int = 16,
) -> FlattenedPath:
    """Flatten path commands into a polyline with an arc-length table.

    The current point starts at the origin. Line commands append their
    endpoint; curve commands are subdivided until the polyline stays within
    tolerance of the true curve. Consecutive duplicate points are dropped.

    A move command after drawing has started begins a second subpath. Only
    the first subpath is flattened and the rest is reported with a warning.

    Args:
        commands: Path commands in drawing order
        tolerance: Maximum deviation between curve and polyline
        min_segment_length: Segments this short or shorter are collapsed
        max_depth: Subdivision depth limit for curves

    Returns:
        FlattenedPath with at least two points

    Raises:
        ValueError: If tolerance is not positive
        EmptyPathError: If the commands produce fewer than two distinct points

    Examples:
        >>> from drawlib.domain import line_to, move_to
        >>> path = flatten_path([move_to(0, 0), line_to(100, 0)])
        >>> path.arc_lengths
        (0.0, 100.0)
    """
    if tolerance <= 0:
        raise ValueError(f"Flattening tolerance must be positive, got {tolerance}")

    builder = _PolylineBuilder(min_segment_length)
    current = Point(0.0, 0.0)
    drawing = False

    for index, command in enumerate(commands):
        if command.type is PathCommandType.MOVE_TO:
            if drawing:
                logger.warning(
                    "Ignoring extra subpaths",
                    dropped_commands=len(commands) - index,
                )
                break
            current = command.points()[0]
            continue

        if not drawing:
            builder.append(current)
            drawing = True

        if command.type is PathCommandType.LINE_TO:
            current = command.points()[0]
            builder.append(current)

        elif command.type is PathCommandType.REL_LINE_TO:
            offset = command.points()[0]
            current = current.translate(offset.x, offset.y)
            builder.append(current)

        else:
            ctrl1, ctrl2, end = command.points()
            if command.type is PathCommandType.REL_CURVE_TO:
                ctrl1 = current.translate(ctrl1.x, ctrl1.y)
                ctrl2 = current.translate(ctrl2.x, ctrl2.y)
                end = current.translate(end.x, end.y)

            for point in flatten_cubic([current, ctrl1, ctrl2, end], tolerance, max_depth)[1:]:
                builder.append(point)
            current = end

    path = builder.build()
    if len(path) < 2:
        raise EmptyPathError(f"flattening produced {len(path)} point(s)")

    logger.debug("Path flattened", points=len(path), length=round(path.length, 3))
    return path
