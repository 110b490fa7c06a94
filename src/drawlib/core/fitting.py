"""Fit a smooth Bezier path through a polyline.

Used to turn a sequence of points (for example a road centre line) into a
curve that text can follow without kinks at every vertex.
"""

from collections.abc import Sequence

from drawlib.domain import PathCommand, Point, curve_to, move_to
from drawlib.exceptions import EmptyPathError


def _dedupe(points: Sequence[Point]) -> list[Point]:
    result: list[Point] = []
    for point in points:
        if not result or result[-1] != point:
            result.append(point)
    return result


def fit_bezier_to_points(
    points: Sequence[Point], tension: float = 0.0
) -> list[PathCommand]:
    """Convert a polyline into a chain of cubic Bezier commands.

    Tangents are Catmull-Rom estimates (the chord between the neighbouring
    points), so the curve passes through every input point with a continuous
    direction. Endpoints use their single neighbour.

    Args:
        points: Polyline vertices in order
        tension: 0.0 gives Catmull-Rom smoothing, 1.0 gives straight segments

    Returns:
        A move command to the first point followed by one curve per segment

    Raises:
        ValueError: If tension is outside [0, 1]
        EmptyPathError: If fewer than two distinct points are given
    """
    if not 0.0 <= tension <= 1.0:
        raise ValueError(f"Tension must be in [0, 1], got {tension}")

    pts = _dedupe(points)
    if len(pts) < 2:
        raise EmptyPathError(f"need at least 2 distinct points, got {len(pts)}")

    scale = (1.0 - tension) / 6.0
    last = len(pts) - 1
    commands = [move_to(pts[0].x, pts[0].y)]

    for i in range(last):
        prev_pt = pts[max(i - 1, 0)]
        start = pts[i]
        end = pts[i + 1]
        next_pt = pts[min(i + 2, last)]

        ctrl1 = Point(
            start.x + (end.x - prev_pt.x) * scale,
            start.y + (end.y - prev_pt.y) * scale,
        )
        ctrl2 = Point(
            end.x - (next_pt.x - start.x) * scale,
            end.y - (next_pt.y - start.y) * scale,
        )
        commands.append(curve_to(ctrl1.x, ctrl1.y, ctrl2.x, ctrl2.y, end.x, end.y))

    return commands
