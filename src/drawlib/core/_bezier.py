"""Internal Bezier curve flattening algorithms.

This is an internal module containing helper functions for flatten_path.
Not intended for public use.
"""

import math

from drawlib.domain import Point


def distance_to_segment(point: Point, seg_start: Point, seg_end: Point) -> float:
    """Distance from a point to the closed segment [seg_start, seg_end]."""
    dx = seg_end.x - seg_start.x
    dy = seg_end.y - seg_start.y

    segment_length_sq = dx * dx + dy * dy
    if segment_length_sq == 0.0:
        return math.hypot(point.x - seg_start.x, point.y - seg_start.y)

    t = ((point.x - seg_start.x) * dx + (point.y - seg_start.y) * dy) / segment_length_sq
    t = max(0.0, min(1.0, t))

    return math.hypot(point.x - (seg_start.x + t * dx), point.y - (seg_start.y + t * dy))


def _midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def flatten_cubic(
    points: list[Point], tolerance: float, max_depth: int = 16, _depth: int = 0
) -> list[Point]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Uses De Casteljau's algorithm for subdivision. A piece is flat enough
    once both inner control points lie within tolerance of the chord: the
    curve stays inside the convex hull of its control points, so it is then
    within tolerance of the chord too. Every returned point lies on the curve.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        tolerance: Maximum distance from true curve
        max_depth: Subdivision depth limit

    Returns:
        List of points approximating the curve, starting at p0 and ending at p3
    """
    p0, p1, p2, p3 = points

    deviation = max(distance_to_segment(p1, p0, p3), distance_to_segment(p2, p0, p3))

    if deviation <= tolerance or _depth >= max_depth:
        return [p0, p3]

    # First level
    q1 = _midpoint(p0, p1)
    q2 = _midpoint(p1, p2)
    q3 = _midpoint(p2, p3)

    # Second level
    r1 = _midpoint(q1, q2)
    r2 = _midpoint(q2, q3)

    # Third level (curve point at t=0.5)
    mid = _midpoint(r1, r2)

    left = flatten_cubic([p0, q1, r1, mid], tolerance, max_depth, _depth + 1)
    right = flatten_cubic([mid, r2, q3, p3], tolerance, max_depth, _depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right
