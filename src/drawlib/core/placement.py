"""Twisted text placement.

Places glyphs along a flattened path using its arc-length table. Each glyph
occupies the stretch of path between its leading and trailing edge; its
bounding quad is built from the local tangent/normal frame at both edges,
so the quad bends with the path.

Screen convention: y grows downward. For a tangent (tx, ty) the normal is
(-ty, tx), which points from the top of the text towards its bottom.
"""

import math
from bisect import bisect_right
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import structlog

from drawlib.core.flatten import flatten_path
from drawlib.domain import (
    FlattenedPath,
    GlyphMetric,
    GlyphQuad,
    PathCommand,
    Point,
    TextAlign,
    TextPlacementResult,
)
from drawlib.exceptions import EmptyPathError, EmptyTextError

logger = structlog.get_logger(__name__)

# Relative slack when comparing a trailing edge against the path end
_END_EPSILON = 1e-9

_HORIZONTAL = (1.0, 0.0)


@dataclass(frozen=True, slots=True)
class PathFrame:
    """Position and orientation at one arc length along a path.

    Attributes:
        point: Position on the path
        tangent: Unit direction of travel
    """

    point: Point
    tangent: tuple[float, float]

    @property
    def normal(self) -> tuple[float, float]:
        """Unit normal, the tangent rotated 90 degrees clockwise on screen."""
        tx, ty = self.tangent
        return (-ty, tx)

    def offset(self, distance: float) -> Point:
        """Point at the given distance along the normal."""
        nx, ny = self.normal
        return Point(self.point.x + distance * nx, self.point.y + distance * ny)


class ArcLengthLocator:
    """Looks up positions on a flattened path by arc length."""

    def __init__(self, path: FlattenedPath) -> None:
        if len(path) < 2:
            raise EmptyPathError(f"path has {len(path)} point(s)")
        self._path = path

    def segment_index(self, distance: float) -> int:
        """Index i of the segment (i, i+1) whose arc-length range holds distance.

        Distances outside the path are clamped to the first or last segment.
        """
        table = self._path.arc_lengths
        index = bisect_right(table, distance) - 1
        return max(0, min(index, len(table) - 2))

    def frame_at(self, distance: float, previous: PathFrame | None = None) -> PathFrame:
        """Interpolate the position and frame at an arc length.

        Args:
            distance: Arc length from the path start
            previous: Frame to reuse if the segment has no direction

        Returns:
            PathFrame at that distance
        """
        points = self._path.points
        table = self._path.arc_lengths
        i = self.segment_index(distance)
        start, end = points[i], points[i + 1]

        dx = end.x - start.x
        dy = end.y - start.y
        seg_length = math.hypot(dx, dy)
        span = table[i + 1] - table[i]

        if seg_length == 0.0 or span <= 0.0:
            tangent = previous.tangent if previous is not None else _HORIZONTAL
            return PathFrame(point=start, tangent=tangent)

        t = max(0.0, min(1.0, (distance - table[i]) / span))
        return PathFrame(
            point=Point(start.x + t * dx, start.y + t * dy),
            tangent=(dx / seg_length, dy / seg_length),
        )


def build_glyph_quad(
    metric: GlyphMetric,
    start: float,
    end: float,
    lead: PathFrame,
    trail: PathFrame,
    valign: float,
) -> GlyphQuad:
    """Build a glyph's quad from the frames at its leading and trailing edge.

    Along the normal the box spans [valign*h - h, valign*h] where h is the
    glyph height, so valign 0 puts the bottom edge on the path.
    """
    height = metric.height
    bottom = valign * height
    top = bottom - height
    return GlyphQuad(
        char=metric.char,
        start=start,
        end=end,
        lead_bottom=lead.offset(bottom),
        lead_top=lead.offset(top),
        trail_bottom=trail.offset(bottom),
        trail_top=trail.offset(top),
    )


def place_along_path(
    path: FlattenedPath,
    glyph_metrics: Iterable[GlyphMetric],
    align: TextAlign | None = None,
) -> TextPlacementResult:
    """Place glyphs along a flattened path.

    The text starts at halign * max(0, path_length - text_length) and each
    glyph advances the arc-length cursor by its advance width. Glyphs that
    would run past the end of the path are omitted together with every glyph
    after them; this is not an error, compare text_length with path_length
    or check ``truncated`` to detect it.

    Args:
        path: Flattened path to follow
        glyph_metrics: Per-character metrics in text order
        align: Horizontal and vertical alignment

    Returns:
        TextPlacementResult with one quad per placed glyph

    Raises:
        EmptyTextError: If no glyph metrics are supplied
        EmptyPathError: If the path has zero length
    """
    metrics = list(glyph_metrics)
    if not metrics:
        raise EmptyTextError()

    path_length = path.length
    if len(path) < 2 or path_length <= 0.0:
        raise EmptyPathError("path has zero length")

    align = align if align is not None else TextAlign()
    text_length = math.fsum(m.advance for m in metrics)
    slack = _END_EPSILON * max(1.0, path_length)

    locator = ArcLengthLocator(path)
    cursor = align.halign * max(0.0, path_length - text_length)
    frame: PathFrame | None = None
    quads: list[GlyphQuad] = []

    for metric in metrics:
        end = cursor + metric.advance
        if cursor > path_length + slack or end > path_length + slack:
            break
        end = min(end, path_length)

        lead = locator.frame_at(cursor, previous=frame)
        trail = locator.frame_at(end, previous=lead)
        quads.append(build_glyph_quad(metric, cursor, end, lead, trail, align.valign))

        frame = trail
        cursor = end

    if len(quads) < len(metrics):
        logger.debug(
            "Text truncated at path end",
            placed=len(quads),
            total=len(metrics),
            path_length=round(path_length, 3),
            text_length=round(text_length, 3),
        )

    return TextPlacementResult(
        quads=tuple(quads),
        path_length=path_length,
        text_length=text_length,
        glyph_count=len(metrics),
    )


def place_text_on_path(
    commands: Sequence[PathCommand],
    glyph_metrics: Iterable[GlyphMetric],
    align: TextAlign | None = None,
    tolerance: float = 0.5,
) -> TextPlacementResult:
    """Flatten path commands and place glyphs along the result.

    Raises:
        EmptyTextError: If no glyph metrics are supplied
        EmptyPathError: If the path is degenerate
        MalformedCommandError: If a command is malformed
    """
    metrics = list(glyph_metrics)
    if not metrics:
        raise EmptyTextError()
    path = flatten_path(commands, tolerance)
    return place_along_path(path, metrics, align)
