"""Straight text layout.

Lays glyphs out along a straight, optionally rotated, baseline starting at
a label's top-left corner.
"""

import math
from collections.abc import Iterable

from drawlib.core.placement import PathFrame, build_glyph_quad
from drawlib.domain import GlyphMetric, GlyphQuad, Point, TextLabel, TextPlacementResult
from drawlib.exceptions import EmptyTextError


def layout_text_label(
    label: TextLabel, glyph_metrics: Iterable[GlyphMetric]
) -> TextPlacementResult:
    """Compute the bounding quad of every glyph of a straight label.

    The label's (x, y) is the top-left corner of the text and ``ang`` rotates
    the text clockwise about that corner.

    Args:
        label: Label to lay out
        glyph_metrics: Per-character metrics in text order

    Returns:
        TextPlacementResult whose path length equals the text length

    Raises:
        EmptyTextError: If no glyph metrics are supplied
    """
    metrics = list(glyph_metrics)
    if not metrics:
        raise EmptyTextError()

    tangent = (math.cos(label.ang), math.sin(label.ang))
    origin = Point(label.x, label.y)

    quads: list[GlyphQuad] = []
    cursor = 0.0
    for metric in metrics:
        end = cursor + metric.advance
        lead = PathFrame(
            point=Point(origin.x + cursor * tangent[0], origin.y + cursor * tangent[1]),
            tangent=tangent,
        )
        trail = PathFrame(
            point=Point(origin.x + end * tangent[0], origin.y + end * tangent[1]),
            tangent=tangent,
        )
        # Top edge on the reference line
        quads.append(build_glyph_quad(metric, cursor, end, lead, trail, valign=1.0))
        cursor = end

    text_length = math.fsum(m.advance for m in metrics)
    return TextPlacementResult(
        quads=tuple(quads),
        path_length=text_length,
        text_length=text_length,
        glyph_count=len(metrics),
    )
