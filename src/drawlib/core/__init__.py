"""Core geometry and layout algorithms for drawlib.

This module contains:

- Path flattening (cubic Bezier subdivision, arc-length tables)
- Twisted text placement (glyph quads that follow a path)
- Straight text layout (rotated label bounds)
- Bezier fitting through polylines
- The deferred drawing command store

The geometry functions are stateless and pure; they are safe to call from
several threads on independent inputs.

Key functions:
- flatten_path: Convert path commands to a polyline and arc-length table
- place_along_path: Place glyphs along a flattened path
- place_text_on_path: Flatten and place in one call
- layout_text_label: Bounds of a straight, rotated label
- fit_bezier_to_points: Smooth curve commands through a polyline

Key classes:
- ArcLengthLocator: Position and frame lookup by arc length
- DrawingStore: Append-only drawing command buffer
- FixedMetrics: Em-box metrics without a font file
"""

from drawlib.core.fitting import fit_bezier_to_points
from drawlib.core.flatten import flatten_path
from drawlib.core.layout import layout_text_label
from drawlib.core.metrics import FixedMetrics, TextMetricsProvider
from drawlib.core.placement import (
    ArcLengthLocator,
    PathFrame,
    place_along_path,
    place_text_on_path,
)
from drawlib.core.store import DrawingStore, Renderer

__all__ = [
    # Placement classes
    "ArcLengthLocator",
    # Store classes
    "DrawingStore",
    # Metrics
    "FixedMetrics",
    "PathFrame",
    "Renderer",
    "TextMetricsProvider",
    # Functions
    "fit_bezier_to_points",
    "flatten_path",
    "layout_text_label",
    "place_along_path",
    "place_text_on_path",
]
