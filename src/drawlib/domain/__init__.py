"""Domain models for drawlib.

This module contains the value types for paths, text layout, drawing
styles and recorded drawing commands. All models are:

- Immutable (frozen dataclasses)
- Independent of any rendering backend or font library

Key classes:
- Point: A 2D point in screen coordinates
- PathCommand: A tagged move/line/curve command
- FlattenedPath: A polyline with its arc-length table
- GlyphMetric: Advance and vertical extents of one character
- TextPlacementResult: Quads bounding each placed glyph
- ShapeProperties, LineProperties, TextProperties: Drawing styles
- DrawPolygonsCmd, DrawLinesCmd, DrawTextCmd, ...: Recorded commands
"""

from drawlib.domain.commands import (
    CommandType,
    DrawCommand,
    DrawLinesCmd,
    DrawPolygonsCmd,
    DrawTextCmd,
    DrawTwistedTextCmd,
    LoadImageResourcesCmd,
    Polygon,
    UnloadImageResourcesCmd,
)
from drawlib.domain.path import (
    FlattenedPath,
    PathCommand,
    PathCommandType,
    Point,
    commands_from_dicts,
    curve_to,
    line_to,
    move_to,
    rel_curve_to,
    rel_line_to,
)
from drawlib.domain.properties import LineProperties, ShapeProperties, TextProperties
from drawlib.domain.text import (
    GlyphMetric,
    GlyphQuad,
    TextAlign,
    TextLabel,
    TextPlacementResult,
    Triangle,
    TwistedTextLabel,
)

__all__: list[str] = [
    # Enums
    "CommandType",
    "PathCommandType",
    # Path types
    "FlattenedPath",
    "PathCommand",
    "Point",
    "commands_from_dicts",
    "curve_to",
    "line_to",
    "move_to",
    "rel_curve_to",
    "rel_line_to",
    # Text types
    "GlyphMetric",
    "GlyphQuad",
    "TextAlign",
    "TextLabel",
    "TextPlacementResult",
    "Triangle",
    "TwistedTextLabel",
    # Styles
    "LineProperties",
    "ShapeProperties",
    "TextProperties",
    # Commands
    "DrawCommand",
    "DrawLinesCmd",
    "DrawPolygonsCmd",
    "DrawTextCmd",
    "DrawTwistedTextCmd",
    "LoadImageResourcesCmd",
    "Polygon",
    "UnloadImageResourcesCmd",
]
