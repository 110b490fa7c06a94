"""Text layout types.

This module defines the inputs and outputs of text layout:
- GlyphMetric: Per-character advance and vertical extents
- TextAlign: Horizontal and vertical alignment factors
- GlyphQuad: The bounding quadrilateral of one placed glyph
- TextPlacementResult: All placed glyphs plus path and text lengths
- TextLabel / TwistedTextLabel: Labels recorded in the drawing buffer
"""

from dataclasses import dataclass, field
from typing import Any

from drawlib.domain.path import PathCommand, PathCommandType, Point, move_to

Triangle = tuple[Point, Point, Point]


@dataclass(frozen=True, slots=True)
class GlyphMetric:
    """Metrics for one character, in path-local length units.

    Attributes:
        char: The character these metrics describe
        advance: Advance width along the baseline
        ascent: Extent above the baseline
        descent: Extent below the baseline (positive value)
    """

    char: str
    advance: float
    ascent: float
    descent: float

    @property
    def height(self) -> float:
        """Total height of the glyph box."""
        return self.ascent + self.descent


@dataclass(frozen=True, slots=True)
class TextAlign:
    """Alignment of text relative to its path.

    Attributes:
        halign: 0.0 starts the text at the path start, 1.0 ends it at the
            path end, values in between interpolate
        valign: 0.0 puts the bottom edge of the glyph box on the path,
            1.0 puts the top edge on the path, 0.5 centres it
    """

    halign: float = 0.0
    valign: float = 0.0

    def __post_init__(self) -> None:
        for name in ("halign", "valign"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be in [0, 1], got {value}")


@dataclass(frozen=True, slots=True)
class GlyphQuad:
    """Bounding quadrilateral of a placed glyph.

    Corners are named relative to the direction of travel: "lead" corners
    sit at the glyph's leading edge, "trail" corners at its trailing edge.

    Attributes:
        char: The placed character
        start: Arc length of the leading edge
        end: Arc length of the trailing edge
        lead_bottom: Bottom corner at the leading edge
        lead_top: Top corner at the leading edge
        trail_bottom: Bottom corner at the trailing edge
        trail_top: Top corner at the trailing edge
    """

    char: str
    start: float
    end: float
    lead_bottom: Point
    lead_top: Point
    trail_bottom: Point
    trail_top: Point

    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Return the corners in outline order."""
        return (self.lead_bottom, self.lead_top, self.trail_top, self.trail_bottom)

    def triangles(self) -> tuple[Triangle, Triangle]:
        """Split the quad into two triangles with the same winding."""
        return (
            (self.lead_bottom, self.lead_top, self.trail_bottom),
            (self.trail_top, self.trail_bottom, self.lead_top),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "char": self.char,
            "start": self.start,
            "end": self.end,
            "corners": [p.to_dict() for p in self.corners()],
        }


@dataclass(frozen=True)
class TextPlacementResult:
    """Result of laying out text along a path.

    Attributes:
        quads: One quad per placed glyph, in text order
        path_length: Total length of the path
        text_length: Sum of all glyph advances, placed or not
        glyph_count: Number of glyphs requested
    """

    quads: tuple[GlyphQuad, ...]
    path_length: float
    text_length: float
    glyph_count: int = 0

    @property
    def truncated(self) -> bool:
        """True if some glyphs did not fit on the path."""
        return len(self.quads) < self.glyph_count

    def triangles(self) -> list[Triangle]:
        """All triangles, two per placed glyph."""
        result: list[Triangle] = []
        for quad in self.quads:
            result.extend(quad.triangles())
        return result

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "quads": [q.to_dict() for q in self.quads],
            "path_length": self.path_length,
            "text_length": self.text_length,
            "glyph_count": self.glyph_count,
            "truncated": self.truncated,
        }


@dataclass(frozen=True)
class TextLabel:
    """A single straight label.

    Attributes:
        text: Label text
        x: X of the top-left corner
        y: Y of the top-left corner
        ang: Rotation in radians, clockwise on screen
    """

    text: str
    x: float
    y: float
    ang: float = 0.0

    def translate(self, tx: float, ty: float) -> "TextLabel":
        """Return this label moved by (tx, ty)."""
        return TextLabel(self.text, self.x + tx, self.y + ty, self.ang)


@dataclass(frozen=True)
class TwistedTextLabel:
    """A label whose baseline follows a path.

    Attributes:
        text: Label text
        path: Path commands describing the reference edge of the text
    """

    text: str
    path: tuple[PathCommand, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", tuple(self.path))

    def translate(self, tx: float, ty: float) -> "TwistedTextLabel":
        """Return this label with its path moved by (tx, ty).

        A path that draws before any move starts at the origin, so the moved
        path gets an explicit move to the shifted origin.
        """
        path = [c.translate(tx, ty) for c in self.path]
        if self.path and self.path[0].type is not PathCommandType.MOVE_TO:
            path.insert(0, move_to(tx, ty))
        return TwistedTextLabel(self.text, tuple(path))
