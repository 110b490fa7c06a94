"""Drawing command records.

Each command is an immutable record of one drawing operation as added to
the drawing buffer. The set of commands is closed: DrawCommand is the union
of all of them, and CommandType tags each one.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar

from drawlib.domain.path import Point
from drawlib.domain.properties import LineProperties, ShapeProperties, TextProperties
from drawlib.domain.text import TextLabel, TwistedTextLabel

Contour = tuple[Point, ...]


class CommandType(Enum):
    """Tag of a recorded drawing command."""

    POLYGONS = auto()
    LINES = auto()
    TEXT = auto()
    TWISTED_TEXT = auto()
    LOAD_RESOURCES = auto()
    UNLOAD_RESOURCES = auto()


def _contour(points: Iterable[Point]) -> Contour:
    return tuple(points)


@dataclass(frozen=True)
class Polygon:
    """A filled polygon with optional holes.

    Attributes:
        outer: Outer boundary
        holes: Inner boundaries cut out of the fill
    """

    outer: Contour
    holes: tuple[Contour, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "outer", _contour(self.outer))
        object.__setattr__(self, "holes", tuple(_contour(h) for h in self.holes))


@dataclass(frozen=True)
class DrawPolygonsCmd:
    """Fill a set of polygons with one style."""

    type: ClassVar[CommandType] = CommandType.POLYGONS

    polygons: tuple[Polygon, ...]
    properties: ShapeProperties

    def __post_init__(self) -> None:
        object.__setattr__(self, "polygons", tuple(self.polygons))


@dataclass(frozen=True)
class DrawLinesCmd:
    """Stroke a set of polylines with one style."""

    type: ClassVar[CommandType] = CommandType.LINES

    lines: tuple[Contour, ...]
    properties: LineProperties

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(_contour(line) for line in self.lines))


@dataclass(frozen=True)
class DrawTextCmd:
    """Draw straight labels with one style."""

    type: ClassVar[CommandType] = CommandType.TEXT

    labels: tuple[TextLabel, ...]
    properties: TextProperties

    def __post_init__(self) -> None:
        object.__setattr__(self, "labels", tuple(self.labels))


@dataclass(frozen=True)
class DrawTwistedTextCmd:
    """Draw labels that follow paths, with one style."""

    type: ClassVar[CommandType] = CommandType.TWISTED_TEXT

    labels: tuple[TwistedTextLabel, ...]
    properties: TextProperties

    def __post_init__(self) -> None:
        object.__setattr__(self, "labels", tuple(self.labels))


@dataclass(frozen=True)
class LoadImageResourcesCmd:
    """Load image files into the renderer under resource IDs."""

    type: ClassVar[CommandType] = CommandType.LOAD_RESOURCES

    id_to_filename: Mapping[str, str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "id_to_filename", dict(self.id_to_filename))


@dataclass(frozen=True)
class UnloadImageResourcesCmd:
    """Release previously loaded image resources."""

    type: ClassVar[CommandType] = CommandType.UNLOAD_RESOURCES

    ids: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "ids", tuple(self.ids))


DrawCommand = (
    DrawPolygonsCmd
    | DrawLinesCmd
    | DrawTextCmd
    | DrawTwistedTextCmd
    | LoadImageResourcesCmd
    | UnloadImageResourcesCmd
)
