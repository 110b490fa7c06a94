"""Deferred drawing command buffer.

DrawingStore records drawing commands in the order they are added and
replays them into a Renderer on draw(). It also answers bounds queries for
labels, which only need font metrics and never touch the renderer.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Protocol

from drawlib.config import DrawLibSettings, get_default_settings
from drawlib.core.flatten import flatten_path
from drawlib.core.layout import layout_text_label
from drawlib.core.metrics import FixedMetrics, TextMetricsProvider
from drawlib.core.placement import place_along_path
from drawlib.domain import (
    DrawCommand,
    DrawLinesCmd,
    DrawPolygonsCmd,
    DrawTextCmd,
    DrawTwistedTextCmd,
    LineProperties,
    LoadImageResourcesCmd,
    Point,
    Polygon,
    ShapeProperties,
    TextLabel,
    TextPlacementResult,
    TextProperties,
    TwistedTextLabel,
    UnloadImageResourcesCmd,
)
from drawlib.exceptions import DrawLibError, EmptyTextError
from drawlib.utils import LayoutLogger


class Renderer(Protocol):
    """A rendering backend that executes recorded commands."""

    def render(self, command: DrawCommand) -> None:
        """Execute one drawing command."""
        ...


class DrawingStore:
    """Stores drawing commands in memory until they are drawn.

    Example:
        store = DrawingStore()
        store.add_lines([[Point(0, 0), Point(10, 10)]], LineProperties())
        store.add_twisted_text(
            [TwistedTextLabel("Main St", (move_to(0, 0), line_to(200, 0)))],
            TextProperties(font_size=14),
        )
        store.draw(renderer)
    """

    def __init__(
        self,
        metrics: TextMetricsProvider | None = None,
        settings: DrawLibSettings | None = None,
    ) -> None:
        """Initialize an empty store.

        Args:
            metrics: Text metrics provider (fixed metrics if None)
            settings: Geometry and text settings (defaults if None)
        """
        self.settings = settings if settings is not None else get_default_settings()
        self.metrics = (
            metrics if metrics is not None else FixedMetrics.from_config(self.settings.text)
        )
        self.layout_logger = LayoutLogger()
        self._commands: list[DrawCommand] = []

    @property
    def commands(self) -> tuple[DrawCommand, ...]:
        """Recorded commands in insertion order."""
        return tuple(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def clear(self) -> None:
        """Discard all recorded commands."""
        self._commands.clear()

    def add(self, command: DrawCommand) -> DrawCommand:
        """Append an already built command."""
        self._commands.append(command)
        return command

    def add_polygons(
        self, polygons: Iterable[Polygon], properties: ShapeProperties
    ) -> DrawPolygonsCmd:
        """Record a fill of polygons."""
        cmd = DrawPolygonsCmd(polygons=tuple(polygons), properties=properties)
        self._commands.append(cmd)
        return cmd

    def add_lines(
        self, lines: Iterable[Sequence[Point]], properties: LineProperties
    ) -> DrawLinesCmd:
        """Record a stroke of polylines."""
        cmd = DrawLinesCmd(lines=tuple(tuple(line) for line in lines), properties=properties)
        self._commands.append(cmd)
        return cmd

    def add_text(self, labels: Iterable[TextLabel], properties: TextProperties) -> DrawTextCmd:
        """Record straight labels."""
        cmd = DrawTextCmd(labels=tuple(labels), properties=properties)
        self._commands.append(cmd)
        return cmd

    def add_twisted_text(
        self, labels: Iterable[TwistedTextLabel], properties: TextProperties
    ) -> DrawTwistedTextCmd:
        """Record labels that follow paths."""
        cmd = DrawTwistedTextCmd(labels=tuple(labels), properties=properties)
        self._commands.append(cmd)
        return cmd

    def add_load_image_resources(
        self, id_to_filename: Mapping[str, str]
    ) -> LoadImageResourcesCmd:
        """Record loading of image resources."""
        cmd = LoadImageResourcesCmd(id_to_filename=id_to_filename)
        self._commands.append(cmd)
        return cmd

    def add_unload_image_resources(self, ids: Iterable[str]) -> UnloadImageResourcesCmd:
        """Record release of image resources."""
        cmd = UnloadImageResourcesCmd(ids=tuple(ids))
        self._commands.append(cmd)
        return cmd

    def get_triangle_bounds_text(
        self, label: TextLabel, properties: TextProperties
    ) -> TextPlacementResult:
        """Bounding quads of a straight label.

        Raises:
            EmptyTextError: If the label has no text
        """
        try:
            result = layout_text_label(label, self.metrics.glyph_metrics(label.text, properties))
        except DrawLibError as e:
            self.layout_logger.log_label_error(label.text, e)
            raise

        self.layout_logger.log_label_placed(label.text, len(result.quads), result.glyph_count)
        return result

    def get_triangle_bounds_twisted_text(
        self, label: TwistedTextLabel, properties: TextProperties
    ) -> TextPlacementResult:
        """Bounding quads of a label that follows its path.

        Raises:
            EmptyTextError: If the label has no text
            EmptyPathError: If the label's path is degenerate
        """
        geometry = self.settings.geometry
        try:
            glyphs = self.metrics.glyph_metrics(label.text, properties)
            if not glyphs:
                raise EmptyTextError()
            path = flatten_path(
                label.path,
                geometry.flatten_tolerance,
                min_segment_length=geometry.min_segment_length,
                max_depth=geometry.max_subdivision_depth,
            )
            result = place_along_path(path, glyphs, properties.align)
        except DrawLibError as e:
            self.layout_logger.log_label_error(label.text, e)
            raise

        self.layout_logger.log_label_placed(label.text, len(result.quads), result.glyph_count)
        return result

    def draw(self, renderer: Renderer) -> None:
        """Replay every recorded command into the renderer, in order."""
        for command in self._commands:
            renderer.render(command)
