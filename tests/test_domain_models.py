"""Tests for domain models to verify they work correctly."""

import pytest

from drawlib.core.flatten import flatten_path
from drawlib.domain import (
    CommandType,
    DrawLinesCmd,
    DrawPolygonsCmd,
    FlattenedPath,
    GlyphMetric,
    GlyphQuad,
    LineProperties,
    LoadImageResourcesCmd,
    PathCommand,
    PathCommandType,
    Point,
    Polygon,
    ShapeProperties,
    TextAlign,
    TextLabel,
    TextPlacementResult,
    TextProperties,
    TwistedTextLabel,
    curve_to,
    line_to,
    move_to,
    rel_curve_to,
    rel_line_to,
)
from drawlib.exceptions import MalformedCommandError


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(1.0, 2.0).to_tuple() == (1.0, 2.0)

    def test_point_translate(self) -> None:
        """Test translation returns a new point."""
        p = Point(1.0, 2.0)
        assert p.translate(3.0, -1.0) == Point(4.0, 1.0)
        assert p == Point(1.0, 2.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(100.0, 200.0)
        assert Point.from_dict(p1.to_dict()) == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore


class TestPathCommand:
    """Tests for PathCommand and its constructors."""

    def test_arity_per_type(self) -> None:
        """Move and line variants take 2 args, curve variants 6."""
        assert PathCommandType.MOVE_TO.arity == 2
        assert PathCommandType.LINE_TO.arity == 2
        assert PathCommandType.REL_LINE_TO.arity == 2
        assert PathCommandType.CURVE_TO.arity == 6
        assert PathCommandType.REL_CURVE_TO.arity == 6

    def test_constructors(self) -> None:
        """Test convenience constructors set type and args."""
        assert move_to(1, 2).type is PathCommandType.MOVE_TO
        assert line_to(1, 2).args == (1.0, 2.0)
        assert rel_line_to(1, 2).type is PathCommandType.REL_LINE_TO
        assert curve_to(1, 2, 3, 4, 5, 6).args == (1.0, 2.0, 3.0, 4.0, 5.0, 6.0)
        assert rel_curve_to(1, 2, 3, 4, 5, 6).type is PathCommandType.REL_CURVE_TO

    def test_wrong_arity_raises(self) -> None:
        """Test wrong argument count is rejected at construction."""
        with pytest.raises(MalformedCommandError) as exc_info:
            PathCommand(PathCommandType.CURVE_TO, (1.0, 2.0))

        assert exc_info.value.expected == 6
        assert exc_info.value.got == 2

    def test_points_grouping(self) -> None:
        """Test args are grouped into points."""
        cmd = curve_to(1, 2, 3, 4, 5, 6)
        assert cmd.points() == [Point(1, 2), Point(3, 4), Point(5, 6)]

    def test_translate_absolute(self) -> None:
        """Test absolute commands shift every coordinate pair."""
        cmd = curve_to(1, 2, 3, 4, 5, 6).translate(10, 20)
        assert cmd.args == (11.0, 22.0, 13.0, 24.0, 15.0, 26.0)

    def test_translate_relative_unchanged(self) -> None:
        """Test relative commands are offsets and do not move."""
        cmd = rel_line_to(1, 2)
        assert cmd.translate(10, 20) == cmd

    def test_serialization(self) -> None:
        """Test wire-form serialization and deserialization."""
        cmd = curve_to(1, 2, 3, 4, 5, 6)
        data = cmd.to_dict()

        assert data == {"type": "curve_to", "args": [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]}
        assert PathCommand.from_dict(data) == cmd

    def test_from_dict_unknown_tag(self) -> None:
        """Test unknown tags are malformed."""
        with pytest.raises(MalformedCommandError, match="Unknown path command 'arc_to'"):
            PathCommand.from_dict({"type": "arc_to", "args": [1, 2]})

    def test_from_dict_wrong_arity(self) -> None:
        """Test wire-form commands are arity checked."""
        with pytest.raises(MalformedCommandError):
            PathCommand.from_dict({"type": "line_to", "args": [1, 2, 3]})

    @pytest.mark.parametrize("args", ["12", 5, ["a", 1], [True, 1], None])
    def test_from_dict_non_numeric_args(self, args) -> None:
        """Test args must be a list of numbers."""
        with pytest.raises(MalformedCommandError, match="list of numbers") as exc_info:
            PathCommand.from_dict({"type": "move_to", "args": args})

        assert exc_info.value.command_type == "move_to"
        assert exc_info.value.expected == 2

    def test_non_numeric_args_at_construction(self) -> None:
        """Test unconvertible args are malformed, not a bare ValueError."""
        with pytest.raises(MalformedCommandError):
            PathCommand(PathCommandType.LINE_TO, ("x", 1.0))


class TestFlattenedPath:
    """Tests for FlattenedPath class."""

    def test_length(self) -> None:
        """Test length is the last arc-length entry."""
        path = FlattenedPath((Point(0, 0), Point(3, 4)), (0.0, 5.0))
        assert path.length == 5.0
        assert len(path) == 2

    def test_mismatched_table_rejected(self) -> None:
        """Test arc-length table must match the point count."""
        with pytest.raises(ValueError, match="Arc-length table"):
            FlattenedPath((Point(0, 0), Point(3, 4)), (0.0,))


class TestTextTypes:
    """Tests for text layout value types."""

    @pytest.fixture
    def quad(self) -> GlyphQuad:
        """Create a unit quad."""
        return GlyphQuad(
            char="a",
            start=0.0,
            end=1.0,
            lead_bottom=Point(0, 0),
            lead_top=Point(0, -1),
            trail_bottom=Point(1, 0),
            trail_top=Point(1, -1),
        )

    def test_glyph_metric_height(self) -> None:
        """Test height is ascent plus descent."""
        assert GlyphMetric("a", 5.0, 8.0, 2.0).height == 10.0

    def test_default_align(self) -> None:
        """Test default alignment starts at the path start, bottom on path."""
        align = TextAlign()
        assert align.halign == 0.0
        assert align.valign == 0.0

    @pytest.mark.parametrize(
        "kwargs", [{"halign": -0.1}, {"halign": 1.5}, {"valign": -1.0}, {"valign": 2.0}]
    )
    def test_align_out_of_range(self, kwargs: dict[str, float]) -> None:
        """Test alignment factors must lie within [0, 1]."""
        with pytest.raises(ValueError, match="must be in \\[0, 1\\]"):
            TextAlign(**kwargs)

    def test_align_bounds_accepted(self) -> None:
        """Test the end points of the range are valid."""
        assert TextAlign(halign=1.0, valign=1.0).halign == 1.0

    def test_quad_triangles(self, quad: GlyphQuad) -> None:
        """Test the quad splits into two triangles covering its corners."""
        first, second = quad.triangles()
        assert first == (quad.lead_bottom, quad.lead_top, quad.trail_bottom)
        assert second == (quad.trail_top, quad.trail_bottom, quad.lead_top)

    def test_result_truncated(self, quad: GlyphQuad) -> None:
        """Test truncated compares placed quads with requested glyphs."""
        full = TextPlacementResult((quad,), path_length=10.0, text_length=1.0, glyph_count=1)
        partial = TextPlacementResult((quad,), path_length=1.0, text_length=2.0, glyph_count=2)

        assert not full.truncated
        assert partial.truncated
        assert len(partial.triangles()) == 2

    def test_result_to_dict(self, quad: GlyphQuad) -> None:
        """Test result serialization."""
        result = TextPlacementResult((quad,), path_length=10.0, text_length=1.0, glyph_count=1)
        data = result.to_dict()

        assert data["path_length"] == 10.0
        assert data["truncated"] is False
        assert len(data["quads"][0]["corners"]) == 4

    def test_text_label_translate(self) -> None:
        """Test straight label translation."""
        label = TextLabel("hi", 1.0, 2.0, 0.5).translate(1.0, 1.0)
        assert (label.x, label.y, label.ang) == (2.0, 3.0, 0.5)

    def test_twisted_label_translate(self) -> None:
        """Test twisted label translation moves its path."""
        label = TwistedTextLabel("hi", [move_to(0, 0), line_to(10, 0)])
        moved = label.translate(5, 5)

        assert isinstance(label.path, tuple)
        assert moved.path == (move_to(5, 5), line_to(15, 5))

    def test_twisted_label_translate_moves_implicit_origin(self) -> None:
        """Test a path without a leading move gets the shifted origin."""
        label = TwistedTextLabel("hi", [rel_line_to(10, 0)])
        moved = label.translate(5, 7)

        assert moved.path == (move_to(5, 7), rel_line_to(10, 0))
        assert flatten_path(moved.path).points == (Point(5, 7), Point(15, 7))


class TestProperties:
    """Tests for style value objects."""

    def test_text_properties_align(self) -> None:
        """Test alignment factors are exposed as TextAlign."""
        props = TextProperties(halign=0.5, valign=1.0)
        assert props.align == TextAlign(halign=0.5, valign=1.0)

    def test_properties_ordered_and_hashable(self) -> None:
        """Test styles can be sorted and used as dict keys."""
        red = ShapeProperties(1.0, 0.0, 0.0)
        blue = ShapeProperties(0.0, 0.0, 1.0)

        assert sorted([red, blue]) == [blue, red]
        assert {red: 1, blue: 2}[red] == 1
        assert LineProperties(line_width=2.0) < LineProperties(line_width=3.0)


class TestCommands:
    """Tests for recorded drawing commands."""

    def test_command_types(self) -> None:
        """Test each command carries its tag."""
        poly = DrawPolygonsCmd([Polygon([Point(0, 0), Point(1, 0), Point(1, 1)])], ShapeProperties())
        lines = DrawLinesCmd([[Point(0, 0), Point(1, 1)]], LineProperties())

        assert poly.type is CommandType.POLYGONS
        assert lines.type is CommandType.LINES
        assert isinstance(lines.lines[0], tuple)

    def test_load_resources_copies_mapping(self) -> None:
        """Test the resource mapping is copied on construction."""
        mapping = {"grass": "grass.png"}
        cmd = LoadImageResourcesCmd(mapping)
        mapping["water"] = "water.png"

        assert cmd.id_to_filename == {"grass": "grass.png"}
        assert cmd.type is CommandType.LOAD_RESOURCES
