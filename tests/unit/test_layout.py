"""Unit tests for straight label layout and Bezier fitting."""

import math

import pytest

from drawlib.core.fitting import fit_bezier_to_points
from drawlib.core.flatten import flatten_path
from drawlib.core.layout import layout_text_label
from drawlib.domain import GlyphMetric, PathCommandType, Point, TextLabel
from drawlib.exceptions import EmptyPathError, EmptyTextError


def approx_point(point: Point, x: float, y: float) -> bool:
    """Check a point against coordinates within floating tolerance."""
    return math.isclose(point.x, x, abs_tol=1e-9) and math.isclose(point.y, y, abs_tol=1e-9)


class TestLayoutTextLabel:
    """Tests for layout_text_label."""

    @pytest.fixture
    def metrics(self) -> list[GlyphMetric]:
        """Two glyphs, 20 wide and 10 tall."""
        return [GlyphMetric("a", 20.0, 8.0, 2.0), GlyphMetric("b", 20.0, 8.0, 2.0)]

    def test_unrotated_label_is_axis_aligned(self, metrics: list[GlyphMetric]) -> None:
        """Test a label at angle 0 hangs below its top-left corner."""
        result = layout_text_label(TextLabel("ab", 10.0, 20.0), metrics)
        first, second = result.quads

        assert approx_point(first.lead_top, 10.0, 20.0)
        assert approx_point(first.lead_bottom, 10.0, 30.0)
        assert approx_point(first.trail_top, 30.0, 20.0)
        assert approx_point(second.trail_bottom, 50.0, 30.0)

    def test_rotated_label(self, metrics: list[GlyphMetric]) -> None:
        """Test a quarter turn clockwise runs the text down the screen."""
        result = layout_text_label(TextLabel("ab", 10.0, 20.0, math.pi / 2), metrics)
        first = result.quads[0]

        assert approx_point(first.lead_top, 10.0, 20.0)
        assert approx_point(first.trail_top, 10.0, 40.0)
        assert approx_point(first.lead_bottom, 0.0, 20.0)

    def test_lengths(self, metrics: list[GlyphMetric]) -> None:
        """Test straight labels report their own length as path length."""
        result = layout_text_label(TextLabel("ab", 0.0, 0.0), metrics)

        assert result.text_length == 40.0
        assert result.path_length == 40.0
        assert not result.truncated

    def test_empty_text_raises(self) -> None:
        """Test a label without glyphs is an error."""
        with pytest.raises(EmptyTextError):
            layout_text_label(TextLabel("", 0.0, 0.0), [])


class TestFitBezierToPoints:
    """Tests for fit_bezier_to_points."""

    @pytest.fixture
    def polyline(self) -> list[Point]:
        """A bent polyline."""
        return [Point(0, 0), Point(10, 0), Point(20, 10), Point(30, 10)]

    def test_command_structure(self, polyline: list[Point]) -> None:
        """Test one move then one curve per segment."""
        commands = fit_bezier_to_points(polyline)

        assert commands[0].type is PathCommandType.MOVE_TO
        assert commands[0].args == (0.0, 0.0)
        assert len(commands) == 4
        assert all(c.type is PathCommandType.CURVE_TO for c in commands[1:])

    def test_curve_passes_through_points(self, polyline: list[Point]) -> None:
        """Test every input point is a curve endpoint and survives flattening."""
        commands = fit_bezier_to_points(polyline)
        ends = [c.points()[-1] for c in commands[1:]]
        assert ends == polyline[1:]

        path = flatten_path(commands, 0.1)
        for point in polyline:
            assert point in path.points

    def test_tangent_continuity(self, polyline: list[Point]) -> None:
        """Test control points on either side of a joint are collinear."""
        commands = fit_bezier_to_points(polyline)
        incoming = commands[1].points()[1]
        joint = polyline[1]
        outgoing = commands[2].points()[0]

        cross = (joint.x - incoming.x) * (outgoing.y - joint.y) - (joint.y - incoming.y) * (
            outgoing.x - joint.x
        )
        assert cross == pytest.approx(0.0)

    def test_full_tension_gives_straight_segments(self, polyline: list[Point]) -> None:
        """Test tension 1 puts the control points on the endpoints."""
        commands = fit_bezier_to_points(polyline, tension=1.0)
        ctrl1, ctrl2, end = commands[1].points()

        assert ctrl1 == polyline[0]
        assert ctrl2 == end == polyline[1]

    def test_duplicate_points_ignored(self) -> None:
        """Test repeated points do not create empty curves."""
        commands = fit_bezier_to_points([Point(0, 0), Point(0, 0), Point(10, 0)])
        assert len(commands) == 2

    def test_too_few_points_raise(self) -> None:
        """Test fewer than two distinct points is an empty path."""
        with pytest.raises(EmptyPathError):
            fit_bezier_to_points([Point(1, 1), Point(1, 1)])

    def test_invalid_tension(self, polyline: list[Point]) -> None:
        """Test tension must be within [0, 1]."""
        with pytest.raises(ValueError, match="Tension"):
            fit_bezier_to_points(polyline, tension=1.5)
