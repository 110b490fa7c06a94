"""Integration tests for text along a path.

Tests the full pipeline from path commands to glyph quads to verify:
- Flattened curves are faithful to the true curve
- Glyphs are placed and truncated by arc length
- Fitted curves carry text through their sample points
- Real font metrics flow through the drawing store
"""

import math
from collections.abc import Generator
from pathlib import Path

import pytest

from drawlib.core import (
    DrawingStore,
    FixedMetrics,
    fit_bezier_to_points,
    flatten_path,
    place_along_path,
    place_text_on_path,
)
from drawlib.domain import (
    GlyphMetric,
    Point,
    TextAlign,
    TextProperties,
    TwistedTextLabel,
    curve_to,
    line_to,
    move_to,
)
from drawlib.io import FontToolsMetrics

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"
FONT_CANDIDATES = [
    FIXTURES_DIR / "Roboto-Regular.ttf",
    Path("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"),
    Path("/usr/share/fonts/TTF/DejaVuSans.ttf"),
]


@pytest.fixture
def font_metrics() -> Generator[FontToolsMetrics, None, None]:
    """Load the first available real font."""
    font_path = next((p for p in FONT_CANDIDATES if p.exists()), None)
    if font_path is None:
        pytest.skip("No TrueType font fixture available")
    metrics = FontToolsMetrics(font_path)
    metrics.load()
    yield metrics
    metrics.close()


def two_glyphs() -> list[GlyphMetric]:
    """Glyphs of advance 20 and 30."""
    return [GlyphMetric("a", 20.0, 8.0, 2.0), GlyphMetric("b", 30.0, 8.0, 2.0)]


def cubic_length(p0, p1, p2, p3, samples: int = 20000) -> float:
    """Approximate cubic arc length by dense sampling."""
    total = 0.0
    prev = p0
    for i in range(1, samples + 1):
        t = i / samples
        mt = 1 - t
        x = mt**3 * p0[0] + 3 * mt * mt * t * p1[0] + 3 * mt * t * t * p2[0] + t**3 * p3[0]
        y = mt**3 * p0[1] + 3 * mt * mt * t * p1[1] + 3 * mt * t * t * p2[1] + t**3 * p3[1]
        total += math.hypot(x - prev[0], y - prev[1])
        prev = (x, y)
    return total


class TestReferenceScenarios:
    """Flatten and place on small known inputs."""

    def test_straight_line_flattens_to_endpoints(self) -> None:
        """Test a single line gives its two endpoints and its length."""
        path = flatten_path([move_to(0, 0), line_to(100, 0)], 0.5)

        assert path.points == (Point(0, 0), Point(100, 0))
        assert path.arc_lengths == (0.0, 100.0)
        assert path.length == 100.0

    def test_text_fits_on_line(self) -> None:
        """Test both glyphs are placed along a long enough path."""
        result = place_text_on_path([move_to(0, 0), line_to(100, 0)], two_glyphs())

        assert [(q.start, q.end) for q in result.quads] == [(0.0, 20.0), (20.0, 50.0)]
        assert result.text_length == 50.0
        assert not result.truncated

    def test_text_truncated_on_short_line(self) -> None:
        """Test the glyph running past the end is left out."""
        result = place_text_on_path([move_to(0, 0), line_to(40, 0)], two_glyphs())

        assert len(result.quads) == 1
        assert result.quads[0].end == 20.0
        assert result.text_length > result.path_length

    def test_cubic_flattening(self) -> None:
        """Test a symmetric arch flattens to a faithful, strictly advancing polyline."""
        path = flatten_path([move_to(0, 0), curve_to(33, 100, 66, 100, 100, 0)], 0.5)
        xs = [p.x for p in path.points]

        assert path.points[0] == Point(0, 0)
        assert path.points[-1] == Point(100, 0)
        assert all(a < b for a, b in zip(xs, xs[1:]))
        assert all(a != b for a, b in zip(path.points, path.points[1:]))

        true_length = cubic_length((0, 0), (33, 100), (66, 100), (100, 0))
        assert path.length == pytest.approx(true_length, rel=0.01)


class TestFittedPath:
    """Fit a curve through sample points and place text on it."""

    @pytest.fixture
    def samples(self) -> list[Point]:
        """A gently winding road centreline."""
        return [Point(0, 0), Point(50, 20), Point(100, 0), Point(150, -20), Point(200, 0)]

    def test_centred_text(self, samples: list[Point]) -> None:
        """Test halign 0.5 leaves equal slack at both ends."""
        path = flatten_path(fit_bezier_to_points(samples), 0.1)
        glyphs = [GlyphMetric(c, 10.0, 8.0, 2.0) for c in "ROAD"]
        result = place_along_path(path, glyphs, TextAlign(halign=0.5))

        slack = path.length - result.text_length
        assert result.quads[0].start == pytest.approx(slack / 2)
        assert path.length - result.quads[-1].end == pytest.approx(slack / 2)
        assert not result.truncated

    def test_glyph_edges_on_path(self, samples: list[Point]) -> None:
        """Test each glyph's bottom corners sit on the flattened path."""
        path = flatten_path(fit_bezier_to_points(samples), 0.1)
        glyphs = [GlyphMetric(c, 10.0, 8.0, 2.0) for c in "ROAD"]
        result = place_along_path(path, glyphs)

        for quad in result.quads:
            for corner in (quad.lead_bottom, quad.trail_bottom):
                nearest = min(math.hypot(corner.x - p.x, corner.y - p.y) for p in path.points)
                # bounded by the longest segment of the polyline
                assert nearest < 20.0


class TestDrawingStorePipeline:
    """Record labels and query their bounds through the store."""

    def test_fixed_metrics(self) -> None:
        """Test a store records the label and measures it."""
        store = DrawingStore(FixedMetrics(advance_em=1.0))
        label = TwistedTextLabel("Main", (move_to(0, 0), curve_to(0, -60, 200, -60, 200, 0)))
        properties = TextProperties(font_size=10.0, halign=0.5, valign=0.5)

        store.add_twisted_text([label], properties)
        result = store.get_triangle_bounds_twisted_text(label, properties)

        assert len(store) == 1
        assert len(result.quads) == 4
        assert len(result.triangles()) == 8
        assert store.layout_logger.stats.glyphs_placed == 4

    def test_real_font(self, font_metrics: FontToolsMetrics) -> None:
        """Test font metrics drive placement along a path."""
        store = DrawingStore(font_metrics)
        label = TwistedTextLabel("Hello", (move_to(0, 0), line_to(500, 0)))
        result = store.get_triangle_bounds_twisted_text(label, TextProperties(font_size=24.0))

        assert len(result.quads) == 5
        assert all(q.end > q.start for q in result.quads)
        assert result.text_length < 24.0 * 5
