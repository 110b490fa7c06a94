"""Font-backed text metrics.

This module provides FontToolsMetrics, a TextMetricsProvider that reads
advance widths and vertical extents from a TTF/OTF file with fonttools.
"""

from pathlib import Path

from fontTools.ttLib import TTFont

from drawlib.domain import GlyphMetric, TextProperties
from drawlib.exceptions import FontLoadError


class FontToolsMetrics:
    """Measures text using the metrics tables of a font file.

    Advances come from ``hmtx`` through the font's best ``cmap``; ascent and
    descent come from ``hhea``. All values are scaled from font units to
    ``properties.font_size``. Characters missing from the font are measured
    as ``.notdef``.

    Example:
        with FontToolsMetrics(Path("font.ttf")) as metrics:
            glyphs = metrics.glyph_metrics("Hello", TextProperties(font_size=24))
    """

    NOTDEF = ".notdef"

    def __init__(self, font_path: Path) -> None:
        """Initialize the metrics provider.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FontLoadError: If the file is missing or cannot be parsed
        """
        if not self._font_path.exists():
            raise FontLoadError(str(self._font_path), "file not found")

        try:
            self._font = TTFont(str(self._font_path), lazy=True)
        except Exception as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def units_per_em(self) -> int:
        """Return the font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    def glyph_metrics(self, text: str, properties: TextProperties) -> list[GlyphMetric]:
        """Measure each character of text at the requested font size.

        Args:
            text: Text to measure
            properties: Text style; only font_size is used

        Returns:
            One GlyphMetric per character

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        cmap = font.getBestCmap() or {}
        advances = font["hmtx"].metrics  # type: ignore[attr-defined]
        hhea = font["hhea"]

        scale = properties.font_size / self.units_per_em
        ascent = hhea.ascent * scale  # type: ignore[attr-defined]
        # hhea descent is negative (below the baseline)
        descent = -hhea.descent * scale  # type: ignore[attr-defined]
        notdef_advance = advances.get(self.NOTDEF, (0, 0))[0]

        result = []
        for char in text:
            glyph_name = cmap.get(ord(char), self.NOTDEF)
            advance = advances.get(glyph_name, (notdef_advance, 0))[0]
            result.append(
                GlyphMetric(
                    char=char,
                    advance=advance * scale,
                    ascent=ascent,
                    descent=descent,
                )
            )
        return result

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontToolsMetrics":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
