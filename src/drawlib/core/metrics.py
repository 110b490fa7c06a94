"""Font metrics capability.

Layout never reads fonts itself. It asks a TextMetricsProvider for the
advance and vertical extents of each character, already scaled to the
requested font size.
"""

from typing import Protocol, runtime_checkable

from drawlib.config import TextConfig
from drawlib.domain import GlyphMetric, TextProperties


@runtime_checkable
class TextMetricsProvider(Protocol):
    """Anything that can measure text for a given style."""

    def glyph_metrics(self, text: str, properties: TextProperties) -> list[GlyphMetric]:
        """Return one GlyphMetric per character of text."""
        ...


class FixedMetrics:
    """Metrics provider giving every character the same em-relative box.

    Useful without a font file, for tests and for renderers that only need
    approximate bounds.
    """

    def __init__(
        self,
        advance_em: float = 0.6,
        ascent_em: float = 0.8,
        descent_em: float = 0.2,
    ) -> None:
        self.advance_em = advance_em
        self.ascent_em = ascent_em
        self.descent_em = descent_em

    @classmethod
    def from_config(cls, config: TextConfig) -> "FixedMetrics":
        """Create a provider from the text configuration."""
        return cls(
            advance_em=config.fixed_advance_em,
            ascent_em=config.fixed_ascent_em,
            descent_em=config.fixed_descent_em,
        )

    def glyph_metrics(self, text: str, properties: TextProperties) -> list[GlyphMetric]:
        size = properties.font_size
        return [
            GlyphMetric(
                char=char,
                advance=self.advance_em * size,
                ascent=self.ascent_em * size,
                descent=self.descent_em * size,
            )
            for char in text
        ]
