"""Drawing style value objects.

These objects are passed through to the renderer untouched. They are frozen
and ordered so they can be used as dictionary keys or sorted to batch
commands by style.
"""

from dataclasses import dataclass

from drawlib.domain.text import TextAlign


@dataclass(frozen=True, order=True)
class ShapeProperties:
    """Drawing properties of filled shapes.

    Attributes:
        r: Red component (0-1)
        g: Green component (0-1)
        b: Blue component (0-1)
        a: Alpha component (0-1)
        image_id: Texture resource ID, empty for a solid fill
        tex_x: Texture translation in x
        tex_y: Texture translation in y
    """

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0
    image_id: str = ""
    tex_x: float = 0.0
    tex_y: float = 0.0


@dataclass(frozen=True, order=True)
class LineProperties:
    """Drawing properties of lines and strokes."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0
    line_width: float = 1.0
    closed_loop: bool = False
    line_join: str = "miter"
    line_cap: str = "butt"


@dataclass(frozen=True, order=True)
class TextProperties:
    """Drawing properties of text.

    Attributes:
        lr, lg, lb, la: Outline colour
        fr, fg, fb, fa: Fill colour
        font: Font family name or font file path
        font_size: Font size in path-local units
        outline: Whether to stroke the glyph outlines
        fill: Whether to fill the glyphs
        line_width: Outline stroke width
        halign: 0.0 starts text at the path start, 1.0 ends it at the path end
        valign: 0.0 puts the glyph bottom on the path, 1.0 the glyph top
    """

    lr: float = 0.0
    lg: float = 0.0
    lb: float = 0.0
    la: float = 1.0
    fr: float = 0.0
    fg: float = 0.0
    fb: float = 0.0
    fa: float = 1.0
    font: str = "Sans"
    font_size: float = 12.0
    outline: bool = False
    fill: bool = True
    line_width: float = 1.0
    halign: float = 0.0
    valign: float = 0.0

    @property
    def align(self) -> TextAlign:
        """Alignment factors as a TextAlign."""
        return TextAlign(halign=self.halign, valign=self.valign)
