"""drawlib - Deferred drawing commands with text that follows curved paths.

drawlib records drawing operations (polygons, lines, labels and "twisted"
labels whose baseline follows a Bezier path) into an append-only buffer and
replays them into a pluggable renderer. Its geometric core flattens path
commands into polylines and places glyphs along them.

Example:
    $ drawlib place curve.json "Hello world" --halign 0.5

This prints the quadrilateral bounding each glyph placed along the path
described in curve.json.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
