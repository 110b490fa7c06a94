"""Exception hierarchy for drawlib."""


class DrawLibError(Exception):
    """Base exception for all drawlib errors."""

    pass


class PathError(DrawLibError):
    """Errors related to path commands or flattened paths."""

    pass


class EmptyPathError(PathError):
    """Path is degenerate (fewer than two points, or zero length)."""

    def __init__(self, reason: str = "path has no drawable length") -> None:
        self.reason = reason
        super().__init__(f"Empty path: {reason}")


class MalformedCommandError(PathError):
    """Path command with an unknown tag or arguments that do not fit it."""

    def __init__(
        self,
        command_type: str,
        expected: int | None,
        got: int | None,
        reason: str | None = None,
    ) -> None:
        self.command_type = command_type
        self.expected = expected
        self.got = got
        self.reason = reason
        if reason is not None:
            message = f"Path command '{command_type}' is malformed: {reason}"
        elif expected is None:
            message = f"Unknown path command '{command_type}'"
        else:
            message = (
                f"Path command '{command_type}' takes {expected} arguments, got {got}"
            )
        super().__init__(message)


class TextError(DrawLibError):
    """Errors related to text layout."""

    pass


class EmptyTextError(TextError):
    """No glyph metrics were supplied for layout."""

    def __init__(self) -> None:
        super().__init__("Cannot lay out empty text")


class MetricsError(DrawLibError):
    """Errors obtaining font metrics."""

    pass


class FontLoadError(MetricsError):
    """Error loading a font file for metrics."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")
