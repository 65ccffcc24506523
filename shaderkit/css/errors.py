class GradientParseError(ValueError):
    """Base class for every reason a CSS gradient string cannot be parsed."""


class GradientStructureError(GradientParseError):
    """The ``linear-gradient(`` or ``);`` marker is missing."""


class InsufficientStopsError(GradientParseError):
    """Fewer than two color entries were decoded."""

    def __init__(self, count: int):
        super().__init__(f"A gradient needs at least 2 color stops, got {count}")
        self.count = count


class MalformedTokenError(GradientParseError):
    """A parameter token does not have the shape its kind requires."""


class UnexpectedGradientError(GradientParseError):
    """Any other failure caught at the parser boundary; ``__cause__`` holds the original."""
