class FilterError(Exception):
    """Base class for every error raised by imgfilters."""


class InvalidRadius(FilterError, ValueError):
    radius: int

    def __init__(self, radius: int):
        self.radius = radius
        super().__init__(f"kernel radius must be a positive integer, got {radius!r}")


class DimensionMismatch(FilterError, ValueError):
    shapes: tuple[tuple[int, ...], ...]

    def __init__(self, shapes: tuple[tuple[int, ...], ...], message: str | None = None):
        self.shapes = shapes
        super().__init__(message or f"planes have different dimensions: {list(shapes)}")


class ConfigError(FilterError):
    pass


class ImageReadError(FilterError, OSError):
    pass


class ImageWriteError(FilterError, OSError):
    pass
