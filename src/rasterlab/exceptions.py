"""Exception hierarchy for rasterlab."""


class RasterLabError(Exception):
    """Base exception for all rasterlab errors."""

    pass


class GeometryError(RasterLabError):
    """Errors related to geometric input."""

    pass


class InvalidPointError(GeometryError):
    """A point coordinate is not an integer."""

    def __init__(self, axis: str, value: object) -> None:
        self.axis = axis
        self.value = value
        super().__init__(
            f"Point coordinate '{axis}' must be an integer, got {type(value).__name__} {value!r}"
        )


class CoordinateRangeError(GeometryError):
    """A coordinate is outside the configured input range."""

    def __init__(self, value: int, low: int, high: int) -> None:
        self.value = value
        self.low = low
        self.high = high
        super().__init__(f"Coordinate {value} is outside the range [{low}, {high}]")


class UnknownAlgorithmError(RasterLabError):
    """Requested algorithm does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown algorithm '{name}'")


class ReportError(RasterLabError):
    """Errors related to report export."""

    pass


class ReportWriteError(ReportError):
    """Error writing a report file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot save report '{path}': {reason}")
