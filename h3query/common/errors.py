"""
Validation failures raised by the H3 query facade itself.

Failures raised by the h3 library (``h3.H3BaseException`` and its subclasses)
are never wrapped; they reach the caller unchanged. Everything defined here
subclasses ``ValueError`` so callers that only care about "bad input" can
catch both families the same way.
"""


class GridQueryError(ValueError):
    """Base class for validation failures originating in this layer."""


class ResolutionMismatchError(GridQueryError):
    """Two cells that must share a resolution do not."""

    def __init__(self, resolution_a: int, resolution_b: int):
        self.resolution_a = resolution_a
        self.resolution_b = resolution_b
        super().__init__(
            "Cannot compute distance of two indexes from different resolutions "
            f"({resolution_a} and {resolution_b})"
        )


class InvalidWKTError(GridQueryError):
    """Polygon WKT text is not a POLYGON or MULTIPOLYGON, or is malformed."""


class UnknownCoordinateSystemError(GridQueryError):
    """Coordinate-system selector is neither 'lat' nor 'lng'."""

    def __init__(self, coord_sys):
        self.coord_sys = coord_sys
        super().__init__(f"Unknown coord sys: {coord_sys!r} (expected 'lat' or 'lng')")


class UnknownUnitError(GridQueryError):
    """Area or length unit token is not one the grid library understands."""

    def __init__(self, unit, allowed):
        self.unit = unit
        self.allowed = tuple(allowed)
        super().__init__(
            f"Unknown unit: {unit!r} (expected one of {', '.join(self.allowed)})"
        )
