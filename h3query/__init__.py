"""
H3 query facade.

This package answers containment, adjacency, hierarchy and boundary questions
over the H3 hexagonal grid, including:
- Common utilities (config, logging, validation errors)
- WKT parsing and serialization of polygons, boundaries and points
- Grid queries over integer identifiers and address strings alike
- Hierarchy traversal and compaction
- Polygon and multipolygon fill
"""

# Re-export key components for convenience
from .common import (
    config,
    logger,
    get_logger,
    GridQueryError,
    ResolutionMismatchError,
    InvalidWKTError,
    UnknownCoordinateSystemError,
    UnknownUnitError,
)
from .geometry import GeoPoint, PolygonGeometry, parse_polygon_wkt
from .grid import (
    CellRepresentation,
    GridQueries,
    identifiers,
    addresses,
    get_grid_queries,
    string_to_h3,
    h3_to_string,
)

__version__ = "1.0.0"

__all__ = [
    # Configuration and logging
    "config",
    "logger",
    "get_logger",
    # Errors
    "GridQueryError",
    "ResolutionMismatchError",
    "InvalidWKTError",
    "UnknownCoordinateSystemError",
    "UnknownUnitError",
    # Geometry
    "GeoPoint",
    "PolygonGeometry",
    "parse_polygon_wkt",
    # Grid queries
    "CellRepresentation",
    "GridQueries",
    "identifiers",
    "addresses",
    "get_grid_queries",
    "string_to_h3",
    "h3_to_string",
]
