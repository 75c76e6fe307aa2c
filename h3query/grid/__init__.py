"""
H3 grid queries for the H3 query facade.

This package provides the dual-representation facade over the h3 library,
hierarchy traversal, and WKT polygon fill.
"""

from .representation import (
    CellRepresentation,
    CellCodec,
    IDENTIFIER_CODEC,
    ADDRESS_CODEC,
    get_codec,
    string_to_h3,
    h3_to_string,
)

from .hierarchy import HierarchyWalker
from .polyfill import PolygonFiller

from .facade import (
    GridQueries,
    identifiers,
    addresses,
    get_grid_queries,
    AREA_UNITS,
    LENGTH_UNITS,
)

__all__ = [
    "CellRepresentation",
    "CellCodec",
    "IDENTIFIER_CODEC",
    "ADDRESS_CODEC",
    "get_codec",
    "string_to_h3",
    "h3_to_string",
    "HierarchyWalker",
    "PolygonFiller",
    "GridQueries",
    "identifiers",
    "addresses",
    "get_grid_queries",
    "AREA_UNITS",
    "LENGTH_UNITS",
]
