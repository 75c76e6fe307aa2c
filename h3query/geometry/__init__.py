"""
Geometry codec for the H3 query facade.

This package converts between WKT text and the (latitude, longitude) ring
structures exchanged with the H3 grid library.
"""

from .wkt import (
    GeoPoint,
    Ring,
    PolygonGeometry,
    MultiPolygonGeometry,
    WKTShape,
    POINT_PRECISION,
    classify_wkt,
    parse_polygon,
    parse_multipolygon,
    parse_polygon_wkt,
    format_point_wkt,
    format_point_pair,
    format_boundary_wkt,
    format_boundary_pairs,
    format_multipolygon_wkt,
)

__all__ = [
    "GeoPoint",
    "Ring",
    "PolygonGeometry",
    "MultiPolygonGeometry",
    "WKTShape",
    "POINT_PRECISION",
    "classify_wkt",
    "parse_polygon",
    "parse_multipolygon",
    "parse_polygon_wkt",
    "format_point_wkt",
    "format_point_pair",
    "format_boundary_wkt",
    "format_boundary_pairs",
    "format_multipolygon_wkt",
]
