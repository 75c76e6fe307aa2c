"""
Polygon fill for the H3 query facade.

Turns POLYGON and MULTIPOLYGON WKT into the H3 cells whose centers fall inside
the geometry, and turns cell sets back into MULTIPOLYGON WKT outlines.
"""

from typing import Any, List, Optional

import h3

from ..common import get_logger, TimedLogger, log_cell_operation, InvalidWKTError
from ..geometry import (
    GeoPoint,
    PolygonGeometry,
    WKTShape,
    classify_wkt,
    parse_polygon_wkt,
    format_multipolygon_wkt,
)
from .representation import CellCodec

logger = get_logger("grid.polyfill")


class PolygonFiller:
    """Fills WKT polygons with cells of one encoding."""

    def __init__(self, codec: CellCodec):
        """
        Initialize polygon filler.

        Args:
            codec: Cell encoding of the cells produced and consumed
        """
        self.codec = codec
        self.api = codec.api
        self.logger = logger

    def fill_polygon(self, polygon: PolygonGeometry, res: int) -> List[Any]:
        """
        Get the cells whose centers fall inside one polygon, holes excluded.

        Args:
            polygon: Exterior ring and hole rings
            res: Target resolution

        Returns:
            List of cells at resolution res
        """
        shape = h3.LatLngPoly(polygon.exterior_latlngs(), *polygon.hole_latlngs())
        return list(self.api.polygon_to_cells(shape, res))

    def fill(self, polygon_wkt: Optional[str], res: Optional[int]) -> Optional[List[Any]]:
        """
        Get the cells whose centers fall inside POLYGON or MULTIPOLYGON WKT.

        A MULTIPOLYGON is filled one polygon at a time and the results are
        unioned, so cells shared by touching polygons appear once and the
        order of the result is unspecified.

        Args:
            polygon_wkt: POLYGON or MULTIPOLYGON WKT text
            res: Target resolution

        Returns:
            List of cells at resolution res, or None when either argument is None

        Raises:
            InvalidWKTError: text is not a well-formed polygon or multipolygon
        """
        if polygon_wkt is None or res is None:
            return None

        try:
            shape = classify_wkt(polygon_wkt)
            polygons = parse_polygon_wkt(polygon_wkt)
        except InvalidWKTError as e:
            self.logger.warning(
                f"Rejected polygon WKT: {e}",
                extra={"operation": "polygon_to_cells", "resolution": res},
            )
            raise

        if shape is WKTShape.POLYGON:
            return self.fill_polygon(polygons[0], res)

        with TimedLogger(
            self.logger,
            "polygon_to_cells",
            polygon_count=len(polygons),
            resolution=res,
        ):
            cells = set()
            for polygon in polygons:
                cells.update(self.fill_polygon(polygon, res))

            self.logger.debug(
                f"Filled {len(polygons)} polygons",
                extra=log_cell_operation(
                    "polygon_to_cells",
                    cells_out=len(cells),
                    resolution=res,
                    polygon_count=len(polygons),
                ),
            )
            return list(cells)

    def outline(self, cells: Optional[List[Any]], geo_json: Optional[bool]) -> Optional[str]:
        """
        Get the MULTIPOLYGON WKT outline of a cell set.

        Args:
            cells: Cells of a single resolution
            geo_json: Close each ring by repeating its first vertex, as GeoJSON
                requires

        Returns:
            MULTIPOLYGON WKT text, or None when either argument is None
        """
        if cells is None or geo_json is None:
            return None
        if not cells:
            return format_multipolygon_wkt([])

        with TimedLogger(self.logger, "cells_to_multi_polygon", cell_count=len(cells)):
            multi_poly = self.api.cells_to_h3shape(cells, tight=False)

            polygons = []
            for poly in multi_poly.polys:
                rings = [poly.outer, *poly.holes]
                polygons.append(
                    [_ring_points(ring, close=bool(geo_json)) for ring in rings]
                )

            return format_multipolygon_wkt(polygons)


def _ring_points(ring, close: bool) -> List[GeoPoint]:
    points = [GeoPoint.from_latlng(vertex) for vertex in ring]
    if close and points and points[0] != points[-1]:
        points.append(points[0])
    return points
