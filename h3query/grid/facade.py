"""
H3 query facade.

Exposes every grid query once per cell encoding: ``identifiers`` works with
64-bit integer cells and ``addresses`` with hexadecimal address strings. Both
are instances of the same GridQueries class, so the two forms share one
implementation of the null contract:

- a missing (None) argument gives a None result;
- boolean predicates answer False instead of None;
- tokens needed to interpret a call (coordinate system, unit) raise when
  missing or unknown.

Failures from the h3 library propagate unchanged; failures detected here
raise GridQueryError subclasses.
"""

from typing import Any, List, Optional

import h3

from ..common import (
    get_logger,
    ResolutionMismatchError,
    UnknownCoordinateSystemError,
    UnknownUnitError,
)
from ..geometry import (
    GeoPoint,
    format_point_wkt,
    format_boundary_wkt,
    format_boundary_pairs,
)
from .hierarchy import HierarchyWalker
from .polyfill import PolygonFiller
from .representation import (
    CellCodec,
    CellRepresentation,
    get_codec,
    string_to_h3,
    h3_to_string,
)

logger = get_logger("grid.facade")

LAT = "lat"
LNG = "lng"

AREA_UNITS = ("km^2", "m^2", "rads^2")
LENGTH_UNITS = ("km", "m", "rads")

# Grid distance failures that mean "no path", reported as a negative distance
_UNREACHABLE_ERRORS = (h3.H3FailedError, h3.H3PentagonError)


class GridQueries:
    """Grid queries over one cell encoding."""

    def __init__(self, codec: CellCodec):
        """
        Initialize grid queries.

        Args:
            codec: Encoding of every cell and directed edge accepted and returned
        """
        self.codec = codec
        self.api = codec.api
        self.hierarchy = HierarchyWalker(codec)
        self.filler = PolygonFiller(codec)
        self.logger = logger

    @property
    def representation(self) -> CellRepresentation:
        return self.codec.representation

    def __repr__(self) -> str:
        return f"GridQueries({self.representation.value})"

    # Indexing

    def latlng_to_cell(
        self, lat: Optional[float], lng: Optional[float], res: Optional[int]
    ) -> Any:
        """
        Index a location at a resolution.

        Args:
            lat: Latitude in degrees
            lng: Longitude in degrees
            res: Resolution, 0 to 15

        Returns:
            Cell containing the location, or None when any argument is None
        """
        if lat is None or lng is None or res is None:
            return None
        return self.api.latlng_to_cell(lat, lng, res)

    def cell_to_latlng(self, cell: Any) -> Optional[List[float]]:
        """Get the centroid of a cell as [lat, lng]."""
        if cell is None:
            return None
        lat, lng = self.api.cell_to_latlng(cell)
        return [lat, lng]

    def cell_to_latlng_wkt(self, cell: Any) -> Optional[str]:
        """Get the centroid of a cell as WKT POINT text."""
        if cell is None:
            return None
        return format_point_wkt(GeoPoint.from_latlng(self.api.cell_to_latlng(cell)))

    def _boundary(self, cell: Any) -> List[GeoPoint]:
        return [GeoPoint.from_latlng(vertex) for vertex in self.api.cell_to_boundary(cell)]

    def cell_to_boundary(self, cell: Any, sep: Optional[str]) -> Optional[List[str]]:
        """
        Get the boundary vertices of a cell as "<lat><sep><lng>" strings.

        Args:
            cell: Cell
            sep: Separator between latitude and longitude

        Returns:
            One string per vertex in boundary order, or None when either
            argument is None
        """
        if cell is None or sep is None:
            return None
        return format_boundary_pairs(self._boundary(cell), sep)

    def cell_to_boundary_sys(
        self, cell: Any, coord_sys: Optional[str]
    ) -> Optional[List[float]]:
        """
        Get one axis of the boundary vertices of a cell.

        Args:
            cell: Cell
            coord_sys: "lat" for latitudes or "lng" for longitudes

        Returns:
            One value per vertex in boundary order, or None when cell is None

        Raises:
            UnknownCoordinateSystemError: coord_sys is missing or unknown
                while cell is present
        """
        if cell is None:
            return None
        if coord_sys not in (LAT, LNG):
            self.logger.warning(
                "Rejected coordinate system selector",
                extra={"coord_sys": coord_sys, "operation": "cell_to_boundary_sys"},
            )
            raise UnknownCoordinateSystemError(coord_sys)

        boundary = self._boundary(cell)
        if coord_sys == LAT:
            return [point.lat for point in boundary]
        return [point.lng for point in boundary]

    def cell_to_boundary_wkt(self, cell: Any) -> Optional[List[str]]:
        """Get the boundary vertices of a cell as WKT POINT strings."""
        if cell is None:
            return None
        return format_boundary_wkt(self._boundary(cell))

    def get_resolution(self, cell: Any) -> Optional[int]:
        if cell is None:
            return None
        return self.api.get_resolution(cell)

    def get_base_cell_number(self, cell: Any) -> Optional[int]:
        if cell is None:
            return None
        return self.api.get_base_cell_number(cell)

    def get_icosahedron_faces(self, cell: Any) -> Optional[List[int]]:
        """Get the icosahedron faces intersected by a cell, ascending."""
        if cell is None:
            return None
        return sorted(self.api.get_icosahedron_faces(cell))

    # Conversion

    @staticmethod
    def string_to_h3(address: Optional[str]) -> Optional[int]:
        return string_to_h3(address)

    @staticmethod
    def h3_to_string(identifier: Optional[int]) -> Optional[str]:
        return h3_to_string(identifier)

    def to_address(self, cell: Any) -> Optional[str]:
        """Convert a cell in this encoding to its address string."""
        return None if cell is None else self.codec.to_address(cell)

    def to_identifier(self, cell: Any) -> Optional[int]:
        """Convert a cell in this encoding to its integer identifier."""
        return None if cell is None else self.codec.to_identifier(cell)

    # Predicates

    def is_valid_cell(self, cell: Any) -> bool:
        return self.codec.accepts(cell) and self.api.is_valid_cell(cell)

    def is_res_class_iii(self, cell: Any) -> bool:
        """Check whether a cell is at a Class III (odd) resolution."""
        return self.codec.accepts(cell) and self.api.is_res_class_III(cell)

    def is_pentagon(self, cell: Any) -> bool:
        return self.codec.accepts(cell) and self.api.is_pentagon(cell)

    # Traversal

    def grid_disk(self, origin: Any, k: Optional[int]) -> Optional[List[Any]]:
        """Get all cells within k grid steps of origin, origin included."""
        if origin is None or k is None:
            return None
        return list(self.api.grid_disk(origin, k))

    def grid_ring(self, origin: Any, k: Optional[int]) -> Optional[List[Any]]:
        """Get the hollow ring of cells exactly k grid steps from origin."""
        if origin is None or k is None:
            return None
        return list(self.api.grid_ring(origin, k))

    def grid_path_cells(self, start: Any, end: Any) -> Optional[List[Any]]:
        """Get the line of cells from start to end, both endpoints included."""
        if start is None or end is None:
            return None
        return list(self.api.grid_path_cells(start, end))

    def grid_distance(self, a: Any, b: Any) -> Optional[int]:
        """
        Get the distance in grid steps between two cells.

        Args:
            a: First cell
            b: Second cell, at the same resolution as a

        Returns:
            Number of grid steps, -1 when no path exists (too far apart or
            separated by pentagonal distortion), or None when either cell is None

        Raises:
            ResolutionMismatchError: the cells are at different resolutions
        """
        if a is None or b is None:
            return None

        res_a = self.api.get_resolution(a)
        res_b = self.api.get_resolution(b)
        if res_a != res_b:
            self.logger.warning(
                "Rejected cross-resolution grid distance",
                extra={"resolution_a": res_a, "resolution_b": res_b},
            )
            raise ResolutionMismatchError(res_a, res_b)

        try:
            return self.api.grid_distance(a, b)
        except _UNREACHABLE_ERRORS as e:
            self.logger.debug(
                f"No grid path between cells: {e}",
                extra={"operation": "grid_distance", "resolution": res_a},
            )
            return -1

    def cell_to_local_ij(self, origin: Any, cell: Any) -> Optional[List[int]]:
        """Get the local [i, j] coordinates of a cell anchored at origin."""
        if origin is None or cell is None:
            return None
        i, j = self.api.cell_to_local_ij(origin, cell)
        return [i, j]

    def local_ij_to_cell(
        self, origin: Any, i: Optional[int], j: Optional[int]
    ) -> Any:
        """Get the cell at local coordinates (i, j) anchored at origin."""
        if origin is None or i is None or j is None:
            return None
        return self.api.local_ij_to_cell(origin, i, j)

    # Hierarchy

    def cell_to_parent(self, cell: Any, parent_res: Optional[int]) -> Any:
        return self.hierarchy.parent(cell, parent_res)

    def cell_direct_parent(self, cell: Any) -> Any:
        return self.hierarchy.direct_parent(cell)

    def cell_to_parents(self, cell: Any) -> Optional[List[Any]]:
        return self.hierarchy.ancestors(cell)

    def cell_to_children(self, cell: Any, child_res: Optional[int]) -> Optional[List[Any]]:
        return self.hierarchy.children(cell, child_res)

    def cell_to_descendants(self, cell: Any, depth: Optional[int]) -> Optional[List[Any]]:
        return self.hierarchy.descendants(cell, depth)

    def cell_to_center_child(self, cell: Any, child_res: Optional[int]) -> Any:
        return self.hierarchy.center_child(cell, child_res)

    def cell_to_center_descendants(
        self, cell: Any, depth: Optional[int]
    ) -> Optional[List[Any]]:
        return self.hierarchy.center_descendants(cell, depth)

    def compact_cells(self, cells: Optional[List[Any]]) -> Optional[List[Any]]:
        return self.hierarchy.compact(cells)

    def uncompact_cells(
        self, cells: Optional[List[Any]], res: Optional[int]
    ) -> Optional[List[Any]]:
        return self.hierarchy.uncompact(cells, res)

    # Regions

    def polygon_to_cells(
        self, polygon_wkt: Optional[str], res: Optional[int]
    ) -> Optional[List[Any]]:
        """
        Get the cells whose centers fall inside POLYGON or MULTIPOLYGON WKT.

        Raises:
            InvalidWKTError: text is not a well-formed polygon or multipolygon
        """
        return self.filler.fill(polygon_wkt, res)

    def cells_to_multi_polygon(
        self, cells: Optional[List[Any]], geo_json: Optional[bool]
    ) -> Optional[str]:
        """Get the MULTIPOLYGON WKT outline of a cell set."""
        return self.filler.outline(cells, geo_json)

    # Directed edges

    def are_neighbor_cells(self, origin: Any, destination: Any) -> bool:
        """Check whether two cells share an edge."""
        if not (self.codec.accepts(origin) and self.codec.accepts(destination)):
            return False
        return self.api.are_neighbor_cells(origin, destination)

    def cells_to_directed_edge(self, origin: Any, destination: Any) -> Any:
        """Get the directed edge from origin to a neighboring destination."""
        if origin is None or destination is None:
            return None
        return self.api.cells_to_directed_edge(origin, destination)

    def is_valid_directed_edge(self, edge: Any) -> bool:
        return self.codec.accepts(edge) and self.api.is_valid_directed_edge(edge)

    def get_directed_edge_origin(self, edge: Any) -> Any:
        if edge is None:
            return None
        return self.api.get_directed_edge_origin(edge)

    def get_directed_edge_destination(self, edge: Any) -> Any:
        if edge is None:
            return None
        return self.api.get_directed_edge_destination(edge)

    def get_directed_edge_origin_destination(self, edge: Any) -> Optional[List[Any]]:
        """Get [origin, destination] of a directed edge."""
        if edge is None:
            return None
        return [
            self.api.get_directed_edge_origin(edge),
            self.api.get_directed_edge_destination(edge),
        ]

    def origin_to_directed_edges(self, cell: Any) -> Optional[List[Any]]:
        """Get every directed edge leaving a cell."""
        if cell is None:
            return None
        return list(self.api.origin_to_directed_edges(cell))

    def directed_edge_to_boundary(self, edge: Any) -> Optional[List[str]]:
        """Get the vertices of a directed edge as WKT POINT strings."""
        if edge is None:
            return None
        return format_boundary_wkt(
            GeoPoint.from_latlng(vertex)
            for vertex in self.api.directed_edge_to_boundary(edge)
        )

    # Metrics

    def _check_unit(self, unit: Optional[str], allowed) -> None:
        if unit not in allowed:
            self.logger.warning(
                "Rejected unit token", extra={"unit": unit, "allowed": list(allowed)}
            )
            raise UnknownUnitError(unit, allowed)

    def average_cell_area(self, res: Optional[int], unit: Optional[str]) -> Optional[float]:
        """
        Get the average hexagon area at a resolution.

        Args:
            res: Resolution
            unit: "km^2", "m^2" or "rads^2"

        Returns:
            Average area, or None when res is None

        Raises:
            UnknownUnitError: unit is missing or unknown
        """
        if res is None:
            return None
        self._check_unit(unit, AREA_UNITS)
        return self.api.average_hexagon_area(res, unit)

    def average_edge_length(
        self, res: Optional[int], unit: Optional[str]
    ) -> Optional[float]:
        """
        Get the average hexagon edge length at a resolution.

        Args:
            res: Resolution
            unit: "km", "m" or "rads"

        Returns:
            Average edge length, or None when res is None

        Raises:
            UnknownUnitError: unit is missing or unknown
        """
        if res is None:
            return None
        self._check_unit(unit, LENGTH_UNITS)
        return self.api.average_hexagon_edge_length(res, unit)

    def cell_area(self, cell: Any, unit: Optional[str]) -> Optional[float]:
        """Get the exact area of one cell."""
        if cell is None:
            return None
        self._check_unit(unit, AREA_UNITS)
        return self.api.cell_area(cell, unit)

    def edge_length(self, edge: Any, unit: Optional[str]) -> Optional[float]:
        """Get the exact length of one directed edge."""
        if edge is None:
            return None
        self._check_unit(unit, LENGTH_UNITS)
        return self.api.edge_length(edge, unit)

    def get_num_cells(self, res: Optional[int]) -> Optional[int]:
        """Get the number of cells in the world at a resolution."""
        if res is None:
            return None
        return self.api.get_num_cells(res)

    def get_res0_cells(self) -> List[Any]:
        """Get all 122 resolution 0 cells."""
        return list(self.api.get_res0_cells())

    def get_pentagons(self, res: Optional[int]) -> Optional[List[Any]]:
        """Get the 12 pentagon cells at a resolution."""
        if res is None:
            return None
        return list(self.api.get_pentagons(res))


# Process-wide instances; the h3 library holds no mutable state
identifiers = GridQueries(get_codec(CellRepresentation.IDENTIFIER))
addresses = GridQueries(get_codec(CellRepresentation.ADDRESS))


def get_grid_queries(representation=CellRepresentation.IDENTIFIER) -> GridQueries:
    """Get the shared facade for a representation ("identifier" or "address")."""
    if CellRepresentation(representation) is CellRepresentation.IDENTIFIER:
        return identifiers
    return addresses
