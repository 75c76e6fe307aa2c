"""
WKT geometry codec for the H3 query facade.

Parses POLYGON and MULTIPOLYGON text into ring coordinate lists, and serializes
points, cell boundaries and multipolygons back into WKT text. WKT carries
coordinates as (longitude, latitude); every GeoPoint produced or consumed here
is (latitude, longitude), so the swap happens at this boundary and nowhere else.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

import shapely
from shapely.errors import GEOSException
from shapely.geometry import MultiPolygon, Polygon

from ..common import config, get_logger, InvalidWKTError

logger = get_logger("geometry.wkt")

POLYGON = "POLYGON"
MULTIPOLYGON = "MULTIPOLYGON"

# Decimal places of POINT and boundary pair output
POINT_PRECISION = 6


@dataclass(frozen=True)
class GeoPoint:
    """A (latitude, longitude) pair in degrees."""

    lat: float
    lng: float

    @classmethod
    def from_latlng(cls, pair: Sequence[float]) -> "GeoPoint":
        """Create a GeoPoint from an h3-style (lat, lng) tuple."""
        return cls(lat=pair[0], lng=pair[1])

    @classmethod
    def from_xy(cls, coord: Sequence[float]) -> "GeoPoint":
        """Create a GeoPoint from a shapely (x, y[, z]) coordinate."""
        return cls(lat=coord[1], lng=coord[0])

    def to_latlng(self) -> Tuple[float, float]:
        """Convert to an h3-style (lat, lng) tuple."""
        return self.lat, self.lng


Ring = Tuple[GeoPoint, ...]


@dataclass(frozen=True)
class PolygonGeometry:
    """One exterior ring plus zero or more hole rings."""

    exterior: Ring
    holes: Tuple[Ring, ...] = ()

    @classmethod
    def from_shapely(cls, polygon: Polygon) -> "PolygonGeometry":
        """Create a PolygonGeometry from a shapely Polygon, holes in source order."""
        return cls(
            exterior=_ring(polygon.exterior.coords),
            holes=tuple(_ring(interior.coords) for interior in polygon.interiors),
        )

    def exterior_latlngs(self) -> List[Tuple[float, float]]:
        return [point.to_latlng() for point in self.exterior]

    def hole_latlngs(self) -> List[List[Tuple[float, float]]]:
        return [[point.to_latlng() for point in hole] for hole in self.holes]


@dataclass(frozen=True)
class MultiPolygonGeometry:
    """Ordered sequence of polygons."""

    polygons: Tuple[PolygonGeometry, ...]

    def __len__(self) -> int:
        return len(self.polygons)

    def __iter__(self):
        return iter(self.polygons)


class WKTShape(Enum):
    """Polygon WKT shapes accepted for polygon fill."""

    POLYGON = POLYGON
    MULTIPOLYGON = MULTIPOLYGON


def _ring(coords: Iterable[Sequence[float]]) -> Ring:
    return tuple(GeoPoint.from_xy(coord) for coord in coords)


def classify_wkt(text: str) -> WKTShape:
    """
    Classify polygon WKT by its prefix and closing parentheses.

    Args:
        text: WKT text, leading and trailing whitespace ignored

    Returns:
        WKTShape of the text

    Raises:
        InvalidWKTError: text is neither POLYGON ... )) nor MULTIPOLYGON ... )))
    """
    trimmed = text.strip()
    if trimmed.startswith(POLYGON) and trimmed.endswith("))"):
        return WKTShape.POLYGON
    if trimmed.startswith(MULTIPOLYGON) and trimmed.endswith(")))"):
        return WKTShape.MULTIPOLYGON
    raise InvalidWKTError("invalid polygon WKT")


def _read(text: str, geometry_type: type):
    """
    Read WKT with shapely, closing any unclosed rings.

    Raises:
        InvalidWKTError: the reader rejects the text, or it holds another
            geometry type or an empty polygon
    """
    try:
        geometry = shapely.from_wkt(text.strip(), on_invalid="fix")
    except GEOSException as e:
        raise InvalidWKTError(f"invalid polygon WKT: {e}") from e

    if not isinstance(geometry, geometry_type):
        found = "nothing" if geometry is None else geometry.geom_type
        raise InvalidWKTError(
            f"invalid polygon WKT: expected {geometry_type.__name__}, found {found}"
        )

    parts = geometry.geoms if isinstance(geometry, MultiPolygon) else [geometry]
    if geometry.is_empty or any(part.is_empty for part in parts):
        raise InvalidWKTError("invalid polygon WKT: empty polygon")
    return geometry


def parse_polygon(text: str) -> PolygonGeometry:
    """Parse POLYGON WKT into an exterior ring and hole rings."""
    if classify_wkt(text) is not WKTShape.POLYGON:
        raise InvalidWKTError("invalid polygon WKT: expected POLYGON")
    return PolygonGeometry.from_shapely(_read(text, Polygon))


def parse_multipolygon(text: str) -> MultiPolygonGeometry:
    """Parse MULTIPOLYGON WKT into its polygons, in source order."""
    if classify_wkt(text) is not WKTShape.MULTIPOLYGON:
        raise InvalidWKTError("invalid polygon WKT: expected MULTIPOLYGON")
    multi = _read(text, MultiPolygon)
    return MultiPolygonGeometry(
        polygons=tuple(PolygonGeometry.from_shapely(part) for part in multi.geoms)
    )


def parse_polygon_wkt(text: str) -> List[PolygonGeometry]:
    """
    Parse POLYGON or MULTIPOLYGON WKT into a list of polygons.

    A POLYGON yields a single-element list. Unclosed rings come back closed.

    Args:
        text: POLYGON or MULTIPOLYGON WKT text

    Returns:
        List of PolygonGeometry in source order

    Raises:
        InvalidWKTError: unrecognized shape or malformed body
    """
    shape = classify_wkt(text)

    if shape is WKTShape.POLYGON:
        polygons = [parse_polygon(text)]
    else:
        polygons = list(parse_multipolygon(text))

    logger.debug(
        f"Parsed {shape.value} WKT",
        extra={
            "shape": shape.value,
            "polygon_count": len(polygons),
            "hole_count": sum(len(p.holes) for p in polygons),
        },
    )
    return polygons


def _precision(precision: Optional[int]) -> int:
    return POINT_PRECISION if precision is None else precision


def format_point_wkt(point: GeoPoint, precision: Optional[int] = None) -> str:
    """
    Serialize a point as WKT.

    Args:
        point: Point to serialize
        precision: Decimal places (defaults to POINT_PRECISION)

    Returns:
        "POINT (<lng> <lat>)" with fixed decimal formatting
    """
    digits = _precision(precision)
    return f"POINT ({point.lng:.{digits}f} {point.lat:.{digits}f})"


def format_point_pair(
    point: GeoPoint, sep: str, precision: Optional[int] = None
) -> str:
    """Serialize a point as "<lat><sep><lng>" with fixed decimal formatting."""
    digits = _precision(precision)
    return f"{point.lat:.{digits}f}{sep}{point.lng:.{digits}f}"


def format_boundary_wkt(
    ring: Iterable[GeoPoint], precision: Optional[int] = None
) -> List[str]:
    """Serialize each vertex of a ring as WKT POINT text, preserving order."""
    return [format_point_wkt(point, precision) for point in ring]


def format_boundary_pairs(
    ring: Iterable[GeoPoint], sep: Optional[str] = None, precision: Optional[int] = None
) -> List[str]:
    """Serialize each vertex of a ring as a separator-joined lat/lng pair."""
    separator = config.grid.boundary_separator if sep is None else sep
    return [format_point_pair(point, separator, precision) for point in ring]


def _format_ring(ring: Iterable[GeoPoint]) -> str:
    return "(" + ", ".join(f"{point.lng!r} {point.lat!r}" for point in ring) + ")"


def format_multipolygon_wkt(
    polygons: Sequence[Sequence[Sequence[GeoPoint]]],
) -> str:
    """
    Serialize nested polygon rings as MULTIPOLYGON WKT.

    Each polygon is a sequence of rings (exterior first, then holes); each ring
    is a sequence of GeoPoints. Coordinates are written longitude first using
    the shortest text that round-trips the float.

    Args:
        polygons: Polygons as rings of points

    Returns:
        "MULTIPOLYGON (((lng lat, ...), (...)), ((...)))", or
        "MULTIPOLYGON EMPTY" when there are no polygons
    """
    if not polygons:
        return f"{MULTIPOLYGON} EMPTY"

    polygon_texts = [
        "(" + ", ".join(_format_ring(ring) for ring in polygon) + ")"
        for polygon in polygons
    ]
    return f"{MULTIPOLYGON} (" + ", ".join(polygon_texts) + ")"
