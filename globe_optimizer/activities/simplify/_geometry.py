"""Per-geometry-type dispatch of ring normalization."""

from __future__ import annotations

from globe_optimizer.activities.simplify._ring import normalize_ring
from globe_optimizer.core.constants import DEFAULT_PRECISION, DEFAULT_TOLERANCE_DEG
from globe_optimizer.models.geometry import (
    Geometry,
    InvalidCoordinateError,
    MultiPolygonGeometry,
    PolygonGeometry,
)


def simplify_polygon(
    polygon: PolygonGeometry,
    *,
    tolerance: float = DEFAULT_TOLERANCE_DEG,
    precision: int = DEFAULT_PRECISION,
) -> PolygonGeometry:
    """Normalize every ring of ``polygon``, outer boundary first.

    Raises:
        InvalidCoordinateError: Carrying the ring index of the bad point.
    """
    rings = []
    for ring_index, ring in enumerate(polygon.rings):
        try:
            rings.append(normalize_ring(ring, tolerance=tolerance, precision=precision))
        except InvalidCoordinateError as exc:
            raise exc.locate(ring_index=ring_index) from exc
    return PolygonGeometry(rings=rings)


def simplify_geometry(
    geometry: Geometry | None,
    *,
    tolerance: float = DEFAULT_TOLERANCE_DEG,
    precision: int = DEFAULT_PRECISION,
) -> Geometry | None:
    """Return ``geometry`` with every polygon ring normalized.

    Polygon and MultiPolygon geometries get new ring lists in the same
    order.  Any other geometry, and ``None``, is returned unchanged.

    Raises:
        InvalidCoordinateError: Carrying the polygon and ring index of
            the bad point.
    """
    if isinstance(geometry, PolygonGeometry):
        return simplify_polygon(geometry, tolerance=tolerance, precision=precision)

    if isinstance(geometry, MultiPolygonGeometry):
        polygons = []
        for polygon_index, polygon in enumerate(geometry.polygons):
            try:
                polygons.append(
                    simplify_polygon(polygon, tolerance=tolerance, precision=precision)
                )
            except InvalidCoordinateError as exc:
                raise exc.locate(polygon_index=polygon_index) from exc
        return MultiPolygonGeometry(polygons=polygons)

    return geometry
