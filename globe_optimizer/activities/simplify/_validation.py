"""Ring validation helpers for simplification.

Responsibilities:
- Coordinate checks on in-memory rings (finite numeric pairs)
- Zero-area detection for fallback rings (shapely)
"""

from __future__ import annotations

from collections.abc import Sequence

from globe_optimizer.models.geometry import (
    InvalidCoordinateError,
    Point,
    Ring,
    coerce_point,
)


def validate_ring(ring: Sequence[object]) -> Ring:
    """Return ``ring`` as a list of ``(lon, lat)`` float tuples.

    Raises:
        InvalidCoordinateError: If any point is malformed; the error
            carries the point index.
    """
    if isinstance(ring, str | bytes) or not isinstance(ring, Sequence):
        msg = f"Ring must be a sequence of points, got {type(ring).__name__}"
        raise InvalidCoordinateError(msg)
    return [coerce_point(p, point_index=i) for i, p in enumerate(ring)]


def is_zero_area_ring(ring: Sequence[Point]) -> bool:
    """Whether ``ring`` encloses no area (collinear or repeated vertices)."""
    from shapely.geometry import Polygon

    try:
        polygon = Polygon(ring)
    except ValueError:
        # Fewer than 4 coordinates cannot form a LinearRing at all.
        return True
    return polygon.is_empty or polygon.area == 0
