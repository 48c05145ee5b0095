"""Geometry simplification activity.

Reduces polygon outlines for decorative rendering.  The pipeline is
split into focused stages, leaf first:

- **_distance**: perpendicular distance from a point to a segment
- **_douglas_peucker**: iterative Douglas-Peucker with an explicit stack
- **_validation**: coordinate checks and zero-area detection (shapely)
- **_ring**: simplify one ring, sampled fallback, quantization
- **_geometry**: Polygon / MultiPolygon dispatch; other types pass through
"""

from __future__ import annotations

from globe_optimizer.activities.simplify._distance import perpendicular_distance
from globe_optimizer.activities.simplify._douglas_peucker import douglas_peucker
from globe_optimizer.activities.simplify._geometry import simplify_geometry, simplify_polygon
from globe_optimizer.activities.simplify._ring import (
    fallback_ring,
    normalize_ring,
    quantize,
    quantize_ring,
)
from globe_optimizer.activities.simplify._validation import is_zero_area_ring, validate_ring
from globe_optimizer.core.constants import MIN_RING_VERTICES
from globe_optimizer.models.geometry import InvalidCoordinateError

__all__ = [
    "MIN_RING_VERTICES",
    "InvalidCoordinateError",
    "douglas_peucker",
    "fallback_ring",
    "is_zero_area_ring",
    "normalize_ring",
    "perpendicular_distance",
    "quantize",
    "quantize_ring",
    "simplify_geometry",
    "simplify_polygon",
    "validate_ring",
]
