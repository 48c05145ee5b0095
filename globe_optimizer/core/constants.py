"""Shared pipeline constants, single source of truth."""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Simplification defaults
# ---------------------------------------------------------------------------

DEFAULT_TOLERANCE_DEG: float = 0.5
"""Perpendicular deviation (degrees) below which a vertex is dropped."""

DEFAULT_PRECISION: int = 1
"""Decimal places kept on every output coordinate (~11 km at 1)."""

MAX_PRECISION: int = 15
"""Largest precision that still fits a float's significant digits."""

DEFAULT_MAX_WORKERS: int = 1

DEFAULT_GLOBE_PATH: str = "src/data/globe.json"

# Minimum vertices for a closed ring (3 distinct + closing = 4)
MIN_RING_VERTICES: int = 4

# ---------------------------------------------------------------------------
# GeoJSON member names (RFC 7946)
# ---------------------------------------------------------------------------

TYPE_KEY = "type"
COORDINATES_KEY = "coordinates"
FEATURES_KEY = "features"
GEOMETRY_KEY = "geometry"
PROPERTIES_KEY = "properties"
ID_KEY = "id"
CRS_KEY = "crs"

FEATURE_COLLECTION_TYPE = "FeatureCollection"
FEATURE_TYPE = "Feature"
POLYGON_TYPE = "Polygon"
MULTIPOLYGON_TYPE = "MultiPolygon"
