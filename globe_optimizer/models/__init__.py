"""Data models and schemas.

Defines the data structures used throughout the pipeline:
- Geometry: Polygon / MultiPolygon / other geometry variants
- Feature / FeatureCollection: GeoJSON features with metadata
- OptimizationReport: Before/after size figures for a globe file
"""

from globe_optimizer.models.feature import Feature, FeatureCollection
from globe_optimizer.models.geometry import (
    Geometry,
    GeoJSONStructureError,
    InvalidCoordinateError,
    MultiPolygonGeometry,
    OtherGeometry,
    Point,
    PolygonGeometry,
    Ring,
    coerce_point,
    geometry_from_dict,
)
from globe_optimizer.models.report import OptimizationReport

__all__ = [
    "Feature",
    "FeatureCollection",
    "GeoJSONStructureError",
    "Geometry",
    "InvalidCoordinateError",
    "MultiPolygonGeometry",
    "OptimizationReport",
    "OtherGeometry",
    "Point",
    "PolygonGeometry",
    "Ring",
    "coerce_point",
    "geometry_from_dict",
]
